# seednav/settings.py
import copy
import json
import os
from pathlib import Path
from typing import Any, Dict

DEFAULTS = {
    "routing": {"hash_routing": False},
    "history": {"engine": "memory", "limit": 10},  # engine: "memory" | "webengine"
    "document_title": "Radicle Interface",
    "log_level": "WARNING",
}

_TRUTHY = {"1", "true", "yes", "on"}


def _config_path() -> Path:
    override = os.environ.get("SEEDNAV_CONFIG_DIR")
    base = Path(override) if override else Path.home() / ".config" / "seednav"
    base.mkdir(parents=True, exist_ok=True)
    return base / "config.json"


def _merge(defaults: Dict[str, Any], data: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(defaults)
    for key, value in data.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_settings() -> Dict[str, Any]:
    p = _config_path()
    if not p.exists():
        p.write_text(json.dumps(DEFAULTS, indent=2))
        settings = copy.deepcopy(DEFAULTS)
    else:
        settings = _merge(DEFAULTS, json.loads(p.read_text()))

    env = os.environ.get("SEEDNAV_HASH_ROUTING")
    if env is not None:
        settings["routing"]["hash_routing"] = env.strip().lower() in _TRUTHY
    return settings


def save_settings(data: Dict[str, Any]) -> None:
    p = _config_path()
    p.write_text(json.dumps(data, indent=2))
