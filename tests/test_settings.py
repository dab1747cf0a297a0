"""Tests for seednav.settings — the JSON config file."""

import json

import pytest

from seednav.settings import DEFAULTS, load_settings, save_settings


@pytest.fixture(autouse=True)
def config_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("SEEDNAV_CONFIG_DIR", str(tmp_path))
    monkeypatch.delenv("SEEDNAV_HASH_ROUTING", raising=False)
    return tmp_path


class TestSettings:
    def test_first_run_writes_defaults(self, config_dir) -> None:
        assert load_settings() == DEFAULTS
        assert json.loads((config_dir / "config.json").read_text()) == DEFAULTS

    def test_user_values_merge_over_defaults(self, config_dir) -> None:
        (config_dir / "config.json").write_text(json.dumps({"history": {"limit": 3}}))
        settings = load_settings()
        assert settings["history"] == {"engine": "memory", "limit": 3}
        assert settings["routing"] == {"hash_routing": False}

    def test_save_roundtrip(self) -> None:
        data = load_settings()
        data["document_title"] = "Seeds"
        save_settings(data)
        assert load_settings()["document_title"] == "Seeds"

    @pytest.mark.parametrize("value,expected", [("1", True), ("yes", True), ("0", False)])
    def test_env_overrides_hash_routing(self, monkeypatch, value, expected) -> None:
        monkeypatch.setenv("SEEDNAV_HASH_ROUTING", value)
        assert load_settings()["routing"]["hash_routing"] is expected

    def test_defaults_are_not_mutated(self, monkeypatch) -> None:
        monkeypatch.setenv("SEEDNAV_HASH_ROUTING", "1")
        load_settings()
        assert DEFAULTS["routing"]["hash_routing"] is False
