# seednav/history/factory.py
from .backend import HistoryBackend


def get_history_backend(engine: str | None = None, url: str = "/") -> HistoryBackend:
    """Return the history host for ``engine`` ("memory" or "webengine")."""
    engine = (engine or "memory").lower()
    if engine == "memory":
        from .memory_backend import MemoryHistoryBackend
        return MemoryHistoryBackend(url)
    if engine == "webengine":
        from .webengine_backend import WebEngineHistoryBackend
        return WebEngineHistoryBackend(url)
    raise ValueError(f"Unknown history engine: {engine}")
