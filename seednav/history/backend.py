# seednav/history/backend.py
from typing import Any, Callable, Optional

from PySide6.QtCore import QObject, Signal


class HistoryBackend(QObject):
    """Host-side session history the navigator reads and writes.

    Implementations emit ``hash_changed`` with the new address when only
    the fragment changed, and ``popstate`` with the stored state payload
    (or ``None``) whenever the host moves back or forward on its own.
    """

    hash_changed = Signal(str)
    popstate = Signal(object)

    def location(self) -> str:
        """Current address as ``path + query + fragment``."""
        raise NotImplementedError

    def push_state(self, state: Optional[Any], title: str, url: str) -> None:
        raise NotImplementedError

    def replace_state(self, state: Optional[Any], title: str, url: str) -> None:
        raise NotImplementedError

    def back(self) -> None:
        raise NotImplementedError

    def when_ready(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once the host document can take history writes."""
        callback()
