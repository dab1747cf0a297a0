# seednav/history/memory_backend.py
import logging
import urllib.parse
from dataclasses import dataclass
from typing import Any, List, Optional

from .backend import HistoryBackend

logger = logging.getLogger("seednav.history")


@dataclass
class HistoryEntry:
    url: str
    state: Optional[Any] = None
    title: str = ""


def _same_document(a: str, b: str) -> bool:
    return urllib.parse.urldefrag(a).url == urllib.parse.urldefrag(b).url


class MemoryHistoryBackend(HistoryBackend):
    """In-process session history behaving like a browser tab's.

    Signals are emitted synchronously, so anything connected to
    ``popstate`` runs before ``back()`` returns.
    """

    def __init__(self, url: str = "/", parent=None):
        super().__init__(parent)
        self.entries: List[HistoryEntry] = [HistoryEntry(url=url)]
        self.index = 0
        self.title = ""

    @property
    def current(self) -> HistoryEntry:
        return self.entries[self.index]

    def location(self) -> str:
        return self.current.url

    def push_state(self, state: Optional[Any], title: str, url: str) -> None:
        # pushing discards any forward entries
        del self.entries[self.index + 1:]
        self.entries.append(HistoryEntry(url=self._resolve(url), state=state, title=title))
        self.index += 1
        self.title = title

    def replace_state(self, state: Optional[Any], title: str, url: str) -> None:
        self.entries[self.index] = HistoryEntry(url=self._resolve(url), state=state, title=title)
        self.title = title

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)

    def go(self, delta: int) -> None:
        target = self.index + delta
        if delta == 0 or not 0 <= target < len(self.entries):
            logger.debug("Ignoring history.go(%d) at index %d", delta, self.index)
            return
        previous = self.current.url
        self.index = target
        self.popstate.emit(self.current.state)
        if _same_document(previous, self.current.url) and previous != self.current.url:
            self.hash_changed.emit(self.current.url)

    def navigate(self, url: str) -> None:
        """Follow a link or a typed address the way the host would.

        Every navigation adds an entry without state. Same-document
        (fragment) navigations also emit ``hash_changed``; any other address
        is recorded like a full page load and emits nothing, so the caller
        re-reads it with ``Navigator.initialize``.
        """
        previous = self.current.url
        resolved = self._resolve(url)
        del self.entries[self.index + 1:]
        self.entries.append(HistoryEntry(url=resolved, title=self.title))
        self.index += 1
        if _same_document(previous, resolved) and previous != resolved:
            self.hash_changed.emit(resolved)

    def _resolve(self, url: str) -> str:
        return urllib.parse.urljoin(self.current.url, url)
