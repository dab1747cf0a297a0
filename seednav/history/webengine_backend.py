# seednav/history/webengine_backend.py
import json
import logging
from collections import deque
from typing import Any, Callable, Deque, Optional

from PySide6.QtCore import QUrl

from .backend import HistoryBackend

logger = logging.getLogger("seednav.history")

# NOTE: QWebEngineView has no popstate/hashchange signals of its own, so
# both are derived from urlChanged plus a read of history.state.


class WebEngineHistoryBackend(HistoryBackend):
    def __init__(self, url: Optional[str] = None, view=None, parent=None):
        super().__init__(parent)
        if view is None:
            from PySide6.QtWebEngineWidgets import QWebEngineView
            view = QWebEngineView()
        self.view = view
        self._loading = bool(url)
        if url:
            self.view.setUrl(QUrl(url))
        self._last_url = self.view.url()
        # hrefs written by us whose urlChanged has not arrived yet, oldest first
        self._pending: Deque[str] = deque()
        self.view.urlChanged.connect(self._on_url_changed)
        self.view.loadFinished.connect(self._on_load_finished)

    def location(self) -> str:
        return self._relative(self.view.url())

    def push_state(self, state: Optional[Any], title: str, url: str) -> None:
        self._write("pushState", state, title, url)

    def replace_state(self, state: Optional[Any], title: str, url: str) -> None:
        self._write("replaceState", state, title, url)

    def back(self) -> None:
        self.view.back()

    def when_ready(self, callback: Callable[[], None]) -> None:
        if not self._loading:
            callback()
            return

        def on_loaded(ok: bool) -> None:
            self.view.loadFinished.disconnect(on_loaded)
            callback()

        self.view.loadFinished.connect(on_loaded)

    def _write(self, method: str, state: Optional[Any], title: str, url: str) -> None:
        # writing the address the view already shows produces no urlChanged
        already_there = not self._pending and self.location().endswith(url)
        if not already_there and (not self._pending or self._pending[-1] != url):
            self._pending.append(url)
        script = (
            f"history.{method}({json.dumps(state)}, {json.dumps(title)}, {json.dumps(url)});"
            f"document.title = {json.dumps(title)};"
        )
        self.view.page().runJavaScript(script)

    def _relative(self, qurl: QUrl) -> str:
        return qurl.toString(
            QUrl.FormattingOptions(
                QUrl.UrlFormattingOption.RemoveScheme | QUrl.UrlFormattingOption.RemoveAuthority
            )
        )

    def _consume_pending(self, location: str) -> bool:
        """Drop pending writes up to the one ``location`` belongs to."""
        for i, href in enumerate(self._pending):
            if location.endswith(href):
                for _ in range(i + 1):
                    self._pending.popleft()
                return True
        return False

    def _on_load_finished(self, ok: bool) -> None:
        self._loading = False
        self._pending.clear()
        self._last_url = self.view.url()

    def _on_url_changed(self, qurl: QUrl) -> None:
        previous, self._last_url = self._last_url, qurl
        location = self._relative(qurl)
        if self._consume_pending(location):
            return

        self.view.page().runJavaScript("history.state", 0, self.popstate.emit)
        if previous.adjusted(QUrl.FormattingOptions(QUrl.UrlFormattingOption.RemoveFragment)) == qurl.adjusted(
            QUrl.FormattingOptions(QUrl.UrlFormattingOption.RemoveFragment)
        ) and previous.fragment() != qurl.fragment():
            logger.debug("Fragment changed to %r", qurl.fragment())
            self.hash_changed.emit(location)
