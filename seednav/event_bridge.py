# seednav/event_bridge.py
import logging
from typing import Any, Optional

from .errors import InvalidStateError
from .history.backend import HistoryBackend
from .models.route import Projects
from .models.state import state_to_route
from .navigation import Navigator

logger = logging.getLogger("seednav.bridge")


class BrowserEventBridge:
    """Feeds host-originated navigation back into a :class:`Navigator`."""

    def __init__(self, navigator: Navigator, backend: Optional[HistoryBackend] = None):
        self.navigator = navigator
        self.backend = backend or navigator.backend
        self.attached = False

    def attach(self) -> None:
        if self.attached:
            return
        self.backend.hash_changed.connect(self._on_hash_changed)
        self.backend.popstate.connect(self._on_popstate)
        self.attached = True

    def detach(self) -> None:
        if not self.attached:
            return
        self.backend.hash_changed.disconnect(self._on_hash_changed)
        self.backend.popstate.disconnect(self._on_popstate)
        self.attached = False

    def _on_hash_changed(self, url: str) -> None:
        # e.g. clicking <a href="#L42"> or <a href="#readme">
        route = self.navigator.router.parse(url)
        if not isinstance(route, Projects):
            return
        params = route.params
        if not (params.line or params.hash):
            return
        if not isinstance(self.navigator.active_route, Projects):
            logger.warning("Fragment change to %r outside of a project view", url)
            return
        if params.line:
            self.navigator.update_project_route(replace=True, line=params.line)
        else:
            self.navigator.update_project_route(replace=True, hash=params.hash)

    def _on_popstate(self, state: Any) -> None:
        if not state:
            return
        try:
            route = state_to_route(state)
        except InvalidStateError as e:
            logger.warning("Ignoring history entry with undecodable state: %s", e)
            return
        self.navigator.restore(route)
