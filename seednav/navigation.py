# seednav/navigation.py
import dataclasses
import logging
from typing import Optional, Tuple

from PySide6.QtCore import QObject, Signal

from .errors import ProjectNavigationError
from .history.backend import HistoryBackend
from .history.stack import HISTORY_LIMIT, HistoryStack
from .models.route import Home, NotFound, Projects, Route
from .models.state import route_to_state
from .url_router import URLRouter

logger = logging.getLogger("seednav.navigation")

# Only respected by some hosts (Safari uses the pushState title).
DOCUMENT_TITLE = "Radicle Interface"


class Navigator(QObject):
    """
    Owns the bounded route history and keeps the host's history in step.

    All navigation goes through this object: the history stack and the
    host history are only ever written together, here. ``route_changed``
    fires with the new active route after every change.
    """

    route_changed = Signal(object)

    def __init__(
        self,
        backend: HistoryBackend,
        router: Optional[URLRouter] = None,
        limit: int = HISTORY_LIMIT,
        document_title: str = DOCUMENT_TITLE,
        parent=None,
    ):
        super().__init__(parent)
        self.backend = backend
        self.router = router or URLRouter()
        self.document_title = document_title
        self._stack = HistoryStack(Home(), limit)

    @property
    def active_route(self) -> Route:
        return self._stack.active

    @property
    def history(self) -> Tuple[Route, ...]:
        return self._stack.routes

    # ---------- Stack operations ----------
    def push(self, route: Route) -> None:
        href = self.router.to_href(route)
        self._stack.push(route)
        logger.debug("push %s (%d in history)", href, len(self._stack))
        self.backend.push_state(route_to_state(route), self.document_title, href)
        self.route_changed.emit(route)

    def pop(self) -> None:
        """Go back one step.

        The top entry is dropped right away; the host's own popstate then
        lands in :meth:`restore` and settles the stack on whatever entry
        the host actually moved to.
        """
        if len(self._stack) > 1:
            self._stack.pop()
            logger.debug("pop, active is now %r", self.active_route)
            self.route_changed.emit(self.active_route)
        self.backend.back()

    def replace(self, route: Route) -> None:
        href = self.router.to_href(route)
        self._stack.reset(route)
        logger.debug("replace with %s", href)
        self.backend.replace_state(route_to_state(route), self.document_title, href)
        self.route_changed.emit(route)

    def restore(self, route: Route) -> None:
        """Resynchronize with a host entry the host already shows.

        Unlike :meth:`replace` this does not write the host's history.
        Restoring the route that is already the only entry is a no-op.
        """
        if self._stack.routes == (route,):
            return
        self._stack.reset(route)
        logger.debug("restore %r", route)
        self.route_changed.emit(route)

    def initialize(self) -> None:
        url = self.backend.location()
        route = self.router.parse(url)
        if route is None:
            logger.info("No route matches %r", url)
            route = NotFound(url=url)
        self.replace(route)

    # ---------- Project helpers ----------
    def create_project_route(self, **changes) -> Projects:
        """Return the active project route with ``changes`` applied.

        ``line`` and ``hash`` are cleared unless ``changes`` sets them.
        """
        active = self.active_route
        if not isinstance(active, Projects):
            raise ProjectNavigationError(active.resource)
        params = dataclasses.replace(active.params, **{"line": None, "hash": None, **changes})
        return Projects(params)

    def update_project_route(self, *, replace: bool = False, **changes) -> None:
        route = self.create_project_route(**changes)
        if replace:
            self.replace(route)
        else:
            self.push(route)

    def project_link_href(self, **changes) -> str:
        return self.router.to_href(self.create_project_route(**changes))
