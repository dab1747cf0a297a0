# seednav/history/stack.py
from typing import Iterator, List, Tuple

from ..models.route import Route

HISTORY_LIMIT = 10


class HistoryStack:
    """Bounded list of routes; the last one is the active route.

    The stack is never empty, so there is always exactly one active route.
    When a push exceeds ``limit`` the oldest entries are dropped first.
    """

    def __init__(self, initial: Route, limit: int = HISTORY_LIMIT):
        if limit < 1:
            raise ValueError("history limit must be at least 1")
        self.limit = limit
        self._routes: List[Route] = [initial]

    @property
    def active(self) -> Route:
        return self._routes[-1]

    @property
    def routes(self) -> Tuple[Route, ...]:
        return tuple(self._routes)

    def push(self, route: Route) -> None:
        self._routes = (self._routes + [route])[-self.limit:]

    def pop(self) -> Route:
        """Drop and return the active route, exposing the one below it."""
        if len(self._routes) == 1:
            raise IndexError("cannot pop the only route in the history")
        return self._routes.pop()

    def reset(self, route: Route) -> None:
        self._routes = [route]

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)
