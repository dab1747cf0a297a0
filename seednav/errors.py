# seednav/errors.py
"""Seednav exception hierarchy.

Shared by the router, the navigator and the event bridge so every module
raises and catches the same types. Unrecognized URLs are not errors: the
router returns ``None`` and callers turn that into a ``NotFound`` route.
"""


class SeednavError(Exception):
    """Base for all seednav-specific errors."""


class ProjectNavigationError(SeednavError):
    """A project-scoped helper was used while no project route is active."""

    def __init__(self, resource: str) -> None:
        super().__init__(
            f"Don't use project specific navigation outside of project views "
            f"(active route: {resource!r})"
        )
        self.resource = resource


class UnreachableRouteError(SeednavError):
    """The serializer was handed something that is not a known route or view.

    The variant set is closed, so this always means a route was built
    by hand with the wrong type.
    """

    def __init__(self, value: object) -> None:
        super().__init__(f"Unreachable route variant: {value!r}")
        self.value = value


class InvalidStateError(SeednavError):
    """A history entry state payload could not be decoded into a route."""
