# seednav/models/state.py
"""Encode routes as history entry state and back.

Payloads keep the camelCase ``{"resource": ..., "params": {...}}`` shape
already stored in browser history entries by the web interface, so
entries written before and after a reload decode the same way.
"""
from typing import Any, Dict, Optional

from ..errors import InvalidStateError, UnreachableRouteError
from .route import (
    CommitsView,
    HistoryView,
    Home,
    IssuesView,
    IssueView,
    NewView,
    NotFound,
    PatchesView,
    PatchView,
    ProjectView,
    Projects,
    ProjectsParams,
    Route,
    Seeds,
    Session,
    TreeView,
)

# ProjectsParams attribute -> state key
_PARAM_KEYS = {
    "id": "id",
    "hostname_port": "hostnamePort",
    "peer": "peer",
    "path": "path",
    "revision": "revision",
    "route": "route",
    "search": "search",
    "hash": "hash",
    "line": "line",
}


def view_to_state(view: ProjectView) -> Dict[str, Any]:
    if isinstance(view, (TreeView, HistoryView, CommitsView)):
        return {"resource": view.resource}
    if isinstance(view, IssueView):
        return {"resource": "issue", "params": {"issue": view.issue}}
    if isinstance(view, (IssuesView, PatchesView)):
        if view.view is not None:
            return {"resource": view.resource, "params": {"view": {"resource": "new"}}}
        return {"resource": view.resource}
    if isinstance(view, PatchView):
        params = {"patch": view.patch}
        if view.revision is not None:
            params["revision"] = view.revision
        return {"resource": "patch", "params": params}
    raise UnreachableRouteError(view)


def route_to_state(route: Route) -> Dict[str, Any]:
    """Return a JSON-serializable payload for ``route``."""
    if isinstance(route, Home):
        return {"resource": "home"}
    if isinstance(route, Session):
        return {
            "resource": "session",
            "params": {
                "id": route.id,
                "signature": route.signature,
                "publicKey": route.public_key,
            },
        }
    if isinstance(route, Seeds):
        return {"resource": "seeds", "params": {"hostnamePort": route.hostname_port}}
    if isinstance(route, Projects):
        params: Dict[str, Any] = {"view": view_to_state(route.params.view)}
        for attr, key in _PARAM_KEYS.items():
            value = getattr(route.params, attr)
            if value is not None:
                params[key] = value
        return {"resource": "projects", "params": params}
    if isinstance(route, NotFound):
        return {"resource": "404", "params": {"url": route.url}}
    raise UnreachableRouteError(route)


def _params(payload: Dict[str, Any]) -> Dict[str, Any]:
    params = payload.get("params")
    if params is None:
        return {}
    if not isinstance(params, dict):
        raise InvalidStateError(f"params must be an object, got {params!r}")
    return params


def _text(params: Dict[str, Any], key: str) -> Optional[str]:
    value = params.get(key)
    if value is not None and not isinstance(value, str):
        raise InvalidStateError(f"{key!r} must be a string, got {value!r}")
    return value


def _required(params: Dict[str, Any], key: str) -> str:
    value = _text(params, key)
    if value is None:
        raise InvalidStateError(f"missing {key!r}")
    return value


def _has_new_view(params: Dict[str, Any]) -> bool:
    nested = params.get("view")
    return isinstance(nested, dict) and nested.get("resource") == "new"


def state_to_view(payload: Any) -> ProjectView:
    if not isinstance(payload, dict):
        raise InvalidStateError(f"view must be an object, got {payload!r}")
    resource = payload.get("resource")
    params = _params(payload)
    if resource == "tree":
        return TreeView()
    if resource == "history":
        return HistoryView()
    if resource == "commits":
        return CommitsView()
    if resource == "issue":
        return IssueView(issue=_required(params, "issue"))
    if resource == "issues":
        return IssuesView(view=NewView() if _has_new_view(params) else None)
    if resource == "patches":
        return PatchesView(view=NewView() if _has_new_view(params) else None)
    if resource == "patch":
        return PatchView(patch=_required(params, "patch"), revision=_text(params, "revision"))
    raise InvalidStateError(f"unknown view resource {resource!r}")


def state_to_route(payload: Any) -> Route:
    """Decode a payload written by :func:`route_to_state`."""
    if not isinstance(payload, dict):
        raise InvalidStateError(f"state must be an object, got {payload!r}")
    resource = payload.get("resource")
    params = _params(payload)
    if resource == "home":
        return Home()
    if resource == "session":
        return Session(
            id=_required(params, "id"),
            signature=_text(params, "signature") or "",
            public_key=_text(params, "publicKey") or "",
        )
    if resource == "seeds":
        return Seeds(hostname_port=_required(params, "hostnamePort"))
    if resource == "projects":
        fields = {attr: _text(params, key) for attr, key in _PARAM_KEYS.items()}
        if fields["id"] is None or fields["hostname_port"] is None:
            raise InvalidStateError("project state needs 'id' and 'hostnamePort'")
        return Projects(
            params=ProjectsParams(view=state_to_view(params.get("view")), **fields)
        )
    if resource == "404":
        return NotFound(url=_required(params, "url"))
    raise InvalidStateError(f"unknown route resource {resource!r}")
