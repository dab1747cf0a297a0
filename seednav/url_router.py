# seednav/url_router.py
import re
import urllib.parse
from dataclasses import replace
from typing import List, NamedTuple, Optional

from .errors import UnreachableRouteError
from .models.route import (
    CommitsView,
    HistoryView,
    Home,
    IssuesView,
    IssueView,
    NewView,
    NotFound,
    PatchesView,
    PatchView,
    Projects,
    ProjectsParams,
    Route,
    Seeds,
    Session,
    TreeView,
)

LINE_PATTERN = re.compile(r"L(\d+)")


class Address(NamedTuple):
    segments: List[str]
    query: str
    fragment: str


def _fragment_params(fragment: str) -> dict:
    """Split a fragment into ``line`` (digits of ``L<digits>``) or ``hash``."""
    line = LINE_PATTERN.fullmatch(fragment)
    if line:
        return {"line": line.group(1), "hash": None}
    anchor = fragment if fragment and "." not in fragment else None
    return {"line": None, "hash": anchor}


def _sanitize_query(query: str) -> Optional[str]:
    query = query[1:] if query.startswith("?") else query
    return query or None


class URLRouter:
    """Maps addresses to routes and back.

    With ``hash_routing`` the route path lives in the fragment
    (``/#/seeds/...``) and every href handed to the host starts with ``#``.
    """

    def __init__(self, hash_routing: bool = False):
        self.hash_routing = hash_routing

    @property
    def base(self) -> str:
        return "./" if self.hash_routing else "/"

    # ---------- URL -> Route ----------
    def parse(self, text: str) -> Optional[Route]:
        """Return the route addressed by ``text`` or ``None`` if nothing matches."""
        text = text.strip()
        if not text:
            return Home()

        try:
            address = self._split(text)
        except ValueError:
            # e.g. an unbalanced IPv6 bracket in the authority
            return None
        segments = address.segments
        resource = segments.pop(0)

        if resource == "seeds":
            hostname_port = segments.pop(0) if segments else None
            if not hostname_port:
                return None
            project_id = segments.pop(0) if segments else None
            if not project_id:
                return Seeds(hostname_port=hostname_port)
            # tolerate a trailing slash after the project id
            if not segments or segments == [""]:
                return Projects(
                    ProjectsParams(
                        id=project_id,
                        hostname_port=hostname_port,
                        **_fragment_params(address.fragment),
                    )
                )
            return self._parse_project(address, hostname_port, project_id)

        if resource == "session":
            session_id = segments.pop(0) if segments else None
            if not session_id:
                return Home()
            query = urllib.parse.parse_qs(address.query, keep_blank_values=True)
            return Session(
                id=session_id,
                signature=query.get("sig", [""])[0],
                public_key=query.get("pk", [""])[0],
            )

        if resource == "":
            return Home()

        return None

    def _split(self, text: str) -> Address:
        parts = urllib.parse.urlsplit(text)
        if not self.hash_routing:
            path = parts.path[1:] if parts.path.startswith("/") else parts.path
            return Address(path.split("/"), parts.query, parts.fragment.rsplit("#", 1)[-1])

        # "#/seeds/...?q#anchor": drop the leading "/", then any extra anchors
        fragment = parts.fragment[1:] if parts.fragment.startswith("/") else parts.fragment
        route_part, *anchors = fragment.split("#")
        path, _, query = route_part.partition("?")
        return Address(path.split("/"), query or parts.query, anchors[-1] if anchors else "")

    def _parse_project(
        self, address: Address, hostname_port: str, project_id: str
    ) -> Optional[Projects]:
        segments = address.segments
        content = segments.pop(0) if segments else None
        peer = None
        if content == "remotes":
            peer = (segments.pop(0) if segments else None) or None
            content = segments.pop(0) if segments else None

        params = ProjectsParams(id=project_id, hostname_port=hostname_port, peer=peer)
        search = _sanitize_query(address.query)

        if not content or content == "tree":
            route = "/".join(segments) or None
            return Projects(replace(params, route=route, **_fragment_params(address.fragment)))

        if content == "history":
            return Projects(replace(params, view=HistoryView(), route="/".join(segments) or None))
        if content == "commits":
            return Projects(replace(params, view=CommitsView(), route="/".join(segments) or None))

        if content == "issues":
            issue_or_action = segments.pop(0) if segments else None
            if issue_or_action == "new":
                return Projects(replace(params, view=IssuesView(view=NewView()), search=search))
            if issue_or_action:
                return Projects(replace(params, view=IssueView(issue=issue_or_action)))
            return Projects(replace(params, view=IssuesView(), search=search))

        if content == "patches":
            patch = segments.pop(0) if segments else None
            revision = (segments.pop(0) if segments else None) or None
            if patch:
                view = PatchView(patch=patch, revision=revision)
                return Projects(replace(params, view=view, search=search))
            return Projects(replace(params, view=PatchesView(), search=search))

        return None

    # ---------- Route -> URL ----------
    def to_text(self, route: Route) -> str:
        """Return the canonical path for ``route``."""
        if isinstance(route, Home):
            return "/"
        if isinstance(route, Session):
            query = urllib.parse.urlencode({"sig": route.signature, "pk": route.public_key})
            return f"/session/{route.id}?{query}"
        if isinstance(route, Seeds):
            return f"/seeds/{route.hostname_port}"
        if isinstance(route, Projects):
            return self._project_to_text(route.params)
        if isinstance(route, NotFound):
            return route.url
        raise UnreachableRouteError(route)

    def to_href(self, route: Route) -> str:
        """Like :meth:`to_text` but ready to hand to the host's history."""
        path = self.to_text(route)
        return "#" + path if self.hash_routing else path

    def _project_to_text(self, params: ProjectsParams) -> str:
        prefix = f"/seeds/{params.hostname_port}/{params.id}"
        if params.peer:
            prefix += f"/remotes/{params.peer}"

        view = params.view
        suffix = ""
        if params.route:
            suffix = f"/{params.route}"
        else:
            if isinstance(view, (TreeView, HistoryView, CommitsView)) and params.revision:
                suffix = f"/{params.revision}"
            if params.path and params.path != "/":
                suffix += f"/{params.path}"

        if params.search:
            suffix += f"?{params.search}"
        if params.line:
            suffix += f"#L{params.line}"
        elif params.hash:
            suffix += f"#{params.hash}"

        if isinstance(view, TreeView):
            return f"{prefix}/tree{suffix}" if suffix else prefix
        if isinstance(view, HistoryView):
            return f"{prefix}/history{suffix}"
        if isinstance(view, CommitsView):
            return f"{prefix}/commits{suffix}"
        if isinstance(view, IssuesView):
            if view.view is not None:
                return f"{prefix}/issues/new{suffix}"
            return f"{prefix}/issues{suffix}"
        if isinstance(view, IssueView):
            return f"{prefix}/issues/{view.issue}{suffix}"
        if isinstance(view, PatchesView):
            return f"{prefix}/patches{suffix}"
        if isinstance(view, PatchView):
            if view.revision:
                return f"{prefix}/patches/{view.patch}/{view.revision}{suffix}"
            return f"{prefix}/patches/{view.patch}{suffix}"
        raise UnreachableRouteError(view)


_path_router = URLRouter()


def path_to_route(text: str) -> Optional[Route]:
    return _path_router.parse(text)


def route_to_path(route: Route) -> str:
    return _path_router.to_text(route)
