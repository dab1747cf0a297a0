# seednav/models/route.py
from dataclasses import dataclass
from typing import ClassVar, Optional, Union


# ---------- Project views ----------
@dataclass(frozen=True)
class NewView:
    resource: ClassVar[str] = "new"


@dataclass(frozen=True)
class TreeView:
    resource: ClassVar[str] = "tree"


@dataclass(frozen=True)
class HistoryView:
    resource: ClassVar[str] = "history"


@dataclass(frozen=True)
class CommitsView:
    resource: ClassVar[str] = "commits"


@dataclass(frozen=True)
class IssueView:
    issue: str
    resource: ClassVar[str] = "issue"


@dataclass(frozen=True)
class IssuesView:
    view: Optional[NewView] = None  # set => /issues/new
    resource: ClassVar[str] = "issues"


@dataclass(frozen=True)
class PatchesView:
    view: Optional[NewView] = None
    resource: ClassVar[str] = "patches"


@dataclass(frozen=True)
class PatchView:
    patch: str
    revision: Optional[str] = None
    resource: ClassVar[str] = "patch"


ProjectView = Union[
    TreeView, HistoryView, CommitsView, IssueView, IssuesView, PatchesView, PatchView
]


@dataclass(frozen=True)
class ProjectsParams:
    """Everything needed to address a view inside one project.

    Optional fields are ``None`` when the URL does not carry them; an
    empty string is a real value and is never used to mean "unset".
    ``line`` holds the digits of an ``L<digits>`` fragment, ``hash`` any
    other fragment, ``search`` the query string without its ``?`` and
    ``route`` the leftover path segments joined with ``/``.
    """

    id: str
    hostname_port: str
    view: ProjectView = TreeView()
    peer: Optional[str] = None
    path: Optional[str] = None
    revision: Optional[str] = None
    route: Optional[str] = None
    search: Optional[str] = None
    hash: Optional[str] = None
    line: Optional[str] = None


# ---------- Routes ----------
@dataclass(frozen=True)
class Home:
    resource: ClassVar[str] = "home"


@dataclass(frozen=True)
class Session:
    id: str
    signature: str = ""
    public_key: str = ""
    resource: ClassVar[str] = "session"


@dataclass(frozen=True)
class Seeds:
    hostname_port: str
    resource: ClassVar[str] = "seeds"


@dataclass(frozen=True)
class Projects:
    params: ProjectsParams
    resource: ClassVar[str] = "projects"


@dataclass(frozen=True)
class NotFound:
    url: str  # original address, only used for display
    resource: ClassVar[str] = "404"


Route = Union[Home, Session, Seeds, Projects, NotFound]
