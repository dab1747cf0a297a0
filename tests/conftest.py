"""Shared fixtures: an in-memory host history wired to a navigator."""

import pytest
from PySide6.QtCore import QCoreApplication

from seednav.event_bridge import BrowserEventBridge
from seednav.history.memory_backend import MemoryHistoryBackend
from seednav.models.route import Projects, ProjectsParams
from seednav.navigation import Navigator
from seednav.url_router import URLRouter

HOST = "host.example.org:8776"
PROJECT = "rad:abc"


@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    return QCoreApplication.instance() or QCoreApplication([])


@pytest.fixture
def backend() -> MemoryHistoryBackend:
    return MemoryHistoryBackend("/")


@pytest.fixture
def router() -> URLRouter:
    return URLRouter()


@pytest.fixture
def navigator(backend: MemoryHistoryBackend, router: URLRouter) -> Navigator:
    return Navigator(backend, router)


@pytest.fixture
def bridge(navigator: Navigator):
    bridge = BrowserEventBridge(navigator)
    bridge.attach()
    yield bridge
    bridge.detach()


@pytest.fixture
def project_route() -> Projects:
    return Projects(ProjectsParams(id=PROJECT, hostname_port=HOST))
