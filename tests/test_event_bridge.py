"""Tests for seednav.event_bridge — host events flowing back into the navigator."""

import logging

from seednav.event_bridge import BrowserEventBridge
from seednav.models.route import Home, Projects, ProjectsParams, Seeds
from seednav.models.state import route_to_state

HOST = "host.example.org:8776"
BASE = f"/seeds/{HOST}/rad:abc"


class TestHashChange:
    def test_line_fragment(self, navigator, backend, bridge, project_route) -> None:
        navigator.replace(project_route)
        backend.navigate("#L42")
        params = navigator.active_route.params
        assert params.line == "42"
        assert params.hash is None
        assert len(navigator.history) == 1

    def test_anchor_fragment(self, navigator, backend, bridge, project_route) -> None:
        navigator.replace(project_route)
        backend.navigate("#intro")
        params = navigator.active_route.params
        assert params.hash == "intro"
        assert params.line is None

    def test_anchor_replaces_previous_line(self, navigator, backend, bridge, project_route) -> None:
        navigator.replace(Projects(ProjectsParams(id="rad:abc", hostname_port=HOST, line="3")))
        backend.navigate("#intro")
        assert navigator.active_route.params.line is None

    def test_host_entry_gets_state(self, navigator, backend, bridge, project_route) -> None:
        navigator.replace(project_route)
        backend.navigate("#L42")
        assert backend.current.state == route_to_state(navigator.active_route)
        assert backend.location() == BASE + "/tree#L42"

    def test_ignored_outside_project_views(self, navigator, backend, bridge, caplog) -> None:
        navigator.replace(Home())
        with caplog.at_level(logging.WARNING, logger="seednav.bridge"):
            backend.hash_changed.emit(BASE + "#L1")
        assert navigator.active_route == Home()
        assert "outside of a project view" in caplog.text

    def test_non_project_address_is_ignored(self, navigator, backend, bridge, project_route) -> None:
        navigator.replace(project_route)
        backend.hash_changed.emit("/unknown#L4")
        assert navigator.active_route == project_route


class TestPopstate:
    def test_back_restores_stored_route(self, navigator, backend, bridge) -> None:
        navigator.push(Seeds(hostname_port="a:1"))
        navigator.push(Seeds(hostname_port="b:2"))
        backend.back()
        assert navigator.history == (Seeds(hostname_port="a:1"),)

    def test_forward(self, navigator, backend, bridge) -> None:
        navigator.push(Seeds(hostname_port="a:1"))
        navigator.push(Seeds(hostname_port="b:2"))
        backend.back()
        backend.forward()
        assert navigator.active_route == Seeds(hostname_port="b:2")

    def test_empty_state_is_ignored(self, navigator, backend, bridge) -> None:
        backend.navigate("#top")
        navigator.push(Seeds(hostname_port="a:1"))
        backend.go(-2)
        assert navigator.active_route == Seeds(hostname_port="a:1")

    def test_undecodable_state_is_logged(self, navigator, backend, bridge, caplog) -> None:
        navigator.push(Seeds(hostname_port="a:1"))
        with caplog.at_level(logging.WARNING, logger="seednav.bridge"):
            backend.popstate.emit({"resource": "bogus"})
        assert navigator.active_route == Seeds(hostname_port="a:1")
        assert "undecodable" in caplog.text


class TestAttach:
    def test_detach_stops_events(self, navigator, backend) -> None:
        bridge = BrowserEventBridge(navigator)
        bridge.attach()
        bridge.detach()
        navigator.push(Seeds(hostname_port="a:1"))
        navigator.push(Seeds(hostname_port="b:2"))
        backend.back()
        assert len(navigator.history) == 3

    def test_attach_is_idempotent(self, navigator, backend) -> None:
        bridge = BrowserEventBridge(navigator)
        bridge.attach()
        bridge.attach()
        seen = []
        navigator.route_changed.connect(seen.append)
        navigator.push(Seeds(hostname_port="a:1"))
        navigator.push(Seeds(hostname_port="b:2"))
        backend.back()
        assert seen == [
            Seeds(hostname_port="a:1"),
            Seeds(hostname_port="b:2"),
            Seeds(hostname_port="a:1"),
        ]
        bridge.detach()
