# seednav/address_bar.py
import logging

from PySide6.QtWidgets import QLineEdit

from .models.route import NotFound, Route
from .navigation import Navigator

logger = logging.getLogger("seednav.address_bar")


class AddressBarController:
    def __init__(self, navigator: Navigator):
        self.navigator = navigator
        self.line_edit: QLineEdit | None = None

    def bind(self, line_edit: QLineEdit) -> None:
        self.line_edit = line_edit
        self.line_edit.returnPressed.connect(self._on_submit)
        self.navigator.route_changed.connect(self.set_route)
        self.set_route(self.navigator.active_route)

    def set_route(self, route: Route) -> None:
        if self.line_edit:
            self.line_edit.setText(self.navigator.router.to_href(route))

    def _on_submit(self) -> None:
        if not self.line_edit:
            return
        text = self.line_edit.text()
        route = self.navigator.router.parse(text)
        if route is None:
            logger.info("Address %r did not match any route", text)
            route = NotFound(url=text)
        self.navigator.push(route)
