# seednav/main_window.py
from dataclasses import fields, is_dataclass

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QLabel, QLineEdit, QMainWindow, QToolBar, QVBoxLayout, QWidget

from .address_bar import AddressBarController
from .models.route import Route
from .navigation import Navigator


def describe(value, indent: int = 0) -> str:
    """Readable multi-line dump of a route for the inspector label."""
    pad = "  " * indent
    if not is_dataclass(value):
        return f"{pad}{value!r}"
    lines = [f"{pad}{type(value).__name__} ({value.resource})"]
    for f in fields(value):
        attr = getattr(value, f.name)
        if attr is None:
            continue
        if is_dataclass(attr):
            lines.append(f"{pad}  {f.name}:")
            lines.append(describe(attr, indent + 2))
        else:
            lines.append(f"{pad}  {f.name}: {attr!r}")
    return "\n".join(lines)


class MainWindow(QMainWindow):
    def __init__(self, navigator: Navigator, parent=None):
        super().__init__(parent)
        self.navigator = navigator
        self.setWindowTitle(navigator.document_title)
        self.resize(1024, 768)

        # Address bar
        self.address_bar = QLineEdit()
        self.address_controller = AddressBarController(navigator)
        self.address_controller.bind(self.address_bar)

        toolbar = QToolBar()
        act_back = QAction("Back", self)
        act_back.triggered.connect(navigator.pop)
        toolbar.addAction(act_back)
        toolbar.addWidget(self.address_bar)
        self.addToolBar(toolbar)

        # Central widget: the host's own view if it has one, plus the route inspector
        central = QWidget()
        layout = QVBoxLayout()
        view = getattr(navigator.backend, "view", None)
        if view is not None:
            layout.addWidget(view)
        self.inspector = QLabel()
        layout.addWidget(self.inspector)
        central.setLayout(layout)
        self.setCentralWidget(central)

        navigator.route_changed.connect(self._on_route_changed)
        self._on_route_changed(navigator.active_route)

    def _on_route_changed(self, route: Route) -> None:
        self.inspector.setText(describe(route))
