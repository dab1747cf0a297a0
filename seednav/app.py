# seednav/app.py
import logging
import sys

from PySide6.QtWidgets import QApplication

from .event_bridge import BrowserEventBridge
from .history.factory import get_history_backend
from .main_window import MainWindow
from .navigation import Navigator
from .settings import load_settings
from .url_router import URLRouter


class SeednavApp(QApplication):
    def __init__(self, argv):
        super().__init__(argv)
        self.setApplicationName("Seednav")


def build_navigator(settings: dict, url: str = "/") -> Navigator:
    backend = get_history_backend(settings["history"]["engine"], url)
    router = URLRouter(hash_routing=settings["routing"]["hash_routing"])
    return Navigator(
        backend,
        router,
        limit=settings["history"]["limit"],
        document_title=settings["document_title"],
    )


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings["log_level"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings["history"]["engine"] == "webengine":
        # QtWebEngine has to be loaded before the QApplication exists
        import PySide6.QtWebEngineWidgets  # noqa: F401
    app = SeednavApp(sys.argv)
    url = sys.argv[1] if len(sys.argv) > 1 else "/"
    navigator = build_navigator(settings, url)
    bridge = BrowserEventBridge(navigator)
    bridge.attach()
    navigator.backend.when_ready(navigator.initialize)

    win = MainWindow(navigator)
    win.show()
    code = app.exec()
    bridge.detach()
    sys.exit(code)


if __name__ == "__main__":
    main()
