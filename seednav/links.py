# seednav/links.py
from PySide6.QtCore import Qt

_DEFAULT_NAVIGATION_MODIFIERS = (
    Qt.KeyboardModifier.AltModifier
    | Qt.KeyboardModifier.ControlModifier
    | Qt.KeyboardModifier.MetaModifier
    | Qt.KeyboardModifier.ShiftModifier
)


def use_default_navigation(event) -> bool:
    """True if a link click should be left to the host (new tab, download, ...).

    ``event`` is a ``QMouseEvent`` or anything with ``button()`` and
    ``modifiers()``. Only a plain primary-button click is handled in-app.
    """
    if event.button() != Qt.MouseButton.LeftButton:
        return True
    return bool(event.modifiers() & _DEFAULT_NAVIGATION_MODIFIERS)
