"""Tests for seednav.links — deciding who handles a link click."""

import pytest
from PySide6.QtCore import Qt

from seednav.links import use_default_navigation


class FakeClick:
    def __init__(self, button=Qt.MouseButton.LeftButton, modifiers=Qt.KeyboardModifier.NoModifier):
        self._button = button
        self._modifiers = modifiers

    def button(self):
        return self._button

    def modifiers(self):
        return self._modifiers


class TestUseDefaultNavigation:
    def test_plain_primary_click_is_intercepted(self) -> None:
        assert use_default_navigation(FakeClick()) is False

    @pytest.mark.parametrize("button", [Qt.MouseButton.MiddleButton, Qt.MouseButton.RightButton])
    def test_other_buttons(self, button) -> None:
        assert use_default_navigation(FakeClick(button=button)) is True

    @pytest.mark.parametrize(
        "modifier",
        [
            Qt.KeyboardModifier.AltModifier,
            Qt.KeyboardModifier.ControlModifier,
            Qt.KeyboardModifier.MetaModifier,
            Qt.KeyboardModifier.ShiftModifier,
        ],
    )
    def test_modifier_keys(self, modifier) -> None:
        assert use_default_navigation(FakeClick(modifiers=modifier)) is True

    def test_keypad_modifier_alone_is_intercepted(self) -> None:
        assert use_default_navigation(FakeClick(modifiers=Qt.KeyboardModifier.KeypadModifier)) is False
