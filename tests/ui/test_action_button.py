# -*- coding: utf-8 -*-
"""
Tests for ActionButton UI component.
"""
import pytest
from PyQt5.QtCore import Qt

from ui.components.action_button import ActionButton


@pytest.fixture
def action_button(qtbot):
    button = ActionButton("Next", variant="primary")
    qtbot.addWidget(button)
    return button


def test_button_creation(action_button):
    assert action_button.text() == "Next"
    assert action_button.variant == "primary"


def test_button_click(action_button, qtbot):
    """Test button click signal."""
    with qtbot.waitSignal(action_button.clicked):
        qtbot.mouseClick(action_button, Qt.LeftButton)


def test_fixed_size(qtbot):
    button = ActionButton("Cancel", variant="secondary", width=120, height=40)
    qtbot.addWidget(button)
    assert button.width() == 120
    assert button.height() == 40


def test_invalid_variant(qtbot):
    with pytest.raises(ValueError):
        ActionButton("Oops", variant="danger")
