# -*- coding: utf-8 -*-
"""
Tests for AutoCompleteField UI component.
"""
import pytest

from models.customer import Customer
from ui.components.autocomplete_field import AutoCompleteField


@pytest.fixture
def customers():
    return [
        Customer(customer_id=1, customer_number="C-1001", first_name="Jane", last_name="Doe"),
        Customer(customer_id=2, customer_number="C-1002", first_name="John", last_name="Smith"),
        Customer(customer_id=3, customer_number="C-2001", first_name="Ann", last_name="Johnson"),
    ]


@pytest.fixture
def field(qtbot, customers):
    widget = AutoCompleteField(customers, display=lambda c: c.display_name)
    qtbot.addWidget(widget)
    return widget


def activate(field, text):
    """Simulate picking a suggestion from the popup."""
    field.completer().activated[str].emit(text)


class TestFiltering:

    def test_substring_match_ignores_case(self, field, customers):
        assert field.filter_items("JOHN") == [customers[1], customers[2]]

    def test_matches_customer_number(self, field, customers):
        assert field.filter_items("c-100") == [customers[0], customers[1]]

    def test_blank_returns_everything(self, field, customers):
        assert field.filter_items("  ") == customers

    def test_no_match(self, field):
        assert field.filter_items("zzz") == []

    def test_completer_is_case_insensitive_contains(self, field):
        from PyQt5.QtCore import Qt
        completer = field.completer()
        assert completer.caseSensitivity() == Qt.CaseInsensitive
        assert completer.filterMode() == Qt.MatchContains


class TestSelection:

    def test_activation_selects_and_emits(self, field, customers, qtbot):
        with qtbot.waitSignal(field.item_selected) as blocker:
            activate(field, "C-1002 - John Smith")

        assert blocker.args == [customers[1]]
        assert field.get_selected_item() is customers[1]
        assert field.text() == "C-1002 - John Smith"

    def test_editing_text_clears_selection(self, field, customers, qtbot):
        activate(field, customers[0].display_name)
        qtbot.keyClick(field, "x")
        assert field.get_selected_item() is None

    def test_set_selected_item(self, field, customers):
        field.set_selected_item(customers[2])
        assert field.get_selected_item() is customers[2]
        assert field.text() == customers[2].display_name

        field.set_selected_item(None)
        assert field.get_selected_item() is None
        assert field.text() == ""

    def test_reset(self, field, customers):
        field.set_selected_item(customers[0])
        field.reset()
        assert field.get_selected_item() is None
        assert field.text() == ""

    def test_update_items_drops_missing_selection(self, field, customers):
        field.set_selected_item(customers[0])
        field.update_items(customers[1:])

        assert field.get_selected_item() is None
        assert field.items() == customers[1:]
        assert field.completer().model().stringList() == [c.display_name for c in customers[1:]]


class TestTyping:

    def test_first_suggestion_is_current(self, field, qtbot):
        qtbot.keyClicks(field, "john")

        popup = field.completer().popup()
        assert popup.currentIndex().row() == 0
        assert popup.currentIndex().data() == "C-1002 - John Smith"
        assert field.text() == "john"
        assert field.get_selected_item() is None

    def test_current_suggestion_follows_filter(self, field, qtbot):
        qtbot.keyClicks(field, "c-2")
        assert field.completer().popup().currentIndex().data() == "C-2001 - Ann Johnson"

    def test_typing_full_display_text_selects(self, field, customers, qtbot):
        with qtbot.waitSignal(field.item_selected) as blocker:
            qtbot.keyClicks(field, "c-1002 - john smith")

        assert blocker.args == [customers[1]]
        assert field.get_selected_item() is customers[1]

    def test_partial_text_selects_nothing(self, field, qtbot):
        qtbot.keyClicks(field, "C-1002 - John Smit")
        assert field.get_selected_item() is None
