# -*- coding: utf-8 -*-
"""
AutoComplete Field - Line edit with a filtered suggestion popup.

Suggestions are matched case-insensitively anywhere in the display text.
The popup (QCompleter) handles Up/Down/Enter/Escape itself; its first
suggestion is kept current so Enter picks it. Typing an item's full display
text selects that item.
"""

from typing import Any, Callable, List, Optional

from PyQt5.QtWidgets import QLineEdit, QCompleter
from PyQt5.QtCore import Qt, QItemSelectionModel, QStringListModel, pyqtSignal

from app.config import Config


class AutoCompleteField(QLineEdit):
    """
    Text field that picks one item out of a list.

    Signals:
        item_selected(object): Emitted with the chosen item

    Usage:
        field = AutoCompleteField(customers, lambda c: c.display_name)
        field.item_selected.connect(self._on_customer_selected)
    """

    item_selected = pyqtSignal(object)

    def __init__(
        self,
        items: Optional[List[Any]] = None,
        display: Callable[[Any], str] = str,
        placeholder: str = "",
        parent=None
    ):
        """
        Args:
            items: Items to choose from
            display: Maps an item to its display text
            placeholder: Placeholder text
            parent: Parent widget
        """
        super().__init__(parent)
        self._display = display
        self._items: List[Any] = []
        self._selected_item: Any = None
        self._setting_text = False

        self.setPlaceholderText(placeholder)

        self._model = QStringListModel(self)
        self._completer = QCompleter(self._model, self)
        self._completer.setCaseSensitivity(Qt.CaseInsensitive)
        self._completer.setFilterMode(Qt.MatchContains)
        self._completer.setCompletionMode(QCompleter.PopupCompletion)
        self._completer.setMaxVisibleItems(Config.AUTOCOMPLETE_MAX_VISIBLE)
        self.setCompleter(self._completer)

        self._completer.activated[str].connect(self._on_activated)
        self.textEdited.connect(self._on_text_edited)

        self.update_items(items or [])

    def update_items(self, items: List[Any]):
        """Replace the item list. The current selection is kept only if still present."""
        self._items = list(items)
        self._model.setStringList([self._display(item) for item in self._items])
        if self._selected_item is not None and self._selected_item not in self._items:
            self._clear_selection()

    def items(self) -> List[Any]:
        return list(self._items)

    def filter_items(self, text: str) -> List[Any]:
        """Items whose display text contains text, ignoring case."""
        needle = (text or "").strip().lower()
        if not needle:
            return list(self._items)
        return [item for item in self._items if needle in self._display(item).lower()]

    def get_selected_item(self) -> Any:
        return self._selected_item

    def set_selected_item(self, item: Any):
        """Select an item (or None to clear) without emitting item_selected."""
        if item is None:
            self._clear_selection()
            return
        self._selected_item = item
        self._set_text(self._display(item))

    def reset(self):
        self._clear_selection()

    def _clear_selection(self):
        self._selected_item = None
        self._set_text("")

    def _set_text(self, text: str):
        self._setting_text = True
        try:
            self.setText(text)
        finally:
            self._setting_text = False

    def _on_text_edited(self, text: str):
        # Typing after a pick invalidates it
        if self._setting_text:
            return
        if self._selected_item is not None and text != self._display(self._selected_item):
            self._selected_item = None
        if self._selected_item is None:
            typed = self._exact_match(text)
            if typed is not None:
                self._selected_item = typed
                self.item_selected.emit(typed)
        self._make_first_current(text)

    def _exact_match(self, text: str) -> Any:
        needle = (text or "").strip().lower()
        if not needle:
            return None
        for item in self._items:
            if self._display(item).lower() == needle:
                return item
        return None

    def _make_first_current(self, text: str):
        # NoUpdate: selecting the row would copy it into the line edit
        self._completer.setCompletionPrefix(text)
        model = self._completer.completionModel()
        if model.rowCount() == 0:
            return
        self._completer.popup().selectionModel().setCurrentIndex(
            model.index(0, 0), QItemSelectionModel.NoUpdate
        )

    def _on_activated(self, text: str):
        for item in self._items:
            if self._display(item) == text:
                self._selected_item = item
                self._set_text(text)
                self.item_selected.emit(item)
                return
