# -*- coding: utf-8 -*-
"""
Wizard Footer Component - Navigation buttons for wizards.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QLabel
from PyQt5.QtCore import pyqtSignal

from app.config import Config
from ui.components.action_button import ActionButton


class WizardFooter(QWidget):
    """
    Wizard footer with Cancel on the left and Previous/Next on the right.

    Signals:
        previous_clicked: Emitted when Previous button is clicked
        next_clicked: Emitted when Next button is clicked
        cancel_clicked: Emitted when Cancel button is clicked

    Usage:
        footer = WizardFooter(next_text="Next")
        footer.next_clicked.connect(self._on_next)
    """

    # Signals
    previous_clicked = pyqtSignal()
    next_clicked = pyqtSignal()
    cancel_clicked = pyqtSignal()

    def __init__(
        self,
        show_cancel: bool = True,
        next_text: str = "Next",
        previous_text: str = "Previous",
        parent=None
    ):
        """
        Args:
            show_cancel: Whether to show cancel button
            next_text: Text for next button
            previous_text: Text for previous button
            parent: Parent widget
        """
        super().__init__(parent)
        self.show_cancel = show_cancel
        self._setup_ui(next_text, previous_text)

    def _setup_ui(self, next_text: str, previous_text: str):
        self.setStyleSheet(f"""
            QWidget {{
                background-color: {Config.HEADER_BG};
            }}
        """)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)

        if self.show_cancel:
            self.btn_cancel = ActionButton("Cancel", variant="secondary")
            self.btn_cancel.clicked.connect(self.cancel_clicked.emit)
            layout.addWidget(self.btn_cancel)

        # Hints such as "Please correct the errors above"
        self.info_label = QLabel("")
        self.info_label.setStyleSheet(f"background: transparent; color: {Config.ERROR_COLOR};")
        layout.addWidget(self.info_label)

        layout.addStretch()

        self.btn_previous = ActionButton(previous_text, variant="secondary")
        self.btn_previous.clicked.connect(self.previous_clicked.emit)
        layout.addWidget(self.btn_previous)

        self.btn_next = ActionButton(next_text, variant="primary")
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def set_next_enabled(self, enabled: bool):
        self.btn_next.setEnabled(enabled)

    def set_previous_enabled(self, enabled: bool):
        self.btn_previous.setEnabled(enabled)

    def set_info_text(self, text: str):
        self.info_label.setText(text)

    def info_text(self) -> str:
        return self.info_label.text()

    def set_next_text(self, text: str):
        self.btn_next.setText(text)
