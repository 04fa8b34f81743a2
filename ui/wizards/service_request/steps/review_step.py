# -*- coding: utf-8 -*-
"""
Review Step - Step 7 of the Service Request Wizard.

Shows a read-only summary of the request. Validating this step saves the
request through the callback the wizard supplies.
"""

from typing import Callable, List, Optional, Tuple

from PyQt5.QtWidgets import QCheckBox, QFrame, QLabel, QVBoxLayout, QTextEdit

from app.config import Config
from models.service_request import ServiceRequest
from services.service_request_service import build_summary
from ui.wizards.framework import BaseStep
from ui.wizards.service_request.service_request_context import ServiceRequestContext


class ReviewStep(BaseStep):
    """Step 7: confirm and save."""

    def __init__(
        self,
        context: ServiceRequestContext,
        on_save: Optional[Callable[[ServiceRequest], bool]] = None,
        parent=None
    ):
        """
        Args:
            context: Wizard context
            on_save: Persists the request; returns True on success
            parent: Parent widget
        """
        super().__init__(context, parent)
        self.on_save = on_save
        self._sections: List[Tuple[str, str]] = []

    def get_title(self) -> str:
        return "Review & Confirmation"

    def get_description(self) -> str:
        return "Please review the service request details before confirming."

    def setup_ui(self):
        self.add_title_section()

        self.summary_frame = QFrame()
        self.summary_frame.setObjectName("summaryFrame")
        self.summary_frame.setStyleSheet(f"""
            QFrame#summaryFrame {{
                background-color: {Config.HEADER_BG};
                border: 1px solid {Config.BORDER_COLOR};
                border-radius: 8px;
            }}
        """)
        self.summary_layout = QVBoxLayout(self.summary_frame)
        self.summary_layout.setContentsMargins(16, 12, 16, 12)
        self.summary_layout.setSpacing(6)
        self.main_layout.addWidget(self.summary_frame)

        notes_form = self.add_card("Service Notes")
        self.notes_input = QTextEdit()
        self.notes_input.setPlaceholderText("Anything else the technicians should know")
        self.notes_input.setMaximumHeight(80)
        notes_form.addRow(self.notes_input)

        self.send_confirmation_check = QCheckBox("Send confirmation email to customer")
        self.send_confirmation_check.setChecked(True)
        self.main_layout.addWidget(self.send_confirmation_check)

    def populate_data(self):
        request = self.context.request
        if request.service_notes is not None:
            self.notes_input.setPlainText(request.service_notes)
        self.refresh_summary()

    def refresh_summary(self):
        """Rebuild the summary sections from the request."""
        while self.summary_layout.count():
            item = self.summary_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        self._sections = build_summary(self.context.request)
        for title, content in self._sections:
            title_label = QLabel(f"{title}:")
            title_label.setStyleSheet("font-weight: bold;")
            self.summary_layout.addWidget(title_label)

            content_label = QLabel(content)
            content_label.setWordWrap(True)
            content_label.setContentsMargins(10, 0, 0, 6)
            self.summary_layout.addWidget(content_label)

    def summary_sections(self) -> List[Tuple[str, str]]:
        return list(self._sections)

    def send_confirmation(self) -> bool:
        return self.send_confirmation_check.isChecked()

    def validate_step(self) -> bool:
        request = self.context.request
        previous_notes = request.service_notes
        request.service_notes = self.notes_input.toPlainText().strip() or None
        if self.on_save is None:
            return True

        saved = bool(self.on_save(request))
        if not saved:
            request.service_notes = previous_notes
        return saved

    def reset_step(self):
        self.notes_input.clear()
        self.send_confirmation_check.setChecked(True)
        self.context.request.service_notes = None
        self._sections = []
