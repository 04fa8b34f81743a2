# -*- coding: utf-8 -*-
"""
Service Details Step - Step 2 of the Service Request Wizard.
"""

from PyQt5.QtWidgets import QComboBox, QTextEdit

from app.config import Vocabularies
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.service_request.service_request_context import ServiceRequestContext


class ServiceDetailsStep(BaseStep):
    """Step 2: what needs doing, and how urgently."""

    DEFAULT_PRIORITY = "Medium"

    def __init__(self, context: ServiceRequestContext, parent=None):
        super().__init__(context, parent)

    def get_title(self) -> str:
        return "Service Details"

    def get_description(self) -> str:
        return "Please provide details about the service needed."

    def setup_ui(self):
        self.add_title_section()
        form = self.add_card()

        self.service_type_combo = QComboBox()
        self.service_type_combo.addItems(Vocabularies.SERVICE_TYPES)
        form.addRow("Service Type:", self.service_type_combo)

        self.priority_combo = QComboBox()
        self.priority_combo.addItems(Vocabularies.PRIORITIES)
        form.addRow("Priority:", self.priority_combo)

        self.description_input = QTextEdit()
        self.description_input.setPlaceholderText("Describe the work to be done")
        self.description_input.setMinimumHeight(120)
        form.addRow("Description: *", self.description_input)

        self._apply_defaults()

    def _apply_defaults(self):
        self.service_type_combo.setCurrentIndex(0)
        self.priority_combo.setCurrentText(self.DEFAULT_PRIORITY)
        self.description_input.clear()

    def populate_data(self):
        request = self.context.request
        if request.service_type:
            self.service_type_combo.setCurrentText(request.service_type)
        if request.priority:
            self.priority_combo.setCurrentText(request.priority)
        if request.description is not None:
            self.description_input.setPlainText(request.description)

    def validate_step(self) -> StepValidationResult:
        result = self.create_validation_result()
        description = self.description_input.toPlainText().strip()

        if not description:
            result.add_error("Description is required")
            self.show_errors(result.errors)
            return result

        self.clear_errors()
        request = self.context.request
        request.description = description
        request.service_type = self.service_type_combo.currentText()
        request.priority = self.priority_combo.currentText()
        return result

    def reset_step(self):
        self._apply_defaults()
        request = self.context.request
        request.description = None
        request.service_type = None
        request.priority = None
