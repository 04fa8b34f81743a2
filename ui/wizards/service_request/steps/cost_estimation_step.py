# -*- coding: utf-8 -*-
"""
Cost Estimation Step - Step 6 of the Service Request Wizard.

Blank amounts count as zero; anything else must be a number.
"""

from typing import Optional

from PyQt5.QtWidgets import QLineEdit, QLabel, QTextEdit

from services.validation import field_rules
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.service_request.service_request_context import ServiceRequestContext
from utils.helpers import format_amount, format_currency

ZERO = "0.00"


class CostEstimationStep(BaseStep):
    """Step 6: estimated costs, with a live total."""

    def __init__(self, context: ServiceRequestContext, parent=None):
        super().__init__(context, parent)

    def get_title(self) -> str:
        return "Cost Estimation"

    def get_description(self) -> str:
        return "Please provide cost estimates for this service request."

    def setup_ui(self):
        self.add_title_section()
        form = self.add_card()

        self.service_cost_input = self._amount_input()
        form.addRow("Service Cost:", self.service_cost_input)
        self.added_cost_input = self._amount_input()
        form.addRow("Added Cost:", self.added_cost_input)
        self.parking_fees_input = self._amount_input()
        form.addRow("Parking Fees:", self.parking_fees_input)

        self.total_label = QLabel(format_currency(0))
        self.total_label.setStyleSheet("font-weight: bold;")
        form.addRow("Total Cost:", self.total_label)

        notes_form = self.add_card("Cost Notes")
        self.cost_notes_input = QTextEdit()
        self.cost_notes_input.setPlaceholderText("Enter any notes about the cost estimate.")
        self.cost_notes_input.setMaximumHeight(100)
        notes_form.addRow(self.cost_notes_input)

    def _amount_input(self) -> QLineEdit:
        line_edit = QLineEdit(ZERO)
        line_edit.setPlaceholderText(ZERO)
        line_edit.textChanged.connect(self._update_total)
        return line_edit

    def _amount_inputs(self):
        return (
            ("Service cost", self.service_cost_input),
            ("Added cost", self.added_cost_input),
            ("Parking fees", self.parking_fees_input),
        )

    def populate_data(self):
        request = self.context.request
        self.service_cost_input.setText(format_amount(request.service_cost))
        self.added_cost_input.setText(format_amount(request.added_cost))
        self.parking_fees_input.setText(format_amount(request.parking_fees))
        if request.cost_notes is not None:
            self.cost_notes_input.setPlainText(request.cost_notes)
        self._update_total()

    @staticmethod
    def _parse(text: str) -> Optional[float]:
        try:
            return field_rules.parse_amount(text)
        except ValueError:
            return None

    def _update_total(self):
        """Sum the valid amounts; invalid ones count as zero here."""
        total = sum(self._parse(line_edit.text()) or 0.0 for _, line_edit in self._amount_inputs())
        self.total_label.setText(format_currency(total))

    def total_text(self) -> str:
        return self.total_label.text()

    def validate_step(self) -> StepValidationResult:
        result = self.create_validation_result()
        amounts = {}

        for label, line_edit in self._amount_inputs():
            value = self._parse(line_edit.text())
            if value is None:
                result.add_error(f"{label}: invalid number format")
            elif value < 0:
                result.add_error(f"{label} cannot be negative")
            else:
                amounts[label] = value

        if not result:
            self.show_errors(result.errors)
            return result

        self.clear_errors()
        request = self.context.request
        request.service_cost = amounts["Service cost"]
        request.added_cost = amounts["Added cost"]
        request.parking_fees = amounts["Parking fees"]
        request.cost_notes = self.cost_notes_input.toPlainText().strip() or None
        return result

    def reset_step(self):
        for _, line_edit in self._amount_inputs():
            line_edit.setText(ZERO)
        self.cost_notes_input.clear()

        request = self.context.request
        request.service_cost = 0.0
        request.added_cost = 0.0
        request.parking_fees = 0.0
        request.cost_notes = None
