# -*- coding: utf-8 -*-
"""
Scheduling Step - Step 3 of the Service Request Wizard.

Service date plus an optional start/end time window. Time errors are
shown while typing and again on validation.
"""

from PyQt5.QtWidgets import QDateEdit, QLineEdit, QLabel
from PyQt5.QtCore import QDate

from app.config import Config
from services.validation import field_rules
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.service_request.service_request_context import ServiceRequestContext


class SchedulingStep(BaseStep):
    """Step 3: when the work happens."""

    def __init__(self, context: ServiceRequestContext, parent=None):
        super().__init__(context, parent)

    def get_title(self) -> str:
        return "Scheduling"

    def get_description(self) -> str:
        return "Please select the service date and time."

    def setup_ui(self):
        self.add_title_section()
        form = self.add_card()

        self.date_input = QDateEdit()
        self.date_input.setCalendarPopup(True)
        self.date_input.setDisplayFormat("yyyy-MM-dd")
        form.addRow("Service Date: *", self.date_input)

        self.start_time_input = QLineEdit()
        self.start_time_input.setPlaceholderText("HH:MM")
        self.start_time_input.textChanged.connect(self._check_times)
        form.addRow("Start Time:", self.start_time_input)

        self.end_time_input = QLineEdit()
        self.end_time_input.setPlaceholderText("HH:MM")
        self.end_time_input.textChanged.connect(self._check_times)
        form.addRow("End Time:", self.end_time_input)

        self.time_error_label = QLabel("")
        self.time_error_label.setStyleSheet(f"color: {Config.ERROR_COLOR};")
        self.time_error_label.setVisible(False)
        form.addRow(self.time_error_label)

        self._apply_defaults()

    def _apply_defaults(self):
        self.date_input.setDate(QDate.currentDate())
        self.start_time_input.clear()
        self.end_time_input.clear()
        self._set_time_error("")

    def populate_data(self):
        request = self.context.request
        if request.service_date is not None:
            self.date_input.setDate(QDate(request.service_date))
        if request.start_time is not None:
            self.start_time_input.setText(request.start_time.strftime(Config.TIME_FORMAT))
        if request.end_time is not None:
            self.end_time_input.setText(request.end_time.strftime(Config.TIME_FORMAT))

    def validate_step(self) -> StepValidationResult:
        result = self.create_validation_result()

        time_error = self._check_times()
        if time_error:
            result.add_error(time_error)

        if not result:
            self.show_errors(result.errors)
            return result

        self.clear_errors()
        request = self.context.request
        request.service_date = self.date_input.date().toPyDate()
        request.start_time = field_rules.parse_time(self.start_time_input.text())
        request.end_time = field_rules.parse_time(self.end_time_input.text())
        return result

    def reset_step(self):
        self._apply_defaults()
        request = self.context.request
        request.service_date = None
        request.start_time = None
        request.end_time = None

    def _check_times(self) -> str:
        message = field_rules.validate_time_range(
            self.start_time_input.text(),
            self.end_time_input.text()
        )
        self._set_time_error(message)
        return message

    def _set_time_error(self, message: str):
        self.time_error_label.setText(message)
        self.time_error_label.setVisible(bool(message))

    def time_error(self) -> str:
        return self.time_error_label.text()
