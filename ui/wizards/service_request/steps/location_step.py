# -*- coding: utf-8 -*-
"""
Location Step - Step 4 of the Service Request Wizard.

Service address, point of contact and access instructions. State and ZIP
are checked only when entered.
"""

from PyQt5.QtWidgets import QLineEdit, QTextEdit, QHBoxLayout

from services.validation import field_rules
from ui.components.action_button import ActionButton
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.service_request.service_request_context import ServiceRequestContext


class LocationStep(BaseStep):
    """Step 4: where the work happens and how to get in."""

    def __init__(self, context: ServiceRequestContext, parent=None):
        super().__init__(context, parent)

    def get_title(self) -> str:
        return "Location & Access"

    def get_description(self) -> str:
        return "Please provide the service location and access information."

    def setup_ui(self):
        self.add_title_section()

        location_form = self.add_card("Service Location")
        self.building_name_input = QLineEdit()
        location_form.addRow("Building Name:", self.building_name_input)
        self.address_input = QLineEdit()
        location_form.addRow("Address:", self.address_input)
        self.city_input = QLineEdit()
        location_form.addRow("City:", self.city_input)
        self.state_input = QLineEdit()
        self.state_input.setPlaceholderText("2-letter code")
        self.state_input.setMaxLength(2)
        location_form.addRow("State:", self.state_input)
        self.zip_input = QLineEdit()
        self.zip_input.setPlaceholderText("XXXXX or XXXXX-XXXX")
        location_form.addRow("ZIP Code:", self.zip_input)

        contact_form = self.add_card("Point of Contact")
        self.poc_name_input = QLineEdit()
        contact_form.addRow("POC Name:", self.poc_name_input)
        self.poc_phone_input = QLineEdit()
        self.poc_phone_input.setPlaceholderText("XXX-XXX-XXXX")
        contact_form.addRow("POC Phone:", self.poc_phone_input)

        access_form = self.add_card("Access Information")
        self.access_input = QTextEdit()
        self.access_input.setPlaceholderText(
            "Enter any access instructions, gate codes, parking information, etc."
        )
        self.access_input.setMaximumHeight(100)
        access_form.addRow(self.access_input)

        buttons = QHBoxLayout()
        buttons.addStretch()
        self.fill_button = ActionButton("Fill from Customer", variant="outline", width=160)
        self.fill_button.clicked.connect(self.fill_from_customer)
        buttons.addWidget(self.fill_button)
        self.main_layout.addLayout(buttons)

    def _line_edits(self):
        return (
            self.building_name_input, self.address_input, self.city_input,
            self.state_input, self.zip_input, self.poc_name_input, self.poc_phone_input,
        )

    def populate_data(self):
        request = self.context.request
        values = (
            request.building_name, request.service_address, request.service_city,
            request.service_state, request.service_zip, request.poc_name, request.poc_phone,
        )
        for line_edit, value in zip(self._line_edits(), values):
            if value is not None:
                line_edit.setText(value)
        if request.access_information is not None:
            self.access_input.setPlainText(request.access_information)

    def fill_from_customer(self):
        """Copy the selected customer's address and phone into the form."""
        customer = self.context.request.customer
        if customer is None:
            return

        if customer.street_address:
            self.address_input.setText(customer.street_address)
        if customer.city:
            self.city_input.setText(customer.city)
        if customer.state:
            self.state_input.setText(customer.state)
        if customer.zip_code:
            self.zip_input.setText(customer.zip_code)
        self.poc_name_input.setText(customer.full_name)
        if customer.phone_number:
            self.poc_phone_input.setText(customer.phone_number)

    def validate_step(self) -> StepValidationResult:
        result = self.create_validation_result()

        state = self.state_input.text().strip()
        if state and not field_rules.is_valid_state(state):
            result.add_error("State should be 2 letters")

        zip_code = self.zip_input.text().strip()
        if zip_code and not field_rules.is_valid_zip_code(zip_code):
            result.add_error("Invalid ZIP code format")

        if not result:
            self.show_errors(result.errors)
            return result

        self.clear_errors()
        request = self.context.request
        request.building_name = self.building_name_input.text().strip() or None
        request.service_address = self.address_input.text().strip() or None
        request.service_city = self.city_input.text().strip() or None
        request.service_state = state.upper() or None
        request.service_zip = zip_code or None
        request.poc_name = self.poc_name_input.text().strip() or None
        request.poc_phone = self.poc_phone_input.text().strip() or None
        request.access_information = self.access_input.toPlainText().strip() or None
        return result

    def reset_step(self):
        for line_edit in self._line_edits():
            line_edit.clear()
        self.access_input.clear()

        request = self.context.request
        request.building_name = None
        request.service_address = None
        request.service_city = None
        request.service_state = None
        request.service_zip = None
        request.poc_name = None
        request.poc_phone = None
        request.access_information = None
