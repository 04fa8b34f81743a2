# -*- coding: utf-8 -*-
"""
Customer Step - Step 1 of the Service Request Wizard.

Allows user to:
- Search customers by number or name
- Review the selected customer's details and past requests
"""

from typing import Optional

from PyQt5.QtWidgets import QLabel

from models.customer import Customer
from repositories.service_request_repository import ServiceRequestRepository
from ui.components.autocomplete_field import AutoCompleteField
from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.service_request.service_request_context import ServiceRequestContext
from utils.helpers import format_date, join_lines
from utils.logger import get_logger

logger = get_logger(__name__)

NO_HISTORY = "No previous service requests found."


def describe_customer(customer: Customer) -> str:
    """Multi-line summary shown under the customer picker."""
    lines = [
        f"Name: {customer.full_name}",
        f"Customer #: {customer.customer_number}",
    ]
    if customer.company_name:
        lines.append(f"Company: {customer.company_name}")
    if customer.phone_number:
        lines.append(f"Phone: {customer.phone_number}")
    if customer.email:
        lines.append(f"Email: {customer.email}")
    if customer.street_address:
        lines.append(f"Address: {customer.street_address}")
        lines.append(customer.city_state_zip)
    return join_lines(lines)


class CustomerStep(BaseStep):
    """Step 1: pick the customer the request is for."""

    def __init__(self, context: ServiceRequestContext, parent=None):
        super().__init__(context, parent)
        self._history_repository = ServiceRequestRepository(context.db)

    def get_title(self) -> str:
        return "Customer Information"

    def get_description(self) -> str:
        return "Please select a customer for this service request."

    def setup_ui(self):
        self.add_title_section()

        form = self.add_card()
        self.customer_input = AutoCompleteField(
            self.context.customers,
            display=lambda c: c.display_name,
            placeholder="Type a customer number or name"
        )
        self.customer_input.item_selected.connect(self._on_customer_selected)
        form.addRow("Select Customer: *", self.customer_input)

        info_form = self.add_card("Customer Information")
        self.info_label = QLabel("")
        self.info_label.setWordWrap(True)
        info_form.addRow(self.info_label)

        history_form = self.add_card("Customer History")
        self.history_label = QLabel("")
        self.history_label.setWordWrap(True)
        history_form.addRow(self.history_label)

    def populate_data(self):
        customer = self.context.request.customer
        self.customer_input.set_selected_item(self._find_listed(customer))
        self._show_customer(customer)

    def validate_step(self) -> StepValidationResult:
        result = self.create_validation_result()
        customer = self.customer_input.get_selected_item()

        if customer is None:
            result.add_error("Please select a customer")
            self.show_errors(result.errors)
            return result

        self.clear_errors()
        self.context.request.customer = customer
        self.context.request.customer_id = customer.customer_id or 0
        return result

    def reset_step(self):
        self.customer_input.reset()
        self._show_customer(None)
        self.context.request.customer = None
        self.context.request.customer_id = 0

    def _find_listed(self, customer: Optional[Customer]) -> Optional[Customer]:
        """Prefer the picker's own instance of a customer with the same id."""
        if customer is None:
            return None
        for listed in self.customer_input.items():
            if listed.customer_id == customer.customer_id:
                return listed
        return customer

    def _on_customer_selected(self, customer: Customer):
        self.clear_errors()
        self._show_customer(customer)

    def _show_customer(self, customer: Optional[Customer]):
        if customer is None:
            self.info_label.setText("")
            self.history_label.setText("")
            return

        self.info_label.setText(describe_customer(customer))
        self.history_label.setText(self._history_text(customer))

    def _history_text(self, customer: Customer) -> str:
        if customer.customer_id is None:
            return NO_HISTORY
        history = self._history_repository.get_by_customer(customer.customer_id)
        if not history:
            return NO_HISTORY
        return "\n".join(
            f"{r.ref_no or r.job_id}  {format_date(r.service_date, '%Y-%m-%d')}  "
            f"{r.service_type or ''}  [{r.status}]"
            for r in history[:5]
        )
