# -*- coding: utf-8 -*-
"""
Validation Strategy Pattern - Abstract interface for record validation.

Each record type (customer, service request) gets its own strategy so the
service layer can validate dictionaries without knowing the rules.
"""

from abc import ABC, abstractmethod
from typing import List, Dict, Any, Optional

from . import field_rules


class ValidationStrategy(ABC):
    """
    Abstract base class for validation strategies.
    """

    @abstractmethod
    def validate(self, record: Dict[str, Any]) -> List[str]:
        """
        Validate a record and return list of error messages.

        Args:
            record: Dictionary containing record data to validate

        Returns:
            List of error messages (empty list if valid)
        """
        pass

    def is_valid(self, record: Dict[str, Any]) -> bool:
        """Check if record passes all validations."""
        return len(self.validate(record)) == 0


class GenericRequiredFieldsValidator(ValidationStrategy):
    """
    Validates that specified fields exist and are not empty.
    """

    def __init__(self, required_fields: List[str], field_labels: Optional[Dict[str, str]] = None):
        """
        Args:
            required_fields: Field names that must be present and non-empty
            field_labels: Optional mapping of field names to human-readable labels
        """
        self.required_fields = list(required_fields)
        self.field_labels = field_labels or {}

    def label(self, field: str) -> str:
        return self.field_labels.get(field, field)

    def validate(self, record: Dict[str, Any]) -> List[str]:
        errors = []

        for field in self.required_fields:
            label = self.label(field)

            if field not in record:
                errors.append(f"{label} is required")
                continue

            value = record[field]
            if value is None or (isinstance(value, str) and not value.strip()):
                errors.append(f"{label} is required")

        return errors

    def add_required_field(self, field_name: str, label: Optional[str] = None):
        if field_name not in self.required_fields:
            self.required_fields.append(field_name)
        if label:
            self.field_labels[field_name] = label


class CustomerValidator(GenericRequiredFieldsValidator):
    """Required names and number, plus email/phone format when present."""

    def __init__(self):
        super().__init__(
            required_fields=["customer_number", "first_name", "last_name"],
            field_labels={
                "customer_number": "Customer number",
                "first_name": "First name",
                "last_name": "Last name",
            }
        )

    def validate(self, record: Dict[str, Any]) -> List[str]:
        errors = super().validate(record)

        email = record.get("email")
        if not field_rules.is_blank(email) and not field_rules.is_valid_email(email):
            errors.append("Please enter a valid email address")

        phone = record.get("phone_number")
        if not field_rules.is_blank(phone) and not field_rules.is_valid_phone(phone):
            errors.append("Please enter a valid phone number (e.g. (555) 123-4567)")

        return errors


class ServiceRequestValidator(GenericRequiredFieldsValidator):
    """
    Final check before a service request is persisted.

    Mirrors the per-step rules so a request assembled outside the wizard
    gets the same treatment.
    """

    def __init__(self):
        super().__init__(
            required_fields=["description", "service_date"],
            field_labels={
                "description": "Description",
                "service_date": "Service date",
            }
        )

    def validate(self, record: Dict[str, Any]) -> List[str]:
        errors = []

        customer_id = record.get("customer_id") or 0
        if customer_id <= 0:
            errors.append("Please select a customer")

        errors.extend(super().validate(record))

        start, end = record.get("start_time"), record.get("end_time")
        if start and end and start > end:
            errors.append(field_rules.START_AFTER_END)

        state = record.get("service_state")
        if not field_rules.is_blank(state) and not field_rules.is_valid_state(state):
            errors.append("State must be a 2-letter code")

        zip_code = record.get("service_zip")
        if not field_rules.is_blank(zip_code) and not field_rules.is_valid_zip_code(zip_code):
            errors.append("Invalid ZIP code")

        for key, label in (("service_cost", "Service cost"),
                           ("added_cost", "Added cost"),
                           ("parking_fees", "Parking fees")):
            if (record.get(key) or 0) < 0:
                errors.append(f"{label} cannot be negative")

        return errors
