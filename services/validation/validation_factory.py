# -*- coding: utf-8 -*-
"""
Validation Factory - Creates appropriate validators for different record types.
"""

from typing import Dict, Optional, List
from .validation_strategy import (
    ValidationStrategy,
    CustomerValidator,
    ServiceRequestValidator,
)


class ValidationFactory:
    """
    Registry of validation strategies keyed by record type.
    """

    def __init__(self):
        """Initialize the validation factory."""
        self._validators: Dict[str, ValidationStrategy] = {}
        self._register_default_validators()

    def _register_default_validators(self):
        """Register built-in validators."""
        self.register_validator('customer', CustomerValidator())
        self.register_validator('service_request', ServiceRequestValidator())

    def register_validator(self, record_type: str, validator: ValidationStrategy):
        """
        Register a validation strategy for a specific record type.

        Args:
            record_type: Type identifier (e.g., 'customer', 'service_request')
            validator: ValidationStrategy instance
        """
        self._validators[record_type.lower()] = validator

    def get_validator(self, record_type: str) -> Optional[ValidationStrategy]:
        """Get a registered validator by record type, or None."""
        return self._validators.get(record_type.lower())

    def validate(self, record: Dict, record_type: str) -> List[str]:
        """
        Validate a record using the appropriate validator.

        Returns:
            List of error messages (empty if valid)
        """
        validator = self.get_validator(record_type)
        if not validator:
            return [f"No validator registered for record type: {record_type}"]

        return validator.validate(record)

    def is_valid(self, record: Dict, record_type: str) -> bool:
        return len(self.validate(record, record_type)) == 0

    def get_registered_types(self) -> List[str]:
        return list(self._validators.keys())
