# -*- coding: utf-8 -*-
"""Validation services package."""

from .validation_strategy import (
    ValidationStrategy,
    GenericRequiredFieldsValidator,
    CustomerValidator,
    ServiceRequestValidator,
)
from .validation_factory import ValidationFactory

__all__ = [
    'ValidationStrategy',
    'GenericRequiredFieldsValidator',
    'CustomerValidator',
    'ServiceRequestValidator',
    'ValidationFactory',
]
