# -*- coding: utf-8 -*-
"""
Service Desk Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "ServiceRequestService",
    "ValidationFactory",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "ServiceRequestService":
        from .service_request_service import ServiceRequestService
        return ServiceRequestService
    elif name == "ValidationFactory":
        from .validation.validation_factory import ValidationFactory
        return ValidationFactory
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
