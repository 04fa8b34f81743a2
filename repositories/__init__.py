# -*- coding: utf-8 -*-
"""
Service Desk Repository Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "Database",
    "CustomerRepository",
    "TechnicianRepository",
    "ServiceRequestRepository",
]
