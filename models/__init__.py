# -*- coding: utf-8 -*-
"""
Service Desk Data Models
"""

from .customer import Customer
from .technician import Technician
from .service_request import ServiceRequest

__all__ = [
    "Customer",
    "Technician",
    "ServiceRequest",
]
