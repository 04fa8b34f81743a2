# -*- coding: utf-8 -*-
"""Service request wizard package."""

from .service_request_context import ServiceRequestContext
from .service_request_wizard import ServiceRequestWizard

__all__ = ['ServiceRequestContext', 'ServiceRequestWizard']
