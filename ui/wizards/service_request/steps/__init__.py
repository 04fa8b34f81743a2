# -*- coding: utf-8 -*-
"""
Service Request Steps Package.

Contains individual steps for the service request wizard:
- Step 1: Customer
- Step 2: Service Details
- Step 3: Scheduling
- Step 4: Location & Access
- Step 5: Technician Assignment
- Step 6: Cost Estimation
- Step 7: Review & Confirmation
"""

from .customer_step import CustomerStep
from .service_details_step import ServiceDetailsStep
from .scheduling_step import SchedulingStep
from .location_step import LocationStep
from .technician_step import TechnicianStep
from .cost_estimation_step import CostEstimationStep
from .review_step import ReviewStep

__all__ = [
    'CustomerStep',
    'ServiceDetailsStep',
    'SchedulingStep',
    'LocationStep',
    'TechnicianStep',
    'CostEstimationStep',
    'ReviewStep'
]
