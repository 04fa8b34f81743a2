# -*- coding: utf-8 -*-
"""
Service Request Context - State shared by the service request wizard steps.

Extends WizardContext with:
- The ServiceRequest being built
- Customer and technician lists for the pickers
"""

from typing import Optional, Dict, List, Any, TYPE_CHECKING

from ui.wizards.framework import WizardContext
from models.customer import Customer
from models.technician import Technician
from models.service_request import ServiceRequest
from repositories.customer_repository import CustomerRepository
from repositories.technician_repository import TechnicianRepository
from utils.logger import get_logger

if TYPE_CHECKING:
    from repositories.database import Database

logger = get_logger(__name__)


class ServiceRequestContext(WizardContext):
    """Context for the service request wizard."""

    REFERENCE_PREFIX = "SR"

    def __init__(self, db: Optional['Database'] = None, customer: Optional[Customer] = None):
        """
        Args:
            db: Open database used to load customers and technicians;
                without one the pickers start empty
            customer: Customer to preselect on the first step
        """
        super().__init__()
        self.db = db

        self.request = ServiceRequest(ref_no=self.reference_number)
        if customer is not None:
            self.request.customer = customer
            self.request.customer_id = customer.customer_id or 0

        self.customers: List[Customer] = []
        self.technicians: List[Technician] = []
        if db is not None:
            self.load_lookups()

    def load_lookups(self):
        """Load the customer and technician lists once per session."""
        self.customers = CustomerRepository(self.db).get_all()
        self.technicians = TechnicianRepository(self.db).get_all()
        logger.debug(
            f"Loaded {len(self.customers)} customers and {len(self.technicians)} technicians"
        )

    def restart(self):
        """Start a fresh request after the steps have cleared their fields."""
        self.reference_number = self._generate_reference_number()
        self.request.job_id = None
        self.request.ref_no = self.reference_number
        self.request.status = "Pending"
        self.status = "draft"

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["request"] = self.request.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any], db: Optional['Database'] = None) -> 'ServiceRequestContext':
        """Restore a context; pass db to reload the pickers."""
        context = cls(db)
        cls._restore_base_fields(context, data)
        if data.get("request"):
            context.request = ServiceRequest.from_dict(data["request"])
        return context
