# -*- coding: utf-8 -*-
"""
Service Request Wizard.

Multi-step wizard for creating a service request for a customer.

Steps:
1. Customer - Search and select the customer
2. Service Details - Type, priority and description
3. Scheduling - Date and optional time window
4. Location & Access - Where, who to contact, how to get in
5. Technician Assignment - Optional technicians
6. Cost Estimation - Costs and notes
7. Review & Confirmation - Summary; validating this step saves the request
"""

from typing import Callable, List, Optional

from PyQt5.QtCore import pyqtSignal

from models.customer import Customer
from models.service_request import ServiceRequest
from repositories.database import Database
from repositories.service_request_repository import ServiceRequestRepository
from services.service_request_service import ServiceRequestService
from ui.error_handler import ErrorHandler
from ui.wizards.framework import BaseWizard, WizardStep
from ui.wizards.service_request.service_request_context import ServiceRequestContext
from ui.wizards.service_request.steps import (
    CustomerStep,
    ServiceDetailsStep,
    SchedulingStep,
    LocationStep,
    TechnicianStep,
    CostEstimationStep,
    ReviewStep
)
from utils.logger import get_logger

logger = get_logger(__name__)


class ServiceRequestWizard(BaseWizard):
    """
    Service Request Wizard.

    Saves through ServiceRequestService unless an on_save callback is given.
    """

    request_saved = pyqtSignal(object)  # ServiceRequest

    def __init__(
        self,
        db: Database,
        customer: Optional[Customer] = None,
        on_save: Optional[Callable[[ServiceRequest], bool]] = None,
        show_dialogs: bool = True,
        parent=None
    ):
        """
        Args:
            db: Open, initialized database
            customer: Customer to preselect on the first step
            on_save: Replaces the default save; returns True on success
            show_dialogs: Show message boxes on save success/failure
            parent: Parent widget
        """
        self.db = db
        self._initial_customer = customer
        self._on_save = on_save
        self.show_dialogs = show_dialogs
        self.service = ServiceRequestService(ServiceRequestRepository(db))
        self.last_result: Optional[dict] = None

        super().__init__(parent)

        self.engine.wizard_reset.connect(self.context.restart)

    def create_context(self) -> ServiceRequestContext:
        return ServiceRequestContext(self.db, customer=self._initial_customer)

    def create_steps(self) -> List[WizardStep]:
        return [
            CustomerStep(self.context),
            ServiceDetailsStep(self.context),
            SchedulingStep(self.context),
            LocationStep(self.context),
            TechnicianStep(self.context),
            CostEstimationStep(self.context),
            ReviewStep(self.context, on_save=self.save_request),
        ]

    def get_wizard_title(self) -> str:
        return "New Service Request"

    def get_submit_button_text(self) -> str:
        return "Finish"

    @property
    def request(self) -> ServiceRequest:
        return self.context.request

    def save_request(self, request: ServiceRequest) -> bool:
        """Persist the request; called when the review step validates."""
        if self._on_save is not None:
            return bool(self._on_save(request))

        result = self.service.save_service_request(request)
        self.last_result = result

        if not result['success']:
            logger.warning(f"Service request not saved: {result['error']}")
            if self.show_dialogs:
                message = result['error']
                if result['validation_errors']:
                    message = "\n".join(f"• {e}" for e in result['validation_errors'])
                ErrorHandler.show_error(self, message, "Service request not saved")
            return False

        self.request_saved.emit(result['service_request'])
        return True

    def on_submit(self) -> bool:
        if self.show_dialogs:
            ErrorHandler.show_success(
                self,
                f"Service request {self.request.ref_no} has been created.",
                "Service Request Created"
            )
        return True

    def on_cancel(self) -> bool:
        if not self.show_dialogs:
            return True
        return ErrorHandler.confirm(
            self, "Discard this service request?", "Cancel Service Request"
        )
