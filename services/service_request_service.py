# -*- coding: utf-8 -*-
"""
Service Request Service - Business Logic Layer
==============================================
Validation and persistence of service requests, plus the read-only summary
shown on the wizard's review page.
"""
from typing import Dict, Any, List, Optional, Tuple
from datetime import datetime

from models.service_request import ServiceRequest
from repositories.service_request_repository import ServiceRequestRepository
from services.exceptions import ValidationException
from services.validation.validation_factory import ValidationFactory
from utils.helpers import format_date, format_time, format_currency, city_state_zip, join_lines
from utils.logger import get_logger

logger = get_logger(__name__)


class ServiceRequestService:
    """
    Service layer for ServiceRequest business logic.

    Responsibilities:
    - Validate a request before persistence
    - Stamp timestamps and default status
    - Translate persistence failures into result dictionaries
    """

    def __init__(self, repository: ServiceRequestRepository,
                 validation_factory: Optional[ValidationFactory] = None):
        """
        Args:
            repository: ServiceRequestRepository instance for data access
            validation_factory: Factory providing the 'service_request' validator
        """
        self.repository = repository
        self.validation_factory = validation_factory or ValidationFactory()

    def validate(self, request: ServiceRequest):
        """
        Raises:
            ValidationException: if the request is not ready to be saved
        """
        errors = self.validation_factory.validate(request.to_dict(), 'service_request')
        if errors:
            raise ValidationException("Validation failed", errors=errors, context="service_request")

    def create_service_request(self, request: ServiceRequest) -> Dict[str, Any]:
        """
        Validate and insert a new service request.

        Returns:
            Dictionary with:
            - success: bool
            - service_request: ServiceRequest if successful
            - error: str if failed
            - validation_errors: List[str] if validation failed
        """
        logger.info(f"Creating service request for customer {request.customer_id}")

        try:
            self.validate(request)
        except ValidationException as e:
            logger.warning(f"Service request validation failed: {e.errors}")
            return self._failure('Validation failed', e.errors)

        # Restored if the insert fails
        stamped = (request.status, request.created_at, request.updated_at)
        if not request.status:
            request.status = "Pending"
        request.created_at = datetime.now()
        request.updated_at = request.created_at

        try:
            created = self.repository.create(request)
        except Exception as e:
            request.status, request.created_at, request.updated_at = stamped
            logger.error(f"Failed to persist service request: {e}", exc_info=True)
            return self._failure(f'Database error: {e}')

        logger.info(f"Service request created: {created.job_id} ({created.ref_no})")
        return {
            'success': True,
            'service_request': created,
            'error': None,
            'validation_errors': []
        }

    def update_service_request(self, request: ServiceRequest) -> Dict[str, Any]:
        """
        Validate and update an existing service request.

        Returns:
            Result dictionary similar to create_service_request
        """
        logger.info(f"Updating service request {request.job_id}")

        if request.job_id is None or self.repository.get_by_id(request.job_id) is None:
            return self._failure(f'Service request not found: {request.job_id}')

        try:
            self.validate(request)
        except ValidationException as e:
            logger.warning(f"Service request validation failed: {e.errors}")
            return self._failure('Validation failed', e.errors)

        try:
            updated = self.repository.update(request)
        except Exception as e:
            logger.error(f"Failed to update service request: {e}", exc_info=True)
            return self._failure(f'Database error: {e}')

        logger.info(f"Service request updated: {updated.job_id}")
        return {
            'success': True,
            'service_request': updated,
            'error': None,
            'validation_errors': []
        }

    def save_service_request(self, request: ServiceRequest) -> Dict[str, Any]:
        """Create or update depending on whether the request has been saved before."""
        if request.job_id is None:
            return self.create_service_request(request)
        return self.update_service_request(request)

    def get_service_request(self, job_id: int) -> Optional[ServiceRequest]:
        return self.repository.get_by_id(job_id)

    def get_requests_for_customer(self, customer_id: int) -> List[ServiceRequest]:
        return self.repository.get_by_customer(customer_id)

    @staticmethod
    def _failure(error: str, validation_errors: Optional[List[str]] = None) -> Dict[str, Any]:
        return {
            'success': False,
            'service_request': None,
            'error': error,
            'validation_errors': validation_errors or []
        }


def build_summary(request: ServiceRequest) -> List[Tuple[str, str]]:
    """
    Build the (title, content) sections shown on the review page.

    Optional sections (location, point of contact, technicians, notes) are
    left out when they have nothing to show.
    """
    sections = []

    if request.customer is not None:
        customer = request.customer
        sections.append(("Customer", f"{customer.full_name} ({customer.customer_number})"))

    sections.append(("Description", request.description or ""))

    date_time = format_date(request.service_date)
    if request.start_time is not None:
        date_time += f" at {format_time(request.start_time)}"
        if request.end_time is not None:
            date_time += f" - {format_time(request.end_time)}"
    sections.append(("Date & Time", date_time))

    location = join_lines([
        request.building_name,
        request.service_address,
        city_state_zip(request.service_city, request.service_state, request.service_zip),
    ])
    if location:
        sections.append(("Location", location))

    if request.poc_name:
        poc = request.poc_name
        if request.poc_phone:
            poc += f" ({request.poc_phone})"
        sections.append(("Point of Contact", poc))

    if request.technicians:
        sections.append((
            "Assigned Technicians",
            "\n".join(t.display_name for t in request.technicians)
        ))

    sections.append(("Cost Estimate", join_lines([
        f"Service Cost: {format_currency(request.service_cost)}",
        f"Added Cost: {format_currency(request.added_cost)}",
        f"Parking Fees: {format_currency(request.parking_fees)}",
        f"Total: {format_currency(request.total_cost)}",
    ])))

    sections.append(("Status", request.status or ""))

    notes = request.combined_notes()
    if notes:
        sections.append(("Notes", notes))

    return sections
