# -*- coding: utf-8 -*-
"""
Service request repository for database operations.
"""

from typing import List, Optional
from datetime import datetime

from models.service_request import ServiceRequest
from .database import Database
from .customer_repository import CustomerRepository
from .technician_repository import TechnicianRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class ServiceRequestRepository:
    """Repository for ServiceRequest CRUD operations."""

    _COLUMNS = (
        "ref_no", "customer_id", "description", "service_type", "priority",
        "service_date", "start_time", "end_time",
        "building_name", "service_address", "service_city", "service_state", "service_zip",
        "poc_name", "poc_phone", "access_information",
        "service_cost", "added_cost", "parking_fees", "cost_notes",
        "service_notes", "status", "technician_status", "technician_notes",
        "created_at", "updated_at",
    )

    def __init__(self, db: Database):
        self.db = db
        self.customers = CustomerRepository(db)
        self.technicians = TechnicianRepository(db)

    def create(self, request: ServiceRequest) -> ServiceRequest:
        """
        Insert the request and its technician assignments in one transaction.
        """
        columns = ", ".join(self._COLUMNS)
        placeholders = ", ".join("?" for _ in self._COLUMNS)
        query = f"INSERT INTO service_requests ({columns}) VALUES ({placeholders})"

        with self.db.transaction() as conn:
            cursor = conn.execute(query, self._to_params(request))
            job_id = cursor.lastrowid
            self._save_technicians(conn, job_id, request.technician_ids)

        request.job_id = job_id
        logger.debug(f"Created service request: {request.job_id}")
        return request

    def update(self, request: ServiceRequest) -> ServiceRequest:
        """Update an existing request and replace its technician assignments."""
        updated_at = datetime.now()
        assignments = ", ".join(f"{col} = ?" for col in self._COLUMNS)
        query = f"UPDATE service_requests SET {assignments} WHERE job_id = ?"
        params = self._to_params(request, updated_at=updated_at.isoformat())

        with self.db.transaction() as conn:
            conn.execute(query, params + (request.job_id,))
            conn.execute(
                "DELETE FROM service_request_technicians WHERE job_id = ?", (request.job_id,)
            )
            self._save_technicians(conn, request.job_id, request.technician_ids)

        request.updated_at = updated_at
        logger.debug(f"Updated service request: {request.job_id}")
        return request

    def get_by_id(self, job_id: int) -> Optional[ServiceRequest]:
        """Get a service request with its customer and technicians."""
        row = self.db.fetch_one("SELECT * FROM service_requests WHERE job_id = ?", (job_id,))
        if row:
            return self._row_to_request(row)
        return None

    def get_by_customer(self, customer_id: int) -> List[ServiceRequest]:
        """Get all requests for a customer, most recent service date first."""
        rows = self.db.fetch_all(
            "SELECT * FROM service_requests WHERE customer_id = ? ORDER BY service_date DESC",
            (customer_id,)
        )
        return [self._row_to_request(row) for row in rows]

    def get_all(self, limit: int = 100, offset: int = 0) -> List[ServiceRequest]:
        """Get all requests with pagination."""
        rows = self.db.fetch_all(
            "SELECT * FROM service_requests ORDER BY service_date DESC LIMIT ? OFFSET ?",
            (limit, offset)
        )
        return [self._row_to_request(row) for row in rows]

    def count(self) -> int:
        """Count total service requests."""
        result = self.db.fetch_one("SELECT COUNT(*) as count FROM service_requests")
        return result["count"] if result else 0

    # =========================================================================
    # Helpers
    # =========================================================================

    def _to_params(self, request: ServiceRequest, **overrides) -> tuple:
        data = request.to_dict()
        data.update(overrides)
        return tuple(data[col] for col in self._COLUMNS)

    @staticmethod
    def _save_technicians(conn, job_id: int, technician_ids: List[int]):
        conn.executemany(
            "INSERT INTO service_request_technicians (job_id, technician_id) VALUES (?, ?)",
            [(job_id, tech_id) for tech_id in dict.fromkeys(technician_ids)]
        )

    def _row_to_request(self, row) -> ServiceRequest:
        """Convert database row to ServiceRequest object."""
        request = ServiceRequest.from_dict(row.to_dict())
        request.customer = self.customers.get_by_id(request.customer_id)
        request.technicians = self.technicians.get_by_job(request.job_id)
        return request
