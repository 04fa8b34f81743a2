# -*- coding: utf-8 -*-
"""
Technician repository for database operations.
"""

from typing import List, Optional

from models.technician import Technician
from .database import Database
from utils.logger import get_logger

logger = get_logger(__name__)


class TechnicianRepository:
    """Repository for Technician CRUD operations."""

    def __init__(self, db: Database):
        self.db = db

    def create(self, technician: Technician) -> Technician:
        """Create a new technician record and assign its id."""
        query = """
            INSERT INTO technicians (
                first_name, last_name, legal_name, email,
                credentials, credential_level, coverage_area,
                pay_type, account_info,
                address, city, state, zip_code, notes,
                created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        params = (
            technician.first_name, technician.last_name, technician.legal_name, technician.email,
            technician.credentials, technician.credential_level, technician.coverage_area,
            technician.pay_type, technician.account_info,
            technician.address, technician.city, technician.state, technician.zip_code,
            technician.notes,
            technician.created_at.isoformat() if technician.created_at else None,
            technician.updated_at.isoformat() if technician.updated_at else None,
        )
        technician.technician_id = self.db.insert(query, params)
        logger.debug(f"Created technician: {technician.technician_id}")
        return technician

    def get_by_id(self, technician_id: int) -> Optional[Technician]:
        """Get technician by ID."""
        row = self.db.fetch_one(
            "SELECT * FROM technicians WHERE technician_id = ?", (technician_id,)
        )
        if row:
            return Technician.from_dict(row.to_dict())
        return None

    def get_all(self) -> List[Technician]:
        """Get all technicians ordered by name."""
        rows = self.db.fetch_all("SELECT * FROM technicians ORDER BY last_name, first_name")
        return [Technician.from_dict(row.to_dict()) for row in rows]

    def get_by_job(self, job_id: int) -> List[Technician]:
        """Get technicians assigned to a service request."""
        query = """
            SELECT t.* FROM technicians t
            INNER JOIN service_request_technicians srt ON t.technician_id = srt.technician_id
            WHERE srt.job_id = ?
            ORDER BY t.last_name, t.first_name
        """
        rows = self.db.fetch_all(query, (job_id,))
        return [Technician.from_dict(row.to_dict()) for row in rows]

    def count(self) -> int:
        """Count total technicians."""
        result = self.db.fetch_one("SELECT COUNT(*) as count FROM technicians")
        return result["count"] if result else 0
