# -*- coding: utf-8 -*-
"""
Customer repository for database operations.
"""

from typing import List, Optional
from datetime import datetime

from models.customer import Customer
from .database import Database
from utils.logger import get_logger

logger = get_logger(__name__)


class CustomerRepository:
    """Repository for Customer CRUD operations."""

    def __init__(self, db: Database):
        self.db = db

    def create(self, customer: Customer) -> Customer:
        """Create a new customer record and assign its id."""
        query = """
            INSERT INTO customers (
                customer_number, first_name, last_name, email, position,
                company_name, business_name, billing_details, website,
                phone_number, mobile_number, extension_number,
                street_address, city, state, zip_code,
                created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        """
        params = (
            customer.customer_number, customer.first_name, customer.last_name,
            customer.email, customer.position,
            customer.company_name, customer.business_name,
            customer.billing_details, customer.website,
            customer.phone_number, customer.mobile_number, customer.extension_number,
            customer.street_address, customer.city, customer.state, customer.zip_code,
            customer.created_at.isoformat() if customer.created_at else None,
            customer.updated_at.isoformat() if customer.updated_at else None,
        )
        customer.customer_id = self.db.insert(query, params)
        logger.debug(f"Created customer: {customer.customer_id} ({customer.customer_number})")
        return customer

    def get_by_id(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID."""
        row = self.db.fetch_one("SELECT * FROM customers WHERE customer_id = ?", (customer_id,))
        if row:
            return self._row_to_customer(row)
        return None

    def get_all(self) -> List[Customer]:
        """Get all customers ordered by name."""
        rows = self.db.fetch_all("SELECT * FROM customers ORDER BY last_name, first_name")
        return [self._row_to_customer(row) for row in rows]

    def search(self, search_text: str, limit: int = 50) -> List[Customer]:
        """Search customers by number, name, company or email."""
        pattern = f"%{search_text}%"
        query = """
            SELECT * FROM customers
            WHERE customer_number LIKE ? OR first_name LIKE ? OR last_name LIKE ?
               OR company_name LIKE ? OR email LIKE ?
            ORDER BY last_name, first_name
            LIMIT ?
        """
        rows = self.db.fetch_all(query, (pattern, pattern, pattern, pattern, pattern, limit))
        return [self._row_to_customer(row) for row in rows]

    def count(self) -> int:
        """Count total customers."""
        result = self.db.fetch_one("SELECT COUNT(*) as count FROM customers")
        return result["count"] if result else 0

    def update(self, customer: Customer) -> Customer:
        """Update an existing customer."""
        customer.updated_at = datetime.now()
        query = """
            UPDATE customers SET
                customer_number = ?, first_name = ?, last_name = ?, email = ?, position = ?,
                company_name = ?, business_name = ?, billing_details = ?, website = ?,
                phone_number = ?, mobile_number = ?, extension_number = ?,
                street_address = ?, city = ?, state = ?, zip_code = ?,
                updated_at = ?
            WHERE customer_id = ?
        """
        params = (
            customer.customer_number, customer.first_name, customer.last_name,
            customer.email, customer.position,
            customer.company_name, customer.business_name,
            customer.billing_details, customer.website,
            customer.phone_number, customer.mobile_number, customer.extension_number,
            customer.street_address, customer.city, customer.state, customer.zip_code,
            customer.updated_at.isoformat(),
            customer.customer_id,
        )
        self.db.execute(query, params)
        logger.debug(f"Updated customer: {customer.customer_id}")
        return customer

    def _row_to_customer(self, row) -> Customer:
        """Convert database row to Customer object."""
        return Customer.from_dict(row.to_dict())
