# -*- coding: utf-8 -*-
"""
Customer entity model.
"""

from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime

from utils.helpers import city_state_zip


@dataclass
class Customer:
    """
    Customer entity representing a client that requests service.
    """

    # Primary identifier (assigned by the database)
    customer_id: Optional[int] = None
    customer_number: str = ""

    # Contact person
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    position: Optional[str] = None

    # Business details
    company_name: Optional[str] = None
    business_name: Optional[str] = None
    billing_details: Optional[str] = None
    website: Optional[str] = None

    # Phones
    phone_number: Optional[str] = None
    mobile_number: Optional[str] = None
    extension_number: Optional[str] = None

    # Address
    street_address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    # Metadata
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def full_name(self) -> str:
        """Get "First Last"."""
        parts = [self.first_name, self.last_name]
        return " ".join(p for p in parts if p)

    @property
    def display_name(self) -> str:
        """Label used by pickers: "C-1001 - Jane Doe"."""
        return f"{self.customer_number} - {self.first_name} {self.last_name}"

    @property
    def city_state_zip(self) -> str:
        return city_state_zip(self.city, self.state, self.zip_code)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "customer_id": self.customer_id,
            "customer_number": self.customer_number,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "position": self.position,
            "company_name": self.company_name,
            "business_name": self.business_name,
            "billing_details": self.billing_details,
            "website": self.website,
            "phone_number": self.phone_number,
            "mobile_number": self.mobile_number,
            "extension_number": self.extension_number,
            "street_address": self.street_address,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Customer":
        """Create Customer from dictionary."""
        data = dict(data)
        if isinstance(data.get("created_at"), str):
            data["created_at"] = datetime.fromisoformat(data["created_at"])
        if isinstance(data.get("updated_at"), str):
            data["updated_at"] = datetime.fromisoformat(data["updated_at"])

        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def __str__(self) -> str:
        return self.display_name
