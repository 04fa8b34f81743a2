# -*- coding: utf-8 -*-
"""
Technician entity model.
"""

from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime


@dataclass
class Technician:
    """Field technician that can be assigned to service requests."""

    technician_id: Optional[int] = None

    first_name: str = ""
    last_name: str = ""
    legal_name: Optional[str] = None
    email: Optional[str] = None

    # Qualification
    credentials: Optional[str] = None
    credential_level: Optional[str] = None
    coverage_area: Optional[str] = None

    # Payment
    pay_type: Optional[str] = None
    account_info: Optional[str] = None

    # Address
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None

    notes: Optional[str] = None

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def full_name(self) -> str:
        parts = [self.first_name, self.last_name]
        return " ".join(p for p in parts if p)

    @property
    def display_name(self) -> str:
        """Name with credential level, e.g. "Sam Lee (Senior)"."""
        if self.credential_level:
            return f"{self.first_name} {self.last_name} ({self.credential_level})"
        return f"{self.first_name} {self.last_name}"

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "technician_id": self.technician_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "legal_name": self.legal_name,
            "email": self.email,
            "credentials": self.credentials,
            "credential_level": self.credential_level,
            "coverage_area": self.coverage_area,
            "pay_type": self.pay_type,
            "account_info": self.account_info,
            "address": self.address,
            "city": self.city,
            "state": self.state,
            "zip_code": self.zip_code,
            "notes": self.notes,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Technician":
        """Create Technician from dictionary."""
        data = dict(data)
        if isinstance(data.get("created_at"), str):
            data["created_at"] = datetime.fromisoformat(data["created_at"])
        if isinstance(data.get("updated_at"), str):
            data["updated_at"] = datetime.fromisoformat(data["updated_at"])

        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})

    def __str__(self) -> str:
        return self.display_name
