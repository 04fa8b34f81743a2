# -*- coding: utf-8 -*-
"""
Service request entity model.
"""

from dataclasses import dataclass, field
from typing import Optional, List
from datetime import datetime, date, time

from models.customer import Customer
from models.technician import Technician


@dataclass
class ServiceRequest:
    """
    A job scheduled for a customer.

    The service request wizard fills one instance step by step; each step
    owns a subset of the fields below.
    """

    job_id: Optional[int] = None
    ref_no: Optional[str] = None

    # Customer (customer step)
    customer_id: int = 0
    customer: Optional[Customer] = None

    # Details (service details step)
    description: Optional[str] = None
    service_type: Optional[str] = None
    priority: Optional[str] = None

    # Schedule (scheduling step)
    service_date: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None

    # Location & access (location step)
    building_name: Optional[str] = None
    service_address: Optional[str] = None
    service_city: Optional[str] = None
    service_state: Optional[str] = None
    service_zip: Optional[str] = None
    poc_name: Optional[str] = None
    poc_phone: Optional[str] = None
    access_information: Optional[str] = None

    # Technicians (technician step)
    technicians: List[Technician] = field(default_factory=list)

    # Costs (cost estimation step)
    service_cost: float = 0.0
    added_cost: float = 0.0
    parking_fees: float = 0.0
    cost_notes: Optional[str] = None

    # Free-form notes and workflow
    service_notes: Optional[str] = None
    status: str = "Pending"
    technician_status: Optional[str] = None
    technician_notes: Optional[str] = None

    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    @property
    def total_cost(self) -> float:
        """Service cost plus added cost plus parking fees."""
        return (self.service_cost or 0.0) + (self.added_cost or 0.0) + (self.parking_fees or 0.0)

    @property
    def technician_ids(self) -> List[int]:
        return [t.technician_id for t in self.technicians if t.technician_id is not None]

    def combined_notes(self) -> str:
        """
        Render every notes-like field as one block of text.

        Format:
            Service Type: Repair
            Priority: High

            <service notes>

            Access Information:
            <access information>

            Cost Notes:
            <cost notes>
        """
        sections = []

        header = []
        if self.service_type:
            header.append(f"Service Type: {self.service_type}")
        if self.priority:
            header.append(f"Priority: {self.priority}")
        if header:
            sections.append("\n".join(header))

        if self.service_notes:
            sections.append(self.service_notes)
        if self.access_information:
            sections.append(f"Access Information:\n{self.access_information}")
        if self.cost_notes:
            sections.append(f"Cost Notes:\n{self.cost_notes}")

        return "\n\n".join(sections)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "job_id": self.job_id,
            "ref_no": self.ref_no,
            "customer_id": self.customer_id,
            "customer": self.customer.to_dict() if self.customer else None,
            "description": self.description,
            "service_type": self.service_type,
            "priority": self.priority,
            "service_date": self.service_date.isoformat() if self.service_date else None,
            "start_time": self.start_time.isoformat(timespec="minutes") if self.start_time else None,
            "end_time": self.end_time.isoformat(timespec="minutes") if self.end_time else None,
            "building_name": self.building_name,
            "service_address": self.service_address,
            "service_city": self.service_city,
            "service_state": self.service_state,
            "service_zip": self.service_zip,
            "poc_name": self.poc_name,
            "poc_phone": self.poc_phone,
            "access_information": self.access_information,
            "technicians": [t.to_dict() for t in self.technicians],
            "service_cost": self.service_cost,
            "added_cost": self.added_cost,
            "parking_fees": self.parking_fees,
            "cost_notes": self.cost_notes,
            "service_notes": self.service_notes,
            "status": self.status,
            "technician_status": self.technician_status,
            "technician_notes": self.technician_notes,
            "total_cost": self.total_cost,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ServiceRequest":
        """Create ServiceRequest from dictionary."""
        data = dict(data)
        data.pop("total_cost", None)

        if isinstance(data.get("customer"), dict):
            data["customer"] = Customer.from_dict(data["customer"])
        data["technicians"] = [
            Technician.from_dict(t) if isinstance(t, dict) else t
            for t in data.get("technicians") or []
        ]

        if isinstance(data.get("service_date"), str):
            data["service_date"] = date.fromisoformat(data["service_date"])
        for key in ("start_time", "end_time"):
            if isinstance(data.get(key), str):
                data[key] = time.fromisoformat(data[key])
        for key in ("created_at", "updated_at"):
            if isinstance(data.get(key), str):
                data[key] = datetime.fromisoformat(data[key])

        return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
