# -*- coding: utf-8 -*-
"""
Database seeder for demo data.
"""

import random
from datetime import datetime, timedelta
from typing import List

from models.customer import Customer
from models.technician import Technician
from .database import Database
from .customer_repository import CustomerRepository
from .technician_repository import TechnicianRepository
from utils.logger import get_logger

logger = get_logger(__name__)

FIRST_NAMES = [
    "James", "Maria", "Robert", "Linda", "Michael", "Susan", "David", "Karen",
    "Daniel", "Nancy", "Thomas", "Lisa", "Kevin", "Angela", "Brian", "Emily",
]

LAST_NAMES = [
    "Carter", "Nguyen", "Patel", "Brooks", "Ramirez", "Foster", "Hughes",
    "Bennett", "Coleman", "Reyes", "Sullivan", "Price", "Warren", "Jenkins",
]

COMPANIES = [
    "Northwind Offices", "Lakeside Clinic", "Harbor Logistics", "Summit Dental",
    None, None, "Greenleaf Bakery", "Pinecrest Realty",
]

CITIES = [
    ("Austin", "TX", "78701"),
    ("Denver", "CO", "80202"),
    ("Portland", "OR", "97201"),
    ("Raleigh", "NC", "27601"),
    ("Madison", "WI", "53703"),
]

CREDENTIAL_LEVELS = ["Apprentice", "Journeyman", "Senior", "Master"]


def seed_database(db: Database) -> None:
    """
    Seed an empty database with demo customers and technicians.

    Args:
        db: Database instance (schema already initialized)
    """
    # Set random seed for consistent data generation
    random.seed(42)

    logger.info("Seeding database with demo data...")

    customer_repo = CustomerRepository(db)
    technician_repo = TechnicianRepository(db)

    if customer_repo.count() == 0:
        customers = _seed_customers(customer_repo, 20)
        logger.info(f">> Created {len(customers)} customers")
    else:
        logger.info(">> Customers already exist, skipping customer seed")

    if technician_repo.count() == 0:
        technicians = _seed_technicians(technician_repo, 8)
        logger.info(f">> Created {len(technicians)} technicians")
    else:
        logger.info(">> Technicians already exist, skipping technician seed")

    logger.info(">> Database seeding completed successfully!")


def _seed_customers(repo: CustomerRepository, count: int) -> List[Customer]:
    """Seed customers with sequential customer numbers."""
    customers = []

    for i in range(count):
        first_name = random.choice(FIRST_NAMES)
        last_name = random.choice(LAST_NAMES)
        city, state, zip_code = random.choice(CITIES)

        customer = Customer(
            customer_number=f"C-{1001 + i}",
            first_name=first_name,
            last_name=last_name,
            email=f"{first_name.lower()}.{last_name.lower()}{i}@example.com",
            company_name=random.choice(COMPANIES),
            phone_number=f"({random.randint(200, 999)}) 555-{random.randint(1000, 9999)}",
            street_address=f"{random.randint(10, 9999)} Main St",
            city=city,
            state=state,
            zip_code=zip_code,
            created_at=datetime.now() - timedelta(days=random.randint(1, 365)),
        )

        repo.create(customer)
        customers.append(customer)

    logger.debug(f"Created {len(customers)} customers")
    return customers


def _seed_technicians(repo: TechnicianRepository, count: int) -> List[Technician]:
    """Seed technicians with a spread of credential levels."""
    technicians = []

    for i in range(count):
        first_name = random.choice(FIRST_NAMES)
        last_name = random.choice(LAST_NAMES)
        city, state, zip_code = random.choice(CITIES)

        technician = Technician(
            first_name=first_name,
            last_name=last_name,
            email=f"tech{i + 1}@example.com",
            credential_level=CREDENTIAL_LEVELS[i % len(CREDENTIAL_LEVELS)],
            coverage_area=city,
            city=city,
            state=state,
            zip_code=zip_code,
        )

        repo.create(technician)
        technicians.append(technician)

    logger.debug(f"Created {len(technicians)} technicians")
    return technicians
