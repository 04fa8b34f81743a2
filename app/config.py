# -*- coding: utf-8 -*-
"""
Application configuration.

Defaults live on Config; SERVICEDESK_* environment variables (or a .env
file) override the database path, console log level and demo seeding.
"""

from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_DB_PATH = os.getenv("SERVICEDESK_DB_PATH", None)
_LOG_LEVEL = os.getenv("SERVICEDESK_LOG_LEVEL", "INFO").upper()
_SEED_DEMO_DATA = os.getenv("SERVICEDESK_SEED_DEMO_DATA", "true").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Service Desk"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Service Desk"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = PROJECT_ROOT / "data"
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Database Configuration (SQLite)
    DB_NAME: str = "servicedesk.db"
    DB_PATH: Path = Path(_DB_PATH) if _DB_PATH else DATA_DIR / DB_NAME
    SEED_DEMO_DATA: bool = _SEED_DEMO_DATA

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    CONSOLE_LOG_LEVEL: str = _LOG_LEVEL

    # UI Settings
    WINDOW_MIN_WIDTH: int = 900
    WINDOW_MIN_HEIGHT: int = 680
    AUTOCOMPLETE_MAX_VISIBLE: int = 8

    # Colors
    PRIMARY_COLOR: str = "#0d6efd"
    SECONDARY_COLOR: str = "#6c757d"
    ERROR_COLOR: str = "#dc3545"
    HEADER_BG: str = "#f8f9fa"
    BORDER_COLOR: str = "#dee2e6"

    # Date/Time Formats
    DATE_FORMAT: str = "%Y-%m-%d"
    TIME_FORMAT: str = "%H:%M"


# Controlled vocabularies
class Vocabularies:
    SERVICE_TYPES = [
        "Installation",
        "Maintenance",
        "Repair",
        "Inspection",
        "Consultation",
        "Other",
    ]

    PRIORITIES = ["Low", "Medium", "High", "Critical"]

    # Service request status values
    STATUS_PENDING = "Pending"
    STATUS_SCHEDULED = "Scheduled"
    STATUS_IN_PROGRESS = "In Progress"
    STATUS_COMPLETED = "Completed"
    STATUS_CANCELLED = "Cancelled"

    REQUEST_STATUSES = [
        STATUS_PENDING,
        STATUS_SCHEDULED,
        STATUS_IN_PROGRESS,
        STATUS_COMPLETED,
        STATUS_CANCELLED,
    ]
