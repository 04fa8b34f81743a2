# -*- coding: utf-8 -*-
"""
Field-level validation rules shared by forms and wizard steps.
"""

import math
import re
from datetime import time
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@(.+)$")
PHONE_PATTERN = re.compile(r"^\(?(\d{3})\)?[- ]?(\d{3})[- ]?(\d{4})$")
ZIP_CODE_PATTERN = re.compile(r"^\d{5}(-\d{4})?$")
STATE_PATTERN = re.compile(r"^[A-Za-z]{2}$")

INVALID_TIME_FORMAT = "Invalid time format (use HH:MM)"
START_AFTER_END = "Start time cannot be after end time"


def is_blank(value: Optional[str]) -> bool:
    """True for None or whitespace-only strings."""
    return value is None or not value.strip()


def is_valid_email(email: Optional[str]) -> bool:
    if is_blank(email):
        return False
    return EMAIL_PATTERN.match(email) is not None


def is_valid_phone(phone: Optional[str]) -> bool:
    if is_blank(phone):
        return False
    return PHONE_PATTERN.match(phone) is not None


def is_valid_zip_code(zip_code: Optional[str]) -> bool:
    if is_blank(zip_code):
        return False
    return ZIP_CODE_PATTERN.match(zip_code) is not None


def is_valid_state(state: Optional[str]) -> bool:
    """Two-letter state code."""
    if is_blank(state):
        return False
    return STATE_PATTERN.match(state) is not None


def parse_time(text: Optional[str]) -> Optional[time]:
    """
    Parse "HH:MM" or "HH:MM:SS".

    Returns:
        time, or None for blank input

    Raises:
        ValueError: if the text is not a valid time of day
    """
    if is_blank(text):
        return None
    text = text.strip()
    if not re.match(r"^\d{2}:\d{2}(:\d{2})?$", text):
        raise ValueError(f"Invalid time: {text!r}")
    return time.fromisoformat(text)


def validate_time_range(start_text: Optional[str], end_text: Optional[str]) -> str:
    """
    Check an optional start/end time pair.

    Returns:
        Empty string if valid, error message otherwise
    """
    try:
        start = parse_time(start_text)
        end = parse_time(end_text)
    except ValueError:
        return INVALID_TIME_FORMAT

    if start is not None and end is not None and start > end:
        return START_AFTER_END
    return ""


def parse_amount(text: Optional[str]) -> float:
    """
    Parse a money amount; blank means 0.

    Raises:
        ValueError: if the text is not blank and not a number
    """
    if is_blank(text):
        return 0.0
    cleaned = text.strip().lstrip("$").replace(",", "")
    value = float(cleaned)
    if not math.isfinite(value):
        raise ValueError(f"Invalid amount: {text!r}")
    return value


def validate_required(field_name: str, value: Optional[str]) -> str:
    """Empty string if valid, error message if invalid."""
    return f"{field_name} is required" if is_blank(value) else ""


def validate_email(field_name: str, email: Optional[str]) -> str:
    if is_blank(email):
        return f"{field_name} is required"
    if not is_valid_email(email):
        return "Please enter a valid email address"
    return ""


def validate_phone(field_name: str, phone: Optional[str]) -> str:
    if is_blank(phone):
        return f"{field_name} is required"
    if not is_valid_phone(phone):
        return "Please enter a valid phone number (e.g. (555) 123-4567)"
    return ""
