# -*- coding: utf-8 -*-
"""
Utility helper functions.
"""

from datetime import datetime, date, time
from typing import Optional, Union, Iterable


def format_date(
    value: Optional[Union[datetime, date, str]],
    format_str: str = "%A, %B %d, %Y"
) -> str:
    """
    Format a date value for display.

    Args:
        value: Date, datetime, or ISO string
        format_str: Output format string

    Returns:
        Formatted date string or empty string
    """
    if value is None:
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError:
            return value

    if isinstance(value, (datetime, date)):
        return value.strftime(format_str)

    return str(value)


def format_time(value: Optional[time], format_str: str = "%I:%M %p") -> str:
    """Format a time of day for display (e.g. "9:05 AM")."""
    if value is None:
        return ""
    text = value.strftime(format_str)
    # strftime has no portable no-padding flag for hours
    return text[1:] if text.startswith("0") else text


def format_currency(value: Optional[float]) -> str:
    """Format a monetary amount as "$1,234.50"."""
    if value is None:
        value = 0.0
    return f"${value:,.2f}"


def format_amount(value: Optional[float]) -> str:
    """Format an amount for an editable field ("12.50")."""
    if value is None:
        value = 0.0
    return f"{value:.2f}"


def city_state_zip(city: Optional[str], state: Optional[str], zip_code: Optional[str]) -> str:
    """
    Build a "City, ST 12345" line, skipping blank parts.
    """
    line = city or ""
    if state:
        if line:
            line += ", "
        line += state
    if zip_code:
        if line:
            line += " "
        line += zip_code
    return line


def join_lines(parts: Iterable[Optional[str]]) -> str:
    """Join the non-empty parts with newlines."""
    return "\n".join(p for p in parts if p)
