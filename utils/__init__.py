# -*- coding: utf-8 -*-
"""
Service Desk Utility Module
"""

from .logger import get_logger, setup_logger
from .helpers import format_date, format_time, format_currency

__all__ = [
    "get_logger",
    "setup_logger",
    "format_date",
    "format_time",
    "format_currency",
]
