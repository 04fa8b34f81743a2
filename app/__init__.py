# -*- coding: utf-8 -*-
"""
Service Desk Application Core Module
"""

from .config import Config, Vocabularies

__all__ = ["Config", "Vocabularies"]
