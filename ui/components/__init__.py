# -*- coding: utf-8 -*-
"""
Service Desk UI Components
"""

from .action_button import ActionButton
from .autocomplete_field import AutoCompleteField
from .wizard_header import WizardHeader
from .wizard_footer import WizardFooter

__all__ = [
    "ActionButton",
    "AutoCompleteField",
    "WizardHeader",
    "WizardFooter",
]
