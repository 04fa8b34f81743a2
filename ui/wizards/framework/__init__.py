# -*- coding: utf-8 -*-
"""
Wizard Framework - Linear multi-step wizards.

Provides the step contract, the navigation engine and a Qt host with
consistent navigation, validation gating and state management.
"""

from .base_wizard import BaseWizard
from .base_step import WizardStep, BaseStep, StepValidationResult
from .wizard_context import WizardContext
from .wizard_engine import WizardEngine

__all__ = [
    'BaseWizard',
    'WizardStep',
    'BaseStep',
    'StepValidationResult',
    'WizardContext',
    'WizardEngine'
]
