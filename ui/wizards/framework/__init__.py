# -*- coding: utf-8 -*-
"""
Wizard Framework - Shared pieces for multi-step wizards.

Provides the session context, the reducer-driven step navigator and
the validation result type used by step validators.
"""

from .step_validation import StepValidationResult
from .wizard_context import WizardContext, WizardStatus
from .step_navigator import StepNavigator

__all__ = [
    'StepValidationResult',
    'WizardContext',
    'WizardStatus',
    'StepNavigator'
]
