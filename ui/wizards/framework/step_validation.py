# -*- coding: utf-8 -*-
"""
Step Validation - Result object shared by step validators and views.

Errors block navigation; warnings are informational only.
"""

from typing import List
from dataclasses import dataclass


@dataclass
class StepValidationResult:
    """Result of step validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str] = None

    def __post_init__(self):
        if self.warnings is None:
            self.warnings = []

    @classmethod
    def ok(cls) -> 'StepValidationResult':
        """Create a passing result with no messages."""
        return cls(is_valid=True, errors=[], warnings=[])

    def add_error(self, message: str):
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        return len(self.warnings) > 0

    def format_messages(self) -> str:
        """Bulleted errors followed by warnings, one per line."""
        lines = [f"• {error}" for error in self.errors]
        lines.extend(f"• {warning}" for warning in self.warnings)
        return "\n".join(lines)
