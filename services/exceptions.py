# -*- coding: utf-8 -*-
"""Custom exceptions for the application."""


class ValidationException(Exception):
    """Exception raised for validation errors."""

    def __init__(self, message: str, field: str = None,
                 errors: list = None, context: str = None):
        super().__init__(message)
        self.message = message
        self.field = field
        self.errors = errors or []
        self.context = context


class StepTableError(ValidationException):
    """Raised when the wizard step table does not cover every step exactly once."""

    def __init__(self, message: str, errors: list = None):
        super().__init__(message, errors=errors, context="step_table")

    def __str__(self):
        if self.errors:
            return f"{self.message}: {'; '.join(self.errors)}"
        return self.message


class ProjectCreationError(Exception):
    """Raised by a creation sink that rejects a finalized project draft."""

    def __init__(self, message: str, reference_number: str = None):
        super().__init__(message)
        self.message = message
        self.reference_number = reference_number
