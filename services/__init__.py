# -*- coding: utf-8 -*-
"""
Projects Service Layer
"""

# Lazy imports to avoid circular dependencies
__all__ = [
    "PeopleDirectory",
    "StepValidator",
]


def __getattr__(name):
    """Lazy import to avoid circular dependencies."""
    if name == "PeopleDirectory":
        from .people_directory import PeopleDirectory
        return PeopleDirectory
    elif name == "StepValidator":
        from .wizard.step_validator import StepValidator
        return StepValidator
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
