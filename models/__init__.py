# -*- coding: utf-8 -*-
"""
Project Data Models
"""

from .project import (
    DeadlineType,
    Deliverable,
    Metric,
    ProjectDraft,
    ProjectIntent,
    ProjectMode,
    SuccessType,
    WorkStructure,
)

__all__ = [
    "DeadlineType",
    "Deliverable",
    "Metric",
    "ProjectDraft",
    "ProjectIntent",
    "ProjectMode",
    "SuccessType",
    "WorkStructure",
]
