# -*- coding: utf-8 -*-
"""
Wizard Context - Base class for wizard session metadata.

Provides unified interface for:
- Session identity and reference number generation
- Lifecycle status tracking
- Serialization of the session for completion payloads

Wizard data itself lives in the navigator's immutable state; the
context only describes the session that produced it.
"""

from typing import Dict, Any, Optional
from datetime import datetime
import uuid


class WizardStatus:
    """Lifecycle states of a wizard session."""
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class WizardContext:
    """
    Base class for wizard context.

    Subclasses customise the reference prefix and extend to_dict().
    """

    def __init__(self):
        """Initialize base context properties."""
        self.wizard_id: str = str(uuid.uuid4())
        self.status: str = WizardStatus.IN_PROGRESS
        self.created_at: datetime = datetime.now()
        self.updated_at: datetime = datetime.now()
        self.closed_at: Optional[datetime] = None
        self.reference_number: str = self._generate_reference_number()

    def _generate_reference_number(self) -> str:
        """
        Generate a unique reference number for the wizard session.

        Format: {PREFIX}-{YYYYMMDDHHMMSS}-{SHORT_UUID}
        Example: WIZ-20260118153045-A3F2
        """
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        short_id = self.wizard_id[:4].upper()
        prefix = self._get_reference_prefix()
        return f"{prefix}-{timestamp}-{short_id}"

    def _get_reference_prefix(self) -> str:
        """Get the prefix for reference number. Override in subclasses."""
        return "WIZ"

    @property
    def is_open(self) -> bool:
        return self.status == WizardStatus.IN_PROGRESS

    def touch(self):
        """Record that the session changed."""
        self.updated_at = datetime.now()

    def mark_completed(self):
        self.status = WizardStatus.COMPLETED
        self.closed_at = datetime.now()
        self.touch()

    def mark_cancelled(self):
        self.status = WizardStatus.CANCELLED
        self.closed_at = datetime.now()
        self.touch()

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize context to dictionary.

        Subclasses should call super().to_dict() and add their own fields.
        """
        return {
            "wizard_id": self.wizard_id,
            "reference_number": self.reference_number,
            "status": self.status,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "closed_at": self.closed_at.isoformat() if self.closed_at else None,
        }
