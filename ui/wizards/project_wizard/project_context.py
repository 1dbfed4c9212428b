# -*- coding: utf-8 -*-
"""
Project Context - Session metadata for the create project wizard.
"""

from typing import Any, Dict, Optional

from app.config import Config
from models.project import ProjectDraft
from ui.wizards.framework import WizardContext


class ProjectContext(WizardContext):
    """Context for the create project wizard."""

    def __init__(self, user_id: Optional[str] = None):
        super().__init__()
        self.user_id = user_id

    def _get_reference_prefix(self) -> str:
        return Config.WIZARD_REFERENCE_PREFIX

    def build_payload(self, draft: ProjectDraft) -> Dict[str, Any]:
        """Completion payload: session metadata plus the finalized draft."""
        payload = self.to_dict()
        payload["user_id"] = self.user_id
        payload["project"] = draft.to_dict()
        return payload
