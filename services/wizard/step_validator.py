# -*- coding: utf-8 -*-
"""
Step validation service for the Create Project Wizard.

Validates draft data for each step without UI coupling. The flow is
deliberately low-friction: Ownership is the only step that blocks
advancing, and only until an owner is chosen.
"""

from typing import Tuple

from models.project import (
    ProjectDraft,
    ProjectIntent,
    ProjectMode,
    SuccessType,
    WorkStructure,
)
from ui.wizards.framework.step_validation import StepValidationResult
from ui.wizards.project_wizard.step_graph import (
    INTENT,
    MODE_SELECT,
    OUTCOME,
    OWNERSHIP,
    REVIEW,
    STRUCTURE,
    StepRef,
)


class StepValidator:
    """Validates wizard step data based on the draft."""

    @staticmethod
    def validate_step(step: StepRef, draft: ProjectDraft) -> Tuple[bool, str]:
        """
        Validate step data from the draft.

        Args:
            step: Current step
            draft: Current project draft

        Returns:
            Tuple of (is_valid, error_message)
        """
        if step == OWNERSHIP:
            if not draft.owner_id:
                return False, "Select a project owner to continue"
            return True, ""

        # Every other step is optional
        return True, ""

    @staticmethod
    def can_advance(step: StepRef, draft: ProjectDraft) -> bool:
        is_valid, _ = StepValidator.validate_step(step, draft)
        return is_valid

    @staticmethod
    def check_step(step: StepRef, draft: ProjectDraft) -> StepValidationResult:
        """
        Full result for a step, with non-blocking warnings for gaps.

        Warnings never stop navigation; they are hints for the view.
        """
        is_valid, error = StepValidator.validate_step(step, draft)
        result = StepValidationResult.ok()
        if not is_valid:
            result.add_error(error)

        if step == MODE_SELECT and draft.mode == ProjectMode.UNSET:
            result.add_warning("No mode selected; guided setup will be used")
        elif step == INTENT and draft.intent == ProjectIntent.UNSET:
            result.add_warning("Project intent not specified")
        elif step == OUTCOME:
            if draft.success_type == SuccessType.DELIVERABLE and not any(d.title for d in draft.deliverables):
                result.add_warning("No deliverable has a title yet")
            if draft.success_type == SuccessType.METRIC and not any(m.name for m in draft.metrics):
                result.add_warning("No metric has a name yet")
            if draft.has_deadline() and not draft.deadline_date:
                result.add_warning("Deadline type selected without a date")
        elif step == STRUCTURE and draft.structure == WorkStructure.UNSET:
            result.add_warning("Work structure not selected")
        elif step == REVIEW and not draft.owner_id:
            result.add_warning("Project owner not assigned")

        return result
