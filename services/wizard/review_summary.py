# -*- coding: utf-8 -*-
"""
Review projection for the create project wizard.

Builds the read-only summary shown on the Review step. Nothing here
changes the draft; each section only names the step to edit it.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from app.config import Config
from models.project import (
    DeadlineType,
    ProjectDraft,
    ProjectIntent,
    SuccessType,
    WorkStructure,
)
from services.people_directory import PeopleDirectory
from utils.helpers import format_date, get_initials

NOT_SPECIFIED = "Not specified"
NOT_ASSIGNED = "Not assigned"
UNKNOWN_OWNER = "Selected owner"

INTENT_LABELS = {
    ProjectIntent.DELIVERY: "Delivery",
    ProjectIntent.EXPERIMENT: "Experiment",
    ProjectIntent.INTERNAL: "Internal",
    ProjectIntent.UNSET: NOT_SPECIFIED,
}

SUCCESS_LABELS = {
    SuccessType.DELIVERABLE: "Deliverable-based",
    SuccessType.METRIC: "Metric-based",
    SuccessType.UNDEFINED: "To be defined",
}

# Unset structure is shown as the default (linear) layout
STRUCTURE_LABELS = {
    WorkStructure.LINEAR: "Linear",
    WorkStructure.MILESTONES: "Milestones",
    WorkStructure.MULTISTREAM: "Multi-stream",
    WorkStructure.UNSET: "Linear",
}


@dataclass(frozen=True)
class ReviewSection:
    """One card on the Review step."""
    key: str
    label: str
    detail: str
    edit_step: int


@dataclass(frozen=True)
class OwnerSummary:
    name: str
    initials: str
    avatar_url: Optional[str] = None


@dataclass(frozen=True)
class ReviewSummary:
    sections: List[ReviewSection] = field(default_factory=list)
    owner: Optional[OwnerSummary] = None
    contributor_names: List[str] = field(default_factory=list)
    stakeholder_names: List[str] = field(default_factory=list)

    def section(self, key: str) -> Optional[ReviewSection]:
        for section in self.sections:
            if section.key == key:
                return section
        return None


def deliverable_summary(draft: ProjectDraft) -> str:
    if not draft.deliverables:
        return NOT_SPECIFIED
    return ", ".join(d.title or "Untitled deliverable" for d in draft.deliverables)


def metric_summary(draft: ProjectDraft) -> str:
    if draft.metrics:
        return ", ".join(f"{m.name or 'Metric'}: {m.target or 'Target'}" for m in draft.metrics)
    if draft.metric_name or draft.metric_target:
        return f"{draft.metric_name or 'Metric'}: {draft.metric_target or 'Target'}"
    return NOT_SPECIFIED


def deadline_summary(draft: ProjectDraft) -> str:
    if not draft.has_deadline():
        return "No deadline"
    kind = "Target date" if draft.deadline_type == DeadlineType.TARGET else "Fixed deadline"
    if not draft.deadline_date:
        return kind
    return f"{kind}: {format_date(draft.deadline_date, Config.DATE_FORMAT_DISPLAY)}"


def _success_detail(draft: ProjectDraft) -> str:
    if draft.success_type == SuccessType.DELIVERABLE:
        count = len(draft.deliverables)
        if count:
            return f"{count} deliverable{'s' if count != 1 else ''}: {deliverable_summary(draft)}"
        return NOT_SPECIFIED
    if draft.success_type == SuccessType.METRIC:
        return metric_summary(draft)
    return ""


def _names(directory: PeopleDirectory, ids) -> List[str]:
    return sorted(directory.display_name(person_id, person_id) for person_id in ids)


def build_review(draft: ProjectDraft, directory: PeopleDirectory) -> ReviewSummary:
    """Project the draft into Review sections."""
    if draft.owner_id:
        person = directory.get(draft.owner_id)
        owner_name = person.display_name if person else UNKNOWN_OWNER
        avatar_url = person.avatar_url if person else None
    else:
        owner_name = NOT_ASSIGNED
        avatar_url = None
    owner = OwnerSummary(name=owner_name, initials=get_initials(owner_name), avatar_url=avatar_url)

    contributors = _names(directory, draft.contributor_ids)
    stakeholders = _names(directory, draft.stakeholder_ids)

    ownership_detail = ""
    if contributors:
        ownership_detail = f"{len(contributors)} contributor{'s' if len(contributors) != 1 else ''}"

    sections = [
        ReviewSection("intent", INTENT_LABELS[draft.intent], "", edit_step=1),
        ReviewSection(
            "success",
            SUCCESS_LABELS[draft.success_type],
            _success_detail(draft),
            edit_step=2,
        ),
        ReviewSection("deadline", deadline_summary(draft), "", edit_step=2),
        ReviewSection("ownership", owner_name, ownership_detail, edit_step=3),
        ReviewSection(
            "structure",
            STRUCTURE_LABELS[draft.structure],
            "Starter tasks will be added" if draft.add_starter_tasks else "",
            edit_step=4,
        ),
    ]

    return ReviewSummary(
        sections=sections,
        owner=owner,
        contributor_names=contributors,
        stakeholder_names=stakeholders,
    )
