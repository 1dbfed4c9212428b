# -*- coding: utf-8 -*-
"""
Wizard State - Immutable state and reducer for the create project wizard.

Every transition is a pure function ``reduce(state, event) -> state``.
Invalid events (disabled steps, blocked guard, unknown list items) return
the state unchanged instead of raising.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, List, Optional, Type

from models.project import ProjectDraft, ProjectMode
from services.wizard import draft_accumulator
from services.wizard.step_validator import StepValidator
from ui.wizards.project_wizard.step_graph import (
    EDITABLE_FROM_REVIEW,
    INTENT,
    MODE_SELECT,
    QUICK_CREATE,
    REVIEW,
    StepRef,
    get_step_spec,
    guided_steps,
    step_for_ordinal,
)
from utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class WizardState:
    """Current step, high-water mark and accumulated draft."""
    current_step: StepRef = MODE_SELECT
    max_step_reached: int = 0
    draft: ProjectDraft = field(default_factory=ProjectDraft)

    @property
    def is_quick_create(self) -> bool:
        return self.current_step == QUICK_CREATE

    @property
    def is_review(self) -> bool:
        return self.current_step == REVIEW

    @property
    def current_title(self) -> str:
        return get_step_spec(self.current_step).title


# =========================================================================
# Events
# =========================================================================

@dataclass(frozen=True)
class Advance:
    pass


@dataclass(frozen=True)
class Retreat:
    pass


@dataclass(frozen=True)
class JumpTo:
    index: int


@dataclass(frozen=True)
class EditFromReview:
    index: int


@dataclass(frozen=True)
class UpdateDraft:
    partial: Dict[str, Any]


@dataclass(frozen=True)
class AddItem:
    collection: str


@dataclass(frozen=True)
class UpdateItem:
    collection: str
    item_id: str
    partial: Dict[str, Any]


@dataclass(frozen=True)
class RemoveItem:
    collection: str
    item_id: str


# =========================================================================
# Reducer
# =========================================================================

def _advance(state: WizardState, event: Advance) -> WizardState:
    step = state.current_step

    if step == MODE_SELECT:
        draft = state.draft
        if draft.mode == ProjectMode.QUICK:
            return replace(state, current_step=QUICK_CREATE)
        if draft.mode == ProjectMode.UNSET:
            draft = draft.with_updates({"mode": ProjectMode.GUIDED})
        return replace(
            state,
            current_step=INTENT,
            max_step_reached=max(state.max_step_reached, INTENT.ordinal),
            draft=draft,
        )

    # Review finalizes instead of navigating; QuickCreate has no next step
    if step in (REVIEW, QUICK_CREATE):
        return state

    if not StepValidator.can_advance(step, state.draft):
        logger.debug(f"Advance from {step} blocked by step guard")
        return state

    next_step = step_for_ordinal(step.ordinal + 1)
    return replace(
        state,
        current_step=next_step,
        max_step_reached=max(state.max_step_reached, next_step.ordinal),
    )


def _retreat(state: WizardState, event: Retreat) -> WizardState:
    step = state.current_step
    if step == MODE_SELECT:
        return state
    if step == QUICK_CREATE:
        return replace(state, current_step=MODE_SELECT)
    return replace(state, current_step=step_for_ordinal(step.ordinal - 1))


def _jump_to(state: WizardState, event: JumpTo) -> WizardState:
    if event.index < 0 or event.index > state.max_step_reached:
        logger.debug(f"Jump to {event.index} ignored (max reached {state.max_step_reached})")
        return state
    return replace(state, current_step=step_for_ordinal(event.index))


def _edit_from_review(state: WizardState, event: EditFromReview) -> WizardState:
    if state.current_step != REVIEW:
        return state
    target = step_for_ordinal(event.index)
    if target not in EDITABLE_FROM_REVIEW:
        logger.debug(f"Edit from review ignored for step {event.index}")
        return state
    return replace(state, current_step=target)


def _update_draft(state: WizardState, event: UpdateDraft) -> WizardState:
    partial = dict(event.partial)
    max_step_reached = state.max_step_reached
    draft = state.draft

    if "mode" in partial:
        new_mode = partial.pop("mode")
        if state.current_step != MODE_SELECT:
            logger.debug(f"Mode change ignored outside mode selection ({state.current_step})")
        elif draft_accumulator.is_mode_switch(draft, new_mode):
            draft = draft_accumulator.reset_for_mode(draft, new_mode)
            max_step_reached = 0
        else:
            draft = draft_accumulator.merge_draft(draft, {"mode": new_mode})

    draft = draft_accumulator.merge_draft(draft, partial)
    return replace(state, draft=draft, max_step_reached=max_step_reached)


def _add_item(state: WizardState, event: AddItem) -> WizardState:
    partial = draft_accumulator.add_item(state.draft, event.collection)
    return replace(state, draft=draft_accumulator.merge_draft(state.draft, partial))


def _update_item(state: WizardState, event: UpdateItem) -> WizardState:
    partial = draft_accumulator.update_item(state.draft, event.collection, event.item_id, event.partial)
    if partial is None:
        return state
    return replace(state, draft=draft_accumulator.merge_draft(state.draft, partial))


def _remove_item(state: WizardState, event: RemoveItem) -> WizardState:
    partial = draft_accumulator.remove_item(state.draft, event.collection, event.item_id)
    if partial is None:
        return state
    return replace(state, draft=draft_accumulator.merge_draft(state.draft, partial))


_HANDLERS: Dict[Type, Callable[[WizardState, Any], WizardState]] = {
    Advance: _advance,
    Retreat: _retreat,
    JumpTo: _jump_to,
    EditFromReview: _edit_from_review,
    UpdateDraft: _update_draft,
    AddItem: _add_item,
    UpdateItem: _update_item,
    RemoveItem: _remove_item,
}


def reduce(state: WizardState, event: Any) -> WizardState:
    """Apply one event to the state and return the resulting state."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported wizard event: {type(event).__name__}")
    return handler(state, event)


# =========================================================================
# Projections
# =========================================================================

@dataclass(frozen=True)
class StepperItem:
    """One entry of the guided step list."""
    index: int
    label: str
    is_current: bool
    is_completed: bool
    is_clickable: bool


def stepper_items(state: WizardState) -> List[StepperItem]:
    """Guided steps with their current/completed/clickable flags."""
    current: Optional[int] = state.current_step.ordinal if state.current_step.is_guided else None
    items = []
    for spec in guided_steps():
        index = spec.ref.ordinal
        items.append(StepperItem(
            index=index,
            label=spec.label,
            is_current=index == current,
            is_completed=current is not None and index < current,
            is_clickable=index <= state.max_step_reached,
        ))
    return items
