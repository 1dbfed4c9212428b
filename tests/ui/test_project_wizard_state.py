# -*- coding: utf-8 -*-
"""
Tests for the create project wizard reducer.

Tests cover:
- Guided and quick navigation
- Step guard on Ownership
- Jump and edit-from-review rules
- Draft merging and mode changes
- Stepper projection
"""

import random

import pytest

from models.project import ProjectDraft, ProjectIntent, ProjectMode, WorkStructure
from services.exceptions import ValidationException
from ui.wizards.project_wizard.step_graph import (
    INTENT,
    MODE_SELECT,
    OUTCOME,
    OWNERSHIP,
    QUICK_CREATE,
    REVIEW,
    STRUCTURE,
)
from ui.wizards.project_wizard.wizard_state import (
    AddItem,
    Advance,
    EditFromReview,
    JumpTo,
    RemoveItem,
    Retreat,
    UpdateDraft,
    UpdateItem,
    WizardState,
    reduce,
    stepper_items,
)


def run(state, *events):
    for event in events:
        state = reduce(state, event)
    return state


@pytest.fixture
def review_state(state):
    """Guided wizard walked all the way to Review."""
    return run(
        state,
        UpdateDraft({"mode": "guided"}),
        Advance(),
        Advance(),
        Advance(),
        UpdateDraft({"owner_id": "sarah-chen"}),
        Advance(),
        Advance(),
    )


class TestInitialState:

    def test_starts_on_mode_select(self, state):
        assert state.current_step == MODE_SELECT
        assert state.max_step_reached == 0
        assert state.draft == ProjectDraft()

    def test_title(self, state):
        assert state.current_title == "Create a new project"

    def test_unknown_event_raises(self, state):
        with pytest.raises(TypeError):
            reduce(state, "advance")


class TestGuidedNavigation:

    def test_walk_to_review(self, review_state):
        assert review_state.current_step == REVIEW
        assert review_state.max_step_reached == 5
        assert review_state.is_review

    def test_advance_without_mode_commits_guided(self, state):
        state = reduce(state, Advance())

        assert state.current_step == INTENT
        assert state.draft.mode == ProjectMode.GUIDED
        assert state.max_step_reached == 1

    def test_ownership_blocks_without_owner(self, state):
        state = run(state, Advance(), Advance(), Advance())
        assert state.current_step == OWNERSHIP

        blocked = reduce(state, Advance())
        assert blocked is state

        moved = run(state, UpdateDraft({"owner_id": "o1"}), Advance())
        assert moved.current_step == STRUCTURE

    def test_advance_on_review_is_noop(self, review_state):
        assert reduce(review_state, Advance()) is review_state

    def test_retreat(self, state):
        state = run(state, Advance(), Advance())
        assert reduce(state, Retreat()).current_step == INTENT

    def test_retreat_on_mode_select_is_noop(self, state):
        assert reduce(state, Retreat()) is state

    def test_retreat_keeps_max_reached(self, review_state):
        state = run(review_state, Retreat(), Retreat(), Retreat())

        assert state.current_step == OUTCOME
        assert state.max_step_reached == 5

    def test_random_walk_keeps_max_at_or_above_current(self, state):
        rng = random.Random(20261019)
        events = [Advance(), Retreat(), UpdateDraft({"owner_id": "o1"}), UpdateDraft({"owner_id": None})]

        for _ in range(500):
            previous_max = state.max_step_reached
            state = reduce(state, rng.choice(events))

            assert state.current_step != QUICK_CREATE
            assert state.max_step_reached >= state.current_step.ordinal
            assert state.max_step_reached >= previous_max
            assert 0 <= state.max_step_reached <= 5


class TestQuickCreate:

    def test_quick_mode_bypasses_guided_steps(self, state):
        state = run(state, UpdateDraft({"mode": "quick"}), Advance())

        assert state.current_step == QUICK_CREATE
        assert state.is_quick_create
        assert state.max_step_reached == 0
        assert state.current_title == "Create a project with minimal setup"

    def test_quick_create_never_advances(self, state):
        state = run(state, UpdateDraft({"mode": "quick"}), Advance())
        assert reduce(state, Advance()) is state

    def test_retreat_from_quick_create_returns_to_mode_select(self, state):
        state = run(state, UpdateDraft({"mode": "quick"}), Advance(), Retreat())

        assert state.current_step == MODE_SELECT
        assert state.draft.mode == ProjectMode.QUICK

    def test_quick_create_not_in_stepper(self, state):
        state = run(state, UpdateDraft({"mode": "quick"}), Advance())
        items = stepper_items(state)

        assert len(items) == 5
        assert not any(item.is_current for item in items)


class TestJumpAndEdit:

    def test_jump_to_visited_step(self, review_state):
        state = reduce(review_state, JumpTo(2))

        assert state.current_step == OUTCOME
        assert state.max_step_reached == 5

    def test_jump_to_zero_lands_on_mode_select(self, review_state):
        assert reduce(review_state, JumpTo(0)).current_step == MODE_SELECT

    @pytest.mark.parametrize("index", [-1, 3, 6])
    def test_jump_beyond_max_is_noop(self, state, index):
        state = run(state, Advance(), Advance())
        assert reduce(state, JumpTo(index)) is state

    @pytest.mark.parametrize("index, expected", [
        (1, INTENT),
        (2, OUTCOME),
        (3, OWNERSHIP),
        (4, STRUCTURE),
    ])
    def test_edit_from_review(self, review_state, index, expected):
        state = reduce(review_state, EditFromReview(index))

        assert state.current_step == expected
        assert state.max_step_reached == 5

    @pytest.mark.parametrize("index", [0, 5, 6])
    def test_edit_from_review_rejects_other_steps(self, review_state, index):
        assert reduce(review_state, EditFromReview(index)) is review_state

    def test_edit_from_review_only_on_review(self, state):
        state = run(state, Advance(), Advance())
        assert reduce(state, EditFromReview(1)) is state

    def test_metric_project_edit_scenario(self, state):
        state = run(state, UpdateDraft({"mode": "guided"}), Advance())
        assert state.current_step == INTENT

        state = run(state, UpdateDraft({"intent": "delivery"}), Advance())
        assert state.current_step == OUTCOME

        state = reduce(state, UpdateDraft({"success_type": "metric"}))
        assert len(state.draft.metrics) == 1

        state = run(state, Advance(), UpdateDraft({"owner_id": "o1"}), Advance(), Advance())
        assert state.current_step == REVIEW

        state = reduce(state, EditFromReview(2))
        assert state.current_step == OUTCOME

        state = reduce(state, Advance())
        assert state.current_step == OWNERSHIP
        assert state.max_step_reached >= 5

    def test_edit_then_return_to_review(self, review_state):
        state = run(
            review_state,
            EditFromReview(1),
            UpdateDraft({"intent": "experiment"}),
            JumpTo(5),
        )

        assert state.current_step == REVIEW
        assert state.draft.intent == ProjectIntent.EXPERIMENT
        assert state.draft.owner_id == "sarah-chen"


class TestDraftUpdates:

    def test_updates_merge(self, state):
        state = run(state, UpdateDraft({"description": "x"}), UpdateDraft({"owner_id": "o1"}))

        assert state.draft.description == "x"
        assert state.draft.owner_id == "o1"

    def test_update_keeps_step(self, review_state):
        state = reduce(review_state, UpdateDraft({"structure": "multistream"}))

        assert state.current_step == REVIEW
        assert state.draft.structure == WorkStructure.MULTISTREAM

    def test_seed_is_idempotent(self, state):
        state = run(
            state,
            UpdateDraft({"success_type": "deliverable"}),
            UpdateDraft({"success_type": "deliverable"}),
        )
        assert len(state.draft.deliverables) == 1

    def test_list_events(self, state):
        state = run(state, UpdateDraft({"success_type": "metric"}), AddItem("metrics"))
        first, second = state.draft.metrics

        state = reduce(state, UpdateItem("metrics", second.id, {"name": "Revenue"}))
        assert state.draft.metrics[1].name == "Revenue"

        state = reduce(state, RemoveItem("metrics", first.id))
        assert [m.id for m in state.draft.metrics] == [second.id]

    def test_unknown_item_field_raises(self, state):
        state = reduce(state, UpdateDraft({"success_type": "deliverable"}))
        item_id = state.draft.deliverables[0].id

        with pytest.raises(ValidationException):
            reduce(state, UpdateItem("deliverables", item_id, {"name": "x"}))

    def test_unknown_item_is_noop(self, state):
        assert reduce(state, UpdateItem("deliverables", "missing", {"title": "x"})) is state
        assert reduce(state, RemoveItem("deliverables", "missing")) is state


class TestModeChanges:

    def test_same_mode_keeps_answers(self, review_state):
        state = run(review_state, JumpTo(0), UpdateDraft({"mode": "guided"}))

        assert state.draft.owner_id == "sarah-chen"
        assert state.max_step_reached == 5

    def test_switching_mode_resets_draft(self, review_state):
        state = run(review_state, JumpTo(0), UpdateDraft({"mode": "quick"}))

        assert state.draft == ProjectDraft(mode=ProjectMode.QUICK)
        assert state.max_step_reached == 0
        assert state.current_step == MODE_SELECT

    def test_mode_ignored_outside_mode_select(self, review_state):
        state = reduce(review_state, UpdateDraft({"mode": "quick", "description": "kept"}))

        assert state.draft.mode == ProjectMode.GUIDED
        assert state.draft.description == "kept"


class TestStepper:

    def test_flags_on_outcome(self, state):
        state = run(state, Advance(), Advance())
        items = {item.index: item for item in stepper_items(state)}

        assert items[1].is_completed and not items[1].is_current
        assert items[2].is_current and not items[2].is_completed
        assert items[2].is_clickable
        assert not items[3].is_clickable

    def test_visited_steps_stay_clickable_after_jump_back(self, review_state):
        state = reduce(review_state, JumpTo(1))
        items = stepper_items(state)

        assert all(item.is_clickable for item in items)
        assert [item.is_completed for item in items] == [False] * 5

    def test_mode_select_has_no_current_item(self):
        assert not any(item.is_current for item in stepper_items(WizardState()))
