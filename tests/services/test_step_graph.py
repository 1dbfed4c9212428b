# -*- coding: utf-8 -*-
"""
Tests for the wizard step table and step identities.
"""

import pytest

from services.exceptions import StepTableError
from services.wizard.step_validator import StepValidator
from models.project import ProjectDraft
from ui.wizards.project_wizard.step_graph import (
    FIRST_GUIDED_INDEX,
    LAST_GUIDED_INDEX,
    INTENT,
    MODE_SELECT,
    OWNERSHIP,
    QUICK_CREATE,
    REVIEW,
    STEP_TABLE,
    StepKind,
    StepRef,
    StepSpec,
    declared_steps,
    get_step_spec,
    guided_steps,
    step_for_ordinal,
    validate_step_table,
)


def test_step_table_covers_every_step_once():
    by_ref = validate_step_table(STEP_TABLE)
    assert set(by_ref) == set(declared_steps())
    assert len(STEP_TABLE) == 7


def test_missing_step_is_rejected():
    table = [spec for spec in STEP_TABLE if spec.ref != QUICK_CREATE]
    with pytest.raises(StepTableError) as exc_info:
        validate_step_table(table)
    assert any("missing" in error for error in exc_info.value.errors)


def test_duplicate_step_is_rejected():
    table = list(STEP_TABLE) + [StepSpec(INTENT, "intent_again", "Intent", "Again")]
    with pytest.raises(StepTableError):
        validate_step_table(table)


def test_undeclared_step_is_rejected():
    table = list(STEP_TABLE) + [StepSpec(StepRef(StepKind.GUIDED, 9), "extra", "Extra", "Extra")]
    with pytest.raises(StepTableError):
        validate_step_table(table)


def test_ordinals():
    assert MODE_SELECT.ordinal == 0
    assert INTENT.ordinal == 1
    assert REVIEW.ordinal == 5
    assert QUICK_CREATE.ordinal is None


def test_guided_range_follows_step_refs():
    assert FIRST_GUIDED_INDEX == INTENT.index
    assert LAST_GUIDED_INDEX == REVIEW.index
    assert [ref.index for ref in declared_steps() if ref.is_guided] == [1, 2, 3, 4, 5]


def test_step_for_ordinal_bounds():
    assert step_for_ordinal(0) == MODE_SELECT
    assert step_for_ordinal(3) == OWNERSHIP
    assert step_for_ordinal(6) is None
    assert step_for_ordinal(-1) is None


def test_quick_create_is_not_a_guided_step():
    assert QUICK_CREATE not in [spec.ref for spec in guided_steps()]
    assert [spec.label for spec in guided_steps()] == [
        "Project intent",
        "Outcome & success",
        "Ownership",
        "Work structure",
        "Review & create",
    ]


def test_titles():
    assert get_step_spec(OWNERSHIP).title == "Who is responsible for this project?"
    assert get_step_spec(REVIEW).title == "Review project setup"


class TestStepValidator:

    def test_ownership_requires_owner(self):
        is_valid, message = StepValidator.validate_step(OWNERSHIP, ProjectDraft())
        assert is_valid is False
        assert "owner" in message

    def test_ownership_passes_with_owner(self):
        assert StepValidator.can_advance(OWNERSHIP, ProjectDraft(owner_id="sarah-chen"))

    @pytest.mark.parametrize("ordinal", [0, 1, 2, 4, 5])
    def test_other_steps_never_block(self, ordinal):
        assert StepValidator.can_advance(step_for_ordinal(ordinal), ProjectDraft())

    def test_check_step_reports_warnings_without_blocking(self):
        result = StepValidator.check_step(INTENT, ProjectDraft())
        assert result.is_valid is True
        assert result.has_warnings()

    def test_check_step_formats_errors(self):
        result = StepValidator.check_step(OWNERSHIP, ProjectDraft())
        assert result.has_errors()
        assert result.format_messages().startswith("• ")
