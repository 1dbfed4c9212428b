# -*- coding: utf-8 -*-
"""
Step Graph - Fixed step topology of the create project wizard.

States:
    ModeSelect(0) -> Intent(1) -> Outcome(2) -> Ownership(3)
                  -> Structure(4) -> Review(5)
    ModeSelect(0) -> QuickCreate            (only when mode = quick)

Steps are identified by a tagged StepRef rather than a bare integer,
so QuickCreate is a distinct state instead of an out-of-range index.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from services.exceptions import StepTableError


class StepKind(Enum):
    """Kind of wizard step."""
    MODE_SELECT = "modeSelect"
    GUIDED = "guided"
    QUICK_CREATE = "quickCreate"


@dataclass(frozen=True)
class StepRef:
    """Identity of a wizard step: its kind plus the guided index (1..5)."""
    kind: StepKind
    index: Optional[int] = None

    @property
    def ordinal(self) -> Optional[int]:
        """Position on the guided path (ModeSelect = 0, QuickCreate = None)."""
        if self.kind == StepKind.MODE_SELECT:
            return 0
        if self.kind == StepKind.GUIDED:
            return self.index
        return None

    @property
    def is_guided(self) -> bool:
        return self.kind == StepKind.GUIDED

    def __str__(self) -> str:
        if self.kind == StepKind.GUIDED:
            return f"{self.kind.value}:{self.index}"
        return self.kind.value


MODE_SELECT = StepRef(StepKind.MODE_SELECT)
QUICK_CREATE = StepRef(StepKind.QUICK_CREATE)
INTENT = StepRef(StepKind.GUIDED, 1)
OUTCOME = StepRef(StepKind.GUIDED, 2)
OWNERSHIP = StepRef(StepKind.GUIDED, 3)
STRUCTURE = StepRef(StepKind.GUIDED, 4)
REVIEW = StepRef(StepKind.GUIDED, 5)

FIRST_GUIDED_INDEX = INTENT.index
LAST_GUIDED_INDEX = REVIEW.index

# Steps that the Review screen can send the user back to
EDITABLE_FROM_REVIEW = (INTENT, OUTCOME, OWNERSHIP, STRUCTURE)


@dataclass(frozen=True)
class StepSpec:
    """Static description of one step."""
    ref: StepRef
    key: str
    label: str   # stepper label
    title: str   # header title


STEP_TABLE: Tuple[StepSpec, ...] = (
    StepSpec(MODE_SELECT, "mode", "Mode", "Create a new project"),
    StepSpec(INTENT, "intent", "Project intent", "What is this project mainly about?"),
    StepSpec(OUTCOME, "outcome", "Outcome & success", "How do you define success?"),
    StepSpec(OWNERSHIP, "ownership", "Ownership", "Who is responsible for this project?"),
    StepSpec(STRUCTURE, "structure", "Work structure", "How should this project be structured?"),
    StepSpec(REVIEW, "review", "Review & create", "Review project setup"),
    StepSpec(QUICK_CREATE, "quick_create", "Quick create", "Create a project with minimal setup"),
)


def declared_steps() -> List[StepRef]:
    """Every state the wizard can be in."""
    guided = [StepRef(StepKind.GUIDED, i) for i in range(FIRST_GUIDED_INDEX, LAST_GUIDED_INDEX + 1)]
    return [MODE_SELECT] + guided + [QUICK_CREATE]


def validate_step_table(table: Iterable[StepSpec]) -> Dict[StepRef, StepSpec]:
    """
    Check that the table covers every declared step exactly once.

    Returns:
        Mapping of StepRef -> StepSpec

    Raises:
        StepTableError: On missing, duplicate or undeclared entries.
    """
    declared = declared_steps()
    by_ref: Dict[StepRef, StepSpec] = {}
    errors = []

    for spec in table:
        if spec.ref not in declared:
            errors.append(f"undeclared step {spec.ref}")
        elif spec.ref in by_ref:
            errors.append(f"duplicate step {spec.ref}")
        else:
            by_ref[spec.ref] = spec

    for ref in declared:
        if ref not in by_ref:
            errors.append(f"missing step {ref}")

    if errors:
        raise StepTableError("Invalid wizard step table", errors=errors)
    return by_ref


_STEPS_BY_REF = validate_step_table(STEP_TABLE)


def get_step_spec(ref: StepRef) -> StepSpec:
    return _STEPS_BY_REF[ref]


def step_for_ordinal(ordinal: int) -> Optional[StepRef]:
    """Map a guided-path ordinal (0..5) to its step, or None if out of range."""
    if ordinal == 0:
        return MODE_SELECT
    if FIRST_GUIDED_INDEX <= ordinal <= LAST_GUIDED_INDEX:
        return StepRef(StepKind.GUIDED, ordinal)
    return None


def guided_steps() -> List[StepSpec]:
    """Specs of the numbered guided steps, in order."""
    return [spec for spec in STEP_TABLE if spec.ref.is_guided]
