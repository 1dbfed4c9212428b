# -*- coding: utf-8 -*-
"""
Project Wizard Controller
=========================
Controller for the create project wizard.

Handles:
- Step navigation (advance, retreat, jump, edit from review)
- Draft updates and deliverable/metric list edits
- Finalization through an external creation sink
- Closing the wizard and discarding its state

Views call the operations below and redraw from the emitted signals.
Every operation returns the resulting WizardState, or None once the
wizard has closed.
"""

from typing import Any, Callable, Dict, List, Optional

from PyQt5.QtCore import pyqtSignal

from controllers.base_controller import BaseController
from models.project import ProjectDraft
from services.exceptions import ProjectCreationError
from services.people_directory import PeopleDirectory
from services.wizard.draft_accumulator import DELIVERABLES, METRICS
from services.wizard.review_summary import ReviewSummary, build_review
from services.wizard.step_validator import StepValidator
from ui.wizards.framework import StepNavigator, StepValidationResult
from ui.wizards.project_wizard.project_context import ProjectContext
from ui.wizards.project_wizard.step_graph import MODE_SELECT, StepRef
from ui.wizards.project_wizard.wizard_state import (
    AddItem,
    Advance,
    EditFromReview,
    JumpTo,
    RemoveItem,
    Retreat,
    StepperItem,
    UpdateDraft,
    UpdateItem,
    WizardState,
    reduce,
    stepper_items,
)
from utils.logger import get_logger

logger = get_logger(__name__)

# Receives the finalized draft; raising or returning False rejects it.
CreationSink = Callable[[ProjectDraft], Optional[bool]]


class ProjectWizardController(BaseController):
    """
    Controller for the create project wizard.

    Owns a StepNavigator over WizardState and the session context.
    """

    # Signals
    state_changed = pyqtSignal(object)  # WizardState
    step_changed = pyqtSignal(object, object)  # old StepRef, new StepRef
    draft_changed = pyqtSignal(object)  # ProjectDraft
    project_created = pyqtSignal(dict)  # completion payload
    creation_failed = pyqtSignal(str)  # error message
    wizard_closed = pyqtSignal(bool)  # True when closed by a successful create

    def __init__(
        self,
        creation_sink: Optional[CreationSink] = None,
        directory: Optional[PeopleDirectory] = None,
        user_id: Optional[str] = None,
        parent=None
    ):
        super().__init__(parent)
        self._creation_sink = creation_sink
        self.directory = directory or PeopleDirectory()
        self.context = ProjectContext(user_id=user_id)

        self.navigator: Optional[StepNavigator] = StepNavigator(
            WizardState(),
            reduce,
            lambda state: state.current_step,
            parent=self,
        )
        self.navigator.step_changed.connect(self.step_changed)
        self.navigator.state_changed.connect(self._on_state_changed)
        self._last_draft = self.navigator.state.draft

        logger.info(f"Create project wizard opened ({self.context.reference_number})")

    # ==================== Properties ====================

    @property
    def is_open(self) -> bool:
        return self.navigator is not None

    @property
    def state(self) -> Optional[WizardState]:
        """Current wizard state (None once closed)."""
        return self.navigator.state if self.navigator else None

    @property
    def draft(self) -> Optional[ProjectDraft]:
        return self.state.draft if self.navigator else None

    @property
    def current_step(self) -> Optional[StepRef]:
        return self.state.current_step if self.navigator else None

    @property
    def max_step_reached(self) -> int:
        return self.state.max_step_reached if self.navigator else 0

    # ==================== Queries ====================

    def can_advance(self) -> bool:
        """Whether Next is enabled on the current step."""
        if not self.is_open:
            return False
        return StepValidator.can_advance(self.current_step, self.draft)

    def can_retreat(self) -> bool:
        return self.is_open and self.current_step != MODE_SELECT

    def validate_current_step(self) -> StepValidationResult:
        if not self.is_open:
            return StepValidationResult.ok()
        return StepValidator.check_step(self.current_step, self.draft)

    def current_title(self) -> str:
        return self.state.current_title if self.is_open else ""

    def stepper_items(self) -> List[StepperItem]:
        return stepper_items(self.state) if self.is_open else []

    def review(self) -> Optional[ReviewSummary]:
        """Review projection of the current draft."""
        if not self.is_open:
            return None
        return build_review(self.draft, self.directory)

    # ==================== Navigation ====================

    def advance(self) -> Optional[WizardState]:
        """Next step; on Review or QuickCreate this creates the project."""
        if not self.is_open:
            return None
        if self.state.is_review or self.state.is_quick_create:
            return self.create()
        return self._dispatch(Advance())

    def retreat(self) -> Optional[WizardState]:
        return self._dispatch(Retreat())

    def jump_to(self, index: int) -> Optional[WizardState]:
        """Jump to a visited step by its guided ordinal (0 = mode selection)."""
        return self._dispatch(JumpTo(index))

    def edit_from_review(self, index: int) -> Optional[WizardState]:
        return self._dispatch(EditFromReview(index))

    # ==================== Draft ====================

    def update_draft(self, partial: Optional[Dict[str, Any]] = None, **fields) -> Optional[WizardState]:
        """Merge fields into the draft; accepts a dict, keywords, or both."""
        merged = dict(partial or {})
        merged.update(fields)
        return self._dispatch(UpdateDraft(merged))

    def add_deliverable(self) -> Optional[WizardState]:
        return self._dispatch(AddItem(DELIVERABLES))

    def update_deliverable(self, item_id: str, partial: Dict[str, Any]) -> Optional[WizardState]:
        return self._dispatch(UpdateItem(DELIVERABLES, item_id, dict(partial)))

    def remove_deliverable(self, item_id: str) -> Optional[WizardState]:
        return self._dispatch(RemoveItem(DELIVERABLES, item_id))

    def add_metric(self) -> Optional[WizardState]:
        return self._dispatch(AddItem(METRICS))

    def update_metric(self, item_id: str, partial: Dict[str, Any]) -> Optional[WizardState]:
        return self._dispatch(UpdateItem(METRICS, item_id, dict(partial)))

    def remove_metric(self, item_id: str) -> Optional[WizardState]:
        return self._dispatch(RemoveItem(METRICS, item_id))

    # ==================== Lifecycle ====================

    def create(self) -> Optional[WizardState]:
        """
        Finalize the draft from Review or QuickCreate.

        The sink is invoked once. If it raises or returns False the wizard
        stays open with the draft preserved and the current state is returned.
        """
        if not self.is_open:
            return None
        state = self.state
        if not (state.is_review or state.is_quick_create):
            logger.debug(f"Create ignored on {state.current_step}")
            return state

        self._log_operation("create", reference=self.context.reference_number)
        result = self.execute_with_error_handling("create_project", self._submit, state.draft)

        if not result.success:
            self.creation_failed.emit(result.message)
            return self.state

        payload = self.context.build_payload(state.draft)
        self.context.mark_completed()
        self.project_created.emit(payload)
        logger.info(f"Project created ({self.context.reference_number})")
        self._discard(created=True)
        return None

    def close(self) -> None:
        """Cancel the wizard; always legal, discards all state."""
        if not self.is_open:
            return None
        self.context.mark_cancelled()
        logger.info(f"Create project wizard cancelled ({self.context.reference_number})")
        self._discard(created=False)
        return None

    # ==================== Internals ====================

    def _submit(self, draft: ProjectDraft):
        if self._creation_sink is None:
            return None
        accepted = self._creation_sink(draft)
        if accepted is False:
            raise ProjectCreationError(
                "Project creation was rejected",
                reference_number=self.context.reference_number
            )
        return accepted

    def _dispatch(self, event) -> Optional[WizardState]:
        if not self.is_open:
            logger.debug(f"{type(event).__name__} ignored: wizard is closed")
            return None
        return self.navigator.dispatch(event)

    def _on_state_changed(self, state: WizardState):
        self.context.touch()
        self.state_changed.emit(state)
        if state.draft != self._last_draft:
            self._last_draft = state.draft
            self.draft_changed.emit(state.draft)

    def _discard(self, created: bool):
        navigator = self.navigator
        self.navigator = None
        navigator.step_changed.disconnect()
        navigator.state_changed.disconnect()
        navigator.deleteLater()
        self.wizard_closed.emit(created)
