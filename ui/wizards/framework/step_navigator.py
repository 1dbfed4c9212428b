# -*- coding: utf-8 -*-
"""
Step Navigator - Owns wizard state and applies transitions.

Handles:
- Holding the current (immutable) wizard state
- Applying events through a pure reducer
- Emitting Qt signals so views can refresh
"""

from typing import Any, Callable

from PyQt5.QtCore import QObject, pyqtSignal

from utils.logger import get_logger

logger = get_logger(__name__)


class StepNavigator(QObject):
    """
    Applies events to wizard state.

    The reducer decides every transition; the navigator only stores the
    result and notifies listeners when something actually changed.
    """

    # Signals
    state_changed = pyqtSignal(object)  # new state
    step_changed = pyqtSignal(object, object)  # old step, new step

    def __init__(
        self,
        initial_state: Any,
        reducer: Callable[[Any, Any], Any],
        step_of: Callable[[Any], Any],
        parent=None
    ):
        """
        Initialize the navigator.

        Args:
            initial_state: State the wizard opens in
            reducer: Pure function (state, event) -> state
            step_of: Extracts the step identity from a state
            parent: Parent QObject
        """
        super().__init__(parent)
        self._state = initial_state
        self._reducer = reducer
        self._step_of = step_of

    @property
    def state(self) -> Any:
        return self._state

    @property
    def current_step(self) -> Any:
        return self._step_of(self._state)

    def dispatch(self, event: Any) -> Any:
        """
        Apply one event and return the resulting state.

        Events the reducer rejects leave the state untouched and emit nothing.
        """
        old_state = self._state
        new_state = self._reducer(old_state, event)

        if new_state == old_state:
            logger.debug(f"{type(event).__name__}: no change")
            return old_state

        self._state = new_state
        old_step = self._step_of(old_state)
        new_step = self._step_of(new_state)

        if old_step != new_step:
            logger.info(f"Navigating: {old_step} → {new_step}")
            self.step_changed.emit(old_step, new_step)

        self.state_changed.emit(new_state)
        return new_state
