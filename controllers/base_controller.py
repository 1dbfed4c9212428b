# -*- coding: utf-8 -*-
"""
Base Controller
===============
Base class for controllers in the projects desktop client.

Controllers run one named operation at a time and report it through
Qt signals: started, then either completed or error. Failures never
escape execute_with_error_handling(); they come back as a
failed OperationResult.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Generic, List, Optional, TypeVar

from PyQt5.QtCore import QObject, pyqtSignal

from services.exceptions import ProjectCreationError, ValidationException
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


@dataclass
class OperationResult(Generic[T]):
    """Outcome of a controller operation."""
    success: bool
    data: Optional[T] = None
    message: str = ""
    errors: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: T = None, message: str = "") -> 'OperationResult[T]':
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str, errors: List[str] = None) -> 'OperationResult[T]':
        return cls(success=False, message=message, errors=list(errors or []))

    @classmethod
    def from_exception(cls, error: Exception) -> 'OperationResult[T]':
        """Failed result carrying the exception's message and detail errors."""
        message = str(error) or type(error).__name__
        return cls.fail(message, errors=getattr(error, "errors", None))


class BaseController(QObject):
    """
    Base controller class.

    Provides:
    - Operation lifecycle signals
    - Loading flag and last error message
    - Exception-to-result conversion
    """

    # Operation lifecycle signals
    operation_started = pyqtSignal(str)  # operation name
    operation_completed = pyqtSignal(str, bool)  # operation name, success
    operation_error = pyqtSignal(str, str)  # operation name, error message
    loading_changed = pyqtSignal(bool)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._is_loading = False
        self._last_error = ""

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def last_error(self) -> str:
        """Message of the most recent failed operation ("" if none)."""
        return self._last_error

    def _set_loading(self, loading: bool):
        if loading != self._is_loading:
            self._is_loading = loading
            self.loading_changed.emit(loading)

    def _log_operation(self, operation: str, **kwargs):
        details = ", ".join(f"{key}={value}" for key, value in kwargs.items())
        logger.info(f"{self.__class__.__name__}.{operation}({details})")

    def _begin(self, operation: str):
        self._last_error = ""
        self.operation_started.emit(operation)
        self._set_loading(True)

    def _succeed(self, operation: str):
        self.operation_completed.emit(operation, True)
        self._set_loading(False)

    def _fail(self, operation: str, result: OperationResult):
        self._last_error = result.message
        self.operation_error.emit(operation, result.message)
        self.operation_completed.emit(operation, False)
        self._set_loading(False)

    def execute_with_error_handling(
        self,
        operation: str,
        func: Callable[..., Any],
        *args,
        **kwargs
    ) -> OperationResult:
        """Run func as a named operation and wrap its outcome in an OperationResult."""
        self._begin(operation)
        try:
            data = func(*args, **kwargs)
        except (ValidationException, ProjectCreationError) as e:
            result = OperationResult.from_exception(e)
            logger.error(f"{self.__class__.__name__}.{operation} rejected: {result.message}")
        except Exception as e:
            result = OperationResult.from_exception(e)
            logger.exception(f"{self.__class__.__name__}.{operation} failed: {result.message}")
        else:
            self._succeed(operation)
            return OperationResult.ok(data=data)

        self._fail(operation, result)
        return result
