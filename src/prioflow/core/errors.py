"""
Custom exceptions for task prioritization.

Exception Hierarchy:
    PrioflowError (base)
        └── BusinessError (user/expected errors, no stack trace)
            ├── ConfigurationError (config/environment issues)
            └── ValidationError (input validation failures)
                └── TaskValidationError (carries an ErrorKind)
                    ├── InvalidPriorityError
                    ├── InvalidDependencyError
                    ├── DuplicateIdentifierError
                    ├── InvalidDeadlineError
                    ├── InvalidEffortError
                    └── CircularDependencyError

Usage Guidelines:
    - Every task-level failure carries ``kind`` (an ErrorKind) plus the
      offending ``task_id`` / ``value`` so callers can branch on ``error.kind``
      without isinstance chains
    - Use structured error format: what/why/how_to_fix/context
    - The CLI prints BusinessError messages without a traceback

Structured Error Format:
    All error classes support optional structured information:
    - what: What went wrong (brief description)
    - why: Why it happened (root cause)
    - how_to_fix: How to resolve it (actionable steps)
    - context: Additional context (dict with relevant details)
"""

from enum import Enum
from typing import Any, List, Optional

from prioflow.core.types import PRIORITY_MAX, PRIORITY_MIN


class PrioflowError(RuntimeError):
    """
    Base exception for all prioflow-specific errors.

    Supports structured error information:
    - what: What went wrong
    - why: Why it happened
    - how_to_fix: How to resolve it
    - context: Additional context dict
    """

    def __init__(
        self,
        message: str,
        *,
        what: str | None = None,
        why: str | None = None,
        how_to_fix: str | None = None,
        context: dict | None = None,
    ):
        """
        Initialize error with optional structured information.

        Args:
            message: Error message (used if structured info not provided)
            what: Brief description of what went wrong
            why: Root cause explanation
            how_to_fix: Actionable resolution steps
            context: Additional context dictionary
        """
        self.message = message
        self.what = what
        self.why = why
        self.how_to_fix = how_to_fix
        self.context = context or {}

        if what:
            formatted_msg = f"❌ {what}"
            if why:
                formatted_msg += f"\n\n💡 Reason: {why}"
            if how_to_fix:
                formatted_msg += f"\n\n✅ Solution: {how_to_fix}"
            if context:
                context_str = "\n".join(f"  - {k}: {v}" for k, v in context.items())
                formatted_msg += f"\n\n📝 Context:\n{context_str}"
            super().__init__(formatted_msg)
        else:
            super().__init__(message)


class BusinessError(PrioflowError):
    """
    Base exception for expected/user-facing failures.

    These represent bad input or bad configuration and never need a stack
    trace to diagnose.
    """

    pass


class ConfigurationError(BusinessError):
    """
    Configuration-specific business error.

    Example:
        >>> raise ConfigurationError("Unknown schedule strategy 'fifo'")
    """

    pass


class ValidationError(BusinessError):
    """
    Validation-specific business error.

    Use this for input validation failures or constraint violations caused
    by user input.
    """

    pass


class ErrorKind(str, Enum):
    """Discriminator for task validation failures"""

    INVALID_INPUT = "invalid_input"
    INVALID_PRIORITY = "invalid_priority"
    INVALID_DEPENDENCY = "invalid_dependency"
    DUPLICATE_IDENTIFIER = "duplicate_identifier"
    INVALID_DEADLINE = "invalid_deadline"
    INVALID_EFFORT = "invalid_effort"
    CIRCULAR_DEPENDENCY = "circular_dependency"


class TaskValidationError(ValidationError):
    """
    A task set failed validation.

    ``kind`` identifies the failure; ``task_id`` and ``value`` identify the
    offending record and field value where applicable.
    """

    kind: ErrorKind = ErrorKind.INVALID_INPUT

    def __init__(
        self,
        message: str,
        *,
        task_id: Optional[str] = None,
        value: Any = None,
        kind: Optional[ErrorKind] = None,
        **kwargs: Any,
    ):
        if kind is not None:
            self.kind = kind
        self.task_id = task_id
        self.value = value
        super().__init__(message, **kwargs)


class InvalidPriorityError(TaskValidationError):
    """Priority outside the closed range [PRIORITY_MIN, PRIORITY_MAX]"""

    kind = ErrorKind.INVALID_PRIORITY

    def __init__(self, task_id: str, priority: Any):
        super().__init__(
            f'Task "{task_id}" has invalid priority {priority!r}. '
            f"Priority must be between {PRIORITY_MIN} and {PRIORITY_MAX}.",
            task_id=task_id,
            value=priority,
        )


class InvalidDependencyError(TaskValidationError):
    """Dependency references a task id that is not in the task set"""

    kind = ErrorKind.INVALID_DEPENDENCY

    def __init__(self, task_id: str, dependency_id: Any):
        self.dependency_id = dependency_id
        super().__init__(
            f'Task "{task_id}" has dependency on non-existent task "{dependency_id}".',
            task_id=task_id,
            value=dependency_id,
        )


class DuplicateIdentifierError(TaskValidationError):
    """Two tasks share the same id"""

    kind = ErrorKind.DUPLICATE_IDENTIFIER

    def __init__(self, task_id: str):
        super().__init__(
            f'Duplicate task id "{task_id}".',
            task_id=task_id,
            value=task_id,
        )


class InvalidDeadlineError(TaskValidationError):
    """Deadline value cannot be interpreted as a point in time"""

    kind = ErrorKind.INVALID_DEADLINE

    def __init__(self, value: Any, task_id: Optional[str] = None):
        owner = f'Task "{task_id}" has invalid' if task_id else "Invalid"
        super().__init__(
            f"{owner} deadline {value!r}. Use a datetime, a date, or an ISO-8601 string.",
            task_id=task_id,
            value=value,
        )


class InvalidEffortError(TaskValidationError):
    """Estimated hours negative or not a number"""

    kind = ErrorKind.INVALID_EFFORT

    def __init__(self, task_id: str, estimated_hours: Any):
        super().__init__(
            f'Task "{task_id}" has invalid estimated hours {estimated_hours!r}. '
            f"Estimated hours must be a non-negative number.",
            task_id=task_id,
            value=estimated_hours,
        )


class CircularDependencyError(TaskValidationError):
    """The dependency graph contains a cycle"""

    kind = ErrorKind.CIRCULAR_DEPENDENCY

    def __init__(self, task_id: str, cycle: Optional[List[str]] = None):
        self.cycle = list(cycle) if cycle else []
        message = f'Circular dependency detected involving task "{task_id}".'
        if len(self.cycle) > 1:
            message += f" Cycle: {' -> '.join(self.cycle)}."
        super().__init__(message, task_id=task_id, value=self.cycle or None)


__all__ = [
    "PrioflowError",
    "BusinessError",
    "ConfigurationError",
    "ValidationError",
    "ErrorKind",
    "TaskValidationError",
    "InvalidPriorityError",
    "InvalidDependencyError",
    "DuplicateIdentifierError",
    "InvalidDeadlineError",
    "InvalidEffortError",
    "CircularDependencyError",
]
