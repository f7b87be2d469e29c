"""
prioflow core

- core.types: Task, NormalizedTask, ScheduleStrategy
- core.errors: Structured error hierarchy and ErrorKind
- core.dependency: Validation and dependency graph construction
- core.scheduling: Ranking policy and the prioritize() entry point
- core.config_manager: Scheduler configuration
- core.loader: JSON task file helpers
"""

from prioflow.core.config_manager import ConfigManager, SchedulerConfig, get_config_manager
from prioflow.core.dependency import validate_tasks
from prioflow.core.errors import (
    BusinessError,
    CircularDependencyError,
    ConfigurationError,
    DuplicateIdentifierError,
    ErrorKind,
    InvalidDeadlineError,
    InvalidDependencyError,
    InvalidEffortError,
    InvalidPriorityError,
    PrioflowError,
    TaskValidationError,
    ValidationError,
)
from prioflow.core.loader import dump_tasks, load_tasks
from prioflow.core.scheduling import prioritize, prioritize_ids
from prioflow.core.types import NormalizedTask, ScheduleStrategy, Task

__all__ = [
    "Task",
    "NormalizedTask",
    "ScheduleStrategy",
    "prioritize",
    "prioritize_ids",
    "validate_tasks",
    "load_tasks",
    "dump_tasks",
    "ConfigManager",
    "SchedulerConfig",
    "get_config_manager",
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
