"""
prioflow - Dependency-aware task prioritization

Orders a static task set so that every task follows its dependencies, and
among ready tasks the most urgent goes first (priority, then deadline, then
estimated effort, then id).

Core modules:
- core.types: Task model and ScheduleStrategy
- core.dependency: Validation and cycle detection
- core.scheduling: prioritize()
- core.errors: Error taxonomy

Optional:
- cli: Command line interface
"""

__version__ = "0.1.0"

# Lazy imports keep `import prioflow` cheap for the CLI
__all__ = [
    "Task",
    "ScheduleStrategy",
    "prioritize",
    "prioritize_ids",
    "validate_tasks",
    "load_tasks",
    "dump_tasks",
    "get_config_manager",
    "ErrorKind",
    "PrioflowError",
    "TaskValidationError",
    "InvalidPriorityError",
    "InvalidDependencyError",
    "DuplicateIdentifierError",
    "InvalidDeadlineError",
    "InvalidEffortError",
    "CircularDependencyError",
    "__version__",
]


def __getattr__(name):
    """Lazy import of the public API from prioflow.core"""
    if name in __all__ and name != "__version__":
        import prioflow.core

        return getattr(prioflow.core, name)

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
