# Dependency module exports
from .validator import (
    collect_task_ids,
    detect_circular_dependencies,
    validate_dependency_references,
    validate_estimated_hours,
    validate_priority,
    validate_tasks,
)
from .resolver import (
    build_dependency_graph,
    release_dependents,
)

__all__ = [
    # Validation
    "collect_task_ids",
    "detect_circular_dependencies",
    "validate_dependency_references",
    "validate_estimated_hours",
    "validate_priority",
    "validate_tasks",
    # Resolution
    "build_dependency_graph",
    "release_dependents",
]
