"""
Dependency validation utilities for task prioritization

This module provides reusable functions for validating a task set before it
is ordered: identifier uniqueness, per-task field checks, dependency reference
validation and circular dependency detection.

All validation logic is centralized here for maintainability.
"""

from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Sequence, Set, Tuple

from prioflow.core.errors import (
    CircularDependencyError,
    DuplicateIdentifierError,
    InvalidDeadlineError,
    InvalidDependencyError,
    InvalidEffortError,
    InvalidPriorityError,
    TaskValidationError,
)
from prioflow.core.types import (
    PRIORITY_MAX,
    PRIORITY_MIN,
    NormalizedTask,
    get_dependency_id,
    get_task_field,
)
from prioflow.core.utils.helpers import parse_deadline
from prioflow.logger import get_logger

logger = get_logger(__name__)


def _ensure_task_sequence(tasks: Any) -> Sequence[Any]:
    if isinstance(tasks, (str, bytes, Mapping)) or not isinstance(tasks, (list, tuple)):
        raise TaskValidationError(
            "Invalid input: tasks must be a list",
            what="Invalid task input",
            why=f"Expected a list of tasks, got {type(tasks).__name__}",
            how_to_fix="Pass a list (or tuple) of task records",
        )
    return tasks


def collect_task_ids(tasks: Sequence[Any]) -> Dict[str, Any]:
    """
    Map task id to the caller record, checking ids are present and unique.

    Args:
        tasks: Caller task records

    Returns:
        Insertion-ordered mapping of id to record

    Raises:
        TaskValidationError: If a task has no usable id
        DuplicateIdentifierError: If two tasks share an id
    """
    by_id: Dict[str, Any] = {}
    for index, task in enumerate(tasks):
        task_id = get_task_field(task, "id")
        if not isinstance(task_id, str) or not task_id:
            raise TaskValidationError(
                f"Invalid task at index {index}: missing id",
                value=task_id,
                what="Invalid task: missing id",
                why=f"Task at index {index} has id {task_id!r}",
                how_to_fix="Give every task a non-empty string id",
                context={"index": index},
            )
        if task_id in by_id:
            raise DuplicateIdentifierError(task_id)
        by_id[task_id] = task
    return by_id


def validate_priority(task_id: str, priority: Any) -> int:
    """Priority must be an integer in [PRIORITY_MIN, PRIORITY_MAX]; no clamping"""
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise InvalidPriorityError(task_id, priority)
    if priority < PRIORITY_MIN or priority > PRIORITY_MAX:
        raise InvalidPriorityError(task_id, priority)
    return priority


def validate_dependency_references(
    task_id: str,
    dependencies: Any,
    known_ids: Mapping[str, Any],
) -> Tuple[str, ...]:
    """
    Validate that all dependency references exist in the task set.

    Args:
        task_id: ID of the task owning the dependencies
        dependencies: Dependency entries (task ids or dicts with 'id'), or None
        known_ids: All task ids of the set

    Returns:
        De-duplicated dependency ids in declaration order

    Raises:
        InvalidDependencyError: If any dependency reference is not found
    """
    if dependencies is None:
        return ()
    if isinstance(dependencies, (str, bytes, Mapping)) or not isinstance(
        dependencies, (list, tuple, set, frozenset)
    ):
        raise InvalidDependencyError(task_id, dependencies)

    resolved: Dict[str, None] = {}
    for dep in dependencies:
        dep_id = get_dependency_id(dep)
        if dep_id is None or dep_id not in known_ids:
            raise InvalidDependencyError(task_id, dep_id if dep_id is not None else dep)
        resolved[dep_id] = None
    return tuple(resolved)


def validate_estimated_hours(task_id: str, estimated_hours: Any) -> Optional[Real]:
    """Estimated hours are optional but must be a non-negative number when set"""
    if estimated_hours is None:
        return None
    if isinstance(estimated_hours, bool) or not isinstance(estimated_hours, Real):
        raise InvalidEffortError(task_id, estimated_hours)
    # NaN fails this comparison as well
    if not estimated_hours >= 0:
        raise InvalidEffortError(task_id, estimated_hours)
    # kept as given: float() overflows on large ints, and int/float compare exactly
    return estimated_hours


def detect_circular_dependencies(dependency_graph: Mapping[str, Sequence[str]]) -> None:
    """
    Detect circular dependencies using DFS.

    Two markers are kept for the duration of this call only: ``finished``
    (fully explored, acyclic below) and the current path. Reaching a node on
    the current path is a cycle; reaching a finished node short-circuits.

    Args:
        dependency_graph: task id -> ids it depends on

    Raises:
        CircularDependencyError: If a cycle exists; names the task that closes it
    """
    finished: Set[str] = set()

    for root in dependency_graph:
        if root in finished:
            continue

        path: List[str] = [root]
        on_path: Set[str] = {root}
        stack = [iter(dependency_graph.get(root, ()))]

        while stack:
            node = path[-1]
            dep = next(stack[-1], None)
            if dep is None:
                stack.pop()
                path.pop()
                on_path.discard(node)
                finished.add(node)
                continue
            if dep in on_path:
                cycle = path[path.index(dep):] + [dep]
                logger.debug(f"Circular dependency found: {' -> '.join(cycle)}")
                raise CircularDependencyError(dep, cycle)
            if dep in finished or dep not in dependency_graph:
                continue
            path.append(dep)
            on_path.add(dep)
            stack.append(iter(dependency_graph[dep]))


def validate_tasks(tasks: Sequence[Any]) -> Dict[str, NormalizedTask]:
    """
    Validate a task set and return its normalized form.

    Per-task checks (priority, dependency references, effort, deadline) run
    for every task before the cycle check, so structural defects are always
    reported ahead of cycles. Input records are not modified.

    Args:
        tasks: Caller task records (Task objects or mappings)

    Returns:
        Insertion-ordered mapping of task id to NormalizedTask

    Raises:
        TaskValidationError: On the first violation found
    """
    tasks = _ensure_task_sequence(tasks)
    by_id = collect_task_ids(tasks)

    normalized: Dict[str, NormalizedTask] = {}
    try:
        for task_id, task in by_id.items():
            priority = validate_priority(task_id, get_task_field(task, "priority"))
            dependencies = validate_dependency_references(
                task_id, get_task_field(task, "dependencies"), by_id
            )
            estimated_hours = validate_estimated_hours(
                task_id, get_task_field(task, "estimated_hours")
            )
            raw_deadline = get_task_field(task, "deadline")
            try:
                deadline = parse_deadline(raw_deadline)
            except InvalidDeadlineError as exc:
                raise InvalidDeadlineError(raw_deadline, task_id=task_id) from exc

            normalized[task_id] = NormalizedTask(
                id=task_id,
                priority=priority,
                deadline=deadline,
                dependencies=dependencies,
                estimated_hours=estimated_hours,
                source=task,
            )

        detect_circular_dependencies(
            {task_id: entry.dependencies for task_id, entry in normalized.items()}
        )
    except TaskValidationError as exc:
        logger.debug(f"Task validation failed ({exc.kind.value}): {exc.message}")
        raise

    return normalized


__all__ = [
    "collect_task_ids",
    "validate_priority",
    "validate_dependency_references",
    "validate_estimated_hours",
    "detect_circular_dependencies",
    "validate_tasks",
]
