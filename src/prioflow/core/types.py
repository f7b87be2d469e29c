"""Shared type definitions for task prioritization."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from numbers import Real
from typing import Any, Mapping, Optional, Tuple, Union

PRIORITY_MIN = 1
PRIORITY_MAX = 5

DeadlineValue = Union[datetime, date, str, None]

_MISSING = object()


class ScheduleStrategy(str, Enum):
    """
    How ready tasks are drained at each scheduling round.

    batch: emit every ready task of the round in ranked order, then
        recompute readiness (dependency-level batching)
    single: emit only the best-ranked ready task, then recompute readiness
    """

    BATCH = "batch"
    SINGLE = "single"


@dataclass
class Task:
    """
    A unit of work to be ordered.

    Callers may pass these or plain mappings with the same keys
    (``estimatedHours`` is accepted as an alias of ``estimated_hours``).
    """

    id: str
    priority: int
    name: Optional[str] = None
    deadline: DeadlineValue = None
    dependencies: list = field(default_factory=list)
    estimated_hours: Optional[float] = None

    def __post_init__(self) -> None:
        if self.name is None:
            self.name = self.id

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict, keeping deadline strings as given"""
        deadline = self.deadline
        if isinstance(deadline, (datetime, date)):
            deadline = deadline.isoformat()
        return {
            "id": self.id,
            "name": self.name,
            "deadline": deadline,
            "priority": self.priority,
            "dependencies": list(self.dependencies),
            "estimatedHours": self.estimated_hours,
        }


@dataclass(frozen=True)
class NormalizedTask:
    """
    Internal, validated view of a caller task.

    ``deadline`` is always timezone-aware UTC; ``source`` is the caller's
    original record and is what the scheduler emits.
    """

    id: str
    priority: int
    deadline: Optional[datetime]
    dependencies: Tuple[str, ...]
    estimated_hours: Optional[Real]
    source: Any = field(compare=False, repr=False)


# Attribute / key aliases, first non-None match wins
FIELD_ALIASES: dict[str, Tuple[str, ...]] = {
    "id": ("id",),
    "name": ("name",),
    "deadline": ("deadline",),
    "priority": ("priority",),
    "dependencies": ("dependencies",),
    "estimated_hours": ("estimated_hours", "estimatedHours"),
}


def get_task_field(task: Any, field_name: str, default: Any = None) -> Any:
    """
    Read a task field from either a mapping or an object.

    Args:
        task: Caller task record (mapping or object)
        field_name: Canonical field name (see FIELD_ALIASES)
        default: Value returned when every alias is absent or None

    Returns:
        The field value, or ``default``
    """
    for alias in FIELD_ALIASES.get(field_name, (field_name,)):
        if isinstance(task, Mapping):
            value = task.get(alias, _MISSING)
        else:
            value = getattr(task, alias, _MISSING)
        if value is not _MISSING and value is not None:
            return value
    return default


def get_dependency_id(dep: Any) -> Optional[str]:
    """Extract a dependency id from a string or a mapping with an 'id' key"""
    if isinstance(dep, Mapping):
        dep_id = dep.get("id")
    else:
        dep_id = dep
    return dep_id if isinstance(dep_id, str) and dep_id else None


__all__ = [
    "PRIORITY_MIN",
    "PRIORITY_MAX",
    "DeadlineValue",
    "ScheduleStrategy",
    "Task",
    "NormalizedTask",
    "get_task_field",
    "get_dependency_id",
]
