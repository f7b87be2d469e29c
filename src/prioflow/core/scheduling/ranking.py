"""
Ranking policy for ready tasks

Keys, most significant first:
    1. priority, descending
    2. deadline, ascending; tasks without a deadline rank after any with one
    3. estimated hours, ascending; tasks without an estimate rank last
    4. task id, lexicographic ascending
"""

from numbers import Real
from typing import Iterable, List, Tuple

from prioflow.core.types import NormalizedTask

RankKey = Tuple[int, bool, float, bool, Real, str]


def rank_key(task: NormalizedTask) -> RankKey:
    """Sort key for a ready task; smaller sorts first"""
    has_deadline = task.deadline is not None
    has_effort = task.estimated_hours is not None
    return (
        -task.priority,
        not has_deadline,
        task.deadline.timestamp() if has_deadline else 0.0,
        not has_effort,
        task.estimated_hours if has_effort else 0.0,
        task.id,
    )


def rank_tasks(tasks: Iterable[NormalizedTask]) -> List[NormalizedTask]:
    """Return tasks in ranked order"""
    return sorted(tasks, key=rank_key)


__all__ = ["RankKey", "rank_key", "rank_tasks"]
