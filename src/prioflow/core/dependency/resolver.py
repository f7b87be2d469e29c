"""
Dependency graph construction for task scheduling

The graph is derived per scheduling call from validated tasks and is never
stored: edges point from a dependency to the tasks that depend on it.
"""

from typing import Dict, List, Mapping, Tuple

from prioflow.core.types import NormalizedTask


def build_dependency_graph(
    tasks: Mapping[str, NormalizedTask],
) -> Tuple[Dict[str, List[str]], Dict[str, int]]:
    """
    Build the dependents adjacency and the unsatisfied-dependency counts.

    Args:
        tasks: Validated tasks keyed by id

    Returns:
        (dependents, remaining) where dependents maps a task id to the ids that
        depend on it, and remaining maps a task id to its dependency count
    """
    dependents: Dict[str, List[str]] = {task_id: [] for task_id in tasks}
    remaining: Dict[str, int] = {task_id: 0 for task_id in tasks}
    for task_id, task in tasks.items():
        for dep_id in task.dependencies:
            dependents[dep_id].append(task_id)
            remaining[task_id] += 1
    return dependents, remaining


def release_dependents(
    task_id: str,
    dependents: Mapping[str, List[str]],
    remaining: Dict[str, int],
) -> List[str]:
    """
    Mark a task as scheduled and return the dependents it unblocked.

    Args:
        task_id: The task that was just scheduled
        dependents: dependency -> dependent ids
        remaining: Unsatisfied dependency counts, updated in place

    Returns:
        Ids whose last unsatisfied dependency was ``task_id``
    """
    unblocked = []
    for dependent_id in dependents[task_id]:
        remaining[dependent_id] -= 1
        if remaining[dependent_id] == 0:
            unblocked.append(dependent_id)
    return unblocked


__all__ = ["build_dependency_graph", "release_dependents"]
