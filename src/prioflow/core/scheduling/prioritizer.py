"""
Dependency-aware task prioritization

Orders a validated task set with a Kahn-style topological sort. Tasks move
from blocked to ready the moment their last dependency is scheduled; among
ready tasks the ranking policy in ``ranking`` decides who goes first.

Two strategies are supported (see ScheduleStrategy):

- batch: each round emits every ready task in ranked order. Tasks unblocked
  during a round only become candidates in the next round.
- single: each round emits the single best-ranked ready task.

They are not interchangeable. For A(priority 3), B(priority 5, depends on A)
and C(priority 1), batch yields [A, C, B] while single yields [A, B, C].
"""

import heapq
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from prioflow.core.dependency.resolver import build_dependency_graph, release_dependents
from prioflow.core.dependency.validator import validate_tasks
from prioflow.core.errors import CircularDependencyError, ConfigurationError
from prioflow.core.scheduling.ranking import rank_key, rank_tasks
from prioflow.core.types import NormalizedTask, ScheduleStrategy
from prioflow.logger import get_logger

logger = get_logger(__name__)


def resolve_strategy(strategy: Union[ScheduleStrategy, str, None]) -> ScheduleStrategy:
    """
    Resolve a strategy argument, falling back to the configured default.

    Raises:
        ConfigurationError: If the strategy name is unknown
    """
    if strategy is None:
        from prioflow.core.config_manager import get_config_manager

        return get_config_manager().get_scheduler_config().strategy
    if isinstance(strategy, ScheduleStrategy):
        return strategy
    try:
        return ScheduleStrategy(str(strategy).lower())
    except ValueError as exc:
        valid = ", ".join(s.value for s in ScheduleStrategy)
        raise ConfigurationError(
            f"Unknown schedule strategy '{strategy}'",
            what="Unknown schedule strategy",
            why=f"'{strategy}' is not one of: {valid}",
            how_to_fix=f"Use one of: {valid}",
            context={"strategy": strategy},
        ) from exc


def _raise_stalled(remaining: Mapping[str, int]) -> None:
    stuck = sorted(task_id for task_id, count in remaining.items() if count > 0)
    raise CircularDependencyError(stuck[0], stuck)


def schedule_batch(tasks: Mapping[str, NormalizedTask]) -> List[NormalizedTask]:
    """Emit all ready tasks per round, ranked, then recompute readiness"""
    dependents, remaining = build_dependency_graph(tasks)
    ready = [task for task_id, task in tasks.items() if remaining[task_id] == 0]
    order: List[NormalizedTask] = []
    round_number = 0

    while ready:
        round_number += 1
        ranked = rank_tasks(ready)
        logger.debug(f"Round {round_number}: {[task.id for task in ranked]}")
        next_ready: List[NormalizedTask] = []
        for task in ranked:
            order.append(task)
            for unblocked_id in release_dependents(task.id, dependents, remaining):
                next_ready.append(tasks[unblocked_id])
        ready = next_ready

    if len(order) != len(tasks):
        _raise_stalled(remaining)
    return order


def schedule_single(tasks: Mapping[str, NormalizedTask]) -> List[NormalizedTask]:
    """Emit the single best-ranked ready task per round"""
    dependents, remaining = build_dependency_graph(tasks)
    # rank keys end with the unique id, so heap entries never tie
    heap = [(rank_key(task), task_id) for task_id, task in tasks.items() if remaining[task_id] == 0]
    heapq.heapify(heap)
    order: List[NormalizedTask] = []

    while heap:
        _, task_id = heapq.heappop(heap)
        task = tasks[task_id]
        order.append(task)
        for unblocked_id in release_dependents(task_id, dependents, remaining):
            heapq.heappush(heap, (rank_key(tasks[unblocked_id]), unblocked_id))

    if len(order) != len(tasks):
        _raise_stalled(remaining)
    return order


_SCHEDULERS = {
    ScheduleStrategy.BATCH: schedule_batch,
    ScheduleStrategy.SINGLE: schedule_single,
}


def prioritize(
    tasks: Sequence[Any],
    strategy: Union[ScheduleStrategy, str, None] = None,
) -> List[Any]:
    """
    Prioritize tasks based on dependencies, priority, deadline and estimated effort.

    Algorithm:
    1. Validate all tasks (ids, priority range, dependencies, effort, deadlines)
    2. Detect circular dependencies
    3. Topologically sort, ranking ready tasks by priority (higher first),
       deadline (earlier first), estimated hours (lower first), then id

    Args:
        tasks: Task objects or mappings
        strategy: ScheduleStrategy or its value; None uses the configured default

    Returns:
        The caller's original task records in execution order

    Raises:
        TaskValidationError: If the task set is invalid (see prioflow.core.errors)
        ConfigurationError: If the strategy is unknown
    """
    resolved = resolve_strategy(strategy)
    normalized: Dict[str, NormalizedTask] = validate_tasks(tasks)
    if not normalized:
        return []

    ordered = _SCHEDULERS[resolved](normalized)
    logger.info(f"Prioritized {len(ordered)} tasks using {resolved.value} strategy")
    return [task.source for task in ordered]


def prioritize_ids(
    tasks: Sequence[Any],
    strategy: Optional[Union[ScheduleStrategy, str]] = None,
) -> List[str]:
    """Same as prioritize() but returns task ids only"""
    resolved = resolve_strategy(strategy)
    normalized = validate_tasks(tasks)
    return [task.id for task in _SCHEDULERS[resolved](normalized)] if normalized else []


__all__ = [
    "resolve_strategy",
    "schedule_batch",
    "schedule_single",
    "prioritize",
    "prioritize_ids",
]
