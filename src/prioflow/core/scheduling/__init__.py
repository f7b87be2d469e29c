# Scheduling module exports
from .ranking import rank_key, rank_tasks
from .prioritizer import (
    prioritize,
    prioritize_ids,
    resolve_strategy,
    schedule_batch,
    schedule_single,
)

__all__ = [
    # Ranking
    "rank_key",
    "rank_tasks",
    # Ordering
    "prioritize",
    "prioritize_ids",
    "resolve_strategy",
    "schedule_batch",
    "schedule_single",
]
