"""
Unit tests for prioflow.core.scheduling.prioritizer
"""

import copy
import itertools
from datetime import date, datetime, timezone

import pytest

from prioflow.core.errors import (
    CircularDependencyError,
    ConfigurationError,
    ErrorKind,
    InvalidDependencyError,
)
from prioflow.core.config_manager import get_config_manager
from prioflow.core.scheduling import prioritizer
from prioflow.core.scheduling.prioritizer import (
    prioritize,
    prioritize_ids,
    resolve_strategy,
    schedule_batch,
    schedule_single,
)
from prioflow.core.types import NormalizedTask, ScheduleStrategy, Task


def ids(tasks):
    return [t["id"] if isinstance(t, dict) else t.id for t in tasks]


class TestBasicOrdering:
    """Core ordering properties"""

    def test_empty_input(self):
        assert prioritize([]) == []
        assert prioritize([], strategy="single") == []

    def test_concrete_scenario_batch(self, task_factory):
        """A(3), B(5, depends on A), C(1) -> A, C, B"""
        tasks = [
            task_factory("A", priority=3),
            task_factory("B", priority=5, dependencies=["A"]),
            task_factory("C", priority=1),
        ]
        assert ids(prioritize(tasks)) == ["A", "C", "B"]

    def test_concrete_scenario_single(self, task_factory):
        """Single-pick lets B overtake C once A is done"""
        tasks = [
            task_factory("A", priority=3),
            task_factory("B", priority=5, dependencies=["A"]),
            task_factory("C", priority=1),
        ]
        assert ids(prioritize(tasks, strategy=ScheduleStrategy.SINGLE)) == ["A", "B", "C"]

    def test_priority_dominance_among_roots(self, task_factory):
        tasks = [task_factory("low", priority=1), task_factory("high", priority=5)]
        assert ids(prioritize(tasks)) == ["high", "low"]

    def test_id_tie_break_is_reproducible(self, task_factory):
        tasks = [task_factory(task_id, priority=2) for task_id in ("b", "c", "a")]
        first = ids(prioritize(tasks))
        assert first == ["a", "b", "c"]
        for _ in range(5):
            assert ids(prioritize(list(reversed(tasks)))) == first

    def test_deadline_ordering(self, task_factory):
        tasks = [
            task_factory("none", priority=3),
            task_factory("march", priority=3, deadline="2026-03-01"),
            task_factory("feb", priority=3, deadline=datetime(2026, 2, 1, tzinfo=timezone.utc)),
        ]
        assert ids(prioritize(tasks)) == ["feb", "march", "none"]

    def test_priority_outranks_deadline(self, task_factory):
        tasks = [
            task_factory("urgent_date", priority=2, deadline="2026-01-01"),
            task_factory("high", priority=4, deadline="2030-01-01"),
        ]
        assert ids(prioritize(tasks)) == ["high", "urgent_date"]

    def test_effort_ordering(self, task_factory):
        tasks = [
            task_factory("none", priority=3),
            task_factory("five", priority=3, hours=5),
            task_factory("one", priority=3, hours=1),
            task_factory("zero", priority=3, hours=0),
        ]
        assert ids(prioritize(tasks)) == ["zero", "one", "five", "none"]

    def test_huge_effort_ranks_after_smaller(self, task_factory):
        tasks = [
            task_factory("huge", priority=3, hours=10**400),
            task_factory("small", priority=3, hours=2.5),
        ]
        assert ids(prioritize(tasks)) == ["small", "huge"]

    def test_deadline_outranks_effort(self, task_factory):
        tasks = [
            task_factory("quick", priority=3, deadline="2026-06-01", hours=1),
            task_factory("soon", priority=3, deadline="2026-05-01", hours=10),
        ]
        assert ids(prioritize(tasks)) == ["soon", "quick"]

    def test_mixed_deadline_representations(self, task_factory):
        """Naive datetimes are UTC; dates are midnight UTC"""
        tasks = [
            task_factory("naive", deadline=datetime(2026, 1, 1, 12, 0)),
            task_factory("aware", deadline=datetime(2026, 1, 1, 11, 0, tzinfo=timezone.utc)),
            task_factory("day", deadline=date(2026, 1, 2)),
            task_factory("text", deadline="2026-01-01T23:00:00Z"),
        ]
        assert ids(prioritize(tasks)) == ["aware", "naive", "text", "day"]


class TestDependencies:
    """Dependency handling"""

    @pytest.mark.parametrize("strategy", ["batch", "single"])
    def test_dependencies_precede_dependents(self, task_factory, strategy):
        tasks = [
            task_factory("deploy", priority=5, dependencies=["test", "build"]),
            task_factory("test", priority=4, dependencies=["build"]),
            task_factory("build", priority=1, dependencies=["design"]),
            task_factory("design", priority=2),
            task_factory("docs", priority=5, dependencies=["design"]),
            task_factory("chore", priority=1),
        ]
        ordered = ids(prioritize(tasks, strategy=strategy))
        position = {task_id: index for index, task_id in enumerate(ordered)}
        for task in tasks:
            for dep in task["dependencies"]:
                assert position[dep] < position[task["id"]]
        assert sorted(ordered) == sorted(t["id"] for t in tasks)

    def test_batch_rounds_follow_dependency_levels(self, task_factory):
        tasks = [
            task_factory("A", priority=1),
            task_factory("C", priority=1),
            task_factory("B", priority=5, dependencies=["A"]),
            task_factory("D", priority=4, dependencies=["C"]),
        ]
        assert ids(prioritize(tasks, strategy="batch")) == ["A", "C", "B", "D"]
        assert ids(prioritize(tasks, strategy="single")) == ["A", "B", "C", "D"]

    def test_dependency_entries_as_dicts(self, task_factory):
        tasks = [
            task_factory("A", priority=1),
            {"id": "B", "priority": 5, "dependencies": [{"id": "A"}]},
        ]
        assert ids(prioritize(tasks)) == ["A", "B"]

    def test_repeated_dependency_entries(self, task_factory):
        tasks = [
            task_factory("A", priority=1),
            task_factory("B", priority=5, dependencies=["A", "A"]),
        ]
        assert ids(prioritize(tasks, strategy="single")) == ["A", "B"]
        assert ids(prioritize(tasks, strategy="batch")) == ["A", "B"]

    def test_permutation_on_all_input_orders(self, task_factory):
        tasks = [
            task_factory("A", priority=2),
            task_factory("B", priority=4, dependencies=["A"]),
            task_factory("C", priority=4, deadline="2026-01-01"),
            task_factory("D", priority=1, dependencies=["B", "C"]),
        ]
        expected = ids(prioritize(tasks))
        for permutation in itertools.permutations(tasks):
            assert ids(prioritize(list(permutation))) == expected

    def test_cycle_raises(self, task_factory):
        tasks = [
            task_factory("A", dependencies=["B"]),
            task_factory("B", dependencies=["A"]),
        ]
        with pytest.raises(CircularDependencyError) as exc:
            prioritize(tasks)
        assert exc.value.kind is ErrorKind.CIRCULAR_DEPENDENCY
        assert exc.value.task_id in {"A", "B"}

    def test_self_dependency_raises(self, task_factory):
        with pytest.raises(CircularDependencyError):
            prioritize([task_factory("A", dependencies=["A"])])

    def test_missing_dependency_raises(self, task_factory):
        with pytest.raises(InvalidDependencyError) as exc:
            prioritize([task_factory("A", dependencies=["ghost"])])
        assert exc.value.task_id == "A"
        assert exc.value.dependency_id == "ghost"
        assert "A" in str(exc.value) and "ghost" in str(exc.value)


class TestCallerRecords:
    """Output references the caller's records, untouched"""

    def test_returns_same_objects(self, task_factory):
        tasks = [task_factory("A", deadline="2026-01-05"), task_factory("B", priority=5)]
        result = prioritize(tasks)
        assert result[0] is tasks[1]
        assert result[1] is tasks[0]

    def test_deadline_representation_preserved(self, task_factory):
        when = datetime(2026, 1, 5, 9, 30)
        tasks = [task_factory("A", deadline="2026-01-05"), task_factory("B", deadline=when)]
        result = {t["id"]: t for t in prioritize(tasks)}
        assert result["A"]["deadline"] == "2026-01-05"
        assert result["B"]["deadline"] is when

    def test_input_not_mutated(self, task_factory):
        tasks = [
            task_factory("A", deadline="2026-01-05", hours=2),
            task_factory("B", priority=5, dependencies=["A", "A"]),
        ]
        snapshot = copy.deepcopy(tasks)
        prioritize(tasks)
        assert tasks == snapshot

    def test_task_dataclass_input(self):
        tasks = [
            Task(id="write", priority=2, deadline=date(2026, 2, 1), estimated_hours=3),
            Task(id="review", priority=5, dependencies=["write"]),
            Task(id="plan", priority=2, deadline=date(2026, 1, 15)),
        ]
        result = prioritize(tasks)
        assert [t.id for t in result] == ["plan", "write", "review"]
        assert result[1].deadline == date(2026, 2, 1)

    def test_prioritize_ids(self, task_factory):
        tasks = [task_factory("A", priority=1), task_factory("B", priority=2)]
        assert prioritize_ids(tasks) == ["B", "A"]
        assert prioritize_ids([]) == []


class TestStrategies:
    """Strategy resolution and defensive stall detection"""

    def test_resolve_strategy_values(self):
        assert resolve_strategy("batch") is ScheduleStrategy.BATCH
        assert resolve_strategy("SINGLE") is ScheduleStrategy.SINGLE
        assert resolve_strategy(ScheduleStrategy.SINGLE) is ScheduleStrategy.SINGLE

    def test_resolve_strategy_default_is_batch(self):
        assert resolve_strategy(None) is ScheduleStrategy.BATCH

    def test_unknown_strategy(self, task_factory):
        with pytest.raises(ConfigurationError, match="Unknown schedule strategy"):
            prioritize([task_factory("A")], strategy="fifo")

    def test_configured_default_strategy(self, task_factory):
        tasks = [
            task_factory("A", priority=3),
            task_factory("B", priority=5, dependencies=["A"]),
            task_factory("C", priority=1),
        ]
        get_config_manager().set_default_strategy("single")
        assert ids(prioritize(tasks)) == ["A", "B", "C"]

    @pytest.mark.parametrize("scheduler", [schedule_batch, schedule_single])
    def test_stalled_graph_raises_circular_dependency(self, scheduler):
        """A cycle that bypassed validation is reported, not looped on"""
        tasks = {
            "A": NormalizedTask("A", 1, None, ("B",), None, source=None),
            "B": NormalizedTask("B", 1, None, ("A",), None, source=None),
            "C": NormalizedTask("C", 1, None, (), None, source=None),
        }
        with pytest.raises(CircularDependencyError) as exc:
            scheduler(tasks)
        assert exc.value.task_id == "A"
        assert exc.value.cycle == ["A", "B"]

    def test_scheduler_registry_covers_all_strategies(self):
        assert set(prioritizer._SCHEDULERS) == set(ScheduleStrategy)
