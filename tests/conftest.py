"""Shared fixtures for prioflow tests."""

import pytest

from prioflow.core.config_manager import STRATEGY_ENV_VAR, get_config_manager


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Each test starts from the default scheduler configuration"""
    monkeypatch.delenv(STRATEGY_ENV_VAR, raising=False)
    get_config_manager().clear()
    yield
    get_config_manager().clear()


def make_task(task_id, priority=3, dependencies=None, deadline=None, hours=None, name=None):
    """Build a task record the way JSON input produces them"""
    task = {
        "id": task_id,
        "name": name or f"Task {task_id}",
        "priority": priority,
        "dependencies": list(dependencies or []),
    }
    if deadline is not None:
        task["deadline"] = deadline
    if hours is not None:
        task["estimatedHours"] = hours
    return task


@pytest.fixture
def task_factory():
    return make_task
