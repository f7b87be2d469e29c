"""
JSON task file loading and serialization.

Task files hold either a JSON array of task objects or an object with a
``"tasks"`` array. Records are returned as plain dicts, deadlines untouched.
"""

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Sequence, Union

from prioflow.core.errors import TaskValidationError
from prioflow.core.types import Task, get_task_field
from prioflow.logger import get_logger

logger = get_logger(__name__)


def load_tasks(path: Union[str, Path]) -> List[dict]:
    """
    Load task records from a JSON file.

    Args:
        path: Path to the task file

    Returns:
        List of task dicts

    Raises:
        TaskValidationError: If the file is missing, not JSON, or has the wrong shape
    """
    task_file = Path(path)
    try:
        with open(task_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise TaskValidationError(
            f"Task file not found: {task_file}",
            what="Task file not found",
            why=f"{task_file} does not exist",
            how_to_fix="Check the path to the task file",
        ) from exc
    except json.JSONDecodeError as exc:
        raise TaskValidationError(
            f"Task file is not valid JSON: {task_file}",
            what="Task file is not valid JSON",
            why=str(exc),
            how_to_fix="Fix the JSON syntax of the task file",
            context={"path": str(task_file), "line": exc.lineno},
        ) from exc

    if isinstance(data, dict):
        data = data.get("tasks")
    if not isinstance(data, list) or not all(isinstance(item, dict) for item in data):
        raise TaskValidationError(
            f"Task file must contain a list of task objects: {task_file}",
            what="Unexpected task file layout",
            why="Expected a JSON array of objects, or an object with a 'tasks' array",
            how_to_fix='Use [{"id": ...}, ...] or {"tasks": [{"id": ...}, ...]}',
        )

    logger.debug(f"Loaded {len(data)} tasks from {task_file}")
    return data


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def task_to_dict(task: Any) -> dict:
    """Convert a Task, a mapping, or a task-like object to a dict"""
    if isinstance(task, Task):
        return task.to_dict()
    if isinstance(task, dict):
        return dict(task)
    return {
        "id": get_task_field(task, "id"),
        "name": get_task_field(task, "name"),
        "deadline": get_task_field(task, "deadline"),
        "priority": get_task_field(task, "priority"),
        "dependencies": list(get_task_field(task, "dependencies") or []),
        "estimatedHours": get_task_field(task, "estimated_hours"),
    }


def dump_tasks(tasks: Sequence[Any], indent: int = 2) -> str:
    """Serialize task records to a JSON array string"""
    return json.dumps(
        [task_to_dict(task) for task in tasks],
        indent=indent,
        ensure_ascii=False,
        default=_json_default,
    )


__all__ = ["load_tasks", "dump_tasks", "task_to_dict"]
