"""
Task CLI commands

Usage:
    prioflow tasks order FILE                     # Print tasks in execution order
    prioflow tasks order FILE --format json       # Same, as JSON
    prioflow tasks order FILE --strategy single   # Single-pick ordering
    prioflow tasks validate FILE                  # Validate without ordering
"""

from pathlib import Path
from typing import Any, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from prioflow.core.errors import BusinessError
from prioflow.core.loader import dump_tasks, load_tasks
from prioflow.core.scheduling import prioritize, resolve_strategy
from prioflow.core.dependency import validate_tasks
from prioflow.core.types import get_task_field
from prioflow.core.utils.helpers import format_deadline
from prioflow.logger import get_logger

logger = get_logger(__name__)
console = Console()
error_console = Console(stderr=True)

app = typer.Typer(name="tasks", help="Validate and order task files")

OUTPUT_FORMATS = ("table", "json")


def _fail(error: BusinessError) -> None:
    error_console.print(str(error), style="red", markup=False)
    raise typer.Exit(1)


def build_order_table(tasks: List[Any]) -> Table:
    """Render ordered tasks as a Rich table"""
    table = Table(title="Task Order")
    table.add_column("#", justify="right", style="dim")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Priority", justify="right", style="magenta")
    table.add_column("Deadline")
    table.add_column("Hours", justify="right")
    table.add_column("Depends On")

    for position, task in enumerate(tasks, start=1):
        hours = get_task_field(task, "estimated_hours")
        dependencies = get_task_field(task, "dependencies") or []
        table.add_row(
            str(position),
            str(get_task_field(task, "id")),
            str(get_task_field(task, "name") or get_task_field(task, "id")),
            str(get_task_field(task, "priority")),
            format_deadline(get_task_field(task, "deadline")),
            "-" if hours is None else f"{hours:g}",
            ", ".join(dep.get("id", "") if isinstance(dep, dict) else str(dep) for dep in dependencies) or "-",
        )
    return table


@app.command("order")
def order(
    task_file: Path = typer.Argument(..., help="JSON file with the task list"),
    strategy: Optional[str] = typer.Option(
        None, "--strategy", "-s", help="Scheduling strategy: batch or single (default from config)"
    ),
    output_format: str = typer.Option("table", "--format", "-f", help="Output format: table or json"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write JSON result to this file instead of stdout"
    ),
):
    """
    Order tasks so dependencies come first and urgent work is done sooner.

    Examples:
        prioflow tasks order tasks.json
        prioflow tasks order tasks.json --strategy single --format json
        prioflow tasks order tasks.json -o ordered.json
    """
    if output_format not in OUTPUT_FORMATS:
        error_console.print(
            f"[red]Unknown format '{output_format}'. Use one of: {', '.join(OUTPUT_FORMATS)}[/red]"
        )
        raise typer.Exit(1)

    try:
        resolved = resolve_strategy(strategy)
        ordered = prioritize(load_tasks(task_file), strategy=resolved)
    except BusinessError as e:
        _fail(e)

    if output is not None:
        output.write_text(dump_tasks(ordered) + "\n", encoding="utf-8")
        console.print(f"[green]Wrote {len(ordered)} tasks to {output}[/green]")
        return

    if output_format == "json":
        typer.echo(dump_tasks(ordered))
    else:
        console.print(build_order_table(ordered))
        console.print(f"Strategy: {resolved.value}")


@app.command("validate")
def validate(
    task_file: Path = typer.Argument(..., help="JSON file with the task list"),
):
    """
    Validate a task file without ordering it.

    Checks ids, priorities, dependency references, estimated hours,
    deadlines and circular dependencies.
    """
    try:
        normalized = validate_tasks(load_tasks(task_file))
    except BusinessError as e:
        _fail(e)

    console.print(f"[green]✓ {len(normalized)} tasks are valid[/green]")
