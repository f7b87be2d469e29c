"""
CLI entry point for prioflow

The root is a Click group; the ``tasks`` commands are a Typer app mounted
on it as a Click command.
"""

from pathlib import Path

import click
import typer.main

from prioflow.cli.commands import tasks
from prioflow.core.config_manager import get_config_manager
from prioflow.logger import configure_logging


@click.group(
    name="prioflow",
    help="Dependency-aware task prioritization CLI",
    context_settings={"help_option_names": ["--help", "-h"]},
)
def cli() -> None:
    # .env in the working directory may set PRIOFLOW_SCHEDULE_STRATEGY
    get_config_manager().load_env_files([Path.cwd() / ".env"], override=False)


@cli.command()
def version() -> None:
    """Show version information."""
    from prioflow import __version__

    click.echo(f"prioflow version {__version__}")


cli.add_command(typer.main.get_command(tasks.app), "tasks")


def main() -> None:
    """Console script entry point."""
    configure_logging()
    cli()


if __name__ == "__main__":
    main()
