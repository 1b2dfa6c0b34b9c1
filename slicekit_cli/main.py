#!/usr/bin/env python3
"""
slicekit CLI

Main entrypoint for the slicekit command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from slicekit.logging_config import setup_logging
from slicekit_cli.commands import inspect, log, replay

# Initialize Typer app
app = typer.Typer(
    name="slicekit",
    help="Declarative state slices: inspect and replay",
    add_completion=False,
)

# Console for rich output
console = Console()

# Add command groups
app.add_typer(log.app, name="log", help="Action log operations")

# Add standalone commands
app.command(name="inspect")(inspect.inspect_command)
app.command(name="replay")(replay.replay_command)


@app.callback()
def _configure() -> None:
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from slicekit import __version__ as core_version
    from slicekit_cli import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]slicekit CLI[/bold]", f"v{__version__}")
    table.add_row("Core", f"v{core_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
