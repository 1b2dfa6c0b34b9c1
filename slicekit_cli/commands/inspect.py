"""
Inspect command: show what a slice configuration derives
"""

import json

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from slicekit.core import canonicalize
from slicekit_cli._loader import load_slice

console = Console()


def inspect_command(
    target: str = typer.Argument(..., help="Slice to inspect, as package.module:attribute"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show derived action types, selectors and initial state of a slice.

    Examples:
        slicekit inspect myapp.store:counter
        slicekit inspect myapp.store:counter --json
    """
    try:
        s = load_slice(target)
    except (ImportError, ValueError) as e:
        if json_output:
            print(json.dumps({"error": str(e), "target": target}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    if json_output:
        output = {
            "slice": s.name,
            "actions": s.types,
            "selectors": sorted(s.selectors),
            "initial": canonicalize(s.initial),
        }
        print(json.dumps(output, indent=2, default=repr))
        raise typer.Exit(0)

    console.print(f"[bold]Slice:[/bold] [cyan]{s.name}[/cyan]")

    table = Table(title="Actions")
    table.add_column("Action", style="green")
    table.add_column("Type", style="yellow")
    for name, type_id in s.types.items():
        table.add_row(name, type_id)
    console.print(table)

    if s.selectors:
        console.print(f"[bold]Selectors:[/bold] {', '.join(sorted(s.selectors))}")

    console.print("\n[bold]Initial State:[/bold]")
    syntax_str = json.dumps(canonicalize(s.initial), indent=2, default=repr)
    console.print(Syntax(syntax_str, "json", theme="monokai"))
    raise typer.Exit(0)
