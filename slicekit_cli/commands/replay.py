"""
Replay command: replay an action log through a slice reducer
"""

import json
from itertools import islice
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.table import Table

from slicekit.core import SliceError, canonicalize, state_hash
from slicekit.log import ActionLog
from slicekit.replay import replay as replay_actions
from slicekit_cli._loader import load_slice

console = Console()


def replay_command(
    target: str = typer.Argument(..., help="Slice to replay, as package.module:attribute"),
    log_path: str = typer.Option(..., "--log", "-l", help="Path to action log file"),
    until: Optional[int] = typer.Option(None, "--until", "-u", min=0, help="Replay until sequence number (inclusive)"),
    select: Optional[List[str]] = typer.Option(None, "--select", help="Selector to evaluate on the final state"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay an action log and show the resulting slice state.

    Examples:
        slicekit replay myapp.store:counter --log actions.jsonl
        slicekit replay myapp.store:counter --log actions.jsonl --until 10
        slicekit replay myapp.store:counter --log actions.jsonl --select value --json
    """
    try:
        s = load_slice(target)
        store = ActionLog(log_path, create=False)

        unknown = [name for name in (select or []) if name not in s.selectors]
        if unknown:
            raise ValueError(f"unknown selector(s): {', '.join(unknown)}")

        limit = until + 1 if until is not None else None

        # Count action types in the replayed window
        type_counts = {}
        for action in islice(store.read(), limit):
            type_counts[action.type] = type_counts.get(action.type, 0) + 1

        result = replay_actions(s.reducer, store.read(), limit=limit)
        root_state = {s.name: result.state}
        selected = {name: s.selectors[name](root_state) for name in (select or [])}
        digest = state_hash(result.state)

        if json_output:
            output = {
                "success": True,
                "slice": s.name,
                "actions_replayed": result.applied,
                "state_hash": digest,
                "action_counts": type_counts,
            }
            if selected:
                output["selected"] = canonicalize(selected)
            if show_state:
                output["state"] = canonicalize(result.state)
            print(json.dumps(output, indent=2, default=repr))
        else:
            console.print(f"[green]✓ Replayed {result.applied} actions into slice {s.name}[/green]")
            console.print(f"  State hash: [yellow]{digest}[/yellow]")

            table = Table(title="Action Counts")
            table.add_column("Action Type", style="green")
            table.add_column("Count", style="cyan", justify="right")
            table.add_column("Handled", style="dim")
            for action_type in sorted(type_counts):
                handled = "yes" if s.reducer.handles(action_type) else "no"
                table.add_row(action_type, str(type_counts[action_type]), handled)
            console.print(table)

            for name, value in selected.items():
                console.print(f"  {name}: [cyan]{escape(repr(value))}[/cyan]")

            if show_state:
                console.print("\n[bold]Final State:[/bold]")
                syntax_str = json.dumps(canonicalize(result.state), indent=2, default=repr)
                console.print(Syntax(syntax_str, "json", theme="monokai"))

        raise typer.Exit(0)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Log file not found", "path": log_path}))
        else:
            console.print(f"[red]Error: Log file not found:[/red] {log_path}")
        raise typer.Exit(2)
    except (ImportError, ValueError, TypeError, SliceError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
