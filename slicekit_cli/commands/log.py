"""
Action log commands: append, tail
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from slicekit.core import SliceError, canonical_json_str
from slicekit.log import ActionLog
from slicekit_cli._loader import load_slice

app = typer.Typer()
console = Console()


@app.command()
def append(
    target: str = typer.Argument(..., help="Slice owning the action, as package.module:attribute"),
    action: str = typer.Argument(..., help="Action name within the slice"),
    log_path: str = typer.Option(..., "--log", "-l", help="Path to action log file"),
    payload: Optional[str] = typer.Option(None, "--payload", "-p", help="JSON argument for the action creator"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Build an action with the slice's creator and append it to the log.

    Examples:
        slicekit log append myapp.store:counter increment --payload 3 --log actions.jsonl
        slicekit log append myapp.store:user set_avatar -p '"b.png"' -l actions.jsonl
    """
    try:
        s = load_slice(target)
        if action not in s.actions:
            raise ValueError(f"slice {s.name} has no action {action!r}")

        creator = s.actions[action]
        ev = creator(json.loads(payload)) if payload is not None else creator()
        seq = ActionLog(log_path).append(ev)

        if json_output:
            print(json.dumps({"seq": seq, "action": ev.to_dict()}, default=repr))
        else:
            console.print(f"[green]✓ Appended[/green] {ev.type} at seq [cyan]{seq}[/cyan]")
        raise typer.Exit(0)

    except (ImportError, ValueError, TypeError, SliceError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)


@app.command()
def tail(
    log_path: str = typer.Option(..., "--log", "-l", help="Path to action log file"),
    lines: Optional[int] = typer.Option(None, "--lines", "-n", help="Number of actions to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the last actions of a log.

    Examples:
        slicekit log tail --log actions.jsonl
        slicekit log tail --log actions.jsonl --lines 10 --json
    """
    try:
        records = [
            {"seq": seq, **ev.to_dict()}
            for seq, ev in enumerate(ActionLog(log_path, create=False).read())
        ]

        if lines:
            records = records[-lines:]

        if json_output:
            print(json.dumps({"actions": records, "count": len(records)}, indent=2))
        elif not records:
            console.print("[yellow]Action log is empty[/yellow]")
        else:
            table = Table(title=f"Action Log: {log_path}")
            table.add_column("Seq", style="cyan")
            table.add_column("Type", style="green")
            table.add_column("Payload", style="dim")
            for rec in records:
                table.add_row(str(rec["seq"]), rec["type"], canonical_json_str(rec["payload"]))
            console.print(table)
            console.print(f"\n[bold]Total actions:[/bold] {len(records)}")

        raise typer.Exit(0)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Log file not found", "path": log_path}))
        else:
            console.print(f"[red]Error: Log file not found:[/red] {log_path}")
        raise typer.Exit(2)
    except SliceError as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
