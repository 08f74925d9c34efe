"""Audit trail inspection."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from maybe_deploy.audit import read_events

app = typer.Typer(no_args_is_help=True)
console = Console()

_RESULT_STYLE = {"success": "green", "failure": "red", "degraded": "yellow"}


@app.command(name="list")
def list_events(
    action: Optional[str] = typer.Option(None, help="Action prefix, e.g. 'install' or 'cert.renew'"),
    result: Optional[str] = typer.Option(None, help="success, failure or degraded"),
    target: Optional[str] = typer.Option(None, help="Substring of the target domain"),
    limit: int = typer.Option(50, help="Maximum number of events"),
) -> None:
    """Show recent install and management operations."""
    events = read_events(action=action, result=result, target=target, limit=limit)
    if not events:
        console.print("No audit events recorded.")
        return

    table = Table(title="Audit Log")
    table.add_column("Time", no_wrap=True)
    table.add_column("Actor")
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("Target")
    table.add_column("Result", no_wrap=True)
    table.add_column("Duration", justify="right")
    table.add_column("Error")
    for event in events:
        style = _RESULT_STYLE.get(event["result"], "")
        duration = event["duration_ms"]
        table.add_row(
            event["timestamp"][:19].replace("T", " "),
            escape(event["actor"]),
            event["action"],
            escape(event["target"]),
            f"[{style}]{event['result']}[/{style}]" if style else event["result"],
            f"{duration} ms" if duration is not None else "",
            escape(event["error"].splitlines()[0]) if event["error"] else "",
        )
    console.print(table)
