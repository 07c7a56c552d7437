"""CLI: session-gate check"""

import json
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from session_gate.handler import process_frame

console = Console()


@click.command("check")
@click.argument("frame", required=False)
@click.option("--json-output", "--json", is_flag=True)
def check_cmd(frame: Optional[str], json_output: bool):
    """Validate a header frame (argument or stdin) without a server."""
    if frame is None:
        frame = sys.stdin.read()

    result = process_frame(frame)
    if not result.ok:
        click.echo(result.response)
        raise SystemExit(1)

    header = result.header
    if json_output:
        click.echo(header.model_dump_json())
        return
    table = Table(title="Message header")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("action", header.action.value)
    table.add_row("session_id", json.dumps(header.session_id))
    table.add_row("user_id", str(header.user_id))
    console.print(table)
