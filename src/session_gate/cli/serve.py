"""CLI: session-gate serve"""

from typing import Optional

import click
from rich.console import Console

from session_gate.transport.server import serve

console = Console()


def _get_config(ctx: click.Context, **overrides: object):
    from session_gate.cli.main import _get_config
    return _get_config(ctx, **overrides)


@click.command("serve")
@click.option("--host", default=None, help="Bind address.")
@click.option("--port", default=None, type=int, help="Bind port.")
@click.option("--log-level", default=None, help="Logging level, e.g. DEBUG.")
@click.pass_context
def serve_cmd(ctx: click.Context, host: Optional[str], port: Optional[int], log_level: Optional[str]):
    """Run the gateway until interrupted."""
    config = _get_config(ctx, host=host, port=port, log_level=log_level)
    console.print(f"[cyan]session-gate listening on {config.url}/{config.socketio_path}[/cyan]")
    serve(config)
