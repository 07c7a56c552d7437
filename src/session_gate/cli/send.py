"""CLI: session-gate send"""

import json
from typing import Any, Optional

import click
from rich.console import Console

from session_gate.errors import ConnectionError
from session_gate.transport.client import GatewayClient

console = Console()


def _get_config(ctx: click.Context, **overrides: object):
    from session_gate.cli.main import _get_config
    return _get_config(ctx, **overrides)


def _run(coro):
    from session_gate.cli.main import _run
    return _run(coro)


@click.command("send")
@click.argument("frame")
@click.option("--url", default=None, help="Gateway URL (default: from config).")
@click.option("--timeout", default=None, type=float, help="Seconds to wait for an error reply.")
@click.pass_context
def send_cmd(ctx: click.Context, frame: str, url: Optional[str], timeout: Optional[float]):
    """Send a raw frame to a running gateway."""
    config = _get_config(ctx, reply_timeout=timeout)

    async def _send() -> Optional[Any]:
        client = GatewayClient(
            url or config.url,
            socketio_path=config.socketio_path,
            timeout=config.reply_timeout,
        )
        async with client:
            with console.status("Waiting for reply..."):
                return await client.send_frame(frame)

    try:
        reply = _run(_send())
    except ConnectionError as e:
        raise click.ClickException(str(e))

    if reply is None:
        console.print(f"[green]No error reply within {config.reply_timeout}s; frame accepted.[/green]")
        return
    try:
        click.echo(json.dumps(json.loads(reply), indent=2))
    except (TypeError, json.JSONDecodeError):
        click.echo(str(reply))
    raise SystemExit(1)
