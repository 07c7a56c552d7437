"""
session-gate CLI — `session-gate` command.

Commands:
  session-gate serve            Run the Socket.IO gateway
  session-gate check [frame]    Validate a header frame offline
  session-gate send <frame>     Send a raw frame to a running gateway
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install session-gate[cli]")

from session_gate import __version__
from session_gate.config import GatewayConfig, load_config
from session_gate.errors import ConfigError

console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def _get_config(ctx: click.Context, **overrides: object) -> GatewayConfig:
    try:
        config = load_config(ctx.obj.get("config_path"), **overrides)
    except ConfigError as e:
        raise click.ClickException(str(e))
    _configure_logging(config.log_level)
    return config


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option(__version__)
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=None,
              help="Config file (default: ~/.session-gate/config.json).")
@click.pass_context
def main(ctx: click.Context, config_path: Optional[Path]):
    """session-gate — validate and answer session handshake frames."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


# Register subcommands from separate modules
from session_gate.cli.check import check_cmd
from session_gate.cli.send import send_cmd
from session_gate.cli.serve import serve_cmd

main.add_command(check_cmd)
main.add_command(send_cmd)
main.add_command(serve_cmd)


if __name__ == "__main__":
    main()
