"""Click CLI definitions - main entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from typedrpc.commands.config_cmd import config_group
from typedrpc.commands.envelope_cmd import envelope_group
from typedrpc.commands.reply_cmd import reply_group
from typedrpc.config import load_config


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Config file (default: ~/.config/typedrpc/config.toml)",
)
@click.pass_context
def cli(ctx, debug: bool, config_path: Path | None) -> None:
    """typedrpc - JSON-RPC 2.0 envelope tooling."""
    config = load_config(config_path)
    level = logging.DEBUG if debug else config.logging.resolved_level
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config


cli.add_command(config_group, "config")
cli.add_command(envelope_group, "envelope")
cli.add_command(reply_group, "reply")


if __name__ == "__main__":
    cli()
