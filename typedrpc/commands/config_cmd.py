"""CLI handlers for config commands."""

from __future__ import annotations

import json
from typing import Any

import click

from typedrpc.commands._helpers import get_config
from typedrpc.config import init_config
from typedrpc.infra.rpc.methods import MethodRegistry


@click.group("config")
def config_group():
    """Manage configuration."""
    pass


@config_group.command("init")
@click.pass_context
def config_init(ctx):
    """Create default configuration file."""
    path = init_config(get_config(ctx).config_path)
    click.echo(f"Configuration created at: {path}")


@config_group.command("show")
@click.pass_context
def config_show(ctx):
    """Show current configuration."""
    config = get_config(ctx)
    try:
        registry = MethodRegistry.from_mapping(config.methods)
    except ValueError as e:
        click.echo(f"Error: invalid [methods] table in {config.config_path}: {e}", err=True)
        ctx.exit(1)

    click.echo(f"Config file: {config.config_path}")
    click.echo(f"  Validate params: {'on' if config.client.validate else 'off'}")
    click.echo(f"  Log level: {config.logging.level}")

    click.echo(f"\n  Methods ({len(registry)}):")
    for spec in registry:
        line = f"    {spec.name}: params={spec.params.value}, result={spec.result.value}"
        if spec.required:
            line += f", required={','.join(spec.required)}"
        if spec.error_codes:
            line += f", errors={','.join(str(c) for c in spec.error_codes)}"
        click.echo(line)
        if spec.description:
            click.echo(f"      {spec.description}")


def _parse_value(value: str) -> Any:
    """Coerce a command-line string into a TOML value."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.lstrip("-").isdigit():
        return int(value)
    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
    return value


def _assign(data: dict, parts: list[str], value: Any) -> None:
    """Set a dotted key inside nested tables, creating missing ones."""
    target = data
    for i, part in enumerate(parts[:-1]):
        target = target.setdefault(part, {})
        if not isinstance(target, dict):
            raise ValueError(f"{'.'.join(parts[: i + 1])} is not a table")
    target[parts[-1]] = value


@config_group.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx, key: str, value: str):
    """Set a configuration value.

    Modifies the TOML config file. Key uses dot notation, e.g.:
    client.validate, logging.level, methods.removeData.params
    """
    import tomli_w

    path = get_config(ctx).config_path
    if not path.exists():
        click.echo("No config file found. Run 'typedrpc config init' first.", err=True)
        ctx.exit(1)

    try:
        import tomllib
    except ImportError:
        import tomli as tomllib  # type: ignore[no-redef]

    with open(path, "rb") as f:
        data = tomllib.load(f)

    parts = key.split(".")
    try:
        _assign(data, parts, _parse_value(value))
        if parts[0] == "methods":
            # Refuse to write a table the registry cannot load
            MethodRegistry.from_mapping(data["methods"])
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    with open(path, "wb") as f:
        tomli_w.dump(data, f)

    click.echo(f"Set {key} = {value}")
