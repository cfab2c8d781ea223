"""CLI helpers shared by command groups."""

from __future__ import annotations

import json
from typing import Any

import click

from typedrpc.config import AppConfig, load_config
from typedrpc.infra.rpc.methods import MethodRegistry


def get_config(ctx: click.Context) -> AppConfig:
    """Return the config loaded by the root group, or load the default one."""
    obj = ctx.find_root().obj or {}
    config = obj.get("config")
    if config is None:
        config = load_config()
    return config


def get_validating_registry(config: AppConfig) -> MethodRegistry | None:
    """Return the configured registry when validation is on, else None."""
    if not config.client.validate:
        return None
    return MethodRegistry.from_mapping(config.methods)


def dump_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))
