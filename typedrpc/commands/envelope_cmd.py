"""CLI handlers for building request envelopes."""

from __future__ import annotations

import json

import click

from typedrpc.commands._helpers import dump_json, get_config, get_validating_registry
from typedrpc.infra.rpc.protocol import encode_requests, make_request, to_batch_request


@click.group("envelope")
def envelope_group():
    """Build JSON-RPC request envelopes."""
    pass


@envelope_group.command("build")
@click.argument("method")
@click.option("--id", "request_id", type=int, default=1, show_default=True, help="Request id")
@click.option("--params", "-p", default=None, help="Params as a JSON document")
@click.pass_context
def envelope_build(ctx, method: str, request_id: int, params: str | None):
    """Print the request envelope for one call."""
    payload = None
    if params is not None:
        try:
            payload = json.loads(params)
        except json.JSONDecodeError as e:
            click.echo(f"Error: invalid params JSON: {e}", err=True)
            ctx.exit(1)

    try:
        registry = get_validating_registry(get_config(ctx))
        if registry is not None:
            registry.validate_request(method, payload)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    dump_json(make_request(request_id, method, payload))


@envelope_group.command("batch")
@click.argument("source", type=click.File("r"))
@click.pass_context
def envelope_batch(ctx, source):
    """Print the envelope array for a JSON list of {id, method, params} entries.

    SOURCE is a file path, or - for stdin.
    """
    try:
        entries = json.load(source)
    except json.JSONDecodeError as e:
        click.echo(f"Error: invalid JSON: {e}", err=True)
        ctx.exit(1)

    if not isinstance(entries, list):
        click.echo("Error: expected a JSON array of requests", err=True)
        ctx.exit(1)

    envelopes = []
    try:
        registry = get_validating_registry(get_config(ctx))
        for entry in entries:
            item = to_batch_request(entry)
            if registry is not None:
                registry.validate_request(item.method, item.params)
            envelopes.append(make_request(item.id, item.method, item.params))
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    click.echo(encode_requests(envelopes, indent=2))
