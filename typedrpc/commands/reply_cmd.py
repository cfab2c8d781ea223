"""CLI handlers for inspecting transport replies."""

from __future__ import annotations

import click

from typedrpc.commands._helpers import dump_json
from typedrpc.infra.rpc.client import is_error_response
from typedrpc.infra.rpc.protocol import decode_replies, decode_reply


@click.group("reply")
def reply_group():
    """Inspect JSON-RPC reply envelopes."""
    pass


@reply_group.command("normalize")
@click.argument("source", type=click.File("r"))
@click.option("--fail-on-error", is_flag=True, help="Exit 1 if any reply is an error")
@click.pass_context
def reply_normalize(ctx, source, fail_on_error: bool):
    """Print the unified responses for a reply object or array.

    SOURCE is a file path, or - for stdin.
    """
    try:
        responses = [decode_reply(r).to_response() for r in decode_replies(source.read())]
    except ValueError as e:
        # json.JSONDecodeError is a ValueError
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    dump_json([r.to_dict() for r in responses])

    if fail_on_error and any(is_error_response(r) for r in responses):
        ctx.exit(1)
