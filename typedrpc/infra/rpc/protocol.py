"""JSON-RPC 2.0 envelope construction and reply decoding."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from typedrpc.models.envelope import (
    JSONRPC_VERSION,
    BatchRequest,
    ErrorReply,
    Reply,
    RequestEnvelope,
    SuccessReply,
)


def make_request(id: int, method: str, params: Any = None) -> dict:
    """Build the wire dict for one request; params left out when None."""
    return RequestEnvelope(id=id, method=method, params=params).to_dict()


def to_batch_request(entry: BatchRequest | Mapping) -> BatchRequest:
    """Accept either a BatchRequest or a plain {id, method, params?} mapping."""
    if isinstance(entry, BatchRequest):
        return entry
    if not isinstance(entry, Mapping):
        raise ValueError(f"Invalid batch entry: {entry!r}")
    try:
        return BatchRequest(
            id=entry["id"],
            method=entry["method"],
            params=entry.get("params"),
        )
    except KeyError as e:
        raise ValueError(f"Batch entry missing {e.args[0]!r}: {entry!r}") from e


def decode_reply(data: Any) -> Reply:
    """Turn a wire reply into a SuccessReply or ErrorReply.

    A reply is an error iff it has an "error" key. jsonrpc version and error
    codes are not checked.
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Expected reply object, got {type(data).__name__}")

    if "error" in data:
        return ErrorReply(error=data["error"], id=data.get("id"))

    if "params" in data:
        payload = data["params"]
    else:
        payload = data.get("result")
    return SuccessReply(
        id=data.get("id"),
        params=payload,
        method=data.get("method"),
    )


def make_error(id: int | None, code: int, message: str) -> dict:
    """Create a JSON-RPC error reply envelope."""
    return {
        "jsonrpc": JSONRPC_VERSION,
        "error": {"code": code, "message": message},
        "id": id,
    }


def encode_requests(envelopes: Iterable[dict], indent: int | None = None) -> str:
    """Encode request envelopes as a JSON array."""
    return json.dumps(list(envelopes), indent=indent, default=str)


def decode_replies(text: str | bytes) -> list[dict]:
    """Decode a JSON reply document: a single object or an array of objects."""
    data = json.loads(text)
    if isinstance(data, dict):
        return [data]
    if isinstance(data, list):
        return data
    raise ValueError(f"Expected a reply object or array, got {type(data).__name__}")


# Standard JSON-RPC error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
