"""JSON-RPC envelope and response models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

JSONRPC_VERSION = "2.0"


@dataclass(frozen=True)
class RequestEnvelope:
    """Outgoing JSON-RPC 2.0 request.

    ``params=None`` means the caller supplied none: the key is left out of the
    wire dict instead of being sent as ``null``.
    """

    id: int
    method: str
    params: Any = None

    def to_dict(self) -> dict:
        d: dict = {
            "jsonrpc": JSONRPC_VERSION,
            "id": self.id,
            "method": self.method,
        }
        if self.params is not None:
            d["params"] = self.params
        return d


@dataclass(frozen=True)
class BatchRequest:
    """One entry of a batch call."""

    id: int
    method: str
    params: Any = None

    def to_envelope(self) -> RequestEnvelope:
        return RequestEnvelope(id=self.id, method=self.method, params=self.params)


@dataclass(frozen=True)
class SuccessReply:
    """Success reply as delivered by the transport.

    The result payload travels under the ``params`` wire field.
    """

    id: int | None
    params: Any = None
    method: str | None = None

    def to_response(self) -> SuccessResponse:
        return SuccessResponse(id=self.id, result=self.params, method=self.method)


@dataclass(frozen=True)
class ErrorReply:
    """Error reply as delivered by the transport."""

    error: Any
    id: int | None = None

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(error=self.error, id=self.id)


@dataclass(frozen=True)
class SuccessResponse:
    """Normalized success result handed back to the caller."""

    id: int | None
    result: Any = None
    method: str | None = None

    @property
    def is_error(self) -> bool:
        return False

    def to_dict(self) -> dict:
        d: dict = {"id": self.id, "result": self.result}
        if self.method is not None:
            d["method"] = self.method
        return d


@dataclass(frozen=True)
class ErrorResponse:
    """Normalized error result handed back to the caller."""

    error: Any
    id: int | None = None

    @property
    def is_error(self) -> bool:
        return True

    @property
    def code(self) -> int | None:
        if isinstance(self.error, dict):
            return self.error.get("code")
        return None

    @property
    def message(self) -> str:
        if isinstance(self.error, dict):
            return str(self.error.get("message", ""))
        return str(self.error)

    def to_dict(self) -> dict:
        return {"error": self.error, "id": self.id}


Reply = SuccessReply | ErrorReply
Response = SuccessResponse | ErrorResponse
