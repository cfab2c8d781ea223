"""JSON-RPC 2.0 client over an injected transport."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, TypeGuard

from typedrpc.infra.rpc.methods import MethodRegistry
from typedrpc.infra.rpc.protocol import decode_reply, make_request, to_batch_request
from typedrpc.infra.rpc.transport import RpcTransport
from typedrpc.models.envelope import BatchRequest, ErrorResponse, Response

if TYPE_CHECKING:
    from typedrpc.config import AppConfig

logger = logging.getLogger(__name__)


def is_error_response(response: Any) -> TypeGuard[ErrorResponse]:
    """True if the response is error-shaped (carries an "error" key)."""
    if isinstance(response, ErrorResponse):
        return True
    return isinstance(response, Mapping) and "error" in response


class JsonRpcClient:
    """Builds request envelopes, hands them to the transport and normalizes replies.

    The client keeps no per-call state. Transport exceptions propagate
    unchanged; error replies come back as ErrorResponse values.
    """

    def __init__(
        self,
        transport: RpcTransport,
        registry: MethodRegistry | None = None,
        validate: bool = False,
    ) -> None:
        if validate and registry is None:
            raise ValueError("validate=True needs a method registry")
        self._transport = transport
        self._registry = registry
        self._validate = validate

    @classmethod
    def from_config(cls, transport: RpcTransport, config: AppConfig) -> JsonRpcClient:
        """Create a client with the registry and validation flag from config."""
        registry = MethodRegistry.from_mapping(config.methods)
        return cls(transport, registry=registry, validate=config.client.validate)

    @property
    def registry(self) -> MethodRegistry | None:
        return self._registry

    def _build(self, id: int, method: str, params: Any) -> dict:
        if self._validate:
            assert self._registry is not None
            self._registry.validate_request(method, params)
        return make_request(id, method, params)

    async def call(self, id: int, method: str, params: Any = None) -> Response:
        """Send a single request and return the normalized response."""
        envelope = self._build(id, method, params)
        logger.debug("RPC call %s (id=%s)", method, id)

        replies = await self._transport.call([envelope])

        if isinstance(replies, Mapping):
            reply = replies
        elif replies:
            reply = replies[0]
        else:
            raise RuntimeError(f"Transport returned no reply for {method} (id={id})")

        response = decode_reply(reply).to_response()
        if is_error_response(response):
            logger.debug("RPC %s (id=%s) returned error: %s", method, id, response.error)
        return response

    async def call_batch(self, requests: Iterable[BatchRequest | Mapping]) -> list:
        """Send all requests in one transport call and return the raw replies.

        Replies are not normalized and their order is not checked against
        the requests.
        """
        envelopes = []
        for entry in requests:
            item = to_batch_request(entry)
            envelopes.append(self._build(item.id, item.method, item.params))

        logger.debug("RPC batch of %d request(s)", len(envelopes))
        return await self._transport.call(envelopes)

    def is_error_response(self, response: Any) -> TypeGuard[ErrorResponse]:
        return is_error_response(response)
