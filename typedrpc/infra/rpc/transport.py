"""Transport collaborator protocol."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class RpcTransport(Protocol):
    """Delivers request envelopes and returns their replies.

    Replies come back in one list, each either success- or error-shaped.
    Network failures are the transport's to raise.
    """

    async def call(self, requests: list[dict]) -> list[dict]:
        """Send the envelopes and return the reply envelopes."""
        ...
