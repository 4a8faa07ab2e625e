"""AttestationSource protocol - reads attestation status for a message hash."""

from __future__ import annotations

from typing import Protocol

from faucet_relay.models.records import AttestationResponse


class AttestationSource(Protocol):
    """Single-shot reader for the attestation status endpoint."""

    async def fetch(self, identifier: str) -> AttestationResponse:
        """Read the current attestation state once.

        Returns found=False for a 404. Raises TransientRemoteError for network
        failures, other non-2xx statuses and malformed bodies.
        """
        ...

    def url_for(self, identifier: str) -> str:
        """Upstream URL for an identifier, used in error guidance."""
        ...
