"""Synthetic response factories for testing."""

from __future__ import annotations

from typing import Any

from faucet_relay.models.records import AttestationResponse

SIGNED_ATTESTATION = "0x" + "ab" * 65
MESSAGE_HASH = "0xabc"


def make_attestation_response(
    status: str | None = None,
    attestation: Any = None,
    status_code: int = 200,
) -> AttestationResponse:
    """Build a found (2xx) attestation reply with only the given fields set."""
    payload: dict[str, Any] = {}
    if status is not None:
        payload["status"] = status
    if attestation is not None:
        payload["attestation"] = attestation
    return AttestationResponse(
        found=True,
        status_code=status_code,
        status=status,
        attestation=attestation,
        payload=payload,
    )


def ready(attestation: Any = SIGNED_ATTESTATION) -> AttestationResponse:
    return make_attestation_response(status="complete", attestation=attestation)


def pending(sentinel: str = "PENDING") -> AttestationResponse:
    return make_attestation_response(status="pending_confirmations", attestation=sentinel)


def not_found() -> AttestationResponse:
    return AttestationResponse(found=False, status_code=404)
