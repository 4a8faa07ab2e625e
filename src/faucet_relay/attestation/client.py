"""Circle IRIS attestation client - single-shot status reads over HTTP."""

from __future__ import annotations

import logging

import httpx

from faucet_relay.errors import TransientRemoteError
from faucet_relay.models.records import AttestationResponse

log = logging.getLogger(__name__)


class IrisAttestationClient:
    """Reads CCTP attestation status from the IRIS API.

    GET {base_url}/{message_hash} returns {status?, attestation?}. A 404 means
    the message is not indexed yet; anything else unexpected is transient.
    """

    def __init__(
        self,
        base_url: str = "https://iris-api-sandbox.circle.com/v1/attestations",
        request_timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=request_timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, identifier: str) -> str:
        return f"{self._base_url}/{identifier}"

    async def fetch(self, identifier: str) -> AttestationResponse:
        url = self.url_for(identifier)
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise TransientRemoteError(f"GET {url} failed: {exc}") from exc

        if resp.status_code == 404:
            return AttestationResponse(found=False, status_code=404)

        if not resp.is_success:
            raise TransientRemoteError(
                f"HTTP {resp.status_code}: {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        try:
            data = resp.json()
        except ValueError as exc:
            raise TransientRemoteError(
                f"malformed attestation body: {exc}", status_code=resp.status_code,
            ) from exc
        if not isinstance(data, dict):
            raise TransientRemoteError(
                f"unexpected attestation body type: {type(data).__name__}",
                status_code=resp.status_code,
            )

        status = data.get("status")
        return AttestationResponse(
            found=True,
            status_code=resp.status_code,
            status=str(status) if status is not None else None,
            attestation=data.get("attestation"),
            payload=data,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
