"""Circle faucet client - POSTs claim requests for testnet USDC."""

from __future__ import annotations

import logging

import httpx

from faucet_relay.errors import TransientRemoteError
from faucet_relay.models.chains import ChainProfile
from faucet_relay.models.records import FaucetResponse

log = logging.getLogger(__name__)


class CircleFaucetClient:
    """Sends one claim request per call to the Circle testnet faucet."""

    def __init__(
        self,
        url: str = "https://faucet.circle.com/claim",
        request_timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=request_timeout)

    async def request_tokens(self, address: str, chain: ChainProfile) -> FaucetResponse:
        body = {
            "address": address,
            "chainId": chain.chain_id,
            "token": chain.token,
        }
        try:
            resp = await self._client.post(self._url, json=body)
        except httpx.HTTPError as exc:
            raise TransientRemoteError(f"Network error: {exc}") from exc

        try:
            data = resp.json()
        except ValueError as exc:
            raise TransientRemoteError(
                f"malformed faucet response (HTTP {resp.status_code})",
                status_code=resp.status_code,
            ) from exc
        if not isinstance(data, dict):
            data = {}

        if resp.is_success:
            return FaucetResponse(
                ok=True, status_code=resp.status_code, message=data.get("message"),
            )
        log.debug("Faucet rejected %s on %s: HTTP %d", address, chain.key, resp.status_code)
        return FaucetResponse(
            ok=False, status_code=resp.status_code, error=data.get("error"),
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
