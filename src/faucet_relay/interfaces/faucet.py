"""FaucetClient protocol - requests testnet tokens for a wallet."""

from __future__ import annotations

from typing import Protocol

from faucet_relay.models.chains import ChainProfile
from faucet_relay.models.records import FaucetResponse


class FaucetClient(Protocol):
    """Sends claim requests to a token faucet."""

    async def request_tokens(self, address: str, chain: ChainProfile) -> FaucetResponse:
        """Issue exactly one claim request.

        Raises TransientRemoteError on network failure or an undecodable reply.
        """
        ...
