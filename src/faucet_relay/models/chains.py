"""Static testnet chain profiles supported by the Circle faucet."""

from __future__ import annotations

from dataclasses import dataclass

from faucet_relay.errors import UnknownChainError


@dataclass(frozen=True)
class ChainProfile:
    """A faucet-supported testnet network."""

    key: str  # e.g. "base_sepolia"
    name: str
    chain_id: str  # decimal string, as the faucet API expects
    token: str = "USDC"


# Processing order is the insertion order below.
CHAINS: dict[str, ChainProfile] = {
    "avalanche_fuji": ChainProfile(
        key="avalanche_fuji",
        name="Avalanche Fuji Testnet",
        chain_id="43113",
    ),
    "ethereum_sepolia": ChainProfile(
        key="ethereum_sepolia",
        name="Ethereum Sepolia Testnet",
        chain_id="11155111",
    ),
    "base_sepolia": ChainProfile(
        key="base_sepolia",
        name="Base Sepolia Testnet",
        chain_id="84532",
    ),
}


def get_chain(key: str) -> ChainProfile:
    try:
        return CHAINS[key]
    except KeyError:
        raise UnknownChainError(
            f"Unknown chain {key!r} (expected one of: {', '.join(CHAINS)})"
        ) from None
