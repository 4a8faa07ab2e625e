"""Faucet claiming - HTTP client, wallet loading and the claim dispatcher."""

from faucet_relay.faucet.client import CircleFaucetClient
from faucet_relay.faucet.dispatcher import ClaimDispatcher
from faucet_relay.faucet.wallets import load_wallets

__all__ = ["CircleFaucetClient", "ClaimDispatcher", "load_wallets"]
