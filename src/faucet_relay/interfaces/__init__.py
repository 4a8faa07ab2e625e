"""Protocol interfaces for faucet_relay components."""

from faucet_relay.interfaces.attestation import AttestationSource
from faucet_relay.interfaces.faucet import FaucetClient
from faucet_relay.interfaces.observer import EventSink

__all__ = ["AttestationSource", "FaucetClient", "EventSink"]
