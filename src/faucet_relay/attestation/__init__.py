"""Attestation polling - IRIS client and deadline-bounded poller."""

from faucet_relay.attestation.client import IrisAttestationClient
from faucet_relay.attestation.poller import AttestationPoller

__all__ = ["AttestationPoller", "IrisAttestationClient"]
