"""HTTP surface - the attestation proxy server."""

from faucet_relay.api.server import create_app, run_server

__all__ = ["create_app", "run_server"]
