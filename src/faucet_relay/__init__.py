"""faucet_relay - Circle testnet USDC faucet claimer and CCTP attestation proxy."""

__version__ = "0.1.0"
