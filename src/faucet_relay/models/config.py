"""Configuration models for the faucet claimer and attestation proxy."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FaucetConfig:
    """Faucet claim cycle configuration."""

    url: str = "https://faucet.circle.com/claim"
    wallets_path: str = "./wallets.json"
    claim_delay: float = 2.0  # seconds between wallets, regardless of outcome
    claim_interval: int = 3600  # seconds between cycles in loop mode
    request_timeout: float = 30.0
    create_sample_wallets: bool = True


@dataclass
class AttestationConfig:
    """Attestation poller configuration."""

    url: str = "https://iris-api-sandbox.circle.com/v1/attestations"
    timeout: float = 180.0  # wall-clock deadline per poll, seconds
    poll_interval: float = 3.0
    max_attempts: int | None = None  # None = bounded by timeout only
    request_timeout: float = 10.0


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3000


@dataclass
class AppConfig:
    """Complete application configuration."""

    faucet: FaucetConfig = field(default_factory=FaucetConfig)
    attestation: AttestationConfig = field(default_factory=AttestationConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    # Logging
    log_level: str = "info"
    log_file: str | None = None
