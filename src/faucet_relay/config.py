"""Configuration loading: TOML file + environment variables."""

from __future__ import annotations

import os
from pathlib import Path

try:
    import tomllib  # Python 3.11+
except ModuleNotFoundError:
    import tomli as tomllib  # type: ignore[no-redef]

from faucet_relay.models.config import AppConfig


def load_config(
    config_path: str | Path | None = None,
    env_prefix: str = "FAUCET_RELAY_",
) -> AppConfig:
    """Load configuration from a TOML file and env vars.

    Priority (highest wins):
        1. Environment variables (FAUCET_RELAY_FAUCET_URL, etc.)
        2. TOML config file
        3. Defaults from AppConfig
    """
    raw: dict = {}
    if config_path is not None:
        p = Path(config_path).expanduser()
        if p.exists():
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    cfg = AppConfig()

    # ── Faucet section ─────────────────────────────────────
    faucet = raw.get("faucet", {})
    if v := faucet.get("url"):
        cfg.faucet.url = str(v)
    if v := faucet.get("wallets_path"):
        cfg.faucet.wallets_path = str(v)
    if (v := faucet.get("claim_delay")) is not None:
        cfg.faucet.claim_delay = float(v)
    if (v := faucet.get("claim_interval")) is not None:
        cfg.faucet.claim_interval = int(v)
    if (v := faucet.get("request_timeout")) is not None:
        cfg.faucet.request_timeout = float(v)
    if (v := faucet.get("create_sample_wallets")) is not None:
        cfg.faucet.create_sample_wallets = bool(v)

    # ── Attestation section ────────────────────────────────
    attestation = raw.get("attestation", {})
    if v := attestation.get("url"):
        cfg.attestation.url = str(v)
    if (v := attestation.get("timeout")) is not None:
        cfg.attestation.timeout = float(v)
    if (v := attestation.get("poll_interval")) is not None:
        cfg.attestation.poll_interval = float(v)
    if (v := attestation.get("max_attempts")) is not None:
        cfg.attestation.max_attempts = int(v)
    if (v := attestation.get("request_timeout")) is not None:
        cfg.attestation.request_timeout = float(v)

    # ── Server section ─────────────────────────────────────
    server = raw.get("server", {})
    if v := server.get("host"):
        cfg.server.host = str(v)
    if (v := server.get("port")) is not None:
        cfg.server.port = int(v)

    # ── Logging section ────────────────────────────────────
    logging_raw = raw.get("logging", {})
    if v := logging_raw.get("level"):
        cfg.log_level = str(v)
    if v := logging_raw.get("file"):
        cfg.log_file = str(v)

    # ── Environment variable overrides (highest priority) ──
    if url := os.environ.get(f"{env_prefix}FAUCET_URL"):
        cfg.faucet.url = url
    if wallets := os.environ.get(f"{env_prefix}WALLETS"):
        cfg.faucet.wallets_path = wallets
    if url := os.environ.get(f"{env_prefix}ATTESTATION_URL"):
        cfg.attestation.url = url
    if port := os.environ.get(f"{env_prefix}PORT"):
        cfg.server.port = int(port)
    if level := os.environ.get(f"{env_prefix}LOG_LEVEL"):
        cfg.log_level = level

    # Expand ~ in paths
    cfg.faucet.wallets_path = str(Path(cfg.faucet.wallets_path).expanduser())
    if cfg.log_file:
        cfg.log_file = str(Path(cfg.log_file).expanduser())

    return cfg
