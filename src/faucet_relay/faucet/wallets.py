"""Wallet list loading - JSON mapping of chain key to wallet addresses."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from faucet_relay.errors import WalletConfigError
from faucet_relay.models.chains import CHAINS

log = logging.getLogger(__name__)

SAMPLE_ADDRESS = "0x6021e09E8Cd947701E2368D60239C04486118f18"


def sample_wallets() -> dict[str, list[str]]:
    return {key: [SAMPLE_ADDRESS] for key in CHAINS}


def load_wallets(
    path: str | Path,
    create_sample: bool = False,
) -> dict[str, list[str]]:
    """Load the wallet mapping from disk.

    A missing file is created with a sample mapping when create_sample is set.
    Any other problem raises WalletConfigError, which aborts the run.
    """
    p = Path(path).expanduser()

    if not p.exists():
        if not create_sample:
            raise WalletConfigError(f"Wallet file not found: {p}")
        wallets = sample_wallets()
        try:
            p.write_text(json.dumps(wallets, indent=2) + "\n", encoding="utf-8")
        except OSError as exc:
            raise WalletConfigError(f"Could not create sample wallet file {p}: {exc}") from exc
        log.warning("Created sample %s - please edit with your wallet addresses", p)
        return wallets

    try:
        with open(p, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as exc:
        raise WalletConfigError(f"Could not read wallet file {p}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise WalletConfigError(f"Invalid JSON in wallet file {p}: {exc}") from exc

    if not isinstance(data, dict):
        raise WalletConfigError(f"Wallet file {p} must contain a JSON object")

    wallets: dict[str, list[str]] = {}
    for chain_key, addresses in data.items():
        if addresses is None:
            wallets[chain_key] = []
            continue
        if not isinstance(addresses, list) or not all(isinstance(a, str) for a in addresses):
            raise WalletConfigError(
                f"Wallets for {chain_key!r} in {p} must be a list of address strings"
            )
        wallets[chain_key] = [a.strip() for a in addresses if a.strip()]

    log.debug(
        "Loaded %d wallet(s) across %d chain(s) from %s",
        sum(len(v) for v in wallets.values()), len(wallets), p,
    )
    return wallets
