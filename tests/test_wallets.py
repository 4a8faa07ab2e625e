"""Wallet file loading and fatal configuration errors."""

from __future__ import annotations

import json

import pytest

from faucet_relay.errors import FatalError, WalletConfigError
from faucet_relay.faucet.wallets import SAMPLE_ADDRESS, load_wallets
from faucet_relay.models.chains import CHAINS

from tests.conftest import WALLET_A, WALLET_B, write_wallets


def test_load_valid_wallets(tmp_path):
    path = tmp_path / "wallets.json"
    write_wallets(path, {
        "avalanche_fuji": [WALLET_A, WALLET_B],
        "base_sepolia": [],
        "ethereum_sepolia": None,
    })

    wallets = load_wallets(path)

    assert wallets["avalanche_fuji"] == [WALLET_A, WALLET_B]
    assert wallets["base_sepolia"] == []
    assert wallets["ethereum_sepolia"] == []


def test_blank_addresses_are_dropped(tmp_path):
    path = tmp_path / "wallets.json"
    write_wallets(path, {"avalanche_fuji": [f"  {WALLET_A} ", ""]})

    assert load_wallets(path) == {"avalanche_fuji": [WALLET_A]}


def test_missing_file_creates_sample(tmp_path):
    path = tmp_path / "wallets.json"

    wallets = load_wallets(path, create_sample=True)

    assert list(wallets) == list(CHAINS)
    assert all(v == [SAMPLE_ADDRESS] for v in wallets.values())
    assert json.loads(path.read_text()) == wallets


def test_missing_file_without_sample_is_fatal(tmp_path):
    with pytest.raises(WalletConfigError, match="not found"):
        load_wallets(tmp_path / "nope.json")


def test_corrupt_json_is_fatal(tmp_path):
    path = tmp_path / "wallets.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(FatalError, match="Invalid JSON"):
        load_wallets(path)


@pytest.mark.parametrize(
    "content",
    [
        [WALLET_A],
        {"avalanche_fuji": WALLET_A},
        {"avalanche_fuji": [WALLET_A, 42]},
    ],
)
def test_wrong_shape_is_fatal(tmp_path, content):
    path = tmp_path / "wallets.json"
    write_wallets(path, content)

    with pytest.raises(WalletConfigError):
        load_wallets(path)
