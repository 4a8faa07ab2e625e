"""Shared fixtures for faucet_relay tests."""

from __future__ import annotations

import json

import pytest
from pytest_metadata.plugin import metadata_key

from faucet_relay.attestation.poller import AttestationPoller
from faucet_relay.faucet.dispatcher import ClaimDispatcher
from faucet_relay.models.config import (
    AppConfig,
    AttestationConfig,
    FaucetConfig,
    ServerConfig,
)

from tests.mocks import (
    FakeClock,
    MockAttestationSource,
    MockFaucetClient,
    RecordingEventSink,
)

WALLET_A = "0x1111111111111111111111111111111111111111"
WALLET_B = "0x2222222222222222222222222222222222222222"
WALLET_C = "0x3333333333333333333333333333333333333333"

FAUCET_URL = "https://faucet.example.com/claim"
IRIS_URL = "https://iris.example.com/v1/attestations"


def pytest_configure(config):
    """Add endpoint info to the report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Faucet endpoint"] = FAUCET_URL
    meta["Attestation endpoint"] = IRIS_URL


def make_test_config(tmp_path=None, **faucet_overrides) -> AppConfig:
    """Build an AppConfig suitable for testing."""
    faucet = dict(
        url=FAUCET_URL,
        wallets_path=str(tmp_path / "wallets.json") if tmp_path else "wallets.json",
        claim_delay=0.0,
        claim_interval=1,
        request_timeout=5.0,
        create_sample_wallets=False,
    )
    faucet.update(faucet_overrides)
    return AppConfig(
        faucet=FaucetConfig(**faucet),
        attestation=AttestationConfig(url=IRIS_URL, timeout=180.0, poll_interval=3.0),
        server=ServerConfig(host="127.0.0.1", port=0),
    )


def write_wallets(path, wallets: dict) -> None:
    path.write_text(json.dumps(wallets), encoding="utf-8")


@pytest.fixture
def test_config(tmp_path):
    return make_test_config(tmp_path)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sink():
    return RecordingEventSink()


@pytest.fixture
def mock_faucet():
    return MockFaucetClient()


@pytest.fixture
def dispatcher(mock_faucet, clock, sink):
    """ClaimDispatcher with a mock faucet and simulated time."""
    return ClaimDispatcher(
        mock_faucet, claim_delay=2.0, events=sink, sleep=clock.sleep, clock=clock,
    )


def make_poller(
    source: MockAttestationSource,
    clock: FakeClock,
    sink: RecordingEventSink | None = None,
    **kwargs,
) -> AttestationPoller:
    """AttestationPoller driven entirely by the fake clock."""
    kwargs.setdefault("timeout", 180.0)
    kwargs.setdefault("poll_interval", 3.0)
    return AttestationPoller(
        source, events=sink or RecordingEventSink(), clock=clock, sleep=clock.sleep, **kwargs,
    )
