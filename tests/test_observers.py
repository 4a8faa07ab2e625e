"""Event sinks: log levels, console colours and fan-out."""

from __future__ import annotations

import logging

from faucet_relay.models.events import (
    ChainSkipped,
    ClaimRecorded,
    PollAttempted,
    PollTimedOut,
    RunCompleted,
)
from faucet_relay.models.records import ChainRunSummary, ClaimOutcome, RunSummary
from faucet_relay.observers import (
    ConsoleEventSink,
    LoggingEventSink,
    MultiEventSink,
    describe,
)

from tests.conftest import WALLET_A
from tests.mocks import RecordingEventSink


def test_describe_claim_outcomes():
    ok = ClaimRecorded(
        outcome=ClaimOutcome(WALLET_A, "base_sepolia", True, message="sent"),
        chain_name="Base Sepolia Testnet",
    )
    failed = ClaimRecorded(
        outcome=ClaimOutcome(WALLET_A, "base_sepolia", False, error="limit"),
        chain_name="Base Sepolia Testnet",
    )

    assert describe(ok) == (
        logging.INFO, f"SUCCESS: sent ({WALLET_A} on Base Sepolia Testnet)",
    )
    level, message = describe(failed)
    assert level == logging.WARNING
    assert message.startswith("FAILED: limit")


def test_describe_run_summary():
    summary = RunSummary(
        started_at="2026-01-01T00:00:00+00:00",
        duration_s=7.4,
        chains=[ChainRunSummary(
            chain="base_sepolia",
            outcomes=[
                ClaimOutcome(WALLET_A, "base_sepolia", True),
                ClaimOutcome(WALLET_A, "base_sepolia", False),
            ],
        )],
    )

    level, message = describe(RunCompleted(summary=summary))

    assert level == logging.INFO
    assert message == "FINAL SUMMARY: 1 successful, 1 failed claims. Duration: 7s"


def test_describe_poll_phases():
    error = PollAttempted("0xabc", 2, 3.2, "error", detail="boom")
    complete = PollAttempted("0xabc", 3, 6.0, "complete_without_attestation", status="complete")

    assert describe(error)[0] == logging.WARNING
    assert "boom" in describe(error)[1]
    assert "attestation missing" in describe(complete)[1]
    assert describe(PollTimedOut("0xabc", 62, 183.0))[0] == logging.ERROR


def test_logging_sink_writes_records(caplog):
    caplog.set_level(logging.INFO, logger="faucet_relay.events")

    LoggingEventSink().emit(ChainSkipped("base_sepolia", "Base Sepolia Testnet"))

    assert caplog.records[-1].levelno == logging.WARNING
    assert "No wallets configured for Base Sepolia Testnet" in caplog.records[-1].message


def test_console_sink_prints(capsys):
    ConsoleEventSink().emit(ChainSkipped("base_sepolia", "Base Sepolia Testnet"))

    captured = capsys.readouterr()
    assert "No wallets configured" in captured.err


def test_multi_sink_fans_out_in_order():
    first, second = RecordingEventSink(), RecordingEventSink()
    event = ChainSkipped("base_sepolia", "Base Sepolia Testnet")

    MultiEventSink([first, second]).emit(event)

    assert first.events == [event]
    assert second.events == [event]
