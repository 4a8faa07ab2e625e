"""Event sinks - turn core events into log lines or console output."""

from __future__ import annotations

import logging
from typing import Iterable

import click

from faucet_relay.interfaces.observer import EventSink
from faucet_relay.models.events import (
    ChainSkipped,
    ChainStarted,
    ChainSummarized,
    ClaimAttempted,
    ClaimRecorded,
    PollAttempted,
    PollStarted,
    PollSucceeded,
    PollTimedOut,
    RelayEvent,
    RunCompleted,
)

log = logging.getLogger("faucet_relay.events")


def describe(event: RelayEvent) -> tuple[int, str]:
    """Return (logging level, message) for an event."""
    if isinstance(event, ChainSkipped):
        return logging.WARNING, f"No wallets configured for {event.chain_name}"
    if isinstance(event, ChainStarted):
        return logging.INFO, (
            f"Processing {event.wallet_count} wallet(s) for {event.chain_name}"
        )
    if isinstance(event, ClaimAttempted):
        return logging.INFO, (
            f"Claiming USDC for {event.wallet_address} on {event.chain_name}"
        )
    if isinstance(event, ClaimRecorded):
        o = event.outcome
        if o.success:
            return logging.INFO, (
                f"SUCCESS: {o.message} ({o.wallet_address} on {event.chain_name})"
            )
        return logging.WARNING, (
            f"FAILED: {o.error} ({o.wallet_address} on {event.chain_name})"
        )
    if isinstance(event, ChainSummarized):
        s = event.summary
        return logging.INFO, (
            f"SUMMARY {event.chain_name}: {s.success_count} successful, "
            f"{s.failed_count} failed"
        )
    if isinstance(event, RunCompleted):
        s = event.summary
        return logging.INFO, (
            f"FINAL SUMMARY: {s.total_success} successful, {s.total_failed} failed "
            f"claims. Duration: {round(s.duration_s)}s"
        )
    if isinstance(event, PollStarted):
        return logging.INFO, f"Starting attestation poll for {event.identifier}"
    if isinstance(event, PollAttempted):
        prefix = f"[{int(event.elapsed)}s] {event.identifier[:18]} attempt {event.attempt}"
        if event.phase == "error":
            return logging.WARNING, f"{prefix}: fetch error: {event.detail}"
        if event.phase == "not_found":
            return logging.INFO, f"{prefix}: attestation not found yet"
        if event.phase == "pending_confirmations":
            return logging.INFO, f"{prefix}: waiting for block confirmations"
        if event.phase == "complete_without_attestation":
            return logging.INFO, f"{prefix}: status complete but attestation missing"
        return logging.INFO, f"{prefix}: status {event.status or 'pending'}"
    if isinstance(event, PollSucceeded):
        return logging.INFO, (
            f"Attestation ready for {event.identifier} after {int(event.elapsed)}s "
            f"({event.attempts} attempts)"
        )
    if isinstance(event, PollTimedOut):
        return logging.ERROR, (
            f"Attestation timeout for {event.identifier} after {int(event.elapsed)}s "
            f"({event.attempts} attempts)"
        )
    return logging.DEBUG, repr(event)


class LoggingEventSink:
    """Writes every event through the standard logging module."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._log = logger or log

    def emit(self, event: RelayEvent) -> None:
        level, message = describe(event)
        self._log.log(level, message)


_CONSOLE_COLORS = {
    logging.DEBUG: "bright_black",
    logging.INFO: "blue",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
}


class ConsoleEventSink:
    """Coloured console output for interactive CLI runs."""

    def emit(self, event: RelayEvent) -> None:
        level, message = describe(event)
        color = _CONSOLE_COLORS.get(level, "white")
        if isinstance(event, (PollSucceeded, ChainSummarized, RunCompleted)):
            color = "green"
        elif isinstance(event, ClaimRecorded) and event.outcome.success:
            color = "green"
        elif isinstance(event, ClaimRecorded):
            color = "red"
        click.secho(message, fg=color, err=level >= logging.WARNING)


class MultiEventSink:
    """Fans each event out to several sinks, in order."""

    def __init__(self, sinks: Iterable[EventSink]) -> None:
        self._sinks = list(sinks)

    def emit(self, event: RelayEvent) -> None:
        for sink in self._sinks:
            sink.emit(event)
