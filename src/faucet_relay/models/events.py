"""Observer events emitted by the claim dispatcher and attestation poller."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from faucet_relay.models.records import ChainRunSummary, ClaimOutcome, RunSummary


# ── Claim cycle ────────────────────────────────────────


@dataclass(frozen=True)
class ChainSkipped:
    """No wallets configured for a chain."""

    chain: str
    chain_name: str


@dataclass(frozen=True)
class ChainStarted:
    chain: str
    chain_name: str
    wallet_count: int


@dataclass(frozen=True)
class ClaimAttempted:
    wallet_address: str
    chain: str
    chain_name: str


@dataclass(frozen=True)
class ClaimRecorded:
    outcome: ClaimOutcome
    chain_name: str


@dataclass(frozen=True)
class ChainSummarized:
    summary: ChainRunSummary
    chain_name: str


@dataclass(frozen=True)
class RunCompleted:
    summary: RunSummary


# ── Attestation polling ────────────────────────────────


@dataclass(frozen=True)
class PollStarted:
    identifier: str


@dataclass(frozen=True)
class PollAttempted:
    """One fetch against the attestation API that did not yield a result.

    phase is one of: "not_found", "error", "pending_confirmations",
    "complete_without_attestation", "pending".
    """

    identifier: str
    attempt: int
    elapsed: float  # seconds since PollStarted
    phase: str
    status_code: int | None = None
    status: str | None = None
    detail: str = ""


@dataclass(frozen=True)
class PollSucceeded:
    identifier: str
    attempts: int
    elapsed: float


@dataclass(frozen=True)
class PollTimedOut:
    identifier: str
    attempts: int
    elapsed: float


RelayEvent = Union[
    ChainSkipped,
    ChainStarted,
    ClaimAttempted,
    ClaimRecorded,
    ChainSummarized,
    RunCompleted,
    PollStarted,
    PollAttempted,
    PollSucceeded,
    PollTimedOut,
]
