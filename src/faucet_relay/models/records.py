"""Result types for faucet claims and attestation reads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

PENDING_SENTINEL = "pending"


@dataclass(frozen=True)
class FaucetResponse:
    """Decoded reply from the faucet claim endpoint."""

    ok: bool
    status_code: int
    message: str | None = None  # set on 2xx
    error: str | None = None  # set on non-2xx


@dataclass(frozen=True)
class ClaimOutcome:
    """Result of one claim attempt for a (wallet, chain) pair."""

    wallet_address: str
    chain: str  # chain key
    success: bool
    message: str | None = None
    error: str | None = None
    duration_ms: int = 0


@dataclass
class ChainRunSummary:
    """Aggregated claim outcomes for one chain in one run."""

    chain: str
    outcomes: list[ClaimOutcome] = field(default_factory=list)
    skipped: bool = False

    @property
    def success_count(self) -> int:
        return sum(1 for o in self.outcomes if o.success)

    @property
    def failed_count(self) -> int:
        return sum(1 for o in self.outcomes if not o.success)


@dataclass
class RunSummary:
    """Global summary of a full claim cycle across all chains."""

    started_at: str  # ISO 8601
    duration_s: float = 0.0
    chains: list[ChainRunSummary] = field(default_factory=list)

    @property
    def total_success(self) -> int:
        return sum(c.success_count for c in self.chains)

    @property
    def total_failed(self) -> int:
        return sum(c.failed_count for c in self.chains)


@dataclass(frozen=True)
class AttestationResponse:
    """Decoded reply from the attestation status endpoint.

    ``payload`` is the raw JSON object and is what callers receive once the
    attestation is ready.
    """

    found: bool
    status_code: int
    status: str | None = None  # coarse upstream status, informational only
    attestation: Any = None
    payload: dict[str, Any] | None = None

    @property
    def is_ready(self) -> bool:
        """True once ``attestation`` carries a final (non-pending) value."""
        value = self.attestation
        # JSON null, "", 0 and false are absent; {} and [] are final values.
        if value is None or value == "" or value == 0:
            return False
        if isinstance(value, str) and value.lower() == PENDING_SENTINEL:
            return False
        return True


@dataclass
class PollState:
    """Transient bookkeeping for a single poll invocation."""

    identifier: str
    started_at: float
    attempts: int = 0
    elapsed: float = 0.0
    last_status: str | None = None
