"""Claim dispatcher - sequential, paced faucet claims across chains."""

from __future__ import annotations

import asyncio
import logging
import time
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Mapping, Sequence

from faucet_relay.errors import TransientRemoteError
from faucet_relay.interfaces.faucet import FaucetClient
from faucet_relay.interfaces.observer import EventSink
from faucet_relay.models.chains import CHAINS, ChainProfile
from faucet_relay.models.events import (
    ChainSkipped,
    ChainStarted,
    ChainSummarized,
    ClaimAttempted,
    ClaimRecorded,
    RunCompleted,
)
from faucet_relay.models.records import ChainRunSummary, ClaimOutcome, RunSummary
from faucet_relay.observers import LoggingEventSink

log = logging.getLogger(__name__)

DEFAULT_SUCCESS_MESSAGE = "USDC claimed successfully"
DEFAULT_ERROR = "Unknown error"


class ClaimDispatcher:
    """Requests faucet funds for every configured wallet, one at a time.

    Claims never run concurrently and are never retried within a run. After
    each claim the dispatcher waits claim_delay seconds whatever the outcome.
    """

    def __init__(
        self,
        client: FaucetClient,
        chains: Mapping[str, ChainProfile] = CHAINS,
        claim_delay: float = 2.0,
        events: EventSink | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._chains = chains
        self._claim_delay = claim_delay
        self._events = events or LoggingEventSink()
        self._sleep = sleep
        self._clock = clock

    async def claim(self, wallet_address: str, chain: ChainProfile) -> ClaimOutcome:
        """Issue one claim request and record its outcome."""
        self._events.emit(ClaimAttempted(
            wallet_address=wallet_address, chain=chain.key, chain_name=chain.name,
        ))
        start = self._clock()

        try:
            response = await self._client.request_tokens(wallet_address, chain)
        except TransientRemoteError as exc:
            outcome = ClaimOutcome(
                wallet_address=wallet_address,
                chain=chain.key,
                success=False,
                error=str(exc),
                duration_ms=int((self._clock() - start) * 1000),
            )
        else:
            duration = int((self._clock() - start) * 1000)
            if response.ok:
                outcome = ClaimOutcome(
                    wallet_address=wallet_address,
                    chain=chain.key,
                    success=True,
                    message=response.message or DEFAULT_SUCCESS_MESSAGE,
                    duration_ms=duration,
                )
            else:
                outcome = ClaimOutcome(
                    wallet_address=wallet_address,
                    chain=chain.key,
                    success=False,
                    error=response.error or DEFAULT_ERROR,
                    duration_ms=duration,
                )

        self._events.emit(ClaimRecorded(outcome=outcome, chain_name=chain.name))
        return outcome

    async def process_chain(
        self, chain: ChainProfile, wallets: Sequence[str] | None,
    ) -> ChainRunSummary:
        """Claim for each wallet in list order, pacing between requests."""
        if not wallets:
            self._events.emit(ChainSkipped(chain=chain.key, chain_name=chain.name))
            return ChainRunSummary(chain=chain.key, skipped=True)

        self._events.emit(ChainStarted(
            chain=chain.key, chain_name=chain.name, wallet_count=len(wallets),
        ))
        summary = ChainRunSummary(chain=chain.key)
        for wallet in wallets:
            summary.outcomes.append(await self.claim(wallet, chain))
            await self._sleep(self._claim_delay)

        self._events.emit(ChainSummarized(summary=summary, chain_name=chain.name))
        return summary

    async def run(self, wallets_by_chain: Mapping[str, Sequence[str]]) -> RunSummary:
        """Process every configured chain in order and aggregate totals."""
        started = datetime.now(timezone.utc).isoformat()
        start = self._clock()

        for key in wallets_by_chain:
            if key not in CHAINS:
                log.warning("Ignoring wallets for chain %r (not configured)", key)
            elif key not in self._chains:
                log.debug("Skipping wallets for chain %r (not selected)", key)

        summary = RunSummary(started_at=started)
        for key, chain in self._chains.items():
            summary.chains.append(
                await self.process_chain(chain, wallets_by_chain.get(key))
            )

        summary.duration_s = self._clock() - start
        self._events.emit(RunCompleted(summary=summary))
        return summary
