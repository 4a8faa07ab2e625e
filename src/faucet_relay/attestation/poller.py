"""Attestation poller - bounded retry-with-deadline against the IRIS API."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable

from faucet_relay.errors import PollTimeoutError, TransientRemoteError
from faucet_relay.interfaces.attestation import AttestationSource
from faucet_relay.interfaces.observer import EventSink
from faucet_relay.models.events import (
    PollAttempted,
    PollStarted,
    PollSucceeded,
    PollTimedOut,
)
from faucet_relay.models.records import AttestationResponse, PollState
from faucet_relay.observers import LoggingEventSink

log = logging.getLogger(__name__)

STATUS_PENDING_CONFIRMATIONS = "pending_confirmations"
STATUS_COMPLETE = "complete"


def _phase(response: AttestationResponse) -> str:
    """Classify a non-ready response for observers."""
    if not response.found:
        return "not_found"
    if response.status == STATUS_PENDING_CONFIRMATIONS:
        return "pending_confirmations"
    if response.status == STATUS_COMPLETE:
        # Upstream sometimes reports complete before the attestation is attached.
        return "complete_without_attestation"
    return "pending"


class AttestationPoller:
    """Polls an AttestationSource until the attestation is ready.

    Each call to poll() is one cycle:
    1. Fetch the current status (one request)
    2. Return the payload as soon as ``attestation`` holds a final value
    3. Otherwise check the deadline and raise PollTimeoutError if exceeded
    4. Sleep poll_interval and repeat

    Transient errors and 404s never end the cycle early; only the deadline
    (or max_attempts, when set) does. The coarse ``status`` field is only
    reported to observers.
    """

    def __init__(
        self,
        source: AttestationSource,
        timeout: float = 180.0,
        poll_interval: float = 3.0,
        max_attempts: int | None = None,
        events: EventSink | None = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._source = source
        self._timeout = timeout
        self._poll_interval = poll_interval
        self._max_attempts = max_attempts
        self._events = events or LoggingEventSink()
        self._clock = clock
        self._sleep = sleep

    async def poll(self, identifier: str) -> dict[str, Any]:
        """Resolve an identifier to its attestation payload."""
        state = PollState(identifier=identifier, started_at=self._clock())
        self._events.emit(PollStarted(identifier=identifier))

        while True:
            state.attempts += 1
            state.elapsed = self._clock() - state.started_at

            try:
                response = await self._source.fetch(identifier)
            except TransientRemoteError as exc:
                log.debug("Attestation fetch for %s failed: %s", identifier, exc)
                self._events.emit(PollAttempted(
                    identifier=identifier,
                    attempt=state.attempts,
                    elapsed=state.elapsed,
                    phase="error",
                    status_code=exc.status_code,
                    detail=str(exc),
                ))
            else:
                if response.is_ready and response.payload is not None:
                    state.elapsed = self._clock() - state.started_at
                    self._events.emit(PollSucceeded(
                        identifier=identifier,
                        attempts=state.attempts,
                        elapsed=state.elapsed,
                    ))
                    return response.payload

                state.last_status = response.status
                self._events.emit(PollAttempted(
                    identifier=identifier,
                    attempt=state.attempts,
                    elapsed=state.elapsed,
                    phase=_phase(response),
                    status_code=response.status_code,
                    status=response.status,
                ))

            state.elapsed = self._clock() - state.started_at
            if self._deadline_reached(state):
                self._events.emit(PollTimedOut(
                    identifier=identifier,
                    attempts=state.attempts,
                    elapsed=state.elapsed,
                ))
                raise PollTimeoutError(
                    identifier,
                    state.elapsed,
                    state.attempts,
                    url=self._source.url_for(identifier),
                )

            await self._sleep(self._poll_interval)

    def _deadline_reached(self, state: PollState) -> bool:
        if state.elapsed > self._timeout:
            return True
        return self._max_attempts is not None and state.attempts >= self._max_attempts
