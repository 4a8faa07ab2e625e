"""Claim daemon - runs faucet claim cycles once or on a fixed interval."""

from __future__ import annotations

import asyncio
import logging
import signal
from datetime import datetime, timedelta
from typing import Mapping

from faucet_relay.faucet.client import CircleFaucetClient
from faucet_relay.faucet.dispatcher import ClaimDispatcher
from faucet_relay.faucet.wallets import load_wallets
from faucet_relay.interfaces.observer import EventSink
from faucet_relay.models.chains import CHAINS, ChainProfile
from faucet_relay.models.config import AppConfig
from faucet_relay.models.records import RunSummary

log = logging.getLogger(__name__)


class FaucetDaemon:
    """Wires wallet loading to the claim dispatcher.

    run_once() is one claim cycle; a wallet configuration error escapes it
    uncaught. run_forever() repeats cycles every claim_interval seconds.

    events and chains configure the dispatcher built here, so they cannot be
    combined with an injected dispatcher.
    """

    def __init__(
        self,
        cfg: AppConfig,
        dispatcher: ClaimDispatcher | None = None,
        events: EventSink | None = None,
        chains: Mapping[str, ChainProfile] | None = None,
    ) -> None:
        self._cfg = cfg
        self._running = False
        self._stop_event = asyncio.Event()
        self._client: CircleFaucetClient | None = None

        if dispatcher is not None and (events is not None or chains is not None):
            raise ValueError("events and chains cannot be combined with a dispatcher")
        if dispatcher is None:
            self._client = CircleFaucetClient(
                cfg.faucet.url, request_timeout=cfg.faucet.request_timeout,
            )
            dispatcher = ClaimDispatcher(
                self._client,
                chains=chains or CHAINS,
                claim_delay=cfg.faucet.claim_delay,
                events=events,
            )
        self.dispatcher = dispatcher

    async def run_once(self) -> RunSummary:
        """Load wallets and run one full claim cycle."""
        wallets = load_wallets(
            self._cfg.faucet.wallets_path,
            create_sample=self._cfg.faucet.create_sample_wallets,
        )
        return await self.dispatcher.run(wallets)

    async def run_forever(self) -> None:
        """Run claim cycles until stop() is called."""
        interval = self._cfg.faucet.claim_interval
        self._running = True
        log.info("Starting faucet claim loop (interval: %ds)", interval)

        try:
            while self._running:
                try:
                    await self.run_once()
                except asyncio.CancelledError:
                    log.info("Claim loop cancelled")
                    break
                except Exception as exc:
                    log.error("FATAL ERROR in claim cycle: %s", exc, exc_info=True)

                next_run = datetime.now() + timedelta(seconds=interval)
                log.info("Next run scheduled for %s", next_run.isoformat(timespec="seconds"))
                try:
                    await asyncio.wait_for(self._stop_event.wait(), timeout=interval)
                except asyncio.TimeoutError:
                    pass
        finally:
            await self.close()
            log.info("Claim loop shut down cleanly")

    async def stop(self) -> None:
        """Signal the loop to stop at its next suspension point."""
        log.info("Stop requested")
        self._running = False
        self._stop_event.set()

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()


async def run_daemon(
    cfg: AppConfig,
    events: EventSink | None = None,
    chains: Mapping[str, ChainProfile] | None = None,
) -> None:
    """Entry point for running the claim loop with signal handling."""
    daemon = FaucetDaemon(cfg, events=events, chains=chains)

    loop = asyncio.get_running_loop()

    def _signal_handler():
        asyncio.ensure_future(daemon.stop())

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _signal_handler)
        except NotImplementedError:
            # Windows doesn't support add_signal_handler
            pass

    await daemon.run_forever()
