"""Attestation proxy HTTP server (aiohttp)."""

from __future__ import annotations

import asyncio
import logging

from aiohttp import web

from faucet_relay.attestation.client import IrisAttestationClient
from faucet_relay.attestation.poller import AttestationPoller
from faucet_relay.errors import PollTimeoutError
from faucet_relay.interfaces.observer import EventSink
from faucet_relay.models.config import AppConfig

log = logging.getLogger(__name__)

POLLER_KEY = web.AppKey("poller", AttestationPoller)
ATTESTATION_URL_KEY = web.AppKey("attestation_url", str)


@web.middleware
async def cors_middleware(request: web.Request, handler) -> web.StreamResponse:
    """Allow browser front-ends on any origin to call the proxy."""
    if request.method == "OPTIONS":
        response: web.StreamResponse = web.Response(status=204)
    else:
        response = await handler(request)
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET, OPTIONS"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


async def handle_attestation(request: web.Request) -> web.Response:
    identifier = request.match_info["identifier"]
    poller = request.app[POLLER_KEY]
    log.info("New attestation request: %s", identifier)

    try:
        result = await poller.poll(identifier)
    except PollTimeoutError as exc:
        log.warning("Attestation request %s timed out: %s", identifier, exc)
        return web.json_response({"error": str(exc)}, status=504)
    except Exception as exc:
        log.error("Attestation request %s failed: %s", identifier, exc, exc_info=True)
        return web.json_response({"error": str(exc)}, status=500)

    log.info("Sending attestation response for %s", identifier)
    return web.json_response(result)


async def handle_health(request: web.Request) -> web.Response:
    return web.json_response({
        "status": "ok",
        "attestation_api": request.app[ATTESTATION_URL_KEY],
    })


def create_app(poller: AttestationPoller, attestation_url: str) -> web.Application:
    """Build the proxy application around an existing poller."""
    app = web.Application(middlewares=[cors_middleware])
    app[POLLER_KEY] = poller
    app[ATTESTATION_URL_KEY] = attestation_url
    app.router.add_get("/attestations/{identifier}", handle_attestation)
    app.router.add_get("/health", handle_health)
    return app


async def run_server(cfg: AppConfig, events: EventSink | None = None) -> None:
    """Serve the proxy until cancelled."""
    source = IrisAttestationClient(
        cfg.attestation.url, request_timeout=cfg.attestation.request_timeout,
    )
    poller = AttestationPoller(
        source,
        timeout=cfg.attestation.timeout,
        poll_interval=cfg.attestation.poll_interval,
        max_attempts=cfg.attestation.max_attempts,
        events=events,
    )
    app = create_app(poller, source.base_url)

    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, cfg.server.host, cfg.server.port)
    await site.start()
    log.info("Attestation proxy listening on http://%s:%d", cfg.server.host, cfg.server.port)
    log.info("Attestation API: %s", source.base_url)

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()
        await source.aclose()
        log.info("Attestation proxy shut down cleanly")
