"""CLI entry point for faucet_relay."""

from __future__ import annotations

import asyncio
import json
import logging
import sys

import click

from faucet_relay.api.server import run_server
from faucet_relay.attestation.client import IrisAttestationClient
from faucet_relay.attestation.poller import AttestationPoller
from faucet_relay.config import load_config
from faucet_relay.daemon import FaucetDaemon, run_daemon
from faucet_relay.errors import FatalError, PollTimeoutError
from faucet_relay.interfaces.observer import EventSink
from faucet_relay.models.chains import CHAINS, get_chain
from faucet_relay.models.config import AppConfig
from faucet_relay.observers import ConsoleEventSink, LoggingEventSink, MultiEventSink

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _setup_logging(level_name: str, verbose: bool, log_file: str | None) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name.upper(), logging.INFO)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))
        handlers.append(file_handler)
        # Events already reach the console through ConsoleEventSink.
        events_log = logging.getLogger("faucet_relay.events")
        events_log.propagate = False
        events_log.addHandler(file_handler)
    logging.basicConfig(
        level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT, handlers=handlers,
    )


def _event_sink(cfg: AppConfig) -> EventSink:
    """Console output, plus the log file when one is configured."""
    console = ConsoleEventSink()
    if not cfg.log_file:
        return console
    return MultiEventSink([console, LoggingEventSink()])


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """faucet_relay - Circle testnet USDC faucet claimer and attestation proxy."""
    ctx.ensure_object(dict)
    cfg = load_config(config_path)
    ctx.obj["config"] = cfg
    ctx.obj["verbose"] = verbose
    _setup_logging(cfg.log_level, verbose, cfg.log_file)


# ── Faucet ─────────────────────────────────────────────


@cli.command()
@click.option("--once/--loop", default=False, help="Run a single cycle instead of looping")
@click.option("--wallets", "wallets_path", default=None, help="Path to wallets JSON file")
@click.option("--chain", "chain_keys", multiple=True, help="Limit to chain key (repeatable)")
@click.pass_context
def claim(
    ctx: click.Context,
    once: bool,
    wallets_path: str | None,
    chain_keys: tuple[str, ...],
) -> None:
    """Claim testnet USDC for every configured wallet."""
    cfg = ctx.obj["config"]
    if wallets_path:
        cfg.faucet.wallets_path = wallets_path
    events = _event_sink(cfg)

    chains = None
    if chain_keys:
        try:
            selected = {get_chain(key).key for key in chain_keys}
        except FatalError as exc:
            click.secho(f"Fatal error: {exc}", fg="red", err=True)
            sys.exit(1)
        chains = {key: c for key, c in CHAINS.items() if key in selected}

    if not once:
        click.echo(f"Starting faucet claim loop (every {cfg.faucet.claim_interval}s)")
        asyncio.run(run_daemon(cfg, events=events, chains=chains))
        return

    async def _once():
        daemon = FaucetDaemon(cfg, events=events, chains=chains)
        try:
            return await daemon.run_once()
        finally:
            await daemon.close()

    try:
        summary = asyncio.run(_once())
    except FatalError as exc:
        click.secho(f"Fatal error: {exc}", fg="red", err=True)
        sys.exit(1)

    click.echo(
        f"Cycle completed in {round(summary.duration_s)} seconds: "
        f"{summary.total_success} successful, {summary.total_failed} failed"
    )


@cli.command()
def chains() -> None:
    """List supported testnet chains."""
    for key, chain in CHAINS.items():
        click.echo(f"  {key:18s} {chain.name:26s} chainId={chain.chain_id:10s} token={chain.token}")


# ── Attestation ────────────────────────────────────────


@cli.command()
@click.option("--host", default=None, help="Bind address")
@click.option("--port", type=int, default=None, help="Listen port")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Run the attestation proxy server."""
    cfg = ctx.obj["config"]
    if host:
        cfg.server.host = host
    if port:
        cfg.server.port = port

    click.echo(f"Starting attestation proxy on http://{cfg.server.host}:{cfg.server.port}")
    try:
        asyncio.run(run_server(cfg))
    except KeyboardInterrupt:
        click.echo("Shutting down")


@cli.command()
@click.argument("message_hash")
@click.option("--timeout", type=float, default=None, help="Deadline in seconds")
@click.option("--interval", type=float, default=None, help="Seconds between polls")
@click.pass_context
def poll(
    ctx: click.Context,
    message_hash: str,
    timeout: float | None,
    interval: float | None,
) -> None:
    """Poll until MESSAGE_HASH is attested and print the payload."""
    cfg = ctx.obj["config"]

    async def _poll():
        source = IrisAttestationClient(
            cfg.attestation.url, request_timeout=cfg.attestation.request_timeout,
        )
        poller = AttestationPoller(
            source,
            timeout=timeout if timeout is not None else cfg.attestation.timeout,
            poll_interval=interval if interval is not None else cfg.attestation.poll_interval,
            max_attempts=cfg.attestation.max_attempts,
            events=_event_sink(cfg),
        )
        try:
            return await poller.poll(message_hash)
        finally:
            await source.aclose()

    try:
        result = asyncio.run(_poll())
    except PollTimeoutError as exc:
        click.secho(str(exc), fg="red", err=True)
        sys.exit(1)

    click.echo(json.dumps(result, indent=2))


# ── Info ───────────────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show effective configuration."""
    cfg = ctx.obj["config"]
    click.echo(f"Faucet URL:       {cfg.faucet.url}")
    click.echo(f"Wallets file:     {cfg.faucet.wallets_path}")
    click.echo(f"Claim delay:      {cfg.faucet.claim_delay}s")
    click.echo(f"Claim interval:   {cfg.faucet.claim_interval}s")
    click.echo(f"Attestation URL:  {cfg.attestation.url}")
    click.echo(f"Poll timeout:     {cfg.attestation.timeout}s")
    click.echo(f"Poll interval:    {cfg.attestation.poll_interval}s")
    max_attempts = cfg.attestation.max_attempts
    click.echo(f"Max attempts:     {'(unbounded)' if max_attempts is None else max_attempts}")
    click.echo(f"Server:           {cfg.server.host}:{cfg.server.port}")
    click.echo(f"Log file:         {cfg.log_file or '(none)'}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
