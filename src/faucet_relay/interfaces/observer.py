"""EventSink protocol - receives progress events from the core loops."""

from __future__ import annotations

from typing import Protocol

from faucet_relay.models.events import RelayEvent


class EventSink(Protocol):
    """Subscriber for claim and poll events."""

    def emit(self, event: RelayEvent) -> None:
        ...
