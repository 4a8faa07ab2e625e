"""Exception hierarchy shared by the claim and attestation flows."""

from __future__ import annotations


class FaucetRelayError(Exception):
    """Base class for all faucet_relay errors."""


class TransientRemoteError(FaucetRelayError):
    """A remote call failed in a way that is worth retrying later.

    Covers network failures, unexpected HTTP statuses and undecodable bodies.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PollTimeoutError(FaucetRelayError):
    """No attestation became available before the poll deadline."""

    def __init__(
        self,
        identifier: str,
        elapsed: float,
        attempts: int,
        url: str | None = None,
    ) -> None:
        self.identifier = identifier
        self.elapsed = elapsed
        self.attempts = attempts
        self.url = url
        message = (
            f"Attestation timeout for {identifier} after {int(elapsed)} seconds "
            f"({attempts} attempts). The transaction may need more confirmations."
        )
        if url:
            message += f" Try checking {url} directly."
        super().__init__(message)


class FatalError(FaucetRelayError):
    """Setup or configuration problem that aborts a whole run."""


class WalletConfigError(FatalError):
    """Wallet list is missing, unreadable or malformed."""


class UnknownChainError(FatalError):
    """A chain key does not match any configured chain profile."""
