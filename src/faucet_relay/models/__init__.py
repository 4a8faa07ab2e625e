"""Data models for faucet_relay."""

from faucet_relay.models.chains import CHAINS, ChainProfile, get_chain
from faucet_relay.models.config import (
    AppConfig,
    AttestationConfig,
    FaucetConfig,
    ServerConfig,
)
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
from faucet_relay.models.records import (
    AttestationResponse,
    ChainRunSummary,
    ClaimOutcome,
    FaucetResponse,
    PollState,
    RunSummary,
)

__all__ = [
    "CHAINS", "ChainProfile", "get_chain",
    "AppConfig", "AttestationConfig", "FaucetConfig", "ServerConfig",
    "ChainSkipped", "ChainStarted", "ChainSummarized", "ClaimAttempted",
    "ClaimRecorded", "PollAttempted", "PollStarted", "PollSucceeded",
    "PollTimedOut", "RelayEvent", "RunCompleted",
    "AttestationResponse", "ChainRunSummary", "ClaimOutcome",
    "FaucetResponse", "PollState", "RunSummary",
]
