"""Typed shapes: ABI entries (types.abi) and chain/result models (types.core)."""

from .abi import AbiModel, event_topic, function_selector  # noqa: F401
from .core import (  # noqa: F401
    DeployResult,
    HasVotedResult,
    Log,
    ProposalRecord,
    Receipt,
    StateChangeResult,
    TokenOf,
    VoteChoice,
    VoteResult,
)

__all__ = [
    "AbiModel",
    "event_topic",
    "function_selector",
    "DeployResult",
    "HasVotedResult",
    "Log",
    "ProposalRecord",
    "Receipt",
    "StateChangeResult",
    "TokenOf",
    "VoteChoice",
    "VoteResult",
]
