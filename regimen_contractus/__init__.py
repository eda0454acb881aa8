"""
regimen-contractus (Python)
Async clients for the Arbiter, Proposal, Regimen and Sigillum contracts.
"""

from .version import __version__  # noqa: F401

# Core config & errors
from .config import ClientOptions, SDKConfig  # noqa: F401
from .errors import (  # noqa: F401
    NOT_FOUND_CODES,
    AbiError,
    ArtifactError,
    CallError,
    ContractusError,
    DeploymentError,
    ErrorCode,
    EventNotFoundError,
    MetadataDecodeError,
    RpcError,
    TransactionIncompleteError,
    is_not_found,
)

# Connection
from .rpc import AsyncRpcClient, ChainConnection, Connection, ConnectionConfig  # noqa: F401

# Addresses & hashing
from .address import ZERO_ADDRESS, addresses_equal, normalize_address  # noqa: F401
from .utils.hash import role_hash  # noqa: F401

# Metadata
from .metadata import decode_data_uri, encode_data_uri  # noqa: F401

# Logging
from .logger import configure as configure_logging, create_logger  # noqa: F401

# Result types
from .types.core import (  # noqa: F401
    DeployResult,
    HasVotedResult,
    ProposalRecord,
    Receipt,
    StateChangeResult,
    TokenOf,
    VoteChoice,
    VoteResult,
)

# Contracts
from .contracts.client import ContractClient, ContractHandle  # noqa: F401
from .models import (  # noqa: F401
    NOT_OWNER_OF_TOKEN,
    RECIPIENT_ALREADY_HAS_TOKEN,
    TOKEN_DOES_NOT_EXIST,
    Arbiter,
    Proposal,
    Rank,
    Regimen,
    Sigillum,
    SigillumOrdoAdministratorum,
)

__all__ = [
    "__version__",
    "ClientOptions",
    "SDKConfig",
    "NOT_FOUND_CODES",
    "AbiError",
    "ArtifactError",
    "CallError",
    "ContractusError",
    "DeploymentError",
    "ErrorCode",
    "EventNotFoundError",
    "MetadataDecodeError",
    "RpcError",
    "TransactionIncompleteError",
    "is_not_found",
    "AsyncRpcClient",
    "ChainConnection",
    "Connection",
    "ConnectionConfig",
    "ZERO_ADDRESS",
    "addresses_equal",
    "normalize_address",
    "role_hash",
    "decode_data_uri",
    "encode_data_uri",
    "configure_logging",
    "create_logger",
    "DeployResult",
    "HasVotedResult",
    "ProposalRecord",
    "Receipt",
    "StateChangeResult",
    "TokenOf",
    "VoteChoice",
    "VoteResult",
    "ContractClient",
    "ContractHandle",
    "Arbiter",
    "Proposal",
    "Rank",
    "Regimen",
    "Sigillum",
    "SigillumOrdoAdministratorum",
    "NOT_OWNER_OF_TOKEN",
    "RECIPIENT_ALREADY_HAS_TOKEN",
    "TOKEN_DOES_NOT_EXIST",
]
