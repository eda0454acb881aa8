"""JSON-RPC transport and the chain connection used by the contract clients."""

from .connection import ChainConnection, Connection, ConnectionConfig  # noqa: F401
from .http import AsyncRpcClient  # noqa: F401

__all__ = ["AsyncRpcClient", "ChainConnection", "Connection", "ConnectionConfig"]
