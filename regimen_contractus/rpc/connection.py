"""
Chain connection: the provider/signer the contract clients talk through.

`ChainConnection` wraps an `AsyncRpcClient` and exposes the handful of
Ethereum JSON-RPC endpoints the clients need:

  * eth_call                     read-only calls
  * eth_sendTransaction          writes and deployments, signed by the node-managed account
  * eth_getTransactionReceipt    receipt lookups
  * eth_chainId / eth_accounts   chain id and signer resolution

plus `wait_for_receipt`, which polls until the receipt appears or the
connection's receipt timeout elapses (then returns None).

The signer is the only mutable context: `with_signer(address)` returns a new
connection sharing the same HTTP transport but sending from another account.
Anything implementing the `Connection` protocol can stand in for this class.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from ..address import normalize_address
from ..config import SDKConfig
from ..errors import JsonRpcCode, RpcError
from ..utils.bytes import from_quantity, to_hex, to_quantity
from .http import AsyncRpcClient

HexStr = str


@runtime_checkable
class Connection(Protocol):
    """What a contract client needs from a chain connection."""

    async def signer_address(self) -> str: ...

    async def chain_id(self) -> int: ...

    async def call(self, to: str, data: bytes) -> bytes: ...

    async def send_transaction(self, to: Optional[str], data: bytes, *, value: int = 0) -> HexStr: ...

    async def get_transaction_receipt(self, tx_hash: HexStr) -> Optional[Dict[str, Any]]: ...

    async def wait_for_receipt(self, tx_hash: HexStr) -> Optional[Dict[str, Any]]: ...

    def with_signer(self, address: str) -> "Connection": ...


@dataclass(frozen=True)
class ConnectionConfig:
    url: str
    timeout_s: float = 30.0
    poll_interval_s: float = 0.25
    receipt_timeout_s: float = 120.0
    headers: Optional[Mapping[str, str]] = None

    @classmethod
    def from_sdk_config(cls, cfg: SDKConfig) -> "ConnectionConfig":
        return cls(
            url=cfg.rpc_url,
            timeout_s=cfg.request_timeout,
            poll_interval_s=cfg.poll_interval,
            receipt_timeout_s=cfg.receipt_timeout,
            headers=cfg.http_headers(),
        )


class ChainConnection:
    """
    Async Ethereum JSON-RPC connection with a node-managed signer.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        *,
        signer_address: Optional[str] = None,
        rpc: Optional[AsyncRpcClient] = None,
    ):
        self._cfg = config
        self._rpc = rpc or AsyncRpcClient(config.url, timeout=config.timeout_s, headers=config.headers)
        self._signer = normalize_address(signer_address) if signer_address else None

    # ---------- construction ----------

    @classmethod
    def from_url(cls, url: str, **kwargs: Any) -> "ChainConnection":
        signer = kwargs.pop("signer_address", None)
        return cls(ConnectionConfig(url=url, **kwargs), signer_address=signer)

    @classmethod
    def from_env(cls, prefix: str = "CONTRACTUS_") -> "ChainConnection":
        return cls(ConnectionConfig.from_sdk_config(SDKConfig.from_env(prefix)))

    def with_signer(self, address: str) -> "ChainConnection":
        """Same transport, different sending account."""
        return ChainConnection(self._cfg, signer_address=address, rpc=self._rpc)

    @property
    def config(self) -> ConnectionConfig:
        return self._cfg

    # ---------- lifecycle ----------

    async def start(self) -> None:
        await self._rpc.start()

    async def close(self) -> None:
        await self._rpc.close()

    async def __aenter__(self) -> "ChainConnection":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    # ---------- typed methods ----------

    async def chain_id(self) -> int:
        return int(from_quantity(await self._rpc.request("eth_chainId")) or 0)

    async def accounts(self) -> List[str]:
        res = await self._rpc.request("eth_accounts")
        if not isinstance(res, list):
            raise RpcError(method="eth_accounts", code=JsonRpcCode.INTERNAL_ERROR, message="unexpected accounts payload", data=res)
        return [normalize_address(a) for a in res]

    async def signer_address(self) -> str:
        """The configured signer, or the node's first unlocked account."""
        if self._signer:
            return self._signer
        accounts = await self.accounts()
        if not accounts:
            raise RpcError(method="eth_accounts", code=JsonRpcCode.SERVER_ERROR, message="node exposes no accounts")
        return accounts[0]

    async def call(self, to: str, data: bytes) -> bytes:
        """eth_call against `latest`; returns the raw return bytes."""
        tx: Dict[str, Any] = {"to": normalize_address(to), "data": to_hex(data)}
        if self._signer:
            tx["from"] = self._signer
        res = await self._rpc.request("eth_call", [tx, "latest"])
        if res is None:
            return b""
        if not isinstance(res, str):
            raise RpcError(method="eth_call", code=JsonRpcCode.INTERNAL_ERROR, message="unexpected eth_call payload", data=res)
        s = res[2:] if res.startswith(("0x", "0X")) else res
        try:
            return bytes.fromhex(s)
        except ValueError as e:
            raise RpcError(method="eth_call", code=JsonRpcCode.INTERNAL_ERROR, message="eth_call returned invalid hex", data=res) from e

    async def send_transaction(self, to: Optional[str], data: bytes, *, value: int = 0) -> HexStr:
        """
        Submit a transaction signed by the node-managed account.
        `to=None` creates a contract. Returns the transaction hash.
        """
        tx: Dict[str, Any] = {"from": await self.signer_address(), "data": to_hex(data)}
        if to is not None:
            tx["to"] = normalize_address(to)
        if value:
            tx["value"] = to_quantity(value)
        res = await self._rpc.request("eth_sendTransaction", [tx])
        if not isinstance(res, str) or not res:
            raise RpcError(method="eth_sendTransaction", code=JsonRpcCode.INTERNAL_ERROR, message="unexpected tx hash payload", data=res)
        return res.lower()

    async def get_transaction_receipt(self, tx_hash: HexStr) -> Optional[Dict[str, Any]]:
        """Returns the receipt dict, or None while the tx is pending/unknown."""
        res = await self._rpc.request("eth_getTransactionReceipt", [tx_hash])
        if res in (None, False, ""):
            return None
        if not isinstance(res, dict):
            raise RpcError(method="eth_getTransactionReceipt", code=JsonRpcCode.INTERNAL_ERROR, message="unexpected receipt payload", data=res)
        return res

    # ---------- convenience ----------

    async def wait_for_receipt(
        self,
        tx_hash: HexStr,
        *,
        timeout_s: Optional[float] = None,
        poll_interval_s: Optional[float] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Poll for a transaction receipt until found or timeout.
        Returns None if not found within the timeout.
        """
        timeout = self._cfg.receipt_timeout_s if timeout_s is None else timeout_s
        interval = self._cfg.poll_interval_s if poll_interval_s is None else poll_interval_s
        deadline = time.monotonic() + timeout
        while True:
            rcpt = await self.get_transaction_receipt(tx_hash)
            if rcpt is not None:
                return rcpt
            if time.monotonic() >= deadline:
                return None
            await asyncio.sleep(interval)


__all__ = ["Connection", "ConnectionConfig", "ChainConnection", "HexStr"]
