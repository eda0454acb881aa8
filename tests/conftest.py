"""
Shared pytest fixtures:
- FakeConnection: in-memory stand-in for ChainConnection that records calls
- Helpers to ABI-encode canned return values, event logs and receipts
- Well-known addresses used across the model tests
"""
from __future__ import annotations

import copy
import logging
import typing as t

import pytest
from eth_abi import encode as abi_encode

from regimen_contractus.logger import LIBRARY_LOGGER
from regimen_contractus.types.abi import canonical_type, event_topic, function_selector

SIGNER = "0x" + "aa" * 20
OTHER = "0x" + "bb" * 20
CONTRACT = "0x" + "cc" * 20
TOKEN = "0x" + "dd" * 20
PROPOSAL = "0x" + "ee" * 20
CHAIN_ID = 31337


# ---------- ENCODING HELPERS ----------

def _find(abi: t.Sequence[t.Mapping[str, t.Any]], kind: str, name: str) -> t.Mapping[str, t.Any]:
    for entry in abi:
        if entry.get("type") == kind and entry.get("name") == name:
            return entry
    raise KeyError(f"{kind} {name!r} not in ABI")


def encode_return(abi: t.Sequence[t.Mapping[str, t.Any]], fn: str, *values: t.Any) -> bytes:
    outputs = _find(abi, "function", fn).get("outputs", ())
    return abi_encode([canonical_type(o) for o in outputs], list(values))


def revert_data(reason: str) -> str:
    """Error(string) payload as returned by nodes in error.data."""
    return "0x08c379a0" + abi_encode(["string"], [reason]).hex()


def make_log(
    abi: t.Sequence[t.Mapping[str, t.Any]],
    event: str,
    *values: t.Any,
    address: str = CONTRACT,
    log_index: int = 0,
) -> dict:
    """RPC-shaped log dict for `event` with positional `values`."""
    ev = _find(abi, "event", event)
    inputs = list(ev.get("inputs", ()))
    topics = ["0x" + event_topic(ev).hex()]
    plain_types, plain_values = [], []
    for p, v in zip(inputs, values):
        if p.get("indexed"):
            topics.append("0x" + abi_encode([canonical_type(p)], [v]).hex())
        else:
            plain_types.append(canonical_type(p))
            plain_values.append(v)
    return {
        "address": address,
        "topics": topics,
        "data": "0x" + abi_encode(plain_types, plain_values).hex(),
        "logIndex": hex(log_index),
    }


def make_receipt(
    *,
    tx_hash: str = "0x" + "11" * 32,
    status: int = 1,
    logs: t.Sequence[dict] = (),
    contract_address: t.Optional[str] = None,
) -> dict:
    return {
        "transactionHash": tx_hash,
        "blockHash": "0x" + "22" * 32,
        "blockNumber": "0x10",
        "status": hex(status),
        "gasUsed": "0x5208",
        "contractAddress": contract_address,
        "from": SIGNER,
        "to": None if contract_address else CONTRACT,
        "logs": list(logs),
    }


# ---------- FAKE CONNECTION ----------

class FakeConnection:
    """
    Implements the Connection protocol in memory.

    - `on_call(selector_source, result)` registers the raw bytes (or an
      exception) returned by eth_call for a function selector.
    - `receipts` is a FIFO of receipt dicts (or None for "never mined")
      handed out by wait_for_receipt; when empty a bare success receipt is used.
    """

    def __init__(self, signer: str = SIGNER, chain_id: int = CHAIN_ID):
        self.signer = signer
        self.chain = chain_id
        self.calls: t.List[t.Tuple[str, bytes]] = []
        self.sent: t.List[t.Tuple[t.Optional[str], bytes, int, str]] = []
        self.call_results: t.Dict[bytes, t.Any] = {}
        self.receipts: t.List[t.Optional[dict]] = []
        self.send_error: t.Optional[BaseException] = None

    def on_call(self, abi: t.Sequence[t.Mapping[str, t.Any]], fn: str, result: t.Any) -> None:
        self.call_results[function_selector(_find(abi, "function", fn))] = result

    def sent_selectors(self) -> t.List[bytes]:
        return [data[:4] for _to, data, _v, _s in self.sent]

    async def signer_address(self) -> str:
        return self.signer

    async def chain_id(self) -> int:
        return self.chain

    async def call(self, to: str, data: bytes) -> bytes:
        self.calls.append((to, data))
        result = self.call_results.get(data[:4], b"")
        if isinstance(result, BaseException):
            raise result
        return result

    async def send_transaction(self, to: t.Optional[str], data: bytes, *, value: int = 0) -> str:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append((to, data, value, self.signer))
        return "0x" + f"{len(self.sent):064x}"

    async def get_transaction_receipt(self, tx_hash: str) -> t.Optional[dict]:
        return await self.wait_for_receipt(tx_hash)

    async def wait_for_receipt(self, tx_hash: str) -> t.Optional[dict]:
        if self.receipts:
            return self.receipts.pop(0)
        return make_receipt(tx_hash=tx_hash)

    def with_signer(self, address: str) -> "FakeConnection":
        # Shares recorded state so tests can inspect what the rebound signer sent.
        clone = copy.copy(self)
        clone.signer = address.lower()
        return clone


@pytest.fixture
def conn() -> FakeConnection:
    return FakeConnection()


@pytest.fixture(autouse=True)
def _reset_library_logger() -> t.Iterator[None]:
    lib = logging.getLogger(LIBRARY_LOGGER)
    handlers = list(lib.handlers)
    level = lib.level
    yield
    for h in list(lib.handlers):
        if h not in handlers:
            lib.removeHandler(h)
    lib.setLevel(level)
