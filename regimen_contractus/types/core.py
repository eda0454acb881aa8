from __future__ import annotations

"""
Core chain and result types for the contract clients.

Two complementary representations:
- `TypedDict` shapes mirroring Ethereum JSON-RPC payloads (hex quantities).
- Frozen `@dataclass` models with ints/bytes and `from_rpc_dict()` helpers.

Result types (`StateChangeResult`, `ProposalRecord`, `VoteResult`, ...) are
snapshots of on-chain state at read time. Nothing here performs network I/O.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, TypedDict, TypeVar

from ..address import normalize_address
from ..utils.bytes import from_quantity

# --- Common aliases ----------------------------------------------------------

Address = str  # lowercase 0x + 40 hex
Hash = str  # 0x-prefixed 32-byte hex
Hex = str  # 0x-prefixed hex string

T = TypeVar("T")


# --- JSON-RPC TypedDict shapes ----------------------------------------------


class LogDict(TypedDict, total=False):
    address: Address
    topics: List[Hash]
    data: Hex
    logIndex: Hex
    transactionHash: Hash
    blockHash: Hash
    blockNumber: Hex
    removed: bool


class ReceiptDict(TypedDict, total=False):
    transactionHash: Hash
    transactionIndex: Hex
    blockHash: Hash
    blockNumber: Hex
    status: Hex  # 0x1 = success, 0x0 = revert
    gasUsed: Hex
    contractAddress: Optional[Address]
    logs: List[LogDict]
    to: Optional[Address]
    # "from" is a keyword; read via d.get("from")


# --- Dataclasses -------------------------------------------------------------


@dataclass(slots=True, frozen=True)
class Log:
    address: Address
    topics: Sequence[Hash]
    data: Hex
    log_index: Optional[int] = None
    transaction_hash: Optional[Hash] = None
    block_number: Optional[int] = None

    def to_rpc_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {"address": self.address, "topics": list(self.topics), "data": self.data}
        if self.log_index is not None:
            d["logIndex"] = hex(self.log_index)
        if self.transaction_hash is not None:
            d["transactionHash"] = self.transaction_hash
        if self.block_number is not None:
            d["blockNumber"] = hex(self.block_number)
        return d

    @staticmethod
    def from_rpc_dict(d: Mapping[str, Any]) -> "Log":
        return Log(
            address=normalize_address(d["address"]),
            topics=tuple(str(t).lower() for t in d.get("topics", ())),
            data=str(d.get("data") or "0x"),
            log_index=from_quantity(d.get("logIndex")),
            transaction_hash=d.get("transactionHash"),
            block_number=from_quantity(d.get("blockNumber")),
        )


@dataclass(slots=True, frozen=True)
class Receipt:
    """Confirmation record of transaction inclusion, with its emitted logs."""

    transaction_hash: Hash
    block_hash: Optional[Hash]
    block_number: Optional[int]
    status: int
    gas_used: int = 0
    contract_address: Optional[Address] = None
    from_address: Optional[Address] = None
    to_address: Optional[Address] = None
    logs: Sequence[Log] = field(default_factory=tuple)
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @property
    def succeeded(self) -> bool:
        return self.status == 1

    def to_rpc_dict(self) -> Dict[str, Any]:
        return dict(self.raw) if self.raw else {
            "transactionHash": self.transaction_hash,
            "blockHash": self.block_hash,
            "blockNumber": hex(self.block_number) if self.block_number is not None else None,
            "status": hex(self.status),
            "gasUsed": hex(self.gas_used),
            "contractAddress": self.contract_address,
            "from": self.from_address,
            "to": self.to_address,
            "logs": [lg.to_rpc_dict() for lg in self.logs],
        }

    @staticmethod
    def from_rpc_dict(d: Mapping[str, Any]) -> "Receipt":
        contract = d.get("contractAddress")
        sender = d.get("from")
        to = d.get("to")
        status = from_quantity(d.get("status"))
        return Receipt(
            transaction_hash=str(d.get("transactionHash", "")).lower(),
            block_hash=d.get("blockHash"),
            block_number=from_quantity(d.get("blockNumber")),
            # pre-Byzantium receipts carry no status; treat them as success
            status=1 if status is None else int(status),
            gas_used=int(from_quantity(d.get("gasUsed")) or 0),
            contract_address=normalize_address(contract) if contract else None,
            from_address=normalize_address(sender) if sender else None,
            to_address=normalize_address(to) if to else None,
            logs=tuple(Log.from_rpc_dict(ld) for ld in d.get("logs") or ()),
            raw=dict(d),
        )


@dataclass(frozen=True)
class StateChangeResult(Generic[T]):
    """Returned by every mutating call: the decoded result plus the raw receipt."""

    result: T
    transaction_receipt: Receipt


@dataclass(slots=True, frozen=True)
class DeployResult:
    address: Address
    deploy_tx_hash: Hash
    receipt: Optional[Receipt] = field(default=None, compare=False)


class VoteChoice(IntEnum):
    ABSTAIN = 0
    ACCEPT = 1
    REJECT = 2


@dataclass(slots=True, frozen=True)
class ProposalRecord:
    id: Address
    proposer: Address
    title: str
    start: int  # unix seconds
    duration: int  # seconds
    canceled: bool
    executed: bool

    @property
    def end(self) -> int:
        return self.start + self.duration


@dataclass(slots=True, frozen=True)
class VoteResult:
    accept: int
    abstain: int
    reject: int

    @property
    def total(self) -> int:
        return self.accept + self.abstain + self.reject


@dataclass(slots=True, frozen=True)
class HasVotedResult:
    choice: VoteChoice
    proposal: Address
    voted: bool


@dataclass(slots=True, frozen=True)
class TokenOf:
    id: int
    hashed_rank: bytes


def parse_vote_choice(value: Any) -> VoteChoice:
    """Map a raw uint8 to VoteChoice; unknown codes raise ValueError."""
    return VoteChoice(int(value))


__all__ = [
    "Address",
    "Hash",
    "Hex",
    "LogDict",
    "ReceiptDict",
    "Log",
    "Receipt",
    "StateChangeResult",
    "DeployResult",
    "VoteChoice",
    "ProposalRecord",
    "VoteResult",
    "HasVotedResult",
    "TokenOf",
    "parse_vote_choice",
]
