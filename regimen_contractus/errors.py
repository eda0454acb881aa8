"""
Typed error classes for the contract clients.

Every failure that crosses a client boundary is normalized into this closed
taxonomy, so callers never inspect raw httpx / eth-abi / JSON-RPC shapes:

- RpcError                    transport or JSON-RPC level failure (connection layer only)
- CallError                   a view call or transaction failed (carries a structured `code`)
- DeploymentError             creation tx included but no contract address in the receipt
- ArtifactError               compiled artifact missing, unreadable or without creation bytecode
- TransactionIncompleteError  a submitted tx produced no receipt
- EventNotFoundError          receipt present but the expected event is missing
- MetadataDecodeError         malformed data URI / base64 / UTF-8 / JSON
- AbiError                    unknown function/event or un-encodable arguments

All of them derive from `ContractusError`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, FrozenSet, Optional, Tuple

__all__ = [
    "ContractusError",
    "JsonRpcCode",
    "ErrorCode",
    "NOT_FOUND_CODES",
    "RpcError",
    "CallError",
    "DeploymentError",
    "ArtifactError",
    "TransactionIncompleteError",
    "EventNotFoundError",
    "MetadataDecodeError",
    "AbiError",
    "from_jsonrpc_error",
    "is_not_found",
]


class ContractusError(Exception):
    """Base class for all regimen-contractus errors."""


class JsonRpcCode(IntEnum):
    # JSON-RPC 2.0 spec
    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603

    # Server errors (implementation-defined range: -32099 to -32000)
    SERVER_ERROR = -32000
    TRANSPORT_ERROR = -32098

    # geth / anvil: "execution reverted" with revert data
    EXECUTION_REVERTED = 3


class ErrorCode(str, Enum):
    """Structured codes carried by `CallError.code`."""

    CALL_EXCEPTION = "CALL_EXCEPTION"
    BAD_DATA = "BAD_DATA"
    NETWORK_ERROR = "NETWORK_ERROR"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


# Codes that mean "the record is not there" rather than "something broke".
NOT_FOUND_CODES: FrozenSet[ErrorCode] = frozenset({ErrorCode.BAD_DATA})


@dataclass(slots=True, eq=False)
class RpcError(ContractusError):
    """Raised when a JSON-RPC call returns an error object or the transport fails."""

    method: Optional[str]
    code: int
    message: str
    data: Optional[Any] = None
    request_id: Optional[Any] = None
    http_status: Optional[int] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        parts = [f"RPC[{self.method or '-'}] code={self.code} msg={self.message!r}"]
        if self.request_id is not None:
            parts.append(f"id={self.request_id}")
        if self.http_status is not None:
            parts.append(f"http={self.http_status}")
        if self.data is not None:
            parts.append(f"data={self.data!r}")
        return " ".join(parts)

    @property
    def code_enum(self) -> Optional[JsonRpcCode]:
        try:
            return JsonRpcCode(self.code)
        except ValueError:
            return None

    @property
    def is_transport(self) -> bool:
        return self.code == JsonRpcCode.TRANSPORT_ERROR


@dataclass(slots=True, eq=False)
class CallError(ContractusError):
    """
    Raised when a contract call or transaction fails.

    Fields:
      - message: human-readable description
      - code: structured `ErrorCode`
      - reason: decoded revert reason (Error(string) / Panic), if any
      - error_name / error_args: decoded custom ABI error, if any
      - method: contract function name, if known
      - data: raw revert payload (0x-hex), if any
    """

    message: str
    code: ErrorCode = ErrorCode.UNKNOWN_ERROR
    reason: Optional[str] = None
    error_name: Optional[str] = None
    error_args: Tuple[Any, ...] = field(default_factory=tuple)
    method: Optional[str] = None
    data: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        where = f" [fn={self.method}]" if self.method else ""
        bits = [f"CallError{where} {self.code.value}: {self.message}"]
        if self.reason is not None:
            bits.append(f"reason={self.reason!r}")
        if self.error_name:
            bits.append(f"error={self.error_name}{tuple(self.error_args)!r}")
        return " ".join(bits)

    @property
    def is_not_found(self) -> bool:
        return self.code in NOT_FOUND_CODES


@dataclass(slots=True, eq=False)
class DeploymentError(ContractusError):
    """Raised when a creation transaction was included but produced no contract address."""

    message: str
    tx_hash: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        suffix = f" tx={self.tx_hash}" if self.tx_hash else ""
        return f"DeploymentError{suffix}: {self.message}"


@dataclass(slots=True, eq=False)
class ArtifactError(ContractusError):
    """Raised when creation bytecode cannot be read from a compiled artifact."""

    message: str
    path: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        suffix = f" path={self.path}" if self.path else ""
        return f"ArtifactError{suffix}: {self.message}"


@dataclass(slots=True, eq=False)
class TransactionIncompleteError(ContractusError):
    """Raised when a submitted transaction produced no receipt."""

    message: str
    tx_hash: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        suffix = f" tx={self.tx_hash}" if self.tx_hash else ""
        return f"TransactionIncompleteError{suffix}: {self.message}"


@dataclass(slots=True, eq=False)
class EventNotFoundError(ContractusError):
    """Raised when a receipt does not contain the event an operation relies on."""

    event: str
    tx_hash: Optional[str] = None
    message: str = "expected event not found in receipt logs"

    def __str__(self) -> str:  # pragma: no cover - trivial
        suffix = f" tx={self.tx_hash}" if self.tx_hash else ""
        return f"EventNotFoundError[{self.event}]{suffix}: {self.message}"


@dataclass(slots=True, eq=False)
class MetadataDecodeError(ContractusError):
    """Raised when a data URI cannot be decoded into JSON; the cause is chained."""

    message: str
    stage: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        stage = f" ({self.stage})" if self.stage else ""
        return f"MetadataDecodeError{stage}: {self.message}"


@dataclass(slots=True, eq=False)
class AbiError(ContractusError):
    """
    Raised when ABI encoding/decoding or lookup fails.

    Typical causes: unknown function name, wrong arg count, out-of-range integers.
    """

    message: str
    function: Optional[str] = None
    parameter: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        where = []
        if self.function:
            where.append(f"fn={self.function}")
        if self.parameter:
            where.append(f"param={self.parameter}")
        where_s = (" [" + ", ".join(where) + "]") if where else ""
        return f"AbiError{where_s}: {self.message}"


def from_jsonrpc_error(
    err_obj: Dict[str, Any],
    *,
    method: Optional[str] = None,
    request_id: Optional[Any] = None,
    http_status: Optional[int] = None,
) -> RpcError:
    """
    Convert a JSON-RPC error object into RpcError.

    `err_obj` should resemble: {"code": int, "message": str, "data": any?}
    """
    code = int(err_obj.get("code", JsonRpcCode.SERVER_ERROR))
    message = str(err_obj.get("message", "Unknown JSON-RPC error"))
    data = err_obj.get("data")
    return RpcError(
        method=method,
        code=code,
        message=message,
        data=data,
        request_id=request_id,
        http_status=http_status,
    )


def is_not_found(exc: BaseException) -> bool:
    """True only for a CallError whose code is in NOT_FOUND_CODES."""
    return isinstance(exc, CallError) and exc.code in NOT_FOUND_CODES
