"""
regimen_contractus.contracts.codec
==================================

ABI encoding/decoding on top of `eth_abi`:

- encode_call(fn, args)          -> selector + encoded args
- encode_constructor(ctor, args) -> encoded constructor args (appended to bytecode)
- decode_return(fn, data)        -> single value, tuple, or None
- decode_revert(data, model)     -> RevertInfo (Error(string), Panic(uint256), custom errors)

Returned values are normalized for callers: addresses lowercase, `bytesN` as
`bytes`, tuples as tuples. Empty return data for a function that declares
outputs is reported as `CallError(code=BAD_DATA)`, which is how a call to an
address without code (or a zeroed record) surfaces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence, Tuple

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_abi.exceptions import DecodingError, EncodingError

from ..address import AddressError, normalize_address
from ..errors import AbiError, CallError, ErrorCode
from ..types.abi import AbiModel, function_selector, param_types
from ..utils.bytes import from_hex, to_hex

# Error(string) and Panic(uint256)
ERROR_STRING_SELECTOR = bytes.fromhex("08c379a0")
PANIC_SELECTOR = bytes.fromhex("4e487b71")

# Solidity panic codes, reported as "panic: <description> (0x..)"
PANIC_CODES = {
    0x00: "generic compiler panic",
    0x01: "assertion failed",
    0x11: "arithmetic overflow or underflow",
    0x12: "division or modulo by zero",
    0x21: "invalid enum value",
    0x22: "invalid storage byte array",
    0x31: "pop on empty array",
    0x32: "array index out of bounds",
    0x41: "out of memory",
    0x51: "uninitialized function pointer",
}


@dataclass(frozen=True)
class RevertInfo:
    reason: Optional[str] = None
    error_name: Optional[str] = None
    error_args: Tuple[Any, ...] = field(default_factory=tuple)


# --- value normalization ------------------------------------------------------


def _normalize(param: Mapping[str, Any], value: Any) -> Any:
    typ = str(param.get("type", ""))
    if typ.endswith("]"):
        inner = dict(param)
        inner["type"] = typ[: typ.rindex("[")]
        return tuple(_normalize(inner, v) for v in value)
    if typ == "tuple":
        comps = param.get("components") or ()
        return tuple(_normalize(c, v) for c, v in zip(comps, value))
    if typ == "address":
        return normalize_address(value)
    return value


def normalize_values(params: Sequence[Mapping[str, Any]], values: Sequence[Any]) -> Tuple[Any, ...]:
    return tuple(_normalize(p, v) for p, v in zip(params, values))


def _prepare(param: Mapping[str, Any], value: Any) -> Any:
    # eth_abi wants lowercase or checksummed addresses; accept any case from callers.
    typ = str(param.get("type", ""))
    if typ.endswith("]"):
        inner = dict(param)
        inner["type"] = typ[: typ.rindex("[")]
        return [_prepare(inner, v) for v in value]
    if typ == "tuple":
        comps = param.get("components") or ()
        if isinstance(value, Mapping):
            value = [value[c["name"]] for c in comps]
        return tuple(_prepare(c, v) for c, v in zip(comps, value))
    if typ == "address":
        return normalize_address(value)
    if typ.startswith("uint") or typ.startswith("int"):
        return int(value)
    if typ.startswith("bytes") and isinstance(value, str):
        return from_hex(value)
    return value


# --- encoding -----------------------------------------------------------------


def encode_args(inputs: Sequence[Mapping[str, Any]], args: Sequence[Any], *, fn_name: Optional[str] = None) -> bytes:
    if len(inputs) != len(args):
        raise AbiError(f"expected {len(inputs)} args, got {len(args)}", function=fn_name)
    try:
        prepared = [_prepare(p, a) for p, a in zip(inputs, args)]
        return abi_encode(param_types(inputs), prepared)
    except AddressError as e:
        raise AbiError(str(e), function=fn_name) from e
    except (EncodingError, TypeError, ValueError, KeyError) as e:
        raise AbiError(f"cannot encode args {list(args)!r}: {e}", function=fn_name) from e


def encode_call(fn: Mapping[str, Any], args: Sequence[Any]) -> bytes:
    """Function selector + ABI-encoded arguments."""
    inputs = fn.get("inputs", ())
    return function_selector(fn) + encode_args(inputs, args, fn_name=fn.get("name"))


def encode_constructor(ctor: Optional[Mapping[str, Any]], args: Sequence[Any]) -> bytes:
    """Encoded constructor arguments; empty when the contract takes none."""
    inputs = (ctor or {}).get("inputs", ())
    if not inputs and not args:
        return b""
    return encode_args(inputs, args, fn_name="constructor")


# --- decoding -----------------------------------------------------------------


def decode_params(params: Sequence[Mapping[str, Any]], data: bytes) -> Tuple[Any, ...]:
    return normalize_values(params, abi_decode(param_types(params), data))


def decode_return(fn: Mapping[str, Any], data: bytes) -> Any:
    """
    Decode the return data of `fn`.

    No outputs → None; one output → the value; several → a tuple.
    """
    outputs = fn.get("outputs", ())
    name = fn.get("name")
    if not outputs:
        return None
    if not data:
        raise CallError(
            "could not decode result data",
            code=ErrorCode.BAD_DATA,
            method=name,
            data="0x",
        )
    try:
        values = decode_params(outputs, data)
    except (DecodingError, AddressError, ValueError) as e:
        raise CallError(
            f"could not decode result data: {e}",
            code=ErrorCode.BAD_DATA,
            method=name,
            data=to_hex(data),
        ) from e
    return values[0] if len(values) == 1 else values


def decode_revert(data: bytes, model: Optional[AbiModel] = None) -> RevertInfo:
    """
    Decode revert data into a reason or a custom error.

    Unknown selectors or malformed payloads give an empty RevertInfo rather
    than raising; the raw bytes stay available on the CallError.
    """
    if len(data) < 4:
        return RevertInfo()
    selector, body = data[:4], data[4:]
    try:
        if selector == ERROR_STRING_SELECTOR:
            (reason,) = abi_decode(["string"], body)
            return RevertInfo(reason=reason)
        if selector == PANIC_SELECTOR:
            (code,) = abi_decode(["uint256"], body)
            desc = PANIC_CODES.get(code, "unknown panic")
            return RevertInfo(reason=f"panic: {desc} ({hex(code)})", error_name="Panic", error_args=(code,))
        if model is not None:
            entry = model.error_by_selector().get(selector)
            if entry is not None:
                inputs = entry.get("inputs", ())
                args = decode_params(inputs, body) if inputs else ()
                return RevertInfo(error_name=str(entry["name"]), error_args=args)
    except (DecodingError, AddressError, ValueError):
        return RevertInfo()
    return RevertInfo()


__all__ = [
    "ERROR_STRING_SELECTOR",
    "PANIC_SELECTOR",
    "RevertInfo",
    "encode_args",
    "encode_call",
    "encode_constructor",
    "decode_params",
    "decode_return",
    "decode_revert",
    "normalize_values",
]
