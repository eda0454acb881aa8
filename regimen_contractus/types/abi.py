from __future__ import annotations

"""
ABI datatypes & signature helpers (Solidity JSON ABI)

This module defines:
- TypedDict shapes for ABI entries (functions/events/errors/parameters)
- Canonical type strings, expanding `tuple` params into `(t1,t2,...)`
- Helpers to compute canonical signatures/selectors/topics
- `AbiModel`, a by-name index over one contract's ABI

Encoding and decoding of values lives in `regimen_contractus.contracts.codec`.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Optional, Sequence, Tuple, TypedDict, Union

from ..errors import AbiError
from ..utils.hash import keccak256

# --- ABI shapes --------------------------------------------------------------


class AbiParam(TypedDict, total=False):
    name: str
    type: str
    internalType: str
    indexed: bool  # only meaningful for event inputs
    components: List["AbiParam"]


class AbiFunction(TypedDict, total=False):
    type: Literal["function"]
    name: str
    inputs: List[AbiParam]
    outputs: List[AbiParam]
    stateMutability: Literal["view", "pure", "nonpayable", "payable"]


class AbiEvent(TypedDict, total=False):
    type: Literal["event"]
    name: str
    inputs: List[AbiParam]
    anonymous: bool


class AbiErrorEntry(TypedDict, total=False):
    type: Literal["error"]
    name: str
    inputs: List[AbiParam]


class AbiConstructor(TypedDict, total=False):
    type: Literal["constructor"]
    inputs: List[AbiParam]
    stateMutability: str


AbiEntry = Union[AbiFunction, AbiEvent, AbiErrorEntry, AbiConstructor]


# --- Type strings ------------------------------------------------------------


def canonical_type(param: Mapping[str, Any]) -> str:
    """
    Canonical type of an ABI param, e.g. `uint256`, `address[]`, `(uint8,bool)`.

    `tuple` / `tuple[]` params are expanded from their `components`.
    """
    typ = str(param.get("type", "")).strip()
    if not typ:
        raise AbiError("ABI param has no type", parameter=str(param.get("name") or ""))
    if typ.startswith("tuple"):
        comps = param.get("components")
        if not isinstance(comps, (list, tuple)):
            raise AbiError("tuple param without components", parameter=str(param.get("name") or ""))
        inner = ",".join(canonical_type(c) for c in comps)
        return f"({inner}){typ[len('tuple'):]}"
    # Solidity aliases
    if typ == "uint":
        return "uint256"
    if typ == "int":
        return "int256"
    return typ


def param_types(params: Sequence[Mapping[str, Any]]) -> List[str]:
    return [canonical_type(p) for p in params]


# --- Signatures, selectors, topics ------------------------------------------


def canonical_signature(name: str, inputs: Sequence[Mapping[str, Any]]) -> str:
    """e.g., transfer(address,uint256)"""
    return f"{name}({','.join(param_types(inputs))})"


def function_selector(fn: Union[Mapping[str, Any], Tuple[str, Sequence[Mapping[str, Any]]]]) -> bytes:
    """First 4 bytes of keccak256(signature)."""
    if isinstance(fn, tuple):
        name, inputs = fn
    else:
        name, inputs = fn["name"], fn.get("inputs", ())
    return keccak256(canonical_signature(name, inputs).encode("utf-8"))[:4]


# Custom errors use the same 4-byte selector scheme as functions.
error_selector = function_selector


def event_topic(ev: Union[Mapping[str, Any], Tuple[str, Sequence[Mapping[str, Any]]]]) -> bytes:
    """Full 32-byte keccak256 of the event signature (topic0)."""
    if isinstance(ev, tuple):
        name, inputs = ev
    else:
        name, inputs = ev["name"], ev.get("inputs", ())
    # Indexed and non-indexed inputs alike are part of the signature
    return keccak256(canonical_signature(name, inputs).encode("utf-8"))


# --- Convenience model -------------------------------------------------------


@dataclass(frozen=True)
class AbiModel:
    functions: Dict[str, Mapping[str, Any]]
    events: Dict[str, Mapping[str, Any]]
    errors: Dict[str, Mapping[str, Any]]
    constructor: Optional[Mapping[str, Any]] = None

    @staticmethod
    def from_list(entries: Sequence[Mapping[str, Any]]) -> "AbiModel":
        fns: Dict[str, Mapping[str, Any]] = {}
        evs: Dict[str, Mapping[str, Any]] = {}
        errs: Dict[str, Mapping[str, Any]] = {}
        ctor: Optional[Mapping[str, Any]] = None
        for i, e in enumerate(entries):
            if not isinstance(e, Mapping):
                raise AbiError(f"ABI entry at index {i} must be an object")
            etype = e.get("type", "function")
            if etype == "constructor":
                ctor = e
                continue
            if etype in ("fallback", "receive"):
                continue
            bucket = {"function": fns, "event": evs, "error": errs}.get(str(etype))
            if bucket is None:
                raise AbiError(f"Unsupported ABI entry type: {etype}")
            name = e.get("name")
            if not isinstance(name, str) or not name:
                raise AbiError(f"{etype} at index {i} has no name")
            if name in bucket:
                # Overloads are not used by these contracts
                raise AbiError(f"Duplicate ABI entry: {(etype, name)}")
            bucket[name] = e
        return AbiModel(functions=fns, events=evs, errors=errs, constructor=ctor)

    def get_function(self, name: str) -> Mapping[str, Any]:
        try:
            return self.functions[name]
        except KeyError:
            raise AbiError("Function not found in ABI", function=name) from None

    def get_event(self, name: str) -> Mapping[str, Any]:
        try:
            return self.events[name]
        except KeyError:
            raise AbiError(f"Event not found in ABI: {name}") from None

    def error_by_selector(self) -> Dict[bytes, Mapping[str, Any]]:
        return {error_selector(e): e for e in self.errors.values()}

    def event_by_topic(self) -> Dict[bytes, Mapping[str, Any]]:
        return {event_topic(e): e for e in self.events.values() if not e.get("anonymous", False)}


__all__ = [
    "AbiParam",
    "AbiFunction",
    "AbiEvent",
    "AbiErrorEntry",
    "AbiConstructor",
    "AbiEntry",
    "AbiModel",
    "canonical_type",
    "param_types",
    "canonical_signature",
    "function_selector",
    "error_selector",
    "event_topic",
]
