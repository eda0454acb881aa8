"""
regimen_contractus.contracts.events
===================================

Helpers to work with contract events:
- Build an event topic (topic0) index for an ABI
- Decode logs from a receipt using the contract ABI
- Find the first event with a given name and pull a field out of it

Public API
----------
- build_event_index(abi) -> Dict[bytes, event_def]
- topic_for_event(abi, name) -> bytes
- decode_logs(abi, logs) -> List[DecodedEvent]
- filter_logs_by_event(abi, logs, name) -> List[DecodedEvent]
- find_first_event(abi, receipt_or_logs, name) -> Optional[DecodedEvent]
- event_field(event, key) -> Any          # key is a param name or a position

Where a DecodedEvent is a dict with keys:
    {
      "name": str,
      "args": dict,            # by param name (unnamed params are keyed by position)
      "values": tuple,         # positional, in ABI order
      "address": str | None,   # emitting contract, lowercase
      "logIndex": int | None,
      "topics": [ "0x…" , ... ],
      "data": "0x…",
    }

Logs are scanned in the order the chain returned them. Logs that do not match
any event in the ABI (or fail to decode against it) are skipped, so receipts
that include logs from other contracts decode cleanly.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from eth_abi import decode as abi_decode
from eth_abi.exceptions import DecodingError

from ..address import AddressError, normalize_address
from ..types.abi import canonical_type, event_topic
from ..types.core import Log, Receipt
from ..utils.bytes import from_hex, to_hex
from .codec import normalize_values

JsonDict = Dict[str, Any]
LogLike = Union[Log, Mapping[str, Any]]


def _iter_events(abi: Iterable[Mapping[str, Any]]) -> Iterable[Mapping[str, Any]]:
    for item in abi:
        if isinstance(item, Mapping) and item.get("type") == "event" and item.get("name"):
            yield item


def _is_hashed_when_indexed(param: Mapping[str, Any]) -> bool:
    typ = str(param.get("type", ""))
    return typ in ("string", "bytes") or typ.startswith("tuple") or typ.endswith("]")


# -----------------------------------------------------------------------------


def build_event_index(abi: Sequence[Mapping[str, Any]]) -> Dict[bytes, Mapping[str, Any]]:
    """
    Build a topic0 → event_def index for fast matching.
    Anonymous events have no selector topic and are left out.
    """
    index: Dict[bytes, Mapping[str, Any]] = {}
    for ev in _iter_events(abi):
        if bool(ev.get("anonymous", False)):
            continue
        index[event_topic(ev)] = ev
    return index


def topic_for_event(abi: Sequence[Mapping[str, Any]], name: str) -> bytes:
    """
    Compute the selector topic for the named (non-anonymous) event.
    """
    for ev in _iter_events(abi):
        if ev["name"] == name and not bool(ev.get("anonymous", False)):
            return event_topic(ev)
    raise KeyError(f"event not found or is anonymous: {name!r}")


def _norm_topic_bytes_list(topics: Any) -> List[bytes]:
    out: List[bytes] = []
    if not isinstance(topics, (list, tuple)):
        return out
    for t in topics:
        if isinstance(t, (bytes, bytearray)):
            out.append(bytes(t))
        elif isinstance(t, str):
            out.append(from_hex(t))
    return out


def _norm_data_bytes(data: Any) -> bytes:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        return from_hex(data)
    return b""


def _log_fields(lg: LogLike) -> Optional[JsonDict]:
    if isinstance(lg, Log):
        return {"address": lg.address, "topics": lg.topics, "data": lg.data, "logIndex": lg.log_index}
    if isinstance(lg, Mapping):
        idx = lg.get("logIndex", lg.get("index"))
        if isinstance(idx, str):
            idx = int(idx, 16) if idx.startswith("0x") else int(idx)
        return {"address": lg.get("address"), "topics": lg.get("topics"), "data": lg.get("data"), "logIndex": idx}
    return None


def decode_event(ev: Mapping[str, Any], topics: List[bytes], data: bytes) -> tuple:
    """
    Decode one log against `ev`: indexed params from topics[1:], the rest from data.

    Indexed strings/bytes/arrays/tuples are only recoverable as their 32-byte
    topic hash, which is what gets returned for them.
    """
    inputs = list(ev.get("inputs", ()))
    indexed = [p for p in inputs if p.get("indexed", False)]
    plain = [p for p in inputs if not p.get("indexed", False)]
    offset = 0 if ev.get("anonymous", False) else 1
    if len(topics) - offset != len(indexed):
        raise ValueError(f"topic count mismatch for {ev.get('name')}")

    plain_values = iter(normalize_values(plain, abi_decode([canonical_type(p) for p in plain], data)) if plain else ())
    topic_values = iter(topics[offset:])

    values: List[Any] = []
    for p in inputs:
        if p.get("indexed", False):
            raw = next(topic_values)
            if _is_hashed_when_indexed(p):
                values.append(raw)
            else:
                values.append(normalize_values([p], abi_decode([canonical_type(p)], raw))[0])
        else:
            values.append(next(plain_values))
    return tuple(values)


def decode_logs(abi: Sequence[Mapping[str, Any]], logs: Iterable[LogLike]) -> List[JsonDict]:
    """
    Decode a list of raw logs (Log objects or RPC dicts) using the provided ABI.

    Returns decoded event dicts in log order. Logs that cannot be
    matched/decoded are omitted.
    """
    index = build_event_index(abi)
    decoded: List[JsonDict] = []

    for lg in logs:
        fields = _log_fields(lg)
        if fields is None:
            continue
        try:
            topics_b = _norm_topic_bytes_list(fields["topics"])
            data_b = _norm_data_bytes(fields["data"])
        except ValueError:
            continue
        if not topics_b or topics_b[0] not in index:
            continue
        ev = index[topics_b[0]]

        try:
            values = decode_event(ev, topics_b, data_b)
        except (DecodingError, AddressError, ValueError):
            continue

        args: JsonDict = {}
        for i, (p, v) in enumerate(zip(ev.get("inputs", ()), values)):
            args[p.get("name") or str(i)] = v

        address = fields["address"]
        decoded.append(
            {
                "name": ev["name"],
                "args": args,
                "values": values,
                "address": normalize_address(address) if isinstance(address, str) else None,
                "logIndex": fields["logIndex"] if isinstance(fields["logIndex"], int) else None,
                "topics": [to_hex(t) for t in topics_b],
                "data": to_hex(data_b),
            }
        )

    return decoded


def filter_logs_by_event(abi: Sequence[Mapping[str, Any]], logs: Iterable[LogLike], name: str) -> List[JsonDict]:
    """
    Decode and keep only events with the given name.
    """
    return [e for e in decode_logs(abi, logs) if e.get("name") == name]


def find_first_event(
    abi: Sequence[Mapping[str, Any]],
    receipt_or_logs: Union[Receipt, Mapping[str, Any], Sequence[LogLike]],
    name: str,
) -> Optional[JsonDict]:
    """
    Locate the first occurrence (in log order) of an event in a receipt or raw log list.
    Returns the decoded event dict or None if not found.
    """
    logs: Iterable[LogLike]
    if isinstance(receipt_or_logs, Receipt):
        logs = receipt_or_logs.logs
    elif isinstance(receipt_or_logs, Mapping):
        logs = receipt_or_logs.get("logs") or ()
    else:
        logs = receipt_or_logs

    for ev in decode_logs(abi, logs):
        if ev.get("name") == name:
            return ev
    return None


def event_field(event: Mapping[str, Any], key: Union[str, int]) -> Any:
    """Pull a field out of a decoded event by param name or position."""
    if isinstance(key, int):
        return event["values"][key]
    return event["args"][key]


__all__ = [
    "build_event_index",
    "topic_for_event",
    "decode_event",
    "decode_logs",
    "filter_logs_by_event",
    "find_first_event",
    "event_field",
]
