from __future__ import annotations

from types import MappingProxyType
from typing import Any, Mapping, Sequence, Tuple

Abi = Tuple[Mapping[str, Any], ...]


def freeze_abi(entries: Sequence[Mapping[str, Any]]) -> Abi:
    """Deep-freeze a JSON ABI so module-level tables cannot be mutated."""

    def _freeze(v: Any) -> Any:
        if isinstance(v, Mapping):
            return MappingProxyType({k: _freeze(x) for k, x in v.items()})
        if isinstance(v, (list, tuple)):
            return tuple(_freeze(x) for x in v)
        return v

    return tuple(_freeze(e) for e in entries)


__all__ = ["Abi", "freeze_abi"]
