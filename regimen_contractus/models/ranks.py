"""
Ranks held by SigillumOrdoAdministratorum tokens.

On chain a rank is stored as keccak256(utf8(name)), the same derivation used
for roles; `parse_hashed_rank` maps such a hash back to a `Rank`.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Union

from ..utils.bytes import ensure_bytes
from ..utils.hash import role_hash


class Rank(str, Enum):
    NOVITIATE = "NOVITIATE_RANK"
    ADEPTUS = "ADEPTUS_RANK"
    PREFECTUS = "PREFECTUS_RANK"


def rank_hash(rank: Union[Rank, str]) -> bytes:
    """32-byte on-chain identifier of a rank."""
    return role_hash(rank.value if isinstance(rank, Rank) else str(rank))


_BY_HASH: Dict[bytes, Rank] = {rank_hash(r): r for r in Rank}


def parse_hashed_rank(value: Union[bytes, str]) -> Optional[Rank]:
    """Rank for an on-chain rank hash, or None when the hash is unknown."""
    return _BY_HASH.get(ensure_bytes(value))


__all__ = ["Rank", "rank_hash", "parse_hashed_rank"]
