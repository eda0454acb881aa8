"""Small byte/hex and hashing helpers shared by the codec and the models."""

from .bytes import ensure_bytes, from_hex, to_hex  # noqa: F401
from .hash import keccak256, keccak256_hex, role_hash  # noqa: F401

__all__ = ["ensure_bytes", "from_hex", "to_hex", "keccak256", "keccak256_hex", "role_hash"]
