from __future__ import annotations

from eth_utils import keccak as _eth_keccak

from .bytes import BytesLike, ensure_bytes, to_hex

# --- Keccak-256 (Ethereum-style) ----------------------------------------------
# hashlib only exposes NIST SHA3; the EVM uses the original Keccak padding.
# eth-utils delegates to eth-hash, which is backed by pycryptodome here.


def keccak256(data: BytesLike) -> bytes:
    """Return Keccak-256 digest of *data* (bytes)."""
    return _eth_keccak(primitive=ensure_bytes(data))


def keccak256_hex(data: BytesLike, *, prefix: bool = True) -> str:
    """Return hex string of Keccak-256 digest (0x-prefixed by default)."""
    return to_hex(keccak256(data), prefix=prefix)


def keccak256_text(text: str) -> bytes:
    """Keccak-256 over the UTF-8 bytes of *text*."""
    return keccak256(text.encode("utf-8"))


def role_hash(name: str) -> bytes:
    """
    On-chain identifier of a role (or rank): keccak256(utf8(name)), 32 bytes.

    Every grant/revoke/has-role call and every rank lookup goes through here.
    """
    if not isinstance(name, str) or not name:
        raise ValueError("role name must be a non-empty string")
    return keccak256_text(name)


__all__ = ["keccak256", "keccak256_hex", "keccak256_text", "role_hash"]
