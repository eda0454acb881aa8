"""
EVM address helpers.

Addresses are handed back to callers in one canonical form: lowercase,
0x-prefixed, 40 hex chars. Comparisons always normalize both sides first.
Checksummed (EIP-55) rendering is available for display via eth-utils.
"""

from __future__ import annotations

import re
from typing import Any

from eth_utils import to_checksum_address

ZERO_ADDRESS = "0x" + "00" * 20

_ADDR_RE = re.compile(r"^0x[0-9a-f]{40}$")


class AddressError(ValueError):
    """Raised when a value is not a 20-byte hex address."""


def normalize_address(address: Any) -> str:
    """
    Return the canonical lowercase form of *address*.

    Accepts str (any case, with or without 0x) or 20 raw bytes.
    Idempotent: normalize_address(normalize_address(a)) == normalize_address(a).
    """
    if isinstance(address, (bytes, bytearray)):
        if len(address) != 20:
            raise AddressError(f"address must be 20 bytes, got {len(address)}")
        return "0x" + bytes(address).hex()
    if not isinstance(address, str):
        raise AddressError(f"address must be str or bytes, got {type(address).__name__}")
    s = address.strip().lower()
    if not s.startswith("0x"):
        s = "0x" + s
    if not _ADDR_RE.match(s):
        raise AddressError(f"invalid address: {address!r}")
    return s


def is_address(value: Any) -> bool:
    try:
        normalize_address(value)
    except AddressError:
        return False
    return True


def addresses_equal(a: Any, b: Any) -> bool:
    """Compare two addresses after normalizing both sides."""
    return normalize_address(a) == normalize_address(b)


def checksum_address(address: Any) -> str:
    """EIP-55 mixed-case rendering, for display only."""
    return to_checksum_address(normalize_address(address))


def is_zero_address(address: Any) -> bool:
    return normalize_address(address) == ZERO_ADDRESS


__all__ = [
    "ZERO_ADDRESS",
    "AddressError",
    "normalize_address",
    "is_address",
    "addresses_equal",
    "checksum_address",
    "is_zero_address",
]
