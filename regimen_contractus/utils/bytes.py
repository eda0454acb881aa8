from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def ensure_bytes(data: Union[BytesLike, str]) -> bytes:
    """
    Ensure input is bytes.

    Accepts:
      - bytes / bytearray / memoryview  -> bytes(data)
      - str: treated as hex; optional '0x' prefix; even-length enforced

    Raises:
      ValueError on invalid hex strings.
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return from_hex(data)
    raise TypeError(f"Unsupported type for ensure_bytes: {type(data)!r}")


def to_hex(b: BytesLike, prefix: bool = True) -> str:
    """
    Bytes -> hex string (lowercase). Prefix with '0x' by default.
    """
    s = bytes(b).hex()
    return f"0x{s}" if prefix else s


def from_hex(s: str) -> bytes:
    """
    Hex string (optionally '0x' prefixed) -> bytes.

    Enforces even-length and is case-agnostic. "0x" decodes to b"".
    """
    if not isinstance(s, str):
        raise TypeError("from_hex expects a string")
    if s.startswith(("0x", "0X")):
        s = s[2:]
    if len(s) % 2 != 0:
        raise ValueError("hex string must have even length")
    try:
        return bytes.fromhex(s)
    except ValueError as e:
        raise ValueError(f"invalid hex string: {e}") from e


def to_quantity(n: int) -> str:
    """Integer -> JSON-RPC quantity (0x-hex without leading zeros)."""
    if n < 0:
        raise ValueError("quantity must be non-negative")
    return hex(int(n))


def from_quantity(q: Union[str, int, None]) -> int | None:
    """JSON-RPC quantity (0x-hex or int) -> int. None stays None."""
    if q is None:
        return None
    if isinstance(q, int):
        return q
    s = q.strip()
    return int(s, 16) if s.startswith(("0x", "0X")) else int(s, 10)


__all__ = ["BytesLike", "ensure_bytes", "to_hex", "from_hex", "to_quantity", "from_quantity"]
