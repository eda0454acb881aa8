"""
Data-URI metadata helpers.

Token contracts return their contract-level and token-level metadata as
`data:application/json;base64,<payload>`. `decode_data_uri` turns that into a
dict; any failure at any stage surfaces as one `MetadataDecodeError` with the
original exception chained.
"""

from __future__ import annotations

import base64
import binascii
import json
from typing import Any, Dict, List, Optional, TypedDict

from .errors import MetadataDecodeError

DEFAULT_MIME = "application/json"


class MetadataAttribute(TypedDict, total=False):
    trait_type: str
    value: Any


class ContractMetadata(TypedDict, total=False):
    name: str
    description: str
    image: str
    symbol: str
    external_link: str


class TokenMetadata(TypedDict, total=False):
    name: str
    description: str
    image: str
    attributes: List[MetadataAttribute]


def decode_data_uri(uri: str) -> Dict[str, Any]:
    """
    Decode `data:<mime>;base64,<payload>` into a JSON object.

    The substring after the first comma is base64-decoded, read as UTF-8 and
    parsed as JSON. Never returns partially parsed output.
    """
    if not isinstance(uri, str):
        raise MetadataDecodeError(f"expected str, got {type(uri).__name__}", stage="uri")
    _header, sep, payload = uri.partition(",")
    if not sep:
        raise MetadataDecodeError("data URI has no ',' separating header and payload", stage="uri")

    try:
        raw = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MetadataDecodeError(f"invalid base64 payload: {e}", stage="base64") from e

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MetadataDecodeError(f"payload is not valid UTF-8: {e}", stage="utf8") from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MetadataDecodeError(f"payload is not valid JSON: {e}", stage="json") from e


def encode_data_uri(obj: Any, mime: Optional[str] = None) -> str:
    """Inverse of decode_data_uri: compact JSON, UTF-8, base64."""
    body = json.dumps(obj, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
    return f"data:{mime or DEFAULT_MIME};base64,{base64.b64encode(body).decode('ascii')}"


__all__ = [
    "ContractMetadata",
    "TokenMetadata",
    "MetadataAttribute",
    "decode_data_uri",
    "encode_data_uri",
]
