"""Contract plumbing: ABI codec, event decoding and the generic client lifecycle."""

from .access import grant_role, has_role, revoke_role  # noqa: F401
from .client import ContractClient, ContractHandle  # noqa: F401
from .codec import decode_return, decode_revert, encode_call, encode_constructor  # noqa: F401
from .events import decode_logs, event_field, filter_logs_by_event, find_first_event  # noqa: F401

__all__ = [
    "ContractClient",
    "ContractHandle",
    "decode_logs",
    "decode_return",
    "decode_revert",
    "encode_call",
    "encode_constructor",
    "event_field",
    "filter_logs_by_event",
    "find_first_event",
    "grant_role",
    "has_role",
    "revoke_role",
]
