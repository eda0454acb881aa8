"""
Immutable ABI tables for the governance and token contracts.

Each table is frozen at import (lists → tuples, dicts → read-only mappings) and
must match the deployed contracts byte-for-byte; a mismatch makes calls revert
or decode incorrectly.
"""

from ._base import Abi, freeze_abi  # noqa: F401
from .arbiter import arbiter_abi  # noqa: F401
from .proposal import proposal_abi  # noqa: F401
from .regimen import regimen_abi  # noqa: F401
from .sigillum import sigillum_abi  # noqa: F401
from .sigillum_ordo_administratorum import sigillum_ordo_administratorum_abi  # noqa: F401

__all__ = [
    "Abi",
    "freeze_abi",
    "arbiter_abi",
    "proposal_abi",
    "regimen_abi",
    "sigillum_abi",
    "sigillum_ordo_administratorum_abi",
]
