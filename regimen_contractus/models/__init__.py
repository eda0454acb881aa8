"""One client class per governance / token contract."""

from .arbiter import EXECUTOR_ROLE, Arbiter  # noqa: F401
from .proposal import Proposal  # noqa: F401
from .ranks import Rank, parse_hashed_rank, rank_hash  # noqa: F401
from .regimen import Regimen  # noqa: F401
from .sigillum import NOT_OWNER_OF_TOKEN, RECIPIENT_ALREADY_HAS_TOKEN, TOKEN_DOES_NOT_EXIST, Sigillum  # noqa: F401
from .sigillum_ordo_administratorum import SigillumOrdoAdministratorum  # noqa: F401

__all__ = [
    "Arbiter",
    "EXECUTOR_ROLE",
    "Proposal",
    "Rank",
    "Regimen",
    "Sigillum",
    "SigillumOrdoAdministratorum",
    "NOT_OWNER_OF_TOKEN",
    "RECIPIENT_ALREADY_HAS_TOKEN",
    "TOKEN_DOES_NOT_EXIST",
    "parse_hashed_rank",
    "rank_hash",
]
