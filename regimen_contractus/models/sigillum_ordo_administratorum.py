"""
Client for SigillumOrdoAdministratorum, the ranked Sigillum variant.

Every token carries a rank, stored on chain as `rank_hash(rank)`. The shared
token operations come from a composed `Sigillum` built over the ranked ABI;
this class only adds rank-aware `mint`, `rank` and `token_of`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..abis import sigillum_ordo_administratorum_abi
from ..contracts.client import ContractClient
from ..metadata import ContractMetadata, TokenMetadata
from ..rpc.connection import Connection
from ..types.core import DeployResult, HasVotedResult, StateChangeResult, TokenOf, VoteChoice
from .ranks import Rank, parse_hashed_rank, rank_hash
from .sigillum import Sigillum


class SigillumOrdoAdministratorum:
    def __init__(self, token: Sigillum):
        self._token = token

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self.address()!r})"

    @classmethod
    def attach(
        cls,
        address: str,
        *,
        connection: Connection,
        debug: bool = False,
        silent: bool = False,
        signer_address: Optional[str] = None,
    ) -> "SigillumOrdoAdministratorum":
        return cls(
            Sigillum.attach(
                address,
                connection=connection,
                debug=debug,
                silent=silent,
                signer_address=signer_address,
                abi=sigillum_ordo_administratorum_abi,
                owner=cls.__name__,
            )
        )

    @classmethod
    async def deploy(
        cls,
        name: str,
        symbol: str,
        description: str,
        arbiter: str,
        *,
        connection: Connection,
        debug: bool = False,
        silent: bool = False,
        signer_address: Optional[str] = None,
        bytecode: Union[bytes, str, None] = None,
        artifacts_dir: Union[str, Path, None] = None,
    ) -> "SigillumOrdoAdministratorum":
        token = await Sigillum.deploy(
            name,
            symbol,
            description,
            arbiter,
            connection=connection,
            debug=debug,
            silent=silent,
            signer_address=signer_address,
            bytecode=bytecode,
            artifacts_dir=artifacts_dir,
            abi=sigillum_ordo_administratorum_abi,
            owner=cls.__name__,
        )
        return cls(token)

    # --- composition -----------------------------------------------------

    @property
    def token(self) -> Sigillum:
        return self._token

    @property
    def client(self) -> ContractClient:
        return self._token.client

    @property
    def deployment(self) -> Optional[DeployResult]:
        return self._token.deployment

    def address(self) -> str:
        return self._token.address()

    # --- ranked operations -----------------------------------------------

    async def mint(self, recipient: str, rank: Rank) -> StateChangeResult[int]:
        """Mint a token of `rank` to `recipient`; the result is the new token id."""
        return await self._token.issue(recipient, rank_hash(Rank(rank)))

    async def token_of_ranked(self, owner: str) -> Optional[TokenOf]:
        """Raw (id, hashed rank) for `owner`, or None when the owner has no token."""
        token_id, hashed_rank = await self._token.token_of_raw(owner)
        if int(token_id) == 0:
            return None
        return TokenOf(id=int(token_id), hashed_rank=bytes(hashed_rank))

    async def rank(self, owner: str) -> Optional[Rank]:
        """The owner's rank, or None without a token or for an unknown rank hash."""
        token = await self.token_of_ranked(owner)
        if token is None:
            return None
        return parse_hashed_rank(token.hashed_rank)

    async def token_of(self, owner: str) -> Optional[int]:
        token = await self.token_of_ranked(owner)
        return token.id if token is not None else None

    # --- delegated -------------------------------------------------------

    async def arbiter(self) -> str:
        return await self._token.arbiter()

    async def burn(self, token_id: int) -> StateChangeResult[None]:
        return await self._token.burn(token_id)

    async def contract_uri(self) -> str:
        return await self._token.contract_uri()

    async def contract_metadata(self) -> ContractMetadata:
        return await self._token.contract_metadata()

    async def description(self) -> str:
        return await self._token.description()

    async def has_voted(self, proposal: str, token_id: int) -> HasVotedResult:
        return await self._token.has_voted(proposal, token_id)

    async def name(self) -> str:
        return await self._token.name()

    async def propose(self, title: str, start: int, duration: int) -> StateChangeResult[str]:
        return await self._token.propose(title, start, duration)

    async def set_arbiter(self, arbiter: str) -> StateChangeResult[None]:
        return await self._token.set_arbiter(arbiter)

    async def supply(self) -> int:
        return await self._token.supply()

    async def symbol(self) -> str:
        return await self._token.symbol()

    async def token_metadata(self, token_id: int) -> TokenMetadata:
        return await self._token.token_metadata(token_id)

    async def token_uri(self, token_id: int) -> str:
        return await self._token.token_uri(token_id)

    async def version(self) -> str:
        return await self._token.version()

    async def vote(self, proposal: str, token_id: int, choice: VoteChoice) -> StateChangeResult[None]:
        return await self._token.vote(proposal, token_id, choice)


__all__ = ["SigillumOrdoAdministratorum"]
