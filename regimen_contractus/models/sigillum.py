"""
Client for Sigillum, the soul-bound governance token.

Each account holds at most one token. Token holders vote on Arbiter proposals
through the token contract, which forwards the vote with the holder's token id.
Contract and token metadata are served on chain as base64 JSON data URIs.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional, Sequence, Union

from ..abis import sigillum_abi
from ..address import normalize_address
from ..contracts.client import ContractClient
from ..errors import MetadataDecodeError
from ..metadata import ContractMetadata, TokenMetadata, decode_data_uri
from ..rpc.connection import Connection
from ..types.core import HasVotedResult, StateChangeResult, VoteChoice, parse_vote_choice
from ._base import ContractModel, client_options

# Revert reasons raised by the token contract
TOKEN_DOES_NOT_EXIST = "token does not exist"
RECIPIENT_ALREADY_HAS_TOKEN = "recipient already has token"
NOT_OWNER_OF_TOKEN = "not owner of token"


class Sigillum(ContractModel):
    """
    Shared token operations. Variants with a different `mint`/`tokenOf` shape
    build a Sigillum over their own ABI and delegate to it.
    """

    @classmethod
    def attach(
        cls,
        address: str,
        *,
        connection: Connection,
        debug: bool = False,
        silent: bool = False,
        signer_address: Optional[str] = None,
        abi: Sequence[Mapping[str, Any]] = sigillum_abi,
        owner: Optional[str] = None,
    ) -> "Sigillum":
        opts = client_options(connection, address=address, debug=debug, silent=silent, signer_address=signer_address)
        return cls(ContractClient.attach(abi, opts, owner=owner or cls.__name__))

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
        abi: Sequence[Mapping[str, Any]] = sigillum_abi,
        owner: Optional[str] = None,
    ) -> "Sigillum":
        client = await ContractClient.deploy(
            abi,
            (name, symbol, description, arbiter),
            client_options(connection, debug=debug, silent=silent, signer_address=signer_address),
            owner=owner or cls.__name__,
            bytecode=bytecode,
            artifacts_dir=artifacts_dir,
        )
        return cls(client)

    # --- reads -----------------------------------------------------------

    async def arbiter(self) -> str:
        return await self._client.call("arbiter")

    async def contract_uri(self) -> str:
        return await self._client.call("contractURI", op="contract_uri")

    async def contract_metadata(self) -> ContractMetadata:
        """Decoded `contractURI()`. Malformed data raises MetadataDecodeError."""
        uri = await self._client.call("contractURI", op="contract_metadata")
        try:
            return decode_data_uri(uri)  # type: ignore[return-value]
        except MetadataDecodeError as exc:
            self._client.log_failure("contract_metadata", exc)
            raise

    async def description(self) -> str:
        return await self._client.call("description")

    async def has_voted(self, proposal: str, token_id: int) -> HasVotedResult:
        """How token `token_id` voted on `proposal`, if at all."""
        choice, voted = await self._client.call("hasVoted", int(token_id), proposal, op="has_voted")
        return HasVotedResult(choice=parse_vote_choice(choice), proposal=normalize_address(proposal), voted=bool(voted))

    async def name(self) -> str:
        return await self._client.call("name")

    async def supply(self) -> int:
        """Current number of tokens in existence."""
        return int(await self._client.call("supply"))

    async def symbol(self) -> str:
        return await self._client.call("symbol")

    async def token_uri(self, token_id: int) -> str:
        return await self._client.call("tokenURI", int(token_id), op="token_uri")

    async def token_metadata(self, token_id: int) -> TokenMetadata:
        """
        Decoded `tokenURI(id)`. A revert (e.g. TOKEN_DOES_NOT_EXIST) raises
        CallError; it is never mapped to None.
        """
        uri = await self._client.call("tokenURI", int(token_id), op="token_metadata")
        try:
            return decode_data_uri(uri)  # type: ignore[return-value]
        except MetadataDecodeError as exc:
            self._client.log_failure("token_metadata", exc)
            raise

    async def version(self) -> str:
        return await self._client.call("version")

    async def token_of_raw(self, owner: str) -> Any:
        """Raw `tokenOf(owner)` return value; its shape depends on the ABI."""
        return await self._client.call("tokenOf", owner, op="token_of")

    async def token_of(self, owner: str) -> Optional[int]:
        """Token id held by `owner`, or None when the owner has no token (id 0)."""
        raw = await self.token_of_raw(owner)
        token_id = int(raw[0] if isinstance(raw, tuple) else raw)
        return token_id or None

    # --- writes ----------------------------------------------------------

    async def burn(self, token_id: int) -> StateChangeResult[None]:
        return await self._client.transact("burn", int(token_id))

    async def issue(self, recipient: str, *extra: Any) -> StateChangeResult[int]:
        """
        Submit `mint(recipient, *extra)` and return the id of the first Transfer
        event, i.e. the newly minted token.
        """
        result = await self._client.transact_for_event(
            "mint", recipient, *extra, event="Transfer", field=2, op="mint"
        )
        return StateChangeResult(result=int(result.result), transaction_receipt=result.transaction_receipt)

    async def mint(self, recipient: str) -> StateChangeResult[int]:
        return await self.issue(recipient)

    async def propose(self, title: str, start: int, duration: int) -> StateChangeResult[str]:
        """Create a proposal on the arbiter through the token; the result is its address."""
        return await self._client.transact_for_event(
            "propose",
            title,
            int(start),
            int(duration),
            event="ProposalCreated",
            field="contractAddress",
        )

    async def set_arbiter(self, arbiter: str) -> StateChangeResult[None]:
        return await self._client.transact("setArbiter", arbiter, op="set_arbiter")

    async def vote(self, proposal: str, token_id: int, choice: VoteChoice) -> StateChangeResult[None]:
        return await self._client.transact("vote", int(token_id), proposal, int(choice))


__all__ = [
    "Sigillum",
    "TOKEN_DOES_NOT_EXIST",
    "RECIPIENT_ALREADY_HAS_TOKEN",
    "NOT_OWNER_OF_TOKEN",
]
