"""
Client for the Arbiter governance contract.

The Arbiter keeps the set of tokens whose holders may vote, the accounts with
executor privileges, and creates one Proposal contract per `propose` call.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from ..abis import arbiter_abi, proposal_abi
from ..address import AddressError, normalize_address
from ..contracts.access import grant_role, has_role, revoke_role
from ..contracts.client import ContractClient, ContractHandle
from ..rpc.connection import Connection
from ..types.core import HasVotedResult, ProposalRecord, StateChangeResult, VoteChoice, parse_vote_choice
from ._base import ContractModel, client_options
from .proposal import proposal_record

EXECUTOR_ROLE = "EXECUTOR_ROLE"


class Arbiter(ContractModel):
    @classmethod
    def attach(
        cls,
        address: str,
        *,
        connection: Connection,
        debug: bool = False,
        silent: bool = False,
        signer_address: Optional[str] = None,
    ) -> "Arbiter":
        return cls(
            cls._attach_client(
                arbiter_abi, address, connection, debug=debug, silent=silent, signer_address=signer_address
            )
        )

    @classmethod
    async def deploy(
        cls,
        *,
        connection: Connection,
        debug: bool = False,
        silent: bool = False,
        signer_address: Optional[str] = None,
        bytecode: Union[bytes, str, None] = None,
        artifacts_dir: Union[str, Path, None] = None,
    ) -> "Arbiter":
        client = await ContractClient.deploy(
            arbiter_abi,
            (),
            client_options(connection, debug=debug, silent=silent, signer_address=signer_address),
            owner=cls.__name__,
            bytecode=bytecode,
            artifacts_dir=artifacts_dir,
        )
        return cls(client)

    # --- executors -------------------------------------------------------

    async def add_executor(self, account: str) -> StateChangeResult[None]:
        """Grant executor privileges. Only admins can assign them."""
        return await grant_role(self._client, EXECUTOR_ROLE, account, op="add_executor")

    async def remove_executor(self, account: str) -> StateChangeResult[None]:
        return await revoke_role(self._client, EXECUTOR_ROLE, account, op="remove_executor")

    async def is_executor(self, account: str) -> bool:
        return await has_role(self._client, EXECUTOR_ROLE, account, op="is_executor")

    # --- tokens ----------------------------------------------------------

    async def add_token(self, token: str) -> StateChangeResult[None]:
        """Sanction a token contract; holders of its tokens may vote."""
        return await self._client.transact("addToken", token, op="add_token")

    async def remove_token(self, token: str) -> StateChangeResult[None]:
        return await self._client.transact("removeToken", token, op="remove_token")

    async def eligibility(self, token: str) -> bool:
        return bool(await self._client.call("eligibility", token))

    # --- proposals -------------------------------------------------------

    async def propose(self, proposer: str, title: str, start: int, duration: int) -> StateChangeResult[str]:
        """
        Create a proposal. `start` is a unix timestamp (seconds), `duration` in seconds.
        The result is the new proposal's contract address.
        """
        return await self._client.transact_for_event(
            "propose",
            proposer,
            title,
            int(start),
            int(duration),
            event="ProposalCreated",
            field="contractAddress",
        )

    async def cancel(self, proposal: str) -> StateChangeResult[None]:
        return await self._client.transact("cancel", proposal)

    async def execute(self, proposal: str) -> StateChangeResult[None]:
        return await self._client.transact("execute", proposal)

    async def proposal_by_address(self, address: str) -> Optional[ProposalRecord]:
        """
        Read a proposal's details, or None when there is no proposal at `address`.
        """
        try:
            target = normalize_address(address)
        except AddressError as exc:
            self._client.log_failure("proposal_by_address", exc)
            raise
        proposal = ContractClient(
            ContractHandle(address=target, abi=proposal_abi, connection=self._client.connection),
            owner=self._client.owner,
            logger=self._client.logger,
        )
        raw = await proposal.call_optional("details", op="proposal_by_address")
        if raw is None:
            return None
        return proposal_record(proposal.address, raw)

    # --- voting ----------------------------------------------------------

    async def vote(self, proposal: str, token_id: int, choice: VoteChoice) -> StateChangeResult[None]:
        """Vote on `proposal` with token `token_id`. Timing and eligibility are checked on chain."""
        return await self._client.transact("vote", int(token_id), proposal, int(choice))

    async def has_voted(self, proposal: str, token_id: int) -> HasVotedResult:
        choice, voted = await self._client.call("hasVoted", int(token_id), proposal, op="has_voted")
        return HasVotedResult(choice=parse_vote_choice(choice), proposal=normalize_address(proposal), voted=bool(voted))

    async def version(self) -> str:
        return await self._client.call("version")


__all__ = ["Arbiter", "EXECUTOR_ROLE"]
