"""Client for a single Proposal contract created by an Arbiter."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Tuple, Union

from ..abis import proposal_abi
from ..contracts.client import ContractClient
from ..rpc.connection import Connection
from ..types.core import HasVotedResult, ProposalRecord, VoteResult, parse_vote_choice
from ._base import ContractModel, client_options


def proposal_record(address: str, details: Tuple[Any, ...]) -> ProposalRecord:
    """Build a ProposalRecord from the raw `details()` tuple."""
    canceled, duration, executed, proposer, start, title = details
    return ProposalRecord(
        id=address,
        proposer=proposer,
        title=title,
        start=int(start),
        duration=int(duration),
        canceled=bool(canceled),
        executed=bool(executed),
    )


class Proposal(ContractModel):
    """
    Read access to one proposal: details, tallies and per-token votes.
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
    ) -> "Proposal":
        return cls(
            cls._attach_client(
                proposal_abi, address, connection, debug=debug, silent=silent, signer_address=signer_address
            )
        )

    @classmethod
    async def deploy(
        cls,
        proposer: str,
        title: str,
        start: int,
        duration: int,
        *,
        connection: Connection,
        debug: bool = False,
        silent: bool = False,
        signer_address: Optional[str] = None,
        bytecode: Union[bytes, str, None] = None,
        artifacts_dir: Union[str, Path, None] = None,
    ) -> "Proposal":
        """Deploy a standalone proposal. Normally proposals are created via `Arbiter.propose`."""
        client = await ContractClient.deploy(
            proposal_abi,
            (proposer, title, int(start), int(duration)),
            client_options(connection, debug=debug, silent=silent, signer_address=signer_address),
            owner=cls.__name__,
            bytecode=bytecode,
            artifacts_dir=artifacts_dir,
        )
        return cls(client)

    async def details(self) -> ProposalRecord:
        raw = await self._client.call("details")
        return proposal_record(self.address(), raw)

    async def has_voted(self, token: str, token_id: int) -> HasVotedResult:
        """Whether `token_id` of the `token` contract voted on this proposal, and how."""
        choice, voted = await self._client.call("hasVoted", token, int(token_id), op="has_voted")
        return HasVotedResult(choice=parse_vote_choice(choice), proposal=self.address(), voted=bool(voted))

    async def owner(self) -> str:
        return await self._client.call("owner")

    async def version(self) -> str:
        return await self._client.call("version")

    async def vote_results(self) -> VoteResult:
        accept, abstain, reject = await self._client.call("voteResults", op="vote_results")
        return VoteResult(accept=int(accept), abstain=int(abstain), reject=int(reject))


__all__ = ["Proposal", "proposal_record"]
