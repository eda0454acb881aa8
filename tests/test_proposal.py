import pytest
from conftest import CONTRACT, SIGNER, TOKEN, encode_return, make_receipt

from regimen_contractus.abis import proposal_abi
from regimen_contractus.contracts.codec import encode_call, encode_constructor
from regimen_contractus.errors import CallError, ErrorCode
from regimen_contractus.models import Proposal
from regimen_contractus.types.abi import AbiModel
from regimen_contractus.types.core import HasVotedResult, VoteChoice, VoteResult

PROPOSAL_MODEL = AbiModel.from_list(proposal_abi)


@pytest.fixture
def proposal(conn):
    return Proposal.attach(CONTRACT, connection=conn)


@pytest.mark.asyncio
async def test_deploy_appends_constructor_args(conn):
    conn.receipts.append(make_receipt(contract_address=CONTRACT))
    proposal = await Proposal.deploy(SIGNER, "Title", 100, 60, connection=conn, bytecode=b"\x60\x80")
    assert proposal.address() == CONTRACT
    assert conn.sent[0][1] == b"\x60\x80" + encode_constructor(PROPOSAL_MODEL.constructor, [SIGNER, "Title", 100, 60])


@pytest.mark.asyncio
async def test_details(proposal, conn):
    conn.on_call(proposal_abi, "details", encode_return(proposal_abi, "details", True, 60, False, SIGNER, 100, "Title"))
    record = await proposal.details()
    assert record.id == CONTRACT
    assert record.canceled is True
    assert record.executed is False
    assert (record.start, record.duration, record.title, record.proposer) == (100, 60, "Title", SIGNER)


@pytest.mark.asyncio
async def test_details_without_code_is_bad_data(proposal):
    with pytest.raises(CallError) as ei:
        await proposal.details()
    assert ei.value.code is ErrorCode.BAD_DATA


@pytest.mark.asyncio
async def test_has_voted_decodes_struct(proposal, conn):
    conn.on_call(proposal_abi, "hasVoted", encode_return(proposal_abi, "hasVoted", (2, True)))
    result = await proposal.has_voted(TOKEN, 3)
    assert result == HasVotedResult(choice=VoteChoice.REJECT, proposal=CONTRACT, voted=True)
    assert conn.calls[0][1] == encode_call(PROPOSAL_MODEL.get_function("hasVoted"), [TOKEN, 3])


@pytest.mark.asyncio
async def test_has_voted_not_voted(proposal, conn):
    conn.on_call(proposal_abi, "hasVoted", encode_return(proposal_abi, "hasVoted", (0, False)))
    result = await proposal.has_voted(TOKEN, 3)
    assert result.voted is False
    assert result.choice is VoteChoice.ABSTAIN


@pytest.mark.asyncio
async def test_vote_results_order(proposal, conn):
    conn.on_call(proposal_abi, "voteResults", encode_return(proposal_abi, "voteResults", 5, 2, 1))
    results = await proposal.vote_results()
    assert results == VoteResult(accept=5, abstain=2, reject=1)
    assert results.total == 8


@pytest.mark.asyncio
async def test_owner_and_version(proposal, conn):
    conn.on_call(proposal_abi, "owner", encode_return(proposal_abi, "owner", SIGNER))
    conn.on_call(proposal_abi, "version", encode_return(proposal_abi, "version", "0.2.0"))
    assert await proposal.owner() == SIGNER
    assert await proposal.version() == "0.2.0"
