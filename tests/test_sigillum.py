import logging

import pytest
from conftest import CONTRACT, OTHER, PROPOSAL, SIGNER, TOKEN, encode_return, make_log, make_receipt, revert_data

from regimen_contractus.abis import sigillum_abi
from regimen_contractus.address import ZERO_ADDRESS
from regimen_contractus.contracts.codec import encode_call, encode_constructor
from regimen_contractus.errors import CallError, ErrorCode, MetadataDecodeError, RpcError
from regimen_contractus.metadata import encode_data_uri
from regimen_contractus.models import RECIPIENT_ALREADY_HAS_TOKEN, TOKEN_DOES_NOT_EXIST, Sigillum
from regimen_contractus.types.abi import AbiModel
from regimen_contractus.types.core import HasVotedResult, VoteChoice

SIGILLUM = AbiModel.from_list(sigillum_abi)


@pytest.fixture
def token(conn):
    return Sigillum.attach(TOKEN, connection=conn)


def _revert(reason):
    return RpcError(method="eth_call", code=3, message="execution reverted", data=revert_data(reason))


@pytest.mark.asyncio
async def test_deploy_encodes_constructor(conn):
    conn.receipts.append(make_receipt(contract_address=TOKEN))
    token = await Sigillum.deploy("Sigillum", "SIG", "Seal", CONTRACT, connection=conn, bytecode="0xfe")
    assert token.address() == TOKEN
    assert conn.sent[0][1] == b"\xfe" + encode_constructor(SIGILLUM.constructor, ["Sigillum", "SIG", "Seal", CONTRACT])


@pytest.mark.asyncio
async def test_simple_reads(token, conn):
    conn.on_call(sigillum_abi, "arbiter", encode_return(sigillum_abi, "arbiter", CONTRACT))
    conn.on_call(sigillum_abi, "name", encode_return(sigillum_abi, "name", "Sigillum"))
    conn.on_call(sigillum_abi, "symbol", encode_return(sigillum_abi, "symbol", "SIG"))
    conn.on_call(sigillum_abi, "description", encode_return(sigillum_abi, "description", "Seal"))
    conn.on_call(sigillum_abi, "supply", encode_return(sigillum_abi, "supply", 3))
    conn.on_call(sigillum_abi, "version", encode_return(sigillum_abi, "version", "1.2.0"))
    assert await token.arbiter() == CONTRACT
    assert await token.name() == "Sigillum"
    assert await token.symbol() == "SIG"
    assert await token.description() == "Seal"
    assert await token.supply() == 3
    assert await token.version() == "1.2.0"


@pytest.mark.asyncio
async def test_contract_metadata(token, conn):
    meta = {"name": "Sigillum", "description": "Seal", "image": "ipfs://x"}
    conn.on_call(sigillum_abi, "contractURI", encode_return(sigillum_abi, "contractURI", encode_data_uri(meta)))
    assert await token.contract_uri() == encode_data_uri(meta)
    assert await token.contract_metadata() == meta


@pytest.mark.asyncio
async def test_token_metadata(token, conn):
    meta = {"name": "Sigillum #1", "attributes": [{"trait_type": "rank", "value": "adeptus"}]}
    conn.on_call(sigillum_abi, "tokenURI", encode_return(sigillum_abi, "tokenURI", encode_data_uri(meta)))
    assert await token.token_metadata(1) == meta
    assert conn.calls[0][1] == encode_call(SIGILLUM.get_function("tokenURI"), [1])


@pytest.mark.asyncio
async def test_token_metadata_malformed_is_logged(token, conn, caplog):
    caplog.set_level(logging.DEBUG)
    conn.on_call(sigillum_abi, "tokenURI", encode_return(sigillum_abi, "tokenURI", "data:application/json;base64,!!!"))
    with pytest.raises(MetadataDecodeError) as ei:
        await token.token_metadata(1)
    assert ei.value.stage == "base64"
    assert any(r.getMessage().startswith("Sigillum#token_metadata:") for r in caplog.records)


@pytest.mark.asyncio
async def test_token_metadata_for_missing_token_raises(token, conn):
    conn.on_call(sigillum_abi, "tokenURI", _revert(TOKEN_DOES_NOT_EXIST))
    with pytest.raises(CallError) as ei:
        await token.token_metadata(99)
    assert ei.value.reason == TOKEN_DOES_NOT_EXIST


@pytest.mark.asyncio
async def test_token_of(token, conn):
    conn.on_call(sigillum_abi, "tokenOf", encode_return(sigillum_abi, "tokenOf", 4))
    assert await token.token_of(SIGNER) == 4


@pytest.mark.asyncio
async def test_token_of_zero_is_none(token, conn):
    conn.on_call(sigillum_abi, "tokenOf", encode_return(sigillum_abi, "tokenOf", 0))
    assert await token.token_of(OTHER) is None


@pytest.mark.asyncio
async def test_has_voted(token, conn):
    conn.on_call(sigillum_abi, "hasVoted", encode_return(sigillum_abi, "hasVoted", 2, True))
    assert await token.has_voted(PROPOSAL, 1) == HasVotedResult(choice=VoteChoice.REJECT, proposal=PROPOSAL, voted=True)
    assert conn.calls[0][1] == encode_call(SIGILLUM.get_function("hasVoted"), [1, PROPOSAL])


@pytest.mark.asyncio
async def test_mint_returns_token_id_from_transfer(token, conn):
    conn.receipts.append(make_receipt(logs=[make_log(sigillum_abi, "Transfer", ZERO_ADDRESS, OTHER, 5, address=TOKEN)]))
    result = await token.mint(OTHER)
    assert result.result == 5
    assert conn.sent[0][1] == encode_call(SIGILLUM.get_function("mint"), [OTHER])


@pytest.mark.asyncio
async def test_mint_twice_reverts(token, conn, caplog):
    caplog.set_level(logging.DEBUG)
    conn.send_error = RpcError(
        method="eth_sendTransaction", code=3, message="execution reverted", data=revert_data(RECIPIENT_ALREADY_HAS_TOKEN)
    )
    with pytest.raises(CallError) as ei:
        await token.mint(OTHER)
    assert ei.value.code is ErrorCode.CALL_EXCEPTION
    assert ei.value.reason == RECIPIENT_ALREADY_HAS_TOKEN
    assert [r.getMessage().split(":")[0] for r in caplog.records if r.levelno == logging.ERROR] == ["Sigillum#mint"]


@pytest.mark.asyncio
async def test_burn_set_arbiter_and_vote(token, conn):
    await token.burn(5)
    await token.set_arbiter(CONTRACT)
    await token.vote(PROPOSAL, 5, VoteChoice.ABSTAIN)
    assert [d for _to, d, _v, _s in conn.sent] == [
        encode_call(SIGILLUM.get_function("burn"), [5]),
        encode_call(SIGILLUM.get_function("setArbiter"), [CONTRACT]),
        encode_call(SIGILLUM.get_function("vote"), [5, PROPOSAL, 0]),
    ]


@pytest.mark.asyncio
async def test_propose_through_token(token, conn):
    log = make_log(sigillum_abi, "ProposalCreated", PROPOSAL, SIGNER, 100, 60, address=CONTRACT)
    conn.receipts.append(make_receipt(logs=[log]))
    result = await token.propose("Title", 100, 60)
    assert result.result == PROPOSAL
