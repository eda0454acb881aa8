import pytest
from eth_abi import encode as abi_encode
from conftest import CONTRACT, TOKEN, encode_return, make_receipt, revert_data

from regimen_contractus.abis import regimen_abi
from regimen_contractus.contracts.codec import encode_call
from regimen_contractus.errors import CallError, RpcError
from regimen_contractus.models import Regimen
from regimen_contractus.types.abi import AbiModel, error_selector

REGIMEN = AbiModel.from_list(regimen_abi)


def test_init_is_attach(conn):
    regimen = Regimen.init(CONTRACT, connection=conn)
    assert isinstance(regimen, Regimen)
    assert regimen.address() == CONTRACT


@pytest.mark.asyncio
async def test_deploy(conn):
    conn.receipts.append(make_receipt(contract_address=CONTRACT))
    regimen = await Regimen.deploy(connection=conn, bytecode="0x00")
    assert regimen.deployment is not None
    assert regimen.deployment.deploy_tx_hash == "0x" + f"{1:064x}"


@pytest.mark.asyncio
async def test_token_registry(conn):
    regimen = Regimen.attach(CONTRACT, connection=conn)
    await regimen.add_token(TOKEN)
    await regimen.remove_token(TOKEN)
    assert [d for _to, d, _v, _s in conn.sent] == [
        encode_call(REGIMEN.get_function("addToken"), [TOKEN]),
        encode_call(REGIMEN.get_function("removeToken"), [TOKEN]),
    ]

    conn.on_call(regimen_abi, "canVote", encode_return(regimen_abi, "canVote", True))
    assert await regimen.can_vote(TOKEN) is True


@pytest.mark.asyncio
async def test_add_token_by_non_owner(conn):
    payload = error_selector(("OwnableUnauthorizedAccount", [{"type": "address"}])) + abi_encode(["address"], [TOKEN])
    conn.send_error = RpcError(method="eth_sendTransaction", code=3, message="execution reverted", data="0x" + payload.hex())
    with pytest.raises(CallError) as ei:
        await Regimen.attach(CONTRACT, connection=conn).add_token(TOKEN)
    assert ei.value.error_name == "OwnableUnauthorizedAccount"
    assert ei.value.reason is None


@pytest.mark.asyncio
async def test_version_revert(conn):
    conn.on_call(regimen_abi, "version", RpcError(method="eth_call", code=3, message="execution reverted", data=revert_data("x")))
    with pytest.raises(CallError):
        await Regimen.attach(CONTRACT, connection=conn).version()
