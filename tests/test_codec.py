import pytest
from eth_abi import encode as abi_encode

from regimen_contractus.abis import proposal_abi, regimen_abi
from regimen_contractus.contracts.codec import (
    decode_return,
    decode_revert,
    encode_call,
    encode_constructor,
)
from regimen_contractus.errors import AbiError, CallError, ErrorCode
from regimen_contractus.types.abi import AbiModel, error_selector

MIXED = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"

TRANSFER = {
    "type": "function",
    "name": "transfer",
    "inputs": [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}],
    "outputs": [{"name": "", "type": "bool"}],
}


def test_encode_call_prefixes_selector_and_accepts_any_address_case():
    data = encode_call(TRANSFER, [MIXED, 5])
    assert data[:4].hex() == "a9059cbb"
    assert data[4:] == abi_encode(["address", "uint256"], [MIXED.lower(), 5])
    assert encode_call(TRANSFER, [MIXED.upper().replace("0X", "0x"), 5]) == data


def test_encode_call_wrong_arg_count():
    with pytest.raises(AbiError) as ei:
        encode_call(TRANSFER, [MIXED])
    assert ei.value.function == "transfer"


def test_encode_call_bad_address_is_abi_error():
    with pytest.raises(AbiError):
        encode_call(TRANSFER, ["0x1234", 1])


def test_encode_call_out_of_range_int():
    fn = {"type": "function", "name": "f", "inputs": [{"name": "x", "type": "uint8"}]}
    with pytest.raises(AbiError):
        encode_call(fn, [256])


def test_encode_constructor_empty_and_with_args():
    assert encode_constructor(AbiModel.from_list(regimen_abi).constructor, []) == b""
    ctor = AbiModel.from_list(proposal_abi).constructor
    out = encode_constructor(ctor, ["0x" + "aa" * 20, "Title", 1_700_000_000, 3600])
    assert out == abi_encode(
        ["address", "string", "uint48", "uint32"], ["0x" + "aa" * 20, "Title", 1_700_000_000, 3600]
    )


def test_decode_return_single_multi_and_none():
    model = AbiModel.from_list(proposal_abi)
    assert decode_return(model.get_function("version"), abi_encode(["string"], ["1.2.0"])) == "1.2.0"

    raw = abi_encode(["uint32", "uint32", "uint32"], [3, 1, 2])
    assert decode_return(model.get_function("voteResults"), raw) == (3, 1, 2)

    assert decode_return(model.get_function("cancel"), b"") is None


def test_decode_return_normalizes_addresses_and_structs():
    model = AbiModel.from_list(proposal_abi)
    owner = decode_return(model.get_function("owner"), abi_encode(["address"], [MIXED]))
    assert owner == MIXED.lower()

    voted = decode_return(model.get_function("hasVoted"), abi_encode(["(uint8,bool)"], [(2, True)]))
    assert voted == (2, True)


def test_decode_return_empty_data_is_bad_data():
    model = AbiModel.from_list(proposal_abi)
    with pytest.raises(CallError) as ei:
        decode_return(model.get_function("details"), b"")
    assert ei.value.code is ErrorCode.BAD_DATA
    assert ei.value.is_not_found


def test_decode_return_garbage_is_bad_data():
    model = AbiModel.from_list(proposal_abi)
    with pytest.raises(CallError) as ei:
        decode_return(model.get_function("details"), b"\x01\x02")
    assert ei.value.code is ErrorCode.BAD_DATA


def test_decode_revert_error_string():
    data = bytes.fromhex("08c379a0") + abi_encode(["string"], ["recipient already has token"])
    info = decode_revert(data)
    assert info.reason == "recipient already has token"
    assert info.error_name is None


def test_decode_revert_panic():
    data = bytes.fromhex("4e487b71") + abi_encode(["uint256"], [0x11])
    info = decode_revert(data)
    assert info.error_name == "Panic"
    assert info.reason == "panic: arithmetic overflow or underflow (0x11)"


def test_decode_revert_custom_error():
    model = AbiModel.from_list(regimen_abi)
    entry = model.errors["OwnableUnauthorizedAccount"]
    data = error_selector(entry) + abi_encode(["address"], [MIXED])
    info = decode_revert(data, model)
    assert info.error_name == "OwnableUnauthorizedAccount"
    assert info.error_args == (MIXED.lower(),)
    assert info.reason is None


def test_decode_revert_unknown_or_short():
    assert decode_revert(b"").reason is None
    assert decode_revert(b"\xde\xad\xbe\xef").error_name is None
