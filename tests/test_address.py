import pytest

from regimen_contractus.address import (
    ZERO_ADDRESS,
    AddressError,
    addresses_equal,
    checksum_address,
    is_address,
    is_zero_address,
    normalize_address,
)

MIXED = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


@pytest.mark.parametrize(
    "value",
    [
        MIXED,
        MIXED.lower(),
        MIXED.upper().replace("0X", "0x"),
        MIXED[2:],
        "  " + MIXED + "\n",
    ],
)
def test_normalize_is_lowercase_and_idempotent(value):
    once = normalize_address(value)
    assert once == MIXED.lower()
    assert normalize_address(once) == once
    assert normalize_address(once.upper()[2:]) == once


def test_normalize_accepts_raw_bytes():
    raw = bytes.fromhex("aa" * 20)
    assert normalize_address(raw) == "0x" + "aa" * 20


@pytest.mark.parametrize("bad", ["", "0x", "0x1234", "0x" + "zz" * 20, "0x" + "aa" * 21, 42, None, b"\x00" * 19])
def test_normalize_rejects_malformed(bad):
    with pytest.raises(ValueError):
        normalize_address(bad)
    assert not is_address(bad)


def test_address_error_is_value_error():
    assert issubclass(AddressError, ValueError)


def test_addresses_equal_normalizes_both_sides():
    assert addresses_equal(MIXED, MIXED.lower())
    assert addresses_equal(MIXED[2:].upper(), MIXED)
    assert not addresses_equal(MIXED, ZERO_ADDRESS)


def test_checksum_and_zero():
    assert checksum_address(MIXED.lower()) == MIXED
    assert is_zero_address("0x" + "0" * 40)
    assert not is_zero_address(MIXED)
