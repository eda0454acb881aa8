import base64
import json

import pytest

from regimen_contractus.errors import MetadataDecodeError
from regimen_contractus.metadata import decode_data_uri, encode_data_uri


def _uri(payload: bytes) -> str:
    return "data:application/json;base64," + base64.b64encode(payload).decode("ascii")


def test_roundtrip_preserves_object():
    meta = {
        "name": "Sigillum #1",
        "description": "Seal of the order",
        "image": "data:image/svg+xml;base64,PHN2Zy8+",
        "attributes": [{"trait_type": "rank", "value": "ADEPTUS_RANK"}],
    }
    uri = encode_data_uri(meta)
    assert uri.startswith("data:application/json;base64,")
    assert decode_data_uri(uri) == meta


def test_encode_is_compact_json():
    uri = encode_data_uri({"a": 1, "b": [1, 2]})
    body = base64.b64decode(uri.split(",", 1)[1])
    assert body == b'{"a":1,"b":[1,2]}'


def test_decode_handles_unicode():
    assert decode_data_uri(_uri(json.dumps({"name": "Ordo ✠"}).encode("utf-8"))) == {"name": "Ordo ✠"}


def test_missing_comma_fails_at_uri_stage():
    with pytest.raises(MetadataDecodeError) as ei:
        decode_data_uri("data:application/json;base64")
    assert ei.value.stage == "uri"


def test_bad_base64_chains_cause():
    with pytest.raises(MetadataDecodeError) as ei:
        decode_data_uri("data:application/json;base64,@@@not-base64@@@")
    assert ei.value.stage == "base64"
    assert ei.value.__cause__ is not None


def test_bad_utf8():
    with pytest.raises(MetadataDecodeError) as ei:
        decode_data_uri(_uri(b"\xff\xfe\xfd"))
    assert ei.value.stage == "utf8"
    assert isinstance(ei.value.__cause__, UnicodeDecodeError)


def test_bad_json():
    with pytest.raises(MetadataDecodeError) as ei:
        decode_data_uri(_uri(b"{not json"))
    assert ei.value.stage == "json"
    assert isinstance(ei.value.__cause__, json.JSONDecodeError)
