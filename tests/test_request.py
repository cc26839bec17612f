import dataclasses
from datetime import datetime, timezone

import pytest

from ftxapi.request import (
    Method,
    Request,
    canonical_payload,
    encode_body,
    encode_query,
    format_param,
    normalize_query,
)


def test_query_encoding_ignores_insertion_order():
    assert encode_query({"a": "1", "b": "2"}) == "a=1&b=2"
    assert encode_query({"b": "2", "a": "1"}) == "a=1&b=2"


def test_query_encoding_of_normalized_tuple_is_stable():
    query = normalize_query({"market": "BTC/USD", "depth": 20})
    assert encode_query(query) == encode_query(query)
    assert encode_query(query) == "depth=20&market=BTC%2FUSD"


def test_none_values_are_dropped():
    assert normalize_query({"market": None, "depth": 5}) == (("depth", "5"),)
    assert encode_query(None) == ""
    assert encode_query({}) == ""


@pytest.mark.parametrize(
    "value, expected",
    [
        (True, "true"),
        (False, "false"),
        (10, "10"),
        (1.5, "1.5"),
        ("BTC-PERP", "BTC-PERP"),
        (datetime(2020, 5, 4, 12, 0, tzinfo=timezone.utc), "1588593600"),
        (datetime(2020, 5, 4, 12, 0), "1588593600"),
    ],
)
def test_format_param(value, expected):
    assert format_param(value) == expected


def test_encode_body_is_compact_json():
    assert encode_body({"market": "BTC/USD", "size": 1}) == b'{"market":"BTC/USD","size":1}'


def test_create_normalizes_arguments():
    request = Request.create("post", "orders", params={"b": 2, "a": None}, body={"x": 1}, signed=True)
    assert request.method is Method.POST
    assert request.query == (("b", "2"),)
    assert request.body == b'{"x":1}'
    assert request.signed is True


def test_create_keeps_raw_bytes_body():
    request = Request.create(Method.DELETE, "orders", body=b'{"market":"BTC-PERP"}')
    assert request.body == b'{"market":"BTC-PERP"}'


def test_request_is_immutable():
    request = Request.create(Method.GET, "markets")
    with pytest.raises(dataclasses.FrozenInstanceError):
        request.path = "orders"


def test_query_string_property():
    request = Request.create(Method.GET, "orders", params={"market": "ETH-PERP"})
    assert request.query_string == "market=ETH-PERP"


def test_canonical_payload_layout():
    assert canonical_payload(1588591511721, "GET", "/api/markets") == b"1588591511721GET/api/markets"
    assert (
        canonical_payload(1, "get", "/api/orders", "market=BTC-PERP")
        == b"1GET/api/orders?market=BTC-PERP"
    )
    assert (
        canonical_payload(1, "POST", "/api/orders", "", b'{"size":1}')
        == b'1POST/api/orders{"size":1}'
    )
    assert (
        canonical_payload(1, "DELETE", "/api/orders", "a=1", b"{}")
        == b"1DELETE/api/orders?a=1{}"
    )
