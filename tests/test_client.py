import json
from datetime import datetime, timezone
from urllib.parse import urlsplit

import pytest

from conftest import API_KEY, API_SECRET, envelope
from ftxapi import endpoints as ep
from ftxapi.builder import HEADER_KEY, HEADER_SIGN, HEADER_SUBACCOUNT, HEADER_TS
from ftxapi.client import FTXClient, unwrap_envelope
from ftxapi.config import ClientConfig
from ftxapi.errors import (
    ConstructionError,
    DecodeError,
    EnvelopeError,
    OrderAlreadyClosed,
    RateLimited,
)
from ftxapi.models import (
    Market,
    ModifyOrderParams,
    Order,
    OrderType,
    PlaceOrderParams,
    Side,
)
from ftxapi.request import Method, Request
from ftxapi.signer import sign


def _expected_signature(prepared):
    parts = urlsplit(prepared.url)
    payload = prepared.headers[HEADER_TS] + prepared.method + parts.path
    if parts.query:
        payload += "?" + parts.query
    data = payload.encode()
    if prepared.body:
        data += prepared.body
    return sign(API_SECRET, data)


# ── envelope handling ──────────────────────────────────────────────────────


def test_unwrap_envelope_returns_result():
    assert unwrap_envelope(b'{"success": true, "result": [1, 2]}') == [1, 2]


def test_unwrap_envelope_failure_at_status_200():
    with pytest.raises(EnvelopeError) as info:
        unwrap_envelope(b'{"success": false, "error": "insufficient funds"}')
    assert info.value.message == "insufficient funds"


@pytest.mark.parametrize("body", [b"", b"nope", b"[]"])
def test_unwrap_envelope_rejects_non_objects(body):
    with pytest.raises(DecodeError):
        unwrap_envelope(body)


@pytest.mark.parametrize(
    "body",
    [
        b'{"result": [1]}',
        b'{"success": "false", "result": [1]}',
        b'{"success": "true", "result": [1]}',
        b'{"success": 1, "result": [1]}',
        b'{"success": null, "result": [1]}',
    ],
)
def test_unwrap_envelope_requires_literal_true(body):
    with pytest.raises(EnvelopeError) as info:
        unwrap_envelope(body)
    assert info.value.message == ""


def test_unwrap_envelope_keeps_only_string_messages():
    with pytest.raises(EnvelopeError) as info:
        unwrap_envelope(b'{"success": false, "error": {"code": 5}}')
    assert info.value.message == ""


def test_result_of_wrong_shape_is_decode_error(stub, client):
    stub.reply(200, envelope([{"id": 1, "time": "not a time"}]))
    with pytest.raises(DecodeError):
        client.get_trades("BTC/USD")


def test_result_timestamps_are_datetimes(stub, client):
    stub.reply(200, envelope([{"id": 1, "time": "2021-01-01T00:00:00.12+00:00"}]))
    [trade] = client.get_trades("BTC/USD")
    assert trade.time == datetime(2021, 1, 1, 0, 0, 0, 120000, tzinfo=timezone.utc)


# ── end-to-end through the stub transport ──────────────────────────────────


def test_get_markets_unsigned_empty_result(stub, config):
    config = ClientConfig(base_url="https://ftx.test", session=config.session)
    stub.reply(200, {"success": True, "result": []})
    with FTXClient(config) as client:
        result = client.get_markets()

    assert result == []
    sent = stub.last
    assert sent.method == "GET"
    assert sent.url == "https://ftx.test/markets"
    assert HEADER_SIGN not in sent.headers
    assert "Content-Type" not in sent.headers


def test_get_markets_decodes_models(stub, client):
    stub.reply(200, envelope([{"name": "BTC/USD", "type": "spot", "priceIncrement": 1.0}]))
    markets = client.get_markets()
    assert markets == [Market(name="BTC/USD", type="spot", price_increment=1.0)]


def test_place_order_is_signed_over_body(stub, config):
    config = ClientConfig(
        api_key=API_KEY, api_secret=API_SECRET, base_url="https://ftx.test", session=config.session
    )
    stub.reply(200, envelope({"id": 9, "market": "BTC/USD", "status": "new"}))
    params = PlaceOrderParams(
        market="BTC/USD", side=Side.BUY, price=100, type=OrderType.LIMIT, size=1
    )
    with FTXClient(config) as client:
        order = client.place_order(params)

    assert order == Order(id=9, market="BTC/USD", status="new")
    sent = stub.last
    assert sent.method == "POST"
    assert sent.url == "https://ftx.test/orders"
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.headers[HEADER_KEY] == API_KEY
    assert sent.headers[HEADER_TS].isdigit()

    body_json = sent.body.decode()
    assert json.loads(body_json) == {
        "market": "BTC/USD", "side": "buy", "price": 100, "type": "limit", "size": 1,
    }
    payload = sent.headers[HEADER_TS] + "POST" + "/orders" + body_json
    assert sent.headers[HEADER_SIGN] == sign(API_SECRET, payload)


def test_envelope_failure_with_status_200(stub, client):
    stub.reply(200, {"success": False, "error": "insufficient funds"})
    with pytest.raises(EnvelopeError) as info:
        client.get_balances()
    assert info.value.message == "insufficient funds"


def test_http_errors_surface_from_wrappers(stub, client):
    stub.reply(404, {"success": False, "error": "Order already closed"})
    with pytest.raises(OrderAlreadyClosed):
        client.cancel_order(42)
    assert stub.last.method == "DELETE"
    assert stub.last.url == "https://ftx.test/api/orders/42"


def test_rate_limit_surfaces_from_wrappers(stub, client):
    stub.reply(429, b"")
    with pytest.raises(RateLimited):
        client.get_account()


def test_path_arguments_are_substituted(stub, client):
    stub.reply(200, envelope({"name": "BTC/USD"}))
    market = client.get_market("BTC/USD")
    assert market.name == "BTC/USD"
    assert stub.last.url == "https://ftx.test/api/markets/BTC/USD"


def test_signed_query_is_part_of_signature(stub, client):
    stub.reply(200, envelope([]))
    client.get_open_orders("BTC/USD")
    sent = stub.last
    assert sent.url == "https://ftx.test/api/orders?market=BTC%2FUSD"
    assert sent.headers[HEADER_SIGN] == _expected_signature(sent)


def test_optional_query_parameters_are_omitted(stub, client):
    stub.reply(200, envelope([]))
    client.get_open_orders()
    assert stub.last.url == "https://ftx.test/api/orders"


def test_time_range_parameters(stub, client):
    stub.reply(200, envelope([]))
    client.get_historical_prices(
        "BTC-PERP", 3600, start_time=datetime(2020, 5, 4, tzinfo=timezone.utc), end_time=1588600000
    )
    assert stub.last.url == (
        "https://ftx.test/api/markets/BTC-PERP/candles"
        "?end_time=1588600000&resolution=3600&start_time=1588550400"
    )


def test_cancel_all_orders_sends_filters_in_body(stub, client):
    stub.reply(200, envelope("Orders queued for cancelation"))
    result = client.cancel_all_orders(market="BTC-PERP", limit_orders_only=True)
    assert result == "Orders queued for cancelation"
    sent = stub.last
    assert sent.method == "DELETE"
    assert json.loads(sent.body) == {"market": "BTC-PERP", "limitOrdersOnly": True}
    assert sent.headers[HEADER_SIGN] == _expected_signature(sent)


def test_modify_order_by_client_id(stub, client):
    stub.reply(200, envelope({"id": 7, "clientId": "abc", "price": 101.0}))
    order = client.modify_order_by_client_id("abc", ModifyOrderParams(price=101.0))
    assert order.client_id == "abc"
    assert stub.last.url == "https://ftx.test/api/orders/by_client_id/abc/modify"
    assert json.loads(stub.last.body) == {"price": 101.0}


def test_all_balances_decodes_mapping(stub, client):
    stub.reply(200, envelope({"main": [{"coin": "USD", "free": 1.0}], "sub": []}))
    balances = client.get_all_balances()
    assert set(balances) == {"main", "sub"}
    assert balances["main"][0].coin == "USD"
    assert balances["sub"] == []


def test_index_weights_are_plain_mapping(stub, client):
    stub.reply(200, envelope({"BTC": 0.5, "ETH": 0.5}))
    assert client.get_index_weights("ALT") == {"BTC": 0.5, "ETH": 0.5}
    assert stub.last.url == "https://ftx.test/api/indexes/ALT/weights"


def test_execute_ad_hoc_descriptor(stub, client):
    stub.reply(200, envelope({"ok": True}))
    result = client.execute(Request.create(Method.GET, "stats/latency_stats", signed=True))
    assert result == {"ok": True}
    assert stub.last.headers[HEADER_SIGN] == _expected_signature(stub.last)


def test_execute_passes_timeout(stub, client):
    stub.reply(200, envelope(None))
    client.execute(Request.create(Method.GET, "markets"), timeout=1.5)
    assert stub.timeouts[-1] == 1.5


def test_call_with_missing_path_argument(client):
    with pytest.raises(ConstructionError):
        client.call(ep.GET_MARKET)


# ── sub-accounts and session ownership ─────────────────────────────────────


def test_with_subaccount_returns_scoped_client_sharing_session(stub, client):
    scoped = client.with_subaccount("hedge")
    assert scoped is not client
    assert scoped.subaccount == "hedge"
    assert client.subaccount is None
    assert scoped._dispatcher.session is client._dispatcher.session

    stub.reply(200, envelope([]))
    scoped.get_balances()
    assert stub.last.headers[HEADER_SUBACCOUNT] == "hedge"

    stub.reply(200, envelope([]))
    client.get_balances()
    assert HEADER_SUBACCOUNT not in stub.last.headers


def test_client_only_closes_its_own_session(config):
    external = FTXClient(config)
    assert external._owns_session is False
    assert external.with_subaccount("x")._owns_session is False

    owned = FTXClient(ClientConfig())
    assert owned._owns_session is True
    owned.close()


def test_each_call_is_signed_independently(stub, client):
    stub.reply(200, envelope([]))
    stub.reply(200, envelope([]))
    client.get_balances()
    client.get_positions(show_avg_price=True)
    first, second = stub.sent[-2:]
    assert second.url == "https://ftx.test/api/positions?showAvgPrice=true"
    assert first.headers[HEADER_SIGN] == _expected_signature(first)
    assert second.headers[HEADER_SIGN] == _expected_signature(second)
