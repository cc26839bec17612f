import json
from decimal import Decimal

from conftest import envelope
from ftxapi.models import Order, OrderType, Side
from ftxapi.orders import format_order_response, place_order


def test_place_limit_order(stub, client):
    stub.reply(200, envelope({"id": 1, "market": "BTC/USD", "status": "new", "price": 100.0}))
    order = place_order(
        client, "BTC/USD", Side.BUY, OrderType.LIMIT, Decimal("0.5"), Decimal("100"),
        post_only=True,
    )
    assert order.id == 1
    body = json.loads(stub.last.body)
    assert body == {
        "market": "BTC/USD", "side": "buy", "price": 100.0, "type": "limit", "size": 0.5,
        "postOnly": True,
    }


def test_place_market_order_sends_null_price(stub, client):
    stub.reply(200, envelope({"id": 2, "status": "new"}))
    place_order(client, "BTC-PERP", Side.SELL, OrderType.MARKET, Decimal("1"), Decimal("999"))
    body = json.loads(stub.last.body)
    assert body["price"] is None
    assert body["type"] == "market"


def test_format_order_response():
    text = format_order_response(
        Order(id=5, market="ETH-PERP", side="sell", type="limit", status="open", size=2.0, price=1500.0)
    )
    assert "Order ID      : 5" in text
    assert "Market        : ETH-PERP" in text
    assert "Avg Price     : N/A" in text
    assert "Price         : 1500.0" in text
