from decimal import Decimal

import pytest

from ftxapi.models import OrderType, Side
from ftxapi.validators import (
    validate_all,
    validate_market,
    validate_order_type,
    validate_price,
    validate_side,
    validate_size,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("BTC/USD", "BTC/USD"),
        (" btc-perp ", "BTC-PERP"),
        ("ETH-0325", "ETH-0325"),
        ("BTC-MOVE-0325", "BTC-MOVE-0325"),
    ],
)
def test_valid_markets(raw, expected):
    assert validate_market(raw) == expected


@pytest.mark.parametrize("raw", ["BTCUSD", "BTC//USD", "BTC USD", "", "-PERP"])
def test_invalid_markets(raw):
    with pytest.raises(ValueError):
        validate_market(raw)


def test_side_and_type_are_case_insensitive():
    assert validate_side("BUY") is Side.BUY
    assert validate_side(" sell ") is Side.SELL
    assert validate_order_type("LIMIT") is OrderType.LIMIT
    assert validate_order_type("market") is OrderType.MARKET


def test_invalid_side_and_type():
    with pytest.raises(ValueError, match="Invalid side"):
        validate_side("long")
    with pytest.raises(ValueError, match="Invalid order type"):
        validate_order_type("stop")


@pytest.mark.parametrize("raw", ["0", "-1", "abc", "nan", "inf"])
def test_invalid_sizes(raw):
    with pytest.raises(ValueError):
        validate_size(raw)


def test_size_keeps_precision():
    assert validate_size("0.0001") == Decimal("0.0001")


def test_price_rules():
    assert validate_price(None, OrderType.MARKET) is None
    assert validate_price("123", OrderType.MARKET) is None
    assert validate_price("20000.5", OrderType.LIMIT) == Decimal("20000.5")
    with pytest.raises(ValueError, match="required"):
        validate_price(None, OrderType.LIMIT)
    with pytest.raises(ValueError):
        validate_price("-5", OrderType.LIMIT)


def test_validate_all():
    params = validate_all("btc/usd", "buy", "limit", "0.5", "100")
    assert params == {
        "market": "BTC/USD",
        "side": Side.BUY,
        "order_type": OrderType.LIMIT,
        "size": Decimal("0.5"),
        "price": Decimal("100"),
    }
