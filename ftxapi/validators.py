"""
Input validators for order parameters given on the command line.

Every public function raises ``ValueError`` with a human-readable message
when validation fails.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from .models import OrderType, Side

# Spot (BTC/USD), perpetual (BTC-PERP), dated future (BTC-0325) and
# move contracts (BTC-MOVE-0325) all fit this shape.
_MARKET_RE = re.compile(r"^[A-Z0-9]{1,20}([/-][A-Z0-9]{1,20}){1,3}$")


def validate_market(market: str) -> str:
    """Return the uppercased market name or raise on invalid format."""
    market = market.strip().upper()
    if not _MARKET_RE.match(market):
        raise ValueError(
            f"Invalid market '{market}'. "
            "Expected e.g. BTC/USD, BTC-PERP or BTC-0325."
        )
    return market


def validate_side(side: str) -> Side:
    """Return the side or raise if not buy/sell."""
    try:
        return Side(side.strip().lower())
    except ValueError:
        raise ValueError(
            f"Invalid side '{side}'. Must be one of: {', '.join(s.value for s in Side)}."
        )


def validate_order_type(order_type: str) -> OrderType:
    """Return the order type or raise if unsupported."""
    try:
        return OrderType(order_type.strip().lower())
    except ValueError:
        raise ValueError(
            f"Invalid order type '{order_type}'. "
            f"Must be one of: {', '.join(t.value for t in OrderType)}."
        )


def validate_size(size: Union[str, float]) -> Decimal:
    """
    Return a positive ``Decimal`` size or raise.

    Raises
    ------
    ValueError
        If *size* is not a valid positive number.
    """
    try:
        value = Decimal(str(size))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid size '{size}'. Must be a positive number.")
    if not value.is_finite() or value <= 0:
        raise ValueError(f"Size must be positive, got {value}.")
    return value


def validate_price(price: Union[str, float, None], order_type: OrderType) -> Optional[Decimal]:
    """
    Validate *price* given an *order_type*.

    - For limit orders, price is **required** and must be positive.
    - For market orders, price is ignored (returns ``None``).
    """
    if order_type is OrderType.MARKET:
        return None

    if price is None:
        raise ValueError("Price is required for limit orders.")

    try:
        value = Decimal(str(price))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid price '{price}'. Must be a positive number.")
    if not value.is_finite() or value <= 0:
        raise ValueError(f"Price must be positive, got {value}.")
    return value


def validate_all(
    market: str,
    side: str,
    order_type: str,
    size: Union[str, float],
    price: Union[str, float, None],
) -> dict:
    """
    Run every validator and return a clean parameter dict.

    Returns
    -------
    dict
        Keys: ``market``, ``side``, ``order_type``, ``size``, ``price``.
    """
    v_type = validate_order_type(order_type)
    return {
        "market": validate_market(market),
        "side": validate_side(side),
        "order_type": v_type,
        "size": validate_size(size),
        "price": validate_price(price, v_type),
    }
