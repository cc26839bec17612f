"""
Order-placement helpers.

Bridges validated user input and ``FTXClient.place_order``.
"""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Optional

from .client import FTXClient
from .models import Order, OrderType, PlaceOrderParams, Side

logger = logging.getLogger("ftxapi")


def place_order(
    client: FTXClient,
    market: str,
    side: Side,
    order_type: OrderType,
    size: Decimal,
    price: Optional[Decimal] = None,
    post_only: Optional[bool] = None,
    reduce_only: Optional[bool] = None,
    client_id: Optional[str] = None,
) -> Order:
    """
    Build ``PlaceOrderParams`` and forward to ``client.place_order``.

    Parameters
    ----------
    client : FTXClient
        Authenticated API client.
    market, side, order_type, size, price
        Already-validated trading parameters.

    Returns
    -------
    Order
        The order as accepted by the exchange.
    """
    params = PlaceOrderParams(
        market=market,
        side=side,
        price=float(price) if order_type is OrderType.LIMIT and price is not None else None,
        type=order_type,
        size=float(size),
        post_only=post_only,
        reduce_only=reduce_only,
        client_id=client_id,
    )

    logger.info(
        "Placing %s %s order: %s %s @ %s",
        side.value,
        order_type.value,
        size,
        market,
        price if price else "MARKET",
    )

    order = client.place_order(params)

    logger.info("Order placed  - id=%s status=%s", order.id, order.status)
    logger.debug("Full order response: %s", order)

    return order


def format_order_response(order: Order) -> str:
    """
    Return a human-friendly multi-line summary of an order.

    Extracts the most useful fields and formats them for CLI output.
    """
    lines = [
        "--- Order Response ---------------------------",
        f"  Order ID      : {order.id}",
        f"  Client ID     : {order.client_id or 'N/A'}",
        f"  Market        : {order.market}",
        f"  Side          : {order.side}",
        f"  Type          : {order.type}",
        f"  Status        : {order.status}",
        f"  Size          : {order.size}",
        f"  Filled Size   : {order.filled_size}",
        f"  Avg Price     : {order.avg_fill_price if order.avg_fill_price is not None else 'N/A'}",
        f"  Price         : {order.price if order.price is not None else 'N/A'}",
        "----------------------------------------------",
    ]
    return "\n".join(lines)
