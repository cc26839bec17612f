#!/usr/bin/env python3
"""
Command-line entry point for the FTX REST client.

Usage examples
--------------
List markets::

    python cli.py markets

Balances of a sub-account::

    python cli.py --subaccount trading balances

Limit order::

    python cli.py place --market BTC/USD --side buy --type limit --size 0.01 --price 20000

Cancel::

    python cli.py cancel 123456789
"""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from ftxapi.client import FTXClient
from ftxapi.config import ClientConfig
from ftxapi.errors import FTXError
from ftxapi.logging_config import setup_logging
from ftxapi.orders import format_order_response, place_order
from ftxapi.validators import validate_all, validate_market

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))

# ── Argument parser ────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query and trade on the FTX REST API.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  python cli.py markets\n"
            "  python cli.py place --market BTC-PERP --side sell --type market --size 0.01\n"
        ),
    )
    parser.add_argument("--subaccount", default=None, help="Scope calls to this sub-account")
    parser.add_argument("--base-url", default=None, help="Override the REST base URL")

    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("markets", help="List markets")
    sub.add_parser("balances", help="Show wallet balances")

    orders = sub.add_parser("orders", help="List open orders")
    orders.add_argument("--market", default=None, help="Only orders in this market")

    place = sub.add_parser("place", help="Place an order")
    place.add_argument("--market", required=True, help="Market (e.g. BTC/USD, BTC-PERP)")
    place.add_argument("--side", required=True, choices=["buy", "sell", "BUY", "SELL"])
    place.add_argument(
        "--type", required=True, dest="order_type", choices=["limit", "market", "LIMIT", "MARKET"]
    )
    place.add_argument("--size", required=True, help="Order size")
    place.add_argument("--price", default=None, help="Limit price (required for limit orders)")
    place.add_argument("--post-only", action="store_true", default=None)
    place.add_argument("--reduce-only", action="store_true", default=None)
    place.add_argument("--client-id", default=None)

    cancel = sub.add_parser("cancel", help="Cancel an order by id")
    cancel.add_argument("order_id", type=int)

    return parser


# ── Commands ───────────────────────────────────────────────────────────────


def _cmd_markets(client: FTXClient, args: argparse.Namespace) -> None:
    for market in client.get_markets():
        print(f"  {market.name!s:<20} {market.type or '':<8} last={market.last}")


def _cmd_balances(client: FTXClient, args: argparse.Namespace) -> None:
    for balance in client.get_balances():
        print(f"  {balance.coin!s:<8} free={balance.free!s:<16} total={balance.total!s:<16} usd={balance.usd_value}")


def _cmd_orders(client: FTXClient, args: argparse.Namespace) -> None:
    market = validate_market(args.market) if args.market else None
    for order in client.get_open_orders(market):
        print(f"  {order.id!s:<14} {order.market!s:<14} {order.side!s:<5} {order.size} @ {order.price} [{order.status}]")


def _cmd_place(client: FTXClient, args: argparse.Namespace) -> None:
    params = validate_all(
        market=args.market,
        side=args.side,
        order_type=args.order_type,
        size=args.size,
        price=args.price,
    )

    print()
    print("--- Order Request Summary --------------------")
    print(f"  Market   : {params['market']}")
    print(f"  Side     : {params['side'].value}")
    print(f"  Type     : {params['order_type'].value}")
    print(f"  Size     : {params['size']}")
    if params["price"] is not None:
        print(f"  Price    : {params['price']}")
    print("----------------------------------------------")
    print()

    order = place_order(
        client=client,
        market=params["market"],
        side=params["side"],
        order_type=params["order_type"],
        size=params["size"],
        price=params["price"],
        post_only=args.post_only,
        reduce_only=args.reduce_only,
        client_id=args.client_id,
    )
    print(format_order_response(order))
    print("Order placed successfully!\n")


def _cmd_cancel(client: FTXClient, args: argparse.Namespace) -> None:
    print(client.cancel_order(args.order_id))


COMMANDS = {
    "markets": (_cmd_markets, False),
    "balances": (_cmd_balances, True),
    "orders": (_cmd_orders, True),
    "place": (_cmd_place, True),
    "cancel": (_cmd_cancel, True),
}


# ── Main ───────────────────────────────────────────────────────────────────


def main(argv: Optional[List[str]] = None) -> int:
    # Load .env for API keys
    load_dotenv(os.path.join(SCRIPT_DIR, ".env"))

    logger = setup_logging()
    args = build_parser().parse_args(argv)
    handler, needs_auth = COMMANDS[args.command]

    # --- Read configuration -------------------------------------------------
    try:
        config = ClientConfig.from_env()
    except ValueError as exc:
        logger.error("Configuration error: %s", exc)
        return 1

    overrides = {}
    if args.subaccount is not None:
        overrides["subaccount"] = args.subaccount
    if args.base_url is not None:
        overrides["base_url"] = args.base_url
    if overrides:
        config = dataclasses.replace(config, **overrides)

    if needs_auth and not config.has_credentials:
        logger.error(
            "Missing API credentials. Set FTX_API_KEY and FTX_API_SECRET "
            "in a .env file or as environment variables."
        )
        return 1

    # --- Run command --------------------------------------------------------
    with FTXClient(config) as client:
        try:
            handler(client, args)
        except ValueError as exc:
            logger.error("Validation error: %s", exc)
            return 1
        except FTXError as exc:
            logger.error("FTX API error: %s", exc)
            print(f"\nFAILED - {exc}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
