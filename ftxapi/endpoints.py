"""
Declarative table of exchange endpoints.

Each ``Endpoint`` fixes the HTTP verb, the path template, whether the call
is signed and how the envelope's ``result`` is decoded.  Client methods
only supply the typed arguments.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from . import models as m
from .errors import ConstructionError
from .request import Method, Request

GET, POST, DELETE = Method.GET, Method.POST, Method.DELETE


@dataclass(frozen=True)
class Endpoint:
    method: Method
    path: str
    signed: bool = False
    decode: Callable[[Any], Any] = m.raw

    def describe(
        self,
        path: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
    ) -> Request:
        """Fill the path template and return the request descriptor."""
        try:
            resolved = self.path.format(**(path or {}))
        except (KeyError, IndexError) as exc:
            raise ConstructionError(f"missing path argument {exc} for {self.path!r}") from exc
        return Request.create(self.method, resolved, params=params, body=body, signed=self.signed)


# ── subaccounts ────────────────────────────────────────────────────────────
GET_ALL_SUBACCOUNTS = Endpoint(GET, "subaccounts", True, m.list_of(m.Subaccount))
CREATE_SUBACCOUNT = Endpoint(POST, "subaccounts", True, m.one(m.Subaccount))
CHANGE_SUBACCOUNT_NAME = Endpoint(POST, "subaccounts/update_name", True, m.nothing)
DELETE_SUBACCOUNT = Endpoint(DELETE, "subaccounts", True, m.nothing)
TRANSFER_BETWEEN_SUBACCOUNTS = Endpoint(POST, "subaccounts/transfer", True, m.one(m.Transfer))

# ── markets ────────────────────────────────────────────────────────────────
GET_MARKETS = Endpoint(GET, "markets", False, m.list_of(m.Market))
GET_MARKET = Endpoint(GET, "markets/{market_name}", False, m.one(m.Market))
GET_ORDERBOOK = Endpoint(GET, "markets/{market_name}/orderbook", False, m.one(m.Orderbook))
GET_TRADES = Endpoint(GET, "markets/{market_name}/trades", False, m.list_of(m.Trade))
GET_HISTORICAL_PRICES = Endpoint(GET, "markets/{market_name}/candles", False, m.list_of(m.Candle))

# ── futures ────────────────────────────────────────────────────────────────
LIST_FUTURES = Endpoint(GET, "futures", False, m.list_of(m.Future))
GET_FUTURE = Endpoint(GET, "futures/{future_name}", False, m.one(m.Future))
GET_FUTURE_STATS = Endpoint(GET, "futures/{future_name}/stats", False, m.one(m.FutureStats))
GET_FUNDING_RATES = Endpoint(GET, "funding_rates", False, m.list_of(m.FundingRate))
GET_INDEX_WEIGHTS = Endpoint(GET, "indexes/{index_name}/weights", False, m.raw)
GET_EXPIRED_FUTURES = Endpoint(GET, "expired_futures", False, m.list_of(m.Future))
GET_HISTORICAL_INDEX = Endpoint(GET, "indexes/{market_name}/candles", False, m.list_of(m.Candle))

# ── account ────────────────────────────────────────────────────────────────
GET_ACCOUNT = Endpoint(GET, "account", True, m.one(m.Account))
GET_POSITIONS = Endpoint(GET, "positions", True, m.list_of(m.Position))
CHANGE_ACCOUNT_LEVERAGE = Endpoint(POST, "account/leverage", True, m.nothing)

# ── wallet ─────────────────────────────────────────────────────────────────
GET_COINS = Endpoint(GET, "wallet/coins", False, m.list_of(m.Coin))
GET_BALANCES = Endpoint(GET, "wallet/balances", True, m.list_of(m.Balance))
GET_ALL_BALANCES = Endpoint(GET, "wallet/all_balances", True, m.mapping_of_lists(m.Balance))
GET_DEPOSIT_ADDRESS = Endpoint(GET, "wallet/deposit_address/{coin}", True, m.one(m.DepositAddress))
GET_DEPOSIT_ADDRESS_LIST = Endpoint(
    POST, "wallet/deposit_address/list", True, m.list_of(m.DepositAddress)
)
GET_DEPOSIT_HISTORY = Endpoint(GET, "wallet/deposits", True, m.list_of(m.Deposit))
GET_WITHDRAWAL_HISTORY = Endpoint(GET, "wallet/withdrawals", True, m.list_of(m.Withdrawal))
WITHDRAW = Endpoint(POST, "wallet/withdrawals", True, m.one(m.Withdrawal))
GET_AIRDROPS = Endpoint(GET, "wallet/airdrops", True, m.list_of(m.Airdrop))
GET_WITHDRAWAL_FEES = Endpoint(GET, "wallet/withdrawal_fee", True, m.one(m.WithdrawalFee))
GET_SAVED_ADDRESSES = Endpoint(GET, "wallet/saved_addresses", True, m.list_of(m.SavedAddress))
CREATE_SAVED_ADDRESS = Endpoint(POST, "wallet/saved_addresses", True, m.one(m.SavedAddress))
DELETE_SAVED_ADDRESS = Endpoint(
    DELETE, "wallet/saved_addresses/{saved_address_id}", True, m.raw
)

# ── orders ─────────────────────────────────────────────────────────────────
GET_OPEN_ORDERS = Endpoint(GET, "orders", True, m.list_of(m.Order))
GET_ORDER_HISTORY = Endpoint(GET, "orders/history", True, m.list_of(m.Order))
GET_OPEN_TRIGGER_ORDERS = Endpoint(GET, "conditional_orders", True, m.list_of(m.TriggerOrder))
GET_TRIGGER_ORDER_HISTORY = Endpoint(
    GET, "conditional_orders/history", True, m.list_of(m.TriggerOrder)
)
PLACE_ORDER = Endpoint(POST, "orders", True, m.one(m.Order))
PLACE_TRIGGER_ORDER = Endpoint(POST, "conditional_orders", True, m.one(m.TriggerOrder))
MODIFY_ORDER = Endpoint(POST, "orders/{order_id}/modify", True, m.one(m.Order))
MODIFY_ORDER_BY_CLIENT_ID = Endpoint(
    POST, "orders/by_client_id/{client_order_id}/modify", True, m.one(m.Order)
)
MODIFY_TRIGGER_ORDER = Endpoint(
    POST, "conditional_orders/{order_id}/modify", True, m.one(m.TriggerOrder)
)
GET_ORDER_STATUS = Endpoint(GET, "orders/{order_id}", True, m.one(m.Order))
GET_ORDER_STATUS_BY_CLIENT_ID = Endpoint(
    GET, "orders/by_client_id/{client_order_id}", True, m.one(m.Order)
)
CANCEL_ORDER = Endpoint(DELETE, "orders/{order_id}", True, m.raw)
CANCEL_ORDER_BY_CLIENT_ID = Endpoint(DELETE, "orders/by_client_id/{client_order_id}", True, m.raw)
CANCEL_TRIGGER_ORDER = Endpoint(DELETE, "conditional_orders/{order_id}", True, m.raw)
CANCEL_ALL_ORDERS = Endpoint(DELETE, "orders", True, m.raw)
GET_FUNDING_PAYMENTS = Endpoint(GET, "funding_payments", True, m.list_of(m.FundingPayment))

# ── leveraged tokens ───────────────────────────────────────────────────────
LIST_LEVERAGED_TOKENS = Endpoint(GET, "lt/tokens", False, m.list_of(m.LeveragedToken))
GET_LEVERAGED_TOKEN_INFO = Endpoint(GET, "lt/{token_name}", False, m.one(m.LeveragedToken))
GET_LEVERAGED_TOKEN_BALANCES = Endpoint(
    GET, "lt/balances", True, m.list_of(m.LeveragedTokenBalance)
)
LIST_LEVERAGED_TOKEN_CREATION_REQUESTS = Endpoint(
    GET, "lt/creations", True, m.list_of(m.CreationRequest)
)
REQUEST_LEVERAGED_TOKEN_CREATION = Endpoint(
    POST, "lt/{token_name}/create", True, m.one(m.CreationRequest)
)
LIST_LEVERAGED_TOKEN_REDEMPTION_REQUESTS = Endpoint(
    GET, "lt/redemptions", True, m.list_of(m.RedemptionRequest)
)
REQUEST_LEVERAGED_TOKEN_REDEMPTION = Endpoint(
    POST, "lt/{token_name}/redeem", True, m.one(m.RedemptionRequest)
)
GET_ETF_REBALANCE_INFO = Endpoint(GET, "etfs/rebalance_info", False, m.raw)

# ── options ────────────────────────────────────────────────────────────────
LIST_QUOTE_REQUESTS = Endpoint(GET, "options/requests", False, m.list_of(m.QuoteRequest))
GET_MY_QUOTE_REQUESTS = Endpoint(GET, "options/my_requests", True, m.list_of(m.QuoteRequest))
CREATE_QUOTE_REQUEST = Endpoint(POST, "options/requests", True, m.one(m.QuoteRequest))
CANCEL_QUOTE_REQUEST = Endpoint(
    DELETE, "options/requests/{request_id}", True, m.one(m.QuoteRequest)
)
GET_QUOTES_FOR_QUOTE_REQUEST = Endpoint(
    GET, "options/requests/{request_id}/quotes", True, m.list_of(m.Quote)
)
CREATE_QUOTE = Endpoint(POST, "options/requests/{request_id}/quotes", True, m.one(m.Quote))
GET_MY_QUOTES = Endpoint(GET, "options/my_quotes", True, m.list_of(m.Quote))
CANCEL_QUOTE = Endpoint(DELETE, "options/quotes/{quote_id}", True, m.one(m.Quote))
ACCEPT_OPTIONS_QUOTE = Endpoint(POST, "options/quotes/{quote_id}/accept", True, m.one(m.Quote))
GET_OPTIONS_ACCOUNT_INFO = Endpoint(
    GET, "options/account_info", True, m.one(m.OptionsAccountInfo)
)
GET_PUBLIC_OPTIONS_TRADES = Endpoint(GET, "options/trades", False, m.list_of(m.OptionTrade))
GET_24H_OPTION_VOLUME = Endpoint(
    GET, "stats/24h_options_volume", False, m.list_of(m.OptionsVolume)
)
GET_HISTORICAL_24H_OPTION_VOLUME = Endpoint(
    GET, "options/historical_volumes/BTC", False, m.list_of(m.HistoricalOptionsVolume)
)
GET_OPTION_OPEN_INTEREST = Endpoint(GET, "options/open_interest/BTC", False, m.one(m.OpenInterest))
GET_HISTORICAL_OPEN_INTEREST = Endpoint(
    GET, "options/historical_open_interest/BTC", False, m.list_of(m.HistoricalOpenInterest)
)

# ── spot margin ────────────────────────────────────────────────────────────
GET_LENDING_HISTORY = Endpoint(GET, "spot_margin/history", False, m.list_of(m.SpotMarginHistory))
GET_BORROW_RATES = Endpoint(GET, "spot_margin/borrow_rates", True, m.list_of(m.RateEstimate))
GET_LENDING_RATES = Endpoint(GET, "spot_margin/lending_rates", False, m.list_of(m.RateEstimate))
GET_DAILY_BORROWED_AMOUNTS = Endpoint(
    GET, "spot_margin/borrow_summary", False, m.list_of(m.DailyBorrowedAmount)
)
GET_SPOT_MARGIN_MARKET_INFO = Endpoint(
    GET, "spot_margin/market_info", True, m.list_of(m.SpotMarginMarketInfo)
)
GET_MY_BORROW_HISTORY = Endpoint(
    GET, "spot_margin/borrow_history", True, m.list_of(m.SpotMarginHistory)
)
GET_MY_LENDING_HISTORY = Endpoint(
    GET, "spot_margin/lending_history", True, m.list_of(m.SpotMarginHistory)
)
GET_LENDING_OFFERS = Endpoint(GET, "spot_margin/offers", True, m.list_of(m.LendingOffer))
GET_LENDING_INFO = Endpoint(GET, "spot_margin/lending_info", True, m.list_of(m.LendingInfo))
SUBMIT_LENDING_OFFER = Endpoint(POST, "spot_margin/offers", True, m.nothing)

ALL = {
    name: value for name, value in globals().items() if isinstance(value, Endpoint)
}
