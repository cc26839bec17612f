"""
FTX REST client.

Composes the request pipeline (descriptor -> builder -> dispatcher) and
exposes one typed method per exchange endpoint.  All public methods return
decoded models or raise a subclass of ``ftxapi.errors.FTXError``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from . import endpoints as ep
from . import models as m
from .builder import build_request
from .config import ClientConfig, make_session
from .dispatcher import Dispatcher
from .endpoints import Endpoint
from .errors import DecodeError, EnvelopeError
from .request import Request

logger = logging.getLogger("ftxapi")

Timestamp = Union[int, float, datetime]


def unwrap_envelope(body: bytes) -> Any:
    """
    Return the ``result`` of a ``{success, error, result}`` envelope.

    Raises
    ------
    DecodeError
        If *body* is not a JSON object.
    EnvelopeError
        Unless the envelope reports ``success: true``.
    """
    try:
        envelope = json.loads(body)
    except ValueError as exc:
        raise DecodeError(f"invalid JSON in response: {exc}") from exc
    if not isinstance(envelope, dict):
        raise DecodeError(f"expected a JSON object, got {type(envelope).__name__}")
    if envelope.get("success") is not True:
        message = envelope.get("error")
        raise EnvelopeError(message if isinstance(message, str) else "")
    return envelope.get("result")


class FTXClient:
    """Synchronous client for the FTX REST API."""

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self._owns_session = self.config.session is None
        session = self.config.session or make_session()
        self._dispatcher = Dispatcher(
            session,
            timeout=self.config.timeout,
            logger=self.config.logger or logger,
        )

    @classmethod
    def from_env(cls) -> "FTXClient":
        """Build a client from ``FTX_*`` environment variables."""
        return cls(ClientConfig.from_env())

    def with_subaccount(self, subaccount: Optional[str]) -> "FTXClient":
        """Return a client scoped to *subaccount* that shares this client's session."""
        config = dataclasses.replace(
            self.config, subaccount=subaccount, session=self._dispatcher.session
        )
        return FTXClient(config)

    @property
    def subaccount(self) -> Optional[str]:
        return self.config.subaccount

    # ── context-manager support ────────────────────────────────────────

    def __enter__(self) -> "FTXClient":
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP session if this client created it."""
        if self._owns_session:
            self._dispatcher.session.close()

    # ── request pipeline ───────────────────────────────────────────────

    def execute(
        self,
        descriptor: Request,
        decode: Callable[[Any], Any] = m.raw,
        timeout: Optional[float] = None,
    ) -> Any:
        """
        Build, sign, send and decode *descriptor*.

        Parameters
        ----------
        descriptor : Request
            The call to perform.
        decode : callable
            Applied to the envelope's ``result``.
        timeout : float, optional
            Overrides the configured network timeout for this call.
        """
        prepared = build_request(self.config, descriptor)
        body = self._dispatcher.dispatch(prepared, timeout=timeout)
        result = unwrap_envelope(body)
        try:
            return decode(result)
        except ValidationError as exc:
            raise DecodeError(f"unexpected result shape for {descriptor.path}: {exc}") from exc

    def call(
        self,
        endpoint: Endpoint,
        path: Optional[Mapping[str, Any]] = None,
        params: Optional[Mapping[str, Any]] = None,
        body: Any = None,
        timeout: Optional[float] = None,
    ) -> Any:
        """Invoke a table *endpoint* with the given path, query and body arguments."""
        descriptor = endpoint.describe(path=path, params=params, body=body)
        return self.execute(descriptor, endpoint.decode, timeout=timeout)

    # ── subaccounts ────────────────────────────────────────────────────

    def get_all_subaccounts(self) -> List[m.Subaccount]:
        """List subaccounts (``GET /subaccounts``)."""
        return self.call(ep.GET_ALL_SUBACCOUNTS)

    def create_subaccount(self, nickname: str) -> m.Subaccount:
        """Create a subaccount (``POST /subaccounts``)."""
        return self.call(ep.CREATE_SUBACCOUNT, body={"nickname": nickname})

    def change_subaccount_name(self, nickname: str, new_nickname: str) -> None:
        """Rename a subaccount (``POST /subaccounts/update_name``)."""
        self.call(
            ep.CHANGE_SUBACCOUNT_NAME,
            body={"nickname": nickname, "newNickname": new_nickname},
        )

    def delete_subaccount(self, nickname: str) -> None:
        """Delete a subaccount (``DELETE /subaccounts``)."""
        self.call(ep.DELETE_SUBACCOUNT, body={"nickname": nickname})

    def transfer_between_subaccounts(
        self, coin: str, size: float, source: Optional[str], destination: Optional[str]
    ) -> m.Transfer:
        """
        Move funds between subaccounts (``POST /subaccounts/transfer``).

        ``None`` as *source* or *destination* means the main account.
        """
        return self.call(
            ep.TRANSFER_BETWEEN_SUBACCOUNTS,
            body={"coin": coin, "size": size, "source": source, "destination": destination},
        )

    # ── markets ────────────────────────────────────────────────────────

    def get_markets(self) -> List[m.Market]:
        """List all markets (``GET /markets``)."""
        return self.call(ep.GET_MARKETS)

    def get_market(self, market_name: str) -> m.Market:
        """Get a single market (``GET /markets/{market_name}``)."""
        return self.call(ep.GET_MARKET, path={"market_name": market_name})

    def get_orderbook(self, market_name: str, depth: Optional[int] = None) -> m.Orderbook:
        """Get the order book (``GET /markets/{market_name}/orderbook``)."""
        return self.call(
            ep.GET_ORDERBOOK, path={"market_name": market_name}, params={"depth": depth}
        )

    def get_trades(
        self,
        market_name: str,
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
    ) -> List[m.Trade]:
        """Get recent trades (``GET /markets/{market_name}/trades``)."""
        return self.call(
            ep.GET_TRADES,
            path={"market_name": market_name},
            params={"start_time": start_time, "end_time": end_time},
        )

    def get_historical_prices(
        self,
        market_name: str,
        resolution: int,
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
    ) -> List[m.Candle]:
        """Get candles; *resolution* is in seconds (``GET /markets/{market_name}/candles``)."""
        return self.call(
            ep.GET_HISTORICAL_PRICES,
            path={"market_name": market_name},
            params={"resolution": resolution, "start_time": start_time, "end_time": end_time},
        )

    # ── futures ────────────────────────────────────────────────────────

    def list_futures(self) -> List[m.Future]:
        """List all futures (``GET /futures``)."""
        return self.call(ep.LIST_FUTURES)

    def get_future(self, future_name: str) -> m.Future:
        """Get a single future (``GET /futures/{future_name}``)."""
        return self.call(ep.GET_FUTURE, path={"future_name": future_name})

    def get_future_stats(self, future_name: str) -> m.FutureStats:
        """Get future stats (``GET /futures/{future_name}/stats``)."""
        return self.call(ep.GET_FUTURE_STATS, path={"future_name": future_name})

    def get_funding_rates(
        self,
        future: Optional[str] = None,
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
    ) -> List[m.FundingRate]:
        """Get funding rates (``GET /funding_rates``)."""
        return self.call(
            ep.GET_FUNDING_RATES,
            params={"future": future, "start_time": start_time, "end_time": end_time},
        )

    def get_index_weights(self, index_name: str) -> Dict[str, float]:
        """Get index constituent weights (``GET /indexes/{index_name}/weights``)."""
        return self.call(ep.GET_INDEX_WEIGHTS, path={"index_name": index_name})

    def get_expired_futures(self) -> List[m.Future]:
        """List expired futures (``GET /expired_futures``)."""
        return self.call(ep.GET_EXPIRED_FUTURES)

    def get_historical_index(
        self,
        market_name: str,
        resolution: int,
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
    ) -> List[m.Candle]:
        """Get index candles (``GET /indexes/{market_name}/candles``)."""
        return self.call(
            ep.GET_HISTORICAL_INDEX,
            path={"market_name": market_name},
            params={"resolution": resolution, "start_time": start_time, "end_time": end_time},
        )

    # ── account ────────────────────────────────────────────────────────

    def get_account(self) -> m.Account:
        """Fetch account information (``GET /account``)."""
        return self.call(ep.GET_ACCOUNT)

    def get_positions(self, show_avg_price: Optional[bool] = None) -> List[m.Position]:
        """Fetch open positions (``GET /positions``)."""
        return self.call(ep.GET_POSITIONS, params={"showAvgPrice": show_avg_price})

    def change_account_leverage(self, leverage: int) -> None:
        """Change maximum account leverage (``POST /account/leverage``)."""
        self.call(ep.CHANGE_ACCOUNT_LEVERAGE, body={"leverage": leverage})

    # ── wallet ─────────────────────────────────────────────────────────

    def get_coins(self) -> List[m.Coin]:
        """List coins (``GET /wallet/coins``)."""
        return self.call(ep.GET_COINS)

    def get_balances(self) -> List[m.Balance]:
        """Balances of the current (sub)account (``GET /wallet/balances``)."""
        return self.call(ep.GET_BALANCES)

    def get_all_balances(self) -> Dict[str, List[m.Balance]]:
        """Balances of every account keyed by nickname (``GET /wallet/all_balances``)."""
        return self.call(ep.GET_ALL_BALANCES)

    def get_deposit_address(self, coin: str, method: Optional[str] = None) -> m.DepositAddress:
        """Get a deposit address (``GET /wallet/deposit_address/{coin}``)."""
        return self.call(ep.GET_DEPOSIT_ADDRESS, path={"coin": coin}, params={"method": method})

    def get_deposit_address_list(
        self, coins: List[Dict[str, str]]
    ) -> List[m.DepositAddress]:
        """
        Get several deposit addresses (``POST /wallet/deposit_address/list``).

        *coins* is a list of ``{"coin": ..., "method": ...}`` entries.
        """
        return self.call(ep.GET_DEPOSIT_ADDRESS_LIST, body=coins)

    def get_deposit_history(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.Deposit]:
        """Deposit history (``GET /wallet/deposits``)."""
        return self.call(
            ep.GET_DEPOSIT_HISTORY, params={"start_time": start_time, "end_time": end_time}
        )

    def get_withdrawal_history(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.Withdrawal]:
        """Withdrawal history (``GET /wallet/withdrawals``)."""
        return self.call(
            ep.GET_WITHDRAWAL_HISTORY, params={"start_time": start_time, "end_time": end_time}
        )

    def withdraw(self, params: m.WithdrawParams) -> m.Withdrawal:
        """Request a withdrawal (``POST /wallet/withdrawals``)."""
        return self.call(ep.WITHDRAW, body=params.to_payload())

    def get_airdrops(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.Airdrop]:
        """Airdrop history (``GET /wallet/airdrops``)."""
        return self.call(
            ep.GET_AIRDROPS, params={"start_time": start_time, "end_time": end_time}
        )

    def get_withdrawal_fees(
        self, coin: str, size: float, address: str, tag: Optional[str] = None
    ) -> m.WithdrawalFee:
        """Estimate a withdrawal fee (``GET /wallet/withdrawal_fee``)."""
        return self.call(
            ep.GET_WITHDRAWAL_FEES,
            params={"coin": coin, "size": size, "address": address, "tag": tag},
        )

    def get_saved_addresses(self, coin: Optional[str] = None) -> List[m.SavedAddress]:
        """List saved withdrawal addresses (``GET /wallet/saved_addresses``)."""
        return self.call(ep.GET_SAVED_ADDRESSES, params={"coin": coin})

    def create_saved_address(
        self,
        coin: str,
        address: str,
        address_name: str,
        is_prime_trust: Optional[bool] = None,
        tag: Optional[str] = None,
    ) -> m.SavedAddress:
        """Save a withdrawal address (``POST /wallet/saved_addresses``)."""
        body = {"coin": coin, "address": address, "addressName": address_name}
        if is_prime_trust is not None:
            body["isPrimeTrust"] = is_prime_trust
        if tag is not None:
            body["tag"] = tag
        return self.call(ep.CREATE_SAVED_ADDRESS, body=body)

    def delete_saved_address(self, saved_address_id: int) -> Any:
        """Delete a saved address (``DELETE /wallet/saved_addresses/{id}``)."""
        return self.call(ep.DELETE_SAVED_ADDRESS, path={"saved_address_id": saved_address_id})

    # ── orders ─────────────────────────────────────────────────────────

    def get_open_orders(self, market: Optional[str] = None) -> List[m.Order]:
        """Get open orders, optionally for one market (``GET /orders``)."""
        return self.call(ep.GET_OPEN_ORDERS, params={"market": market})

    def get_order_history(
        self,
        market: Optional[str] = None,
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
    ) -> List[m.Order]:
        """Get closed orders (``GET /orders/history``)."""
        return self.call(
            ep.GET_ORDER_HISTORY,
            params={"market": market, "start_time": start_time, "end_time": end_time},
        )

    def get_open_trigger_orders(
        self, market: Optional[str] = None, type: Optional[m.TriggerOrderType] = None
    ) -> List[m.TriggerOrder]:
        """Get open trigger orders (``GET /conditional_orders``)."""
        return self.call(
            ep.GET_OPEN_TRIGGER_ORDERS,
            params={"market": market, "type": type.value if type else None},
        )

    def get_trigger_order_history(
        self,
        market: Optional[str] = None,
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
        side: Optional[m.Side] = None,
        type: Optional[m.TriggerOrderType] = None,
        order_type: Optional[m.OrderType] = None,
    ) -> List[m.TriggerOrder]:
        """Get trigger order history (``GET /conditional_orders/history``)."""
        return self.call(
            ep.GET_TRIGGER_ORDER_HISTORY,
            params={
                "market": market,
                "start_time": start_time,
                "end_time": end_time,
                "side": side.value if side else None,
                "type": type.value if type else None,
                "orderType": order_type.value if order_type else None,
            },
        )

    def place_order(self, params: m.PlaceOrderParams) -> m.Order:
        """Place a new order (``POST /orders``)."""
        return self.call(ep.PLACE_ORDER, body=params.to_payload())

    def place_trigger_order(self, params: m.PlaceTriggerOrderParams) -> m.TriggerOrder:
        """Place a stop, trailing-stop or take-profit order (``POST /conditional_orders``)."""
        return self.call(ep.PLACE_TRIGGER_ORDER, body=params.to_payload())

    def modify_order(self, order_id: int, params: m.ModifyOrderParams) -> m.Order:
        """Modify an order (``POST /orders/{order_id}/modify``)."""
        return self.call(ep.MODIFY_ORDER, path={"order_id": order_id}, body=params.to_payload())

    def modify_order_by_client_id(
        self, client_order_id: str, params: m.ModifyOrderParams
    ) -> m.Order:
        """Modify an order by client id (``POST /orders/by_client_id/{id}/modify``)."""
        return self.call(
            ep.MODIFY_ORDER_BY_CLIENT_ID,
            path={"client_order_id": client_order_id},
            body=params.to_payload(),
        )

    def modify_trigger_order(
        self, order_id: int, params: m.ModifyTriggerOrderParams
    ) -> m.TriggerOrder:
        """Modify a trigger order (``POST /conditional_orders/{order_id}/modify``)."""
        return self.call(
            ep.MODIFY_TRIGGER_ORDER, path={"order_id": order_id}, body=params.to_payload()
        )

    def get_order_status(self, order_id: int) -> m.Order:
        """Get an order (``GET /orders/{order_id}``)."""
        return self.call(ep.GET_ORDER_STATUS, path={"order_id": order_id})

    def get_order_status_by_client_id(self, client_order_id: str) -> m.Order:
        """Get an order by client id (``GET /orders/by_client_id/{id}``)."""
        return self.call(
            ep.GET_ORDER_STATUS_BY_CLIENT_ID, path={"client_order_id": client_order_id}
        )

    def cancel_order(self, order_id: int) -> str:
        """Cancel an open order (``DELETE /orders/{order_id}``)."""
        return self.call(ep.CANCEL_ORDER, path={"order_id": order_id})

    def cancel_order_by_client_id(self, client_order_id: str) -> str:
        """Cancel an open order by client id (``DELETE /orders/by_client_id/{id}``)."""
        return self.call(ep.CANCEL_ORDER_BY_CLIENT_ID, path={"client_order_id": client_order_id})

    def cancel_trigger_order(self, order_id: int) -> str:
        """Cancel a trigger order (``DELETE /conditional_orders/{order_id}``)."""
        return self.call(ep.CANCEL_TRIGGER_ORDER, path={"order_id": order_id})

    def cancel_all_orders(
        self,
        market: Optional[str] = None,
        conditional_orders_only: Optional[bool] = None,
        limit_orders_only: Optional[bool] = None,
    ) -> str:
        """Cancel all orders, optionally narrowed down (``DELETE /orders``)."""
        body = {}
        if market is not None:
            body["market"] = market
        if conditional_orders_only is not None:
            body["conditionalOrdersOnly"] = conditional_orders_only
        if limit_orders_only is not None:
            body["limitOrdersOnly"] = limit_orders_only
        return self.call(ep.CANCEL_ALL_ORDERS, body=body or None)

    def get_funding_payments(
        self,
        future: Optional[str] = None,
        start_time: Optional[Timestamp] = None,
        end_time: Optional[Timestamp] = None,
    ) -> List[m.FundingPayment]:
        """Funding payments received or paid (``GET /funding_payments``)."""
        return self.call(
            ep.GET_FUNDING_PAYMENTS,
            params={"future": future, "start_time": start_time, "end_time": end_time},
        )

    # ── leveraged tokens ───────────────────────────────────────────────

    def list_leveraged_tokens(self) -> List[m.LeveragedToken]:
        """List leveraged tokens (``GET /lt/tokens``)."""
        return self.call(ep.LIST_LEVERAGED_TOKENS)

    def get_leveraged_token_info(self, token_name: str) -> m.LeveragedToken:
        """Get one leveraged token (``GET /lt/{token_name}``)."""
        return self.call(ep.GET_LEVERAGED_TOKEN_INFO, path={"token_name": token_name})

    def get_leveraged_token_balances(self) -> List[m.LeveragedTokenBalance]:
        """Leveraged token balances (``GET /lt/balances``)."""
        return self.call(ep.GET_LEVERAGED_TOKEN_BALANCES)

    def list_leveraged_token_creation_requests(self) -> List[m.CreationRequest]:
        """Leveraged token creation requests (``GET /lt/creations``)."""
        return self.call(ep.LIST_LEVERAGED_TOKEN_CREATION_REQUESTS)

    def request_leveraged_token_creation(self, token_name: str, size: float) -> m.CreationRequest:
        """Request creation of *size* tokens (``POST /lt/{token_name}/create``)."""
        return self.call(
            ep.REQUEST_LEVERAGED_TOKEN_CREATION,
            path={"token_name": token_name},
            body={"size": size},
        )

    def list_leveraged_token_redemption_requests(self) -> List[m.RedemptionRequest]:
        """Leveraged token redemption requests (``GET /lt/redemptions``)."""
        return self.call(ep.LIST_LEVERAGED_TOKEN_REDEMPTION_REQUESTS)

    def request_leveraged_token_redemption(
        self, token_name: str, size: float
    ) -> m.RedemptionRequest:
        """Request redemption of *size* tokens (``POST /lt/{token_name}/redeem``)."""
        return self.call(
            ep.REQUEST_LEVERAGED_TOKEN_REDEMPTION,
            path={"token_name": token_name},
            body={"size": size},
        )

    def get_etf_rebalance_info(self) -> Dict[str, Any]:
        """Pending ETF rebalances (``GET /etfs/rebalance_info``)."""
        return self.call(ep.GET_ETF_REBALANCE_INFO)

    # ── options ────────────────────────────────────────────────────────

    def list_quote_requests(self) -> List[m.QuoteRequest]:
        """Public quote requests (``GET /options/requests``)."""
        return self.call(ep.LIST_QUOTE_REQUESTS)

    def get_my_quote_requests(self) -> List[m.QuoteRequest]:
        """Quote requests of this account (``GET /options/my_requests``)."""
        return self.call(ep.GET_MY_QUOTE_REQUESTS)

    def create_quote_request(self, params: m.CreateQuoteRequestParams) -> m.QuoteRequest:
        """Create an options quote request (``POST /options/requests``)."""
        return self.call(ep.CREATE_QUOTE_REQUEST, body=params.to_payload())

    def cancel_quote_request(self, request_id: int) -> m.QuoteRequest:
        """Cancel a quote request (``DELETE /options/requests/{request_id}``)."""
        return self.call(ep.CANCEL_QUOTE_REQUEST, path={"request_id": request_id})

    def get_quotes_for_quote_request(self, request_id: int) -> List[m.Quote]:
        """Quotes received for a request (``GET /options/requests/{request_id}/quotes``)."""
        return self.call(ep.GET_QUOTES_FOR_QUOTE_REQUEST, path={"request_id": request_id})

    def create_quote(self, request_id: int, price: float) -> m.Quote:
        """Quote on a request (``POST /options/requests/{request_id}/quotes``)."""
        return self.call(ep.CREATE_QUOTE, path={"request_id": request_id}, body={"price": price})

    def get_my_quotes(self) -> List[m.Quote]:
        """Quotes made by this account (``GET /options/my_quotes``)."""
        return self.call(ep.GET_MY_QUOTES)

    def cancel_quote(self, quote_id: int) -> m.Quote:
        """Cancel a quote (``DELETE /options/quotes/{quote_id}``)."""
        return self.call(ep.CANCEL_QUOTE, path={"quote_id": quote_id})

    def accept_options_quote(self, quote_id: int) -> m.Quote:
        """Accept a quote (``POST /options/quotes/{quote_id}/accept``)."""
        return self.call(ep.ACCEPT_OPTIONS_QUOTE, path={"quote_id": quote_id})

    def get_options_account_info(self) -> m.OptionsAccountInfo:
        """Options account state (``GET /options/account_info``)."""
        return self.call(ep.GET_OPTIONS_ACCOUNT_INFO)

    def get_public_options_trades(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.OptionTrade]:
        """Public options trades (``GET /options/trades``)."""
        return self.call(
            ep.GET_PUBLIC_OPTIONS_TRADES, params={"start_time": start_time, "end_time": end_time}
        )

    def get_24h_option_volume(self) -> List[m.OptionsVolume]:
        """Options volume over the last 24 hours (``GET /stats/24h_options_volume``)."""
        return self.call(ep.GET_24H_OPTION_VOLUME)

    def get_historical_24h_option_volume(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.HistoricalOptionsVolume]:
        """Historical BTC options volume (``GET /options/historical_volumes/BTC``)."""
        return self.call(
            ep.GET_HISTORICAL_24H_OPTION_VOLUME,
            params={"start_time": start_time, "end_time": end_time},
        )

    def get_option_open_interest(self) -> m.OpenInterest:
        """BTC options open interest (``GET /options/open_interest/BTC``)."""
        return self.call(ep.GET_OPTION_OPEN_INTEREST)

    def get_historical_open_interest(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.HistoricalOpenInterest]:
        """Historical BTC options open interest (``GET /options/historical_open_interest/BTC``)."""
        return self.call(
            ep.GET_HISTORICAL_OPEN_INTEREST,
            params={"start_time": start_time, "end_time": end_time},
        )

    # ── spot margin ────────────────────────────────────────────────────

    def get_lending_history(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.SpotMarginHistory]:
        """Public lending rate history (``GET /spot_margin/history``)."""
        return self.call(
            ep.GET_LENDING_HISTORY, params={"start_time": start_time, "end_time": end_time}
        )

    def get_borrow_rates(self) -> List[m.RateEstimate]:
        """Borrow rate estimates (``GET /spot_margin/borrow_rates``)."""
        return self.call(ep.GET_BORROW_RATES)

    def get_lending_rates(self) -> List[m.RateEstimate]:
        """Lending rate estimates (``GET /spot_margin/lending_rates``)."""
        return self.call(ep.GET_LENDING_RATES)

    def get_daily_borrowed_amounts(self) -> List[m.DailyBorrowedAmount]:
        """Total borrowed per coin for the day (``GET /spot_margin/borrow_summary``)."""
        return self.call(ep.GET_DAILY_BORROWED_AMOUNTS)

    def get_spot_margin_market_info(self, market: str) -> List[m.SpotMarginMarketInfo]:
        """Borrow and lending state for both coins of *market* (``GET /spot_margin/market_info``)."""
        return self.call(ep.GET_SPOT_MARGIN_MARKET_INFO, params={"market": market})

    def get_my_borrow_history(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.SpotMarginHistory]:
        """Borrowing history of this account (``GET /spot_margin/borrow_history``)."""
        return self.call(
            ep.GET_MY_BORROW_HISTORY, params={"start_time": start_time, "end_time": end_time}
        )

    def get_my_lending_history(
        self, start_time: Optional[Timestamp] = None, end_time: Optional[Timestamp] = None
    ) -> List[m.SpotMarginHistory]:
        """Lending history of this account (``GET /spot_margin/lending_history``)."""
        return self.call(
            ep.GET_MY_LENDING_HISTORY, params={"start_time": start_time, "end_time": end_time}
        )

    def get_lending_offers(self) -> List[m.LendingOffer]:
        """Open lending offers (``GET /spot_margin/offers``)."""
        return self.call(ep.GET_LENDING_OFFERS)

    def get_lending_info(self) -> List[m.LendingInfo]:
        """Lendable amounts per coin (``GET /spot_margin/lending_info``)."""
        return self.call(ep.GET_LENDING_INFO)

    def submit_lending_offer(self, coin: str, size: float, rate: float) -> None:
        """Offer *size* of *coin* for lending at hourly *rate* (``POST /spot_margin/offers``)."""
        self.call(ep.SUBMIT_LENDING_OFFER, body={"coin": coin, "size": size, "rate": rate})
