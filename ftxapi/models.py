"""
Typed shapes for exchange results and request arguments.

Result models are frozen pydantic models validated from the camelCase JSON
the exchange returns.  Every field is optional because the exchange omits
fields freely between endpoints and account types; keys that a model does
not declare are ignored.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, TypeAdapter

M = TypeVar("M", bound="Model")


def camelize(name: str) -> str:
    """``volume_usd24h`` -> ``volumeUsd24h``; digits never start a new word."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


class Model(BaseModel):
    """Base for result models: camelCase aliases, immutable, unknown keys ignored."""

    model_config = ConfigDict(alias_generator=camelize, populate_by_name=True, frozen=True)


# ── enumerations ───────────────────────────────────────────────────────────


class Side(str, Enum):
    BUY = "buy"
    SELL = "sell"


class OrderType(str, Enum):
    LIMIT = "limit"
    MARKET = "market"


class TriggerOrderType(str, Enum):
    STOP = "stop"
    TRAILING_STOP = "trailingStop"
    TAKE_PROFIT = "takeProfit"


class OptionType(str, Enum):
    CALL = "call"
    PUT = "put"


# ── subaccounts ────────────────────────────────────────────────────────────


class Subaccount(Model):
    nickname: Optional[str] = None
    deletable: Optional[bool] = None
    editable: Optional[bool] = None
    competition: Optional[bool] = None
    special: Optional[bool] = None


class Transfer(Model):
    id: Optional[int] = None
    coin: Optional[str] = None
    size: Optional[float] = None
    time: Optional[datetime] = None
    notes: Optional[str] = None
    status: Optional[str] = None


# ── markets ────────────────────────────────────────────────────────────────


class Market(Model):
    name: Optional[str] = None
    type: Optional[str] = None
    base_currency: Optional[str] = None
    quote_currency: Optional[str] = None
    underlying: Optional[str] = None
    enabled: Optional[bool] = None
    post_only: Optional[bool] = None
    restricted: Optional[bool] = None
    high_leverage_fee_exempt: Optional[bool] = None
    ask: Optional[float] = None
    bid: Optional[float] = None
    last: Optional[float] = None
    price: Optional[float] = None
    price_increment: Optional[float] = None
    size_increment: Optional[float] = None
    min_provide_size: Optional[float] = None
    change1h: Optional[float] = None
    change24h: Optional[float] = None
    change_bod: Optional[float] = None
    quote_volume24h: Optional[float] = None
    volume_usd24h: Optional[float] = None
    large_order_threshold: Optional[float] = None
    is_etf_market: Optional[bool] = None


class Orderbook(Model):
    """Bids and asks as ``[price, size]`` pairs, best first."""

    bids: Optional[List[List[float]]] = None
    asks: Optional[List[List[float]]] = None


class Trade(Model):
    id: Optional[int] = None
    liquidation: Optional[bool] = None
    price: Optional[float] = None
    side: Optional[str] = None
    size: Optional[float] = None
    time: Optional[datetime] = None


class Candle(Model):
    start_time: Optional[datetime] = None
    time: Optional[float] = None
    open: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    close: Optional[float] = None
    volume: Optional[float] = None


# ── futures ────────────────────────────────────────────────────────────────


class Future(Model):
    name: Optional[str] = None
    underlying: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    expiry: Optional[datetime] = None
    expiry_description: Optional[str] = None
    perpetual: Optional[bool] = None
    expired: Optional[bool] = None
    enabled: Optional[bool] = None
    post_only: Optional[bool] = None
    group: Optional[str] = None
    ask: Optional[float] = None
    bid: Optional[float] = None
    last: Optional[float] = None
    index: Optional[float] = None
    mark: Optional[float] = None
    lower_bound: Optional[float] = None
    upper_bound: Optional[float] = None
    imf_factor: Optional[float] = None
    price_increment: Optional[float] = None
    size_increment: Optional[float] = None
    position_limit_weight: Optional[float] = None
    change1h: Optional[float] = None
    change24h: Optional[float] = None
    change_bod: Optional[float] = None
    volume: Optional[float] = None
    volume_usd24h: Optional[float] = None
    open_interest: Optional[float] = None
    open_interest_usd: Optional[float] = None
    move_start: Optional[datetime] = None
    underlying_description: Optional[str] = None


class FutureStats(Model):
    volume: Optional[float] = None
    next_funding_rate: Optional[float] = None
    next_funding_time: Optional[datetime] = None
    expiration_price: Optional[float] = None
    predicted_expiration_price: Optional[float] = None
    strike_price: Optional[float] = None
    open_interest: Optional[float] = None


class FundingRate(Model):
    future: Optional[str] = None
    rate: Optional[float] = None
    time: Optional[datetime] = None


# ── account ────────────────────────────────────────────────────────────────


class Position(Model):
    future: Optional[str] = None
    side: Optional[str] = None
    size: Optional[float] = None
    net_size: Optional[float] = None
    open_size: Optional[float] = None
    cost: Optional[float] = None
    entry_price: Optional[float] = None
    estimated_liquidation_price: Optional[float] = None
    long_order_size: Optional[float] = None
    short_order_size: Optional[float] = None
    initial_margin_requirement: Optional[float] = None
    maintenance_margin_requirement: Optional[float] = None
    collateral_used: Optional[float] = None
    realized_pnl: Optional[float] = None
    unrealized_pnl: Optional[float] = None
    recent_pnl: Optional[float] = None
    recent_average_open_price: Optional[float] = None
    recent_break_even_price: Optional[float] = None
    cumulative_buy_size: Optional[float] = None
    cumulative_sell_size: Optional[float] = None


class Account(Model):
    username: Optional[str] = None
    account_identifier: Optional[int] = None
    backstop_provider: Optional[bool] = None
    liquidating: Optional[bool] = None
    collateral: Optional[float] = None
    free_collateral: Optional[float] = None
    total_account_value: Optional[float] = None
    total_position_size: Optional[float] = None
    initial_margin_requirement: Optional[float] = None
    maintenance_margin_requirement: Optional[float] = None
    margin_fraction: Optional[float] = None
    open_margin_fraction: Optional[float] = None
    leverage: Optional[float] = None
    maker_fee: Optional[float] = None
    taker_fee: Optional[float] = None
    spot_lending_enabled: Optional[bool] = None
    spot_margin_enabled: Optional[bool] = None
    use_ftt_collateral: Optional[bool] = None
    positions: Optional[List[Position]] = None


# ── wallet ─────────────────────────────────────────────────────────────────


class Coin(Model):
    id: Optional[str] = None
    name: Optional[str] = None
    can_deposit: Optional[bool] = None
    can_withdraw: Optional[bool] = None
    can_convert: Optional[bool] = None
    has_tag: Optional[bool] = None
    collateral: Optional[bool] = None
    collateral_weight: Optional[float] = None
    fiat: Optional[bool] = None
    is_token: Optional[bool] = None
    usd_fungible: Optional[bool] = None
    methods: Optional[List[str]] = None
    credit_to: Optional[str] = None
    bep2_asset: Optional[str] = None
    erc20_contract: Optional[str] = None
    trc20_contract: Optional[str] = None
    spl_mint: Optional[str] = None


class Balance(Model):
    coin: Optional[str] = None
    free: Optional[float] = None
    total: Optional[float] = None
    usd_value: Optional[float] = None
    spot_borrow: Optional[float] = None
    available_without_borrow: Optional[float] = None
    available_for_withdrawal: Optional[float] = None


class DepositAddress(Model):
    coin: Optional[str] = None
    address: Optional[str] = None
    tag: Optional[str] = None
    method: Optional[str] = None


class Deposit(Model):
    id: Optional[int] = None
    coin: Optional[str] = None
    size: Optional[float] = None
    fee: Optional[float] = None
    status: Optional[str] = None
    txid: Optional[str] = None
    confirmations: Optional[int] = None
    time: Optional[datetime] = None
    sent_time: Optional[datetime] = None
    confirmed_time: Optional[datetime] = None
    address: Optional[Dict[str, Any]] = None
    notes: Optional[str] = None


class Withdrawal(Model):
    id: Optional[int] = None
    coin: Optional[str] = None
    size: Optional[float] = None
    fee: Optional[float] = None
    address: Optional[str] = None
    tag: Optional[str] = None
    method: Optional[str] = None
    status: Optional[str] = None
    txid: Optional[str] = None
    time: Optional[datetime] = None
    notes: Optional[str] = None


class Airdrop(Model):
    id: Optional[int] = None
    coin: Optional[str] = None
    size: Optional[float] = None
    status: Optional[str] = None
    time: Optional[datetime] = None


class WithdrawalFee(Model):
    method: Optional[str] = None
    address: Optional[str] = None
    fee: Optional[float] = None
    congested: Optional[bool] = None


class SavedAddress(Model):
    id: Optional[int] = None
    name: Optional[str] = None
    coin: Optional[str] = None
    address: Optional[str] = None
    tag: Optional[str] = None
    fiat: Optional[bool] = None
    is_prime_trust: Optional[bool] = None
    whitelisted: Optional[bool] = None
    whitelisted_after: Optional[datetime] = None
    last_used_at: Optional[datetime] = None


# ── orders ─────────────────────────────────────────────────────────────────


class Order(Model):
    id: Optional[int] = None
    client_id: Optional[str] = None
    market: Optional[str] = None
    future: Optional[str] = None
    type: Optional[str] = None
    side: Optional[str] = None
    price: Optional[float] = None
    size: Optional[float] = None
    status: Optional[str] = None
    filled_size: Optional[float] = None
    remaining_size: Optional[float] = None
    avg_fill_price: Optional[float] = None
    reduce_only: Optional[bool] = None
    ioc: Optional[bool] = None
    post_only: Optional[bool] = None
    liquidation: Optional[bool] = None
    created_at: Optional[datetime] = None


class TriggerOrder(Model):
    id: Optional[int] = None
    order_id: Optional[int] = None
    market: Optional[str] = None
    future: Optional[str] = None
    type: Optional[str] = None
    order_type: Optional[str] = None
    side: Optional[str] = None
    size: Optional[float] = None
    status: Optional[str] = None
    order_price: Optional[float] = None
    trigger_price: Optional[float] = None
    trail_value: Optional[float] = None
    trail_start: Optional[float] = None
    filled_size: Optional[float] = None
    avg_fill_price: Optional[float] = None
    reduce_only: Optional[bool] = None
    retry_until_filled: Optional[bool] = None
    error: Optional[str] = None
    cancel_reason: Optional[str] = None
    created_at: Optional[datetime] = None
    triggered_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None


class FundingPayment(Model):
    id: Optional[int] = None
    future: Optional[str] = None
    payment: Optional[float] = None
    rate: Optional[float] = None
    time: Optional[datetime] = None


# ── leveraged tokens ───────────────────────────────────────────────────────


class LeveragedToken(Model):
    name: Optional[str] = None
    description: Optional[str] = None
    underlying: Optional[str] = None
    outstanding: Optional[float] = None
    price_per_share: Optional[float] = None
    position_per_share: Optional[float] = None
    underlying_mark: Optional[float] = None
    total_nav: Optional[float] = None
    total_collateral: Optional[float] = None
    current_leverage: Optional[float] = None
    change1h: Optional[float] = None
    change24h: Optional[float] = None
    contract_address: Optional[str] = None
    basket: Optional[Dict[str, float]] = None


class LeveragedTokenBalance(Model):
    token: Optional[str] = None
    balance: Optional[float] = None


class CreationRequest(Model):
    id: Optional[int] = None
    token: Optional[str] = None
    requested_size: Optional[float] = None
    created_size: Optional[float] = None
    pending: Optional[bool] = None
    price: Optional[float] = None
    cost: Optional[float] = None
    fee: Optional[float] = None
    requested_at: Optional[datetime] = None
    fulfilled_at: Optional[datetime] = None


class RedemptionRequest(Model):
    id: Optional[int] = None
    token: Optional[str] = None
    size: Optional[float] = None
    pending: Optional[bool] = None
    price: Optional[float] = None
    proceeds: Optional[float] = None
    fee: Optional[float] = None
    requested_at: Optional[datetime] = None
    fulfilled_at: Optional[datetime] = None


# ── options ────────────────────────────────────────────────────────────────


class Option(Model):
    underlying: Optional[str] = None
    type: Optional[str] = None
    strike: Optional[float] = None
    expiry: Optional[datetime] = None


class QuoteRequest(Model):
    id: Optional[int] = None
    option: Optional[Option] = None
    side: Optional[str] = None
    size: Optional[float] = None
    status: Optional[str] = None
    limit_price: Optional[float] = None
    hide_limit_price: Optional[bool] = None
    time: Optional[datetime] = None
    request_expiry: Optional[datetime] = None
    quotes: Optional[List[Dict[str, Any]]] = None


class Quote(Model):
    id: Optional[int] = None
    request_id: Optional[int] = None
    option: Optional[Option] = None
    price: Optional[float] = None
    size: Optional[float] = None
    collateral: Optional[float] = None
    status: Optional[str] = None
    quoter_side: Optional[str] = None
    request_side: Optional[str] = None
    time: Optional[datetime] = None
    quote_expiry: Optional[datetime] = None


class OptionsAccountInfo(Model):
    usd_balance: Optional[float] = None
    liquidation_price: Optional[float] = None
    liquidating: Optional[bool] = None


class OptionTrade(Model):
    id: Optional[int] = None
    option: Optional[Option] = None
    price: Optional[float] = None
    size: Optional[float] = None
    time: Optional[datetime] = None


class OptionsVolume(Model):
    contracts: Optional[float] = None
    underlying_total: Optional[float] = None


class HistoricalOptionsVolume(Model):
    num_contracts: Optional[float] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None


class OpenInterest(Model):
    open_interest: Optional[float] = None


class HistoricalOpenInterest(Model):
    num_contracts: Optional[float] = None
    time: Optional[datetime] = None


# ── spot margin ────────────────────────────────────────────────────────────


class SpotMarginHistory(Model):
    """One row of lending, borrowing or public rate history."""

    coin: Optional[str] = None
    size: Optional[float] = None
    rate: Optional[float] = None
    cost: Optional[float] = None
    proceeds: Optional[float] = None
    time: Optional[datetime] = None


class RateEstimate(Model):
    coin: Optional[str] = None
    estimate: Optional[float] = None
    previous: Optional[float] = None


class DailyBorrowedAmount(Model):
    coin: Optional[str] = None
    size: Optional[float] = None


class SpotMarginMarketInfo(Model):
    coin: Optional[str] = None
    borrowed: Optional[float] = None
    free: Optional[float] = None
    estimated_rate: Optional[float] = None
    previous_rate: Optional[float] = None


class LendingOffer(Model):
    coin: Optional[str] = None
    rate: Optional[float] = None
    size: Optional[float] = None


class LendingInfo(Model):
    coin: Optional[str] = None
    lendable: Optional[float] = None
    locked: Optional[float] = None
    min_rate: Optional[float] = None
    offered: Optional[float] = None


# ── request arguments ──────────────────────────────────────────────────────


class Params(Model):
    """Request arguments; ``to_payload`` drops unset fields and uses enum values."""

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PlaceOrderParams(Params):
    market: str
    side: Side
    price: Optional[float]
    type: OrderType
    size: float
    reduce_only: Optional[bool] = None
    ioc: Optional[bool] = None
    post_only: Optional[bool] = None
    client_id: Optional[str] = None
    reject_on_price_band: Optional[bool] = None
    reject_after_ts: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        # market orders must send an explicit null price
        payload.setdefault("price", None)
        return payload


class PlaceTriggerOrderParams(Params):
    market: str
    side: Side
    size: float
    type: TriggerOrderType
    trigger_price: Optional[float] = None
    order_price: Optional[float] = None
    trail_value: Optional[float] = None
    reduce_only: Optional[bool] = None
    retry_until_filled: Optional[bool] = None


class ModifyOrderParams(Params):
    price: Optional[float] = None
    size: Optional[float] = None
    client_id: Optional[str] = None


class ModifyTriggerOrderParams(Params):
    size: Optional[float] = None
    trigger_price: Optional[float] = None
    order_price: Optional[float] = None
    trail_value: Optional[float] = None


class WithdrawParams(Params):
    coin: str
    size: float
    address: str
    tag: Optional[str] = None
    method: Optional[str] = None
    password: Optional[str] = None
    code: Optional[str] = None


class CreateQuoteRequestParams(Params):
    underlying: str
    type: OptionType
    strike: float
    expiry: int
    side: Side
    size: float
    limit_price: Optional[float] = None
    hide_limit_price: Optional[bool] = None
    request_expiry: Optional[int] = None
    counterparty_id: Optional[int] = None


# ── result decoders ────────────────────────────────────────────────────────


def raw(value: Any) -> Any:
    return value


def nothing(value: Any) -> None:
    return None


def list_of(model: Type[M]) -> Callable[[Any], List[M]]:
    adapter = TypeAdapter(List[model])

    def decode(value: Any) -> List[M]:
        return adapter.validate_python(value or [])

    return decode


def one(model: Type[M]) -> Callable[[Any], Optional[M]]:
    def decode(value: Any) -> Optional[M]:
        return None if value is None else model.model_validate(value)

    return decode


def mapping_of_lists(model: Type[M]) -> Callable[[Any], Dict[str, List[M]]]:
    adapter = TypeAdapter(Dict[str, List[model]])

    def decode(value: Any) -> Dict[str, List[M]]:
        return adapter.validate_python(value or {})

    return decode
