"""Typed views of trading API responses.

Numeric values that Alpaca encodes as strings (cash, qty, prices) are kept as
the exact strings received.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any, Self

from .base import ApiModel, list_of, wire


@dataclass(frozen=True, kw_only=True)
class AccountInfo(ApiModel):
    """Account summary returned by `/v2/account`."""

    id: str
    account_number: str
    status: str
    currency: str = "USD"
    cash: str = "0"
    buying_power: str = "0"
    regt_buying_power: str | None = None
    daytrading_buying_power: str | None = None
    effective_buying_power: str | None = None
    non_marginable_buying_power: str | None = None
    options_buying_power: str | None = None
    bod_dtbp: str | None = None
    equity: str | None = None
    last_equity: str | None = None
    portfolio_value: str | None = None
    position_market_value: str | None = None
    long_market_value: str | None = None
    short_market_value: str | None = None
    initial_margin: str | None = None
    maintenance_margin: str | None = None
    last_maintenance_margin: str | None = None
    multiplier: str | None = None
    sma: str | None = None
    accrued_fees: str | None = None
    pending_reg_taf_fees: str | None = None
    intraday_adjustments: str | None = None
    balance_asof: str | None = None
    created_at: str | None = None
    crypto_status: str | None = None
    crypto_tier: int | None = None
    options_approved_level: int | None = None
    options_trading_level: int | None = None
    daytrade_count: int = 0
    pattern_day_trader: bool = False
    shorting_enabled: bool = False
    trade_suspended_by_user: bool = False
    trading_blocked: bool = False
    transfers_blocked: bool = False
    account_blocked: bool = False
    admin_configurations: dict[str, Any] | None = None
    user_configurations: dict[str, Any] | None = None


@dataclass(frozen=True, kw_only=True)
class AccountConfigurations(ApiModel):
    dtbp_check: str
    pdt_check: str
    trade_confirm_email: str | None = None
    suspend_trade: bool = False
    no_shorting: bool = False
    fractional_trading: bool = False
    max_margin_multiplier: str | None = None
    max_options_trading_level: int | None = None
    ptp_no_exception_entry: bool = False


@dataclass(frozen=True, kw_only=True)
class AccountActivity(ApiModel):
    """One entry from `/v2/account/activities`.

    Trade fills populate the execution fields (`side`, `price`, `cum_qty`, ...);
    non-trade activities such as dividends or fees populate `net_amount`,
    `date` and friends. `is_trade` tells them apart.
    """

    id: str
    activity_type: str
    symbol: str | None = None
    qty: str | None = None
    side: str | None = None
    price: str | None = None
    cum_qty: str | None = None
    leaves_qty: str | None = None
    transaction_time: str | None = None
    order_id: str | None = None
    fill_type: str | None = wire("type", default=None)
    order_status: str | None = None
    activity_sub_type: str | None = None
    date: str | None = None
    net_amount: str | None = None
    cusip: str | None = None
    per_share_amount: str | None = None
    group_id: str | None = None
    status: str | None = None
    created_at: str | None = None

    @property
    def is_trade(self) -> bool:
        return self.transaction_time is not None or self.activity_type == "FILL"


@dataclass(frozen=True, kw_only=True)
class PortfolioHistory(ApiModel):
    timestamp: list[int] = wire(default_factory=list)
    equity: list[float | None] = wire(default_factory=list)
    profit_loss: list[float | None] = wire(default_factory=list)
    profit_loss_pct: list[float | None] = wire(default_factory=list)
    base_value: float | None = None
    base_value_asof: str | None = None
    timeframe: str = ""
    cashflow: dict[str, Any] | None = None


@dataclass(frozen=True, kw_only=True)
class Order(ApiModel):
    """Order as reported by `/v2/orders`."""

    id: str
    client_order_id: str
    symbol: str
    side: str
    type: str
    time_in_force: str
    status: str
    created_at: str | None = None
    updated_at: str | None = None
    submitted_at: str | None = None
    filled_at: str | None = None
    expired_at: str | None = None
    expires_at: str | None = None
    canceled_at: str | None = None
    failed_at: str | None = None
    replaced_at: str | None = None
    replaced_by: str | None = None
    replaces: str | None = None
    asset_id: str | None = None
    asset_class: str | None = None
    notional: str | None = None
    qty: str | None = None
    filled_qty: str = "0"
    filled_avg_price: str | None = None
    order_class: str | None = None
    order_type: str | None = None
    position_intent: str | None = None
    limit_price: str | None = None
    stop_price: str | None = None
    trail_percent: str | None = None
    trail_price: str | None = None
    hwm: str | None = None
    extended_hours: bool = False
    legs: list[Order] = wire(parse=lambda raw: list_of(Order)(raw), default_factory=list)
    subtag: str | None = None
    source: str | None = None


@dataclass(frozen=True, kw_only=True)
class CanceledOrder(ApiModel):
    """Per-order status from a bulk cancel."""

    id: str
    status: int
    body: dict[str, Any] | None = None


@dataclass(frozen=True, kw_only=True)
class Position(ApiModel):
    asset_id: str
    symbol: str
    exchange: str
    asset_class: str
    qty: str
    side: str
    avg_entry_price: str | None = None
    asset_marginable: bool = False
    market_value: str | None = None
    cost_basis: str | None = None
    unrealized_pl: str | None = None
    unrealized_plpc: str | None = None
    unrealized_intraday_pl: str | None = None
    unrealized_intraday_plpc: str | None = None
    current_price: str | None = None
    lastday_price: str | None = None
    change_today: str | None = None
    qty_available: str | None = None


@dataclass(frozen=True, kw_only=True)
class ClosedPosition(ApiModel):
    """Result of one liquidation from `DELETE /v2/positions`.

    `body` is the liquidating order when `status` is 2xx; otherwise it is the
    raw `{"code", "message"}` error object for that symbol.
    """

    symbol: str
    status: int
    body: Order | dict[str, Any] | None = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> Self:
        closed = super().from_api(payload)
        if closed.succeeded and isinstance(closed.body, Mapping):
            return replace(closed, body=Order.from_api(closed.body))
        return closed

    @property
    def succeeded(self) -> bool:
        return 200 <= self.status < 300

    @property
    def error_message(self) -> str | None:
        if self.succeeded or not isinstance(self.body, Mapping):
            return None
        message = self.body.get("message")
        return None if message is None else str(message)


@dataclass(frozen=True, kw_only=True)
class Asset(ApiModel):
    id: str
    symbol: str
    name: str = ""
    exchange: str = ""
    asset_class: str = wire("class", default="us_equity")
    status: str = "active"
    tradable: bool = False
    marginable: bool = False
    shortable: bool = False
    easy_to_borrow: bool = False
    fractionable: bool = False
    maintenance_margin_requirement: float | None = None
    margin_requirement_long: str | None = None
    margin_requirement_short: str | None = None
    attributes: list[str] = wire(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class Deliverable(ApiModel):
    deliverable_type: str = wire("type")
    symbol: str
    asset_id: str | None = None
    amount: str | None = None
    allocation_percentage: str | None = None
    settlement_type: str | None = None
    settlement_method: str | None = None
    delayed_settlement: bool = False


@dataclass(frozen=True, kw_only=True)
class OptionContract(ApiModel):
    id: str
    symbol: str
    name: str = ""
    status: str = ""
    tradable: bool = False
    root_symbol: str = ""
    expiration_date: str = ""
    underlying_symbol: str = ""
    underlying_asset_id: str = ""
    contract_type: str = wire("type", default="")
    style: str = ""
    strike_price: str = ""
    multiplier: str = ""
    size: str = ""
    open_interest: str | None = None
    open_interest_date: str | None = None
    close_price: str | None = None
    close_price_date: str | None = None
    ppind: bool = False
    deliverables: list[Deliverable] = wire(parse=list_of(Deliverable), default_factory=list)


@dataclass(frozen=True, kw_only=True)
class OptionContractsPage(ApiModel):
    option_contracts: list[OptionContract] = wire(
        parse=list_of(OptionContract), default_factory=list
    )
    next_page_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class Watchlist(ApiModel):
    """Watchlist; `assets` is empty when listing all watchlists."""

    id: str
    account_id: str
    name: str
    created_at: str | None = None
    updated_at: str | None = None
    assets: list[Asset] = wire(parse=list_of(Asset), default_factory=list)

    @property
    def symbols(self) -> list[str]:
        return [asset.symbol for asset in self.assets]


@dataclass(frozen=True, kw_only=True)
class Clock(ApiModel):
    timestamp: str
    is_open: bool
    next_open: str
    next_close: str


@dataclass(frozen=True, kw_only=True)
class CalendarDay(ApiModel):
    date: str
    open: str
    close: str
    settlement_date: str | None = None
    session_open: str | None = None
    session_close: str | None = None


@dataclass(frozen=True, kw_only=True)
class CryptoWallet(ApiModel):
    chain: str
    address: str
    created_at: str | None = None


@dataclass(frozen=True, kw_only=True)
class CryptoTransfer(ApiModel):
    id: str
    direction: str
    status: str
    amount: str
    asset: str
    chain: str | None = None
    tx_hash: str | None = None
    usd_value: str | None = None
    network_fee: str | None = None
    fees: str | None = None
    from_address: str | None = None
    to_address: str | None = None
    created_at: str | None = None


@dataclass(frozen=True, kw_only=True)
class WhitelistedAddress(ApiModel):
    id: str
    asset: str
    address: str
    status: str
    chain: str | None = None
    created_at: str | None = None


@dataclass(frozen=True, kw_only=True)
class GasFeeEstimate(ApiModel):
    fee: str
