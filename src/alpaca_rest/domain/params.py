"""Request values: the order builder and per-endpoint parameter objects."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from decimal import Decimal
from enum import StrEnum
from typing import Any, Self

from alpaca_rest.errors import ValidationError

Number = int | float | Decimal | str


class OrderSide(StrEnum):
    """Supported order directions."""

    BUY = "buy"
    SELL = "sell"


class OrderType(StrEnum):
    MARKET = "market"
    LIMIT = "limit"
    STOP = "stop"
    STOP_LIMIT = "stop_limit"
    TRAILING_STOP = "trailing_stop"


class TimeInForce(StrEnum):
    DAY = "day"
    GTC = "gtc"
    OPG = "opg"
    CLS = "cls"
    IOC = "ioc"
    FOK = "fok"


class OrderClass(StrEnum):
    SIMPLE = "simple"
    BRACKET = "bracket"
    OCO = "oco"
    OTO = "oto"
    MLEG = "mleg"


class PositionIntent(StrEnum):
    BUY_TO_OPEN = "buy_to_open"
    BUY_TO_CLOSE = "buy_to_close"
    SELL_TO_OPEN = "sell_to_open"
    SELL_TO_CLOSE = "sell_to_close"


def _number(value: Number) -> str:
    return str(value).strip()


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, StrEnum):
        return value.value
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(_query_value(item) for item in value)
    return str(value)


def _coerce_enum(enum_type: type[StrEnum], value: Any, label: str) -> StrEnum:
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(str(value).strip().lower())
    except ValueError as exc:
        allowed = ", ".join(member.value for member in enum_type)
        raise ValidationError(f"{label} must be one of {allowed} (got {value!r}).") from exc


class QueryParams:
    """Mixin rendering dataclass fields as Alpaca query-string values."""

    def to_params(self) -> dict[str, str]:
        params: dict[str, str] = {}
        for item in fields(self):  # type: ignore[arg-type]
            value = getattr(self, item.name)
            if value is None:
                continue
            if isinstance(value, (list, tuple)) and not value:
                continue
            params[item.metadata.get("wire") or item.name] = _query_value(value)
        return params


class JsonPayload:
    """Mixin rendering dataclass fields as a JSON body with unset fields omitted."""

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        for item in fields(self):  # type: ignore[arg-type]
            value = getattr(self, item.name)
            if value is None:
                continue
            if isinstance(value, StrEnum):
                value = value.value
            elif isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
                value = _number(value)
            payload[item.metadata.get("wire") or item.name] = value
        return payload


@dataclass(frozen=True)
class OrderLeg:
    """One leg of a multi-leg options order."""

    symbol: str
    ratio_qty: Number
    side: OrderSide | None = None
    position_intent: PositionIntent | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"symbol": self.symbol, "ratio_qty": _number(self.ratio_qty)}
        if self.side is not None:
            payload["side"] = self.side.value
        if self.position_intent is not None:
            payload["position_intent"] = self.position_intent.value
        return payload


@dataclass(frozen=True)
class TakeProfit:
    limit_price: Number

    def to_payload(self) -> dict[str, Any]:
        return {"limit_price": _number(self.limit_price)}


@dataclass(frozen=True)
class StopLoss:
    stop_price: Number
    limit_price: Number | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = {"stop_price": _number(self.stop_price)}
        if self.limit_price is not None:
            payload["limit_price"] = _number(self.limit_price)
        return payload


PRICE_FIELDS = ("qty", "notional", "limit_price", "stop_price", "trail_price", "trail_percent")


@dataclass(frozen=True)
class OrderRequest:
    """Validated order ready to submit to `POST /v2/orders`.

    Build one through `OrderRequest.builder()`; exactly one of `qty` and
    `notional` is set.
    """

    symbol: str
    side: OrderSide
    type: OrderType
    time_in_force: TimeInForce
    qty: Number | None = None
    notional: Number | None = None
    limit_price: Number | None = None
    stop_price: Number | None = None
    trail_price: Number | None = None
    trail_percent: Number | None = None
    extended_hours: bool | None = None
    client_order_id: str | None = None
    order_class: OrderClass | None = None
    legs: tuple[OrderLeg, ...] = ()
    take_profit: TakeProfit | None = None
    stop_loss: StopLoss | None = None
    position_intent: PositionIntent | None = None

    def __post_init__(self) -> None:
        symbol = str(self.symbol or "").strip().upper()
        if not symbol:
            raise ValidationError("Order request is missing required field 'symbol'.")
        object.__setattr__(self, "symbol", symbol)

        for name in PRICE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, str) and not value.strip():
                object.__setattr__(self, name, None)
        has_qty = self.qty is not None
        has_notional = self.notional is not None
        if has_qty and has_notional:
            raise ValidationError("Order request must set only one of 'qty' or 'notional'.")
        if not has_qty and not has_notional:
            raise ValidationError("Order request must set one of 'qty' or 'notional'.")

        object.__setattr__(self, "side", _coerce_enum(OrderSide, self.side, "side"))
        object.__setattr__(self, "type", _coerce_enum(OrderType, self.type, "type"))
        object.__setattr__(
            self, "time_in_force", _coerce_enum(TimeInForce, self.time_in_force, "time_in_force")
        )
        if self.order_class is not None:
            object.__setattr__(
                self, "order_class", _coerce_enum(OrderClass, self.order_class, "order_class")
            )
        if self.position_intent is not None:
            object.__setattr__(
                self,
                "position_intent",
                _coerce_enum(PositionIntent, self.position_intent, "position_intent"),
            )
        object.__setattr__(self, "legs", tuple(self.legs))

    @staticmethod
    def builder() -> OrderRequestBuilder:
        return OrderRequestBuilder()

    def to_payload(self) -> dict[str, Any]:
        """JSON body containing only the fields that were set."""
        payload: dict[str, Any] = {
            "symbol": self.symbol,
            "side": self.side.value,
            "type": self.type.value,
            "time_in_force": self.time_in_force.value,
        }
        for name in PRICE_FIELDS:
            value = getattr(self, name)
            if value is not None:
                payload[name] = _number(value)
        if self.extended_hours is not None:
            payload["extended_hours"] = self.extended_hours
        if self.client_order_id is not None:
            payload["client_order_id"] = self.client_order_id
        if self.order_class is not None:
            payload["order_class"] = self.order_class.value
        if self.legs:
            payload["legs"] = [leg.to_payload() for leg in self.legs]
        if self.take_profit is not None:
            payload["take_profit"] = self.take_profit.to_payload()
        if self.stop_loss is not None:
            payload["stop_loss"] = self.stop_loss.to_payload()
        if self.position_intent is not None:
            payload["position_intent"] = self.position_intent.value
        return payload


@dataclass
class OrderRequestBuilder:
    """Mutable accumulator for `OrderRequest`; nothing is checked until `build()`."""

    _values: dict[str, Any] = field(default_factory=dict)
    _legs: list[OrderLeg] = field(default_factory=list)

    def _set(self, name: str, value: Any) -> Self:
        self._values[name] = value
        return self

    def symbol(self, symbol: str) -> Self:
        return self._set("symbol", symbol)

    def qty(self, qty: Number) -> Self:
        return self._set("qty", qty)

    def notional(self, notional: Number) -> Self:
        return self._set("notional", notional)

    def side(self, side: OrderSide | str) -> Self:
        return self._set("side", side)

    def order_type(self, order_type: OrderType | str) -> Self:
        return self._set("type", order_type)

    def time_in_force(self, time_in_force: TimeInForce | str) -> Self:
        return self._set("time_in_force", time_in_force)

    def limit_price(self, price: Number) -> Self:
        return self._set("limit_price", price)

    def stop_price(self, price: Number) -> Self:
        return self._set("stop_price", price)

    def trail_price(self, price: Number) -> Self:
        return self._set("trail_price", price)

    def trail_percent(self, percent: Number) -> Self:
        return self._set("trail_percent", percent)

    def extended_hours(self, enabled: bool = True) -> Self:
        return self._set("extended_hours", enabled)

    def client_order_id(self, client_order_id: str) -> Self:
        return self._set("client_order_id", client_order_id)

    def order_class(self, order_class: OrderClass | str) -> Self:
        return self._set("order_class", order_class)

    def take_profit(self, limit_price: Number) -> Self:
        return self._set("take_profit", TakeProfit(limit_price=limit_price))

    def stop_loss(self, stop_price: Number, limit_price: Number | None = None) -> Self:
        return self._set("stop_loss", StopLoss(stop_price=stop_price, limit_price=limit_price))

    def position_intent(self, intent: PositionIntent | str) -> Self:
        return self._set("position_intent", intent)

    def leg(
        self,
        symbol: str,
        ratio_qty: Number,
        side: OrderSide | str | None = None,
        position_intent: PositionIntent | str | None = None,
    ) -> Self:
        self._legs.append(
            OrderLeg(
                symbol=symbol,
                ratio_qty=ratio_qty,
                side=None if side is None else _coerce_enum(OrderSide, side, "leg side"),
                position_intent=None
                if position_intent is None
                else _coerce_enum(PositionIntent, position_intent, "leg position_intent"),
            )
        )
        return self

    def build(self) -> OrderRequest:
        """Check required fields are present; `OrderRequest` validates the rest."""
        values = dict(self._values)
        for name in ("symbol", "side", "type", "time_in_force"):
            value = values.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(f"Order request is missing required field '{name}'.")

        return OrderRequest(legs=tuple(self._legs), **values)


@dataclass(frozen=True, kw_only=True)
class GetOrdersParams(QueryParams):
    status: str | None = None
    limit: int | None = None
    after: str | None = None
    until: str | None = None
    direction: str | None = None
    nested: bool | None = None
    symbols: list[str] | None = None
    side: OrderSide | None = None
    asset_class: list[str] | None = None


@dataclass(frozen=True, kw_only=True)
class ReplaceOrderParams(JsonPayload):
    qty: Number | None = None
    time_in_force: TimeInForce | None = None
    limit_price: Number | None = None
    stop_price: Number | None = None
    trail: Number | None = None
    client_order_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ClosePositionParams(QueryParams):
    """Liquidate part of a position, by share count or by percentage, not both."""

    qty: Number | None = None
    percentage: Number | None = None

    def __post_init__(self) -> None:
        if self.qty is not None and self.percentage is not None:
            raise ValidationError("Close position accepts only one of 'qty' or 'percentage'.")


@dataclass(frozen=True, kw_only=True)
class GetAssetsParams(QueryParams):
    status: str | None = None
    asset_class: str | None = None
    exchange: str | None = None
    attributes: list[str] | None = None


@dataclass(frozen=True, kw_only=True)
class OptionContractsParams(QueryParams):
    underlying_symbols: list[str] | None = None
    status: str | None = None
    expiration_date: str | None = None
    expiration_date_gte: str | None = None
    expiration_date_lte: str | None = None
    root_symbol: str | None = None
    type: str | None = None
    style: str | None = None
    strike_price_gte: Number | None = None
    strike_price_lte: Number | None = None
    limit: int | None = None
    page_token: str | None = None
    ppind: bool | None = None
    show_deliverables: bool | None = None


@dataclass(frozen=True, kw_only=True)
class CreateWatchlistParams(JsonPayload):
    name: str
    symbols: list[str] | None = None

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValidationError("Watchlist name must not be empty.")


@dataclass(frozen=True, kw_only=True)
class UpdateWatchlistParams(JsonPayload):
    name: str | None = None
    symbols: list[str] | None = None


@dataclass(frozen=True, kw_only=True)
class CalendarParams(QueryParams):
    start: str | None = None
    end: str | None = None
    date_type: str | None = None


@dataclass(frozen=True, kw_only=True)
class PortfolioHistoryParams(QueryParams):
    period: str | None = None
    timeframe: str | None = None
    intraday_reporting: str | None = None
    start: str | None = None
    pnl_reset: str | None = None
    end: str | None = None
    extended_hours: bool | None = None
    cashflow_types: list[str] | None = None


@dataclass(frozen=True, kw_only=True)
class AccountActivitiesParams(QueryParams):
    activity_types: list[str] | None = None
    category: str | None = None
    date: str | None = None
    until: str | None = None
    after: str | None = None
    direction: str | None = None
    page_size: int | None = None
    page_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateAccountConfigurations(JsonPayload):
    dtbp_check: str | None = None
    trade_confirm_email: str | None = None
    suspend_trade: bool | None = None
    no_shorting: bool | None = None
    fractional_trading: bool | None = None
    max_margin_multiplier: str | None = None
    max_options_trading_level: int | None = None
    pdt_check: str | None = None
    ptp_no_exception_entry: bool | None = None

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        if self.max_options_trading_level is not None:
            payload["max_options_trading_level"] = self.max_options_trading_level
        return payload


@dataclass(frozen=True, kw_only=True)
class CryptoWithdrawalParams(JsonPayload):
    amount: Number
    address: str
    asset: str


@dataclass(frozen=True, kw_only=True)
class WhitelistAddressParams(JsonPayload):
    address: str
    asset: str


@dataclass(frozen=True, kw_only=True)
class GasFeeEstimateParams(QueryParams):
    asset: str
    from_address: str
    to_address: str
    amount: Number


TIMEFRAME_ALIASES = {
    "1d": "1Day",
    "day": "1Day",
    "1day": "1Day",
    "1w": "1Week",
    "1week": "1Week",
    "1min": "1Min",
    "1m": "1Min",
    "5min": "5Min",
    "15min": "15Min",
    "30min": "30Min",
    "1h": "1Hour",
    "1hour": "1Hour",
    "1month": "1Month",
}


def normalize_timeframe(value: str) -> str:
    """Map shorthand such as `1d` or `1h` onto Alpaca timeframe strings."""
    normalized = value.strip().lower()
    return TIMEFRAME_ALIASES.get(normalized, value.strip())


def _symbols(value: Iterable[str]) -> list[str]:
    symbols = [str(symbol).strip().upper() for symbol in value if str(symbol).strip()]
    if not symbols:
        raise ValidationError("At least one symbol is required.")
    return symbols


@dataclass(frozen=True, kw_only=True)
class StockBarsParams(QueryParams):
    symbols: list[str]
    timeframe: str = "1Day"
    start: str | None = None
    end: str | None = None
    limit: int | None = None
    adjustment: str | None = None
    asof: str | None = None
    feed: str | None = None
    currency: str | None = None
    page_token: str | None = None
    sort: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", _symbols(self.symbols))
        object.__setattr__(self, "timeframe", normalize_timeframe(self.timeframe))


@dataclass(frozen=True, kw_only=True)
class StockQuotesParams(QueryParams):
    symbols: list[str]
    start: str | None = None
    end: str | None = None
    limit: int | None = None
    asof: str | None = None
    feed: str | None = None
    currency: str | None = None
    page_token: str | None = None
    sort: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", _symbols(self.symbols))


@dataclass(frozen=True, kw_only=True)
class StockTradesParams(StockQuotesParams):
    pass


@dataclass(frozen=True, kw_only=True)
class StockAuctionsParams(StockQuotesParams):
    pass


@dataclass(frozen=True, kw_only=True)
class LatestParams(QueryParams):
    """Symbols plus feed selection for latest bars/quotes/trades and snapshots."""

    symbols: list[str]
    feed: str | None = None
    currency: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "symbols", _symbols(self.symbols))
