"""Typed views of stock market data responses."""

from __future__ import annotations

from dataclasses import dataclass

import pandas as pd

from .base import ApiModel, list_of, map_of, wire


@dataclass(frozen=True, kw_only=True)
class Bar(ApiModel):
    """One OHLCV interval."""

    timestamp: str = wire("t")
    open: float = wire("o")
    high: float = wire("h")
    low: float = wire("l")
    close: float = wire("c")
    volume: int = wire("v")
    trade_count: int | None = wire("n", default=None)
    vwap: float | None = wire("vw", default=None)


@dataclass(frozen=True, kw_only=True)
class Quote(ApiModel):
    timestamp: str = wire("t")
    bid_exchange: str = wire("bx", default="")
    bid_price: float = wire("bp")
    bid_size: int = wire("bs", default=0)
    ask_exchange: str = wire("ax", default="")
    ask_price: float = wire("ap")
    ask_size: int = wire("as", default=0)
    conditions: list[str] = wire("c", default_factory=list)
    tape: str | None = wire("z", default=None)

    @property
    def spread(self) -> float:
        return self.ask_price - self.bid_price


@dataclass(frozen=True, kw_only=True)
class Trade(ApiModel):
    timestamp: str = wire("t")
    exchange: str = wire("x", default="")
    price: float = wire("p")
    size: int = wire("s", default=0)
    trade_id: int | None = wire("i", default=None)
    conditions: list[str] = wire("c", default_factory=list)
    tape: str | None = wire("z", default=None)
    update: str | None = wire("u", default=None)


@dataclass(frozen=True, kw_only=True)
class Snapshot(ApiModel):
    latest_trade: Trade | None = wire("latestTrade", parse=Trade.from_api, default=None)
    latest_quote: Quote | None = wire("latestQuote", parse=Quote.from_api, default=None)
    minute_bar: Bar | None = wire("minuteBar", parse=Bar.from_api, default=None)
    daily_bar: Bar | None = wire("dailyBar", parse=Bar.from_api, default=None)
    prev_daily_bar: Bar | None = wire("prevDailyBar", parse=Bar.from_api, default=None)

    @property
    def latest_price(self) -> float | None:
        if self.latest_trade is None:
            return None
        return self.latest_trade.price

    @property
    def is_above_prev_close(self) -> bool:
        if self.daily_bar is None or self.prev_daily_bar is None:
            return False
        return self.daily_bar.close > self.prev_daily_bar.close


@dataclass(frozen=True, kw_only=True)
class AuctionPrint(ApiModel):
    timestamp: str = wire("t")
    exchange: str = wire("x", default="")
    price: float = wire("p")
    size: int | None = wire("s", default=None)
    condition: str = wire("c", default="")


@dataclass(frozen=True, kw_only=True)
class AuctionDay(ApiModel):
    date: str = wire("d")
    opening: list[AuctionPrint] = wire("o", parse=list_of(AuctionPrint), default_factory=list)
    closing: list[AuctionPrint] = wire("c", parse=list_of(AuctionPrint), default_factory=list)


@dataclass(frozen=True, kw_only=True)
class BarsPage(ApiModel):
    """Historical bars keyed by symbol, plus the token for the next page."""

    bars: dict[str, list[Bar]] = wire(parse=map_of(Bar, many=True), default_factory=dict)
    next_page_token: str | None = None
    currency: str | None = None

    def symbols(self) -> list[str]:
        return list(self.bars)

    def bars_for(self, symbol: str) -> list[Bar]:
        return self.bars.get(symbol, [])

    def first_bar(self, symbol: str) -> Bar | None:
        bars = self.bars_for(symbol)
        return bars[0] if bars else None

    def last_bar(self, symbol: str) -> Bar | None:
        bars = self.bars_for(symbol)
        return bars[-1] if bars else None

    def closing_prices(self, symbol: str) -> list[float]:
        return [bar.close for bar in self.bars_for(symbol)]

    def total_volume(self, symbol: str) -> int:
        return sum(bar.volume for bar in self.bars_for(symbol))

    def to_frame(self, symbol: str) -> pd.DataFrame:
        """Return OHLCV columns indexed by UTC bar time, oldest first."""
        bars = self.bars_for(symbol)
        frame = pd.DataFrame(
            [
                {
                    "time": bar.timestamp,
                    "open": bar.open,
                    "high": bar.high,
                    "low": bar.low,
                    "close": bar.close,
                    "volume": bar.volume,
                }
                for bar in bars
            ],
            columns=["time", "open", "high", "low", "close", "volume"],
        )
        frame.index = pd.to_datetime(frame["time"], utc=True)
        frame.index.name = "time"
        frame = frame.sort_index()
        frame = frame[["open", "high", "low", "close", "volume"]]
        return frame.apply(pd.to_numeric, errors="coerce")


@dataclass(frozen=True, kw_only=True)
class QuotesPage(ApiModel):
    quotes: dict[str, list[Quote]] = wire(parse=map_of(Quote, many=True), default_factory=dict)
    next_page_token: str | None = None
    currency: str | None = None


@dataclass(frozen=True, kw_only=True)
class TradesPage(ApiModel):
    trades: dict[str, list[Trade]] = wire(parse=map_of(Trade, many=True), default_factory=dict)
    next_page_token: str | None = None
    currency: str | None = None


@dataclass(frozen=True, kw_only=True)
class AuctionsPage(ApiModel):
    auctions: dict[str, list[AuctionDay]] = wire(
        parse=map_of(AuctionDay, many=True), default_factory=dict
    )
    next_page_token: str | None = None
    currency: str | None = None

    def opening_prices(self, symbol: str) -> list[float]:
        return [auction.price for day in self.auctions.get(symbol, []) for auction in day.opening]

    def closing_prices(self, symbol: str) -> list[float]:
        return [auction.price for day in self.auctions.get(symbol, []) for auction in day.closing]
