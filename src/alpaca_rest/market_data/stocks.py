"""Historical and latest stock market data from the data API host."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from alpaca_rest.auth import Alpaca
from alpaca_rest.domain.base import map_of
from alpaca_rest.domain.market import (
    AuctionsPage,
    Bar,
    BarsPage,
    Quote,
    QuotesPage,
    Snapshot,
    Trade,
    TradesPage,
)
from alpaca_rest.domain.params import (
    LatestParams,
    StockAuctionsParams,
    StockBarsParams,
    StockQuotesParams,
    StockTradesParams,
)
from alpaca_rest.errors import TransportError, ValidationError
from alpaca_rest.transport import data_request, decode

CONDITION_TICK_TYPES = ("trade", "quote")


def _latest(payload: Any, key: str, path: str) -> Any:
    if not isinstance(payload, dict) or not isinstance(payload.get(key), dict):
        raise TransportError(f"Expected '{key}' object in response from {path}.")
    return payload[key]


async def get_stock_bars(client: Alpaca, params: StockBarsParams) -> BarsPage:
    """One page of bars for one or more symbols."""
    path = "/v2/stocks/bars"
    payload = await data_request(client, path, params.to_params())
    return decode(payload, BarsPage.from_api, path)


async def get_latest_stock_bars(client: Alpaca, params: LatestParams) -> dict[str, Bar]:
    path = "/v2/stocks/bars/latest"
    payload = await data_request(client, path, params.to_params())
    return decode(_latest(payload, "bars", path), map_of(Bar), path)


async def get_stock_quotes(client: Alpaca, params: StockQuotesParams) -> QuotesPage:
    path = "/v2/stocks/quotes"
    payload = await data_request(client, path, params.to_params())
    return decode(payload, QuotesPage.from_api, path)


async def get_latest_stock_quotes(client: Alpaca, params: LatestParams) -> dict[str, Quote]:
    path = "/v2/stocks/quotes/latest"
    payload = await data_request(client, path, params.to_params())
    return decode(_latest(payload, "quotes", path), map_of(Quote), path)


async def get_stock_trades(client: Alpaca, params: StockTradesParams) -> TradesPage:
    path = "/v2/stocks/trades"
    payload = await data_request(client, path, params.to_params())
    return decode(payload, TradesPage.from_api, path)


async def get_latest_stock_trades(client: Alpaca, params: LatestParams) -> dict[str, Trade]:
    path = "/v2/stocks/trades/latest"
    payload = await data_request(client, path, params.to_params())
    return decode(_latest(payload, "trades", path), map_of(Trade), path)


async def get_stock_snapshots(client: Alpaca, params: LatestParams) -> dict[str, Snapshot]:
    """Latest trade, latest quote, minute bar and daily bars per symbol."""
    path = "/v2/stocks/snapshots"
    payload = await data_request(client, path, params.to_params())
    if not isinstance(payload, dict):
        raise TransportError(f"Expected a JSON object from {path}.")
    # Symbols without data come back as null.
    present = {symbol: value for symbol, value in payload.items() if value is not None}
    return decode(present, map_of(Snapshot), path)


async def get_stock_auctions(client: Alpaca, params: StockAuctionsParams) -> AuctionsPage:
    path = "/v2/stocks/auctions"
    payload = await data_request(client, path, params.to_params())
    return decode(payload, AuctionsPage.from_api, path)


async def get_condition_codes(
    client: Alpaca, ticktype: str, tape: str = "A"
) -> dict[str, str]:
    """Condition code to description map for `trade` or `quote` ticks on a tape."""
    tick = ticktype.strip().lower()
    if tick not in CONDITION_TICK_TYPES:
        raise ValidationError(f"ticktype must be one of {', '.join(CONDITION_TICK_TYPES)}")
    path = f"/v2/stocks/meta/conditions/{quote(tick, safe='')}"
    payload = await data_request(client, path, {"tape": tape.strip().upper()})
    return decode(payload, _code_map, path)


async def get_exchange_codes(client: Alpaca) -> dict[str, str]:
    path = "/v2/stocks/meta/exchanges"
    payload = await data_request(client, path)
    return decode(payload, _code_map, path)


def _code_map(payload: Any) -> dict[str, str]:
    if not isinstance(payload, dict):
        raise TypeError("expected an object of code descriptions")
    return {str(code): str(description) for code, description in payload.items()}
