"""Market data endpoint functions (data API host)."""

from alpaca_rest.market_data.stocks import (
    get_condition_codes,
    get_exchange_codes,
    get_latest_stock_bars,
    get_latest_stock_quotes,
    get_latest_stock_trades,
    get_stock_auctions,
    get_stock_bars,
    get_stock_quotes,
    get_stock_snapshots,
    get_stock_trades,
)

__all__ = [
    "get_condition_codes",
    "get_exchange_codes",
    "get_latest_stock_bars",
    "get_latest_stock_quotes",
    "get_latest_stock_trades",
    "get_stock_auctions",
    "get_stock_bars",
    "get_stock_quotes",
    "get_stock_snapshots",
    "get_stock_trades",
]
