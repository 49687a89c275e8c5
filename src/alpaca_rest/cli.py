"""Command-line interface for quick account and market data lookups."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from dataclasses import asdict, replace
from typing import Any

from alpaca_rest.auth import Alpaca
from alpaca_rest.config import Settings, TradingType
from alpaca_rest.domain.params import GetOrdersParams, StockBarsParams
from alpaca_rest.errors import ApiError, ConfigError, TransportError, ValidationError
from alpaca_rest.logging_utils import setup_logger
from alpaca_rest.market_data import get_stock_bars
from alpaca_rest.trading import get_account_info, get_asset, get_clock, get_orders, get_positions


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(
        prog="alpaca-rest", description="Query the Alpaca trading and market data APIs"
    )
    parser.add_argument(
        "--live", action="store_true", help="Use the live trading host instead of paper"
    )
    parser.add_argument("--log-level", type=str, help="Logging level (default: LOG_LEVEL or INFO)")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("account", help="Show the account summary")
    commands.add_parser("positions", help="List open positions")
    orders = commands.add_parser("orders", help="List orders")
    orders.add_argument("--status", choices=["open", "closed", "all"], default="open")
    commands.add_parser("clock", help="Show the market clock")
    asset = commands.add_parser("asset", help="Look up one asset")
    asset.add_argument("symbol", type=str)
    bars = commands.add_parser("bars", help="Fetch historical bars for a symbol")
    bars.add_argument("symbol", type=str)
    bars.add_argument("--timeframe", type=str, default="1Day")
    bars.add_argument("--limit", type=int, default=10)
    return parser


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    overrides: dict[str, Any] = {}
    if args.live:
        overrides["trading_type"] = TradingType.LIVE
    if args.log_level:
        overrides["log_level"] = args.log_level.strip().upper()
    return replace(settings, **overrides)


async def _dispatch(client: Alpaca, args: argparse.Namespace) -> Any:
    if args.command == "account":
        return await get_account_info(client)
    if args.command == "positions":
        return await get_positions(client)
    if args.command == "orders":
        return await get_orders(client, GetOrdersParams(status=args.status))
    if args.command == "clock":
        return await get_clock(client)
    if args.command == "asset":
        return await get_asset(client, args.symbol)
    if args.command == "bars":
        params = StockBarsParams(
            symbols=[args.symbol], timeframe=args.timeframe, limit=args.limit
        )
        page = await get_stock_bars(client, params)
        return page.bars_for(params.symbols[0])
    raise ValueError(f"Unknown command: {args.command}")


def _to_jsonable(result: Any) -> Any:
    if isinstance(result, list):
        return [_to_jsonable(item) for item in result]
    return asdict(result)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
        client = Alpaca.from_settings(settings)
    except ConfigError as exc:
        print(f"Configuration error: {exc}")
        return 2

    logger = setup_logger(settings.log_level)
    logger.debug("Running %s against %s", args.command, client.trading_type)
    try:
        result = asyncio.run(_dispatch(client, args))
    except ValidationError as exc:
        print(f"Invalid request: {exc}")
        return 2
    except (ApiError, TransportError) as exc:
        print(f"Request failed: {exc}")
        return 1

    print(json.dumps(_to_jsonable(result), indent=2, default=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
