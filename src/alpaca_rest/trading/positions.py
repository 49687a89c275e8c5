"""Open positions and liquidation."""

from __future__ import annotations

from urllib.parse import quote

from alpaca_rest.auth import Alpaca
from alpaca_rest.domain.models import ClosedPosition, Order, Position
from alpaca_rest.domain.params import ClosePositionParams
from alpaca_rest.transport import decode, decode_list, trading_request


def normalize_symbol(symbol_or_asset_id: str) -> str:
    """Path segment for a symbol or asset id; crypto pairs keep their slash escaped."""
    return quote(symbol_or_asset_id.strip().upper(), safe="")


async def get_positions(client: Alpaca) -> list[Position]:
    path = "/v2/positions"
    payload = await trading_request(client, "GET", path)
    return decode_list(payload, Position.from_api, path)


async def get_position(client: Alpaca, symbol_or_asset_id: str) -> Position:
    path = f"/v2/positions/{normalize_symbol(symbol_or_asset_id)}"
    payload = await trading_request(client, "GET", path)
    return decode(payload, Position.from_api, path)


async def close_position(
    client: Alpaca,
    symbol_or_asset_id: str,
    params: ClosePositionParams | None = None,
) -> Order:
    """Liquidate all of a position, or `qty` shares, or `percentage` of it."""
    path = f"/v2/positions/{normalize_symbol(symbol_or_asset_id)}"
    query = params.to_params() if params else None
    payload = await trading_request(client, "DELETE", path, params=query)
    return decode(payload, Order.from_api, path)


async def close_all_positions(
    client: Alpaca, cancel_orders: bool = False
) -> list[ClosedPosition]:
    path = "/v2/positions"
    query = {"cancel_orders": "true"} if cancel_orders else None
    payload = await trading_request(client, "DELETE", path, params=query)
    if payload is None:
        return []
    return decode_list(payload, ClosedPosition.from_api, path)


async def exercise_option_position(client: Alpaca, symbol_or_contract_id: str) -> None:
    path = f"/v2/positions/{normalize_symbol(symbol_or_contract_id)}/exercise"
    await trading_request(client, "POST", path)
