"""Watchlist endpoints, addressed either by id or by name."""

from __future__ import annotations

from urllib.parse import quote

from alpaca_rest.auth import Alpaca
from alpaca_rest.domain.models import Watchlist
from alpaca_rest.domain.params import CreateWatchlistParams, UpdateWatchlistParams
from alpaca_rest.transport import decode, decode_list, trading_request

BY_NAME_PATH = "/v2/watchlists:by_name"


def _watchlist_path(watchlist_id: str) -> str:
    return f"/v2/watchlists/{quote(watchlist_id.strip(), safe='')}"


async def get_watchlists(client: Alpaca) -> list[Watchlist]:
    path = "/v2/watchlists"
    payload = await trading_request(client, "GET", path)
    return decode_list(payload, Watchlist.from_api, path)


async def create_watchlist(client: Alpaca, params: CreateWatchlistParams) -> Watchlist:
    path = "/v2/watchlists"
    payload = await trading_request(client, "POST", path, json=params.to_payload())
    return decode(payload, Watchlist.from_api, path)


async def get_watchlist(client: Alpaca, watchlist_id: str) -> Watchlist:
    path = _watchlist_path(watchlist_id)
    payload = await trading_request(client, "GET", path)
    return decode(payload, Watchlist.from_api, path)


async def get_watchlist_by_name(client: Alpaca, name: str) -> Watchlist:
    payload = await trading_request(client, "GET", BY_NAME_PATH, params={"name": name})
    return decode(payload, Watchlist.from_api, BY_NAME_PATH)


async def update_watchlist(
    client: Alpaca, watchlist_id: str, params: UpdateWatchlistParams
) -> Watchlist:
    """Rename a watchlist and/or replace its symbols."""
    path = _watchlist_path(watchlist_id)
    payload = await trading_request(client, "PUT", path, json=params.to_payload())
    return decode(payload, Watchlist.from_api, path)


async def update_watchlist_by_name(
    client: Alpaca, name: str, params: UpdateWatchlistParams
) -> Watchlist:
    payload = await trading_request(
        client, "PUT", BY_NAME_PATH, json=params.to_payload(), params={"name": name}
    )
    return decode(payload, Watchlist.from_api, BY_NAME_PATH)


async def add_asset_to_watchlist(client: Alpaca, watchlist_id: str, symbol: str) -> Watchlist:
    path = _watchlist_path(watchlist_id)
    payload = await trading_request(
        client, "POST", path, json={"symbol": symbol.strip().upper()}
    )
    return decode(payload, Watchlist.from_api, path)


async def add_asset_to_watchlist_by_name(client: Alpaca, name: str, symbol: str) -> Watchlist:
    payload = await trading_request(
        client,
        "POST",
        BY_NAME_PATH,
        json={"symbol": symbol.strip().upper()},
        params={"name": name},
    )
    return decode(payload, Watchlist.from_api, BY_NAME_PATH)


async def delete_watchlist(client: Alpaca, watchlist_id: str) -> None:
    await trading_request(client, "DELETE", _watchlist_path(watchlist_id))


async def delete_watchlist_by_name(client: Alpaca, name: str) -> None:
    await trading_request(client, "DELETE", BY_NAME_PATH, params={"name": name})


async def remove_asset_from_watchlist(
    client: Alpaca, watchlist_id: str, symbol: str
) -> Watchlist:
    path = f"{_watchlist_path(watchlist_id)}/{quote(symbol.strip().upper(), safe='')}"
    payload = await trading_request(client, "DELETE", path)
    return decode(payload, Watchlist.from_api, path)


async def delete_all_watchlists(client: Alpaca) -> int:
    """Delete every watchlist on the account and return how many were removed."""
    watchlists = await get_watchlists(client)
    for watchlist in watchlists:
        await delete_watchlist(client, watchlist.id)
    return len(watchlists)
