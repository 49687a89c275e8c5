"""Tradable assets and option contracts."""

from __future__ import annotations

from urllib.parse import quote

from alpaca_rest.auth import Alpaca
from alpaca_rest.domain.models import Asset, OptionContract, OptionContractsPage
from alpaca_rest.domain.params import GetAssetsParams, OptionContractsParams
from alpaca_rest.transport import decode, decode_list, trading_request


async def get_assets(client: Alpaca, params: GetAssetsParams | None = None) -> list[Asset]:
    path = "/v2/assets"
    query = params.to_params() if params else None
    payload = await trading_request(client, "GET", path, params=query)
    return decode_list(payload, Asset.from_api, path)


async def get_asset(client: Alpaca, symbol_or_asset_id: str) -> Asset:
    path = f"/v2/assets/{quote(symbol_or_asset_id.strip(), safe='')}"
    payload = await trading_request(client, "GET", path)
    return decode(payload, Asset.from_api, path)


async def get_option_contracts(
    client: Alpaca, params: OptionContractsParams | None = None
) -> OptionContractsPage:
    """One page of option contracts; pass `next_page_token` back as `page_token`."""
    path = "/v2/options/contracts"
    query = params.to_params() if params else None
    payload = await trading_request(client, "GET", path, params=query)
    return decode(payload, OptionContractsPage.from_api, path)


async def get_option_contract(client: Alpaca, symbol_or_id: str) -> OptionContract:
    path = f"/v2/options/contracts/{quote(symbol_or_id.strip(), safe='')}"
    payload = await trading_request(client, "GET", path)
    return decode(payload, OptionContract.from_api, path)
