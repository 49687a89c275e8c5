"""Account, configuration, activity and portfolio history endpoints."""

from __future__ import annotations

from urllib.parse import quote

from alpaca_rest.auth import Alpaca
from alpaca_rest.domain.models import (
    AccountActivity,
    AccountConfigurations,
    AccountInfo,
    PortfolioHistory,
)
from alpaca_rest.domain.params import (
    AccountActivitiesParams,
    PortfolioHistoryParams,
    UpdateAccountConfigurations,
)
from alpaca_rest.transport import decode, decode_list, trading_request


async def get_account_info(client: Alpaca) -> AccountInfo:
    """Fetch the account summary (cash, buying power, status flags)."""
    path = "/v2/account"
    payload = await trading_request(client, "GET", path)
    return decode(payload, AccountInfo.from_api, path)


async def get_account_configurations(client: Alpaca) -> AccountConfigurations:
    path = "/v2/account/configurations"
    payload = await trading_request(client, "GET", path)
    return decode(payload, AccountConfigurations.from_api, path)


async def update_account_configurations(
    client: Alpaca, changes: UpdateAccountConfigurations
) -> AccountConfigurations:
    path = "/v2/account/configurations"
    payload = await trading_request(client, "PATCH", path, json=changes.to_payload())
    return decode(payload, AccountConfigurations.from_api, path)


async def get_account_activities(
    client: Alpaca, params: AccountActivitiesParams | None = None
) -> list[AccountActivity]:
    path = "/v2/account/activities"
    query = params.to_params() if params else None
    payload = await trading_request(client, "GET", path, params=query)
    return decode_list(payload, AccountActivity.from_api, path)


async def get_account_activities_by_type(
    client: Alpaca,
    activity_type: str,
    params: AccountActivitiesParams | None = None,
) -> list[AccountActivity]:
    """Activities of a single type such as `FILL` or `DIV`."""
    path = f"/v2/account/activities/{quote(activity_type.strip().upper(), safe='')}"
    query = params.to_params() if params else None
    payload = await trading_request(client, "GET", path, params=query)
    return decode_list(payload, AccountActivity.from_api, path)


async def get_portfolio_history(
    client: Alpaca, params: PortfolioHistoryParams | None = None
) -> PortfolioHistory:
    path = "/v2/account/portfolio/history"
    query = params.to_params() if params else None
    payload = await trading_request(client, "GET", path, params=query)
    return decode(payload, PortfolioHistory.from_api, path)
