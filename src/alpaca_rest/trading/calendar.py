"""Market clock and trading calendar."""

from __future__ import annotations

from alpaca_rest.auth import Alpaca
from alpaca_rest.domain.models import CalendarDay, Clock
from alpaca_rest.domain.params import CalendarParams
from alpaca_rest.transport import decode, decode_list, trading_request


async def get_clock(client: Alpaca) -> Clock:
    path = "/v2/clock"
    payload = await trading_request(client, "GET", path)
    return decode(payload, Clock.from_api, path)


async def get_calendar(client: Alpaca, params: CalendarParams | None = None) -> list[CalendarDay]:
    path = "/v2/calendar"
    query = params.to_params() if params else None
    payload = await trading_request(client, "GET", path, params=query)
    return decode_list(payload, CalendarDay.from_api, path)
