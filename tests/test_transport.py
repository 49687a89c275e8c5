from __future__ import annotations

import asyncio

import pytest
import requests

from alpaca_rest.domain.params import OrderRequest, StockBarsParams
from alpaca_rest.errors import ApiError, TransportError
from alpaca_rest.market_data import get_stock_bars
from alpaca_rest.trading import create_order, get_account_info, get_positions
from alpaca_rest.transport import trading_request

ACCOUNT = {
    "id": "904837e3-3b76-47ec-b432-046db621571b",
    "account_number": "PA3ABCDEFG",
    "status": "ACTIVE",
    "currency": "USD",
    "cash": "100000.12",
    "buying_power": "400000.48",
    "equity": "100000.12",
    "portfolio_value": "100000.12",
    "daytrade_count": 0,
    "pattern_day_trader": False,
    "shorting_enabled": True,
    "trading_blocked": False,
    "crypto_status": "ACTIVE",
    "options_approved_level": 2,
    "some_new_field": {"ignored": True},
}


def test_account_info_fields_match_json(fake_http, client) -> None:
    fake_http.reply(ACCOUNT)

    account = asyncio.run(get_account_info(client))

    assert account.id == ACCOUNT["id"]
    assert account.account_number == "PA3ABCDEFG"
    assert account.status == "ACTIVE"
    assert account.cash == "100000.12"
    assert account.buying_power == "400000.48"
    assert account.shorting_enabled is True
    assert account.options_approved_level == 2
    assert account.last_equity is None


def test_request_carries_auth_headers_and_timeout(fake_http, client) -> None:
    fake_http.reply(ACCOUNT)

    asyncio.run(get_account_info(client))

    call = fake_http.last
    assert call["method"] == "GET"
    assert call["url"] == "https://paper-api.alpaca.markets/v2/account"
    assert call["headers"]["APCA-API-KEY-ID"] == "key-id"
    assert call["headers"]["APCA-API-SECRET-KEY"] == "secret-key"
    assert "Content-Type" not in call["headers"]
    assert call["timeout"] == client.timeout


def test_json_body_sets_content_type(fake_http, client) -> None:
    fake_http.reply({"ok": True})

    asyncio.run(trading_request(client, "POST", "/v2/anything", json={"a": 1}))

    assert fake_http.last["headers"]["Content-Type"] == "application/json"
    assert fake_http.last["json"] == {"a": 1}


@pytest.mark.parametrize("status_code", [403, 422, 500])
def test_error_status_raises_api_error_with_upstream_message(
    fake_http, client, status_code: int
) -> None:
    fake_http.reply({"code": 40310000, "message": "insufficient buying power"}, status_code)

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(get_positions(client))

    error = excinfo.value
    assert error.status_code == status_code
    assert error.code == 40310000
    assert error.message == "insufficient buying power"
    assert error.path == "/v2/positions"


def test_non_json_error_body_is_kept_verbatim(fake_http, client) -> None:
    fake_http.reply("Bad Gateway", 502)

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(get_positions(client))

    assert excinfo.value.message == "Bad Gateway"
    assert excinfo.value.code is None


def test_empty_error_body(fake_http, client) -> None:
    fake_http.reply(None, 404)

    with pytest.raises(ApiError, match="No response body"):
        asyncio.run(get_positions(client))


def test_connection_failure_raises_transport_error(fake_http, client) -> None:
    fake_http.fail(requests.ConnectionError("connection refused"))

    with pytest.raises(TransportError, match="connection refused"):
        asyncio.run(get_account_info(client))


def test_timeout_raises_transport_error(fake_http, client) -> None:
    fake_http.fail(requests.Timeout("read timed out"))

    with pytest.raises(TransportError):
        asyncio.run(get_positions(client))


def test_invalid_json_raises_transport_error(fake_http, client) -> None:
    fake_http.reply("{not json")

    with pytest.raises(TransportError, match="not valid JSON"):
        asyncio.run(get_account_info(client))


def test_unexpected_shape_raises_transport_error(fake_http, client) -> None:
    fake_http.reply({"id": "only-an-id"})

    with pytest.raises(TransportError, match="Unexpected response shape"):
        asyncio.run(get_account_info(client))


def test_list_endpoint_rejects_object_body(fake_http, client) -> None:
    fake_http.reply({"positions": []})

    with pytest.raises(TransportError, match="JSON array"):
        asyncio.run(get_positions(client))


def test_concurrent_calls_share_one_handle(fake_http, client) -> None:
    fake_http.reply(ACCOUNT)
    fake_http.reply(ACCOUNT)

    async def _both():
        return await asyncio.gather(get_account_info(client), get_account_info(client))

    first, second = asyncio.run(_both())

    assert first == second
    assert len(fake_http.calls) == 2


def _submit_order(client):
    request = (
        OrderRequest.builder()
        .symbol("AAPL")
        .qty(1)
        .side("buy")
        .order_type("market")
        .time_in_force("day")
        .build()
    )
    return create_order(client, request)


def _fetch_bars(client):
    return get_stock_bars(client, StockBarsParams(symbols=["AAPL"]))


ENDPOINT_CALLS = [
    pytest.param(_submit_order, "/v2/orders", id="trading-post"),
    pytest.param(_fetch_bars, "/v2/stocks/bars", id="data-get"),
]


@pytest.mark.parametrize(("call", "path"), ENDPOINT_CALLS)
def test_endpoints_raise_api_error_on_4xx(fake_http, client, call, path: str) -> None:
    fake_http.reply({"code": 42210000, "message": "invalid request"}, 422)

    with pytest.raises(ApiError) as excinfo:
        asyncio.run(call(client))

    assert excinfo.value.status_code == 422
    assert excinfo.value.code == 42210000
    assert excinfo.value.message == "invalid request"
    assert excinfo.value.path == path


@pytest.mark.parametrize(("call", "path"), ENDPOINT_CALLS)
def test_endpoints_raise_transport_error_on_connection_failure(
    fake_http, client, call, path: str
) -> None:
    fake_http.fail(requests.ConnectionError("connection reset"))

    with pytest.raises(TransportError, match=path):
        asyncio.run(call(client))

    assert fake_http.last["url"].endswith(path)
