"""Order submission, lookup, replacement and cancellation."""

from __future__ import annotations

from urllib.parse import quote

from alpaca_rest.auth import Alpaca
from alpaca_rest.domain.models import CanceledOrder, Order
from alpaca_rest.domain.params import GetOrdersParams, OrderRequest, ReplaceOrderParams
from alpaca_rest.transport import decode, decode_list, trading_request


def _order_path(order_id: str) -> str:
    return f"/v2/orders/{quote(order_id.strip(), safe='')}"


async def create_order(client: Alpaca, request: OrderRequest) -> Order:
    """Submit a validated order request and return the accepted order."""
    path = "/v2/orders"
    payload = await trading_request(client, "POST", path, json=request.to_payload())
    return decode(payload, Order.from_api, path)


async def get_orders(client: Alpaca, params: GetOrdersParams | None = None) -> list[Order]:
    path = "/v2/orders"
    query = params.to_params() if params else None
    payload = await trading_request(client, "GET", path, params=query)
    return decode_list(payload, Order.from_api, path)


async def get_order_by_id(client: Alpaca, order_id: str, nested: bool = False) -> Order:
    path = _order_path(order_id)
    query = {"nested": "true"} if nested else None
    payload = await trading_request(client, "GET", path, params=query)
    return decode(payload, Order.from_api, path)


async def get_order_by_client_order_id(client: Alpaca, client_order_id: str) -> Order:
    path = "/v2/orders:by_client_order_id"
    payload = await trading_request(
        client, "GET", path, params={"client_order_id": client_order_id}
    )
    return decode(payload, Order.from_api, path)


async def replace_order(client: Alpaca, order_id: str, changes: ReplaceOrderParams) -> Order:
    """Replace an open order; Alpaca returns the new order that supersedes it."""
    path = _order_path(order_id)
    payload = await trading_request(client, "PATCH", path, json=changes.to_payload())
    return decode(payload, Order.from_api, path)


async def cancel_order(client: Alpaca, order_id: str) -> None:
    await trading_request(client, "DELETE", _order_path(order_id))


async def cancel_all_orders(client: Alpaca) -> list[CanceledOrder]:
    path = "/v2/orders"
    payload = await trading_request(client, "DELETE", path)
    if payload is None:
        return []
    return decode_list(payload, CanceledOrder.from_api, path)
