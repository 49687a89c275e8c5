"""HTTP exchange with Alpaca: header injection, error mapping, async dispatch."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

import requests

from alpaca_rest.auth import Alpaca
from alpaca_rest.errors import ApiError, TransportError

T = TypeVar("T")

logger = logging.getLogger("alpaca_rest.transport")


def _send(
    client: Alpaca,
    base_url: str,
    method: str,
    path: str,
    json: Mapping[str, Any] | list[Any] | None = None,
    params: Mapping[str, str] | None = None,
) -> Any:
    url = f"{base_url.rstrip('/')}{path}"
    headers = client.auth_headers()
    if json is not None:
        headers["Content-Type"] = "application/json"
    logger.debug("%s %s params=%s", method, path, dict(params) if params else {})
    try:
        response = requests.request(
            method=method,
            url=url,
            headers=headers,
            json=json,
            params=params,
            timeout=client.timeout,
        )
    except requests.RequestException as exc:
        raise TransportError(f"Alpaca request failed for {path}: {exc}") from exc

    logger.debug("%s %s -> %s", method, path, response.status_code)
    if response.status_code >= 400:
        raise ApiError.from_body(response.status_code, response.text or "", path)

    if response.status_code == 204 or not (response.text or "").strip():
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise TransportError(f"Alpaca response for {path} was not valid JSON") from exc


async def trading_request(
    client: Alpaca,
    method: str,
    path: str,
    json: Mapping[str, Any] | list[Any] | None = None,
    params: Mapping[str, str] | None = None,
) -> Any:
    """Send one request to the trading API and return the decoded JSON body."""
    return await asyncio.to_thread(
        _send, client, client.trading_url, method, path, json, params
    )


async def data_request(
    client: Alpaca,
    path: str,
    params: Mapping[str, str] | None = None,
) -> Any:
    """Send one GET request to the market data API and return the decoded JSON body."""
    return await asyncio.to_thread(_send, client, client.data_url, "GET", path, None, params)


def decode(payload: Any, parser: Callable[[Any], T], path: str) -> T:
    """Convert a decoded body into a typed value, mapping shape mismatches to TransportError."""
    try:
        return parser(payload)
    except (KeyError, TypeError, ValueError, AttributeError) as exc:
        raise TransportError(f"Unexpected response shape for {path}: {exc}") from exc


def decode_list(payload: Any, parser: Callable[[Any], T], path: str) -> list[T]:
    if not isinstance(payload, list):
        raise TransportError(f"Expected a JSON array from {path}.")
    return [decode(item, parser, path) for item in payload]
