"""Crypto wallets, transfers and withdrawal whitelists."""

from __future__ import annotations

from urllib.parse import quote

from alpaca_rest.auth import Alpaca
from alpaca_rest.domain.models import (
    CryptoTransfer,
    CryptoWallet,
    GasFeeEstimate,
    WhitelistedAddress,
)
from alpaca_rest.domain.params import (
    CryptoWithdrawalParams,
    GasFeeEstimateParams,
    WhitelistAddressParams,
)
from alpaca_rest.transport import decode, decode_list, trading_request

WALLETS_PATH = "/v2/wallets"
TRANSFERS_PATH = "/v2/wallets/transfers"
WHITELIST_PATH = "/v2/wallets/whitelists"


async def get_crypto_wallet(client: Alpaca, asset: str | None = None) -> CryptoWallet:
    """Deposit wallet for `asset` (for example `USDC`), or the account default."""
    query = {"asset": asset.strip().upper()} if asset else None
    payload = await trading_request(client, "GET", WALLETS_PATH, params=query)
    return decode(payload, CryptoWallet.from_api, WALLETS_PATH)


async def get_crypto_transfers(client: Alpaca) -> list[CryptoTransfer]:
    payload = await trading_request(client, "GET", TRANSFERS_PATH)
    return decode_list(payload, CryptoTransfer.from_api, TRANSFERS_PATH)


async def get_crypto_transfer(client: Alpaca, transfer_id: str) -> CryptoTransfer:
    path = f"{TRANSFERS_PATH}/{quote(transfer_id.strip(), safe='')}"
    payload = await trading_request(client, "GET", path)
    return decode(payload, CryptoTransfer.from_api, path)


async def request_crypto_withdrawal(
    client: Alpaca, params: CryptoWithdrawalParams
) -> CryptoTransfer:
    payload = await trading_request(client, "POST", TRANSFERS_PATH, json=params.to_payload())
    return decode(payload, CryptoTransfer.from_api, TRANSFERS_PATH)


async def get_whitelisted_addresses(client: Alpaca) -> list[WhitelistedAddress]:
    payload = await trading_request(client, "GET", WHITELIST_PATH)
    return decode_list(payload, WhitelistedAddress.from_api, WHITELIST_PATH)


async def add_whitelisted_address(
    client: Alpaca, params: WhitelistAddressParams
) -> WhitelistedAddress:
    payload = await trading_request(client, "POST", WHITELIST_PATH, json=params.to_payload())
    return decode(payload, WhitelistedAddress.from_api, WHITELIST_PATH)


async def delete_whitelisted_address(client: Alpaca, whitelisted_address_id: str) -> None:
    path = f"{WHITELIST_PATH}/{quote(whitelisted_address_id.strip(), safe='')}"
    await trading_request(client, "DELETE", path)


async def estimate_gas_fee(client: Alpaca, params: GasFeeEstimateParams) -> GasFeeEstimate:
    path = "/v2/wallets/fees/estimate"
    payload = await trading_request(client, "GET", path, params=params.to_params())
    return decode(payload, GasFeeEstimate.from_api, path)
