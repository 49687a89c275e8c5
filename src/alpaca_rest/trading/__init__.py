"""Trading API endpoint functions (paper or live host)."""

from alpaca_rest.trading.account import (
    get_account_activities,
    get_account_activities_by_type,
    get_account_configurations,
    get_account_info,
    get_portfolio_history,
    update_account_configurations,
)
from alpaca_rest.trading.assets import (
    get_asset,
    get_assets,
    get_option_contract,
    get_option_contracts,
)
from alpaca_rest.trading.calendar import get_calendar, get_clock
from alpaca_rest.trading.crypto_funding import (
    add_whitelisted_address,
    delete_whitelisted_address,
    estimate_gas_fee,
    get_crypto_transfer,
    get_crypto_transfers,
    get_crypto_wallet,
    get_whitelisted_addresses,
    request_crypto_withdrawal,
)
from alpaca_rest.trading.orders import (
    cancel_all_orders,
    cancel_order,
    create_order,
    get_order_by_client_order_id,
    get_order_by_id,
    get_orders,
    replace_order,
)
from alpaca_rest.trading.positions import (
    close_all_positions,
    close_position,
    exercise_option_position,
    get_position,
    get_positions,
)
from alpaca_rest.trading.watchlists import (
    add_asset_to_watchlist,
    add_asset_to_watchlist_by_name,
    create_watchlist,
    delete_all_watchlists,
    delete_watchlist,
    delete_watchlist_by_name,
    get_watchlist,
    get_watchlist_by_name,
    get_watchlists,
    remove_asset_from_watchlist,
    update_watchlist,
    update_watchlist_by_name,
)

__all__ = [
    "add_asset_to_watchlist",
    "add_asset_to_watchlist_by_name",
    "add_whitelisted_address",
    "cancel_all_orders",
    "cancel_order",
    "close_all_positions",
    "close_position",
    "create_order",
    "create_watchlist",
    "delete_all_watchlists",
    "delete_watchlist",
    "delete_watchlist_by_name",
    "delete_whitelisted_address",
    "estimate_gas_fee",
    "exercise_option_position",
    "get_account_activities",
    "get_account_activities_by_type",
    "get_account_configurations",
    "get_account_info",
    "get_asset",
    "get_assets",
    "get_calendar",
    "get_clock",
    "get_crypto_transfer",
    "get_crypto_transfers",
    "get_crypto_wallet",
    "get_option_contract",
    "get_option_contracts",
    "get_order_by_client_order_id",
    "get_order_by_id",
    "get_orders",
    "get_portfolio_history",
    "get_position",
    "get_positions",
    "get_watchlist",
    "get_watchlist_by_name",
    "get_watchlists",
    "get_whitelisted_addresses",
    "remove_asset_from_watchlist",
    "replace_order",
    "request_crypto_withdrawal",
    "update_account_configurations",
    "update_watchlist",
    "update_watchlist_by_name",
]
