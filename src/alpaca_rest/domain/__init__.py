"""Request and response types for the Alpaca REST API."""

from alpaca_rest.domain.market import (
    AuctionDay,
    AuctionPrint,
    AuctionsPage,
    Bar,
    BarsPage,
    Quote,
    QuotesPage,
    Snapshot,
    Trade,
    TradesPage,
)
from alpaca_rest.domain.models import (
    AccountActivity,
    AccountConfigurations,
    AccountInfo,
    Asset,
    CalendarDay,
    CanceledOrder,
    Clock,
    ClosedPosition,
    CryptoTransfer,
    CryptoWallet,
    Deliverable,
    GasFeeEstimate,
    OptionContract,
    OptionContractsPage,
    Order,
    PortfolioHistory,
    Position,
    Watchlist,
    WhitelistedAddress,
)
from alpaca_rest.domain.params import (
    AccountActivitiesParams,
    CalendarParams,
    ClosePositionParams,
    CreateWatchlistParams,
    CryptoWithdrawalParams,
    GasFeeEstimateParams,
    GetAssetsParams,
    GetOrdersParams,
    LatestParams,
    OptionContractsParams,
    OrderClass,
    OrderLeg,
    OrderRequest,
    OrderRequestBuilder,
    OrderSide,
    OrderType,
    PortfolioHistoryParams,
    PositionIntent,
    ReplaceOrderParams,
    StockAuctionsParams,
    StockBarsParams,
    StockQuotesParams,
    StockTradesParams,
    StopLoss,
    TakeProfit,
    TimeInForce,
    UpdateAccountConfigurations,
    UpdateWatchlistParams,
    WhitelistAddressParams,
)

__all__ = [
    "AccountActivitiesParams",
    "AccountActivity",
    "AccountConfigurations",
    "AccountInfo",
    "Asset",
    "AuctionDay",
    "AuctionPrint",
    "AuctionsPage",
    "Bar",
    "BarsPage",
    "CalendarDay",
    "CalendarParams",
    "CanceledOrder",
    "Clock",
    "ClosePositionParams",
    "ClosedPosition",
    "CreateWatchlistParams",
    "CryptoTransfer",
    "CryptoWallet",
    "CryptoWithdrawalParams",
    "Deliverable",
    "GasFeeEstimate",
    "GasFeeEstimateParams",
    "GetAssetsParams",
    "GetOrdersParams",
    "LatestParams",
    "OptionContract",
    "OptionContractsPage",
    "OptionContractsParams",
    "Order",
    "OrderClass",
    "OrderLeg",
    "OrderRequest",
    "OrderRequestBuilder",
    "OrderSide",
    "OrderType",
    "PortfolioHistory",
    "PortfolioHistoryParams",
    "Position",
    "PositionIntent",
    "Quote",
    "QuotesPage",
    "ReplaceOrderParams",
    "Snapshot",
    "StockAuctionsParams",
    "StockBarsParams",
    "StockQuotesParams",
    "StockTradesParams",
    "StopLoss",
    "TakeProfit",
    "TimeInForce",
    "Trade",
    "TradesPage",
    "UpdateAccountConfigurations",
    "UpdateWatchlistParams",
    "Watchlist",
    "WhitelistAddressParams",
    "WhitelistedAddress",
]
