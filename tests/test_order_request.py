from __future__ import annotations

import pytest

from alpaca_rest.domain.params import (
    ClosePositionParams,
    CreateWatchlistParams,
    GetOrdersParams,
    OrderClass,
    OrderRequest,
    OrderSide,
    OrderType,
    ReplaceOrderParams,
    StockBarsParams,
    TimeInForce,
    UpdateAccountConfigurations,
)
from alpaca_rest.errors import ValidationError


def _market_buy() -> OrderRequest:
    return (
        OrderRequest.builder()
        .symbol("aapl")
        .qty(10)
        .side(OrderSide.BUY)
        .order_type(OrderType.MARKET)
        .time_in_force(TimeInForce.DAY)
        .build()
    )


def test_minimal_order_serializes_only_set_fields() -> None:
    assert _market_buy().to_payload() == {
        "symbol": "AAPL",
        "qty": "10",
        "side": "buy",
        "type": "market",
        "time_in_force": "day",
    }


def test_notional_limit_order_with_optionals() -> None:
    request = (
        OrderRequest.builder()
        .symbol("MSFT")
        .notional("250.50")
        .side("sell")
        .order_type("limit")
        .time_in_force("gtc")
        .limit_price(412.1)
        .extended_hours()
        .client_order_id("my-order-1")
        .build()
    )

    assert request.side is OrderSide.SELL
    assert request.to_payload() == {
        "symbol": "MSFT",
        "notional": "250.50",
        "side": "sell",
        "type": "limit",
        "time_in_force": "gtc",
        "limit_price": "412.1",
        "extended_hours": True,
        "client_order_id": "my-order-1",
    }


def test_bracket_order_nests_take_profit_and_stop_loss() -> None:
    payload = (
        OrderRequest.builder()
        .symbol("SPY")
        .qty(1)
        .side("buy")
        .order_type("market")
        .time_in_force("day")
        .order_class(OrderClass.BRACKET)
        .take_profit(510)
        .stop_loss(480, limit_price=479.5)
        .build()
        .to_payload()
    )

    assert payload["order_class"] == "bracket"
    assert payload["take_profit"] == {"limit_price": "510"}
    assert payload["stop_loss"] == {"stop_price": "480", "limit_price": "479.5"}
    assert "legs" not in payload


def test_multi_leg_order_serializes_legs() -> None:
    payload = (
        OrderRequest.builder()
        .symbol("AAPL")
        .qty(1)
        .side("buy")
        .order_type("limit")
        .time_in_force("day")
        .limit_price(1.25)
        .order_class("mleg")
        .leg("AAPL250620C00200000", 1, side="buy", position_intent="buy_to_open")
        .leg("AAPL250620C00210000", 1, side="sell")
        .build()
        .to_payload()
    )

    assert payload["legs"] == [
        {
            "symbol": "AAPL250620C00200000",
            "ratio_qty": "1",
            "side": "buy",
            "position_intent": "buy_to_open",
        },
        {"symbol": "AAPL250620C00210000", "ratio_qty": "1", "side": "sell"},
    ]


@pytest.mark.parametrize("missing", ["symbol", "side", "type", "time_in_force"])
def test_build_fails_when_required_field_missing(missing: str) -> None:
    builder = OrderRequest.builder().qty(1)
    setters = {
        "symbol": lambda b: b.symbol("AAPL"),
        "side": lambda b: b.side("buy"),
        "type": lambda b: b.order_type("market"),
        "time_in_force": lambda b: b.time_in_force("day"),
    }
    for name, setter in setters.items():
        if name != missing:
            setter(builder)

    with pytest.raises(ValidationError, match=missing):
        builder.build()


def test_build_rejects_qty_and_notional_together() -> None:
    builder = (
        OrderRequest.builder()
        .symbol("AAPL")
        .qty(1)
        .notional(100)
        .side("buy")
        .order_type("market")
        .time_in_force("day")
    )

    with pytest.raises(ValidationError, match="only one"):
        builder.build()


def test_build_rejects_neither_qty_nor_notional() -> None:
    builder = OrderRequest.builder().symbol("AAPL").side("buy").order_type("market").time_in_force("day")

    with pytest.raises(ValidationError, match="one of 'qty' or 'notional'"):
        builder.build()


def test_build_rejects_unknown_enum_value() -> None:
    builder = (
        OrderRequest.builder()
        .symbol("AAPL")
        .qty(1)
        .side("hold")
        .order_type("market")
        .time_in_force("day")
    )

    with pytest.raises(ValidationError, match="side must be one of"):
        builder.build()


def test_blank_symbol_is_missing() -> None:
    builder = (
        OrderRequest.builder()
        .symbol("  ")
        .qty(1)
        .side("buy")
        .order_type("market")
        .time_in_force("day")
    )

    with pytest.raises(ValidationError, match="symbol"):
        builder.build()


def test_query_params_drop_none_and_render_bools_and_lists() -> None:
    params = GetOrdersParams(status="all", nested=True, symbols=["AAPL", "MSFT"], limit=50)

    assert params.to_params() == {
        "status": "all",
        "limit": "50",
        "nested": "true",
        "symbols": "AAPL,MSFT",
    }


def test_close_position_params_are_exclusive() -> None:
    assert ClosePositionParams(percentage=50).to_params() == {"percentage": "50"}
    with pytest.raises(ValidationError):
        ClosePositionParams(qty=1, percentage=50)


def test_replace_order_payload_stringifies_numbers() -> None:
    params = ReplaceOrderParams(qty=5, limit_price=101.5, time_in_force=TimeInForce.GTC)

    assert params.to_payload() == {"qty": "5", "time_in_force": "gtc", "limit_price": "101.5"}


def test_account_configuration_payload_keeps_booleans_and_level() -> None:
    changes = UpdateAccountConfigurations(no_shorting=True, max_options_trading_level=2)

    assert changes.to_payload() == {"no_shorting": True, "max_options_trading_level": 2}


def test_create_watchlist_requires_name() -> None:
    with pytest.raises(ValidationError):
        CreateWatchlistParams(name=" ")


def test_stock_bars_params_normalize_symbols_and_timeframe() -> None:
    params = StockBarsParams(symbols=[" aapl", "msft"], timeframe="1h", limit=5)

    assert params.to_params() == {"symbols": "AAPL,MSFT", "timeframe": "1Hour", "limit": "5"}


def test_stock_bars_params_require_a_symbol() -> None:
    with pytest.raises(ValidationError):
        StockBarsParams(symbols=[])


def test_direct_construction_rejects_qty_and_notional() -> None:
    with pytest.raises(ValidationError, match="only one"):
        OrderRequest(
            symbol="AAPL",
            side=OrderSide.BUY,
            type=OrderType.MARKET,
            time_in_force=TimeInForce.DAY,
            qty=1,
            notional=100,
        )


def test_direct_construction_coerces_plain_strings() -> None:
    request = OrderRequest(symbol=" aapl ", side="BUY", type="market", time_in_force="day", qty=1)

    assert request.side is OrderSide.BUY
    assert request.type is OrderType.MARKET
    assert request.to_payload() == {
        "symbol": "AAPL",
        "qty": "1",
        "side": "buy",
        "type": "market",
        "time_in_force": "day",
    }


def test_direct_construction_rejects_unknown_time_in_force() -> None:
    with pytest.raises(ValidationError, match="time_in_force must be one of"):
        OrderRequest(symbol="AAPL", side="buy", type="market", time_in_force="forever", qty=1)


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_qty_counts_as_unset(blank: str) -> None:
    builder = (
        OrderRequest.builder()
        .symbol("AAPL")
        .qty(blank)
        .side("buy")
        .order_type("market")
        .time_in_force("day")
    )

    with pytest.raises(ValidationError, match="one of 'qty' or 'notional'"):
        builder.build()


def test_blank_qty_does_not_clash_with_notional() -> None:
    request = (
        OrderRequest.builder()
        .symbol("AAPL")
        .qty("")
        .notional("50")
        .side("buy")
        .order_type("market")
        .time_in_force("day")
        .build()
    )

    payload = request.to_payload()
    assert "qty" not in payload
    assert payload["notional"] == "50"
