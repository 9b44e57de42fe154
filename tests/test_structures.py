import pytest

from tradedesk.enums import DataType, OrderStatus, Side, StrategyStatus
from tradedesk.structures import (
    MARKET_WATCH_LADDER_COUNT,
    STRATEGY_NAME_LENGTH,
    MarketWatchData,
    OrderInfo,
    ParameterInfo,
    PricePoint,
    ScannerFunctionInfo,
    StrategyRow,
    TradeTrackerItem,
)


def test_ladder_constants_fixed_by_source():
    data = MarketWatchData()
    assert MARKET_WATCH_LADDER_COUNT == 5
    assert STRATEGY_NAME_LENGTH == 50
    assert len(data.bid) == 5
    assert len(data.ask) == 5
    data.set_description("C" * 50)
    assert len(data.description) == 50


def test_market_data_has_full_ladders():
    data = MarketWatchData()
    assert len(data.bid) == MARKET_WATCH_LADDER_COUNT
    assert len(data.ask) == MARKET_WATCH_LADDER_COUNT
    assert data.bid[0] is not data.bid[1]


def test_ladders_are_not_shared_between_instances():
    first = MarketWatchData()
    second = MarketWatchData()
    first.bid[0].price = 101.5
    assert second.bid[0].price == 0.0


def test_top_bid_and_ask_are_first_levels():
    data = MarketWatchData()
    data.bid[0] = PricePoint(price=99.5, quantity=10, order=2)
    data.ask[0] = PricePoint(price=100.5, quantity=7, order=1)
    assert data.top_bid() == PricePoint(99.5, 10, 2)
    assert data.top_ask() == PricePoint(100.5, 7, 1)


def test_wrong_ladder_length_rejected():
    with pytest.raises(ValueError):
        MarketWatchData(bid=[PricePoint()])


def test_set_description_round_trip():
    data = MarketWatchData()
    data.set_description("NIFTY FUT")
    assert data.description == "NIFTY FUT"


def test_description_at_limit_accepted():
    data = MarketWatchData()
    text = "A" * STRATEGY_NAME_LENGTH
    data.set_description(text)
    assert data.description == text


def test_description_over_limit_rejected():
    data = MarketWatchData()
    with pytest.raises(ValueError):
        data.set_description("A" * (STRATEGY_NAME_LENGTH + 1))
    with pytest.raises(ValueError):
        MarketWatchData(description="B" * (STRATEGY_NAME_LENGTH + 1))


def test_order_info_defaults():
    order = OrderInfo()
    assert order.side is Side.BUY
    assert order.status is OrderStatus.PLACED
    assert order.quantity == 0 and order.contract == ""


def test_strategy_row_parameters_independent():
    first = StrategyRow(pf=1)
    second = StrategyRow(pf=2)
    first.parameters["Lot"] = ParameterInfo(type=DataType.INT)
    assert "Lot" not in second.parameters
    assert first.status is StrategyStatus.PENDING


def test_parameter_info_value_is_mutable_per_instance():
    info = ParameterInfo(type=DataType.FLOAT)
    other = ParameterInfo()
    info.parameter.floating = 2.5
    assert other.parameter.floating == 0.0
    assert info.parameter.floating == 2.5


def test_scanner_variable_single_character():
    assert ScannerFunctionInfo(variable="a", name="LTP").variable == "a"
    with pytest.raises(ValueError):
        ScannerFunctionInfo(variable="ab")


def test_trade_tracker_item_equality():
    assert TradeTrackerItem(3, "Straddle", "placed") == TradeTrackerItem(
        pf=3, strategy="Straddle", descriptions="placed"
    )