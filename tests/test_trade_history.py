from tradedesk.colors import GREEN, RED
from tradedesk.enums import BooksColumnIndex, Side
from tradedesk.structures import OrderInfo
from tradedesk.trade_history import TradeHistory


def _trade(order_no, side, price=10.0, quantity=2):
    return OrderInfo(order_no=order_no, side=side, price=price, quantity=quantity)


def test_insert_is_pending_until_processed():
    history = TradeHistory()
    assert history.insert(_trade(1, Side.BUY)) is True
    assert len(history) == 0
    assert history.process_pending() == 1
    assert len(history) == 1
    assert history.process_pending() == 0


def test_totals():
    history = TradeHistory()
    history.insert(_trade(1, Side.BUY, 10.0, 2))
    history.insert(_trade(2, Side.BUY, 5.0, 4))
    history.insert(_trade(3, Side.SELL, 8.0, 1))
    history.process_pending()
    assert history.total_buy == 2
    assert history.total_sell == 1
    assert history.buy_value == 10.0 * 2 + 5.0 * 4
    assert history.sell_value == 8.0
    assert history.net_value == history.total_sell - history.total_buy
    assert history.net_value_color == RED


def test_net_color_positive():
    history = TradeHistory()
    history.insert(_trade(1, Side.SELL))
    history.process_pending()
    assert history.net_value_color == GREEN


def test_rows_newest_first():
    history = TradeHistory()
    for number in (1, 2, 3):
        history.insert(_trade(number, Side.BUY))
    history.process_pending()
    numbers = [row[BooksColumnIndex.ORDERNUMBER] for row in history.rows()]
    assert numbers == ["3", "2", "1"]
    assert [t.order_no for t in history.trades] == [1, 2, 3]


def test_full_queue_drops():
    history = TradeHistory(capacity=2)
    assert history.insert(_trade(1, Side.BUY))
    assert history.insert(_trade(2, Side.BUY))
    assert history.insert(_trade(3, Side.BUY)) is False
    assert history.process_pending() == 2


def test_summary_line():
    history = TradeHistory()
    history.insert(_trade(1, Side.BUY, 10.0, 2))
    history.process_pending()
    line = history.summary_line()
    assert line.startswith("| Total : [1] |")
    assert "| Buy : [1] |" in line
    assert "| Buy Value : [20.00] |" in line
    assert "| Sell : [0] |" in line
    assert line.endswith("| Net Value : [-1.00] |")