"""The trade book: filled trades with running buy and sell totals."""

from __future__ import annotations

import queue

from tradedesk.colors import Color, up_down_color
from tradedesk.enums import Side
from tradedesk.structures import OrderInfo
from tradedesk.utils import trade_row_cells

DEFAULT_CAPACITY = 30000


class TradeHistory:
    """Collects trades handed in from any thread and keeps running totals."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._pending: queue.Queue[OrderInfo] = queue.Queue(maxsize=capacity)
        self._trades: list[OrderInfo] = []
        self.total_buy = 0
        self.total_sell = 0
        self.buy_value = 0.0
        self.sell_value = 0.0
        self.net_value = 0.0

    def __len__(self) -> int:
        return len(self._trades)

    @property
    def trades(self) -> tuple[OrderInfo, ...]:
        """Processed trades, oldest first."""
        return tuple(self._trades)

    @property
    def net_value_color(self) -> Color:
        """Colour used to show the net value."""
        return up_down_color(self.net_value)

    def insert(self, order: OrderInfo) -> bool:
        """Queue a trade; return False if the queue is full and the trade was dropped."""
        try:
            self._pending.put_nowait(order)
        except queue.Full:
            return False
        return True

    def process_pending(self) -> int:
        """Move queued trades into the book and update totals; return how many moved."""
        moved = 0
        while True:
            try:
                order = self._pending.get_nowait()
            except queue.Empty:
                return moved
            self._record(order)
            moved += 1

    def _record(self, order: OrderInfo) -> None:
        self._trades.append(order)
        if order.side == Side.BUY:
            self.total_buy += 1
            self.buy_value += order.price * order.quantity
        elif order.side == Side.SELL:
            self.total_sell += 1
            self.sell_value += order.price * order.quantity
        self.net_value = float(self.total_sell - self.total_buy)

    def rows(self) -> list[tuple[str, ...]]:
        """Table rows for the processed trades, newest first."""
        return [trade_row_cells(order) for order in reversed(self._trades)]

    def summary_line(self) -> str:
        """The totals line shown under the trade book."""
        return " ".join(
            (
                f"| Total : [{len(self._trades)}] |",
                f"| Buy : [{self.total_buy}] |",
                f"| Buy Value : [{self.buy_value:.2f}] |",
                f"| Sell : [{self.total_sell}] |",
                f"| Sell Value : [{self.sell_value:.2f}] |",
                f"| Net Value : [{self.net_value:.2f}] |",
            )
        )