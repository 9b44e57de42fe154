"""The tracker: a running log of strategy events."""

from __future__ import annotations

import queue

from tradedesk.structures import TradeTrackerItem

DEFAULT_CAPACITY = 30000


class TradeTracker:
    """Collects tracker entries handed in from any thread."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._pending: queue.Queue[TradeTrackerItem] = queue.Queue(maxsize=capacity)
        self._items: list[TradeTrackerItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def insert(self, item: TradeTrackerItem) -> bool:
        """Queue an entry; return False if the queue is full and it was dropped."""
        try:
            self._pending.put_nowait(item)
        except queue.Full:
            return False
        return True

    def process_pending(self) -> int:
        """Move queued entries into the log; return how many moved."""
        moved = 0
        while True:
            try:
                item = self._pending.get_nowait()
            except queue.Empty:
                return moved
            self._items.append(item)
            moved += 1

    def rows(self) -> list[tuple[str, str, str]]:
        """Table rows ``(id, name, descriptions)``, oldest first; the id is the row number."""
        return [
            (str(index), item.strategy, item.descriptions)
            for index, item in enumerate(self._items)
        ]

    def clear(self) -> None:
        """Forget every processed entry."""
        self._items.clear()

    def status_line(self) -> str:
        """The count line shown under the tracker."""
        return f"Tracker [{len(self._items)}]"