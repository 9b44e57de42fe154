"""Helpers for timestamps, support folders, book rows, strategy and contract registries."""

from __future__ import annotations

import weakref
from datetime import datetime
from pathlib import Path

from tradedesk.enums import StrategyStatus
from tradedesk.structures import MarketWatchData, OrderInfo, StrategyRow

SUPPORT_FOLDERS = ("Save", "Config", "Automation")

_TICKS_PER_SECOND = 10_000_000_000
_EPOCH_OFFSET = 315_513_000
_FRACTION_MODULUS = 1_000_000_000


def format_time_to_string(time: int) -> str:
    """Render an exchange timestamp as local ``YYYY-MM-DD HH:MM:SS.nnnnnnnnn``."""
    if time < 0:
        raise ValueError(f"timestamp must not be negative: {time}")
    seconds = time // _TICKS_PER_SECOND + _EPOCH_OFFSET
    stamp = datetime.fromtimestamp(seconds).strftime("%Y-%m-%d %H:%M:%S")
    return f"{stamp}.{time % _FRACTION_MODULUS:09d}"


def create_support_folders(base: str | Path = ".") -> list[Path]:
    """Create the folders the application saves into, under ``base``; return their paths."""
    root = Path(base)
    created = []
    for name in SUPPORT_FOLDERS:
        path = root / name
        path.mkdir(exist_ok=True)
        created.append(path)
    return created


def trade_row_cells(trade: OrderInfo) -> tuple[str, ...]:
    """Text of each cell of an order book row, in book column order."""
    return (
        str(trade.pf),
        trade.contract,
        f"{trade.price:.2f}",
        str(trade.quantity),
        f"{trade.fill_price:.2f}",
        str(trade.fill_quantity),
        str(trade.remaining),
        trade.client,
        trade.status.display_name(),
        trade.time,
        str(trade.gateway),
        str(trade.order_no),
        trade.message,
    )


class StrategyRegistry:
    """Maps portfolio numbers to strategy rows without keeping the rows alive."""

    def __init__(self) -> None:
        self._rows: dict[int, weakref.ReferenceType[StrategyRow]] = {}

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, pf: object) -> bool:
        return pf in self._rows

    def append(self, pf: int, row: StrategyRow) -> bool:
        """Register ``row`` under ``pf``; an existing entry is kept. Return whether it was added."""
        if pf in self._rows:
            return False
        self._rows[pf] = weakref.ref(row)
        return True

    def get(self, pf: int) -> StrategyRow | None:
        """The live row registered under ``pf``, or None if absent or gone."""
        ref = self._rows.get(pf)
        return ref() if ref is not None else None

    def remove_expired(self) -> int:
        """Drop entries whose rows no longer exist; return how many were dropped."""
        expired = [pf for pf, ref in self._rows.items() if ref() is None]
        for pf in expired:
            del self._rows[pf]
        return len(expired)

    def reset(self, status: StrategyStatus) -> None:
        """Unsubscribe every live row and set its status."""
        for ref in list(self._rows.values()):
            row = ref()
            if row is not None:
                row.subscribed = False
                row.status = status


def _passes_filter(text: str, pattern: str) -> bool:
    """Comma-separated, case-insensitive terms; a leading '-' excludes."""
    haystack = text.lower()
    includes = 0
    for term in (part.strip() for part in pattern.split(",")):
        if not term:
            continue
        if term.startswith("-"):
            if term[1:].lower() in haystack:
                return False
        else:
            includes += 1
            if term.lower() in haystack:
                return True
    return includes == 0


class ContractDirectory:
    """All known contracts with their market data, in the order they were loaded."""

    def __init__(self) -> None:
        self._market_data: dict[int, MarketWatchData] = {}
        self._contracts: list[str] = []

    def __len__(self) -> int:
        return len(self._contracts)

    @property
    def contracts(self) -> tuple[str, ...]:
        """Contract names in load order."""
        return tuple(self._contracts)

    def add_contract(
        self, token: int, description: str, ltp: float, low: float, high: float
    ) -> MarketWatchData:
        """Record a contract; market data already held for ``token`` is kept."""
        data = MarketWatchData(
            token=token,
            description=description,
            last_trade_price=ltp,
            low_price=low,
            high_price=high,
            close_price=ltp,
        )
        stored = self._market_data.setdefault(token, data)
        self._contracts.append(description)
        return stored

    def get(self, token: int) -> MarketWatchData | None:
        """Market data for ``token``, or None if unknown."""
        return self._market_data.get(token)

    def filter(self, text: str) -> list[str]:
        """Contracts starting with the filter's first letter that pass the filter."""
        if not text:
            return []
        first = text[0].upper()
        return [
            name
            for name in self._contracts
            if name[:1] == first and _passes_filter(name, text)
        ]