"""Header labels for the application's tables."""

from __future__ import annotations

from enum import IntEnum

from tradedesk.enums import (
    BooksColumnIndex,
    ColumnGeneratorColumnIndex,
    ExcelSecondColumn,
    ExcelThirdColumn,
    GreekBookColumnIndex,
    MarketWatchColumnIndex,
    MarketWatchToolTipColumnIndex,
    OptionChainColumnIndex,
    PFWiseNetBookColumnIndex,
    ScannerFunctionColumnIndex,
    ScannerSavedColumnIndex,
    SymbolWiseNetBookColumnIndex,
    TradeTrackerColumn,
)

BOOK_TABLE_COLUMNS = (
    "PF",
    "Contract",
    "Price",
    "Quantity",
    "FillPrice",
    "FillQuantity",
    "Remaining",
    "Client",
    "Status",
    "Time",
    "GateWay",
    "OrderNumber",
    "Message",
)

SYMBOL_WISE_TABLE_COLUMNS = (
    "Contract",
    "AvgBid",
    "BuyQty",
    "SellQty",
    "AvgSell",
    "Total",
    "NetInvest",
    "MTM",
    "LTP",
    "PNL",
)

PF_WISE_TABLE_COLUMNS = ("PF",) + SYMBOL_WISE_TABLE_COLUMNS

GREEK_BOOK_COLUMNS = (
    "Symbol",
    "Delta",
    "Gamma",
    "Vega",
    "Theta",
    "MTM",
    "MarketRate",
    "Value",
)

COLUMN_GENERATOR_COLUMNS = ("NAME", "TYPE", "VALUE")

MARKET_WATCH_COLUMNS = (
    "Contract",
    "ATP",
    "LTP",
    "LTQ",
    "LTT",
    "TopBid",
    "TopAsk",
    "Open",
    "High",
    "Low",
    "Close",
    "LowDPR",
    "HighDPR",
    "TotalBuyQuantity",
    "TotalSellQuantity",
    "VolumeTradedToday",
    "OpenInterest",
)

MARKET_WATCH_TOOLTIP_COLUMNS = (
    "Order",
    "Quantity",
    "Price",
    "Price",
    "Quantity",
    "Order",
)

_OPTION_SIDE = (
    "OI",
    "Volume",
    "Delta",
    "Gamma",
    "Vega",
    "Theta",
    "IV",
    "LTP",
    "Change",
    "Bid Qty",
    "Bid",
    "Ask",
    "Ask Qty",
)

OPTION_CHAIN_COLUMNS = (
    _OPTION_SIDE
    + ("Strike",)
    + ("Bid Qty", "Bid", "Ask", "Ask Qty", "Change", "LTP", "IV", "Theta", "Vega", "Gamma", "Delta", "Volume", "OI")
)

EXCEL_PRICE_COLUMNS = ("LTP", "ATP", "Open", "High", "Low", "Close")

EXCEL_STATS_COLUMNS = ("LowDPR", "HighDPR", "TBQ", "TSQ", "VTT", "OI")

SCANNER_FUNCTIONS = (
    "ATP",
    "PercentChange",
    "Open",
    "High",
    "Low",
    "Close",
    "HighDPR",
    "LowDPR",
    "TotalBuyQuantity",
    "TotalSellQuantity",
    "VolumeTradedToday",
    "OpenInterest",
    "LTP",
    "LTQ",
    "BidDepth",
    "AskDepth",
    "Expiry",
    "ExpiryWeek",
    "IsCall",
    "IsPut",
    "IsFuture",
)

SCANNER_TABLE_COLUMNS = ("Functions", "Variables")

TRADE_TRACKER_COLUMNS = ("ID", "Name", "Descriptions")

SCANNER_SAVED_COLUMNS = ("#", "Name", "Operations")

_TABLES: dict[type[IntEnum], tuple[str, ...]] = {
    BooksColumnIndex: BOOK_TABLE_COLUMNS,
    SymbolWiseNetBookColumnIndex: SYMBOL_WISE_TABLE_COLUMNS,
    PFWiseNetBookColumnIndex: PF_WISE_TABLE_COLUMNS,
    GreekBookColumnIndex: GREEK_BOOK_COLUMNS,
    ColumnGeneratorColumnIndex: COLUMN_GENERATOR_COLUMNS,
    MarketWatchColumnIndex: MARKET_WATCH_COLUMNS,
    MarketWatchToolTipColumnIndex: MARKET_WATCH_TOOLTIP_COLUMNS,
    OptionChainColumnIndex: OPTION_CHAIN_COLUMNS,
    ScannerFunctionColumnIndex: SCANNER_TABLE_COLUMNS,
    ScannerSavedColumnIndex: SCANNER_SAVED_COLUMNS,
    TradeTrackerColumn: TRADE_TRACKER_COLUMNS,
    ExcelSecondColumn: EXCEL_PRICE_COLUMNS,
    ExcelThirdColumn: EXCEL_STATS_COLUMNS,
}


def column_names(table: type[IntEnum]) -> tuple[str, ...]:
    """Return the header labels for the table indexed by ``table``, in member order."""
    try:
        return _TABLES[table]
    except (KeyError, TypeError):
        raise ValueError(f"no column names for table {table!r}") from None