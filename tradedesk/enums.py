"""Enumerations for themes, data types, order and strategy states, and table columns."""

from __future__ import annotations

from enum import IntEnum

_VISUAL_THEME_NAMES = (
    "Material Light",
    "Material Dark",
    "One Light",
    "One Dark",
    "Arthur Light",
    "Arthur Dark",
    "Default Light",
    "Default Dark",
)

_DATA_TYPE_NAMES = (
    "CLIENT",
    "COMBO",
    "CONTRACT",
    "FLOAT",
    "INT",
    "TEXT",
    "RADIO",
    "UPDATES",
)

_ORDER_STATUS_NAMES = (
    "PLACED",
    "NEW",
    "REPLACED",
    "CANCELLED",
    "NEW_REJECT",
    "REPLACE_REJECT",
    "CANCEL_REJECT",
    "PARTIAL_FILLED",
    "FILLED",
)

_STRATEGY_STATUS_NAMES = (
    "PENDING",
    "ACTIVE",
    "APPLIED",
    "INACTIVE",
    "TERMINATED",
    "WAITING",
    "DISCONNECTED",
)

_ORDER_TYPE_NAMES = ("Limit", "Market", "IOC", "Spread")

_CONFIG_FILE_NAMES = (
    "Demo",
    "ExcelWindow",
    "Position",
    "Theme",
    "MarketLadder",
    "MarketWatch",
    "OpenOrders",
    "StrategyWorkspace",
    "TradeHistory",
    "OrderAllBook",
    "RejectBook",
    "OptionChain",
)


class VisualTheme(IntEnum):
    """Colour themes available for the user interface."""

    MATERIAL_LIGHT = 0
    MATERIAL_DARK = 1
    ONE_LIGHT = 2
    ONE_DARK = 3
    ARTHUR_LIGHT = 4
    ARTHUR_DARK = 5
    IMGUI_LIGHT = 6
    IMGUI_DARK = 7

    def display_name(self) -> str:
        """Human-readable theme name."""
        return _VISUAL_THEME_NAMES[self]


class DataType(IntEnum):
    """Type of a strategy parameter."""

    CLIENT = 0
    COMBO = 1
    CONTRACT = 2
    FLOAT = 3
    INT = 4
    TEXT = 5
    RADIO = 6
    UPDATES = 7

    def display_name(self) -> str:
        """Label used for the type in the template builder."""
        return _DATA_TYPE_NAMES[self]


class OrderStatus(IntEnum):
    """Lifecycle state of an order."""

    PLACED = 0
    NEW = 1
    REPLACED = 2
    CANCELLED = 3
    NEW_REJECT = 4
    REPLACE_REJECT = 5
    CANCEL_REJECT = 6
    PARTIAL_FILLED = 7
    FILLED = 8

    def display_name(self) -> str:
        """Label shown in the order books."""
        return _ORDER_STATUS_NAMES[self]


class StrategyStatus(IntEnum):
    """State of a strategy row in a portfolio."""

    PENDING = 0
    ACTIVE = 1
    APPLIED = 2
    INACTIVE = 3
    TERMINATED = 4
    WAITING = 5
    DISCONNECTED = 6

    def display_name(self) -> str:
        """Label shown in the strategy workspace."""
        return _STRATEGY_STATUS_NAMES[self]


class OrderType(IntEnum):
    """Kind of order sent from the order form."""

    LIMIT = 0
    MARKET = 1
    IOC = 2
    SPREAD = 3

    def display_name(self) -> str:
        """Label shown in the order form."""
        return _ORDER_TYPE_NAMES[self]


class Side(IntEnum):
    """Side of an order or trade."""

    BUY = 0
    SELL = 1


class ColumnGeneratorColumnIndex(IntEnum):
    NAME = 0
    TYPE = 1
    VALUE = 2


class MarketWatchColumnIndex(IntEnum):
    CONTACT_NAME = 0
    ATP = 1
    LTP = 2
    LTQ = 3
    LTT = 4
    TOP_BID = 5
    TOP_ASK = 6
    OPEN = 7
    HIGH = 8
    LOW = 9
    CLOSE = 10
    LOWDPR = 11
    HIGHDPR = 12
    TOTAL_BUY_QUANTITY = 13
    TOTAL_SELL_QUANTITY = 14
    VOLUME_TRADED_TODAY = 15
    OPEN_INTEREST = 16


class MarketWatchToolTipColumnIndex(IntEnum):
    BUY_ORDER = 0
    BUY_QUANTITY = 1
    BUY_PRICE = 2
    ASK_PRICE = 3
    ASK_QUANTITY = 4
    ASK_ORDER = 5


class BooksColumnIndex(IntEnum):
    PF = 0
    CONTRACT = 1
    PRICE = 2
    QUANTITY = 3
    FILLPRICE = 4
    FILLQUANTITY = 5
    REMAINING_QTY = 6
    CLIENT = 7
    STATUS = 8
    TIME = 9
    GATEWAY = 10
    ORDERNUMBER = 11
    MESSAGE = 12


class SymbolWiseNetBookColumnIndex(IntEnum):
    CONTRACT = 0
    AVGBID = 1
    BUYQTY = 2
    SELLQTY = 3
    AVGSELL = 4
    TOTAL = 5
    NETINVEST = 6
    MTM = 7
    LTP = 8
    PNL = 9


class PFWiseNetBookColumnIndex(IntEnum):
    PF = 0
    CONTRACT = 1
    AVGBID = 2
    BUYQTY = 3
    SELLQTY = 4
    AVGSELL = 5
    TOTAL = 6
    NETINVEST = 7
    MTM = 8
    LTP = 9
    PNL = 10


class GreekBookColumnIndex(IntEnum):
    SYMBOL = 0
    DELTA = 1
    GAMMA = 2
    VEGA = 3
    THETA = 4
    MTM = 5
    MARKETRATE = 6
    VALUE = 7


class OptionChainColumnIndex(IntEnum):
    CALL_OI = 0
    CALL_VOLUME = 1
    CALL_DELTA = 2
    CALL_GAMMA = 3
    CALL_VEGA = 4
    CALL_THETA = 5
    CALL_IV = 6
    CALL_LTP = 7
    CALL_CHANGE = 8
    CALL_BID_QTY = 9
    CALL_BID_PRICE = 10
    CALL_ASK_PRICE = 11
    CALL_ASK_QTY = 12
    STRIKE_PRICE = 13
    PUT_BID_QTY = 14
    PUT_BID_PRICE = 15
    PUT_ASK_PRICE = 16
    PUT_ASK_QTY = 17
    PUT_CHANGE = 18
    PUT_LTP = 19
    PUT_IV = 20
    PUT_THETA = 21
    PUT_VEGA = 22
    PUT_GAMMA = 23
    PUT_DELTA = 24
    PUT_VOLUME = 25
    PUT_OI = 26


class ScannerFunctionColumnIndex(IntEnum):
    NAME = 0
    VARIABLE = 1


class ScannerSavedColumnIndex(IntEnum):
    NUMBER = 0
    NAME = 1
    OPERATIONS = 2


class ExportImport(IntEnum):
    EXPORT = 0
    IMPORT = 1
    NONE = 2


class ExcelDataColumn(IntEnum):
    BID_ORDER = 1
    BID_QUANTITY = 2
    BID_PRICE = 3
    ASK_ORDER = 4
    ASK_QUANTITY = 5
    ASK_PRICE = 6


class ExcelSecondColumn(IntEnum):
    LTP = 1
    ATP = 2
    OPEN = 3
    HIGH = 4
    LOW = 5
    CLOSE = 6


class ExcelThirdColumn(IntEnum):
    LOW_DPR = 1
    HIGH_DPR = 2
    TOTAL_BUY_QUANTITY = 3
    TOTAL_SELL_QUANTITY = 4
    VOLUME_TRADED_TODAY = 5
    OPEN_INTEREST = 6


class ConfigFile(IntEnum):
    """Sections of the saved window configuration."""

    DEMO = 0
    EXCEL_WINDOW = 1
    GREEK_BOOK = 2
    THEME = 3
    MARKET_LADDER = 4
    MARKET_WATCH = 5
    PENDING_BOOK = 6
    STRATEGY_WORKSPACE = 7
    TRADE_BOOK = 8
    ORDER_ALL_BOOK = 9
    REJECT_BOOK = 10
    OPTION_CHAIN = 11

    def display_name(self) -> str:
        """Section name used in configuration files."""
        return _CONFIG_FILE_NAMES[self]


class TradeTrackerColumn(IntEnum):
    ID = 0
    NAME = 1
    DESCRIPTIONS = 2


class ClientIndex(IntEnum):
    EXCHANGE = 0
    CLIENTCODE = 1


class Spot(IntEnum):
    BANKNIFTY = 0
    NIFTY = 1
    VIX = 2


class NetBookCalculation(IntEnum):
    SYMBOL = 0
    PF = 1
    GREEK = 2