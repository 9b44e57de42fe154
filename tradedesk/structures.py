"""Records for market data, orders, positions, strategies and scanners."""

from __future__ import annotations

from dataclasses import dataclass, field

from tradedesk.enums import DataType, OrderStatus, OrderType, Side, StrategyStatus

MARKET_WATCH_LADDER_COUNT = 5
STRATEGY_NAME_LENGTH = 50


@dataclass
class PricePoint:
    """One level of the market depth."""

    price: float = 0.0
    quantity: int = 0
    order: int = 0


@dataclass
class ColorBits:
    """Flags telling which market values moved up since the last update."""

    top_bid: bool = False
    top_ask: bool = False
    ltp: bool = False
    atp: bool = False


def _ladder() -> list[PricePoint]:
    return [PricePoint() for _ in range(MARKET_WATCH_LADDER_COUNT)]


@dataclass
class MarketWatchData:
    """Live market snapshot for one contract."""

    bid: list[PricePoint] = field(default_factory=_ladder)
    ask: list[PricePoint] = field(default_factory=_ladder)
    last_trade_time: str = ""
    description: str = ""

    token: int = 0
    last_trade_quantity: int = 0
    average_trade_price: float = 0.0
    last_trade_price: float = 0.0
    low_dpr: float = 0.0
    high_dpr: float = 0.0

    open_price: float = 0.0
    high_price: float = 0.0
    low_price: float = 0.0
    close_price: float = 0.0
    percentage_change: float = 0.0

    total_buy_quantity: int = 0
    total_sell_quantity: int = 0
    volume_traded_today: int = 0
    open_interest: int = 0

    color: ColorBits = field(default_factory=ColorBits)

    def __post_init__(self) -> None:
        for name in ("bid", "ask"):
            if len(getattr(self, name)) != MARKET_WATCH_LADDER_COUNT:
                raise ValueError(
                    f"{name} ladder must have {MARKET_WATCH_LADDER_COUNT} levels"
                )
        self.set_description(self.description)

    def top_bid(self) -> PricePoint:
        """Best bid level."""
        return self.bid[0]

    def top_ask(self) -> PricePoint:
        """Best ask level."""
        return self.ask[0]

    def set_description(self, text: str) -> None:
        """Replace the contract description, which must fit the fixed field width."""
        if len(text.encode("utf-8")) > STRATEGY_NAME_LENGTH:
            raise ValueError(
                f"description longer than {STRATEGY_NAME_LENGTH} bytes: {text!r}"
            )
        self.description = text


@dataclass
class ParameterValue:
    """Value of a strategy parameter; which field is used depends on its type."""

    check: bool = False
    integer: int = 0
    floating: float = 0.0
    text: str = ""


@dataclass
class ParameterInfo:
    """A strategy parameter with its type, value and search state."""

    search_enable: bool = False
    type: DataType = DataType.CLIENT
    parameter: ParameterValue = field(default_factory=ParameterValue)
    filter: str = ""
    market_data: MarketWatchData | None = None


@dataclass
class GlobalParameterInfo:
    """A parameter applied across every row of a portfolio."""

    update: bool = False
    name: str = ""
    info: ParameterInfo = field(default_factory=ParameterInfo)


@dataclass
class OrderInfo:
    """An order or trade as reported by the broker."""

    pf: int = 0
    gateway: int = 0
    token: int = 0
    quantity: int = 0
    fill_quantity: int = 0
    remaining: int = 0
    order_no: int = 0
    price: float = 0.0
    fill_price: float = 0.0

    side: Side = Side.BUY
    status: OrderStatus = OrderStatus.PLACED
    contract: str = ""
    time: str = ""
    client: str = ""
    message: str = ""


@dataclass
class NetBookColumn:
    """Aggregated position for one contract (and optionally one portfolio)."""

    pf: int = 0
    buy_quantity: int = 0
    sell_quantity: int = 0
    total_qty: int = 0

    last_ltp: float = 0.0
    average_buy_price: float = 0.0
    average_sell_price: float = 0.0
    net_investment: float = 0.0
    total_buy_price: float = 0.0
    total_sell_price: float = 0.0

    last_pnl: float = 0.0
    pnl: float = 0.0
    mtm: float = 0.0

    market_data: MarketWatchData | None = None


@dataclass
class Greeks:
    """Option sensitivities for one contract."""

    is_call: bool = False
    is_future: bool = False
    expiry: int = 0
    strike_price: float = 0.0
    iv: float = 0.0
    delta: float = 0.0
    gamma: float = 0.0
    vega: float = 0.0
    theta: float = 0.0

    market_data: MarketWatchData | None = None
    future: MarketWatchData | None = None


@dataclass
class GreekBookColumn:
    """Position in one symbol together with its greeks."""

    symbol: str = ""
    buy_quantity: int = 0
    sell_quantity: int = 0

    total_sell_price: float = 0.0
    total_buy_price: float = 0.0
    average_sell_price: float = 0.0
    average_buy_price: float = 0.0

    greeks: Greeks | None = None


@dataclass
class DValue:
    """One displayed row of the greek book."""

    delta: float = 0.0
    gamma: float = 0.0
    vega: float = 0.0
    theta: float = 0.0
    mtm: float = 0.0
    market_rate: float = 0.0
    value: float = 0.0
    symbol: str = ""


@dataclass
class PortfolioStatus:
    """Counts of strategy rows in each state within a portfolio."""

    close: bool = False
    inactive: int = 0
    active: int = 0
    apply: int = 0
    waiting: int = 0
    terminate: int = 0


@dataclass
class OrderFormInfo:
    """Contents of the manual order form."""

    gateway: int = 0
    price: float = 0.0
    quantity: int = 0
    lot_size: int = 0
    order_number: int = 0
    order_type: OrderType = OrderType.LIMIT
    side: Side = Side.BUY
    status: OrderStatus = OrderStatus.PLACED
    contract: str = ""
    client: str = ""
    market_data: MarketWatchData | None = None


@dataclass
class SpotInfo:
    """Index spot value and its change."""

    value: float = 0.0
    change: float = 0.0


@dataclass
class StrategyRow:
    """One strategy instance inside a portfolio."""

    changed: bool = False
    subscribed: bool = False
    selected: bool = False
    pf: int = 0
    status: StrategyStatus = StrategyStatus.PENDING
    parameters: dict[str, ParameterInfo] = field(default_factory=dict)


@dataclass
class ScannerFunctionInfo:
    """A scanner function bound to a single-letter variable."""

    selected: bool = False
    variable: str = ""
    name: str = ""

    def __post_init__(self) -> None:
        if len(self.variable) > 1:
            raise ValueError(f"variable must be a single character: {self.variable!r}")


@dataclass
class ClientInfo:
    """A client code on an exchange."""

    exchange: str = ""
    client_code: str = ""


@dataclass
class TradeTrackerItem:
    """One entry of the trade tracker."""

    pf: int = 0
    strategy: str = ""
    descriptions: str = ""


@dataclass
class SaveScannerItem:
    """A saved scanner formula."""

    applied: bool = False
    unique_id: int = 0
    name: str = ""
    expanded_equation: str = ""