# tradedesk

The building blocks behind a trading desk front end: enumerations and
column headings for its tables, a colour palette, records for market data,
orders and positions, a high-resolution timer, a strategy registry, a
contract directory, and the trade history and tracker books.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `tradedesk.enums`: `IntEnum` classes such as `VisualTheme`, `DataType`,
  `OrderStatus`, `StrategyStatus`, `OrderType`, `Side`, `ConfigFile` and the
  column indices of every table (`BooksColumnIndex`,
  `MarketWatchColumnIndex`, `OptionChainColumnIndex` and others).
  `VisualTheme`, `DataType`, `OrderStatus`, `StrategyStatus`, `OrderType`
  and `ConfigFile` give a readable label through `display_name()`.
- `tradedesk.columns`: `column_names(table)` returns the header labels for
  the table indexed by a column-index enum, and raises `ValueError` for an
  enum that has no table.
- `tradedesk.colors`: the frozen `Color` dataclass (`as_tuple()`,
  `as_hex()` giving `#RRGGBBAA`), the `PALETTE` dictionary,
  `named_color(name)` (case, spaces, hyphens and a `color_` prefix are
  ignored; unknown names raise `KeyError`), `up_down_color(value)` (green
  for positive, red otherwise) and `buy_sell_color(side)` (green for side 0,
  red otherwise).
- `tradedesk.structures`: dataclasses such as `MarketWatchData` (with
  `top_bid()`, `top_ask()` and `set_description()`, which rejects text over
  50 bytes), `OrderInfo`, `NetBookColumn`, `Greeks`, `GreekBookColumn`,
  `OrderFormInfo`, `StrategyRow`, `ScannerFunctionInfo` and
  `TradeTrackerItem`.
- `tradedesk.timer`: `NanoTimer` (`start()`, `elapsed_ns()`,
  `elapsed_us()`, `elapsed_ms()`; reading it before `start()` raises
  `RuntimeError`), plus the busy-wait delays `nanosecond_delay`,
  `microsecond_delay` and `millisecond_delay`.
- `tradedesk.utils`:
  - `format_time_to_string(time)` renders an exchange timestamp as local
    `YYYY-MM-DD HH:MM:SS.nnnnnnnnn`.
  - `create_support_folders(base)` creates `Save`, `Config` and
    `Automation` under `base` and returns their paths.
  - `trade_row_cells(trade)` gives the text of each order book cell.
  - `StrategyRegistry` maps portfolio numbers to `StrategyRow` objects by
    weak reference (`append`, `get`, `remove_expired`, `reset`).
  - `ContractDirectory` holds market data per token and contract names in
    load order (`add_contract`, `get`, `filter`). `filter(text)` keeps
    contracts whose first letter matches the filter's first letter and that
    pass the comma-separated, case-insensitive terms, where a leading `-`
    excludes.
- `tradedesk.trade_history`: `TradeHistory`, the book of filled trades.
  `insert()` queues a trade (returning `False` when the queue is full),
  `process_pending()` moves every queued trade into the book and returns how
  many moved, `rows()` lists the rows newest first, and `summary_line()`
  gives the totals line. The net value is the count of sell trades minus the
  count of buy trades.
- `tradedesk.trade_tracker`: `TradeTracker`, a log of strategy events with
  `insert()`, `process_pending()`, `rows()` (oldest first, numbered from 0),
  `clear()` and `status_line()`.

## Example

```python
from tradedesk.enums import Side, OrderStatus
from tradedesk.structures import OrderInfo
from tradedesk.trade_history import TradeHistory

history = TradeHistory()
history.insert(OrderInfo(pf=1, quantity=50, price=101.5, side=Side.BUY,
                         status=OrderStatus.FILLED, contract="NIFTY FUT"))
history.process_pending()
print(history.summary_line())
for row in history.rows():
    print(row)
```

Updates go into a thread-safe queue first, so other threads can hand in
trades; `process_pending()` drains the whole queue at once.

## What this package does not do

It has no screens or windows, no command-line program, no connection to a
broker or exchange, no market data feed and no storage of orders or
settings. It provides the data model, the books and the helpers that such
parts would be built on.