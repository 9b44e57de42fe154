"""Data model, table headings, colours, timer, registries and trade books for a trading desk front end."""

__version__ = "0.1.0"
__all__ = [
    "colors",
    "columns",
    "enums",
    "structures",
    "timer",
    "trade_history",
    "trade_tracker",
    "utils",
]