"""RGBA colours used by the tables and status displays."""

from __future__ import annotations

from dataclasses import astuple, dataclass


@dataclass(frozen=True)
class Color:
    """An RGBA colour with components in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    def __post_init__(self) -> None:
        for component in astuple(self):
            if not 0.0 <= component <= 1.0:
                raise ValueError(f"colour component out of range: {component}")

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return ``(r, g, b, a)``."""
        return (self.r, self.g, self.b, self.a)

    def as_hex(self) -> str:
        """Return the colour as ``#RRGGBBAA``."""
        return "#" + "".join(f"{round(c * 255):02X}" for c in self.as_tuple())


PALETTE: dict[str, Color] = {
    "red": Color(1.0, 0.0, 0.0),
    "green": Color(0.0, 1.0, 0.0),
    "blue": Color(0.0, 0.0, 1.0),
    "yellow": Color(1.0, 1.0, 0.0),
    "white": Color(1.0, 1.0, 1.0),
    "black": Color(0.0, 0.0, 0.0),
    "orange": Color(1.0, 0.5, 0.0),
    "purple": Color(0.5, 0.0, 0.5),
    "cyan": Color(0.0, 1.0, 1.0),
    "magenta": Color(1.0, 0.0, 1.0),
    "gray": Color(0.5, 0.5, 0.5),
    "light_gray": Color(0.7, 0.7, 0.7),
    "dark_gray": Color(0.3, 0.3, 0.3),
    "transparent": Color(0.0, 0.0, 0.0, 0.0),
    "light_blue": Color(0.5, 0.7, 1.0),
    "light_green": Color(0.5, 1.0, 0.5),
    "light_yellow": Color(1.0, 1.0, 0.5),
    "light_orange": Color(1.0, 0.7, 0.4),
    "light_purple": Color(0.8, 0.6, 1.0),
    "light_cyan": Color(0.5, 1.0, 1.0),
    "light_magenta": Color(1.0, 0.5, 1.0),
    "dark_blue": Color(0.0, 0.2, 0.4),
    "dark_green": Color(0.0, 0.4, 0.2),
    "dark_yellow": Color(0.4, 0.4, 0.0),
    "dark_orange": Color(0.6, 0.3, 0.0),
    "dark_purple": Color(0.3, 0.0, 0.3),
    "dark_cyan": Color(0.0, 0.3, 0.3),
    "dark_magenta": Color(0.3, 0.0, 0.3),
    "light_red": Color(1.0, 0.5, 0.5),
    "dark_red": Color(0.5, 0.0, 0.0),
    "gold": Color(1.0, 0.84, 0.0),
    "silver": Color(0.75, 0.75, 0.75),
    "bronze": Color(0.8, 0.5, 0.2),
    "teal": Color(0.0, 0.5, 0.5),
    "indigo": Color(0.29, 0.0, 0.51),
    "pink": Color(1.0, 0.75, 0.8),
    "lime": Color(0.75, 1.0, 0.0),
    "brown": Color(0.6, 0.4, 0.2),
    "pastel_red": Color(1.0, 0.4, 0.4),
    "pastel_green": Color(0.4, 1.0, 0.4),
    "pastel_blue": Color(0.4, 0.4, 1.0),
    "pastel_yellow": Color(1.0, 1.0, 0.4),
    "pastel_orange": Color(1.0, 0.7, 0.4),
    "pastel_purple": Color(0.8, 0.6, 1.0),
    "pastel_cyan": Color(0.4, 1.0, 1.0),
    "pastel_magenta": Color(1.0, 0.4, 1.0),
    "grey_blue": Color(0.6, 0.65, 0.7),
    "grey_green": Color(0.6, 0.7, 0.65),
    "grey_purple": Color(0.7, 0.65, 0.7),
    "grey_yellow": Color(0.7, 0.7, 0.65),
    "lavender": Color(0.9, 0.9, 0.98),
    "slate_gray": Color(0.44, 0.5, 0.56),
    "sea_green": Color(0.18, 0.55, 0.34),
    "light_sky_blue": Color(0.53, 0.81, 0.98),
    "deep_pink": Color(1.0, 0.08, 0.58),
    "goldenrod": Color(0.85, 0.65, 0.13),
    "slate_blue": Color(0.42, 0.35, 0.8),
    "olive": Color(0.5, 0.5, 0.0),
    "salmon": Color(0.98, 0.5, 0.45),
    "turquoise": Color(0.25, 0.88, 0.82),
    "plum": Color(0.87, 0.63, 0.87),
    "chocolate": Color(0.82, 0.41, 0.12),
    "crimson": Color(0.86, 0.08, 0.24),
    "indian_red": Color(0.8, 0.36, 0.36),
    "medium_aquamarine": Color(0.4, 0.8, 0.67),
    "medium_purple": Color(0.58, 0.44, 0.86),
    "azure": Color(0.94, 0.97, 1.0),
    "coral": Color(1.0, 0.5, 0.31),
    "dark_salmon": Color(0.91, 0.59, 0.48),
    "lime_green": Color(0.2, 0.8, 0.2),
    "deep_sky_blue": Color(0.0, 0.75, 1.0),
    "medium_slate_blue": Color(0.48, 0.41, 0.93),
    "dark_orchid": Color(0.6, 0.2, 0.8),
    "dark_sea_green": Color(0.56, 0.74, 0.56),
    "rosy_brown": Color(0.74, 0.56, 0.56),
    "steel_blue": Color(0.27, 0.51, 0.71),
    "dark_khaki": Color(0.74, 0.72, 0.42),
    "sandy_brown": Color(0.96, 0.64, 0.38),
    "medium_violet_red": Color(0.78, 0.08, 0.52),
    "light_coral": Color(0.94, 0.5, 0.5),
    "medium_turquoise": Color(0.28, 0.82, 0.8),
    "dark_slate_gray": Color(0.18, 0.31, 0.31),
    "light_salmon": Color(1.0, 0.63, 0.48),
    "dark_turquoise": Color(0.0, 0.81, 0.82),
    "medium_spring_green": Color(0.0, 0.98, 0.6),
    "light_slate_gray": Color(0.47, 0.53, 0.6),
    "orchid": Color(0.85, 0.44, 0.84),
    "medium_orchid": Color(0.73, 0.33, 0.83),
    "cornflower_blue": Color(0.39, 0.58, 0.93),
    "medium_blue": Color(0.0, 0.0, 0.8),
    "dark_goldenrod": Color(0.72, 0.53, 0.04),
    "spring_green": Color(0.0, 1.0, 0.5),
    "cadet_blue": Color(0.37, 0.62, 0.63),
    "dark_olive_green": Color(0.33, 0.42, 0.18),
    "firebrick": Color(0.7, 0.13, 0.13),
    "light_sea_green": Color(0.13, 0.7, 0.67),
}

RED = PALETTE["red"]
GREEN = PALETTE["green"]
GRAY = PALETTE["gray"]
SELECTED_ROW_COLOR = GRAY


def named_color(name: str) -> Color:
    """Look up a palette colour by name, ignoring case, spaces and hyphens."""
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    if key.startswith("color_"):
        key = key[len("color_"):]
    try:
        return PALETTE[key]
    except KeyError:
        raise KeyError(f"unknown colour: {name!r}") from None


def up_down_color(value: float) -> Color:
    """Green for a positive value, red otherwise."""
    return GREEN if value > 0 else RED


def buy_sell_color(side: int) -> Color:
    """Green for the buy side (0), red for anything else."""
    return GREEN if side == 0 else RED