import pytest

from tradedesk.colors import (
    GREEN,
    PALETTE,
    RED,
    SELECTED_ROW_COLOR,
    Color,
    buy_sell_color,
    named_color,
    up_down_color,
)
from tradedesk.enums import Side


def test_named_red_and_green():
    assert named_color("red").as_tuple() == (1.0, 0.0, 0.0, 1.0)
    assert named_color("green") == GREEN


def test_named_color_normalises_name():
    assert named_color("Light Sky Blue") == named_color("light_sky_blue")
    assert named_color("COLOR_DEEP-PINK") == PALETTE["deep_pink"]
    assert named_color("gold").as_tuple() == (1.0, 0.84, 0.0, 1.0)


def test_unknown_color_raises():
    with pytest.raises(KeyError):
        named_color("not a colour")


def test_transparent_has_zero_alpha():
    assert named_color("transparent").a == 0.0


def test_selected_row_is_gray():
    assert SELECTED_ROW_COLOR == named_color("gray")


@pytest.mark.parametrize("value, expected", [(5, GREEN), (0.01, GREEN), (0, RED), (-3.5, RED)])
def test_up_down_color(value, expected):
    assert up_down_color(value) == expected


def test_buy_sell_color():
    assert buy_sell_color(Side.BUY) == GREEN
    assert buy_sell_color(Side.SELL) == RED
    assert buy_sell_color(0) == GREEN


def test_as_hex_primary():
    assert RED.as_hex() == "#FF0000FF"


@pytest.mark.parametrize("name", sorted(PALETTE))
def test_as_hex_round_trips_within_rounding(name):
    color = named_color(name)
    text = color.as_hex()
    assert text.startswith("#")
    assert len(text) == 9
    parsed = [int(text[i:i + 2], 16) / 255 for i in range(1, 9, 2)]
    for got, want in zip(parsed, color.as_tuple()):
        assert abs(got - want) <= 1 / 510 + 1e-9


def test_component_out_of_range_rejected():
    with pytest.raises(ValueError):
        Color(1.5, 0.0, 0.0)
    with pytest.raises(ValueError):
        Color(0.0, 0.0, 0.0, -0.1)


def test_default_alpha_is_opaque():
    assert Color(0.2, 0.3, 0.4).as_tuple() == (0.2, 0.3, 0.4, 1.0)