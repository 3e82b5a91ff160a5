import pytest

from matugen.colorutil import Argb
from matugen.sourcecolor import (
    ColorDefinition,
    ColorFormat,
    CustomColor,
    OwnCustomColor,
    color_to_string,
    get_source_color_from_color,
)


def test_custom_color_from_string_blends_by_default():
    color = OwnCustomColor.from_config("#ff0000")
    assert color == OwnCustomColor("#ff0000", True)


def test_custom_color_from_table():
    color = OwnCustomColor.from_config({"color": "#00ff00", "blend": False})
    assert color.color == "#00ff00"
    assert color.blend is False


@pytest.mark.parametrize("raw", [5, {"color": "#00ff00"}, {"blend": True}, None])
def test_custom_color_invalid_config(raw):
    with pytest.raises(ValueError):
        OwnCustomColor.from_config(raw)


def test_to_custom_color():
    custom = OwnCustomColor("#ff0000").to_custom_color("red")
    assert custom == CustomColor(value=Argb.from_hex("#ff0000"), blend=True, name="red")


def test_to_custom_color_keeps_blend_flag():
    custom = OwnCustomColor("#123456", blend=False).to_custom_color("x")
    assert custom.blend is False
    assert custom.value.to_hex() == "#123456"


def test_to_custom_color_invalid_hex():
    with pytest.raises(ValueError):
        OwnCustomColor("nothex").to_custom_color("bad")


def test_source_color_from_hex():
    assert get_source_color_from_color(ColorFormat.HEX, "#123456") == Argb.from_hex("#123456")


def test_source_color_from_hex_accepts_format_name():
    assert get_source_color_from_color("hex", "#abcdef").to_hex() == "#abcdef"


def test_source_color_from_rgb():
    assert get_source_color_from_color(ColorFormat.RGB, "rgb(10, 20, 30)") == Argb(255, 10, 20, 30)


def test_source_color_from_hsl_pure_red():
    assert get_source_color_from_color(ColorFormat.HSL, "hsl(0, 100%, 50%)") == Argb(255, 255, 0, 0)


@pytest.mark.parametrize(
    "fmt, text",
    [(ColorFormat.HEX, "#zzzzzz"), (ColorFormat.RGB, "rgb(1, 2)"), (ColorFormat.HSL, "nope")],
)
def test_source_color_invalid(fmt, text):
    with pytest.raises(ValueError):
        get_source_color_from_color(fmt, text)


def test_color_to_string_picks_closest():
    colors = [ColorDefinition("red", "#ff0000"), ColorDefinition("blue", "#0000ff")]
    assert color_to_string(colors, "#ee1111") == "red"
    assert color_to_string(colors, "#1111ee") == "blue"


def test_color_to_string_first_wins_on_tie():
    colors = [ColorDefinition("first", "#00ff00"), ColorDefinition("second", "#00ff00")]
    assert color_to_string(colors, "#00ff00") == "first"


def test_color_to_string_empty():
    assert color_to_string([], "#ffffff") == ""