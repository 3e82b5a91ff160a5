import pytest

from matugen.colorspace import Rgb
from matugen.distance import get_color_distance, get_color_distance_lab


@pytest.mark.parametrize("color", ["#ff0000", "#123456", "#ffffff"])
def test_lab_distance_to_self_is_zero(color):
    assert get_color_distance_lab(color, color) == pytest.approx(0.0, abs=1e-9)


def test_lab_distance_symmetric_and_positive():
    d = get_color_distance_lab("#ff0000", "#0000ff")
    assert d > 0
    assert d == pytest.approx(get_color_distance_lab("#0000ff", "#ff0000"))


def test_lab_distance_black_white_is_lightness_range():
    assert get_color_distance_lab("#000000", "#ffffff") == pytest.approx(100.0, abs=0.1)


def test_lab_distance_orders_similar_colors_closer():
    near = get_color_distance_lab("#ff0000", "#f00010")
    far = get_color_distance_lab("#ff0000", "#00ff00")
    assert near < far


def test_lab_distance_invalid_hex():
    with pytest.raises(ValueError):
        get_color_distance_lab("#ff0000", "not a color")


def test_rgb_distance_zero_for_gray():
    gray = Rgb(100.0, 100.0, 100.0)
    assert get_color_distance(gray, gray) == 0.0


def test_rgb_distance_grows_with_difference():
    base = Rgb(0.0, 0.0, 0.0)
    assert get_color_distance(base, Rgb(10.0, 10.0, 10.0)) < get_color_distance(
        base, Rgb(200.0, 200.0, 200.0)
    )