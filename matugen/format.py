"""Conversions from ARGB and the string formats used in templates."""

from __future__ import annotations

import math

from .colorspace import Hsl, Rgb
from .colorutil import Argb


def _as_u8(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(value, 0.0), 255.0))


def rgb_from_argb(color: Argb) -> Rgb:
    """RGB color whose alpha keeps the 0..255 scale of the ARGB value."""
    return Rgb(float(color.red), float(color.green), float(color.blue), float(color.alpha))


def hsl_from_argb(color: Argb) -> Hsl:
    """HSL form of an ARGB color."""
    return rgb_from_argb(color).to_hsl()


def hsl_from_rgb(color: Rgb) -> Hsl:
    """HSL form of an RGB color."""
    return color.to_hsl()


def format_hex(color: Rgb) -> str:
    """``#rrggbb``."""
    return color.to_hex_string()


def format_hex_stripped(color: Rgb) -> str:
    """``rrggbb`` without the leading ``#``."""
    return color.to_hex_string()[1:]


def format_rgb(color: Rgb) -> str:
    """``rgb(r, g, b)``."""
    return f"rgb({_as_u8(color.red)}, {_as_u8(color.green)}, {_as_u8(color.blue)})"


def format_rgba(color: Rgb, divide: bool) -> str:
    """``rgba(r, g, b, a)``; with ``divide`` the alpha is scaled down from 0..255."""
    alpha = color.alpha / 255.0 if divide else color.alpha
    return (
        f"rgba({_as_u8(color.red)}, {_as_u8(color.green)}, {_as_u8(color.blue)}, {alpha:.1f})"
    )


def format_hsl(color: Hsl) -> str:
    """``hsl(h, s%, l%)``."""
    return (
        f"hsl({_as_u8(color.hue)}, {_as_u8(color.saturation)}%, {_as_u8(color.lightness)}%)"
    )


def format_hsla(color: Hsl, divide: bool) -> str:
    """``hsla(h, s%, l%, a)``; with ``divide`` the alpha is scaled down from 0..255."""
    alpha = color.alpha / 255.0 if divide else color.alpha
    return (
        f"hsla({_as_u8(color.hue)}, {_as_u8(color.saturation)}%, "
        f"{_as_u8(color.lightness)}%, {alpha:.1f})"
    )