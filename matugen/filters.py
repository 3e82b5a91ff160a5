"""Template filters that transform color strings and identifiers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace
from typing import Any, TypeVar

from .colorspace import Hsl, Rgb
from .format import (
    format_hex,
    format_hex_stripped,
    format_hsl,
    format_hsla,
    format_rgb,
    format_rgba,
)
from .parse import check_string_value, parse_color

log = logging.getLogger(__name__)

_T = TypeVar("_T")

_LIGHTNESS_THRESHOLD = 50.0


class FilterError(ValueError):
    """Raised when a filter cannot be applied to its input."""


def _require_string(value: Any) -> str:
    string = check_string_value(value)
    if string is None:
        raise FilterError(f"expected a string, got {type(value).__name__}")
    return string


def _parse(parser: Callable[[str], _T], string: str) -> _T:
    try:
        return parser(string)
    except ValueError as error:
        raise FilterError(str(error)) from error


def _apply(
    string: str,
    fmt: str,
    rgb_op: Callable[[Rgb], Rgb],
    hsl_op: Callable[[Hsl], Hsl],
    divide: bool,
) -> str:
    match fmt:
        case "hex":
            return format_hex(rgb_op(_parse(Rgb.from_hex_str, string)))
        case "hex_stripped":
            return format_hex_stripped(rgb_op(_parse(Rgb.from_hex_str, string)))
        case "rgb":
            return format_rgb(rgb_op(_parse(Rgb.from_str, string)))
        case "rgba":
            return format_rgba(rgb_op(_parse(Rgb.from_str, string)), divide)
        case "hsl":
            return format_hsl(hsl_op(_parse(Hsl.from_str, string)))
        case "hsla":
            return format_hsla(hsl_op(_parse(Hsl.from_str, string)), divide)
        case other:
            return other


def set_alpha(value: Any, amount: float) -> str:
    """Set the alpha of an ``rgba(...)`` or ``hsla(...)`` color."""
    string = _require_string(value)
    fmt = parse_color(string)
    log.debug("Setting alpha on string %s by %s", string, amount)
    if fmt is None:
        return string
    if not 0.0 <= amount <= 1.0:
        raise FilterError("alpha must be in range [0.0 to 1.0]")
    match fmt:
        case "hex" | "hex_stripped":
            raise FilterError("cannot set alpha on hex color")
        case "rgb":
            raise FilterError("cannot set alpha on rgb color, use rgba")
        case "rgba":
            color = _parse(Rgb.from_str, string)
            return format_rgba(replace(color, alpha=amount), False)
        case "hsl":
            raise FilterError("cannot set alpha on hsl color, use hsla")
        case "hsla":
            color = _parse(Hsl.from_str, string)
            return format_hsla(replace(color, alpha=amount), False)
        case other:
            return other


def camel_case(value: Any) -> str:
    """Turn ``snake_case`` into ``camelCase``."""
    string = _require_string(value)
    parts: list[str] = []
    capitalize_next = False
    for char in string:
        if char == "_":
            capitalize_next = True
        elif capitalize_next:
            parts.append(char.upper()[:1])
            capitalize_next = False
        else:
            parts.append(char)
    result = "".join(parts)
    log.debug("Converting to camelCase: %s to %s", string, result)
    return result


def grayscale(value: Any) -> str:
    """Remove the color from a color string, keeping its format."""
    string = _require_string(value)
    fmt = parse_color(string)
    if fmt is None:
        return string
    return _apply(string, fmt, Rgb.grayscale_simple, Hsl.grayscale_simple, False)


def set_hue(value: Any, amount: float) -> str:
    """Rotate the hue of a color string by ``amount`` degrees."""
    string = _require_string(value)
    fmt = parse_color(string)
    log.debug("Setting hue on string %s by %s", string, amount)
    if fmt is None:
        log.error("Could not detect the format for string %r", string)
        return string
    if not -360.0 <= amount <= 360.0:
        raise FilterError("alpha must be in range [-360.0 to 360.0]")
    return _apply(
        string,
        fmt,
        lambda c: c.adjust_hue(amount),
        lambda c: c.adjust_hue(amount),
        False,
    )


def invert(value: Any) -> str:
    """Invert a color string, keeping its format."""
    string = _require_string(value)
    fmt = parse_color(string)
    if fmt is None:
        return string
    return _apply(string, fmt, Rgb.invert, Hsl.invert, False)


def _auto_rgb(color: Rgb, amount: float) -> Rgb:
    if color.to_hsl().lightness < _LIGHTNESS_THRESHOLD:
        return color.lighten(amount)
    return color.lighten(-amount)


def _auto_hsl(color: Hsl, amount: float) -> Hsl:
    if color.lightness < _LIGHTNESS_THRESHOLD:
        return color.lighten(amount)
    return color.lighten(-amount)


def auto_lightness(value: Any, amount: float) -> str:
    """Lighten dark colors and darken light ones by ``amount``."""
    string = _require_string(value)
    fmt = parse_color(string)
    log.debug("Setting lightness on string %s by %s", string, amount)
    if fmt is None:
        return string
    return _apply(
        string,
        fmt,
        lambda c: _auto_rgb(c, amount),
        lambda c: _auto_hsl(c, amount),
        True,
    )


def set_lightness(value: Any, amount: float) -> str:
    """Shift the lightness of a color string by ``amount``."""
    string = _require_string(value)
    fmt = parse_color(string)
    log.debug("Setting lightness on string %s by %s", string, amount)
    if fmt is None:
        return string
    return _apply(
        string,
        fmt,
        lambda c: c.lighten(amount),
        lambda c: c.lighten(amount),
        True,
    )