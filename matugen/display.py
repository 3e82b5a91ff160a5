"""Terminal table and JSON output of generated colors."""

from __future__ import annotations

import enum
import json
import re
from typing import Any, Protocol

from .colorspace import Rgb
from .colorutil import Argb
from .format import (
    format_hex,
    format_hex_stripped,
    format_hsl,
    format_hsla,
    format_rgb,
    format_rgba,
    hsl_from_rgb,
    rgb_from_argb,
)
from .scheme import Schemes

_TITLES = ("NAME", "LIGHT", "LIGHT", "DARK", "DARK")
_ALIGNS = ("left", "center", "center", "center", "center")
_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")
_SWATCH = "  "
_PALETTE_NAMES = ("primary", "secondary", "tertiary", "neutral", "neutral_variant", "error")
_TONES = tuple(range(0, 101, 5))


class JsonFormat(enum.Enum):
    """String format used for colors in JSON output."""

    HEX = "hex"
    RGB = "rgb"
    RGBA = "rgba"
    HSL = "hsl"
    HSLA = "hsla"
    STRIP = "strip"


class _TonalPalette(Protocol):
    def tone(self, tone: int) -> Argb: ...


def format_single_color(color: Rgb, fmt: JsonFormat | str) -> str:
    """Write one color in the requested format."""
    match JsonFormat(fmt):
        case JsonFormat.RGB:
            return format_rgb(color)
        case JsonFormat.RGBA:
            return format_rgba(color, True)
        case JsonFormat.HSL:
            return format_hsl(hsl_from_rgb(color))
        case JsonFormat.HSLA:
            return format_hsla(hsl_from_rgb(color), True)
        case JsonFormat.HEX:
            return format_hex(color)
        case JsonFormat.STRIP:
            return format_hex_stripped(color)


def _channel(value: float) -> int:
    return int(min(max(value, 0.0), 255.0))


def _swatch(color: Rgb) -> str:
    r, g, b = _channel(color.red), _channel(color.green), _channel(color.blue)
    foreground = 30 if r + g + b > 500 else 37
    return f"\x1b[{foreground};48;2;{r};{g};{b}m{_SWATCH}\x1b[0m"


def _row(field: str, light: Rgb, dark: Rgb) -> tuple[str, ...]:
    return (
        field,
        light.to_hex_string().upper(),
        _swatch(light),
        dark.to_hex_string().upper(),
        _swatch(dark),
    )


def _visible_len(text: str) -> int:
    return len(_ANSI_RE.sub("", text))


def _pad(text: str, width: int, align: str) -> str:
    gap = width - _visible_len(text)
    if align == "left":
        return text + " " * gap
    left = gap // 2
    return " " * left + text + " " * (gap - left)


def format_table(schemes: Schemes, source_color: Argb) -> str:
    """A boxed table of every color in both schemes, with colored swatches."""
    rows = [
        _row(name, rgb_from_argb(light), rgb_from_argb(dark))
        for name, light, dark in schemes.pairs()
    ]
    source = rgb_from_argb(source_color)
    rows.append(_row("source_color", source, source))

    widths = [max(_visible_len(cell) for cell in column) for column in zip(_TITLES, *rows)]

    def rule(left: str, middle: str, right: str) -> str:
        return left + middle.join("─" * (w + 2) for w in widths) + right

    def line(cells: tuple[str, ...], aligns: tuple[str, ...]) -> str:
        return (
            "│"
            + "│".join(f" {_pad(c, w, a)} " for c, w, a in zip(cells, widths, aligns))
            + "│"
        )

    lines = [
        rule("╭", "┬", "╮"),
        line(_TITLES, ("center",) * len(_TITLES)),
        rule("├", "┼", "┤"),
        *(line(row, _ALIGNS) for row in rows),
        rule("╰", "┴", "╯"),
    ]
    return "\n".join(lines)


def show_color(schemes: Schemes, source_color: Argb) -> None:
    """Print the color table to standard output."""
    print(format_table(schemes, source_color))


def _format_palette(palette: _TonalPalette, fmt: JsonFormat | str) -> dict[str, str]:
    return {str(t): format_single_color(rgb_from_argb(palette.tone(t)), fmt) for t in _TONES}


def dump_json(
    schemes: Schemes,
    source_color: Argb,
    fmt: JsonFormat | str,
    palettes: Any,
) -> str:
    """Print the colors and tonal palettes as JSON and return the text.

    ``palettes`` maps primary, secondary, tertiary, neutral, neutral_variant
    and error to objects with a ``tone(int)`` method.
    """
    light: dict[str, str] = {}
    dark: dict[str, str] = {}
    for name, color_light, color_dark in schemes.pairs():
        light[name] = format_single_color(rgb_from_argb(color_light), fmt)
        dark[name] = format_single_color(rgb_from_argb(color_dark), fmt)
    light["source_color"] = format_single_color(rgb_from_argb(source_color), fmt)

    document = {
        "colors": {"light": light, "dark": dark},
        "palettes": {name: _format_palette(palettes[name], fmt) for name in _PALETTE_NAMES},
    }
    text = json.dumps(document, separators=(",", ":"), ensure_ascii=False)
    print(text)
    return text