"""Source colors, custom color definitions and nearest-color lookup."""

from __future__ import annotations

import enum
import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .colorspace import Hsl, Rgb
from .colorutil import Argb
from .distance import get_color_distance_lab

log = logging.getLogger(__name__)


class ColorFormat(enum.Enum):
    """Notation of a color given on the command line."""

    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"


@dataclass(frozen=True)
class ImageSource:
    """An image file that a scheme is generated from."""

    path: str


@dataclass(frozen=True)
class ColorSource:
    """A single color that a scheme is generated from."""

    format: ColorFormat
    string: str


@dataclass(frozen=True)
class ColorDefinition:
    """A named color that hook output can be matched against."""

    name: str
    color: str


@dataclass(frozen=True)
class CustomColor:
    """A user color, optionally blended toward the source color."""

    value: Argb
    blend: bool
    name: str


@dataclass(frozen=True)
class OwnCustomColor:
    """A custom color as written in the configuration."""

    color: str
    blend: bool = True

    @classmethod
    def from_config(cls, raw: Any) -> "OwnCustomColor":
        """Accept either a bare color string or a ``{color, blend}`` table."""
        if isinstance(raw, str):
            return cls(raw)
        if isinstance(raw, Mapping):
            color = raw.get("color")
            blend = raw.get("blend")
            if not isinstance(color, str) or not isinstance(blend, bool):
                raise ValueError(f"invalid custom color: {raw!r}")
            return cls(color, blend)
        raise ValueError(f"invalid custom color: {raw!r}")

    def to_custom_color(self, name: str) -> CustomColor:
        """Resolve the color string into a named custom color."""
        return CustomColor(value=Argb.from_hex(self.color), blend=self.blend, name=name)


def _channel(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(min(max(round(value, 6), 0.0), 255.0))


def _argb_from_rgb(rgb: Rgb) -> Argb:
    return Argb(255, _channel(rgb.red), _channel(rgb.green), _channel(rgb.blue))


def get_source_color_from_color(color_format: ColorFormat | str, string: str) -> Argb:
    """Parse a color given as hex, ``rgb(...)`` or ``hsl(...)``."""
    match ColorFormat(color_format):
        case ColorFormat.HEX:
            try:
                return Argb.from_hex(string)
            except ValueError as error:
                raise ValueError(f"Invalid hex color string provided: {string!r}") from error
        case ColorFormat.RGB:
            try:
                return _argb_from_rgb(Rgb.from_str(string))
            except ValueError as error:
                raise ValueError(f"Invalid rgb color string provided: {string!r}") from error
        case ColorFormat.HSL:
            try:
                return _argb_from_rgb(Hsl.from_str(string).to_rgb())
            except ValueError as error:
                raise ValueError(f"Invalid hsl color string provided: {string!r}") from error


def color_to_string(colors_to_compare: Iterable[ColorDefinition], compare_to: str) -> str:
    """Name of the definition closest to ``compare_to`` in L*a*b*, or ``""``."""
    closest_distance: float | None = None
    closest_color = ""
    for definition in colors_to_compare:
        distance = get_color_distance_lab(definition.color, compare_to)
        if closest_distance is None or closest_distance > distance:
            closest_distance = distance
            closest_color = definition.name
        log.debug("distance: %s, name: %s", distance, definition.name)
    log.debug("closest distance: %s, closest color: %s", closest_distance, closest_color)
    return closest_color