"""Floating-point RGB and HSL colors with simple transformations."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace

_FUNC_RE = re.compile(r"^\s*([a-zA-Z]+)\s*\((.*)\)\s*$")


def _round_half_away(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else math.ceil(value - 0.5)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _parse_function(text: str, names: tuple[str, ...]) -> list[float]:
    match = _FUNC_RE.match(text)
    if match is None or match.group(1).lower() not in names:
        raise ValueError(f"invalid color string: {text!r}")
    parts = [p for p in re.split(r"[,\s/]+", match.group(2).strip()) if p]
    if len(parts) not in (3, 4):
        raise ValueError(f"invalid color string: {text!r}")
    try:
        return [float(p.rstrip("%")) for p in parts]
    except ValueError:
        raise ValueError(f"invalid color string: {text!r}") from None


@dataclass(frozen=True)
class Rgb:
    """Red, green and blue in 0..255 plus an alpha value."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hex_str(cls, text: str) -> "Rgb":
        """Parse ``#rgb`` or ``#rrggbb``; the ``#`` is optional."""
        digits = text.strip().removeprefix("#")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) != 6:
            raise ValueError(f"invalid hex color: {text!r}")
        try:
            value = int(digits, 16)
        except ValueError:
            raise ValueError(f"invalid hex color: {text!r}") from None
        return cls(float((value >> 16) & 0xFF), float((value >> 8) & 0xFF), float(value & 0xFF))

    @classmethod
    def from_str(cls, text: str) -> "Rgb":
        """Parse ``rgb(r, g, b)`` or ``rgba(r, g, b, a)``."""
        values = _parse_function(text, ("rgb", "rgba"))
        r, g, b = (_clamp(v, 0.0, 255.0) for v in values[:3])
        alpha = values[3] if len(values) == 4 else 1.0
        return cls(r, g, b, alpha)

    def to_hex_string(self) -> str:
        """Format as ``#rrggbb``."""
        channels = (
            int(_clamp(_round_half_away(c), 0, 255)) for c in (self.red, self.green, self.blue)
        )
        return "#" + "".join(f"{c:02x}" for c in channels)

    def to_hsl(self) -> "Hsl":
        """Convert to HSL, keeping alpha."""
        r, g, b = self.red / 255.0, self.green / 255.0, self.blue / 255.0
        mx, mn = max(r, g, b), min(r, g, b)
        lightness = (mx + mn) / 2.0
        if mx == mn:
            return Hsl(0.0, 0.0, lightness * 100.0, self.alpha)
        delta = mx - mn
        if lightness > 0.5:
            saturation = delta / (2.0 - mx - mn)
        else:
            saturation = delta / (mx + mn)
        if mx == r:
            hue = (g - b) / delta + (6.0 if g < b else 0.0)
        elif mx == g:
            hue = (b - r) / delta + 2.0
        else:
            hue = (r - g) / delta + 4.0
        return Hsl(hue * 60.0, saturation * 100.0, lightness * 100.0, self.alpha)

    def lighten(self, amount: float) -> "Rgb":
        """Shift HSL lightness by ``amount`` percentage points."""
        return self.to_hsl().lighten(amount).to_rgb()

    def adjust_hue(self, amount: float) -> "Rgb":
        """Rotate the hue by ``amount`` degrees."""
        return self.to_hsl().adjust_hue(amount).to_rgb()

    def grayscale_simple(self) -> "Rgb":
        """Gray with the mean of the brightest and darkest channel."""
        value = (max(self.red, self.green, self.blue) + min(self.red, self.green, self.blue)) / 2.0
        return replace(self, red=value, green=value, blue=value)

    def invert(self) -> "Rgb":
        """Invert each channel."""
        return replace(self, red=255.0 - self.red, green=255.0 - self.green, blue=255.0 - self.blue)


@dataclass(frozen=True)
class Hsl:
    """Hue in degrees, saturation and lightness in 0..100, plus alpha."""

    hue: float
    saturation: float
    lightness: float
    alpha: float = 1.0

    @classmethod
    def from_str(cls, text: str) -> "Hsl":
        """Parse ``hsl(h, s%, l%)`` or ``hsla(h, s%, l%, a)``."""
        values = _parse_function(text, ("hsl", "hsla"))
        hue = values[0] % 360.0
        saturation = _clamp(values[1], 0.0, 100.0)
        lightness = _clamp(values[2], 0.0, 100.0)
        alpha = values[3] if len(values) == 4 else 1.0
        return cls(hue, saturation, lightness, alpha)

    def to_rgb(self) -> Rgb:
        """Convert to RGB, keeping alpha."""
        h = (self.hue % 360.0) / 360.0
        s = self.saturation / 100.0
        l = self.lightness / 100.0
        if s == 0.0:
            v = l * 255.0
            return Rgb(v, v, v, self.alpha)
        q = l * (1.0 + s) if l < 0.5 else l + s - l * s
        p = 2.0 * l - q

        def channel(t: float) -> float:
            t %= 1.0
            if t < 1.0 / 6.0:
                return p + (q - p) * 6.0 * t
            if t < 0.5:
                return q
            if t < 2.0 / 3.0:
                return p + (q - p) * (2.0 / 3.0 - t) * 6.0
            return p

        return Rgb(
            channel(h + 1.0 / 3.0) * 255.0,
            channel(h) * 255.0,
            channel(h - 1.0 / 3.0) * 255.0,
            self.alpha,
        )

    def lighten(self, amount: float) -> "Hsl":
        """Shift lightness by ``amount``, clamped to 0..100."""
        return replace(self, lightness=_clamp(self.lightness + amount, 0.0, 100.0))

    def adjust_hue(self, amount: float) -> "Hsl":
        """Rotate the hue by ``amount`` degrees."""
        return replace(self, hue=(self.hue + amount) % 360.0)

    def grayscale_simple(self) -> "Hsl":
        """Drop all saturation."""
        return replace(self, saturation=0.0)

    def invert(self) -> "Hsl":
        """Invert the color through RGB."""
        return self.to_rgb().invert().to_hsl()