"""ARGB colors and conversions between sRGB, linear RGB, XYZ and L*a*b*."""

from __future__ import annotations

import math
import string
from collections.abc import Sequence
from typing import NamedTuple

from .mathutil import matrix_multiply

SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65 = (95.047, 100.0, 108.883)

_LAB_E = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


class Argb(NamedTuple):
    """A color as four 8-bit channels: alpha, red, green, blue."""

    alpha: int
    red: int
    green: int
    blue: int

    @classmethod
    def from_hex(cls, text: str) -> "Argb":
        """Parse ``#rgb``, ``#rrggbb`` or ``#aarrggbb`` (the ``#`` is optional)."""
        digits = text.strip().removeprefix("#")
        if not digits or any(c not in string.hexdigits for c in digits):
            raise ValueError(f"invalid hex color: {text!r}")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits = "ff" + digits
        if len(digits) != 8:
            raise ValueError(f"invalid hex color: {text!r}")
        value = int(digits, 16)
        return cls(
            (value >> 24) & 0xFF,
            (value >> 16) & 0xFF,
            (value >> 8) & 0xFF,
            value & 0xFF,
        )

    def to_hex(self) -> str:
        """Format as ``#rrggbb`` (alpha is dropped)."""
        return format_argb_as_rgb(self)


def argb_from_rgb(rgb: Sequence[int]) -> Argb:
    """Build an opaque color from red, green and blue channels."""
    r, g, b = rgb
    return Argb(255, r, g, b)


def format_argb_as_rgb(argb: Sequence[int]) -> str:
    """Format a color as ``#rrggbb``."""
    _, r, g, b = argb
    return f"#{r:02x}{g:02x}{b:02x}"


def argb_from_linrgb(linrgb: Sequence[float]) -> Argb:
    """Convert linear RGB components (0..100) to an opaque color."""
    return argb_from_rgb([delinearized(c) for c in linrgb])


def argb_from_xyz(xyz: Sequence[float]) -> Argb:
    """Convert an XYZ color to ARGB."""
    return argb_from_linrgb(matrix_multiply(xyz, XYZ_TO_SRGB))


def xyz_from_argb(argb: Sequence[int]) -> tuple[float, float, float]:
    """Convert an ARGB color to XYZ."""
    _, r, g, b = argb
    return matrix_multiply([linearized(r), linearized(g), linearized(b)], SRGB_TO_XYZ)


def argb_from_lab(l: float, a: float, b: float) -> Argb:
    """Convert an L*a*b* color to ARGB."""
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = _lab_invf(fx) * WHITE_POINT_D65[0]
    y = _lab_invf(fy) * WHITE_POINT_D65[1]
    z = _lab_invf(fz) * WHITE_POINT_D65[2]
    return argb_from_xyz([x, y, z])


def lab_from_argb(argb: Sequence[int]) -> tuple[float, float, float]:
    """Convert an ARGB color to L*a*b*."""
    x, y, z = xyz_from_argb(argb)
    fx = _lab_f(x / WHITE_POINT_D65[0])
    fy = _lab_f(y / WHITE_POINT_D65[1])
    fz = _lab_f(z / WHITE_POINT_D65[2])
    return (116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz))


def argb_from_lstar(lstar: float) -> Argb:
    """Gray color whose lightness matches the given L*."""
    w = delinearized(y_from_lstar(lstar))
    return argb_from_rgb([w, w, w])


def lstar_from_argb(argb: Sequence[int]) -> float:
    """L* coordinate of a color."""
    y = xyz_from_argb(argb)[1]
    return 116.0 * _lab_f(y / 100.0) - 16.0


def y_from_lstar(lstar: float) -> float:
    """Convert L* to relative luminance Y."""
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def linearized(rgb_comp: int) -> float:
    """Convert an 8-bit channel to linear RGB in 0..100."""
    normalized = rgb_comp / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return ((normalized + 0.055) / 1.055) ** 2.4 * 100.0


def delinearized(rgb_comp: float) -> int:
    """Convert a linear RGB channel in 0..100 to an 8-bit channel."""
    normalized = rgb_comp / 100.0
    if normalized <= 0.0031308:
        value = normalized * 12.92
    else:
        value = 1.055 * normalized ** (1.0 / 2.4) - 0.055
    scaled = value * 255.0
    if math.isnan(scaled):
        return 0
    rounded = math.floor(scaled + 0.5) if scaled >= 0 else math.ceil(scaled - 0.5)
    return int(min(max(rounded, 0), 255))


def _lab_f(t: float) -> float:
    if t > _LAB_E:
        return t ** (1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_E:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA