"""Distances between colors."""

from __future__ import annotations

import math

from .colorspace import Rgb
from .colorutil import Argb, lab_from_argb


def get_color_distance_lab(c1: str, c2: str) -> float:
    """Euclidean distance in L*a*b* between two hex color strings."""
    l1, a1, b1 = lab_from_argb(Argb.from_hex(c1))
    l2, a2, b2 = lab_from_argb(Argb.from_hex(c2))
    return math.sqrt((l1 - l2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def get_color_distance(c1: Rgb, c2: Rgb) -> float:
    """Weighted RGB distance (the first color's green and blue are read swapped)."""
    r1, g1, b1 = int(c1.red), int(c1.blue), int(c1.green)
    r2, g2, b2 = int(c2.red), int(c2.green), int(c2.blue)

    rmean = float(int((r1 + r2) / 2))
    weight_r = 2.0 + rmean / 256.0
    weight_g = 4.0
    weight_b = 2.0 + (255.0 - rmean) / 256.0

    return math.sqrt(
        weight_r * (r1 - r2) ** 2 + weight_g * (g1 - g2) ** 2 + weight_b * (b1 - b2) ** 2
    )