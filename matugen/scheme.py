"""Scheme variants, light/dark modes and named color sets."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .colorutil import Argb

ColorEntry = tuple[str, Argb]


class SchemeTypes(enum.Enum):
    """Dynamic scheme variants that can be generated."""

    SCHEME_CONTENT = "scheme-content"
    SCHEME_EXPRESSIVE = "scheme-expressive"
    SCHEME_FIDELITY = "scheme-fidelity"
    SCHEME_FRUIT_SALAD = "scheme-fruit-salad"
    SCHEME_MONOCHROME = "scheme-monochrome"
    SCHEME_NEUTRAL = "scheme-neutral"
    SCHEME_RAINBOW = "scheme-rainbow"
    SCHEME_TONAL_SPOT = "scheme-tonal-spot"


class SchemesEnum(enum.Enum):
    """Light or dark mode."""

    LIGHT = "light"
    DARK = "dark"

    def __str__(self) -> str:
        return self.value


def _normalize(entries: Iterable[tuple[str, Iterable[int]]]) -> tuple[ColorEntry, ...]:
    return tuple(sorted({(name, Argb(*color)) for name, color in entries}))


@dataclass(frozen=True)
class Schemes:
    """Named colors for the light and dark schemes, each kept sorted and unique."""

    light: tuple[ColorEntry, ...] = field(default=())
    dark: tuple[ColorEntry, ...] = field(default=())

    def __post_init__(self) -> None:
        object.__setattr__(self, "light", _normalize(self.light))
        object.__setattr__(self, "dark", _normalize(self.dark))

    def pairs(self) -> Iterator[tuple[str, Argb, Argb]]:
        """Yield ``(name, light_color, dark_color)`` by walking both sets in step."""
        for (name, light), (_, dark) in zip(self.light, self.dark):
            yield name, light, dark