"""Material color schemes built from a core palette's tonal palettes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Protocol

from .colorutil import Argb, format_argb_as_rgb

_ZERO = Argb(0, 0, 0, 0)

ToneTable = Mapping[str, tuple[str, int]]


class _TonalPalette(Protocol):
    def tone(self, tone: int) -> Argb: ...


def _build(cls: type, core: Any, table: ToneTable) -> Any:
    return cls(
        **{name: getattr(core, palette).tone(tone) for name, (palette, tone) in table.items()}
    )


def _as_dict(scheme: Any) -> dict[str, str]:
    return {f.name: format_argb_as_rgb(getattr(scheme, f.name)) for f in fields(scheme)}


_SCHEME_LIGHT: ToneTable = {
    "primary": ("a1", 40),
    "primary_fixed": ("a1", 90),
    "primary_fixed_dim": ("a1", 80),
    "on_primary": ("a1", 100),
    "on_primary_fixed": ("a1", 10),
    "on_primary_fixed_variant": ("a1", 30),
    "primary_container": ("a1", 90),
    "on_primary_container": ("a1", 10),
    "secondary": ("a2", 40),
    "secondary_fixed": ("a2", 90),
    "secondary_fixed_dim": ("a2", 80),
    "on_secondary": ("a2", 100),
    "on_secondary_fixed": ("a2", 10),
    "on_secondary_fixed_variant": ("a2", 30),
    "secondary_container": ("a2", 90),
    "on_secondary_container": ("a2", 10),
    "tertiary": ("a3", 40),
    "tertiary_fixed": ("a3", 90),
    "tertiary_fixed_dim": ("a3", 80),
    "on_tertiary": ("a3", 100),
    "on_tertiary_fixed": ("a3", 10),
    "on_tertiary_fixed_variant": ("a3", 30),
    "tertiary_container": ("a3", 90),
    "on_tertiary_container": ("a3", 10),
    "error": ("error", 40),
    "on_error": ("error", 100),
    "error_container": ("error", 90),
    "on_error_container": ("error", 10),
    "surface": ("n1", 98),
    "on_surface": ("n1", 10),
    "on_surface_variant": ("n2", 30),
    "outline": ("n2", 50),
    "outline_variant": ("n2", 80),
    "shadow": ("n1", 0),
    "scrim": ("n1", 0),
    "inverse_surface": ("n1", 20),
    "inverse_on_surface": ("n1", 95),
    "inverse_primary": ("a1", 80),
    "surface_dim": ("n1", 87),
    "surface_bright": ("n1", 98),
    "surface_container_lowest": ("n1", 100),
    "surface_container_low": ("n1", 96),
    "surface_container": ("n1", 94),
    "surface_container_high": ("n1", 92),
    "surface_container_highest": ("n1", 90),
}

_SCHEME_DARK: ToneTable = {
    "primary": ("a1", 80),
    "primary_fixed": ("a1", 90),
    "primary_fixed_dim": ("a1", 80),
    "on_primary": ("a1", 20),
    "on_primary_fixed": ("a1", 10),
    "on_primary_fixed_variant": ("a1", 30),
    "primary_container": ("a1", 30),
    "on_primary_container": ("a1", 90),
    "secondary": ("a2", 80),
    "secondary_fixed": ("a2", 90),
    "secondary_fixed_dim": ("a2", 80),
    "on_secondary": ("a2", 20),
    "on_secondary_fixed": ("a2", 10),
    "on_secondary_fixed_variant": ("a2", 30),
    "secondary_container": ("a2", 30),
    "on_secondary_container": ("a2", 90),
    "tertiary": ("a3", 80),
    "tertiary_fixed": ("a3", 90),
    "tertiary_fixed_dim": ("a3", 80),
    "on_tertiary": ("a3", 20),
    "on_tertiary_fixed": ("a3", 10),
    "on_tertiary_fixed_variant": ("a3", 30),
    "tertiary_container": ("a3", 30),
    "on_tertiary_container": ("a3", 90),
    "error": ("error", 80),
    "on_error": ("error", 20),
    "error_container": ("error", 30),
    "on_error_container": ("error", 80),
    "surface": ("n1", 6),
    "on_surface": ("n1", 90),
    "on_surface_variant": ("n2", 80),
    "outline": ("n2", 60),
    "outline_variant": ("n2", 30),
    "shadow": ("n1", 0),
    "scrim": ("n1", 0),
    "inverse_surface": ("n1", 90),
    "inverse_on_surface": ("n1", 20),
    "inverse_primary": ("a1", 40),
    "surface_dim": ("n1", 6),
    "surface_bright": ("n1", 24),
    "surface_container_lowest": ("n1", 4),
    "surface_container_low": ("n1", 10),
    "surface_container": ("n1", 12),
    "surface_container_high": ("n1", 17),
    "surface_container_highest": ("n1", 22),
}

_SCHEME_PURE_DARK: ToneTable = {
    **_SCHEME_DARK,
    "surface": ("n1", 0),
    "surface_dim": ("n1", 87),
    "surface_bright": ("n1", 98),
    "surface_container_lowest": ("n1", 100),
    "surface_container_low": ("n1", 96),
    "surface_container": ("n1", 94),
    "surface_container_high": ("n1", 92),
    "surface_container_highest": ("n1", 90),
}

_ANDROID_LIGHT: ToneTable = {
    "color_accent_primary": ("a1", 90),
    "color_accent_primary_variant": ("a1", 40),
    "color_accent_secondary": ("a2", 90),
    "color_accent_secondary_variant": ("a2", 40),
    "color_accent_tertiary": ("a3", 90),
    "color_accent_tertiary_variant": ("a3", 40),
    "text_color_primary": ("n1", 10),
    "text_color_secondary": ("n2", 30),
    "text_color_tertiary": ("n2", 50),
    "text_color_primary_inverse": ("n1", 95),
    "text_color_secondary_inverse": ("n1", 80),
    "text_color_tertiary_inverse": ("n1", 60),
    "color_background": ("n1", 95),
    "color_background_floating": ("n1", 98),
    "color_surface": ("n1", 98),
    "color_surface_variant": ("n1", 90),
    "color_surface_highlight": ("n1", 100),
    "surface_header": ("n1", 90),
    "under_surface": ("n1", 0),
    "off_state": ("n1", 20),
    "accent_surface": ("a2", 95),
    "text_primary_on_accent": ("n1", 10),
    "text_secondary_on_accent": ("n2", 30),
    "volume_background": ("n1", 25),
    "scrim": ("n1", 80),
}

_ANDROID_DARK: ToneTable = {
    **_ANDROID_LIGHT,
    "color_accent_primary_variant": ("a1", 70),
    "color_accent_secondary_variant": ("a2", 70),
    "color_accent_tertiary_variant": ("a3", 70),
    "text_color_primary": ("n1", 95),
    "text_color_secondary": ("n2", 80),
    "text_color_tertiary": ("n2", 60),
    "text_color_primary_inverse": ("n1", 10),
    "text_color_secondary_inverse": ("n1", 30),
    "text_color_tertiary_inverse": ("n1", 50),
    "color_background": ("n1", 10),
    "color_background_floating": ("n1", 10),
    "color_surface": ("n1", 20),
    "color_surface_variant": ("n1", 30),
    "color_surface_highlight": ("n1", 35),
    "surface_header": ("n1", 30),
}

_ANDROID_PURE_DARK: ToneTable = {
    **_ANDROID_DARK,
    "color_background": ("n1", 0),
    "color_background_floating": ("n1", 0),
    "color_surface": ("n1", 5),
    "color_surface_variant": ("n1", 15),
    "color_surface_highlight": ("n1", 10),
    "surface_header": ("n1", 10),
    "volume_background": ("n1", 0),
}


@dataclass(frozen=True)
class Scheme:
    """A Material color scheme: a mapping of color roles to colors."""

    primary: Argb = _ZERO
    primary_fixed: Argb = _ZERO
    primary_fixed_dim: Argb = _ZERO
    on_primary: Argb = _ZERO
    on_primary_fixed: Argb = _ZERO
    on_primary_fixed_variant: Argb = _ZERO
    primary_container: Argb = _ZERO
    on_primary_container: Argb = _ZERO
    secondary: Argb = _ZERO
    secondary_fixed: Argb = _ZERO
    secondary_fixed_dim: Argb = _ZERO
    on_secondary: Argb = _ZERO
    on_secondary_fixed: Argb = _ZERO
    on_secondary_fixed_variant: Argb = _ZERO
    secondary_container: Argb = _ZERO
    on_secondary_container: Argb = _ZERO
    tertiary: Argb = _ZERO
    tertiary_fixed: Argb = _ZERO
    tertiary_fixed_dim: Argb = _ZERO
    on_tertiary: Argb = _ZERO
    on_tertiary_fixed: Argb = _ZERO
    on_tertiary_fixed_variant: Argb = _ZERO
    tertiary_container: Argb = _ZERO
    on_tertiary_container: Argb = _ZERO
    error: Argb = _ZERO
    on_error: Argb = _ZERO
    error_container: Argb = _ZERO
    on_error_container: Argb = _ZERO
    surface: Argb = _ZERO
    on_surface: Argb = _ZERO
    on_surface_variant: Argb = _ZERO
    outline: Argb = _ZERO
    outline_variant: Argb = _ZERO
    shadow: Argb = _ZERO
    scrim: Argb = _ZERO
    inverse_surface: Argb = _ZERO
    inverse_on_surface: Argb = _ZERO
    inverse_primary: Argb = _ZERO
    surface_dim: Argb = _ZERO
    surface_bright: Argb = _ZERO
    surface_container_lowest: Argb = _ZERO
    surface_container_low: Argb = _ZERO
    surface_container: Argb = _ZERO
    surface_container_high: Argb = _ZERO
    surface_container_highest: Argb = _ZERO

    @classmethod
    def light_from_core_palette(cls, core: Any) -> "Scheme":
        """Light scheme from a core palette with a1, a2, a3, n1, n2 and error."""
        return _build(cls, core, _SCHEME_LIGHT)

    @classmethod
    def dark_from_core_palette(cls, core: Any) -> "Scheme":
        """Dark scheme from a core palette."""
        return _build(cls, core, _SCHEME_DARK)

    @classmethod
    def pure_dark_from_core_palette(cls, core: Any) -> "Scheme":
        """Dark scheme with a black surface."""
        return _build(cls, core, _SCHEME_PURE_DARK)

    def to_dict(self) -> dict[str, str]:
        """Every role mapped to its ``#rrggbb`` string, in field order."""
        return _as_dict(self)


@dataclass(frozen=True)
class SchemeAndroid:
    """Color roles used by the Android system theme."""

    color_accent_primary: Argb = _ZERO
    color_accent_primary_variant: Argb = _ZERO
    color_accent_secondary: Argb = _ZERO
    color_accent_secondary_variant: Argb = _ZERO
    color_accent_tertiary: Argb = _ZERO
    color_accent_tertiary_variant: Argb = _ZERO
    text_color_primary: Argb = _ZERO
    text_color_secondary: Argb = _ZERO
    text_color_tertiary: Argb = _ZERO
    text_color_primary_inverse: Argb = _ZERO
    text_color_secondary_inverse: Argb = _ZERO
    text_color_tertiary_inverse: Argb = _ZERO
    color_background: Argb = _ZERO
    color_background_floating: Argb = _ZERO
    color_surface: Argb = _ZERO
    color_surface_variant: Argb = _ZERO
    color_surface_highlight: Argb = _ZERO
    surface_header: Argb = _ZERO
    under_surface: Argb = _ZERO
    off_state: Argb = _ZERO
    accent_surface: Argb = _ZERO
    text_primary_on_accent: Argb = _ZERO
    text_secondary_on_accent: Argb = _ZERO
    volume_background: Argb = _ZERO
    scrim: Argb = _ZERO

    @classmethod
    def light_from_core_palette(cls, core: Any) -> "SchemeAndroid":
        """Light Android scheme from a core palette."""
        return _build(cls, core, _ANDROID_LIGHT)

    @classmethod
    def dark_from_core_palette(cls, core: Any) -> "SchemeAndroid":
        """Dark Android scheme from a core palette."""
        return _build(cls, core, _ANDROID_DARK)

    @classmethod
    def pure_dark_from_core_palette(cls, core: Any) -> "SchemeAndroid":
        """Dark Android scheme with black backgrounds."""
        return _build(cls, core, _ANDROID_PURE_DARK)

    def to_dict(self) -> dict[str, str]:
        """Every role mapped to its ``#rrggbb`` string, in field order."""
        return _as_dict(self)