"""Template engine setup and the data templates are rendered with."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Any

import jinja2

from .colorutil import Argb
from .filters import (
    FilterError,
    auto_lightness,
    camel_case,
    grayscale,
    invert,
    set_alpha,
    set_hue,
    set_lightness,
)
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
from .scheme import Schemes, SchemesEnum


class RenderError(Exception):
    """Raised when a template fails to render."""


@dataclass(frozen=True)
class Color:
    """One color written out in every supported string format."""

    hex: str
    hex_stripped: str
    rgb: str
    rgba: str
    hsl: str
    hsla: str
    red: str
    green: str
    blue: str
    alpha: str
    hue: str
    saturation: str
    lightness: str


@dataclass(frozen=True)
class ColorVariants:
    """A color in the light scheme, the dark scheme and the chosen mode."""

    light: Color
    dark: Color
    default: Color


def create_engine(
    expr_prefix: str = "{{",
    expr_postfix: str = "}}",
    block_prefix: str = "<*",
    block_postfix: str = "*>",
) -> jinja2.Environment:
    """Template environment with the given delimiters and an in-memory loader."""
    return jinja2.Environment(
        loader=jinja2.DictLoader({}),
        variable_start_string=expr_prefix,
        variable_end_string=expr_postfix,
        block_start_string=block_prefix,
        block_end_string=block_postfix,
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )


def _replace(string: Any, old: str, new: str) -> str:
    return str(string).replace(old, new)


def add_engine_filters(engine: jinja2.Environment) -> None:
    """Register the color and string filters on an environment."""
    engine.filters.update(
        {
            "set_lightness": set_lightness,
            "auto_lightness": auto_lightness,
            "set_alpha": set_alpha,
            "set_hue": set_hue,
            "grayscale": grayscale,
            "invert": invert,
            "to_upper": lambda s: str(s).upper(),
            "to_lower": lambda s: str(s).lower(),
            "replace": _replace,
            "camel_case": camel_case,
        }
    )


def render_template(
    engine: jinja2.Environment,
    name: str,
    render_data: Mapping[str, Any],
    path: str | None = None,
) -> str:
    """Render a named template, wrapping failures in a ``RenderError``."""
    try:
        return engine.get_template(name).render(render_data)
    except (jinja2.TemplateError, FilterError) as error:
        raise RenderError(f"[{name} - {path or ''}]\n{error}") from error


def get_render_data(
    schemes: Schemes,
    source_color: Argb,
    default_scheme: SchemesEnum,
    custom_keywords: Mapping[str, str] | None = None,
    image: str | None = None,
) -> dict[str, Any]:
    """Build the mapping that templates are rendered with."""
    colors = generate_colors(schemes, source_color, default_scheme)
    return {
        "colors": {name: asdict(variants) for name, variants in colors.items()},
        "image": image,
        "custom": {str(k): str(v) for k, v in (custom_keywords or {}).items()},
        "mode": default_scheme.name.title(),
    }


def generate_colors(
    schemes: Schemes, source_color: Argb, default_scheme: SchemesEnum
) -> dict[str, ColorVariants]:
    """Variants for every named scheme color plus ``source_color``."""
    colors = {
        name: generate_single_color(name, source_color, default_scheme, light, dark)
        for name, light, dark in schemes.pairs()
    }
    colors["source_color"] = generate_single_color(
        "source_color", source_color, default_scheme, source_color, source_color
    )
    return colors


def generate_single_color(
    field: str,
    source_color: Argb,
    default_scheme: SchemesEnum,
    color_light: Argb,
    color_dark: Argb,
) -> ColorVariants:
    """Variants of one color; ``source_color`` always uses the source."""
    if field == "source_color":
        source = _color_strings(source_color)
        return ColorVariants(light=source, dark=source, default=source)
    default = color_light if default_scheme is SchemesEnum.LIGHT else color_dark
    return ColorVariants(
        light=_color_strings(color_light),
        dark=_color_strings(color_dark),
        default=_color_strings(default),
    )


def _u8(value: float) -> str:
    if math.isnan(value):
        return "0"
    return str(int(min(max(value, 0.0), 255.0)))


def _color_strings(color: Argb) -> Color:
    base = rgb_from_argb(color)
    hsl = hsl_from_rgb(base)
    return Color(
        hex=format_hex(base),
        hex_stripped=format_hex_stripped(base),
        rgb=format_rgb(base),
        rgba=format_rgba(base, True),
        hsl=format_hsl(hsl),
        hsla=format_hsla(hsl, True),
        red=_u8(base.red),
        green=_u8(base.green),
        blue=_u8(base.blue),
        alpha=_u8(base.alpha),
        hue=repr(float(hsl.hue)),
        saturation=repr(float(hsl.saturation)),
        lightness=repr(float(hsl.lightness)),
    )