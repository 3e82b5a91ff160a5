"""Rendering configured templates to their output files."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import jinja2

from .colorutil import Argb
from .hook import format_hook
from .render import (
    RenderError,
    add_engine_filters,
    create_engine,
    get_render_data,
    render_template,
)
from .scheme import Schemes, SchemesEnum
from .sourcecolor import ColorDefinition, ColorSource, ImageSource

log = logging.getLogger(__name__)

_OPTIONAL_STRINGS = (
    "compare_to",
    "pre_hook",
    "post_hook",
    "expr_prefix",
    "expr_postfix",
    "block_prefix",
    "block_postfix",
)


def _required_path(raw: Mapping[str, Any], key: str) -> Path:
    value = raw.get(key)
    if not isinstance(value, str):
        raise ValueError(f"template needs a '{key}' string")
    return Path(value)


def _optional_str(raw: Mapping[str, Any], key: str) -> str | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"template '{key}' must be a string")
    return value


def _mode(value: Any) -> SchemesEnum | None:
    if value is None:
        return None
    if isinstance(value, str):
        try:
            return SchemesEnum(value.lower())
        except ValueError:
            pass
    raise ValueError(f"invalid template mode: {value!r}")


def _definitions(value: Any) -> tuple[ColorDefinition, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError("template 'colors_to_compare' must be a list")
    definitions = []
    for entry in value:
        if (
            not isinstance(entry, Mapping)
            or not isinstance(entry.get("name"), str)
            or not isinstance(entry.get("color"), str)
        ):
            raise ValueError(f"invalid color definition: {entry!r}")
        definitions.append(ColorDefinition(name=entry["name"], color=entry["color"]))
    return tuple(definitions)


@dataclass(frozen=True)
class Template:
    """One template: where it is read from, where it goes and how it is rendered."""

    input_path: Path
    output_path: Path
    mode: SchemesEnum | None = None
    colors_to_compare: tuple[ColorDefinition, ...] | None = None
    compare_to: str | None = None
    pre_hook: str | None = None
    post_hook: str | None = None
    expr_prefix: str | None = None
    expr_postfix: str | None = None
    block_prefix: str | None = None
    block_postfix: str | None = None

    @classmethod
    def from_config(cls, raw: Mapping[str, Any]) -> "Template":
        """Build from a configuration table."""
        if not isinstance(raw, Mapping):
            raise ValueError(f"invalid template configuration: {raw!r}")
        return cls(
            input_path=_required_path(raw, "input_path"),
            output_path=_required_path(raw, "output_path"),
            mode=_mode(raw.get("mode")),
            colors_to_compare=_definitions(raw.get("colors_to_compare")),
            **{key: _optional_str(raw, key) for key in _OPTIONAL_STRINGS},
        )


def _resolve(path: Path, base: Path) -> Path:
    expanded = Path(os.path.expanduser(path))
    if expanded.is_absolute():
        return expanded
    return base / expanded


def get_absolute_paths(
    config_path: str | os.PathLike[str] | None, template: Template
) -> tuple[Path, Path]:
    """Absolute input and output paths of a template.

    ``~`` is expanded; relative paths are taken from the configuration file's
    directory when one is given, otherwise from the working directory.
    """
    if config_path is not None:
        base = Path(config_path).resolve(strict=True)
        if base.is_file():
            base = base.parent
    else:
        base = Path.cwd()
    return _resolve(template.input_path, base), _resolve(template.output_path, base)


def _create_missing_folders(output_path: Path) -> None:
    parent = output_path.parent
    if not parent.exists():
        log.error("The %s folder doesnt exist, trying to create...", parent)
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            log.debug("Failed to create the %s folders: %s", output_path, error)


def export_template(
    engine: jinja2.Environment,
    name: str,
    render_data: Mapping[str, Any],
    path_prefix: str | os.PathLike[str] | None,
    output_path: str | os.PathLike[str],
    input_path: str | os.PathLike[str],
    index: int,
    total: int,
) -> Path:
    """Render a loaded template and write it out; return the path written."""
    data = render_template(engine, name, render_data, str(input_path))
    output_path = Path(output_path)

    if path_prefix is not None and os.name != "nt":
        if not output_path.is_absolute():
            raise ValueError(f"output path is not an absolute path: {output_path}")
        out = Path(path_prefix) / output_path.relative_to(output_path.anchor)
    else:
        out = output_path

    _create_missing_folders(out)
    log.debug("out: %s", out)
    with open(out, "w", encoding="utf-8", newline="") as handle:
        handle.write(data)
    if not os.access(out, os.W_OK):
        log.error("The %s file is Read-Only", output_path)

    log.info("[%d/%d] Exported the %s template to %s", index + 1, total, name, output_path)
    return out


def _load_template(
    engine: jinja2.Environment, name: str, data: str, input_path: Path
) -> None:
    loader = engine.loader
    assert isinstance(loader, jinja2.DictLoader)
    loader.mapping[name] = data
    try:
        engine.get_template(name)
    except jinja2.TemplateSyntaxError as error:
        raise RenderError(f"[{name} - {input_path}]\n{error}") from error


def generate_templates(
    schemes: Schemes,
    templates: Mapping[str, Template],
    source: ImageSource | ColorSource,
    source_color: Argb,
    default_scheme: SchemesEnum,
    custom_keywords: Mapping[str, str] | None = None,
    path_prefix: str | os.PathLike[str] | None = None,
    config_path: str | os.PathLike[str] | None = None,
) -> list[Path]:
    """Render every template in turn, running its hooks; return the paths written."""
    log.info("Loaded %d templates.", len(templates))
    image = source.path if isinstance(source, ImageSource) else None
    render_data = get_render_data(schemes, source_color, default_scheme, custom_keywords, image)
    written: list[Path] = []

    for index, (name, template) in enumerate(templates.items()):
        engine = create_engine(
            template.expr_prefix or "{{",
            template.expr_postfix or "}}",
            template.block_prefix or "<*",
            template.block_postfix or "*>",
        )
        add_engine_filters(engine)

        input_path, output_path = get_absolute_paths(config_path, template)

        if template.pre_hook is not None:
            format_hook(
                engine, render_data, template.pre_hook,
                template.colors_to_compare, template.compare_to,
            )

        if not input_path.exists():
            log.warning(
                "The %s template in %s doesnt exist, skipping...", name, input_path
            )
            continue

        try:
            data = input_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as error:
            raise ValueError(
                f"Could not read the {name} template. "
                "Try converting the file to use UTF-8 encoding."
            ) from error

        _load_template(engine, name, data, input_path)
        log.debug("Trying to write the %s template to %s", name, output_path)

        written.append(
            export_template(
                engine, name, render_data, path_prefix,
                output_path, input_path, index, len(templates),
            )
        )

        if template.post_hook is not None:
            format_hook(
                engine, render_data, template.post_hook,
                template.colors_to_compare, template.compare_to,
            )
    return written