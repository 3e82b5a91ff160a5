"""Reading the configuration file."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir

from .sourcecolor import OwnCustomColor
from .templates import Template
from .wallpaper import Wallpaper

ERROR_TEXT = "Error reading config file, check the configuration documentation for help"

DEFAULT_CONFIG = """
[config]
[templates]
"""


class ConfigError(Exception):
    """Raised when the configuration cannot be read or is invalid."""


def _optional_table(raw: Mapping[str, Any], key: str) -> Mapping[str, Any] | None:
    value = raw.get(key)
    if value is not None and not isinstance(value, Mapping):
        raise ValueError(f"'{key}' must be a table")
    return value


@dataclass(frozen=True)
class Config:
    """The ``[config]`` table."""

    version_check: bool | None = None
    wallpaper: Wallpaper | None = None
    prefix: str | None = None
    custom_keywords: dict[str, str] | None = None
    custom_colors: dict[str, OwnCustomColor] | None = field(default=None)

    @classmethod
    def _from_table(cls, raw: Mapping[str, Any]) -> "Config":
        version_check = raw.get("version_check")
        if version_check is not None and not isinstance(version_check, bool):
            raise ValueError("'version_check' must be a boolean")
        prefix = raw.get("prefix")
        if prefix is not None and not isinstance(prefix, str):
            raise ValueError("'prefix' must be a string")

        wallpaper_raw = _optional_table(raw, "wallpaper")
        wallpaper = Wallpaper.from_config(wallpaper_raw) if wallpaper_raw is not None else None

        keywords_raw = _optional_table(raw, "custom_keywords")
        keywords = None
        if keywords_raw is not None:
            if not all(isinstance(v, str) for v in keywords_raw.values()):
                raise ValueError("'custom_keywords' values must be strings")
            keywords = dict(keywords_raw)

        colors_raw = _optional_table(raw, "custom_colors")
        colors = None
        if colors_raw is not None:
            colors = {name: OwnCustomColor.from_config(v) for name, v in colors_raw.items()}

        return cls(
            version_check=version_check,
            wallpaper=wallpaper,
            prefix=prefix,
            custom_keywords=keywords,
            custom_colors=colors,
        )


@dataclass(frozen=True)
class ConfigFile:
    """A whole configuration file: settings and named templates."""

    config: Config
    templates: dict[str, Template]

    @classmethod
    def from_toml(cls, text: str) -> "ConfigFile":
        """Parse configuration text."""
        try:
            raw = tomllib.loads(text)
        except tomllib.TOMLDecodeError as error:
            raise ConfigError(f"{error}\n{ERROR_TEXT}") from error
        for key in ("config", "templates"):
            if key not in raw:
                raise ConfigError(f"missing field `{key}`\n{ERROR_TEXT}")
        try:
            config_raw = _optional_table(raw, "config") or {}
            templates_raw = _optional_table(raw, "templates") or {}
            config = Config._from_table(config_raw)
            templates = {
                name: Template.from_config(value) for name, value in templates_raw.items()
            }
        except ValueError as error:
            raise ConfigError(f"{error}\n{ERROR_TEXT}") from error
        return cls(config=config, templates=templates)

    @classmethod
    def read(
        cls, config_path: str | os.PathLike[str] | None = None
    ) -> tuple["ConfigFile", Path | None]:
        """Read the given file, or the user's config file, or fall back to an empty one.

        Returns the configuration and the path it came from, if any.
        """
        if config_path is not None:
            path = Path(config_path)
            try:
                content = path.read_text(encoding="utf-8")
            except OSError as error:
                raise ConfigError("Could not find the provided config file.") from error
            return cls.from_toml(content), path

        path = Path(user_config_dir("matugen", appauthor=False)) / "config.toml"
        if not path.exists():
            return cls.from_toml(DEFAULT_CONFIG), None
        return cls.from_toml(path.read_text(encoding="utf-8")), path