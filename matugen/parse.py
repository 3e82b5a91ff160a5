"""Detection of the format of a color string."""

from __future__ import annotations

from typing import Any


def parse_color(string: str) -> str | None:
    """Name the format of a color string.

    Returns ``"hex"`` for ``#...``, the function name for ``name(...)``,
    ``"hex_stripped"`` for any six-byte string, or ``None``.
    """
    if string.startswith("#"):
        return "hex"
    paren = string.find("(")
    if paren != -1 and string.endswith(")"):
        return string[:-1][:paren].rstrip()
    if len(string.encode("utf-8")) == 6:
        return "hex_stripped"
    return None


def check_string_value(value: Any) -> str | None:
    """Return the value if it is a string, otherwise ``None``."""
    return value if isinstance(value, str) else None