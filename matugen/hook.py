"""Rendering and running of shell hooks."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

import jinja2

from .sourcecolor import ColorDefinition, color_to_string

log = logging.getLogger(__name__)


def format_hook(
    engine: jinja2.Environment,
    render_data: MutableMapping[str, Any],
    hook: str,
    colors_to_compare: Iterable[ColorDefinition] | None = None,
    compare_to: str | None = None,
) -> str:
    """Render ``hook`` as a template, run it in the shell and return the command.

    When both ``colors_to_compare`` and ``compare_to`` are given, ``compare_to``
    is rendered too and the name of the closest color is exposed to the hook
    as ``closest_color``.
    """
    closest_color: str | None = None
    if colors_to_compare is not None and compare_to is not None:
        rendered = engine.from_string(compare_to).render(render_data)
        closest_color = color_to_string(colors_to_compare, rendered)

    template = engine.from_string(hook)
    command = format_hook_text(render_data, closest_color, template)

    result = subprocess.run(command, shell=True, check=False)
    if result.returncode < 0:
        print("Interrupted!", file=sys.stderr)
    elif result.returncode != 0:
        log.error("Failed executing command: %r", command)
    return command


def format_hook_text(
    render_data: Mapping[str, Any],
    closest_color: str | None,
    template: jinja2.Template,
) -> str:
    """Store ``closest_color`` in the render data and render the template."""
    if isinstance(render_data, MutableMapping):
        render_data["closest_color"] = closest_color
    else:
        log.debug("not map")
    return template.render(render_data)