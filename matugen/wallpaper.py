"""Setting the desktop wallpaper."""

from __future__ import annotations

import logging
import subprocess
import sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .sourcecolor import ColorSource, ImageSource

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Wallpaper:
    """How to set the wallpaper: a command, its arguments and an optional pre-hook.

    The image path is passed as the last argument of the command.
    """

    command: str
    pre_hook: str | None = None
    arguments: tuple[str, ...] | None = None

    @classmethod
    def from_config(cls, raw: Mapping[str, Any]) -> "Wallpaper":
        """Build from a configuration table."""
        if not isinstance(raw, Mapping):
            raise ValueError(f"invalid wallpaper configuration: {raw!r}")
        command = raw.get("command")
        if not isinstance(command, str):
            raise ValueError("wallpaper configuration needs a 'command' string")
        pre_hook = raw.get("pre_hook")
        if pre_hook is not None and not isinstance(pre_hook, str):
            raise ValueError("wallpaper 'pre_hook' must be a string")
        arguments = raw.get("arguments")
        if arguments is not None:
            if not isinstance(arguments, list) or not all(isinstance(a, str) for a in arguments):
                raise ValueError("wallpaper 'arguments' must be a list of strings")
            arguments = tuple(arguments)
        return cls(command=command, pre_hook=pre_hook, arguments=arguments)


def _spawn_hook(hook: str) -> None:
    result = subprocess.run(hook, shell=True, check=False)
    if result.returncode < 0:
        print("Interrupted!", file=sys.stderr)
    elif result.returncode != 0:
        log.error("Failed executing command: %r", hook)


def set_unix(path: str, wallpaper: Wallpaper) -> subprocess.Popen[bytes] | None:
    """Run the pre-hook, then start the wallpaper command without waiting for it.

    Returns the started process, or ``None`` if it could not be started.
    """
    log.info("Setting wallpaper...")
    if wallpaper.pre_hook is not None:
        _spawn_hook(wallpaper.pre_hook)

    argv = [wallpaper.command, *(wallpaper.arguments or ()), path]
    try:
        process = subprocess.Popen(argv, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
    except FileNotFoundError:
        log.error(
            "Failed to set wallpaper, the program %s was not found in PATH!", wallpaper.command
        )
        return None
    except OSError:
        log.error("Some error(s) occured while setting wallpaper!")
        return None
    log.info("Successfully set the wallpaper with %s", wallpaper.command)
    return process


def _enquote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def set_macos(path: str) -> subprocess.CompletedProcess[bytes]:
    """Ask Finder to set the desktop picture through AppleScript."""
    script = f'tell app "finder" to set desktop picture to POSIX file {_enquote(path)}'
    return subprocess.run(["osascript", "-e", script], capture_output=True, check=False)


def set_wallpaper(
    source: ImageSource | ColorSource, wallpaper_cfg: Wallpaper
) -> subprocess.Popen[bytes] | subprocess.CompletedProcess[bytes] | None:
    """Set the wallpaper when the scheme came from an image; otherwise do nothing."""
    if not isinstance(source, ImageSource):
        return None
    platform = sys.platform
    if platform == "darwin":
        return set_macos(source.path)
    if platform.startswith(("linux", "netbsd")):
        return set_unix(source.path, wallpaper_cfg)
    if platform == "win32":
        raise OSError("setting the wallpaper is not supported on this platform")
    return None