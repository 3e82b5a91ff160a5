"""Log level selection and console logging setup."""

from __future__ import annotations

import logging

OFF = logging.CRITICAL + 1

_LOGGER_NAME = "matugen"
_PLAIN_FORMAT = "%(message)s"
_DEBUG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"


def get_log_level(verbose: bool = False, quiet: bool = False, debug: bool = False) -> int:
    """Pick a level: verbose, then quiet, then debug take precedence in that order."""
    if verbose:
        return logging.INFO
    if quiet:
        return OFF
    if debug:
        return logging.DEBUG
    return logging.WARNING


class _ConsoleHandler(logging.StreamHandler):
    """Marker type so a repeated setup replaces its own handler."""


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> logging.Logger:
    """Send the package's log records to standard error at the chosen level."""
    level = get_log_level(verbose, quiet, debug)
    logger = logging.getLogger(_LOGGER_NAME)
    for handler in [h for h in logger.handlers if isinstance(h, _ConsoleHandler)]:
        logger.removeHandler(handler)

    handler = _ConsoleHandler()
    if level == logging.DEBUG:
        handler.setFormatter(logging.Formatter(_DEBUG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    else:
        handler.setFormatter(logging.Formatter(_PLAIN_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger