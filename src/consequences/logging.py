"""Logging helpers for applications and tests using consequences.

The library itself only emits DEBUG records through module loggers under the
``consequences`` namespace and installs no handlers. This module provides a
Rich console handler for surfacing those records, a filter that tags
records from other libraries with a short prefix, and an environment dump
useful when reporting ordering or collation issues.
"""

from __future__ import annotations

import locale
import logging
import platform
import sys
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from . import __version__

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "consequences"


class ForeignPrefixFilter(logging.Filter):
    """Tag records of non-consequences loggers with a bracketed prefix.

    Records from a logger such as ``"hypothesis.core"`` get
    ``record.prefix == "[hypothesis]"``; consequences records get an empty
    prefix. Every record is let through.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.split(".")[0] != PROJECT_PREFIX:
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (DEBUG in debug_mode).
        debug_mode: When True, show the source path and logger name of
            each record instead of the foreign-logger prefix.
        color: Enable color output when True.

    Returns:
        RichHandler: Handler ready to attach to a logger.
    """
    ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]
    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )

    fmt = "%(prefix)s %(message)s" if not debug_mode else "%(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ForeignPrefixFilter())

    return handler


def enable_debug_logging(color: bool = True) -> RichHandler:
    """Route consequences DEBUG records to the console.

    Attaches a debug-mode `config_console_handler` to the ``consequences``
    logger once; repeated calls return the handler already attached.

    Returns:
        RichHandler: The attached handler.
    """
    package_logger = logging.getLogger(PROJECT_PREFIX)
    package_logger.setLevel(logging.DEBUG)
    for existing in package_logger.handlers:
        if isinstance(existing, RichHandler):
            return existing
    handler = config_console_handler(debug_mode=True, color=color)
    package_logger.addHandler(handler)
    return handler


def log_environment(logger: Logger) -> None:
    """Log the interpreter, platform and collation settings at DEBUG level."""
    logger.debug("consequences: %s", __version__)
    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("LC_COLLATE: %s", locale.setlocale(locale.LC_COLLATE))
