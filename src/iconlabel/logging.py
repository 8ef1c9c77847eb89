"""Logging helpers used by ICONLABEL applications.

This module provides utilities for configuring console logging with Rich
and an in-memory "flight recorder" that buffers log records and writes them
to disk on flush. It also provides a filter that annotates third-party
log records with a short prefix used by console formatting.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import numpy
from rich.console import Console
from rich.logging import RichHandler

from iconlabel import __version__

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "iconlabel"


class ThirdPartyPrefixFilter(logging.Filter):
    """Annotate third-party log records with a short prefix.

    For records whose logger name does not start with the project prefix,
    sets `record.prefix` to a short bracketed token like "[asyncio]". For
    project loggers the prefix is set to an empty string. The filter always
    returns True to allow the record to be processed.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not record.name.startswith(PROJECT_PREFIX):
            # e.g. "asyncio.events" -> "[asyncio]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        else:
            record.prefix = ""  # no prefix for iconlabel logs
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler for console output.

    The handler writes to stderr and supports optional color and a debug
    mode. In debug mode the handler is set to DEBUG and includes source
    file/line information; otherwise a short third-party prefix is applied.

    Args:
        level: Minimum level for console output (overridden to DEBUG in debug_mode).
        debug_mode: When True, enable debug formatting (show_path, timestamps).
        color: Enable color output when True.

    Returns:
        RichHandler: Configured handler suitable to attach to the root logger.
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

    fmt = (
        "%(prefix)s %(message)s"
        if not debug_mode
        else "%(asctime)s %(name)s: %(message)s"
    )
    handler.setFormatter(logging.Formatter(fmt=fmt))

    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    The flight recorder buffers up to `capacity` log records and flushes
    them to the provided file handler when a record at `flush_level` or
    higher is emitted (or on close if `flush_on_close` is True).

    Args:
        path: Destination file path for flushed records.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer will be flushed.
        flush_on_close: If True, flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(process)d:%(threadName)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def log_startup(
    logger: Logger,
    *,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line summary plus DEBUG diagnostics about the environment.

    Args:
        logger: Logger used to emit startup messages.
        level: Effective console logging level (numeric).
        handlers: Active logging handlers attached to the root logger.
        log_path: Path to the flight-recorder output file, or None.
        logger_levels: Mapping of logger names to their configured numeric levels.
    """

    logger.info(
        "ICONLABEL %s: console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(level),
        "ON" if log_path else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("NumPy: %s", numpy.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if log_path:
        logger.debug("Flight recorder: path=%s", log_path)
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )


def configure_logging(
    level: int = logging.WARNING,
    *,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_recorder_capacity: int = 2000,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Install console (and optionally flight-recorder) handlers on the root logger.

    Replaces any handlers previously installed on the root logger, applies
    the per-logger minimum levels and logs a startup summary.

    Args:
        level: Console level (DEBUG when ``debug_mode`` is set).
        debug_mode: Enable debug formatting on the console.
        color: Enable color output on the console.
        log_path: When given, also attach a flight recorder writing there.
        flight_recorder_capacity: Number of records the flight recorder buffers.
        logger_levels: Per-logger minimum levels (NAME -> level).

    Returns:
        The handlers that were installed.
    """

    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(log_path, capacity=flight_recorder_capacity)
        )

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    for handler in handlers:
        root.addHandler(handler)
    # the flight recorder captures DEBUG regardless of console verbosity
    root.setLevel(logging.DEBUG if log_path is not None or debug_mode else level)

    levels = dict(logger_levels or {})
    for name, lvl in levels.items():
        logging.getLogger(name).setLevel(lvl)

    log_startup(
        logging.getLogger(PROJECT_PREFIX),
        level=logging.DEBUG if debug_mode else level,
        handlers=handlers,
        log_path=log_path,
        logger_levels=levels,
    )
    return handlers
