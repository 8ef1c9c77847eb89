"""Configuration utilities for ICONLABEL.

This module centralizes small helpers and constants related to configuration.
All settings come from environment variables and are read on demand.
"""

import logging
import os
import re
from pathlib import Path

from platformdirs import user_log_dir

from iconlabel.adapters.image_loaders import LocalImageLoader, RemoteOrLocalImageLoader
from iconlabel.interfaces.image_loader import ImageLoader

IMAGE_ROOT_ENV = "ICONLABEL_IMAGE_ROOT"  # pragma: no mutate
LOG_PATH_ENV = "ICONLABEL_LOG_PATH"  # pragma: no mutate
LOGGER_LEVELS_ENV = "ICONLABEL_LOGGER_LEVELS"  # pragma: no mutate

# Per-logger minimum levels applied unless overridden
DEFAULT_LOGGER_LEVELS = {"asyncio": logging.WARNING}


class ConfigError(Exception):
    """Base class for configuration errors."""


class ImageRootNotSetError(ConfigError):
    """Raised when the ICONLABEL_IMAGE_ROOT environment variable is not set."""

    def __init__(self) -> None:
        super().__init__(f"{IMAGE_ROOT_ENV} is not set.")


class InvalidLoggerLevelError(ConfigError):
    """Raised when a NAME=LEVEL logger override is malformed."""


def get_image_root() -> Path:
    """Get the local image directory from the environment.

    Returns:
        The value of the `ICONLABEL_IMAGE_ROOT` environment variable as a path.

    Raises:
        ImageRootNotSetError: If `ICONLABEL_IMAGE_ROOT` is not set.
    """
    if not (root := os.environ.get(IMAGE_ROOT_ENV)):
        raise ImageRootNotSetError
    return Path(root)


def get_log_path() -> Path:
    """Get the flight-recorder log file path.

    Uses `ICONLABEL_LOG_PATH` when set, otherwise ``latest.log`` in the
    platform's user log directory.
    """
    if path := os.environ.get(LOG_PATH_ENV):
        return Path(path)
    return Path(user_log_dir("iconlabel", appauthor=False)) / "latest.log"


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    """Split the input on commas and whitespace and drop empty fragments."""
    items: list[str] = []
    if isinstance(value, (tuple, list)):
        for v in value:
            items.extend([s for s in re.split(r"[,\s]+", v) if s])
    else:  # plain string
        items.extend([s for s in re.split(r"[,\s]+", value) if s])
    return items


def parse_logger_levels(
    value: str | list[str] | tuple[str, ...] | None = None,
) -> dict[str, int]:
    """Parse NAME=LEVEL pairs into a name->level dict.

    Combines DEFAULT_LOGGER_LEVELS with the given overrides. When ``value`` is
    None the `ICONLABEL_LOGGER_LEVELS` environment variable is used. Each item
    must be of the form NAME=LEVEL where LEVEL is a standard logging level
    name (e.g. DEBUG, INFO, WARNING).

    Args:
        value: Overrides as one comma/space separated string or a sequence of them.

    Returns:
        dict[str, int]: Mapping of logger names to numeric logging levels.

    Raises:
        InvalidLoggerLevelError: If an item is malformed or LEVEL is invalid.
    """
    if value is None:
        value = os.environ.get(LOGGER_LEVELS_ENV, "")

    levels = dict(DEFAULT_LOGGER_LEVELS)
    for item in _normalize_items(value):
        try:
            name, level_str = item.split("=", 1)
        except ValueError as e:
            raise InvalidLoggerLevelError(f"Expected NAME=LEVEL, got {item!r}") from e
        lvl = getattr(logging, level_str.strip().upper(), None)
        if not isinstance(lvl, int):
            raise InvalidLoggerLevelError(f"Invalid log level: {level_str}")
        levels[name.strip()] = lvl
    return levels


def build_default_loader(remote: ImageLoader | None = None) -> ImageLoader:
    """Build the default loader: local images under the configured root.

    Args:
        remote: Optional loader for http(s) references.

    Raises:
        ImageRootNotSetError: If `ICONLABEL_IMAGE_ROOT` is not set.
    """
    return RemoteOrLocalImageLoader(LocalImageLoader(get_image_root()), remote=remote)
