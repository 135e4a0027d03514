"""Root logger setup shared by the Tk and NiceGUI entrypoints.

Two environment variables override whatever the persisted settings say:

``MINITOOLS_LOG_LEVEL``
    Level name (``debug``, ``WARNING``...) or number.
``MINITOOLS_DEBUG``
    Any truthy value (``1``, ``true``, ``yes``, ``on``) selects DEBUG.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "MINITOOLS_LOG_LEVEL"
DEBUG_ENV = "MINITOOLS_DEBUG"

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def parse_level(value: Union[int, str, None]) -> Optional[int]:
    """Translate a level name or number; ``None`` when it is not a level."""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    token = value.strip()
    if not token:
        return None
    if token.isdigit():
        return int(token)
    level = logging.getLevelName(token.upper())
    return level if isinstance(level, int) else None


def env_level() -> Optional[int]:
    """Level forced by the environment, if any."""
    explicit = os.environ.get(LOG_LEVEL_ENV)
    if explicit:
        return parse_level(explicit) or logging.INFO
    if (os.environ.get(DEBUG_ENV) or "").strip().lower() in _TRUTHY:
        return logging.DEBUG
    return None


def configure_root(default_level: Union[int, str] = logging.INFO) -> int:
    """Install the console handler once and set the effective root level."""
    level = env_level()
    if level is None:
        level = parse_level(default_level) or logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format=LOG_FORMAT, datefmt=LOG_DATEFMT)
    root.setLevel(level)
    return level


def apply_gui_preferences(debug_enabled: bool) -> int:
    """Follow the "debug logging" preference unless the environment decides."""
    level = env_level()
    if level is None:
        level = logging.DEBUG if debug_enabled else logging.INFO
    logging.getLogger().setLevel(level)
    return level


def level_name(level: int) -> str:
    return logging.getLevelName(level)


def env_requests_debug() -> bool:
    level = env_level()
    return level is not None and level <= logging.DEBUG


__all__ = [
    "DEBUG_ENV",
    "LOG_LEVEL_ENV",
    "apply_gui_preferences",
    "configure_root",
    "env_level",
    "env_requests_debug",
    "level_name",
    "parse_level",
]
