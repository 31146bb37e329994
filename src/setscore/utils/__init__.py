"""Shared utilities for SetScore."""

# SetScore
# Copyright (C) 2025  SetScore developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import sys
from typing import Optional

from setscore.constants import DEFAULT_LOG_LEVEL, LOG_FORMAT, LOG_LEVEL_ENV_VAR

_ROOT_LOGGER_NAME = "setscore"


def _resolve_level(level: Optional[str]) -> str:
    level = (level or os.environ.get(LOG_LEVEL_ENV_VAR) or DEFAULT_LOG_LEVEL).upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Return a module logger under the package root logger.

    The package root gets a NullHandler, so nothing is printed unless the
    application configures logging (see :func:`configure_console_logging`).

    Args:
        name: Usually ``__name__`` of the calling module
        level: Level for this logger only. The package level comes from the
            ``SETSCORE_LOG_LEVEL`` environment variable, default ``WARNING``

    Returns:
        The configured logger
    """
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    if not root.handlers:
        root.addHandler(logging.NullHandler())
    root.setLevel(_resolve_level(None))
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger


def configure_console_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr, for command line entry points."""
    logging.basicConfig(
        level=_resolve_level(level),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )


__all__ = ["setup_logger", "configure_console_logging"]
