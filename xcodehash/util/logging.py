"""
MIT License

Lightweight logging helpers for xcodehash.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "XCODEHASH_LOG_LEVEL"
PACKAGE_LOGGER = "xcodehash"

_ROOT: Optional[logging.Logger] = None


def level_from_env() -> int:
    """Return the level named by ``XCODEHASH_LOG_LEVEL``, or INFO if unset or unknown."""
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper())
    # getLevelName maps unknown names to a "Level <name>" string.
    return level if isinstance(level, int) else logging.INFO


def _configure_root() -> logging.Logger:
    global _ROOT
    if _ROOT is None:
        logger = logging.getLogger(PACKAGE_LOGGER)
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s", "%Y-%m-%dT%H:%M:%S"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(level_from_env())
        logger.propagate = False
        _ROOT = logger
    return _ROOT


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger below the ``xcodehash`` package logger.

    The package logger writes to stderr and is configured once per process;
    its level comes from ``XCODEHASH_LOG_LEVEL`` (default ``INFO``).
    """
    root = _configure_root()
    if not name or name == PACKAGE_LOGGER:
        return root
    if not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


__all__ = ["get_logger", "level_from_env", "LOG_LEVEL_ENV", "PACKAGE_LOGGER"]
