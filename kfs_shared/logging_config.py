"""Logging setup for KFS addressing tools."""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

# Shared logger for every kfs_shared module.
log = logging.getLogger("kfs_shared")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def configure_logging(level: str | int | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Attach a console handler and set the level of the KFS logger.

    Args:
        level: Optional log level (e.g. ``"DEBUG"`` or ``logging.INFO``). When
            omitted, ``LOG_LEVEL`` from the environment is used, falling back
            to ``INFO``.
        stream: Destination of log records. Defaults to ``sys.stderr`` so
            derived names printed on stdout stay machine-readable.

    Returns:
        logging.Logger: The configured ``kfs_shared`` logger.
    """
    resolved_level = _coerce_level(level)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    log.setLevel(resolved_level)
    log.propagate = True
    log.debug("Logging configured at level %s", logging.getLevelName(resolved_level))
    return log


def _coerce_level(level: str | int | None) -> int:
    """Resolve the level for the KFS logger.

    Args:
        level: Explicit level as a number, a level name (``"debug"``) or a
            numeric string (``"10"``, as ``--log-level`` and ``LOG_LEVEL``
            deliver it). When ``None``, ``LOG_LEVEL`` from the environment is
            read instead.

    Returns:
        int: Numeric logging level; ``logging.INFO`` when the value is unset
        or not a level the ``logging`` module knows.
    """
    candidate = level if level is not None else os.getenv("LOG_LEVEL")
    if isinstance(candidate, int):
        return candidate
    if not isinstance(candidate, str) or not candidate.strip():
        return logging.INFO

    name = candidate.strip().upper()
    if name.isdecimal():
        return int(name)
    numeric = logging.getLevelName(name)
    return numeric if isinstance(numeric, int) else logging.INFO
