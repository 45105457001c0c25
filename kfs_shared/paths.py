"""Filesystem path helpers for KFS tables."""

from __future__ import annotations

import os

from .constants import TABLE_EXTENSION


def coerce_table_path(table_path: str | os.PathLike) -> str:
    """Ensure the path to a table carries the ``.kfs`` extension.

    Args:
        table_path: Path name of a KFS table, with or without extension.

    Returns:
        str: ``table_path`` unchanged when it already ends in ``.kfs``,
        otherwise ``table_path`` with ``.kfs`` appended.
    """
    path = os.fspath(table_path)
    if os.path.splitext(path)[1] != TABLE_EXTENSION:
        return path + TABLE_EXTENSION
    return path


def file_does_exist(file_path: str | os.PathLike) -> bool:
    """Return True if ``file_path`` can be stat'ed."""
    try:
        os.stat(file_path)
    except OSError:
        return False
    return True


__all__ = ["coerce_table_path", "file_does_exist"]
