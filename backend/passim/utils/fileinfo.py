"""Filesystem metadata helpers."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path


def creation_timestamp(stat_result: os.stat_result) -> float | None:
    """Birth time of the file, or None where the platform does not report one.

    The inode change time is not used in its place: it moves on chmod or
    rename even though the file was never recreated.
    """
    return getattr(stat_result, "st_birthtime", None)


def get_creation_time(path: Path) -> datetime | None:
    """Return the creation time of ``path`` as an aware UTC datetime.

    Returns None when the filesystem does not record a birth time (CPython on
    Linux, for instance). Raises whatever :meth:`Path.stat` raises
    (``FileNotFoundError``, ``PermissionError``, ...).
    """
    timestamp = creation_timestamp(path.stat())
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)
