"""Helpers for producing file-listing values from the local filesystem.

Only single paths are inspected here; walking a directory is left to the
caller.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from datetime import datetime, timezone
from pathlib import Path

import structlog

from shared_types.models import FileEntry, entry_sort_key

logger = structlog.get_logger()


def format_mtime(value: datetime) -> str:
    """Format a timestamp as UTC ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def entry_from_path(path: str | os.PathLike[str]) -> FileEntry:
    """Build a ``FileEntry`` describing ``path``.

    Symlinks are reported as files, even when they point at a directory.
    When the node cannot be stat'ed the entry is still produced, with size 0
    and the current time as ``mtime``.

    Args:
        path: Path to the node.

    Returns:
        FileEntry: Entry for the node.
    """

    p = Path(path)
    is_directory = p.is_dir() and not p.is_symlink()
    entry_type = "directory" if is_directory else "file"

    try:
        st = p.stat()
    except OSError as exc:
        logger.debug("file_entry_stat_failed", path=str(p), error=str(exc))
        return FileEntry(
            name=p.name,
            type=entry_type,
            size=0,
            mtime=format_mtime(datetime.now(timezone.utc)),
        )

    return FileEntry(
        name=p.name,
        type=entry_type,
        size=st.st_size,
        mtime=format_mtime(datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)),
    )


def sort_entries(entries: Iterable[FileEntry]) -> list[FileEntry]:
    """Order entries with directories first, then by case-insensitive name."""
    return sorted(entries, key=entry_sort_key)
