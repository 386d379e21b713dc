"""Single-path metadata builders and the existence check.

``get_file_metadata_sync`` and ``get_file_metadata`` share one record
builder; they differ only in how ``os.lstat`` is called. Status failures
propagate unchanged (``FileNotFoundError``, ``PermissionError``, ...).
"""

from __future__ import annotations

import asyncio
import logging
import os
import stat

from .paths import is_hidden_name, join_path, parse_path
from .types import FileMetadata

logger = logging.getLogger(__name__)


def exists(fullpath: str | os.PathLike[str]) -> bool:
    """Return ``False`` only when ``fullpath`` is confirmed absent.

    Any other status failure (permission denied, I/O error, invalid or
    non-path argument) counts as present. Never raises.
    """
    try:
        os.stat(fullpath)
    except FileNotFoundError:
        return False
    except (OSError, ValueError, TypeError) as exc:
        logger.debug("stat failed for %r, treating as existing: %s", fullpath, exc)
    return True


def build_file_metadata(fullpath: str, stats: os.stat_result) -> FileMetadata:
    """Assemble a ``FileMetadata`` record from a joined path and its lstat."""
    parsed = parse_path(fullpath)
    return FileMetadata(
        basename=parsed.basename,
        dirname=parsed.dirname,
        fullpath=fullpath,
        extension=parsed.extension,
        name=parsed.name,
        is_directory=stat.S_ISDIR(stats.st_mode),
        is_hidden=is_hidden_name(parsed.basename),
        size=int(stats.st_size),
    )


def get_file_metadata_sync(
    dirname: str | os.PathLike[str],
    basename: str | os.PathLike[str] = "",
) -> FileMetadata:
    """Return metadata for ``dirname``/``basename`` without following symlinks."""
    fullpath = join_path(dirname, basename)
    return build_file_metadata(fullpath, os.lstat(fullpath))


async def get_file_metadata(
    dirname: str | os.PathLike[str],
    basename: str | os.PathLike[str] = "",
) -> FileMetadata:
    """Coroutine form of ``get_file_metadata_sync``.

    The status call runs in a worker thread so the event loop keeps
    servicing other lookups while it waits.
    """
    fullpath = join_path(dirname, basename)
    stats = await asyncio.to_thread(os.lstat, fullpath)
    return build_file_metadata(fullpath, stats)


__all__ = [
    "exists",
    "build_file_metadata",
    "get_file_metadata_sync",
    "get_file_metadata",
]
