"""Coroutine helpers for batch metadata lookups and directory listings."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Awaitable, Iterable

from .config import load_max_concurrent_lookups
from .metadata import get_file_metadata
from .types import FileMetadata

logger = logging.getLogger(__name__)


async def _gather_fail_fast(lookups: list[Awaitable[FileMetadata]]) -> list[FileMetadata]:
    """Await all lookups in input order; cancel the rest on the first failure."""
    tasks = [asyncio.ensure_future(lookup) for lookup in lookups]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException as exc:
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        logger.debug("batch lookup aborted (%s); cancelled %d pending", exc, len(pending))
        raise


async def _bounded_lookup(
    semaphore: asyncio.Semaphore,
    dirname: str | os.PathLike[str],
    basename: str | os.PathLike[str],
) -> FileMetadata:
    async with semaphore:
        return await get_file_metadata(dirname, basename)


async def get_all_files_metadata(
    dirname: str | os.PathLike[str],
    basenames: Iterable[str | os.PathLike[str]],
    *,
    limit: int | None = None,
) -> list[FileMetadata]:
    """Look up metadata for every name in ``basenames`` under ``dirname``.

    All lookups are issued concurrently and results come back in input order.
    ``limit`` bounds how many are in flight; ``None`` uses the configured
    default (read in a worker thread), which is unbounded unless set. Any single failure fails the
    whole batch.
    """
    if limit is None:
        limit = await asyncio.to_thread(load_max_concurrent_lookups)
    if limit is not None and limit < 1:
        raise ValueError("limit must be >= 1")

    if limit is None:
        lookups = [get_file_metadata(dirname, basename) for basename in basenames]
    else:
        semaphore = asyncio.Semaphore(limit)
        lookups = [_bounded_lookup(semaphore, dirname, basename) for basename in basenames]
    return await _gather_fail_fast(lookups)


async def get_directory(dirname: str | os.PathLike[str]) -> list[str]:
    """Return raw entry names of ``dirname`` in OS order.

    ``.`` and ``..`` are never included.
    """
    entries = await asyncio.to_thread(os.listdir, os.fspath(dirname))
    logger.debug("read %d entries from %s", len(entries), dirname)
    return entries


async def get_directory_contents(
    dirname: str | os.PathLike[str],
    *,
    limit: int | None = None,
) -> list[FileMetadata]:
    """Return metadata for each entry of ``dirname``, in directory-read order."""
    entries = await get_directory(dirname)
    return await get_all_files_metadata(dirname, entries, limit=limit)


__all__ = [
    "get_all_files_metadata",
    "get_directory",
    "get_directory_contents",
]
