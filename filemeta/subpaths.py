"""Ancestor enumeration from the filesystem root down to a path."""

from __future__ import annotations

import os

from .metadata import get_file_metadata_sync
from .types import FileMetadata

ROOT_MARKER = "/"


def path_components(fullpath: str) -> list[str]:
    """Split ``fullpath`` on ``os.sep``, marking an absolute root explicitly.

    ``"/home/user"`` gives ``["/", "home", "user"]``. Empty components are
    dropped after the root is substituted, so ``""`` gives ``["/"]``.
    """
    parts = fullpath.split(os.sep)
    if not parts[0]:
        parts[0] = ROOT_MARKER
    return [part for part in parts if part]


def subpaths(fullpath: object) -> list[FileMetadata] | None:
    """Return metadata for every ancestor of ``fullpath`` and the path itself.

    Non-``str`` input returns ``None``. Lookups run one at a time from the
    root down; the first one that fails raises and no records are returned.
    """
    if not isinstance(fullpath, str):
        return None

    components = path_components(fullpath)
    return [
        get_file_metadata_sync(os.path.join(*components[: index + 1]))
        for index in range(len(components))
    ]


__all__ = ["ROOT_MARKER", "path_components", "subpaths"]
