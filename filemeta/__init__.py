"""Public package surface for filemeta.

Filesystem inspection helpers that return structured ``FileMetadata``
snapshots instead of raw ``os.stat`` results. Blocking helpers live in
``filemeta.metadata``/``filemeta.subpaths``; coroutine helpers for batch and
directory listings live in ``filemeta.listing``.
"""

from __future__ import annotations

import logging

from .listing import get_all_files_metadata, get_directory, get_directory_contents
from .metadata import exists, get_file_metadata, get_file_metadata_sync
from .subpaths import subpaths
from .types import FileMetadata

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FileMetadata",
    "exists",
    "get_file_metadata",
    "get_file_metadata_sync",
    "get_all_files_metadata",
    "get_directory",
    "get_directory_contents",
    "subpaths",
]
