"""Path joining and parsing rules shared by the metadata builders."""

from __future__ import annotations

import os
from dataclasses import dataclass

HIDDEN_PREFIX = "."
_NO_EXTENSION_BASENAMES = frozenset({"", ".", ".."})


@dataclass(frozen=True)
class ParsedPath:
    """Components of a joined path."""

    dirname: str
    basename: str
    name: str
    extension: str


def join_path(dirname: str | os.PathLike[str], basename: str | os.PathLike[str] = "") -> str:
    """Join ``dirname`` and ``basename`` and normalize the result.

    An empty ``basename`` leaves ``dirname`` as is apart from normalization,
    so a trailing separator is dropped and ``""`` becomes ``"."``.
    """
    return os.path.normpath(os.path.join(os.fspath(dirname), os.fspath(basename)))


def split_extension(basename: str) -> tuple[str, str]:
    """Split ``basename`` into ``(name, extension)`` at its last ``.``.

    The extension never includes the dot. ``.gitignore`` splits into
    ``("", "gitignore")``; callers depend on that, so it is kept.
    """
    if basename in _NO_EXTENSION_BASENAMES:
        return basename, ""
    name, dot, extension = basename.rpartition(".")
    if not dot:
        return basename, ""
    return name, extension


def parse_path(fullpath: str) -> ParsedPath:
    """Break ``fullpath`` into directory, base, stem and extension."""
    dirname, basename = os.path.split(fullpath)
    name, extension = split_extension(basename)
    return ParsedPath(dirname=dirname, basename=basename, name=name, extension=extension)


def is_hidden_name(basename: str) -> bool:
    """Return whether ``basename`` follows the dotfile convention.

    Windows hidden attributes are not detected.
    """
    return basename.startswith(HIDDEN_PREFIX)


__all__ = [
    "HIDDEN_PREFIX",
    "ParsedPath",
    "join_path",
    "split_extension",
    "parse_path",
    "is_hidden_name",
]
