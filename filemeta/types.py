"""Domain datatype for one inspected filesystem entry."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileMetadata:
    """Point-in-time snapshot of a path observed via ``os.lstat``.

    Records are never refreshed; a later filesystem change is not reflected.
    ``is_hidden`` only follows the POSIX leading-dot convention.
    """

    basename: str
    dirname: str
    fullpath: str
    extension: str
    name: str
    is_directory: bool
    is_hidden: bool
    size: int

    def as_dict(self) -> dict[str, object]:
        """Return the record keyed the way JSON consumers expect it."""
        return {
            "basename": self.basename,
            "dirname": self.dirname,
            "fullpath": self.fullpath,
            "extension": self.extension,
            "name": self.name,
            "isDirectory": self.is_directory,
            "isHidden": self.is_hidden,
            "size": self.size,
        }


__all__ = ["FileMetadata"]
