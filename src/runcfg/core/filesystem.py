"""File system access used to validate assembly and config file names."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """The only two questions the parser asks about files."""

    def exists(self, path: str) -> bool: ...

    def resolve(self, path: str) -> Path: ...


class LocalFileSystem:
    """:class:`FileSystem` backed by the real disk."""

    def exists(self, path: str) -> bool:
        return Path(path).expanduser().is_file()

    def resolve(self, path: str) -> Path:
        return Path(path).expanduser().resolve()


__all__ = ["FileSystem", "LocalFileSystem"]
