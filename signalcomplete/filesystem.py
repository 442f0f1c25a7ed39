"""File-system collaborator used by the locator and extractors."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileSystem(Protocol):
    """Minimal read-only view of the disk."""

    def exists(self, path: Path) -> bool:
        ...

    def read_text(self, path: Path) -> str:
        ...

    def mtime(self, path: Path) -> float:
        ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def exists(self, path: Path) -> bool:
        return path.is_file()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def mtime(self, path: Path) -> float:
        return path.stat().st_mtime


__all__ = ["FileSystem", "LocalFileSystem"]
