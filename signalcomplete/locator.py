"""Resolve a component name to the source file that defines it."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from .config import DEFAULT_DIRECTORIES, DEFAULT_EXTENSIONS, LocatorConfig
from .errors import ComponentNotFound
from .extractors.base import is_identifier
from .filesystem import FileSystem, LocalFileSystem
from .logging import get_logger
from .models import ComponentLookupRequest


class ComponentLocator:
    """Probes conventional component folders under each search root, in order."""

    def __init__(
        self,
        directories: Sequence[str] = DEFAULT_DIRECTORIES,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
        filesystem: FileSystem | None = None,
    ) -> None:
        self.directories = tuple(directories)
        self.extensions = tuple(extensions)
        self.filesystem = filesystem or LocalFileSystem()
        self.logger = get_logger("locator")

    @classmethod
    def from_config(
        cls, config: LocatorConfig, filesystem: FileSystem | None = None
    ) -> "ComponentLocator":
        return cls(config.directories, config.extensions, filesystem=filesystem)

    def probes(self) -> List[Tuple[str, str]]:
        """Return the `(subdirectory, extension)` combinations in probe order."""
        return [(directory, ext) for directory in self.directories for ext in self.extensions]

    def candidates(self, component_name: str, root: Path) -> Iterable[Path]:
        for directory, ext in self.probes():
            yield root / directory / f"{component_name}{ext}"

    def locate(self, component_name: str, search_roots: Sequence[Path | str]) -> Optional[Path]:
        """Return the first existing candidate file, or None when nothing matches."""
        request = ComponentLookupRequest(
            component_name=component_name,
            search_roots=tuple(Path(root) for root in search_roots),
        )
        return self._lookup(request)

    def require(self, component_name: str, search_roots: Sequence[Path | str]) -> Path:
        """Like `locate` but raises ComponentNotFound on a miss."""
        path = self.locate(component_name, search_roots)
        if path is None:
            raise ComponentNotFound(component_name)
        return path

    def _lookup(self, request: ComponentLookupRequest) -> Optional[Path]:
        if not is_identifier(request.component_name):
            self.logger.debug("Skipping lookup for invalid component name %r", request.component_name)
            return None
        for root in request.search_roots:
            for candidate in self.candidates(request.component_name, root):
                if self.filesystem.exists(candidate):
                    self.logger.debug("Found component %s at %s", request.component_name, candidate)
                    return candidate
        self.logger.debug(
            "Component file not found for %s under %d root(s)",
            request.component_name,
            len(request.search_roots),
        )
        return None


__all__ = ["ComponentLocator"]
