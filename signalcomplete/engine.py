"""Completion pipeline: caret context -> component file -> signals -> suggestions."""

from __future__ import annotations

import asyncio
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from .assembler import SuggestionAssembler
from .catalog import all_signals
from .config import SignalCompleteConfig, load_config
from .context import CursorContextAnalyzer
from .errors import ComponentNotFound, ExtractionIOError
from .extractors import SignalExtractor, create_extractor
from .filesystem import FileSystem, LocalFileSystem
from .locator import ComponentLocator
from .logging import get_logger
from .models import CursorContext, SignalRecord, Suggestion
from .stores import SignalCache


class CompletionEngine:
    """Owns the cache and collaborators that serve signal completions."""

    def __init__(
        self,
        config: SignalCompleteConfig | None = None,
        *,
        cache: SignalCache | None = None,
        locator: ComponentLocator | None = None,
        extractor: SignalExtractor | None = None,
        analyzer: CursorContextAnalyzer | None = None,
        assembler: SuggestionAssembler | None = None,
        filesystem: FileSystem | None = None,
        catalog: Callable[[], List[SignalRecord]] = all_signals,
    ) -> None:
        self.config = config or SignalCompleteConfig()
        self.filesystem = filesystem or LocalFileSystem()
        self.cache = cache or SignalCache(ttl_ms=self.config.cache.ttl_ms)
        self.locator = locator or ComponentLocator.from_config(
            self.config.locator, filesystem=self.filesystem
        )
        self.extractor = extractor or create_extractor(self.config.extractor)
        self.analyzer = analyzer or CursorContextAnalyzer()
        self.assembler = assembler or SuggestionAssembler(priority=self.config.suggestions.priority)
        self._catalog = catalog
        self.logger = get_logger("engine")

    @classmethod
    def for_project(cls, root: Path | str, **kwargs: object) -> "CompletionEngine":
        """Build an engine configured from `<root>/.signalcomplete.yml`."""
        config = load_config(Path(root))
        return cls(config, **kwargs)  # type: ignore[arg-type]

    def context_at(self, buffer: str, offset: int) -> CursorContext:
        return self.analyzer.analyze_offset(buffer, offset)

    def signals_for_component(
        self, component_name: str, search_roots: Sequence[Path | str]
    ) -> List[SignalRecord]:
        """Return the signals a component declares, or [] when it cannot be found or read."""
        return self._lookup(component_name, search_roots) or []

    def signals_for_file(self, path: Path | str) -> List[SignalRecord]:
        """Extract (or reuse cached) signals for an explicit component file."""
        try:
            return self._signals_for_path(Path(path))
        except ExtractionIOError as exc:
            self.logger.warning("%s", exc)
            return []

    def complete(
        self,
        buffer: str,
        offset: int,
        search_roots: Sequence[Path | str],
    ) -> List[Suggestion]:
        """Suggestions for the caret at `offset`, or [] when the caret is not in a prop list."""
        context = self.context_at(buffer, offset)
        if not context.inside_props or context.component_name is None:
            self.logger.debug("Caret at %d is not inside a component prop list", offset)
            return []
        extracted = self._lookup(context.component_name, search_roots)
        if extracted is None:
            return []
        return self._assemble(extracted, context.partial_word)

    async def complete_async(
        self,
        buffer: str,
        offset: int,
        search_roots: Sequence[Path | str],
    ) -> List[Suggestion]:
        """Same as `complete`, running file lookup and reads off the event loop."""
        context = self.context_at(buffer, offset)
        if not context.inside_props or context.component_name is None:
            return []
        loop = asyncio.get_running_loop()
        extracted = await loop.run_in_executor(
            None,
            partial(self._lookup, context.component_name, search_roots),
        )
        if extracted is None:
            return []
        return self._assemble(extracted, context.partial_word)

    def clear_cache(self) -> None:
        self.cache.clear()

    # ------------------------------------------------------------------
    # Internal helpers

    def _lookup(
        self, component_name: str, search_roots: Sequence[Path | str]
    ) -> Optional[List[SignalRecord]]:
        # None when the component cannot be located or read; [] when it declares nothing.
        try:
            path = self.locator.require(component_name, search_roots)
            return self._signals_for_path(path)
        except ComponentNotFound as exc:
            self.logger.debug("%s", exc)
        except ExtractionIOError as exc:
            self.logger.warning("%s", exc)
        except Exception:  # pragma: no cover - defensive guard
            self.logger.exception("Signal lookup failed for %s", component_name)
        return None

    def _assemble(self, extracted: List[SignalRecord], partial_word: str) -> List[Suggestion]:
        catalog = self._catalog() if self.config.suggestions.include_catalog else []
        return self.assembler.assemble(catalog, extracted, partial_word)

    def _signals_for_path(self, path: Path) -> List[SignalRecord]:
        key = path.resolve()
        mtime = self._mtime(path) if self.config.cache.validate_mtime else None
        cached = self.cache.get(key, mtime=mtime)
        if cached is not None:
            self.logger.debug("Cache hit for %s", key)
            return cached
        signals = self.extractor.extract_file(path, self.filesystem, strict=True)
        self.logger.debug("Extracted %d signal(s) from %s", len(signals), key)
        self.cache.put(key, signals, mtime=mtime)
        return signals

    def _mtime(self, path: Path) -> Optional[float]:
        try:
            return self.filesystem.mtime(path)
        except OSError:
            return None


__all__ = ["CompletionEngine"]
