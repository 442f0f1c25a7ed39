"""Base classes for signal extraction strategies."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..errors import ExtractionIOError
from ..filesystem import FileSystem, LocalFileSystem
from ..logging import get_logger
from ..models import SignalRecord

IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9]*")

_logger = get_logger("extractors")


def is_identifier(name: str) -> bool:
    return bool(IDENTIFIER.fullmatch(name))


class SignalExtractor(ABC):
    """Contract for strategies that derive signal records from component source."""

    name: str = "base"
    categories: Sequence[str] = ()

    @abstractmethod
    def extract(self, text: str) -> List[SignalRecord]:
        """Return the signals `text` makes available, ordered by category then name."""

    def extract_file(
        self,
        path: Path,
        filesystem: Optional[FileSystem] = None,
        *,
        strict: bool = False,
    ) -> List[SignalRecord]:
        """Read `path` and extract it; unreadable files yield no signals unless strict."""
        fs = filesystem or LocalFileSystem()
        try:
            text = fs.read_text(path)
        except (OSError, UnicodeDecodeError) as exc:
            if strict:
                raise ExtractionIOError(str(path), str(exc)) from exc
            _logger.warning("Unable to read component file %s: %s", path, exc)
            return []
        return self.extract(text)


def order_records(records: Iterable[SignalRecord], categories: Sequence[str]) -> List[SignalRecord]:
    """Group records by category precedence, then alphabetically within a group."""
    rank = {category: index for index, category in enumerate(categories)}
    return sorted(
        records,
        key=lambda record: (
            rank.get(record.category, len(rank)),
            record.name.lower(),
            record.name,
        ),
    )


__all__ = ["IDENTIFIER", "SignalExtractor", "is_identifier", "order_records"]
