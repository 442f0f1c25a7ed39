"""Docblock and declaration heuristics for components without signal helpers."""

from __future__ import annotations

import re
from typing import Collection, Dict, Iterable, Iterator, List, Tuple

from .base import SignalExtractor, is_identifier, order_records
from ..config import DEFAULT_DENYLIST
from ..models import SignalRecord

_DOC_TAG = re.compile(r"@signal\s+([A-Za-z][A-Za-z0-9]*)[ \t]*(?:-[ \t]*)?([^\n]*)")
_DESTRUCTURED = re.compile(r"(?<![\w$])signals\s*:\s*\{([^{}]*)\}")
_DEFINED = re.compile(r"\b(?:const|let|var)\s+signals\s*=\s*\{([^{}]*)\}")
_COMMENT = re.compile(
    r"//[ \t]*signals?[ \t]*:[ \t]*([A-Za-z][A-Za-z0-9]*(?:[ \t]*,[ \t]*[A-Za-z][A-Za-z0-9]*)*)"
)
_LEADING_NAME = re.compile(r"\s*([A-Za-z][A-Za-z0-9]*)")


def _object_keys(body: str) -> Iterator[str]:
    """Yield the leading identifier of each comma-separated member of an object body."""
    for member in body.split(","):
        if member.strip().startswith("..."):
            continue
        match = _LEADING_NAME.match(member)
        if match:
            yield match.group(1)


def _clean_doc(description: str) -> str:
    return description.strip().rstrip("*/").strip()


class HeuristicExtractor(SignalExtractor):
    """Reads `@signal` doc tags, destructured signal props, comments and literal maps."""

    name = "heuristic"
    categories = ("documented", "props", "commented", "defined")

    def __init__(self, denylist: Collection[str] = DEFAULT_DENYLIST) -> None:
        self.denylist = frozenset(denylist)

    def extract(self, text: str) -> List[SignalRecord]:
        claimed: Dict[str, SignalRecord] = {}
        for name, description, category in self._scan(text):
            if not is_identifier(name) or name in claimed:
                continue
            if category in {"props", "defined"} and name in self.denylist:
                continue
            claimed[name] = SignalRecord(name=name, description=description, category=category)
        return order_records(claimed.values(), self.categories)

    def _scan(self, text: str) -> Iterable[Tuple[str, str, str]]:
        for match in _DOC_TAG.finditer(text):
            name = match.group(1)
            description = _clean_doc(match.group(2)) or f"Documented signal: {name}"
            yield name, description, "documented"

        for match in _DESTRUCTURED.finditer(text):
            for name in _object_keys(match.group(1)):
                yield name, f"Signal prop: {name}", "props"

        for match in _COMMENT.finditer(text):
            for name in match.group(1).split(","):
                name = name.strip()
                yield name, f"Commented signal: {name}", "commented"

        for match in _DEFINED.finditer(text):
            for name in _object_keys(match.group(1)):
                yield name, f"Defined signal: {name}", "defined"


__all__ = ["HeuristicExtractor"]
