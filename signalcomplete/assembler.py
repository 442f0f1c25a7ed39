"""Merge, filter and order signals into displayable suggestions."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from jinja2 import Environment, FileSystemLoader

from .config import DEFAULT_PRIORITY
from .models import SignalRecord, Suggestion

_TEMPLATE_NAME = "suggestion.md.j2"


class SuggestionAssembler:
    """Combines catalog and component signals for one completion request."""

    def __init__(
        self,
        priority: Sequence[str] = DEFAULT_PRIORITY,
        templates_dir: Path | None = None,
    ) -> None:
        self.priority = frozenset(priority)
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._template = self._env.get_template(_TEMPLATE_NAME)

    def assemble(
        self,
        catalog: Iterable[SignalRecord],
        extracted: Iterable[SignalRecord],
        partial_word: str = "",
    ) -> List[Suggestion]:
        merged: Dict[str, SignalRecord] = {record.name: record for record in catalog}
        # component-specific records replace catalog entries of the same name
        for record in extracted:
            merged[record.name] = record

        needle = partial_word.lower()
        selected = [
            record for record in merged.values() if not needle or needle in record.name.lower()
        ]
        selected.sort(key=lambda record: (record.name not in self.priority, record.name.lower(), record.name))
        return [self._to_suggestion(record) for record in selected]

    def _to_suggestion(self, record: SignalRecord) -> Suggestion:
        is_priority = record.name in self.priority
        documentation = self._template.render(
            name=record.name,
            description=record.description,
            category=record.category,
            layer=record.layer,
        ).strip()
        return Suggestion(
            name=record.name,
            description=record.description,
            category=record.category,
            documentation=documentation,
            sort_text=f"{0 if is_priority else 1}{record.name.lower()}",
            priority=is_priority,
            layer=record.layer,
        )


__all__ = ["SuggestionAssembler"]
