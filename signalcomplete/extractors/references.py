"""Plain `signals.<name>` reference scanning."""

from __future__ import annotations

import re
from typing import Collection, Iterator, List

from .base import SignalExtractor, order_records
from ..config import DEFAULT_DENYLIST
from ..models import SignalRecord


def _reference_pattern(binding: str) -> re.Pattern[str]:
    # `signals.foo_bar` names the property `foo_bar`, which is not a signal; never report `foo`.
    return re.compile(
        rf"(?<![\w$]){re.escape(binding)}\s*\.\s*([A-Za-z][A-Za-z0-9]*)(?![\w$])"
    )


def scan_references(text: str, binding: str, denylist: Collection[str]) -> Iterator[str]:
    """Yield each `<binding>.<name>` property name in source order, skipping denylisted ones."""
    for match in _reference_pattern(binding).finditer(text):
        name = match.group(1)
        if name in denylist:
            continue
        yield name


def plain_signal(name: str) -> SignalRecord:
    return SignalRecord(name=name, description=f"Signal: {name}", category="signal")


class ReferenceExtractor(SignalExtractor):
    """Reports every property read off the component's signal object."""

    name = "references"
    categories = ("signal",)

    def __init__(
        self,
        binding: str = "signals",
        denylist: Collection[str] = DEFAULT_DENYLIST,
    ) -> None:
        self.binding = binding
        self.denylist = frozenset(denylist)

    def extract(self, text: str) -> List[SignalRecord]:
        seen: dict[str, SignalRecord] = {}
        for name in scan_references(text, self.binding, self.denylist):
            seen.setdefault(name, plain_signal(name))
        return order_records(seen.values(), self.categories)


class InputBindingExtractor(ReferenceExtractor):
    """Reference scan over an input-binding object such as `inputSignal`."""

    name = "inputs"

    def __init__(
        self,
        binding: str = "inputSignal",
        denylist: Collection[str] = DEFAULT_DENYLIST,
    ) -> None:
        super().__init__(binding=binding, denylist=denylist)


__all__ = ["InputBindingExtractor", "ReferenceExtractor", "plain_signal", "scan_references"]
