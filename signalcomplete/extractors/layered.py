"""Five-scan extractor that understands layers, leases, spreads and composites."""

from __future__ import annotations

import re
from typing import Collection, Dict, Iterable, Iterator, List, Tuple

from .base import SignalExtractor, is_identifier, order_records
from .references import plain_signal, scan_references
from ..config import DEFAULT_DENYLIST
from ..models import LayerDefinition, SignalRecord

_LAYER_DECLARATION = re.compile(
    r"""\b(?:const|let|var)\s+([A-Za-z_$][\w$]*)\s*=\s*layer\s*\(\s*(["'`])([^"'`]*)\2\s*\)"""
)

_COMPOSITE = re.compile(
    r"""(?<![\w$])signals\s*\.\s*([A-Za-z][A-Za-z0-9]*)\s*&&\s*\(\s*(?:\(\s*\)\s*=>|function\s*\(\s*\))"""
)


def _contract_pattern(callee: str) -> re.Pattern[str]:
    # callee("a") or callee("a", "b")
    return re.compile(
        rf"""(?<![\w$.]){re.escape(callee)}\s*\(\s*(["'`])([^"'`]*)\1"""
        r"""(?:\s*,\s*(["'`])([^"'`]*)\3)?"""
    )


_LEASE = _contract_pattern("lease")
_SPREAD = _contract_pattern("spread")


def _layer_call_pattern(layer_name: str) -> re.Pattern[str]:
    return re.compile(
        rf"""(?<![\w$.]){re.escape(layer_name)}\s*\(\s*(["'`])[^"'`]*\1\s*,\s*(["'`])([^"'`]*)\2"""
    )


def find_layers(text: str) -> List[LayerDefinition]:
    """Collect layer declarations along with the signals passed through each one."""
    layers: List[LayerDefinition] = []
    seen: set[str] = set()
    for match in _LAYER_DECLARATION.finditer(text):
        layer_name, layer_type = match.group(1), match.group(3)
        if layer_name in seen:
            continue
        seen.add(layer_name)
        definition = LayerDefinition(layer_name=layer_name, layer_type=layer_type)
        for call in _layer_call_pattern(layer_name).finditer(text):
            signal = call.group(3).strip()
            if is_identifier(signal) and signal not in definition.signals:
                definition.signals.append(signal)
        layers.append(definition)
    return layers


def _scan_contracts(pattern: re.Pattern[str], text: str) -> Iterator[Tuple[str, str]]:
    """Yield `(label, key)` pairs; the key falls back to the label for one-argument calls."""
    for match in pattern.finditer(text):
        label = match.group(2).strip()
        key = (match.group(4) or "").strip() or label
        yield label, key


class LayeredExtractor(SignalExtractor):
    """Canonical extractor: layer, lease, spread, composite and plain reference scans."""

    name = "layered"
    categories = ("layer", "lease", "spread", "composite", "signal")

    def __init__(self, denylist: Collection[str] = DEFAULT_DENYLIST) -> None:
        self.denylist = frozenset(denylist)

    def extract(self, text: str) -> List[SignalRecord]:
        claimed: Dict[str, SignalRecord] = {}
        for record in self._scan(text):
            if not is_identifier(record.name):
                continue
            claimed.setdefault(record.name, record)
        return order_records(claimed.values(), self.categories)

    def _scan(self, text: str) -> Iterable[SignalRecord]:
        # Scans run in precedence order so the first classification of a name wins.
        for layer in find_layers(text):
            for signal in layer.signals:
                yield SignalRecord(
                    name=signal,
                    description=f"Layer signal from {layer.layer_name} ({layer.layer_type})",
                    category="layer",
                    layer=layer.layer_name,
                )

        for label, key in _scan_contracts(_LEASE, text):
            description = f"Lease: {label}" if label == key else f"Lease: {label} -> {key}"
            yield SignalRecord(name=key, description=description, category="lease")

        for label, key in _scan_contracts(_SPREAD, text):
            description = f"Spread: {label}" if label == key else f"Spread: {label} -> {key}"
            yield SignalRecord(name=key, description=description, category="spread")

        for match in _COMPOSITE.finditer(text):
            name = match.group(1)
            yield SignalRecord(
                name=name,
                description=f"Composite signal: {name}",
                category="composite",
            )

        for name in scan_references(text, "signals", self.denylist):
            yield plain_signal(name)


__all__ = ["LayeredExtractor", "find_layers"]
