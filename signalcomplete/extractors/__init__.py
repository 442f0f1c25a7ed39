"""Signal extraction strategies and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from typing import Callable, Dict, Iterable, List

from .base import SignalExtractor, is_identifier, order_records
from .heuristic import HeuristicExtractor
from .layered import LayeredExtractor, find_layers
from .references import InputBindingExtractor, ReferenceExtractor
from ..config import ExtractorConfig

_ENTRY_POINT_GROUP = "signalcomplete.extractors"

_BUILTIN_FACTORIES: Dict[str, Callable[[ExtractorConfig], SignalExtractor]] = {
    "layered": lambda config: LayeredExtractor(denylist=config.denylist),
    "references": lambda config: ReferenceExtractor(denylist=config.denylist),
    "inputs": lambda config: InputBindingExtractor(
        binding=config.input_binding, denylist=config.denylist
    ),
    "heuristic": lambda config: HeuristicExtractor(denylist=config.denylist),
}


def available_strategies() -> List[str]:
    """Return the names of built-in and plugin-provided strategies."""
    names = list(_BUILTIN_FACTORIES)
    for entry in _iter_entry_points():
        if entry.name.lower() not in names:
            names.append(entry.name.lower())
    return names


def create_extractor(config: ExtractorConfig | None = None) -> SignalExtractor:
    """Instantiate the strategy named by `config.strategy`."""
    config = config or ExtractorConfig()
    key = config.strategy.lower()

    factory = _BUILTIN_FACTORIES.get(key)
    if factory is not None:
        return factory(config)

    for entry in _iter_entry_points():
        if entry.name.lower() != key:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load extractor entry point '{entry.name}': {exc}") from exc
        return _coerce_extractor(loaded, config)

    known = ", ".join(available_strategies())
    raise ValueError(f"Unknown extraction strategy '{config.strategy}' (known: {known})")


def _coerce_extractor(obj: object, config: ExtractorConfig) -> SignalExtractor:
    if isinstance(obj, SignalExtractor):
        return obj
    if isinstance(obj, type) and issubclass(obj, SignalExtractor):
        return obj()
    if callable(obj):
        instance = obj(config)
        if isinstance(instance, SignalExtractor):
            return instance
    raise TypeError("Extractor entry point must be a SignalExtractor subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "HeuristicExtractor",
    "InputBindingExtractor",
    "LayeredExtractor",
    "ReferenceExtractor",
    "SignalExtractor",
    "available_strategies",
    "create_extractor",
    "find_layers",
    "is_identifier",
    "order_records",
]
