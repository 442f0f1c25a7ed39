"""Core data models shared across signalcomplete components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class SignalRecord:
    """A signal identifier a component recognizes, tagged with its provenance."""

    name: str
    description: str
    category: str
    layer: Optional[str] = None


@dataclass
class LayerDefinition:
    """A `layer("type")` helper declared in component source."""

    layer_name: str
    layer_type: str
    signals: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class CacheEntry:
    """Extraction result captured for one file at one point in time."""

    path: str
    captured_at: float
    signals: Tuple[SignalRecord, ...]
    expires_at: float
    mtime: Optional[float] = None

    @property
    def key(self) -> Tuple[str, float]:
        return (self.path, self.captured_at)


@dataclass(frozen=True)
class ComponentLookupRequest:
    """Component name plus the roots to search, in priority order."""

    component_name: str
    search_roots: Sequence[Path]


@dataclass(frozen=True)
class CursorContext:
    """Where the caret sits relative to a component's opening tag."""

    inside_props: bool
    component_name: Optional[str] = None
    partial_word: str = ""


@dataclass(frozen=True)
class Suggestion:
    """Displayable completion entry handed to the host renderer."""

    name: str
    description: str
    category: str
    documentation: str
    sort_text: str
    priority: bool = False
    layer: Optional[str] = None
