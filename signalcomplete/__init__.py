"""Signal prop suggestions for UI components."""

from .context import CursorContextAnalyzer
from .engine import CompletionEngine
from .extractors import LayeredExtractor, create_extractor
from .locator import ComponentLocator
from .models import CursorContext, SignalRecord, Suggestion
from .stores import SignalCache

__all__ = [
    "CompletionEngine",
    "ComponentLocator",
    "CursorContext",
    "CursorContextAnalyzer",
    "LayeredExtractor",
    "SignalCache",
    "SignalRecord",
    "Suggestion",
    "create_extractor",
]
