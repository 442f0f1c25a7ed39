"""Error taxonomy for signal lookup, extraction and caret analysis."""

from __future__ import annotations


class SignalCompleteError(Exception):
    """Base class for recoverable engine failures."""


class ComponentNotFound(SignalCompleteError):
    """Raised when no source file defines the requested component."""

    def __init__(self, component_name: str) -> None:
        super().__init__(f"No source file found for component '{component_name}'")
        self.component_name = component_name


class ExtractionIOError(SignalCompleteError):
    """Raised when a component file exists but cannot be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Unable to read {path}: {reason}")
        self.path = path
        self.reason = reason


class MalformedContext(SignalCompleteError):
    """Raised when the caret is not inside a component's prop region."""


__all__ = [
    "ComponentNotFound",
    "ExtractionIOError",
    "MalformedContext",
    "SignalCompleteError",
]
