"""Storage helpers for extraction results."""

from .signal_cache import SignalCache

__all__ = ["SignalCache"]
