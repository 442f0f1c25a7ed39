"""In-memory, time-bounded cache for extraction results."""

from __future__ import annotations

import threading
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ..config import DEFAULT_TTL_MS
from ..models import CacheEntry, SignalRecord

Clock = Callable[[], float]


def _monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class SignalCache:
    """Stores extracted signals per file, each entry valid for `ttl_ms` after capture.

    Entries are keyed by the resolved file path plus the capture timestamp taken
    at insertion. Edits made on disk inside the ttl window are not noticed
    unless an mtime is supplied on both `put` and `get`.
    """

    def __init__(self, ttl_ms: float = DEFAULT_TTL_MS, clock: Clock | None = None) -> None:
        if ttl_ms <= 0:
            raise ValueError("ttl_ms must be positive")
        self.ttl_ms = ttl_ms
        self._clock = clock or _monotonic_ms
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, path: Path | str, *, mtime: Optional[float] = None) -> Optional[List[SignalRecord]]:
        key = _normalise(path)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._clock() - entry.captured_at > self.ttl_ms:
                return None
            if mtime is not None and entry.mtime is not None and entry.mtime != mtime:
                return None
            return list(entry.signals)

    def put(
        self,
        path: Path | str,
        signals: Sequence[SignalRecord],
        *,
        mtime: Optional[float] = None,
    ) -> CacheEntry:
        captured_at = self._clock()
        entry = CacheEntry(
            path=_normalise(path),
            captured_at=captured_at,
            signals=tuple(signals),
            expires_at=captured_at + self.ttl_ms,
            mtime=mtime,
        )
        with self._lock:
            self._entries[entry.path] = entry
            self._purge_locked(captured_at)
        return entry

    def invalidate_expired(self) -> int:
        """Drop every entry older than the ttl; returns how many were removed."""
        with self._lock:
            return self._purge_locked(self._clock())

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _purge_locked(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if now - entry.captured_at > self.ttl_ms]
        for key in expired:
            del self._entries[key]
        return len(expired)


def _normalise(path: Path | str) -> str:
    return str(Path(path))


__all__ = ["SignalCache"]
