"""End-to-end tests for the completion engine."""

from __future__ import annotations

import asyncio
import os
from pathlib import Path

from signalcomplete.config import SignalCompleteConfig
from signalcomplete.engine import CompletionEngine
from signalcomplete.stores import SignalCache

_BUTTON = """
const Tone = layer("tone");
Tone("bg-blue-600", "glow");
export function Button({ signals, children }) {
  const classes = [signals.glow && "ring", signals.dense && "px-1", signals.className];
  {signals.confirmOnClick && (() => confirm("Sure?"))()}
  return <button className={classes.join(" ")}>{children}</button>;
}
"""


def _engine(clock=None, **kwargs) -> CompletionEngine:
    cache = SignalCache(clock=clock) if clock else None
    return CompletionEngine(cache=cache, **kwargs)


def test_complete_merges_component_and_catalog_signals(project) -> None:
    project.write({"src/components/Button.jsx": _BUTTON})
    buffer = "<Button dens"

    suggestions = _engine().complete(buffer, len(buffer), [project.path()])

    assert [item.name for item in suggestions] == ["dense"]
    assert suggestions[0].category == "signal"


def test_complete_with_empty_partial_lists_priority_first(project) -> None:
    project.write({"components/Button.jsx": _BUTTON})
    buffer = "<Button "

    names = [item.name for item in _engine().complete(buffer, len(buffer), [project.path()])]

    assert names[:6] == ["hoverEnlarge", "lg", "md", "primary", "secondary", "sm"]
    assert {"glow", "dense", "confirmOnClick", "accent"} <= set(names)
    assert "className" not in names


def test_complete_outside_tag_returns_nothing(project) -> None:
    project.write({"components/Button.jsx": _BUTTON})
    buffer = '<Button href="/x pri'

    assert _engine().complete(buffer, len(buffer), [project.path()]) == []


class _UnreadableFS:
    def exists(self, path: Path) -> bool:
        return True

    def read_text(self, path: Path) -> str:
        raise PermissionError("denied")

    def mtime(self, path: Path) -> float:
        return 0.0


def test_missing_component_offers_nothing(project) -> None:
    buffer = "<Route acc"

    assert _engine().complete(buffer, len(buffer), [project.path()]) == []


def test_unreadable_component_file_offers_nothing(project) -> None:
    engine = CompletionEngine(filesystem=_UnreadableFS())
    buffer = "<Button "

    assert engine.complete(buffer, len(buffer), [project.path()]) == []


def test_missing_component_offers_nothing_async(project) -> None:
    buffer = "<Route "

    result = asyncio.run(_engine().complete_async(buffer, len(buffer), [project.path()]))

    assert result == []


def test_component_without_signals_still_offers_catalog(project) -> None:
    project.write({"components/Plain.jsx": "export const Plain = () => null;"})
    buffer = "<Plain acc"

    names = [item.name for item in _engine().complete(buffer, len(buffer), [project.path()])]

    assert names == ["accent"]


def test_catalog_can_be_disabled(project) -> None:
    project.write({"components/Button.jsx": "signals.pill"})
    config = SignalCompleteConfig()
    config.suggestions.include_catalog = False
    buffer = "<Button "

    names = [item.name for item in CompletionEngine(config).complete(buffer, len(buffer), [project.path()])]

    assert names == ["pill"]


def test_signals_are_cached_until_ttl(project, clock) -> None:
    project.write({"components/Button.jsx": "signals.first"})
    engine = _engine(clock)

    assert [r.name for r in engine.signals_for_component("Button", [project.path()])] == ["first"]

    project.write({"components/Button.jsx": "signals.second"})
    clock.advance(30_000)
    assert [r.name for r in engine.signals_for_component("Button", [project.path()])] == ["first"]

    clock.advance(1)
    assert [r.name for r in engine.signals_for_component("Button", [project.path()])] == ["second"]


def test_clear_cache_forces_rescan(project, clock) -> None:
    project.write({"components/Button.jsx": "signals.first"})
    engine = _engine(clock)
    engine.signals_for_component("Button", [project.path()])

    project.write({"components/Button.jsx": "signals.second"})
    engine.clear_cache()

    assert [r.name for r in engine.signals_for_component("Button", [project.path()])] == ["second"]


def test_validate_mtime_detects_edits_within_ttl(project, clock) -> None:
    project.write({"components/Button.jsx": "signals.first"})
    config = SignalCompleteConfig()
    config.cache.validate_mtime = True
    engine = CompletionEngine(config, cache=SignalCache(clock=clock))
    engine.signals_for_component("Button", [project.path()])

    path = project.path("components/Button.jsx")
    path.write_text("signals.second", encoding="utf-8")
    stat = path.stat()
    os.utime(path, (stat.st_atime, stat.st_mtime + 5))

    assert [r.name for r in engine.signals_for_component("Button", [project.path()])] == ["second"]


def test_unreadable_component_degrades_to_empty(project) -> None:
    engine = CompletionEngine(filesystem=_UnreadableFS())

    assert engine.signals_for_component("Button", [project.path()]) == []
    assert len(engine.cache) == 0


def test_signals_for_file_reads_explicit_path(project) -> None:
    project.write({"lib/Widget.tsx": 'lease("Busy", "loading")'})

    records = _engine().signals_for_file(project.path("lib/Widget.tsx"))

    assert [(r.name, r.category) for r in records] == [("loading", "lease")]


def test_complete_async_matches_sync(project) -> None:
    project.write({"components/Button.jsx": _BUTTON})
    config = SignalCompleteConfig()
    config.suggestions.include_catalog = False
    engine = CompletionEngine(config)
    buffer = "<Button gl"

    result = asyncio.run(engine.complete_async(buffer, len(buffer), [project.path()]))

    assert [item.name for item in result] == ["glow"]
    assert result[0].layer == "Tone"


def test_for_project_reads_config_file(project) -> None:
    project.write(
        {
            ".signalcomplete.yml": """
            extractor:
              strategy: inputs
            suggestions:
              include_catalog: false
            """,
            "components/Field.jsx": "inputSignal.invalid; signals.ignored",
        }
    )
    engine = CompletionEngine.for_project(project.path())
    buffer = "<Field "

    assert [item.name for item in engine.complete(buffer, len(buffer), [project.path()])] == ["invalid"]
