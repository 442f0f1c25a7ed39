"""Tests for signalcomplete.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from signalcomplete.config import (
    DEFAULT_DENYLIST,
    DEFAULT_PRIORITY,
    ConfigError,
    SignalCompleteConfig,
    load_config,
)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, SignalCompleteConfig)
    assert config.root == tmp_path.resolve()
    assert config.extractor.strategy == "layered"
    assert config.extractor.denylist == list(DEFAULT_DENYLIST)
    assert config.locator.directories == ["components", "src/components"]
    assert config.locator.extensions == [".jsx", ".js", ".tsx", ".ts"]
    assert config.cache.ttl_ms == 30_000
    assert config.cache.validate_mtime is False
    assert config.suggestions.priority == list(DEFAULT_PRIORITY)
    assert config.suggestions.include_catalog is True


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".signalcomplete.yml"
    config_file.write_text(
        """
extractor:
  strategy: Heuristic
  input_binding: bindings
  extra_denylist: [tabIndex, className]
locator:
  extra_directories:
    - signals
    - signal-layers/
  extensions: [tsx, .jsx]
cache:
  ttl_ms: 5000
  validate_mtime: yes
suggestions:
  priority: [accent]
  include_catalog: false
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.extractor.strategy == "heuristic"
    assert config.extractor.input_binding == "bindings"
    assert config.extractor.denylist == list(DEFAULT_DENYLIST) + ["tabIndex"]
    assert config.locator.directories == ["components", "src/components", "signals", "signal-layers"]
    assert config.locator.extensions == [".tsx", ".jsx"]
    assert config.cache.ttl_ms == 5000
    assert config.cache.validate_mtime is True
    assert config.suggestions.priority == ["accent"]
    assert config.suggestions.include_catalog is False


def test_denylist_replaces_defaults(tmp_path: Path) -> None:
    (tmp_path / ".signalcomplete.yml").write_text(
        "extractor:\n  denylist: [id]\n", encoding="utf-8"
    )

    assert load_config(tmp_path).extractor.denylist == ["id"]


def test_empty_file_yields_defaults(tmp_path: Path) -> None:
    (tmp_path / ".signalcomplete.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).cache.ttl_ms == 30_000


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "cache:\n  ttl_ms: 0\n",
        "cache:\n  ttl_ms: soon\n",
        "extractor: [unclosed\n",
    ],
)
def test_invalid_config_raises(tmp_path: Path, content: str) -> None:
    (tmp_path / ".signalcomplete.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
