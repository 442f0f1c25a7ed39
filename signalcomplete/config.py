"""Configuration loading for signalcomplete (.signalcomplete.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".signalcomplete.yml"

DEFAULT_TTL_MS = 30_000

DEFAULT_DENYLIST: tuple[str, ...] = (
    "className",
    "children",
    "style",
    "id",
    "key",
    "ref",
    "onClick",
    "onSubmit",
    "onChange",
    "onFocus",
    "onBlur",
    "type",
    "disabled",
)

DEFAULT_PRIORITY: tuple[str, ...] = (
    "primary",
    "secondary",
    "sm",
    "md",
    "lg",
    "hoverEnlarge",
)

DEFAULT_DIRECTORIES: tuple[str, ...] = ("components", "src/components")

DEFAULT_EXTENSIONS: tuple[str, ...] = (".jsx", ".js", ".tsx", ".ts")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ExtractorConfig:
    """Which extraction strategy runs and which names it ignores."""

    strategy: str = "layered"
    input_binding: str = "inputSignal"
    denylist: List[str] = field(default_factory=lambda: list(DEFAULT_DENYLIST))


@dataclass
class LocatorConfig:
    """Directory/extension combinations probed for component files."""

    directories: List[str] = field(default_factory=lambda: list(DEFAULT_DIRECTORIES))
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))


@dataclass
class CacheConfig:
    """Lifetime of cached extraction results."""

    ttl_ms: int = DEFAULT_TTL_MS
    validate_mtime: bool = False


@dataclass
class SuggestionConfig:
    """Ordering and sources for assembled suggestions."""

    priority: List[str] = field(default_factory=lambda: list(DEFAULT_PRIORITY))
    include_catalog: bool = True


@dataclass
class SignalCompleteConfig:
    """Represents the settings defined in .signalcomplete.yml."""

    root: Optional[Path] = None
    extractor: ExtractorConfig = field(default_factory=ExtractorConfig)
    locator: LocatorConfig = field(default_factory=LocatorConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    suggestions: SuggestionConfig = field(default_factory=SuggestionConfig)


def load_config(config_path: Path) -> SignalCompleteConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SignalCompleteConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    extractor = ExtractorConfig()
    extractor_data = _as_dict(data.get("extractor"))
    if extractor_data:
        strategy = _as_str(extractor_data.get("strategy"))
        if strategy:
            extractor.strategy = strategy.lower()
        binding = _as_str(extractor_data.get("input_binding"))
        if binding:
            extractor.input_binding = binding
        if "denylist" in extractor_data:
            extractor.denylist = _as_str_list(extractor_data.get("denylist"))
        for name in _as_str_list(extractor_data.get("extra_denylist")):
            if name not in extractor.denylist:
                extractor.denylist.append(name)

    locator = LocatorConfig()
    locator_data = _as_dict(data.get("locator"))
    if locator_data:
        for directory in _as_str_list(locator_data.get("extra_directories")):
            normalised = directory.strip("/")
            if normalised and normalised not in locator.directories:
                locator.directories.append(normalised)
        extensions = _as_str_list(locator_data.get("extensions"))
        if extensions:
            locator.extensions = [
                ext if ext.startswith(".") else f".{ext}" for ext in extensions
            ]

    cache = CacheConfig()
    cache_data = _as_dict(data.get("cache"))
    if cache_data:
        ttl = _as_int(cache_data.get("ttl_ms"))
        if "ttl_ms" in cache_data:
            if ttl is None or ttl <= 0:
                raise ConfigError("cache.ttl_ms must be a positive integer")
            cache.ttl_ms = ttl
        cache.validate_mtime = _as_bool(cache_data.get("validate_mtime")) or False

    suggestions = SuggestionConfig()
    suggestion_data = _as_dict(data.get("suggestions"))
    if suggestion_data:
        if "priority" in suggestion_data:
            suggestions.priority = _as_str_list(suggestion_data.get("priority"))
        include = _as_bool(suggestion_data.get("include_catalog"))
        if include is not None:
            suggestions.include_catalog = include

    return SignalCompleteConfig(
        root=root,
        extractor=extractor,
        locator=locator,
        cache=cache,
        suggestions=suggestions,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "CacheConfig",
    "ConfigError",
    "DEFAULT_DENYLIST",
    "DEFAULT_PRIORITY",
    "DEFAULT_TTL_MS",
    "ExtractorConfig",
    "LocatorConfig",
    "SignalCompleteConfig",
    "SuggestionConfig",
    "load_config",
]
