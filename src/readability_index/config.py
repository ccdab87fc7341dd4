from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .models import parse_selection


@dataclass(slots=True)
class ReadabilityConfig:
    """Configuration options for text analysis and the command line."""

    keep_trailing_empty_words: bool = True
    default_selection: str | None = None
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def _build_kwargs(data: Mapping[str, Any]) -> dict[str, Any]:
    allowed = {field.name for field in fields(ReadabilityConfig)}
    return {key: data[key] for key in data if key in allowed}


def config_from_dict(data: Mapping[str, Any] | None) -> ReadabilityConfig:
    """Build a ReadabilityConfig from a dictionary-like input."""
    if data is None:
        return ReadabilityConfig()
    config = ReadabilityConfig(**_build_kwargs(data))
    if config.default_selection is not None:
        # Unknown selectors are a configuration error.
        parse_selection(config.default_selection)
    return config


def config_from_yaml(path: str | Path) -> ReadabilityConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> ReadabilityConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return ReadabilityConfig()
    return config_from_yaml(path)
