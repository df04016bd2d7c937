"""Configuration loading for elpparser (.elpparser.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".elpparser.yml"
DEFAULT_MAX_DEPTH = 200
# Each nesting level costs a few interpreter frames; stay under the recursion limit.
MAX_DEPTH_LIMIT = 300
DEFAULT_JSON_INDENT = 4


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class ParserConfig:
    """Settings applied while decoding and exporting packages."""

    max_depth: int = DEFAULT_MAX_DEPTH
    locale: Optional[str] = None
    json_indent: int = DEFAULT_JSON_INDENT


def load_config(config_path: Path) -> ParserConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    if not config_file.exists():
        return ParserConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    json_data = _as_dict(data.get("json"))
    max_depth = _as_positive_int(data.get("max_depth"))
    indent = _as_positive_int(json_data.get("indent")) if json_data else None

    return ParserConfig(
        max_depth=min(max_depth, MAX_DEPTH_LIMIT) if max_depth is not None else DEFAULT_MAX_DEPTH,
        locale=_as_str(data.get("locale")),
        json_indent=indent if indent is not None else DEFAULT_JSON_INDENT,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
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
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _as_positive_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = int(value)
        except ValueError:
            return None
    if isinstance(value, int) and value > 0:
        return value
    return None


__all__ = ["CONFIG_FILENAME", "MAX_DEPTH_LIMIT", "ConfigError", "ParserConfig", "load_config"]
