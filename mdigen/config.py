"""Configuration loading for mdigen (.mdigen.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".mdigen.yml"

DEFAULT_SOURCE_ROOT = "material-design-icons-4.0.0/src"
DEFAULT_OUT_ROOT = "src"
DEFAULT_DEMO_ROOT = "playground"
DEFAULT_CONCURRENCY = 10
DEFAULT_FORMAT_COMMAND = ["npx", "prettier"]
DEFAULT_PRETTIER_CONFIG = ".prettierrc.json"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class FormatConfig:
    """Prettier invocation settings."""

    enabled: bool = True
    command: List[str] = field(default_factory=lambda: list(DEFAULT_FORMAT_COMMAND))
    config_path: Optional[Path] = None


@dataclass
class MdiGenConfig:
    """Represents the settings defined in .mdigen.yml."""

    root: Path
    source_root: Path
    out_root: Path
    demo_root: Path
    concurrency: int = DEFAULT_CONCURRENCY
    templates_dir: Optional[Path] = None
    format: FormatConfig = field(default_factory=FormatConfig)


def default_config(root: Path) -> MdiGenConfig:
    root = root.resolve()
    return MdiGenConfig(
        root=root,
        source_root=root / DEFAULT_SOURCE_ROOT,
        out_root=root / DEFAULT_OUT_ROOT,
        demo_root=root / DEFAULT_DEMO_ROOT,
        format=FormatConfig(config_path=root / DEFAULT_PRETTIER_CONFIG),
    )


def load_config(config_path: Path) -> MdiGenConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()
    config = default_config(root)

    if not config_file.exists():
        return config

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    source_root = _as_str(data.get("source_root"))
    if source_root:
        config.source_root = root / source_root
    out_root = _as_str(data.get("out_root"))
    if out_root:
        config.out_root = root / out_root
    demo_root = _as_str(data.get("demo_root"))
    if demo_root:
        config.demo_root = root / demo_root

    if "concurrency" in data:
        concurrency = _as_int(data.get("concurrency"))
        if concurrency is None or concurrency < 1:
            raise ConfigError("concurrency must be a positive integer")
        config.concurrency = concurrency

    templates_dir = _as_str(data.get("templates_dir"))
    if templates_dir:
        config.templates_dir = root / templates_dir

    format_data = _as_dict(data.get("format"))
    if format_data:
        enabled = _as_bool(format_data.get("enabled"))
        if enabled is not None:
            config.format.enabled = enabled
        command = _as_str_list(format_data.get("command"))
        if command:
            config.format.command = command
        prettier_config = _as_str(format_data.get("config"))
        if prettier_config:
            config.format.config_path = root / prettier_config

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
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
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


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
        return value.split()
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["ConfigError", "FormatConfig", "MdiGenConfig", "default_config", "load_config"]
