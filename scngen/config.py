"""Configuration loading for scngen (.scn.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .errors import ConfigError
from .ids import IdStyle
from .serializer import RenderOptions

CONFIG_FILENAME = ".scn.yml"


@dataclass
class RenderConfig:
    """Rendering settings from the ``render`` section."""

    id_style: IdStyle = IdStyle.VERBATIM
    uppercase_containers: bool = False
    max_workers: Optional[int] = None

    def to_options(self) -> RenderOptions:
        return RenderOptions(
            id_style=self.id_style,
            uppercase_containers=self.uppercase_containers,
            max_workers=self.max_workers,
        )


@dataclass
class ProviderConfig:
    """Graph provider enablement."""

    enabled: List[str] = field(default_factory=list)


@dataclass
class ScnConfig:
    """Represents the settings defined in .scn.yml."""

    root: Path
    render: RenderConfig = field(default_factory=RenderConfig)
    providers: ProviderConfig = field(default_factory=ProviderConfig)
    output: Optional[Path] = None
    log_file: Optional[Path] = None


def load_config(config_path: Path) -> ScnConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return ScnConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    render_data = _as_dict(data.get("render"))
    render = RenderConfig()
    if render_data:
        id_style = _as_str(render_data.get("id_style"))
        if id_style is not None:
            try:
                render.id_style = IdStyle(id_style.lower())
            except ValueError as exc:
                choices = ", ".join(style.value for style in IdStyle)
                raise ConfigError(
                    f"render.id_style must be one of {choices}, got '{id_style}'"
                ) from exc
        render.uppercase_containers = _as_bool(render_data.get("uppercase_containers")) or False
        max_workers = _as_int(render_data.get("max_workers"))
        if max_workers is not None and max_workers < 1:
            raise ConfigError("render.max_workers must be a positive integer")
        render.max_workers = max_workers

    provider_data = _as_dict(data.get("providers"))
    providers = ProviderConfig()
    if provider_data:
        providers.enabled = _as_str_list(provider_data.get("enabled"))

    output_str = _as_str(data.get("output"))
    log_file_str = _as_str(data.get("log_file"))

    return ScnConfig(
        root=root,
        render=render,
        providers=providers,
        output=root / output_str if output_str else None,
        log_file=root / log_file_str if log_file_str else None,
    )


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
    return loaded or {}


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


__all__ = ["CONFIG_FILENAME", "ProviderConfig", "RenderConfig", "ScnConfig", "load_config"]
