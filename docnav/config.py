"""Configuration loading for docnav (.docnav.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .metadata.normalize import DEFAULT_LANGUAGES, NormalizationConfig

CONFIG_FILENAME = ".docnav.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SampleConfig:
    """One sample project to mirror."""

    source: Path
    dest: str
    title: str
    offline: bool = False


@dataclass
class DocNavConfig:
    """Represents the settings defined in .docnav.yml."""

    root: Path
    output_dir: Path
    templates_dir: Optional[Path] = None
    pages: Optional[Path] = None
    normalization: NormalizationConfig = field(default_factory=NormalizationConfig)
    samples: List[SampleConfig] = field(default_factory=list)


def load_config(config_path: Path) -> DocNavConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return DocNavConfig(root=root, output_dir=root / "out")

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    output_dir_str = _as_str(data.get("output_dir")) or "out"
    templates_dir_str = _as_str(data.get("templates_dir"))
    pages_str = _as_str(data.get("pages"))

    metadata_data = _as_dict(data.get("metadata"))
    defaults = NormalizationConfig()
    languages = _as_str_list(metadata_data.get("languages")) if "languages" in metadata_data else []
    normalization = NormalizationConfig(
        lowercase_tags=_or_default(_as_bool(metadata_data.get("lowercase_tags")), defaults.lowercase_tags),
        lowercase_keywords=_or_default(
            _as_bool(metadata_data.get("lowercase_keywords")), defaults.lowercase_keywords
        ),
        keep_title_tail=_or_default(
            _as_bool(metadata_data.get("keep_title_tail")), defaults.keep_title_tail
        ),
        locale_prefix=_as_str(metadata_data.get("locale_prefix")) or defaults.locale_prefix,
        languages=tuple(lang.lower() for lang in languages) or DEFAULT_LANGUAGES,
    )

    samples: List[SampleConfig] = []
    raw_samples = data.get("samples")
    if raw_samples is not None and not isinstance(raw_samples, list):
        raise ConfigError("samples must be a list of mappings")
    for raw in raw_samples or []:
        sample_data = _as_dict(raw)
        source = _as_str(sample_data.get("source"))
        if not source:
            raise ConfigError("Each sample entry requires a source")
        source_path = Path(source)
        samples.append(
            SampleConfig(
                source=source_path,
                dest=_as_str(sample_data.get("dest")) or f"samples/{source_path.name}",
                title=_as_str(sample_data.get("title")) or source_path.name,
                offline=bool(_as_bool(sample_data.get("offline"))),
            )
        )

    return DocNavConfig(
        root=root,
        output_dir=root / output_dir_str,
        templates_dir=root / templates_dir_str if templates_dir_str else None,
        pages=root / pages_str if pages_str else None,
        normalization=normalization,
        samples=samples,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
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
    return loaded or {}


def _or_default(value: Optional[bool], default: bool) -> bool:
    return default if value is None else value


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


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
    "ConfigError",
    "DocNavConfig",
    "SampleConfig",
    "load_config",
]
