"""Optional YAML configuration for the scanner."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional, Tuple

import yaml

from .utils import read_yaml_file

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".inclusivity.yaml", ".inclusivity.yml")
DEFAULT_EXCLUDE = (".git", "__pycache__", ".venv", "venv", ".tox", "build", "dist", "*.egg-info")
DEFAULT_EXTENSIONS = (".py",)


class ConfigError(ValueError):
    """Raised when a configuration file cannot be used."""


@dataclass
class ScanConfig:
    exclude: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    allow_names: List[str] = field(default_factory=list)
    scan_names: bool = True
    scan_docs: bool = True
    extensions: Tuple[str, ...] = DEFAULT_EXTENSIONS
    source: Optional[Path] = None


def _string_list(data: dict, key: str, default: List[str]) -> List[str]:
    value = data.get(key)
    if value is None:
        return list(default)
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    raise ConfigError(f"'{key}' must be a string or a list of strings")


def parse_config(data: Any, source: Optional[Path] = None) -> ScanConfig:
    """Build a :class:`ScanConfig` from a parsed YAML document."""

    if data is None:
        return ScanConfig(source=source)
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration at {source} is not a mapping")
    defaults = ScanConfig()
    extensions = _string_list(data, "extensions", list(defaults.extensions))
    return ScanConfig(
        exclude=_string_list(data, "exclude", defaults.exclude),
        allow_names=_string_list(data, "allow_names", defaults.allow_names),
        scan_names=bool(data.get("scan_names", defaults.scan_names)),
        scan_docs=bool(data.get("scan_docs", defaults.scan_docs)),
        extensions=tuple(ext if ext.startswith(".") else f".{ext}" for ext in extensions),
        source=source,
    )


def find_config(start: Optional[Path] = None) -> Optional[Path]:
    """Return the nearest config file in ``start`` or its parents."""

    if start is None:
        start = Path.cwd()
    start = start.resolve()
    for folder in [start, *start.parents]:
        for name in CONFIG_FILENAMES:
            candidate = folder / name
            if candidate.is_file():
                return candidate
    return None


def load_config(path: Optional[Path] = None, start: Optional[Path] = None) -> ScanConfig:
    """Load ``path``, or the discovered config file, or the defaults."""

    if path is None:
        path = find_config(start)
        if path is None:
            return ScanConfig()
    elif not path.exists():
        raise ConfigError(f"Configuration file not found: {path}")
    try:
        data = read_yaml_file(path)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    logger.info("Using configuration from %s", path)
    return parse_config(data, source=path)
