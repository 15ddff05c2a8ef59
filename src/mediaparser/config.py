"""Configuration management for media-parser.

Supports loading configuration from:
1. Environment variables (MEDIAPARSER_*)
2. Config file (~/.mediaparser/config.yaml)
3. Default values

Example config file (~/.mediaparser/config.yaml):
    probe:
      ffprobe_path: "/usr/local/bin/ffprobe"
      timeout_seconds: 60
    analysis:
      max_packets: 20000
      max_frames: 5000
      timeline_window: 0.5
    export:
      directory: "./media-analysis"
"""

from __future__ import annotations

import os
import warnings
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".mediaparser" / "config.yaml",
    Path.home() / ".config" / "mediaparser" / "config.yaml",
    Path(".mediaparser.yaml"),
]


@dataclass
class ProbeConfig:
    """ffprobe invocation settings."""

    ffprobe_path: str = "ffprobe"
    timeout_seconds: int = 30


@dataclass
class AnalysisConfig:
    """Packet/frame analysis limits."""

    max_packets: int = 10000
    max_frames: int = 5000
    timeline_window: float = 1.0


@dataclass
class ExportConfig:
    """Export configuration."""

    directory: str = "./media-analysis"


@dataclass
class MediaParserConfig:
    """Main configuration for media-parser."""

    probe: ProbeConfig = field(default_factory=ProbeConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    export: ExportConfig = field(default_factory=ExportConfig)


def _load_yaml_config(locations: list[Path] | None = None) -> dict[str, Any]:
    """Load configuration from the first YAML file found."""
    for config_path in CONFIG_LOCATIONS if locations is None else locations:
        if config_path.exists():
            try:
                with open(config_path, encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                warnings.warn(f"Ignoring unreadable config file {config_path}: {e}", stacklevel=2)
                continue
            return data if isinstance(data, dict) else {}
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MEDIAPARSER_ prefix."""
    return os.environ.get(f"MEDIAPARSER_{key}", default)


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a config file section, ignoring sections that are not mappings."""
    section = file_config.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        warnings.warn(
            f"Ignoring config section {name!r}: expected a mapping, got {type(section).__name__}",
            stacklevel=3,
        )
        return {}
    return section


def _setting(
    env_key: str,
    section: dict[str, Any],
    key: str,
    convert: Callable[[Any], Any],
    default: Any,
) -> Any:
    """Resolve one setting from the environment, then the file, then the default.

    Empty and unconvertible values fall back to the default with a warning.
    """
    value = _get_env(env_key)
    source = f"MEDIAPARSER_{env_key}"
    if value in (None, ""):
        value = section.get(key)
        source = key
    if value in (None, ""):
        return default
    try:
        return convert(value)
    except (TypeError, ValueError):
        warnings.warn(
            f"Ignoring invalid config value {source}={value!r}, using {default!r}",
            stacklevel=3,
        )
        return default


def load_config(locations: list[Path] | None = None) -> MediaParserConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MEDIAPARSER_*)
    2. Config file (~/.mediaparser/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config(locations)

    probe_config = _section(file_config, "probe")
    probe = ProbeConfig(
        ffprobe_path=_setting("FFPROBE_PATH", probe_config, "ffprobe_path", str, "ffprobe"),
        timeout_seconds=_setting("TIMEOUT", probe_config, "timeout_seconds", int, 30),
    )

    analysis_config = _section(file_config, "analysis")
    analysis = AnalysisConfig(
        max_packets=_setting("MAX_PACKETS", analysis_config, "max_packets", int, 10000),
        max_frames=_setting("MAX_FRAMES", analysis_config, "max_frames", int, 5000),
        timeline_window=_setting(
            "TIMELINE_WINDOW", analysis_config, "timeline_window", float, 1.0
        ),
    )

    export_config = _section(file_config, "export")
    export = ExportConfig(
        directory=_setting("EXPORT_DIR", export_config, "directory", str, "./media-analysis"),
    )

    return MediaParserConfig(probe=probe, analysis=analysis, export=export)


# Global config instance (lazy loaded)
_config: MediaParserConfig | None = None


def get_config() -> MediaParserConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
