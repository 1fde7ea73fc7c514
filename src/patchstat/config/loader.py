"""Load and merge configuration from .patchstat.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from patchstat.config.defaults import CONFIG_FILENAME
from patchstat.config.schema import (
    LOG_LEVELS,
    OUTPUT_FORMATS,
    DiagnosticsConfig,
    OutputConfig,
    PatchStatConfig,
)


class ConfigError(Exception):
    """Raised when config is malformed or unreadable."""


def find_config_file(base_dir: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = base_dir / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    raw = data.get(section, {})
    if not isinstance(raw, dict):
        raise ConfigError(f"[{section}] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in raw.items() if k in valid_fields}
    return cls(**filtered)


def _validate(cfg: PatchStatConfig) -> None:
    if cfg.output.format not in OUTPUT_FORMATS:
        raise ConfigError(f"Invalid output.format: {cfg.output.format!r}")
    if cfg.diagnostics.log_level not in LOG_LEVELS:
        raise ConfigError(f"Invalid diagnostics.log_level: {cfg.diagnostics.log_level!r}")


def _merge_env_overrides(cfg: PatchStatConfig) -> None:
    """Apply PATCHSTAT_* environment variable overrides."""
    if val := os.environ.get("PATCHSTAT_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
    if val := os.environ.get("PATCHSTAT_LOG_LEVEL"):
        if val.lower() in LOG_LEVELS:
            cfg.diagnostics.log_level = val.lower()  # type: ignore[assignment]
    if val := os.environ.get("PATCHSTAT_LOG_JUNK"):
        cfg.diagnostics.log_junk = val.lower() in ("1", "true", "yes")


def load_config(
    base_dir: Path,
    config_override: Optional[str] = None,
) -> PatchStatConfig:
    """Load, validate, and return a PatchStatConfig."""
    config_path = find_config_file(base_dir, config_override)

    if config_path is None:
        cfg = PatchStatConfig()
    else:
        raw = _parse_toml(config_path)
        cfg = PatchStatConfig(
            version=raw.get("version", "1.0"),
            output=_build_section(raw, OutputConfig, "output"),
            diagnostics=_build_section(raw, DiagnosticsConfig, "diagnostics"),
        )
        _validate(cfg)

    _merge_env_overrides(cfg)
    return cfg
