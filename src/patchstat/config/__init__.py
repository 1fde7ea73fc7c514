"""Configuration loading, schema, and defaults."""

from patchstat.config.loader import ConfigError, load_config
from patchstat.config.schema import DiagnosticsConfig, OutputConfig, PatchStatConfig

__all__ = [
    "ConfigError",
    "DiagnosticsConfig",
    "OutputConfig",
    "PatchStatConfig",
    "load_config",
]
