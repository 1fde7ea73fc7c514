"""Configuration schema: dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

OutputFormat = Literal["terminal", "json"]
LogLevel = Literal["debug", "info", "warning", "error"]

OUTPUT_FORMATS: tuple[str, ...] = ("terminal", "json")
LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error")


@dataclass
class OutputConfig:
    format: OutputFormat = "terminal"
    show_summary: bool = True
    show_table: bool = False  # per-source breakdown when several inputs are given


@dataclass
class DiagnosticsConfig:
    log_junk: bool = False  # log every unclassifiable line at INFO
    log_level: LogLevel = "warning"


@dataclass
class PatchStatConfig:
    version: str = "1.0"
    output: OutputConfig = field(default_factory=OutputConfig)
    diagnostics: DiagnosticsConfig = field(default_factory=DiagnosticsConfig)
