"""Canonical Pydantic models shared across miniserver modules.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`LoggingConfig`, :class:`OutputConfig`, :class:`PluginsConfig`,
    and :class:`GlobalConfig`.

**Lifecycle models** -- runtime value types for the orchestrator and the
sample diagnostics plugin:
    :class:`LifecycleState`, :class:`DiagnosticStatus`, and
    :class:`DiagnosticEntry`.

All models use Pydantic v2. :class:`GlobalConfig` uses ``extra="allow"`` so
that third-party plugins can keep their own settings in the same file.
"""

from __future__ import annotations

import enum
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Config ---


class LoggingConfig(BaseModel):
    """Root logger settings applied by the CLI at startup."""

    level: str = Field(default="INFO", description="Root log level name")
    format: str = Field(default="plain", description="Log format: plain, rich")

    @field_validator("level")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("format")
    @classmethod
    def _check_format(cls, value: str) -> str:
        if value not in ("plain", "rich"):
            raise ValueError(f"Unknown log format: {value}")
        return value


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: str = Field(
        default="auto", description="Output format: auto, json, plain, rich"
    )


class PluginsConfig(BaseModel):
    """Plugin selection stored in :class:`GlobalConfig`.

    ``enabled`` is an allow-list applied to entry-point plugins when
    non-empty; ``disabled`` is always applied. ``builtins`` toggles the
    sample logger/greeter/diagnostics plugins.
    """

    builtins: bool = True
    enabled: list[str] = Field(default_factory=list)
    disabled: list[str] = Field(default_factory=list)


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/miniserver/config.json``.

    Loaded and saved by :func:`~miniserver.config.load_global_config` and
    :func:`~miniserver.config.save_global_config`. ``context`` seeds the
    server's shared context before any hook or plugin runs.
    """

    model_config = ConfigDict(extra="allow")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    plugins: PluginsConfig = Field(default_factory=PluginsConfig)
    context: dict[str, Any] = Field(default_factory=dict)


# --- Lifecycle ---


class LifecycleState(str, enum.Enum):
    """Server lifecycle state. The only transition is one-way."""

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


class DiagnosticStatus(str, enum.Enum):
    OK = "ok"
    ERROR = "error"


class DiagnosticEntry(BaseModel):
    """One health record collected by the diagnostics service."""

    plugin_name: str
    status: DiagnosticStatus
    message: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
