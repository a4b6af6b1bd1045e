"""
Configuration models.

Provides Pydantic models for weaver configuration with validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import ConfigDict, Field, field_validator

from .base import WeaverBaseModel

# Type aliases
LogLevel = Literal["debug", "info", "warning", "error"]
FailurePolicy = Literal["exit", "raise"]


class ConfigBaseModel(WeaverBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML and env strings
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
        use_enum_values=True,
        revalidate_instances="never",
    )


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class ExecutionConfig(ConfigBaseModel):
    """Execution configuration section.

    ``on_failure`` selects what a failed binary run does to the host:
    ``exit`` terminates with ``exit_code``, ``raise`` propagates
    ProcessExecutionError to the caller.
    """

    on_failure: FailurePolicy = "exit"
    exit_code: int = Field(default=1, ge=1, le=255)
    bin_dir: Path | None = None
    timeout: float | None = Field(default=None, gt=0)

    @field_validator("bin_dir", mode="before")
    @classmethod
    def empty_bin_dir(cls, v: str | Path | None) -> str | Path | None:
        if v == "":
            return None
        return v


class WeaverConfig(ConfigBaseModel):
    """Complete weaver configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
