"""Pydantic models describing tildecd configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class HomeConfig(BaseModel):
    """Where the home directory comes from when expanding ``~``."""

    model_config = ConfigDict(extra="allow")

    variable: str = Field(default="HOME", min_length=1)
    fallback: str = "/"


class LoggingConfig(BaseModel):
    """Logging level and optional log file."""

    model_config = ConfigDict(extra="allow")

    level: LogLevel = "WARNING"
    log_path: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


class TildeCdConfig(BaseModel):
    """Root configuration object."""

    model_config = ConfigDict(extra="allow")

    home: HomeConfig = Field(default_factory=HomeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


__all__ = [
    "HomeConfig",
    "LogLevel",
    "LoggingConfig",
    "TildeCdConfig",
]
