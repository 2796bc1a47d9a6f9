"""Configuration models and loaders for tildecd."""

from .loader import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATH,
    LOG_LEVEL_ENV_VAR,
    ConfigError,
    dump_example_config,
    load_config,
)
from .models import HomeConfig, LoggingConfig, LogLevel, TildeCdConfig

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "HomeConfig",
    "LOG_LEVEL_ENV_VAR",
    "LogLevel",
    "LoggingConfig",
    "TildeCdConfig",
    "dump_example_config",
    "load_config",
]
