"""Home directory lookup."""

from __future__ import annotations

import os
from collections.abc import Mapping

from tildecd.config import TildeCdConfig

DEFAULT_HOME_VARIABLE = "HOME"
DEFAULT_HOME_FALLBACK = "/"


def home_directory(
    env: Mapping[str, str] | None = None,
    *,
    variable: str = DEFAULT_HOME_VARIABLE,
    fallback: str = DEFAULT_HOME_FALLBACK,
) -> str:
    """Return the home directory from ``env`` (``os.environ`` by default).

    An unset variable yields ``fallback``, the filesystem root unless
    configured otherwise. A variable set to ``""`` is returned as ``""``.
    """
    source = os.environ if env is None else env
    return source.get(variable, fallback)


def home_from_config(config: TildeCdConfig, env: Mapping[str, str] | None = None) -> str:
    """Return the home directory using the configured variable and fallback."""
    return home_directory(env, variable=config.home.variable, fallback=config.home.fallback)


__all__ = ["DEFAULT_HOME_FALLBACK", "DEFAULT_HOME_VARIABLE", "home_directory", "home_from_config"]
