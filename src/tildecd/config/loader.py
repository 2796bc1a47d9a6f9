"""Config loading entry points for tildecd."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models import TildeCdConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("tildecd.default.yaml")
CONFIG_ENV_VAR = "TILDECD_CONFIG"
LOG_LEVEL_ENV_VAR = "TILDECD_LOG_LEVEL"


class ConfigError(RuntimeError):
    """Raised when configuration files cannot be loaded or validated."""


def load_config(
    path: Path | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> TildeCdConfig:
    """Load the tildecd configuration applying optional overrides.

    Layers, lowest first: packaged defaults, the user file (``path`` or the
    file named by ``TILDECD_CONFIG``), ``TILDECD_LOG_LEVEL``, ``overrides``.
    """

    default_data = _expect_mapping(_read_structured_file(DEFAULT_CONFIG_PATH), DEFAULT_CONFIG_PATH)

    config_path = path
    if config_path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            config_path = Path(env_path).expanduser()

    if config_path is not None:
        config_data = _expect_mapping(_read_structured_file(config_path), config_path)
    else:
        config_data = {}

    merged: dict[str, Any] = _deep_merge(default_data, config_data)

    env_level = os.getenv(LOG_LEVEL_ENV_VAR)
    if env_level:
        merged = _deep_merge(merged, {"logging": {"level": env_level}})

    if overrides:
        merged = _deep_merge(merged, _expand_override_keys(overrides))

    return TildeCdConfig.model_validate(merged)


def dump_example_config(dest: Path) -> None:
    """Write the default configuration to ``dest``."""

    dest.parent.mkdir(parents=True, exist_ok=True)

    defaults = _read_structured_file(DEFAULT_CONFIG_PATH)
    if dest.suffix.lower() == ".toml":
        raise ConfigError("TOML export is not supported yet; use a YAML destination.")
    if dest.suffix.lower() in {".json"}:
        dest.write_text(json.dumps(defaults, indent=2), encoding="utf-8")
        return
    dest.write_text(
        yaml.safe_dump(defaults, sort_keys=False),
        encoding="utf-8",
    )


def _expect_mapping(payload: Any, source: Path) -> dict[str, Any]:
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise ConfigError(f"Expected mapping data in {source}, got {type(payload)!r}.")
    return dict(payload)


def _read_structured_file(path: Path) -> Any:
    """Return the parsed contents of a YAML/TOML/JSON file."""

    if not path.exists():
        raise ConfigError(f"Config file {path} does not exist.")

    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")

    if suffix in {".yaml", ".yml"}:
        return yaml.safe_load(text) or {}
    if suffix == ".toml":
        return tomllib.loads(text)
    if suffix == ".json":
        return json.loads(text)

    raise ConfigError(f"Unsupported config format for {path}")


def _deep_merge(base: Mapping[str, Any], extra: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge two mappings returning a new dictionary."""

    result: dict[str, Any] = {key: value for key, value in base.items()}
    for key, value in extra.items():
        if (
            key in result
            and isinstance(result[key], Mapping)
            and isinstance(value, Mapping)
        ):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _expand_override_keys(overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Support dotted-notation overrides like ``home.fallback``."""

    result: dict[str, Any] = {}
    for key, value in overrides.items():
        result = _deep_merge(result, _expand_single_override(key, value))
    return result


def _expand_single_override(key: Any, value: Any) -> dict[str, Any]:
    if isinstance(key, str) and "." in key:
        *parents, leaf = key.split(".")
        root: dict[str, Any] = {}
        cursor = root
        for segment in parents:
            cursor = cursor.setdefault(segment, {})
        cursor[leaf] = value
        return root
    return {key: value}


__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "LOG_LEVEL_ENV_VAR",
    "dump_example_config",
    "load_config",
]
