"""Load plugin config from TOML (e.g. tvdbids.toml).

Config file is looked up in order:
  1. Path in TVDBIDS_CONFIG env var (if set)
  2. tvdbids.toml in the current working directory

If no file is found, built-in defaults are used (provider_id="Tvdb").
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_PROVIDER_ID = "Tvdb"
DEFAULT_LOG_LEVEL = "WARNING"


class PluginConfig(BaseModel, frozen=True):
    """Settings supplied by the surrounding plugin.

    Attributes:
        provider_id: Canonical name under which TVDB identifiers are stored.
        log_level: Level name for the package logger.
    """

    provider_id: str = Field(
        default=DEFAULT_PROVIDER_ID,
        min_length=1,
        description="Mapping key used for the plugin's own provider identifiers.",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Logging level name (DEBUG, INFO, WARNING, ...).",
    )


def _default_config_paths() -> list[Path]:
    """Return paths to check for tvdbids.toml (first existing wins)."""
    paths: list[Path] = []
    if os.environ.get("TVDBIDS_CONFIG"):
        paths.append(Path(os.environ["TVDBIDS_CONFIG"]))
    paths.append(Path.cwd() / "tvdbids.toml")
    return paths


def _is_level_name(name: str) -> bool:
    return isinstance(logging.getLevelName(name), int)


def load_plugin_config(paths: list[Path] | None = None) -> PluginConfig:
    """Load plugin config from the first readable TOML file.

    Args:
        paths: Candidate files, checked in order. Defaults to the env var and
            working-directory lookup described in the module docstring.

    Returns:
        PluginConfig built from the file's [plugin] table. Keys with the wrong
        type, a blank provider_id and unknown level names fall back to the defaults.
    """
    values: dict[str, str] = {}
    for path in paths if paths is not None else _default_config_paths():
        if not path.is_file():
            continue
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, ValueError):
            continue
        plugin = data.get("plugin")
        if isinstance(plugin, dict):
            provider_id = plugin.get("provider_id")
            if isinstance(provider_id, str) and provider_id.strip():
                values["provider_id"] = provider_id.strip()
            log_level = plugin.get("log_level")
            if isinstance(log_level, str) and _is_level_name(log_level.strip().upper()):
                values["log_level"] = log_level.strip().upper()
        break
    return PluginConfig(**values)
