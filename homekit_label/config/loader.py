"""Configuration loader for homekit-label.

Loads label settings from a JSON5 file:
- comments, trailing commas, unquoted keys (json5)
- ${ENV_VAR} environment variable substitution
- pydantic validation into LabelSettings
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import json5
from pydantic import ValidationError as PydanticValidationError

from ..errors import ConfigError
from .schema import LabelSettings

logger = logging.getLogger(__name__)

_cached_config: Optional[LabelSettings] = None

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def _substitute_env_vars(obj: Any) -> Any:
    """Recursively replace ${VAR} with os.environ values; unknown variables are left as-is."""
    if isinstance(obj, str):

        def _replace(m: re.Match) -> str:
            return os.environ.get(m.group(1), m.group(0))

        return _ENV_VAR_RE.sub(_replace, obj)
    if isinstance(obj, dict):
        return {k: _substitute_env_vars(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_substitute_env_vars(v) for v in obj]
    return obj


def get_config_candidates() -> list[Path]:
    return [
        Path.cwd() / "homekit-label.json",
        Path.cwd() / "homekit-label.json5",
        Path.home() / ".homekit-label" / "config.json",
    ]


def _resolve_config_path(config_path: Optional[str | Path]) -> Optional[Path]:
    if config_path:
        return Path(config_path)

    for candidate in get_config_candidates():
        if candidate.exists():
            return candidate
    return None


def load_config_raw(path: Path) -> dict[str, Any]:
    """Parse a JSON5 config file and substitute environment variables."""
    try:
        obj = json5.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}", path=str(path)) from exc
    except ValueError as exc:
        raise ConfigError(f"Invalid JSON5 in {path}: {exc}", path=str(path)) from exc

    if not isinstance(obj, dict):
        raise ConfigError(f"Config file {path} must contain an object", path=str(path))
    return _substitute_env_vars(obj)


def load_config(config_path: Optional[str | Path] = None) -> LabelSettings:
    """Load label settings.

    Args:
        config_path: Optional path to a config file. Without it the
            well-known locations are searched and defaults are used when
            none exists.

    Returns:
        LabelSettings (cached for later calls without a path)

    Raises:
        ConfigError: If a config file exists but cannot be parsed or validated
    """
    global _cached_config

    if config_path is None and _cached_config is not None:
        return _cached_config

    path = _resolve_config_path(config_path)
    config_dict: dict[str, Any] = {}

    if path is not None:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", path=str(path))
        config_dict = load_config_raw(path)
        logger.debug(f"Loaded config from {path}, keys={sorted(config_dict)}")

    try:
        settings = LabelSettings(**config_dict)
    except PydanticValidationError as exc:
        raise ConfigError(f"Invalid config in {path}: {exc}", path=str(path)) from exc

    _cached_config = settings
    return settings


def invalidate_config_cache() -> None:
    """Invalidate the in-process config cache so the next load_config() re-reads disk."""
    global _cached_config
    _cached_config = None
