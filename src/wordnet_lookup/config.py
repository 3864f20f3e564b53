"""
YAML configuration for wordnet-lookup.

Example file::

    database_dir: ~/wordnet/dict
    cache_size: 50000
    log_level: INFO
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from wordnet_lookup.exceptions import ConfigError

# Conventional WordNet search-directory variable
DATABASE_ENV_VAR = "WNSEARCHDIR"

KNOWN_KEYS = ("database_dir", "cache_size", "log_level")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class WordnetConfig:
    """Settings needed to open a database."""
    database_dir: Path
    cache_size: Optional[int] = None
    log_level: str = "WARNING"

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def load_config(
    source: Union[str, Path, Mapping[str, Any], None] = None,
    *,
    overrides: Optional[Mapping[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> WordnetConfig:
    """Load configuration from a YAML file, a YAML string or a mapping.

    Args:
        source: Path to YAML file, YAML string, parsed mapping, or None
            to rely on the environment alone
        overrides: Values that replace those from ``source`` (None values
            are ignored)
        environ: Environment used for the ``WNSEARCHDIR`` fallback
            (defaults to ``os.environ``)

    Returns:
        WordnetConfig object

    Raises:
        ConfigError: If the configuration cannot be parsed or is invalid
        FileNotFoundError: If the file does not exist
    """
    if source is None:
        data: Dict[str, Any] = {}
    elif isinstance(source, Mapping):
        data = dict(source)
    elif isinstance(source, Path) or _is_file_path(source):
        path = Path(source)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        data = _load_yaml_file(path)
    else:
        data = _load_yaml_string(source)

    for key, value in (overrides or {}).items():
        if value is not None:
            data[key] = value

    return _parse_config(data, os.environ if environ is None else environ)


def _is_file_path(s: str) -> bool:
    """Check if a string looks like a file path."""
    # YAML mappings need "key: value"
    if "\n" in s or ": " in s:
        return False
    if "/" in s or "\\" in s:
        return True
    if s.endswith((".yaml", ".yml")):
        return True
    return False


def _load_yaml_file(path: Path) -> Dict[str, Any]:
    """Load YAML from a file."""
    with open(path, "r", encoding="utf-8") as f:
        return _load_yaml_string(f.read())


def _load_yaml_string(s: str) -> Dict[str, Any]:
    """Load YAML from a string."""
    try:
        data = yaml.safe_load(s)
    except yaml.YAMLError as e:
        line = getattr(e, "problem_mark", None)
        line_num = line.line + 1 if line else None
        raise ConfigError(f"Invalid YAML: {e}", line=line_num) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError("YAML root must be a mapping (dictionary)")

    return data


def _parse_config(data: Dict[str, Any], environ: Mapping[str, str]) -> WordnetConfig:
    """Validate a mapping and build a WordnetConfig."""
    unknown = sorted(set(data) - set(KNOWN_KEYS))
    if unknown:
        raise ConfigError(f"Unknown configuration keys: {', '.join(map(str, unknown))}")

    database_dir = data.get("database_dir") or environ.get(DATABASE_ENV_VAR)
    if not database_dir:
        raise ConfigError(
            f"No database directory: set 'database_dir' or ${DATABASE_ENV_VAR}"
        )
    if not isinstance(database_dir, (str, Path)):
        raise ConfigError("Field 'database_dir' must be a string")

    cache_size = data.get("cache_size")
    if cache_size is not None:
        if isinstance(cache_size, bool) or not isinstance(cache_size, int):
            raise ConfigError("Field 'cache_size' must be an integer")
        if cache_size < 1:
            raise ConfigError("Field 'cache_size' must be positive")

    log_level = data.get("log_level", "WARNING")
    if not isinstance(log_level, str) or log_level.upper() not in LOG_LEVELS:
        raise ConfigError(
            f"Field 'log_level' must be one of {', '.join(LOG_LEVELS)}"
        )

    return WordnetConfig(
        database_dir=Path(database_dir).expanduser(),
        cache_size=cache_size,
        log_level=log_level.upper(),
    )
