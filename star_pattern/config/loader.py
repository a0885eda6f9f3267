from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import jsonschema
import yaml
from jsonschema.exceptions import ValidationError

from star_pattern.models.config_models import DEFAULT_PROMPT, PrinterConfig

"""Config loader.

Responsibilities:
- Load an optional YAML config file
- Validate it against config_schema.json (shipped next to this module)
- Apply defaults for missing keys
- Resolve which file to use: explicit path > STAR_PATTERN_CONFIG > none
"""

__all__ = [
    "CONFIG_ENV_VAR",
    "ConfigError",
    "load_config",
    "resolve_config",
]

SCHEMA_PATH = Path(__file__).with_name("config_schema.json")
CONFIG_ENV_VAR = "STAR_PATTERN_CONFIG"


class ConfigError(Exception):
    pass


def _validate_config_schema(data: dict[str, Any]) -> None:
    """Validate config data against the JSON schema.

    Raises:
        ConfigError: If the schema file is missing or not valid JSON, or the
            config data violates the schema (unknown keys, wrong types, ...).
    """
    if not SCHEMA_PATH.exists():
        raise ConfigError(f"config schema not found: {SCHEMA_PATH}")

    try:
        schema = json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))
        jsonschema.validate(data, schema)
    except json.JSONDecodeError as e:
        raise ConfigError(f"invalid schema file: {e}") from e
    except ValidationError as e:
        raise ConfigError(f"config validation failed: {e.message}") from e


def load_config(path: Path) -> PrinterConfig:
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid yaml: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config root must be a mapping, got {type(data).__name__}")

    _validate_config_schema(data)

    return PrinterConfig(
        prompt=data.get("prompt", DEFAULT_PROMPT),
        max_rows=data.get("max_rows"),
        log_level=data.get("log_level", "INFO"),
    )


def resolve_config(path: Path | None = None) -> PrinterConfig:
    """Return the effective config.

    An explicit ``path`` wins, then the file named by ``STAR_PATTERN_CONFIG``.
    With neither, the built-in defaults are returned and no file is read.
    A file that was asked for but is missing is an error, not a fallback.
    """
    if path is None:
        env_path = os.getenv(CONFIG_ENV_VAR)
        if env_path:
            path = Path(env_path)
    if path is None:
        return PrinterConfig()
    return load_config(path)
