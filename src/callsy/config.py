"""Configuration loader for callsy."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from ruamel.yaml import YAML, YAMLError

from .errors import ConfigError


@dataclass
class CallsyConfig:
    """callsy configuration."""

    # File locations
    request: str = "request.json"
    output: str = "response.json"
    body_output: Optional[str] = None

    # JSON indentation of the response file (0 = compact)
    indent: int = 2

    # Ask before replacing existing output files
    confirm_overwrite: bool = False


CONFIG_SEARCH_PATHS = [
    "callsy.yaml",
    "callsy.yml",
    ".callsy.yaml",
    ".callsy.yml",
]

STRING_FIELDS = {"request", "output", "body_output"}

KNOWN_KEYS = {"request", "output", "body_output", "indent", "confirm_overwrite"}


def find_config_path() -> Path | None:
    """Find the active config file path, or None if no config file exists."""
    for name in CONFIG_SEARCH_PATHS:
        path = Path.cwd() / name
        if path.exists():
            return path
    return None


def _read_yaml(config_path: Path) -> Any:
    yaml = YAML(typ="safe")
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.load(f)

    # If there's a callsy section, use its contents
    if isinstance(data, dict) and "callsy" in data:
        data = data["callsy"]
    return data


def _check_values(data: dict[str, Any]) -> list[str]:
    """Return type errors for known keys."""
    errors: list[str] = []

    for key in STRING_FIELDS:
        if key in data and data[key] is not None and not isinstance(data[key], str):
            errors.append(f"'{key}' must be a string, got: {data[key]!r}")

    if "indent" in data:
        value = data["indent"]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            errors.append(f"'indent' must be a non-negative integer, got: {value!r}")

    if "confirm_overwrite" in data and not isinstance(data["confirm_overwrite"], bool):
        errors.append(
            f"'confirm_overwrite' must be true or false, got: {data['confirm_overwrite']!r}"
        )

    return errors


def validate_config(config_path: Path) -> list[str]:
    """Validate a config file and return a list of error messages (empty = valid)."""
    try:
        data = _read_yaml(config_path)
    except YAMLError as e:
        return [f"Invalid YAML syntax: {e}"]
    except OSError as e:
        return [f"Cannot read file: {e}"]

    if data is None:
        return []

    if not isinstance(data, dict):
        return [f"Config must be a YAML mapping, got {type(data).__name__}"]

    errors = [f"Unknown key: '{key}'" for key in data if key not in KNOWN_KEYS]
    errors.extend(_check_values(data))
    return errors


def load_config(config_path: str | Path | None = None) -> CallsyConfig:
    """Load configuration file.

    Without an explicit path the working directory is searched; no file
    means defaults. Unknown keys are ignored here (see validate_config).

    Raises:
        ConfigError: explicit file missing, unreadable, or invalid
    """
    config = CallsyConfig()
    explicit = config_path is not None

    if config_path is None:
        config_path = find_config_path()

    if config_path is None:
        return config  # Return default config

    config_path = Path(config_path)
    if not config_path.exists():
        if explicit:
            raise ConfigError(f"Config file not found: {config_path}")
        return config

    try:
        data = _read_yaml(config_path)
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e

    if data is None:
        return config

    if not isinstance(data, dict):
        raise ConfigError(f"Config must be a YAML mapping, got {type(data).__name__}")

    errors = _check_values(data)
    if errors:
        raise ConfigError(f"Invalid config {config_path}: {errors[0]}")

    # Apply settings
    if data.get("request") is not None:
        config.request = data["request"]
    if data.get("output") is not None:
        config.output = data["output"]
    if "body_output" in data:
        config.body_output = data["body_output"]
    if "indent" in data:
        config.indent = data["indent"]
    if "confirm_overwrite" in data:
        config.confirm_overwrite = data["confirm_overwrite"]

    return config


def get_default_config_yaml() -> str:
    """Return default YAML config template."""
    return '''# callsy configuration
# Place this file as callsy.yaml in your working directory

callsy:
  # Request description to read
  request: request.json

  # Response description to write
  output: response.json

  # Also write the raw response body to this file (unset = don't)
  # body_output: body.txt

  # JSON indentation of the response file (0 = compact)
  indent: 2

  # Ask before replacing an existing output file
  confirm_overwrite: false
'''
