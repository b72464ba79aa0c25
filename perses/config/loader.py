"""Configuration file loader with deep merge support."""

import json
from pathlib import Path
from typing import Any

import yaml

from perses.config.errors import ConfigLoadError


def load_file(file_path: Path) -> dict[str, Any]:
    """Load a YAML or JSON configuration file and return its contents.

    Files ending in ``.json`` are parsed as JSON, anything else as YAML.
    An empty document yields an empty dictionary.

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary containing the configuration data

    Raises:
        ConfigLoadError: If the file is missing, unreadable, malformed or
            does not hold a mapping at the top level
    """
    if not file_path.is_file():
        raise ConfigLoadError(f"Configuration file not found: {file_path}", str(file_path))

    try:
        with file_path.open("r", encoding="utf-8") as f:
            if file_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigLoadError(
            f"Unable to read configuration file {file_path}: {e}", str(file_path)
        ) from e
    except UnicodeDecodeError as e:
        raise ConfigLoadError(
            f"Configuration file {file_path} is not valid UTF-8: {e}", str(file_path)
        ) from e
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigLoadError(
            f"Invalid syntax in configuration file {file_path}: {e}", str(file_path)
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Configuration file {file_path} must contain a mapping at the top level, "
            f"got {type(data).__name__}",
            str(file_path),
        )
    return data


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override taking precedence.

    For nested dictionaries, values are merged recursively.
    For other values, override replaces base.

    Args:
        base: Base dictionary
        override: Override dictionary (takes precedence)

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result
