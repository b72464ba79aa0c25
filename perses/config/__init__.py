"""Configuration resolution for Perses.

Configuration is merged from caller defaults, a YAML/JSON file and
PERSES_* environment variables, then validated.

Usage:
    from perses.config import resolve

    config = resolve("config.yaml", db_folder="/var/lib/perses", db_extension="yaml")
    folder = config.database.file.folder
"""

from perses.config.errors import (
    ConfigError,
    ConfigLoadError,
    ConfigParseError,
    ConfigValidationError,
)
from perses.config.models import Database, File, FileExtension
from perses.config.resolver import ConfigResolver, resolve
from perses.config.settings import Config

__all__ = [
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigParseError",
    "ConfigResolver",
    "ConfigValidationError",
    "Database",
    "File",
    "FileExtension",
    "resolve",
]
