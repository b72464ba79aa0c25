"""Layered configuration resolution.

Layers are merged in increasing precedence:
1. Caller defaults (database folder and file extension)
2. Configuration file (YAML or JSON)
3. PERSES_* environment variables

Each layer overrides only the keys it sets. The merged result is then
validated into an immutable Config.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError
from pydantic_settings import PydanticBaseSettingsSource

from perses.config.errors import ConfigValidationError
from perses.config.loader import deep_merge
from perses.config.settings import ENV_PREFIX, Config
from perses.config.sources import (
    DefaultsSettingsSource,
    FileSettingsSource,
    PrefixedEnvSettingsSource,
)
from perses.observability.logging import get_logger

logger = get_logger(__name__)


class ConfigResolver:
    """Resolves a Config from caller defaults, a file and the environment.

    The resolver holds no state between calls to resolve().
    """

    def __init__(
        self,
        config_file: str = "",
        db_folder: str = "",
        db_extension: str = "",
        env_prefix: str = ENV_PREFIX,
    ) -> None:
        self.config_file = config_file
        self.db_folder = db_folder
        self.db_extension = db_extension
        self.env_prefix = env_prefix

    def sources(self) -> tuple[PydanticBaseSettingsSource, ...]:
        """Build the settings sources, lowest precedence first."""
        return (
            DefaultsSettingsSource(Config, self.db_folder, self.db_extension),
            FileSettingsSource(Config, self.config_file),
            PrefixedEnvSettingsSource(Config, self.env_prefix),
        )

    def merge(self) -> dict[str, Any]:
        """Merge every layer into a single dictionary.

        Raises:
            ConfigLoadError: If the configuration file cannot be loaded
            ConfigParseError: If an environment variable has an invalid value
        """
        merged: dict[str, Any] = {}
        for source in self.sources():
            layer = source()
            if layer:
                logger.debug(
                    "config_layer_loaded", layer=source.name, keys=[str(key) for key in layer]
                )
            merged = deep_merge(merged, layer)
        return merged

    def resolve(self) -> Config:
        """Merge all layers and validate the result.

        Returns:
            The validated configuration

        Raises:
            ConfigLoadError: If the configuration file cannot be loaded
            ConfigParseError: If an environment variable has an invalid value
            ConfigValidationError: If the merged configuration is invalid
        """
        merged = self.merge()
        try:
            config = Config.model_validate(merged)
        except ValidationError as e:
            errors = [_format_error(err) for err in e.errors()]
            raise ConfigValidationError(
                "Invalid configuration: " + "; ".join(errors), errors
            ) from e

        logger.info("config_resolved", config_file=self.config_file or None)
        return config


def resolve(config_file: str = "", db_folder: str = "", db_extension: str = "") -> Config:
    """Resolve the Perses configuration.

    Args:
        config_file: Path to a YAML or JSON file; empty means no file
        db_folder: Default database folder; empty means no default
        db_extension: Default database file extension, used only with db_folder

    Returns:
        The validated configuration
    """
    return ConfigResolver(config_file, db_folder, db_extension).resolve()


def _format_error(error: Mapping[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"{location}: {error['msg']}"
    return str(error["msg"])
