"""Perses configuration resolution."""

from perses.config import Config, ConfigError, resolve

__all__ = ["Config", "ConfigError", "resolve"]
