"""Observability: structured logging built on structlog."""

from perses.observability.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
