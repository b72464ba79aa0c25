"""Shared test fixtures for the Perses configuration test suite."""

import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
import structlog


@pytest.fixture(autouse=True)
def clean_perses_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove PERSES_* variables inherited from the host environment."""
    for key in list(os.environ):
        if key.upper().startswith("PERSES_"):
            monkeypatch.delenv(key)


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    path = tmp_path / "config"
    path.mkdir()
    return path


@pytest.fixture
def write_config(config_dir: Path) -> Callable[[str, str], Path]:
    """Factory fixture to create configuration files in the test config directory.

    Usage:
        def test_something(write_config):
            path = write_config("config.yaml", "database:\\n  file:\\n    folder: /data")
    """

    def _write_config(filename: str, content: str) -> Path:
        path = config_dir / filename
        path.write_text(content)
        return path

    return _write_config


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Restore structlog defaults so no test logs to a stale capture stream."""
    yield
    structlog.reset_defaults()
