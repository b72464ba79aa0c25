"""Tests for the perses-config command."""

from collections.abc import Callable
from pathlib import Path

import pytest
import yaml

from perses.cli import build_parser, main


class TestBuildParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        """Flags have sensible defaults."""
        args = build_parser().parse_args([])
        assert args.config == ""
        assert args.db_folder == ""
        assert args.db_extension == "yaml"
        assert args.log_level == "INFO"

    def test_dotted_flags(self) -> None:
        """Dotted flag names map to attributes."""
        args = build_parser().parse_args(
            ["--db.folder", "/data", "--db.extension", "json", "--log.level", "debug"]
        )
        assert args.db_folder == "/data"
        assert args.db_extension == "json"
        assert args.log_level == "DEBUG"


class TestMain:
    """Tests for the main entry point."""

    def test_prints_resolved_config(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A valid configuration is printed as YAML."""
        exit_code = main(["--db.folder", "/data", "--db.extension", "json"])

        assert exit_code == 0
        assert yaml.safe_load(capsys.readouterr().out) == {
            "database": {"file": {"folder": "/data", "file_extension": "json"}}
        }

    def test_uses_config_file(
        self, capsys: pytest.CaptureFixture[str], write_config: Callable[[str, str], Path]
    ) -> None:
        """The file layer overrides the folder flag."""
        path = write_config("config.yaml", "database:\n  file:\n    folder: /from-file\n")
        exit_code = main(["--config", str(path), "--db.folder", "/data"])

        assert exit_code == 0
        output = yaml.safe_load(capsys.readouterr().out)
        assert output["database"]["file"]["folder"] == "/from-file"

    def test_failure_exits_nonzero(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Resolution errors are logged and exit with status 1."""
        exit_code = main(["--log.format", "json"])

        assert exit_code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "ConfigValidationError" in captured.err
