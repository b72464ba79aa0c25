"""Command line entry point that resolves and prints the configuration."""

import argparse
import sys

import yaml

from perses.config import ConfigError, resolve
from perses.observability.logging import LEVELS, get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="perses-config",
        description="Resolve the Perses configuration and print it as YAML",
    )
    parser.add_argument("--config", default="", help="Path to the YAML or JSON configuration file")
    parser.add_argument(
        "--db.folder", dest="db_folder", default="", help="Folder of the file database"
    )
    parser.add_argument(
        "--db.extension",
        dest="db_extension",
        default="yaml",
        help="File extension of the file database (yaml or json)",
    )
    parser.add_argument(
        "--log.level",
        dest="log_level",
        default="INFO",
        choices=sorted(LEVELS, key=LEVELS.__getitem__),
        type=str.upper,
        help="Minimum log level",
    )
    parser.add_argument(
        "--log.format",
        dest="log_format",
        default="console",
        choices=["json", "console"],
        help="Log output format",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level, format=args.log_format)

    try:
        config = resolve(args.config, args.db_folder, args.db_extension)
    except ConfigError as e:
        logger.error("config_resolution_failed", error=e.message, error_type=type(e).__name__)
        return 1

    yaml.safe_dump(config.model_dump(mode="json"), sys.stdout, sort_keys=False)
    return 0


if __name__ == "__main__":
    sys.exit(main())
