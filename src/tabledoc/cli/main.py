"""CLI entry point for tabledoc."""

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from loguru import logger

from .. import __version__
from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="tabledoc",
        description="Typed tables stored in a single JSON document",
    )
    parser.add_argument("-v", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="TOML configuration file")
    parser.add_argument("--db", type=Path, help="Path to the JSON document")
    parser.add_argument(
        "--create", action="store_true", help="Create the document if it does not exist"
    )
    parser.add_argument("--log-level", help="Log level (default: WARNING)")

    subparsers = parser.add_subparsers(dest="command", required=False)

    customers_parser = subparsers.add_parser("customers", help="Manage customers")
    commands.add_customer_arguments(customers_parser)

    subparsers.add_parser("tables", help="List tables in the document")

    return parser


def configure_logging(level: str) -> None:
    """Send log records at ``level`` and above to stderr."""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def load_config(args) -> Config:
    """Build the configuration from file, environment and CLI flags."""
    config = Config.from_env_or_file(args.config)
    if args.db:
        config.store.path = args.db
    if args.create:
        config.store.create_if_missing = True
    if args.log_level:
        config.logging.level = args.log_level.upper()
    return config


def main(argv: list[str] | None = None) -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
        configure_logging(config.logging.level)

        if args.command == "customers":
            ok = commands.handle_customers(args, config)
        elif args.command == "tables":
            ok = commands.handle_tables(args, config)
        else:
            parser.print_help()
            ok = True

        sys.exit(0 if ok else 1)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
