"""
cli/main.py - habitat-layout command line entry point
"""

from __future__ import annotations
from typing import List, Optional
import argparse
import logging
import sys

from habitat.bootstrap.config import load_config
from habitat.bootstrap.entrypoints import setup_logging
from habitat.catalog.library import FUNCTIONAL_AREA_CATALOG, load_catalog
from habitat.errors.taxonomy import CatalogError, HabitatInputError

from .commands import ALL_COMMANDS
from .core import (
    CLIContext,
    CommandRegistry,
    CommandResult,
    EXIT_INVALID_INPUT,
    OutputFormat,
    format_output,
)

logger = logging.getLogger(__name__)


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()
    for command in ALL_COMMANDS:
        registry.register(command)
    return registry


def build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Space habitat layout validation and compliance metrics",
        prog="habitat-layout",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.TEXT.value,
        help="Output format",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level",
    )
    parser.add_argument(
        "--catalog",
        help="Functional area catalog JSON file",
        default=None,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)
    for name in registry.list_commands():
        command = registry.get(name)
        sub = subparsers.add_parser(name, help=command.description)
        command.configure_parser(sub)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    CLI entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code: 0 success, 1 constraint errors found, 2 invalid input
    """
    registry = build_registry()
    parser = build_parser(registry)
    parsed = parser.parse_args(argv)

    # Diagnostics go to stderr so --format json output stays parseable
    setup_logging(level=parsed.log_level, stream=sys.stderr)
    output_format = OutputFormat(parsed.format)

    try:
        config = load_config(parsed.config)
        catalog_file = parsed.catalog or config.layout.catalog_file
        catalog = load_catalog(catalog_file) if catalog_file else FUNCTIONAL_AREA_CATALOG

        ctx = CLIContext(config=config, catalog=catalog, output_format=output_format)
        result = registry.get(parsed.command).execute(ctx, parsed)
    except (HabitatInputError, CatalogError) as e:
        result = CommandResult(
            success=False,
            error=str(e),
            data={"errors": [err.to_dict() for err in e.errors]},
            exit_code=EXIT_INVALID_INPUT,
        )

    print(format_output(result, output_format))
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
