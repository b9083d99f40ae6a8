"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Listing the registered pattern examples
- Running one, several or all examples
"""
import argparse
import sys
from typing import Any, Dict, List, Optional, Tuple

from pattern_catalog._version import __version__
from pattern_catalog.application.runner import PatternRunner
from pattern_catalog.catalog import create_default_registry
from pattern_catalog.config.manager import ConfigurationManager
from pattern_catalog.config.schemas import OUTPUT_FORMATS, AppConfig
from pattern_catalog.domain.base.exceptions import CatalogError
from pattern_catalog.infrastructure.error.exception_handler import get_exception_handler
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.registry.pattern_registry import PatternRegistry
from pattern_catalog.cli.formatters import format_output


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="pattern-catalog",
        description="Pattern Catalog - runnable demonstrations of classic design patterns",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                          # Run every example
  %(prog)s factory                  # Run the factory example only
  %(prog)s decorator proxy          # Run two examples
  %(prog)s --list --format table    # List the catalog as a table
        """
    )

    parser.add_argument('names', nargs='*', metavar='NAME',
                        help='Example(s) to run (default: all)')
    parser.add_argument('--list', action='store_true',
                        help='List registered examples (or only the named ones) instead of running')
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Output format')
    parser.add_argument('--quiet', action='store_true', help='Suppress error messages on stdout')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    app_config = ConfigurationManager(args.config).app_config
    if args.log_level:
        app_config = app_config.model_copy(
            update={"logging": app_config.logging.model_copy(update={"level": args.log_level})}
        )
    return app_config


def execute_command(args: argparse.Namespace, registry: PatternRegistry,
                    app_config: AppConfig) -> Tuple[Dict[str, Any], int]:
    """
    Execute the requested command.

    Returns:
        The data to format and the process exit code
    """
    if args.list:
        examples = registry.filter(args.names) if args.names else list(registry)
        patterns = [
            {
                "name": example.name,
                "category": example.category.value if example.category else None,
                "summary": example.summary,
            }
            for example in examples
        ]
        return {"patterns": patterns}, 0

    runner = PatternRunner(registry, app_config.runner)
    if args.names:
        results = runner.run_selected(args.names)
    else:
        results = runner.run_all()

    exit_code = 0 if all(result.succeeded for result in results.values()) else 1
    return {"examples": [result.to_dict() for result in results.values()]}, exit_code


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        app_config = load_config(args)
    except CatalogError as e:
        if not args.quiet:
            print(f"Error: {e}")
        return 1

    setup_logging(app_config.logging)
    logger = get_logger(__name__)

    try:
        registry = create_default_registry()
        data, exit_code = execute_command(args, registry, app_config)
        output_format = args.format or app_config.runner.default_format
        print(format_output(data, output_format))
        return exit_code
    except CatalogError as e:
        response = get_exception_handler().classify(e)
        if not args.quiet:
            print(f"Error: {response.message}")
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 130
    except Exception as e:
        logger.error("Unexpected error", error=str(e), exc_info=True)
        if not args.quiet:
            print(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
