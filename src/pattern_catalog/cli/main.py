"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with configuration and logging
"""
import argparse
import os
import sys
from typing import List, Optional

from pattern_catalog._package import DESCRIPTION, __version__
from pattern_catalog.cli.formatters import (
    format_demo_details,
    format_demo_list,
    format_results,
)
from pattern_catalog.config import AppConfig, ConfigurationManager
from pattern_catalog.domain.core.exceptions import DomainException
from pattern_catalog.domain.demo import PatternCategory
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.registry import PatternCatalog, create_default_catalog

FORMAT_CHOICES = ["text", "json", "yaml", "table"]
CATEGORY_CHOICES = [category.value for category in PatternCategory]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "pattern-catalog",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                                   # Run every demo in order
  %(prog)s run observer state                # Run selected demos
  %(prog)s run --category structural         # Run one pattern family
  %(prog)s list --format table               # List demos as a table
  %(prog)s show decorator                    # Describe one pattern
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        help='Set logging level')
    parser.add_argument('--format', choices=FORMAT_CHOICES, help='Output format')
    parser.add_argument('--no-headers', action='store_true', help='Omit the header line before each demo')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Run
    run_parser = subparsers.add_parser('run', help='Run pattern demos')
    run_parser.add_argument('names', nargs='*', help='Demo names to run (default: all)')
    run_parser.add_argument('--category', choices=CATEGORY_CHOICES, help='Run one pattern family')

    # List
    subparsers.add_parser('list', help='List registered pattern demos')

    # Show
    show_parser = subparsers.add_parser('show', help='Describe a pattern demo')
    show_parser.add_argument('name', help='Demo name to describe')

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    """Load configuration and apply command line overrides."""
    config = ConfigurationManager(args.config).get_app_config()
    updates = {}
    if args.log_level:
        updates["logging"] = config.logging.model_copy(update={"level": args.log_level})
    if args.no_headers:
        updates["catalog"] = config.catalog.model_copy(update={"show_headers": False})
    return config.model_copy(update=updates) if updates else config


def execute_command(args: argparse.Namespace, catalog: PatternCatalog, config: AppConfig) -> str:
    """Execute the selected command and return its formatted output."""
    output_format = args.format or config.catalog.output_format.value
    command = args.command or 'run'

    if command == 'list':
        return format_demo_list(catalog, output_format)

    if command == 'show':
        return format_demo_details(catalog.get(args.name), output_format)

    names = getattr(args, 'names', None) or []
    category = getattr(args, 'category', None)

    if names:
        results = [catalog.run(name) for name in names]
    elif category:
        results = [catalog.run(demo.name) for demo in catalog.by_category(PatternCategory(category))]
    else:
        results = catalog.run_all()

    return format_results(results, output_format, show_headers=config.catalog.show_headers)


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args)
    except DomainException as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(config.logging)
    logger = get_logger(__name__)

    try:
        catalog = create_default_catalog(config.catalog.categories)
        output = execute_command(args, catalog, config)
    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
