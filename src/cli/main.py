"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Integration with the pattern registry and configuration
"""
import argparse
import os
import sys
from typing import Any, Dict, List, Optional

from src._package import DESCRIPTION, __version__
from src.cli.formatters import format_output
from src.config.defaults import LogLevel, OutputFormat
from src.config.manager import ConfigurationManager
from src.config.schemas import AppConfig
from src.domain.core.exceptions import DomainException
from src.infrastructure.logging.logger import get_logger, setup_logging
from src.infrastructure.registry.pattern_registry import (
    PatternCategory,
    PatternRegistry,
    get_pattern_registry,
)
from src.patterns import register_patterns

FORMAT_CHOICES = [f.value for f in OutputFormat]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        prog=os.path.basename(sys.argv[0]) if argv is None else "patterns",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s list                              # List all demonstrations
  %(prog)s list --category structural        # List one pattern family
  %(prog)s show factory-method --format yaml # Describe one demonstration
  %(prog)s run observer                      # Run one demonstration
  %(prog)s run --all --singleton-delay-ms 0  # Run everything quickly
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=[level.value for level in LogLevel],
                        help='Set logging level')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # list
    list_parser = subparsers.add_parser('list', help='List registered demonstrations')
    list_parser.add_argument('--category', choices=[c.value for c in PatternCategory],
                             help='Filter by pattern family')
    list_parser.add_argument('--format', choices=FORMAT_CHOICES, default='table',
                             help='Output format')

    # show
    show_parser = subparsers.add_parser('show', help='Show demonstration details')
    show_parser.add_argument('name', help='Pattern name (e.g. factory-method)')
    show_parser.add_argument('--format', choices=FORMAT_CHOICES, default='list',
                             help='Output format')

    # run
    run_parser = subparsers.add_parser('run', help='Run one or more demonstrations')
    run_parser.add_argument('names', nargs='*', help='Pattern names to run')
    run_parser.add_argument('--all', action='store_true', help='Run every registered demonstration')
    run_parser.add_argument('--seed', type=int, help='Seed for the memento demonstration')
    run_parser.add_argument('--singleton-delay-ms', type=int,
                            help='Thread delay for the singleton demonstration')

    return parser.parse_args(argv)


def build_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate CLI flags into configuration overrides."""
    overrides: Dict[str, Any] = {}
    if args.log_level:
        overrides.setdefault('logging', {})['level'] = args.log_level
    if getattr(args, 'seed', None) is not None:
        overrides.setdefault('demo', {})['memento_seed'] = args.seed
    if getattr(args, 'singleton_delay_ms', None) is not None:
        overrides.setdefault('demo', {})['singleton_delay_ms'] = args.singleton_delay_ms
    return overrides


def execute_command(args: argparse.Namespace, registry: PatternRegistry, config: AppConfig) -> int:
    """Route a parsed command to the registry and return an exit code."""
    if args.command == 'list':
        category = PatternCategory(args.category) if args.category else None
        data = {"patterns": [r.to_dict() for r in registry.list(category)]}
        print(format_output(data, args.format))
        return 0

    if args.command == 'show':
        data = {"pattern": registry.get(args.name).to_dict()}
        print(format_output(data, args.format))
        return 0

    if args.command == 'run':
        names = registry.names() if args.all else args.names
        if not names:
            print("Error: No pattern specified. Use a name or --all.", file=sys.stderr)
            return 1

        # Resolve every name before running anything
        registrations = [registry.get(name) for name in names]

        exit_code = 0
        for i, registration in enumerate(registrations):
            if len(registrations) > 1:
                if i > 0:
                    print()
                print(f"=== {registration.name} ===")
            exit_code = max(exit_code, registry.run(registration.name, config))
        return exit_code

    print("Error: No command specified. Use --help for usage information.", file=sys.stderr)
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    logger = get_logger(__name__)
    try:
        args = parse_args(argv)

        try:
            config = ConfigurationManager(args.config, overrides=build_overrides(args)).app_config
        except DomainException as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        setup_logging(config.logging)
        registry = register_patterns(get_pattern_registry())

        try:
            return execute_command(args, registry, config)
        except DomainException as e:
            logger.error("Domain error", error=str(e))
            print(f"Error: {e}", file=sys.stderr)
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception("Unexpected error")
        print(f"Unexpected error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
