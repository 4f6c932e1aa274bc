"""
Main CLI module with argument parsing and command execution.

This module provides the main CLI interface including:
- Command line argument parsing
- Command routing and execution
- Error reporting and exit codes
"""
import argparse
import sys
from typing import List, Optional

from creational_patterns._version import __version__
from creational_patterns.app import Application
from creational_patterns.cli.commands import COMMAND_HANDLERS
from creational_patterns.cli.formatters import format_output
from creational_patterns.config.defaults import LogLevel, OutputFormat
from creational_patterns.domain.core.exceptions import DomainException
from creational_patterns.infrastructure.logging.logger import get_logger

OUTPUT_FORMATS = [output_format.value for output_format in OutputFormat]
LOG_LEVELS = [level.value for level in LogLevel]


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one sub-command per pattern."""
    parser = argparse.ArgumentParser(
        prog="creational-patterns",
        description="Creational design pattern demonstrations: Abstract Factory, Factory Method, Prototype",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s prototype                         # Clone a prototype and report
  %(prog)s prototype --primitive 7           # Clone a prototype holding 7
  %(prog)s abstract-factory --variant 2      # Run the second factory only
  %(prog)s factory-method --format json      # Reports as JSON
  %(prog)s all                               # Run every demonstration
        """
    )

    # Global options
    parser.add_argument('--config', help='Configuration file path (JSON or YAML)')
    parser.add_argument('--log-level', choices=LOG_LEVELS, help='Set logging level')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, help='Output format')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', help='Available demonstrations')
    subparsers.required = True

    prototype_parser = subparsers.add_parser('prototype', help='Clone a prototype holding a back-reference')
    prototype_parser.add_argument('--primitive', type=int, help='Primitive value of the prototype')

    factory_parser = subparsers.add_parser('abstract-factory', help='Run the abstract factory client')
    factory_parser.add_argument('--variant', action='append',
                                help='Factory variant to run (repeatable, default: all)')

    creator_parser = subparsers.add_parser('factory-method', help='Run the factory method client')
    creator_parser.add_argument('--creator', action='append',
                                help='Creator variant to run (repeatable, default: all)')

    subparsers.add_parser('all', help='Run every demonstration')
    subparsers.add_parser('variants', help='List registered factories and creators')

    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)


def execute_command(args: argparse.Namespace, app: Application) -> str:
    """Route the parsed command to its handler and format the result."""
    handler = COMMAND_HANDLERS[args.command]
    data, text = handler(app, args)
    format_type = args.format or app.config.output.format
    return format_output(data, format_type, text=text)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    logger = get_logger(__name__)

    try:
        app = Application(config_path=args.config, log_level=args.log_level)
        output = execute_command(args, app)
    except DomainException as e:
        logger.error("Command failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
