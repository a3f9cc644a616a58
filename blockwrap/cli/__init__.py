"""
blockwrap CLI entry point.

Builds the argument parser and dispatches to the command modules in
``blockwrap.cli.commands``.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from blockwrap import __version__

from .commands import cmd_format, cmd_lint, cmd_rules
from .validation import LINE_ENDING_CHOICES


def _configure_logging(args: argparse.Namespace) -> None:
    """Configure the ``blockwrap`` logger from --log-level or BLOCKWRAP_LOG_LEVEL."""
    log_level = (
        getattr(args, 'log_level', None) or
        os.getenv('BLOCKWRAP_LOG_LEVEL', 'warning')
    ).lower()

    level_map = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warn': logging.WARNING,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }
    numeric_level = level_map.get(log_level, logging.WARNING)

    package_logger = logging.getLogger('blockwrap')
    package_logger.setLevel(numeric_level)

    if not package_logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
        # Prevent propagation to root logger to avoid duplicate messages
        package_logger.propagate = False


def _add_width_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--width', '-w',
        type=int,
        default=None,
        help='Maximum line width (default: from config, else 80)'
    )
    parser.add_argument(
        '--line-ending',
        choices=LINE_ENDING_CHOICES,
        default=None,
        help='Line ending of the files (default: auto-detect per file)'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Reflow multi-line block comments to a maximum line width",
        prog="blockwrap"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--config',
        default=None,
        help='Path to a blockwrap.toml (or pyproject.toml) configuration file'
    )
    parser.add_argument(
        '--workspace',
        default=None,
        help='Workspace root directory (defaults to current working directory)'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set BLOCKWRAP_VERBOSE=1)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set BLOCKWRAP_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    format_parser = subparsers.add_parser(
        'format',
        help='Reflow block comments in source files'
    )
    format_parser.add_argument('files', nargs='+', help='Files or directories to format')
    mode = format_parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--check', action='store_true',
        help='Report files that would change and exit 1, without writing'
    )
    mode.add_argument(
        '--diff', action='store_true',
        help='Print a unified diff instead of writing'
    )
    _add_width_arguments(format_parser)
    format_parser.set_defaults(func=cmd_format)

    lint_parser = subparsers.add_parser(
        'lint',
        help='Report block comments that are not wrapped'
    )
    lint_parser.add_argument('files', nargs='+', help='Files or directories to check')
    _add_width_arguments(lint_parser)
    lint_parser.set_defaults(func=cmd_lint)

    rules_parser = subparsers.add_parser(
        'rules',
        help='List formatting rules'
    )
    rules_parser.add_argument(
        '--show-sample', action='store_true',
        help='Print each rule\'s sample before and after formatting'
    )
    rules_parser.set_defaults(func=cmd_rules)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main CLI entrypoint with subcommand support.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['format', '--check', 'src'])  # doctest: +SKIP
        >>> main(['lint', '--width', '100', 'include/'])  # doctest: +SKIP
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    if not getattr(args, 'func', None):
        parser.print_help()
        raise SystemExit(2)

    args.func(args)


__all__ = ["main", "build_parser"]
