"""The ``format`` command: reflow block comments in place."""

import argparse
import difflib
import logging
from pathlib import Path

from blockwrap.formatting import CommentFormatter

from ..context import get_cli_context
from ..errors import handle_cli_exception
from ..utils import read_source, write_source

logger = logging.getLogger(__name__)


def _unified_diff(path: Path, before: str, after: str) -> str:
    return "".join(difflib.unified_diff(
        before.splitlines(keepends=True),
        after.splitlines(keepends=True),
        fromfile=f"a/{path.as_posix()}",
        tofile=f"b/{path.as_posix()}",
    ))


def cmd_format(args: argparse.Namespace) -> None:
    """
    Handle the 'format' subcommand.

    Args:
        args: Parsed command-line arguments containing:
            - files: Files or directories to format
            - check: Only report files that would change
            - diff: Print a unified diff instead of writing
            - width: Optional width override
            - line_ending: Optional line ending override

    Raises:
        SystemExit: If a file cannot be formatted, or in check mode when
            any file would be reformatted

    Examples:
        >>> args = argparse.Namespace(files=['src'], check=True, diff=False)
        >>> cmd_format(args)  # doctest: +SKIP
        Would reformat src/main.c
        1 file(s) would be reformatted
    """
    try:
        ctx = get_cli_context(args)
        formatter = CommentFormatter(ctx.options_from_args(args))
        files_to_format = ctx.collect_files(args.files)

        if not files_to_format:
            print("No files to format")
            return

        changed_count = 0
        error_count = 0

        for file_path in files_to_format:
            try:
                content = read_source(file_path)
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Error reading {file_path}: {exc}")
                error_count += 1
                continue

            result = formatter.format_document(content, str(file_path))

            if result.errors:
                print(f"Error formatting {file_path}:")
                for error in result.errors:
                    print(f"  {error}")
                error_count += 1
                continue

            for warning in result.warnings:
                print(f"Warning in {file_path}: {warning}")

            if not result.is_changed:
                logger.debug("%s is already wrapped", file_path)
                continue

            changed_count += 1
            if args.check:
                print(f"Would reformat {file_path}")
            elif args.diff:
                print(_unified_diff(file_path, content, result.formatted_text), end="")
            else:
                write_source(file_path, result.formatted_text)
                print(f"Formatted {file_path}")

        if args.check:
            if changed_count > 0:
                print(f"{changed_count} file(s) would be reformatted")
                raise SystemExit(1)
            print("All files are already formatted")
        elif not args.diff and changed_count > 0:
            print(f"Formatted {changed_count} file(s) successfully")

        if error_count > 0:
            print(f"Encountered {error_count} error(s)")
            raise SystemExit(1)

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
