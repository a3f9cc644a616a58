"""The ``lint`` command: report comments that need a reflow."""

import argparse

from blockwrap.linter import CommentLinter

from ..context import get_cli_context
from ..errors import handle_cli_exception
from ..utils import read_source


def cmd_lint(args: argparse.Namespace) -> None:
    """
    Handle the 'lint' subcommand.

    Args:
        args: Parsed command-line arguments containing:
            - files: Files or directories to check
            - width: Optional width override

    Raises:
        SystemExit: If any finding or error is reported
    """
    try:
        ctx = get_cli_context(args)
        linter = CommentLinter(ctx.options_from_args(args))
        files_to_lint = ctx.collect_files(args.files)

        if not files_to_lint:
            print("No files found to lint")
            return

        total_findings = 0
        error_count = 0

        for file_path in files_to_lint:
            try:
                content = read_source(file_path)
            except (OSError, UnicodeDecodeError) as exc:
                print(f"Error linting {file_path}: {exc}")
                error_count += 1
                continue

            result = linter.lint_document(content, str(file_path))

            if result.errors:
                print(f"{file_path}: ERRORS")
                for error in result.errors:
                    print(f"  {error}")
                error_count += 1
                continue

            for warning in result.warnings:
                print(f"Warning: {file_path}: {warning}")

            for finding in result.findings:
                location = f"{file_path}:{finding.line}:{finding.column}"
                print(f"{location}: {finding.severity.value.upper()} [{finding.rule_id}] {finding.message}")
                if finding.code_context:
                    print(f"    {finding.code_context}")
            total_findings += len(result.findings)

        if total_findings == 0 and error_count == 0:
            print("No issues found")
            return

        print(f"Found {total_findings} issue(s)")
        raise SystemExit(1)

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
