"""The ``rules`` command: describe the available formatting rules."""

import argparse

from blockwrap.formatting import CommentFormatter, get_default_rules

from ..errors import handle_cli_exception


def cmd_rules(args: argparse.Namespace) -> None:
    """List rule ids and descriptions, optionally with a formatted sample."""
    try:
        for rule in get_default_rules():
            print(f"{rule.rule_id}: {rule.description}")
            if getattr(args, "show_sample", False) and rule.sample:
                result = CommentFormatter(rules=[rule]).format_document(rule.sample, "<sample>")
                print("\n--- before")
                print(rule.sample, end="")
                print("--- after")
                print(result.formatted_text, end="")
    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
