"""CLI command handlers."""

from .format import cmd_format
from .lint import cmd_lint
from .rules import cmd_rules

__all__ = ["cmd_format", "cmd_lint", "cmd_rules"]
