"""
Comment formatter.

This module ties the reflow core to whole source files:
1. Splits a C-family file into tokens
2. Applies comment rules to the comment tokens
3. Joins the tokens back, leaving all code untouched
"""

from __future__ import annotations

__all__ = [
    "CommentChange",
    "CommentFormatter",
    "DefaultFormattingRules",
    "FormattedResult",
    "FormattingOptions",
    "FormattingRule",
    "WrapBlockCommentsRule",
    "get_default_rules",
]

from .core import CommentFormatter, FormattedResult, FormattingOptions
from .rules import CommentChange, FormattingRule, WrapBlockCommentsRule, get_default_rules


class DefaultFormattingRules:
    """Option presets."""

    @staticmethod
    def standard() -> FormattingOptions:
        return FormattingOptions(width=80)

    @staticmethod
    def compact() -> FormattingOptions:
        """Wide comments for code bases with a 100 column limit."""
        return FormattingOptions(width=100)

    @staticmethod
    def narrow() -> FormattingOptions:
        return FormattingOptions(width=72)
