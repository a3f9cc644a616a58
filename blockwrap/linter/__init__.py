"""
Comment linter for blockwrap.

Reports block comments that are not wrapped to the configured width
without modifying the file.
"""

from __future__ import annotations

__all__ = ["CommentLinter", "LintFinding", "LintResult", "LintSeverity"]

from .core import CommentLinter, LintFinding, LintResult, LintSeverity
