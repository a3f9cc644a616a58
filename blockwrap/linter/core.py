"""Check-only view of the comment formatter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional
import logging

from blockwrap.formatting import CommentFormatter, FormattingOptions


class LintSeverity(Enum):
    """Severity levels for lint findings."""
    WARNING = "warning"


@dataclass
class LintFinding:
    """A single lint finding."""
    rule_id: str
    message: str
    severity: LintSeverity
    line: Optional[int] = None
    column: Optional[int] = None
    suggestion: Optional[str] = None
    code_context: Optional[str] = None


@dataclass
class LintResult:
    """Result of linting one document."""
    findings: List[LintFinding]
    errors: List[str]
    warnings: List[str]

    def success(self) -> bool:
        """Check if linting completed without errors."""
        return len(self.errors) == 0

    def has_issues(self) -> bool:
        """Check if any issues were found."""
        return len(self.findings) > 0

    def warning_count(self) -> int:
        """Count of warning-level findings."""
        return sum(1 for f in self.findings if f.severity == LintSeverity.WARNING)


class CommentLinter:
    """
    Reports comments that the formatter would rewrite.

    Nothing is modified; every comment the rules would change becomes a
    WARNING finding located at the comment's opening ``/*``.
    """

    def __init__(self, options: Optional[FormattingOptions] = None):
        self.formatter = CommentFormatter(options)
        self.logger = logging.getLogger(__name__)

    def lint_document(self, source_text: str, file_path: str = "untitled") -> LintResult:
        """
        Check a document without changing it.

        Args:
            source_text: Source code to analyze
            file_path: File path for context

        Returns:
            LintResult with one finding per comment needing a reflow
        """
        result = self.formatter.format_document(source_text, file_path)
        width = self.formatter.options.width

        findings = []
        for change in result.changes:
            first_line = change.original.splitlines()[0] if change.original else ""
            findings.append(LintFinding(
                rule_id=change.rule_id,
                message=f"Block comment is not wrapped to {width} columns",
                severity=LintSeverity.WARNING,
                line=change.line,
                column=change.column,
                suggestion="Run 'blockwrap format' to reflow it",
                code_context=first_line,
            ))

        if findings:
            self.logger.debug("%s: %d comment(s) need reflow", file_path, len(findings))

        return LintResult(
            findings=findings,
            errors=list(result.errors),
            warnings=list(result.warnings),
        )
