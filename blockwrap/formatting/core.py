"""Core formatting infrastructure: options, results and the document formatter."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from blockwrap.errors import BlockWrapError, ConfigurationError

from .rules import DEFAULT_WIDTH, CommentChange, FormattingRule, get_default_rules, validate_width
from .tokens import detect_line_ending, join_tokens, tokenize

LINE_ENDING_AUTO = "auto"
LINE_ENDINGS = {
    "auto": LINE_ENDING_AUTO,
    "lf": "\n",
    "crlf": "\r\n",
    "\n": "\n",
    "\r\n": "\r\n",
}


def normalize_line_ending(value: object) -> str:
    """Map ``"lf"``/``"crlf"``/``"auto"`` or a literal terminator to its canonical form."""
    if isinstance(value, str) and value.lower() in LINE_ENDINGS:
        return LINE_ENDINGS[value.lower()]
    raise ConfigurationError(
        f"Option 'line_ending' has unsupported value {value!r}",
        hint="Use one of: auto, lf, crlf",
    )


@dataclass
class FormattingOptions:
    """Configuration options for comment formatting."""

    # Maximum line width, indentation and " * " prefix included
    width: int = DEFAULT_WIDTH

    # "auto" follows the first line break found in each document
    line_ending: str = LINE_ENDING_AUTO

    def validate(self) -> "FormattingOptions":
        validate_width(self.width)
        self.line_ending = normalize_line_ending(self.line_ending)
        return self

    def resolve_line_ending(self, source_text: str) -> str:
        if self.line_ending == LINE_ENDING_AUTO:
            return detect_line_ending(source_text)
        return self.line_ending


@dataclass
class FormattingContext:
    """Per-document state handed to rules."""
    file_path: str
    line_ending: str
    options: FormattingOptions


@dataclass
class FormattedResult:
    """Result of formatting one document."""

    formatted_text: str
    is_changed: bool
    errors: List[str]
    warnings: List[str]
    changes: List[CommentChange] = field(default_factory=list)

    def success(self) -> bool:
        """Check if formatting was successful."""
        return len(self.errors) == 0


class CommentFormatter:
    """
    Applies comment rules to whole source documents.

    The document is split into tokens, every rule that finds a candidate
    rewrites comment tokens in place, and the tokens are joined back. Code
    outside comments is never touched.
    """

    def __init__(self, options: Optional[FormattingOptions] = None, rules: Optional[List[FormattingRule]] = None):
        self.options = (options or FormattingOptions()).validate()
        self.rules = rules if rules is not None else get_default_rules(self.options.width)
        self.logger = logging.getLogger(__name__)

    def format_document(self, source_text: str, file_path: str = "untitled") -> FormattedResult:
        """
        Format a complete document.

        Args:
            source_text: The source code to format
            file_path: Path for messages (optional)

        Returns:
            FormattedResult with formatted text and the list of rewritten comments
        """
        errors: List[str] = []
        warnings: List[str] = []
        changes: List[CommentChange] = []

        try:
            tokens = tokenize(source_text)
            context = FormattingContext(
                file_path=file_path,
                line_ending=self.options.resolve_line_ending(source_text),
                options=self.options,
            )
            for token in tokens:
                if token.is_comment() and not token.terminated:
                    warnings.append(f"Unterminated comment at line {token.line}")

            for rule in self.rules:
                if not rule.is_candidate(tokens):
                    continue
                rule_changes = rule.apply(tokens, context)
                if rule_changes:
                    self.logger.debug("%s: %s rewrote %d comment(s)", file_path, rule.rule_id, len(rule_changes))
                changes.extend(rule_changes)

            formatted_text = join_tokens(tokens)

        except BlockWrapError as e:
            errors.append(f"Formatting error: {e.format()}")
            return FormattedResult(
                formatted_text=source_text,  # Return original on error
                is_changed=False,
                errors=errors,
                warnings=warnings,
            )

        return FormattedResult(
            formatted_text=formatted_text,
            is_changed=formatted_text != source_text,
            errors=errors,
            warnings=warnings,
            changes=changes,
        )
