"""Formatting rules applied to token streams."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from blockwrap.errors import ConfigurationError
from blockwrap.wrap import rewrap_block_comment

from .tokens import Token, TokenKind

if TYPE_CHECKING:
    from .core import FormattingContext

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 80


@dataclass
class CommentChange:
    """One comment rewritten by a rule."""
    rule_id: str
    line: int
    column: int
    original: str
    replacement: str


def validate_width(value: object, *, option: str = "width") -> int:
    """Reject anything but a positive integer width."""
    if not isinstance(value, int) or isinstance(value, bool):
        raise ConfigurationError(
            f"Option '{option}' must be an integer, got {type(value).__name__}",
            hint="Use a column count such as 80",
        )
    if value < 1:
        raise ConfigurationError(
            f"Option '{option}' must be positive, got {value}",
            hint="Use a column count such as 80",
        )
    return value


class FormattingRule(ABC):
    """Base class for rules that rewrite tokens in place."""

    sample: str = ""

    def __init__(self, rule_id: str, description: str):
        self.rule_id = rule_id
        self.description = description

    def is_candidate(self, tokens: List[Token]) -> bool:
        return True

    @abstractmethod
    def apply(self, tokens: List[Token], context: "FormattingContext") -> List[CommentChange]:
        """
        Rewrite ``tokens`` in place.

        Args:
            tokens: Token list of the whole document
            context: Per-document settings such as the line ending

        Returns:
            One change record per rewritten token
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rule_id!r})"


class WrapBlockCommentsRule(FormattingRule):
    """
    Wrap multi-line block comments to a maximum line length.

    The first and last lines of the comment must hold only the opening and
    closing sequences, and every line in between must start with a ``*``
    aligned under the first asterisk of the opening sequence. Other comments
    are left alone.

    Paragraphs starting with an indent, bullet (``-``, ``+``, ``*``, ``#``)
    or number followed by ``.``, ``:``, ``)`` or ``]`` keep that prefix and
    get a hanging indent on their following lines.
    """

    sample = (
        "<?php\n"
        "if (true) {\n"
        "\t/*\n"
        "\t * This block comment is longer than 80 characters, so it will be wrapped to a more "
        "appropriate line width by the wrap_block_comments rule.\n"
        "\t */\n"
        "}\n"
    )

    def __init__(self, width: int = DEFAULT_WIDTH):
        super().__init__(
            rule_id="wrap_block_comments",
            description="Multi-line block comments must be wrapped to a maximum line length.",
        )
        self.width = validate_width(width)

    def is_candidate(self, tokens: List[Token]) -> bool:
        return any(token.kind in (TokenKind.BLOCK_COMMENT, TokenKind.DOC_COMMENT) for token in tokens)

    def apply(self, tokens: List[Token], context: "FormattingContext") -> List[CommentChange]:
        changes: List[CommentChange] = []
        line_ending = context.line_ending

        for index, token in enumerate(tokens):
            if not token.is_comment() or not token.terminated:
                continue
            content = token.text
            if not content.startswith("/*") or line_ending not in content:
                continue

            indent = self._indent_before(tokens, index)
            wrapped = rewrap_block_comment(content, self.width, indent, line_ending)
            if wrapped is None:
                logger.debug(
                    "%s:%d:%d: comment skipped, lines do not start with %r",
                    context.file_path, token.line, token.column, indent + " *",
                )
                continue
            if wrapped == content:
                continue

            tokens[index] = Token(token.kind, wrapped, line=token.line, column=token.column)
            changes.append(CommentChange(
                rule_id=self.rule_id,
                line=token.line,
                column=token.column,
                original=content,
                replacement=wrapped,
            ))

        return changes

    @staticmethod
    def _indent_before(tokens: List[Token], index: int) -> str:
        if index == 0:
            return ""
        previous = tokens[index - 1]
        if not previous.is_whitespace():
            return ""
        return previous.text.rpartition("\n")[2]


def get_default_rules(width: Optional[int] = None) -> List[FormattingRule]:
    return [WrapBlockCommentsRule(DEFAULT_WIDTH if width is None else width)]

