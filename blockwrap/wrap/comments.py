"""Rewrite a single ``/* ... */`` or ``/** ... */`` comment."""

from __future__ import annotations

import logging
from typing import List, Optional

from .paragraphs import rewrap_lines

logger = logging.getLogger(__name__)

OPEN_COMMENT = "/*"
OPEN_DOC_COMMENT = "/**"
CLOSE_REMAINDER = "/"

# Columns taken by " * " in front of every content line.
PREFIX_COLUMNS = 3


def wrap_width(width: int, indent: str) -> int:
    """Columns left for text, never less than a quarter of ``width``."""
    return max(width - PREFIX_COLUMNS - len(indent), width // 4)


def extract_content_lines(content: str, indent: str, line_ending: str) -> Optional[List[str]]:
    """
    Strip the comment markers and the `` * `` prefix from every line.

    Returns None as soon as a line does not start with ``indent + " *"``.
    """
    indent_star = indent + " *"
    lines: List[str] = []

    for line in content.split(line_ending):
        if line in (OPEN_COMMENT, OPEN_DOC_COMMENT, ""):
            continue
        if not line.startswith(indent_star):
            return None

        remainder = line[len(indent_star):]
        if remainder == CLOSE_REMAINDER:
            continue
        if remainder == "":
            lines.append("")
        elif remainder[0] == " ":
            lines.append(remainder[1:])
        else:
            # " *text": heal the missing space.
            lines.append(remainder)

    return lines


def rewrap_block_comment(content: str, width: int, indent: str, line_ending: str) -> Optional[str]:
    """
    Rewrap a block or doc block comment.

    Args:
        content: Comment text from ``/*`` to ``*/`` inclusive
        width: Maximum line width including indentation
        indent: Whitespace in front of the comment on its first line
        line_ending: Line terminator used by the surrounding file

    Returns:
        The rewrapped comment, or None when the comment is single-line or
        does not follow the `` * `` line-prefix convention
    """
    if line_ending not in content:
        return None

    lines = extract_content_lines(content, indent, line_ending)
    if lines is None:
        logger.debug("Comment does not follow the %r prefix convention", indent + " *")
        return None

    indent_star = indent + " *"
    parts = [OPEN_DOC_COMMENT if content.startswith(OPEN_DOC_COMMENT) else OPEN_COMMENT]
    for line in rewrap_lines(lines, wrap_width(width, indent)):
        parts.append(line_ending + indent_star)
        if line != "":
            parts.append(" " + line)
    parts.append(line_ending + indent_star + CLOSE_REMAINDER)
    return "".join(parts)
