"""Paragraph detection and reflow for comment bodies."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .linebreak import TRIM_CHARS, display_width, joins_without_space, wordwrap

ANNOTATION_PREFIX = "@"
BULLET_CHARS = "-+*#"
NUMBER_DELIMITERS = ".:)]"

# Optional indent, then a bullet run or a number with its delimiter, then
# mandatory whitespace. ASCII only: a full-width digit is prose, not a list.
LEAD_MARKER_PATTERN = re.compile(
    r"^\s*([" + re.escape(BULLET_CHARS) + r"]+|\d+[" + re.escape(NUMBER_DELIMITERS) + r"])\s+",
    re.ASCII,
)


@dataclass(frozen=True)
class LeadMarker:
    """Bullet or number prefix found at the start of a paragraph."""

    text: str

    @property
    def width(self) -> int:
        return display_width(self.text)

    @property
    def first_indent(self) -> str:
        return self.text

    @property
    def next_indent(self) -> str:
        return " " * self.width


def match_lead_marker(line: str) -> Optional[LeadMarker]:
    match = LEAD_MARKER_PATTERN.match(line)
    if match is None:
        return None
    return LeadMarker(match.group(0))


def is_annotation(line: str) -> bool:
    return line.startswith(ANNOTATION_PREFIX)


def join_paragraph_lines(lines: Sequence[str]) -> str:
    """
    Join trimmed paragraph lines into one logical line.

    Lines are separated by a single space, except where the first ends in a
    word-internal hyphen or both sides of the join are double-width.
    """
    joined = ""
    for line in lines:
        line = line.strip(TRIM_CHARS)
        if not joined:
            joined = line
        elif joins_without_space(joined[-2:], line):
            joined += line
        else:
            joined += " " + line
    return joined


def rewrap_paragraph(output: List[str], paragraph: Sequence[str], width: int) -> None:
    """Reflow one paragraph and append its lines to ``output``."""
    if not paragraph:
        return

    # Paragraphs are always separated by exactly one blank line.
    if output:
        output.append("")

    lines = list(paragraph)
    marker = match_lead_marker(lines[0])
    if marker is not None:
        first_indent = marker.first_indent
        next_indent = marker.next_indent
        width -= marker.width
        lines[0] = lines[0][len(marker.text):]
    else:
        first_indent = next_indent = ""

    joined = join_paragraph_lines(lines)
    wrapped = wordwrap(joined, width, no_break_before=ANNOTATION_PREFIX)

    output.append(first_indent + wrapped[0])
    for line in wrapped[1:]:
        output.append(next_indent + line)


def rewrap_lines(lines: Sequence[str], width: int) -> List[str]:
    """
    Reflow comment content lines to ``width`` columns.

    Blank lines separate paragraphs; runs of blanks collapse to one.
    Annotation lines (``@param`` and friends) and the non-blank lines
    directly following them are copied verbatim and kept apart from prose.

    Args:
        lines: Comment body lines with the `` * `` prefix already removed
        width: Available width in display columns

    Returns:
        Output lines, where ``""`` stands for a blank comment line
    """
    output: List[str] = []
    paragraph: List[str] = []
    in_annotation = False

    for line in lines:
        if is_annotation(line):
            if paragraph:
                rewrap_paragraph(output, paragraph, width)
                output.append("")
            elif output and not is_annotation(output[-1]):
                output.append("")
            paragraph = []
            output.append(line)
            in_annotation = True
        elif line == "":
            rewrap_paragraph(output, paragraph, width)
            paragraph = []
            in_annotation = False
        elif in_annotation:
            output.append(line)
        else:
            paragraph.append(line)

    rewrap_paragraph(output, paragraph, width)
    return output
