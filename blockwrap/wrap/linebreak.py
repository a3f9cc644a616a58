"""Display-width aware word wrapping on Unicode line-break boundaries."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from typing import Callable, List, Optional

from uniseg.linebreak import line_break_boundaries
from wcwidth import wcwidth

# Characters stripped from the ends of wrapped lines. Unicode spaces such as
# NO-BREAK SPACE are content, not padding.
TRIM_CHARS = " \t\n\r\0\x0b"

# Hyphens that join the two halves of a word.
HYPHENS = "-\u2010"


def char_width(char: str) -> int:
    """Terminal columns taken by a single character.

    Control characters report -1 from wcwidth; they are counted as one column
    so that they still consume space on a line.
    """
    width = wcwidth(char)
    return 1 if width < 0 else width


def display_width(text: str) -> int:
    """Terminal columns taken by ``text`` (double-width CJK counts as 2)."""
    return sum(char_width(char) for char in text)


def truncate_to_width(text: str, start: int, width: int) -> int:
    """Return the end offset of the longest slice from ``start`` fitting ``width`` columns."""
    used = 0
    end = start
    length = len(text)
    while end < length:
        used += char_width(text[end])
        if used > width:
            break
        end += 1
    return end


def joins_without_space(before: str, after: str) -> bool:
    """
    Whether two lines broken between ``before`` and ``after`` are rejoined
    directly rather than with a space.

    That is the case after a hyphen inside a word (``well-`` + ``known``)
    and between two double-width characters, where CJK text has no spaces.
    """
    if not before or not after:
        return False
    last, first = before[-1], after[0]
    if last in HYPHENS:
        return len(before) > 1 and before[-2].isalnum() and first.isalnum()
    return char_width(last) == 2 and char_width(first) == 2


class LineBreakBoundaries:
    """Random access over the UAX #14 break opportunities of a string.

    Offsets are indices into the string. The end of the string is always a
    boundary; the start never is, since a line cannot break before its first
    character. ``accept`` can veto individual opportunities.
    """

    def __init__(self, text: str, accept: Optional[Callable[[int], bool]] = None):
        self.text = text
        length = len(text)
        found = {
            offset for offset in line_break_boundaries(text)
            if 0 < offset < length and (accept is None or accept(offset))
        }
        if length:
            found.add(length)
        self._offsets = sorted(found)

    def is_boundary(self, offset: int) -> bool:
        index = bisect_left(self._offsets, offset)
        return index < len(self._offsets) and self._offsets[index] == offset

    def preceding(self, offset: int) -> Optional[int]:
        """Largest boundary strictly before ``offset``."""
        index = bisect_left(self._offsets, offset)
        if index == 0:
            return None
        return self._offsets[index - 1]

    def following(self, offset: int) -> Optional[int]:
        """Smallest boundary strictly after ``offset``."""
        index = bisect_right(self._offsets, offset)
        if index >= len(self._offsets):
            return None
        return self._offsets[index]


def _rejoinable_break(text: str, offset: int, no_break_before: str) -> bool:
    # A break must be undone exactly by joining the lines again: with one
    # space after whitespace, with nothing where joins_without_space holds.
    if text[offset] in no_break_before:
        return False
    last = offset
    while last > 0 and text[last - 1] in TRIM_CHARS:
        last -= 1
    before = text[max(0, last - 2):last]
    if last == offset:
        return joins_without_space(before, text[offset:offset + 1])
    return not joins_without_space(before, text[offset:offset + 1])


def wordwrap(text: str, width: int, no_break_before: str = "") -> List[str]:
    """
    Split ``text`` into lines of at most ``width`` display columns.

    Lines only end on line-break boundaries, so a word or a grapheme is never
    cut. A token that is wider than ``width`` on its own is emitted whole on
    an overlong line rather than split.

    Only breaks that rejoining the lines reverses are used: after spaces, after
    a hyphen inside a word, and between double-width characters. Other UAX #14
    opportunities (after ``/`` or an em dash, say) are skipped, so wrapping
    already wrapped text gives the same lines again.

    Args:
        text: A single logical line, without line breaks
        width: Target width in display columns
        no_break_before: Characters that may not start a continuation line

    Returns:
        Non-empty list of trimmed lines; ``[""]`` for empty input
    """
    if not text:
        return [""]

    boundaries = LineBreakBoundaries(
        text, lambda offset: _rejoinable_break(text, offset, no_break_before)
    )
    lines: List[str] = []
    pos = 0
    length = len(text)

    while pos < length:
        end = truncate_to_width(text, pos, width)
        if end <= pos or not boundaries.is_boundary(end):
            end = boundaries.preceding(end)
            if end is None or end <= pos:
                # The first token is wider than the line; overflow to its end.
                end = boundaries.following(pos)
        lines.append(text[pos:end].strip(TRIM_CHARS))
        pos = end

    return lines
