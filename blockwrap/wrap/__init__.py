"""
Comment reflow core.

Three layers, leaf first:

* ``linebreak`` - display-width aware wrapping of one logical line on
  Unicode line-break boundaries.
* ``paragraphs`` - paragraph grouping, bullet/number hanging indents and
  annotation isolation.
* ``comments`` - the `` * `` prefix convention around a whole comment.
"""

from __future__ import annotations

__all__ = [
    "LineBreakBoundaries",
    "LeadMarker",
    "display_width",
    "match_lead_marker",
    "rewrap_block_comment",
    "rewrap_lines",
    "rewrap_paragraph",
    "wordwrap",
    "wrap_width",
]

from .comments import rewrap_block_comment, wrap_width
from .linebreak import LineBreakBoundaries, display_width, wordwrap
from .paragraphs import LeadMarker, match_lead_marker, rewrap_lines, rewrap_paragraph
