"""Tests for paragraph grouping and hanging indents."""

import pytest

from blockwrap.wrap.linebreak import display_width
from blockwrap.wrap.paragraphs import LeadMarker, match_lead_marker, rewrap_lines, rewrap_paragraph


class TestLeadMarker:
    """Bullet and number detection."""

    @pytest.mark.parametrize("line, expected", [
        ("- item", "- "),
        ("  * nested item", "  * "),
        ("++ double plus", "++ "),
        ("# heading-like bullet", "# "),
        ("12. twelfth", "12. "),
        ("3) third", "3) "),
        ("4] fourth", "4] "),
        ("5: fifth", "5: "),
        ("-\tTabbed", "-\t"),
    ])
    def test_markers(self, line, expected):
        marker = match_lead_marker(line)
        assert marker is not None
        assert marker.first_indent == expected

    @pytest.mark.parametrize("line", [
        "plain text",
        "-no space after bullet",
        "#include <stdio.h>",
        "12 apples",
        "3.14 is pi",
        "１. full-width digit",
        "a - b",
    ])
    def test_non_markers(self, line):
        assert match_lead_marker(line) is None

    def test_next_indent_matches_width(self):
        marker = LeadMarker("  - ")
        assert marker.width == 4
        assert marker.next_indent == "    "


class TestRewrapParagraph:
    """Flushing a single paragraph."""

    def test_empty_paragraph_is_noop(self):
        output = ["kept"]
        rewrap_paragraph(output, [], 40)
        assert output == ["kept"]

    def test_separator_added_after_existing_output(self):
        output = ["first"]
        rewrap_paragraph(output, ["second"], 40)
        assert output == ["first", "", "second"]

    def test_whitespace_is_normalized_at_joins(self):
        output = []
        rewrap_paragraph(output, ["Hello   ", "   world"], 40)
        assert output == ["Hello world"]


class TestRewrapLines:
    """Reflowing a whole comment body."""

    def test_bullet_gets_hanging_indent(self):
        lines = ["- This paragraph has an added indent of one space, and a leading bullet symbol."]
        output = rewrap_lines(lines, 40)
        assert output == [
            "- This paragraph has an added indent of",
            "  one space, and a leading bullet",
            "  symbol.",
        ]
        assert output[0].startswith("- ")
        for line in output[1:]:
            assert line.startswith("  ") and not line.startswith("   ")
        assert all(display_width(line) <= 40 for line in output)

    def test_numbered_item_gets_hanging_indent(self):
        lines = ["2) Similarly, this paragraph is numbered and its second line is indented as well."]
        assert rewrap_lines(lines, 30) == [
            "2) Similarly, this paragraph",
            "   is numbered and its second",
            "   line is indented as well.",
        ]

    def test_short_lines_are_merged(self):
        lines = ["This is", "a paragraph", "split over", "many lines."]
        assert rewrap_lines(lines, 80) == ["This is a paragraph split over many lines."]

    def test_blank_lines_collapse_to_one(self):
        lines = ["Para one.", "", "", "Para two."]
        assert rewrap_lines(lines, 80) == ["Para one.", "", "Para two."]

    def test_leading_and_trailing_blanks_dropped(self):
        lines = ["", "Only paragraph.", "", ""]
        assert rewrap_lines(lines, 80) == ["Only paragraph."]

    def test_annotation_is_never_merged_or_wrapped(self):
        long_tag = "@param string $value a very long annotation line that goes well past the configured width"
        lines = ["Summary line here.", long_tag, "@return void"]
        assert rewrap_lines(lines, 20) == [
            "Summary line here.",
            "",
            long_tag,
            "@return void",
        ]

    def test_annotation_continuation_kept_verbatim(self):
        lines = ["@param int $x", "  continues   here", "", "Prose after."]
        assert rewrap_lines(lines, 80) == [
            "@param int $x",
            "  continues   here",
            "",
            "Prose after.",
        ]

    def test_prose_after_annotation_block_is_separated(self):
        lines = ["@see Other", "", "Trailing", "prose."]
        assert rewrap_lines(lines, 80) == ["@see Other", "", "Trailing prose."]

    def test_blank_between_annotations_is_dropped(self):
        lines = ["@param a", "", "@param b"]
        assert rewrap_lines(lines, 80) == ["@param a", "@param b"]

    def test_annotation_after_paragraph_without_blank(self):
        lines = ["Intro text", "@deprecated"]
        assert rewrap_lines(lines, 80) == ["Intro text", "", "@deprecated"]

    def test_empty_input(self):
        assert rewrap_lines([], 80) == []
