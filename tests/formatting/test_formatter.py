"""Tests for the document formatter and the wrap_block_comments rule."""

import logging

import pytest

from blockwrap.errors import ConfigurationError
from blockwrap.formatting import (
    CommentFormatter,
    DefaultFormattingRules,
    FormattingOptions,
    WrapBlockCommentsRule,
)
from blockwrap.formatting.tokens import tokenize


class TestCommentFormatter:
    """Formatting whole documents."""

    def test_wraps_doc_comment(self, long_doc_source, wrapped_doc_source):
        formatter = CommentFormatter(DefaultFormattingRules.standard())
        result = formatter.format_document(long_doc_source, "Example.php")

        assert result.success()
        assert result.is_changed
        assert result.formatted_text == wrapped_doc_source

    def test_already_wrapped_is_unchanged(self, wrapped_doc_source):
        result = CommentFormatter().format_document(wrapped_doc_source)
        assert result.success()
        assert not result.is_changed
        assert result.changes == []
        assert result.formatted_text == wrapped_doc_source

    def test_change_records_position(self, long_doc_source):
        result = CommentFormatter().format_document(long_doc_source)
        assert len(result.changes) == 1
        change = result.changes[0]
        assert change.rule_id == "wrap_block_comments"
        assert (change.line, change.column) == (5, 5)
        assert change.original.startswith("/**")

    def test_code_and_strings_untouched(self):
        source = (
            "<?php\n"
            "$s = \"/*\n * This string looks like a comment that is much longer than twenty columns\n */\";\n"
        )
        result = CommentFormatter(FormattingOptions(width=20)).format_document(source)
        assert not result.is_changed
        assert result.formatted_text == source

    def test_comment_not_following_convention_is_skipped(self, caplog):
        source = "/*\nThis comment has no leading stars and is much longer than the width.\n*/\n"
        with caplog.at_level(logging.DEBUG, logger="blockwrap"):
            result = CommentFormatter(FormattingOptions(width=20)).format_document(source, "a.c")
        assert not result.is_changed
        assert result.formatted_text == source
        assert "comment skipped" in caplog.text

    def test_single_line_comment_untouched(self):
        source = "int x; /* a single line comment that is definitely longer than twenty columns */\n"
        result = CommentFormatter(FormattingOptions(width=20)).format_document(source)
        assert not result.is_changed

    def test_crlf_document_keeps_crlf(self):
        source = "/*\r\n * one\r\n * two\r\n */\r\nint x;\r\n"
        result = CommentFormatter().format_document(source)
        assert result.formatted_text == "/*\r\n * one two\r\n */\r\nint x;\r\n"

    def test_explicit_line_ending(self):
        source = "/*\n * one\n * two\n */\n"
        result = CommentFormatter(FormattingOptions(line_ending="crlf")).format_document(source)
        assert not result.is_changed

    def test_comment_after_code_uses_inline_indent(self):
        source = "x(); /* first\n */\n"
        result = CommentFormatter().format_document(source)
        assert not result.is_changed

    def test_unterminated_comment_is_reported_not_rewritten(self):
        source = "int x;\n/*\n * never closed and long enough to wrap at a narrow width\n"
        result = CommentFormatter(FormattingOptions(width=20)).format_document(source)
        assert result.success()
        assert not result.is_changed
        assert result.warnings == ["Unterminated comment at line 2"]

    def test_multiple_comments(self):
        source = (
            "/*\n * alpha beta gamma delta epsilon\n */\n"
            "int a;\n"
            "    /*\n     * zeta eta theta iota kappa lambda\n     */\n"
        )
        result = CommentFormatter(FormattingOptions(width=20)).format_document(source)
        assert len(result.changes) == 2
        assert result.formatted_text == (
            "/*\n * alpha beta gamma\n * delta epsilon\n */\n"
            "int a;\n"
            "    /*\n     * zeta eta\n     * theta iota\n     * kappa lambda\n     */\n"
        )

    def test_invalid_width_rejected_eagerly(self):
        with pytest.raises(ConfigurationError):
            CommentFormatter(FormattingOptions(width=0))

    def test_bool_width_rejected(self):
        with pytest.raises(ConfigurationError):
            CommentFormatter(FormattingOptions(width=True))

    def test_invalid_line_ending_rejected(self):
        with pytest.raises(ConfigurationError) as exc_info:
            CommentFormatter(FormattingOptions(line_ending="cr"))
        assert "auto, lf, crlf" in exc_info.value.format()

    def test_presets(self):
        assert DefaultFormattingRules.standard().width == 80
        assert DefaultFormattingRules.compact().width == 100
        assert DefaultFormattingRules.narrow().width == 72


class TestWrapBlockCommentsRule:
    """The rule on its own."""

    def test_metadata(self):
        rule = WrapBlockCommentsRule()
        assert rule.rule_id == "wrap_block_comments"
        assert rule.width == 80
        assert "maximum line length" in rule.description

    def test_is_candidate(self):
        rule = WrapBlockCommentsRule()
        assert rule.is_candidate(tokenize("/* x */"))
        assert not rule.is_candidate(tokenize("// only a line comment\nint x;"))

    def test_rejects_non_int_width(self):
        with pytest.raises(ConfigurationError):
            WrapBlockCommentsRule(width="80")

    def test_sample_is_wrapped(self):
        rule = WrapBlockCommentsRule()
        result = CommentFormatter(rules=[rule]).format_document(rule.sample)
        assert result.is_changed
        lines = result.formatted_text.split("\n")
        assert lines[2] == "\t/*"
        assert all(len(line) <= 80 for line in lines)
