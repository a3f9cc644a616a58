"""Minimal token scanner for C-family source files.

Only enough structure is recovered to find comments safely: string literals
are skipped so that ``"/*"`` inside a string is never mistaken for a comment,
and whitespace is kept as its own token so that a comment's indentation can
be read from the token in front of it. Joining every token's text gives back
the original source byte for byte.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List


class TokenKind(Enum):
    """Kinds of tokens produced by :func:`tokenize`."""
    CODE = "code"
    WHITESPACE = "whitespace"
    STRING = "string"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    DOC_COMMENT = "doc_comment"


COMMENT_KINDS = frozenset({TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT, TokenKind.DOC_COMMENT})

_WHITESPACE = re.compile(r"[ \t\r\n\f\v]+")
_LINE_COMMENT = re.compile(r"//[^\r\n]*")
_CODE = re.compile(r"[^ \t\r\n\f\v'\"`/]+|/")
_QUOTES = "'\"`"


@dataclass
class Token:
    """A slice of source text with its kind and 1-based start position."""
    kind: TokenKind
    text: str
    line: int = 1
    column: int = 1
    terminated: bool = True

    def is_comment(self) -> bool:
        return self.kind in COMMENT_KINDS

    def is_whitespace(self) -> bool:
        return self.kind == TokenKind.WHITESPACE


def detect_line_ending(source: str) -> str:
    """Return ``"\\r\\n"`` if the first line break in ``source`` is CRLF, else ``"\\n"``."""
    index = source.find("\n")
    if index > 0 and source[index - 1] == "\r":
        return "\r\n"
    return "\n"


def _scan_string(source: str, start: int) -> int:
    quote = source[start]
    pos = start + 1
    length = len(source)
    while pos < length:
        char = source[pos]
        if char == "\\":
            pos += 2
            continue
        pos += 1
        if char == quote:
            return pos
    return length


def _is_digit_separator(source: str, pos: int) -> bool:
    # C++14 separators such as 1'000 or 0xFF'FF; u8'x' stays a character literal.
    start = pos
    while start > 0 and (source[start - 1].isalnum() or source[start - 1] in "_'"):
        start -= 1
    word = source[start:pos]
    return bool(word) and word[0].isdigit() and pos + 1 < len(source) and source[pos + 1].isalnum()

def tokenize(source: str) -> List[Token]:
    """
    Split ``source`` into tokens.

    Args:
        source: Full text of a C, C++, Java, JavaScript, PHP, CSS, Go, ... file

    Returns:
        Tokens in source order; unterminated strings and block comments run
        to the end of the input
    """
    tokens: List[Token] = []
    pos = 0
    line = 1
    line_start = 0
    length = len(source)

    while pos < length:
        char = source[pos]
        terminated = True

        if char in " \t\r\n\f\v":
            kind = TokenKind.WHITESPACE
            end = _WHITESPACE.match(source, pos).end()
        elif source.startswith("/*", pos):
            close = source.find("*/", pos + 2)
            if close == -1:
                end = length
                terminated = False
            else:
                end = close + 2
            text = source[pos:end]
            if text.startswith("/**") and not text.startswith("/**/"):
                kind = TokenKind.DOC_COMMENT
            else:
                kind = TokenKind.BLOCK_COMMENT
        elif source.startswith("//", pos):
            kind = TokenKind.LINE_COMMENT
            end = _LINE_COMMENT.match(source, pos).end()
        elif char == "'" and _is_digit_separator(source, pos):
            kind = TokenKind.CODE
            end = pos + 1
        elif char in _QUOTES:
            kind = TokenKind.STRING
            end = min(_scan_string(source, pos), length)
        else:
            kind = TokenKind.CODE
            end = _CODE.match(source, pos).end()

        text = source[pos:end]
        tokens.append(Token(kind, text, line=line, column=pos - line_start + 1, terminated=terminated))

        newlines = text.count("\n")
        if newlines:
            line += newlines
            line_start = pos + text.rindex("\n") + 1
        pos = end

    return tokens


def join_tokens(tokens: List[Token]) -> str:
    return "".join(token.text for token in tokens)
