"""Errors surfaced to blockwrap users."""

from __future__ import annotations

from typing import Optional


class BlockWrapError(Exception):
    """
    Base class for all errors surfaced to users.

    ``path`` names the file the problem was found in (a config file, or
    the source being formatted); ``code`` and ``hint`` feed the CLI output.
    """

    code: Optional[str] = None
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        path: Optional[str] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        if code is not None:
            self.code = code
        if hint is not None:
            self.hint = hint

    def format(self) -> str:
        """``message (path; CODE) Hint: ...`` with the missing parts left out."""
        meta = [part for part in (self.path, self.code) if part]
        text = f"{self.message} ({'; '.join(meta)})" if meta else self.message
        if self.hint:
            text = f"{text} Hint: {self.hint}"
        return text


class ConfigurationError(BlockWrapError):
    """Raised when a width, line ending or config file value is invalid."""

    code = "BW_CONFIG"
