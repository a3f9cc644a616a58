"""Shared pytest fixtures and helpers for all tests."""

import logging
from typing import List

import pytest


def make_comment(lines: List[str], indent: str = "", opener: str = "/*", newline: str = "\n") -> str:
    """Build comment token text from body lines, the way it appears in a file."""
    parts = [opener]
    for line in lines:
        parts.append(f"{indent} * {line}" if line else f"{indent} *")
    parts.append(f"{indent} */")
    return newline.join(parts)


LONG_DOC_SOURCE = '''<?php

class Example
{
    /**
     * Returns the answer to the ultimate question of life, the universe and everything, computed slowly.
     *
     * @return int
     */
    public function answer(): int
    {
        return 42; // the answer
    }
}
'''

WRAPPED_DOC_SOURCE = '''<?php

class Example
{
    /**
     * Returns the answer to the ultimate question of life, the universe and
     * everything, computed slowly.
     *
     * @return int
     */
    public function answer(): int
    {
        return 42; // the answer
    }
}
'''


@pytest.fixture
def long_doc_source():
    """PHP class whose doc comment exceeds 80 columns."""
    return LONG_DOC_SOURCE


@pytest.fixture
def wrapped_doc_source():
    """The same class after formatting at width 80."""
    return WRAPPED_DOC_SOURCE


@pytest.fixture
def clean_env(monkeypatch):
    """Make sure CLI error handling exits instead of re-raising."""
    for name in ("BLOCKWRAP_RERAISE", "BLOCKWRAP_DEBUG", "BLOCKWRAP_VERBOSE", "BLOCKWRAP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def comment():
    """Factory building comment token text from body lines."""
    return make_comment


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo the handler and propagation changes made by the CLI logging setup."""
    logger = logging.getLogger("blockwrap")
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
