"""
Block comment reflow for C-family source files.

The package rewraps the text of multi-line ``/* ... */`` and ``/** ... */``
comments to a maximum line width while keeping bullets, numbered items,
``@`` annotation lines and paragraph breaks intact.

The code is organised into several modules:

* ``wrap`` - the reflow core.  ``rewrap_block_comment`` is a pure function
  over one comment's text; it returns None when a comment does not follow
  the `` * `` line-prefix convention.
* ``formatting`` - splits whole files into tokens, applies the comment rules
  and joins the result back.
* ``linter`` - reports comments that would be rewritten without touching
  the file.
* ``config`` - ``blockwrap.toml`` / ``[tool.blockwrap]`` loading.
* ``cli`` - the ``blockwrap`` command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .wrap import rewrap_block_comment

__all__ = ["__version__", "rewrap_block_comment"]
