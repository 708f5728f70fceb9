"""Local configuration for md2html."""

from __future__ import annotations

import os


DEFAULT_MAX_INPUT_CHARS = 1_000_000
DEFAULT_TITLE = "Page"
DEFAULT_ENCODING = "utf-8"

# Upper bound on characters handed to the parser; 0 or less disables the check.
MD2HTML_MAX_INPUT_CHARS = int(os.getenv("MD2HTML_MAX_INPUT_CHARS", str(DEFAULT_MAX_INPUT_CHARS)))
MD2HTML_DEFAULT_TITLE = os.getenv("MD2HTML_DEFAULT_TITLE", DEFAULT_TITLE)
MD2HTML_ENCODING = os.getenv("MD2HTML_ENCODING", DEFAULT_ENCODING)
