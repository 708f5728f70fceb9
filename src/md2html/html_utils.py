"""Shared HTML utilities for rendering."""

from __future__ import annotations

# "&" must come first so entities produced by later replacements survive.
_ENTITY_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#39;"),
)


def escape_html(text: str) -> str:
    """Escape text for use in HTML content and double-quoted attributes.

    Escaping is not idempotent: calling this twice on the same string
    escapes the ampersands introduced by the first call.
    """
    for char, entity in _ENTITY_REPLACEMENTS:
        text = text.replace(char, entity)
    return text
