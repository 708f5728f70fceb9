"""Tests for HTML utilities."""

from __future__ import annotations

import pytest

from md2html.html_utils import escape_html


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("plain", "plain"),
        ("a & b", "a &amp; b"),
        ("<tag>", "&lt;tag&gt;"),
        ('say "hi"', "say &quot;hi&quot;"),
        ("it's", "it&#39;s"),
        ("&lt;", "&amp;lt;"),
        ("", ""),
    ],
)
def test_escape_html(text: str, expected: str) -> None:
    assert escape_html(text) == expected


def test_escaping_is_not_idempotent() -> None:
    once = escape_html("<&>")

    assert once == "&lt;&amp;&gt;"
    assert escape_html(once) == "&amp;lt;&amp;amp;&amp;gt;"
