"""Render a parsed document tree as minified HTML."""

from __future__ import annotations

from typing import Iterable

from md2html.exceptions import (
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    InvalidHtmlHeadingLevelError,
)
from md2html.html_utils import escape_html
from md2html.schemas import (
    BlockNode,
    Bold,
    Document,
    Image,
    InlineNode,
    Italic,
    LineBreak,
    Link,
    Paragraph,
    Section,
    Text,
)

_PARAGRAPH_TAGS = ("<p>", "</p>")
_BOLD_TAGS = ("<strong>", "</strong>")
_ITALIC_TAGS = ("<em>", "</em>")
_LINE_BREAK_TAG = "<br>"
_LINK_TEMPLATE = '<a href="{url}">{text}</a>'
_IMAGE_TEMPLATE = '<img src="{url}" alt="{alt}">'


def render(document: Document) -> str:
    """Render ``document`` as an HTML fragment.

    The preamble is emitted first, then every section depth-first. No
    whitespace is inserted between tags.

    Raises:
        InvalidHtmlHeadingLevelError: If a section level falls outside 1-6.
    """
    parts = [_render_block(block) for block in document.content]
    parts.extend(_render_section(section) for section in document.sections)
    return "".join(parts)


def _render_section(section: Section) -> str:
    parts = [_render_heading(section.level, section.title)]
    parts.extend(_render_block(block) for block in section.content)
    parts.extend(_render_section(subsection) for subsection in section.subsections)
    return "".join(parts)


def _render_heading(level: int, title: Iterable[InlineNode]) -> str:
    # Sections built without validation (e.g. model_construct) can carry any level.
    if not MIN_HEADING_LEVEL <= level <= MAX_HEADING_LEVEL:
        raise InvalidHtmlHeadingLevelError(level)
    return f"<h{level}>{_render_inlines(title)}</h{level}>"


def _render_block(block: BlockNode) -> str:
    if isinstance(block, Paragraph):
        return _wrap(_PARAGRAPH_TAGS, _render_inlines(block.children))
    if isinstance(block, Image):
        return _IMAGE_TEMPLATE.format(
            url=escape_html(block.url), alt=escape_html(block.alt_text)
        )
    raise TypeError(f"Unsupported block node: {type(block).__name__}")


def _render_inlines(nodes: Iterable[InlineNode]) -> str:
    return "".join(_render_inline(node) for node in nodes)


def _render_inline(node: InlineNode) -> str:
    if isinstance(node, Text):
        return escape_html(node.value)
    if isinstance(node, LineBreak):
        return _LINE_BREAK_TAG
    if isinstance(node, Bold):
        return _wrap(_BOLD_TAGS, _render_inlines(node.children))
    if isinstance(node, Italic):
        return _wrap(_ITALIC_TAGS, _render_inlines(node.children))
    if isinstance(node, Link):
        return _LINK_TEMPLATE.format(
            url=escape_html(node.url), text=_render_inlines(node.text)
        )
    raise TypeError(f"Unsupported inline node: {type(node).__name__}")


def _wrap(tags: tuple[str, str], content: str) -> str:
    return f"{tags[0]}{content}{tags[1]}"
