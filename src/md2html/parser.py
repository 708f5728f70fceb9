"""Parse the markdown dialect into a document tree."""

from __future__ import annotations

import re

from md2html.cursor import NEWLINE, Cursor
from md2html.exceptions import (
    MAX_HEADING_LEVEL,
    MIN_HEADING_LEVEL,
    InvalidHeadingLevelError,
    MalformedImageError,
    MalformedLinkError,
    UnclosedDelimiterError,
)
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

_HEADING_CHAR = "#"
_BOLD_DELIM = "**"
_ITALIC_DELIM = "*"
_LINK_OPEN = "["
_LINK_CLOSE = "]"
_URL_OPEN = "("
_URL_CLOSE = ")"
_IMAGE_PREFIX = "!["
_ESCAPE_CHAR = "\\"

# Plain text runs end at the next character that can open (or close) a span.
_TEXT_RE = re.compile(r"[^*\[\n]+")
_LINK_TEXT_RE = re.compile(r"[^*\]\n]+")
_URL_RE = re.compile(r"[^)\n]*")


def parse(text: str) -> Document:
    """Parse markdown ``text`` into a :class:`Document`.

    Blocks before the first heading become the document preamble. Once a
    heading is seen, everything that follows belongs to a section.

    Args:
        text: Markdown source.

    Returns:
        The immutable document tree.

    Raises:
        ParseError: On the first malformed construct. No partial document
            is produced.
    """
    cursor = Cursor(text)
    preamble: list[BlockNode] = []
    sections: list[Section] = []

    while not cursor.at_end:
        cursor.skip_blank_lines()
        if cursor.at_end:
            break
        if _is_heading(cursor):
            sections = _parse_sections(cursor)
            break
        preamble.append(_parse_block(cursor))

    return Document(content=preamble, sections=sections)


def _parse_sections(cursor: Cursor) -> list[Section]:
    sections: list[Section] = []
    while True:
        cursor.skip_blank_lines()
        if cursor.at_end:
            return sections
        sections.append(_parse_section(cursor))


def _parse_section(cursor: Cursor) -> Section:
    """Parse a heading and everything it owns.

    A following heading with a greater level is parsed recursively as a
    subsection. Any other heading is left unread for the caller, closing
    this section.
    """
    level, title = _parse_heading_line(cursor)
    content: list[BlockNode] = []
    subsections: list[Section] = []

    while True:
        cursor.skip_blank_lines()
        if cursor.at_end:
            break
        if _is_heading(cursor):
            if _peek_heading_level(cursor) <= level:
                break
            subsections.append(_parse_section(cursor))
        else:
            content.append(_parse_block(cursor))

    return Section(level=level, title=title, content=content, subsections=subsections)


def _parse_block(cursor: Cursor) -> BlockNode:
    if cursor.startswith(_IMAGE_PREFIX):
        return _parse_image(cursor)
    return _parse_paragraph(cursor)


def _parse_paragraph(cursor: Cursor) -> Paragraph:
    children: list[InlineNode] = []

    while True:
        line = _parse_inline_line(cursor)
        if line:
            if children:
                children.append(LineBreak())
            children.extend(line)

        if cursor.peek() != NEWLINE:
            break
        cursor.advance()
        # A blank line or a heading ends the paragraph and is left unread.
        if cursor.at_end or cursor.peek() == NEWLINE or _is_heading(cursor):
            break

    return Paragraph(children=children)


def _parse_image(cursor: Cursor) -> Image:
    """Parse ``![alt](url)``.

    The alt text is the only place where a backslash escapes the next
    character.
    """
    start = cursor.pos
    cursor.advance(len(_IMAGE_PREFIX))

    alt_chars: list[str] = []
    while not cursor.at_end:
        char = cursor.advance()
        if char == _ESCAPE_CHAR:
            alt_chars.append(cursor.advance())
        elif char == _LINK_CLOSE:
            break
        else:
            alt_chars.append(char)

    if cursor.peek() != _URL_OPEN:
        raise MalformedImageError(start)
    cursor.advance()

    # A URL that runs to the end of input is kept as is.
    url = cursor.consume_match(_URL_RE)
    if cursor.peek() == NEWLINE:
        raise MalformedImageError(start)
    cursor.advance()

    if cursor.peek() == NEWLINE:
        cursor.advance()

    return Image(alt_text="".join(alt_chars), url=url.strip())


def _parse_inline_line(cursor: Cursor) -> list[InlineNode]:
    """Parse inline content up to (not including) the next newline."""
    nodes: list[InlineNode] = []
    while not cursor.at_end and cursor.peek() != NEWLINE:
        if cursor.startswith(_BOLD_DELIM):
            nodes.append(_parse_bold(cursor))
        elif cursor.peek() == _ITALIC_DELIM:
            nodes.append(_parse_italic(cursor))
        elif cursor.peek() == _LINK_OPEN:
            nodes.append(_parse_link(cursor))
        else:
            nodes.append(Text(value=cursor.consume_match(_TEXT_RE)))
    return nodes


def _parse_bold(cursor: Cursor) -> Bold:
    start = cursor.pos
    cursor.advance(len(_BOLD_DELIM))
    children: list[InlineNode] = []

    while not cursor.startswith(_BOLD_DELIM):
        if cursor.at_end or cursor.peek() == NEWLINE:
            raise UnclosedDelimiterError(_BOLD_DELIM, start)
        # A lone "*" here cannot be part of "**", so it opens an italic span.
        if cursor.peek() == _ITALIC_DELIM:
            children.append(_parse_italic(cursor))
        elif cursor.peek() == _LINK_OPEN:
            children.append(_parse_link(cursor))
        else:
            children.append(Text(value=cursor.consume_match(_TEXT_RE)))

    cursor.advance(len(_BOLD_DELIM))
    return Bold(children=children)


def _parse_italic(cursor: Cursor) -> Italic:
    start = cursor.pos
    cursor.advance(len(_ITALIC_DELIM))
    children: list[InlineNode] = []

    while True:
        if cursor.at_end or cursor.peek() == NEWLINE:
            raise UnclosedDelimiterError(_ITALIC_DELIM, start)
        if cursor.startswith(_BOLD_DELIM):
            children.append(_parse_bold(cursor))
        elif cursor.peek() == _ITALIC_DELIM:
            cursor.advance()
            return Italic(children=children)
        elif cursor.peek() == _LINK_OPEN:
            children.append(_parse_link(cursor))
        else:
            children.append(Text(value=cursor.consume_match(_TEXT_RE)))


def _parse_link(cursor: Cursor) -> Link:
    """Parse ``[text](url)``; the text may hold bold and italic spans."""
    start = cursor.pos
    cursor.advance(len(_LINK_OPEN))
    text: list[InlineNode] = []

    while cursor.peek() != _LINK_CLOSE:
        if cursor.at_end or cursor.peek() == NEWLINE:
            raise MalformedLinkError(start)
        if cursor.startswith(_BOLD_DELIM):
            text.append(_parse_bold(cursor))
        elif cursor.peek() == _ITALIC_DELIM:
            text.append(_parse_italic(cursor))
        else:
            text.append(Text(value=cursor.consume_match(_LINK_TEXT_RE)))
    cursor.advance(len(_LINK_CLOSE))

    if cursor.peek() != _URL_OPEN:
        raise MalformedLinkError(start)
    cursor.advance()

    url = cursor.consume_match(_URL_RE)
    if cursor.peek() != _URL_CLOSE:
        raise MalformedLinkError(start)
    cursor.advance()

    return Link(text=text, url=url.strip())


def _parse_heading_line(cursor: Cursor) -> tuple[int, list[InlineNode]]:
    level = _peek_heading_level(cursor)
    if level < MIN_HEADING_LEVEL:
        raise InvalidHeadingLevelError(level)
    cursor.advance(level)

    if cursor.peek() == " ":
        cursor.advance()
    title = _parse_inline_line(cursor)
    if cursor.peek() == NEWLINE:
        cursor.advance()

    return level, title


def _is_heading(cursor: Cursor) -> bool:
    return cursor.peek() == _HEADING_CHAR


def _peek_heading_level(cursor: Cursor) -> int:
    """Count leading ``#`` characters without consuming them, capped at 6."""
    level = 0
    while level < MAX_HEADING_LEVEL and cursor.peek(level) == _HEADING_CHAR:
        level += 1
    return level
