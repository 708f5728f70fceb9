"""Section utilities and plain-text flattening."""

from __future__ import annotations

from typing import Iterable, Iterator

from md2html.schemas import (
    Bold,
    Document,
    InlineNode,
    Italic,
    LineBreak,
    Link,
    Section,
    Text,
)


def inline_to_text(nodes: Iterable[InlineNode]) -> str:
    """Flatten inline nodes to plain text, dropping all formatting."""
    parts: list[str] = []
    for node in nodes:
        if isinstance(node, Text):
            parts.append(node.value)
        elif isinstance(node, LineBreak):
            parts.append(" ")
        elif isinstance(node, (Bold, Italic)):
            parts.append(inline_to_text(node.children))
        elif isinstance(node, Link):
            parts.append(inline_to_text(node.text))
    return "".join(parts)


def extract_page_title(document: Document) -> str | None:
    """Return the plain-text title of a leading level-1 section, if any."""
    if document.sections and document.sections[0].level == 1:
        return inline_to_text(document.sections[0].title)
    return None


def iter_sections(sections: Iterable[Section]) -> Iterator[Section]:
    """Yield sections depth-first in document order."""
    for section in sections:
        yield section
        yield from iter_sections(section.subsections)


def count_sections(sections: Iterable[Section]) -> int:
    """Count total sections in the tree."""
    return sum(1 for _ in iter_sections(sections))
