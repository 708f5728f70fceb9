"""Shared schemas for md2html."""

from md2html.schemas.conversion import ConversionResult
from md2html.schemas.nodes import (
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

__all__ = [
    "BlockNode",
    "Bold",
    "ConversionResult",
    "Document",
    "Image",
    "InlineNode",
    "Italic",
    "LineBreak",
    "Link",
    "Paragraph",
    "Section",
    "Text",
]
