"""Document tree models produced by the parser and consumed by the renderer."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from md2html.exceptions import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True)


class Text(_Node):
    """Plain text run."""

    kind: Literal["text"] = "text"
    value: str


class LineBreak(_Node):
    """Single newline inside a paragraph."""

    kind: Literal["line_break"] = "line_break"


class Bold(_Node):
    kind: Literal["bold"] = "bold"
    children: tuple[InlineNode, ...] = ()


class Italic(_Node):
    kind: Literal["italic"] = "italic"
    children: tuple[InlineNode, ...] = ()


class Link(_Node):
    """Inline link ``[text](url)``.

    A link cannot open directly inside link text, but a bold or italic span
    within the text can still contain one.
    """

    kind: Literal["link"] = "link"
    text: tuple[InlineNode, ...] = ()
    url: str


InlineNode = Annotated[
    Union[Text, LineBreak, Bold, Italic, Link],
    Field(discriminator="kind"),
]


class Paragraph(_Node):
    kind: Literal["paragraph"] = "paragraph"
    children: tuple[InlineNode, ...] = ()


class Image(_Node):
    """Block image ``![alt](url)``."""

    kind: Literal["image"] = "image"
    alt_text: str
    url: str


BlockNode = Annotated[Union[Paragraph, Image], Field(discriminator="kind")]


class Section(_Node):
    """A heading together with the blocks and deeper headings it owns.

    Attributes:
        level: Heading level, 1 through 6.
        title: Inline content of the heading line.
        content: Blocks between the heading and its first subsection.
        subsections: Child sections, each with a strictly greater level.
    """

    level: int = Field(..., ge=MIN_HEADING_LEVEL, le=MAX_HEADING_LEVEL)
    title: tuple[InlineNode, ...] = ()
    content: tuple[BlockNode, ...] = ()
    subsections: tuple[Section, ...] = ()


class Document(_Node):
    """Root of a parsed document.

    Attributes:
        content: Preamble blocks that appear before the first heading.
        sections: Top-level sections in source order.
    """

    content: tuple[BlockNode, ...] = ()
    sections: tuple[Section, ...] = ()


for _model in (Bold, Italic, Link, Paragraph, Section, Document):
    _model.model_rebuild()
