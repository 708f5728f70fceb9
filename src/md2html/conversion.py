"""Conversion pipeline for markdown -> HTML fragments."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from md2html.config import (
    MD2HTML_DEFAULT_TITLE,
    MD2HTML_ENCODING,
    MD2HTML_MAX_INPUT_CHARS,
)
from md2html.exceptions import ConversionError
from md2html.html_writer import render
from md2html.parser import parse
from md2html.schemas import ConversionResult
from md2html.sections import count_sections, extract_page_title

logger = logging.getLogger(__name__)


@dataclass
class ConversionOptions:
    """Options for markdown conversion.

    Attributes:
        max_input_chars: Reject input longer than this many characters.
            Zero or a negative value disables the limit.
        default_title: Title used when the document does not open with a
            level-1 heading.
        encoding: Encoding used to decode files read by ``convert_file``.
    """

    max_input_chars: int = MD2HTML_MAX_INPUT_CHARS
    default_title: str = MD2HTML_DEFAULT_TITLE
    encoding: str = MD2HTML_ENCODING


def convert_markdown(
    text: str, *, options: ConversionOptions | None = None
) -> ConversionResult:
    """Parse and render markdown text, extracting the page title.

    Args:
        text: Markdown source.
        options: Conversion options. Uses defaults if None.

    Returns:
        The rendered fragment, the page title and the parsed document.

    Raises:
        ConversionError: If the input exceeds ``max_input_chars`` or nests
            deeper than the interpreter recursion limit allows.
        ParseError: If the markdown is malformed.
        HtmlError: If the document cannot be rendered.
    """
    opts = options or ConversionOptions()

    if 0 < opts.max_input_chars < len(text):
        logger.warning(
            "Rejecting markdown input of %d characters (limit %d)",
            len(text),
            opts.max_input_chars,
        )
        raise ConversionError(
            f"Input of {len(text)} characters exceeds the limit of "
            f"{opts.max_input_chars}"
        )

    try:
        document = parse(text)
        html = render(document)
        title = extract_page_title(document)
    except RecursionError as exc:
        logger.warning(
            "Rejecting markdown input of %d characters: nesting too deep", len(text)
        )
        raise ConversionError("Input nesting is too deep to convert") from exc

    logger.debug(
        "Converted %d characters into %d characters of HTML (%d sections, title=%r)",
        len(text),
        len(html),
        count_sections(document.sections),
        title,
    )

    return ConversionResult(
        html=html,
        title=title if title is not None else opts.default_title,
        document=document,
    )


def convert_file(
    path: Path, *, options: ConversionOptions | None = None
) -> ConversionResult:
    """Read a markdown file and convert it.

    Raises:
        ConversionError: If the file is not valid in the configured encoding
            or exceeds the input limit.
        OSError: If the file cannot be read.
    """
    opts = options or ConversionOptions()
    raw = path.read_bytes()
    try:
        text = raw.decode(opts.encoding)
    except UnicodeDecodeError as exc:
        logger.warning("Could not decode %s as %s", path, opts.encoding)
        raise ConversionError(f"{path} is not valid {opts.encoding}: {exc}") from exc
    return convert_markdown(text, options=opts)
