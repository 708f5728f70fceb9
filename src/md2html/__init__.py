"""md2html: convert a small markdown dialect into minified HTML."""

from md2html.conversion import ConversionOptions, convert_file, convert_markdown
from md2html.exceptions import (
    ConversionError,
    HtmlError,
    InvalidHeadingLevelError,
    InvalidHtmlHeadingLevelError,
    MalformedImageError,
    MalformedLinkError,
    Md2htmlError,
    ParseError,
    UnclosedDelimiterError,
    UnexpectedEndOfInputError,
)
from md2html.html_writer import render
from md2html.parser import parse
from md2html.schemas import ConversionResult, Document, Section
from md2html.sections import extract_page_title

__all__ = [
    "ConversionError",
    "ConversionOptions",
    "ConversionResult",
    "Document",
    "HtmlError",
    "InvalidHeadingLevelError",
    "InvalidHtmlHeadingLevelError",
    "MalformedImageError",
    "MalformedLinkError",
    "Md2htmlError",
    "ParseError",
    "Section",
    "UnclosedDelimiterError",
    "UnexpectedEndOfInputError",
    "convert_file",
    "convert_markdown",
    "extract_page_title",
    "parse",
    "render",
]
