"""Custom exceptions for md2html."""

from __future__ import annotations

MIN_HEADING_LEVEL = 1
MAX_HEADING_LEVEL = 6


class Md2htmlError(Exception):
    """Base exception for md2html operations."""


class ParseError(Md2htmlError):
    """Error during markdown parsing."""


class UnexpectedEndOfInputError(ParseError):
    """Input ended in the middle of a construct."""

    def __init__(self, context: str) -> None:
        self.context = context
        super().__init__(f"Unexpected end of input while parsing {context}")


class UnclosedDelimiterError(ParseError):
    """A ``**`` or ``*`` delimiter was never closed on its line."""

    def __init__(self, delimiter: str, position: int) -> None:
        self.delimiter = delimiter
        self.position = position
        super().__init__(f"Unclosed delimiter '{delimiter}' at position {position}")


class InvalidHeadingLevelError(ParseError):
    """Heading marker count outside the supported range."""

    def __init__(self, level: int) -> None:
        self.level = level
        super().__init__(
            f"Invalid heading level: {level}. "
            f"Must be between {MIN_HEADING_LEVEL} and {MAX_HEADING_LEVEL}"
        )


class MalformedLinkError(ParseError):
    """Link syntax that does not match ``[text](url)``."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Malformed link syntax at position {position}")


class MalformedImageError(ParseError):
    """Image syntax that does not match ``![alt](url)``."""

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(f"Malformed image syntax at position {position}")


class HtmlError(Md2htmlError):
    """Error during HTML rendering."""


class InvalidHtmlHeadingLevelError(HtmlError):
    """Section level that has no matching ``<hN>`` tag."""

    def __init__(self, level: int) -> None:
        self.level = level
        super().__init__(
            f"Invalid heading level: {level}. Heading level must be between "
            f"{MIN_HEADING_LEVEL} and {MAX_HEADING_LEVEL} (inclusive)"
        )


class ConversionError(Md2htmlError):
    """Input rejected before it reaches the parser."""
