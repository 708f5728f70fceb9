"""Position-tracking reader shared by the recursive-descent parser."""

from __future__ import annotations

import re
from dataclasses import dataclass

NEWLINE = "\n"


@dataclass
class Cursor:
    """A source string and the index of the next unread character.

    ``peek`` and ``startswith`` never move the cursor; ``advance`` and the
    ``consume_*`` helpers do.
    """

    source: str
    pos: int = 0

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self, offset: int = 0) -> str | None:
        index = self.pos + offset
        if index < len(self.source):
            return self.source[index]
        return None

    def startswith(self, token: str) -> bool:
        return self.source.startswith(token, self.pos)

    def advance(self, count: int = 1) -> str:
        """Consume ``count`` characters and return them."""
        consumed = self.source[self.pos : self.pos + count]
        self.pos += len(consumed)
        return consumed

    def consume_match(self, pattern: re.Pattern[str]) -> str:
        """Consume the run matched by ``pattern`` at the cursor, if any."""
        match = pattern.match(self.source, self.pos)
        if not match:
            return ""
        self.pos = match.end()
        return match.group()

    def skip_blank_lines(self) -> None:
        while self.peek() == NEWLINE:
            self.pos += 1
