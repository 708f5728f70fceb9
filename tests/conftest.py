"""Test setup for md2html."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from md2html.html_writer import render  # noqa: E402
from md2html.parser import parse  # noqa: E402


@pytest.fixture
def to_html() -> Callable[[str], str]:
    """Parse markdown and render it in one step."""

    def _to_html(text: str) -> str:
        return render(parse(text))

    return _to_html
