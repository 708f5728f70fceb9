"""Tests for the conversion pipeline."""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from md2html.config import MD2HTML_DEFAULT_TITLE
from md2html.conversion import ConversionOptions, convert_file, convert_markdown
from md2html.exceptions import (
    ConversionError,
    Md2htmlError,
    UnclosedDelimiterError,
)
from md2html.schemas import ConversionResult, Document


class TestConvertMarkdown:
    """Tests for convert_markdown function."""

    def test_renders_and_extracts_title(self) -> None:
        result = convert_markdown("# Hello *World*\nBody text")

        assert isinstance(result, ConversionResult)
        assert result.html == "<h1>Hello <em>World</em></h1><p>Body text</p>"
        assert result.title == "Hello World"
        assert isinstance(result.document, Document)

    def test_default_title_without_h1(self) -> None:
        result = convert_markdown("## Only a subtitle")

        assert result.title == MD2HTML_DEFAULT_TITLE

    def test_custom_default_title(self) -> None:
        result = convert_markdown(
            "plain", options=ConversionOptions(default_title="Untitled")
        )

        assert result.title == "Untitled"
        assert result.html == "<p>plain</p>"

    def test_rejects_oversized_input(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="md2html.conversion")

        with pytest.raises(ConversionError, match="exceeds the limit of 5"):
            convert_markdown("123456", options=ConversionOptions(max_input_chars=5))

        assert "Rejecting markdown input" in caplog.text

    def test_input_at_limit_is_accepted(self) -> None:
        result = convert_markdown("12345", options=ConversionOptions(max_input_chars=5))

        assert result.html == "<p>12345</p>"

    def test_zero_limit_disables_check(self) -> None:
        text = "word " * 100

        result = convert_markdown(text, options=ConversionOptions(max_input_chars=0))

        assert result.html.startswith("<p>word")

    def test_parse_errors_propagate(self) -> None:
        with pytest.raises(UnclosedDelimiterError):
            convert_markdown("**oops")

    def test_deep_nesting_is_rejected(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING, logger="md2html.conversion")
        text = "*a**b" * 600

        with pytest.raises(ConversionError, match="nesting is too deep") as exc_info:
            convert_markdown(text, options=ConversionOptions(max_input_chars=0))

        assert isinstance(exc_info.value, Md2htmlError)
        assert isinstance(exc_info.value.__cause__, RecursionError)
        assert "nesting too deep" in caplog.text

    def test_logs_conversion(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="md2html.conversion")

        convert_markdown("# T")

        assert "Converted 3 characters" in caplog.text

    def test_concurrent_conversions_are_independent(self) -> None:
        texts = [f"# Page {i}\n\nBody **{i}**" for i in range(20)]

        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(convert_markdown, texts))

        for i, result in enumerate(results):
            assert result.title == f"Page {i}"
            assert result.html == (
                f"<h1>Page {i}</h1><p>Body <strong>{i}</strong></p>"
            )


class TestConvertFile:
    """Tests for convert_file function."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "page.md"
        path.write_bytes("# Café\n\nCrème brûlée".encode("utf-8"))

        result = convert_file(path)

        assert result.title == "Café"
        assert result.html == "<h1>Café</h1><p>Crème brûlée</p>"

    def test_invalid_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.md"
        path.write_bytes(b"\xff\xfe# Title")

        with pytest.raises(ConversionError, match="not valid utf-8"):
            convert_file(path, options=ConversionOptions(encoding="utf-8"))

    def test_custom_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.md"
        path.write_bytes("# Señor".encode("latin-1"))

        result = convert_file(path, options=ConversionOptions(encoding="latin-1"))

        assert result.title == "Señor"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            convert_file(tmp_path / "missing.md")
