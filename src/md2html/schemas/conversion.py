"""Conversion output model."""

from __future__ import annotations

from pydantic import BaseModel

from md2html.schemas.nodes import Document


class ConversionResult(BaseModel):
    """Final conversion output."""

    html: str
    title: str
    document: Document
