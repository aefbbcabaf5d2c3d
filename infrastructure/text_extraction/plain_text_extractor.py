"""Extractor for corpora that are already plain prose."""
from __future__ import annotations

from domain.interfaces import TextExtractor
from infrastructure.text_extraction.markdown_extractor import strip_front_matter


class PlainTextExtractor(TextExtractor):
    """Keeps the text as-is apart from a leading front matter block."""

    def extract(self, raw_text: str) -> str:
        return strip_front_matter(raw_text)


__all__ = ["PlainTextExtractor"]
