"""Markdown extractor that reduces notes to their natural-language text.

Every rewrite is a ``(pattern, replacement)`` pass. Passes run in order and
later ones assume the noise handled by earlier ones is already gone, so code
is removed before links and links are resolved before emphasis markers.
"""
from __future__ import annotations

import re

from domain.interfaces import TextExtractor

_Pass = tuple[re.Pattern[str], str]

_FRONT_MATTER = re.compile(r"\A---[ \t]*\r?\n(?:.*?\n)??---[ \t]*(?=\r?\n|\Z)", re.DOTALL)

_CODE_PASSES: tuple[_Pass, ...] = (
    (re.compile(r"```.*?```", re.DOTALL), " "),
    (re.compile(r"~~~.*?~~~", re.DOTALL), " "),
    (re.compile(r"^(?:    |\t).*$", re.MULTILINE), " "),
)

_INLINE_CODE_PASSES: tuple[_Pass, ...] = (
    (re.compile(r"`[^`\n]+`"), " "),
)

_LINK_PASSES: tuple[_Pass, ...] = (
    # ![[embed]]
    (re.compile(r"!\[\[[^\]]+\]\]"), " "),
    # [[target|display]]
    (re.compile(r"\[\[([^\]|]+)\|([^\]]+)\]\]"), r"\2"),
    # [[target]]
    (re.compile(r"\[\[([^\]]+)\]\]"), r"\1"),
    # ![alt](url)
    (re.compile(r"!\[([^\]]*)\]\([^)]+\)"), r"\1"),
    # [display](url)
    (re.compile(r"\[([^\]]+)\]\([^)]+\)"), r"\1"),
)

_MARKUP_PASSES: tuple[_Pass, ...] = (
    (re.compile(r"^#{1,6}\s+", re.MULTILINE), ""),
    (re.compile(r"\*\*([^*]+)\*\*"), r"\1"),
    (re.compile(r"__([^_]+)__"), r"\1"),
    (re.compile(r"\*([^*]+)\*"), r"\1"),
    # Intraword underscores (snake_case) are not emphasis.
    (re.compile(r"(?<!\w)_([^_]+)_(?!\w)"), r"\1"),
    (re.compile(r"~~([^~]+)~~"), r"\1"),
    (re.compile(r"==([^=]+)=="), r"\1"),
    (re.compile(r"^(?:>[ \t]*)+", re.MULTILINE), ""),
    (re.compile(r"^[ \t]*[-*+][ \t]+", re.MULTILINE), ""),
    (re.compile(r"^[ \t]*\d+\.[ \t]+", re.MULTILINE), ""),
    (re.compile(r"^[-*_]{3,}[ \t]*$", re.MULTILINE), " "),
    (re.compile(r"#[a-zA-Z0-9_/-]+"), " "),
    (re.compile(r"<!--.*?-->", re.DOTALL), " "),
    (re.compile(r"<[^>]+>"), " "),
)


def _apply(text: str, passes: tuple[_Pass, ...]) -> str:
    for pattern, replacement in passes:
        text = pattern.sub(replacement, text)
    return text


def strip_front_matter(text: str) -> str:
    """Drop a leading ``---`` block; an unterminated block is left untouched."""

    return _FRONT_MATTER.sub(" ", text, count=1)


class MarkdownExtractor(TextExtractor):
    """Strips front matter, code, link syntax and inline markup."""

    def extract(self, raw_text: str) -> str:
        text = strip_front_matter(raw_text)
        text = _apply(text, _CODE_PASSES)
        text = _apply(text, _INLINE_CODE_PASSES)
        text = _apply(text, _LINK_PASSES)
        return _apply(text, _MARKUP_PASSES)


__all__ = ["MarkdownExtractor", "strip_front_matter"]
