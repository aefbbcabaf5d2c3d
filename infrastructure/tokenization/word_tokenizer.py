"""Surface-level tokenizer producing unigram and bigram index terms."""
from __future__ import annotations

import re
from typing import AbstractSet

from domain.interfaces import Tokenizer
from infrastructure.tokenization.stopwords import STOPWORDS

_WORD = re.compile(r"[a-z][a-z0-9]*")


class WordTokenizer(Tokenizer):
    """Lowercases, filters short words and stopwords, then pairs neighbours.

    Bigrams are built from the *filtered* sequence, so a dropped word between
    two kept words does not prevent them from pairing, and no bigram ever
    contains a stopword.
    """

    def __init__(self, stopwords: AbstractSet[str] = STOPWORDS, min_length: int = 3) -> None:
        self._stopwords = stopwords
        self._min_length = min_length

    def tokenize(self, clean_text: str) -> tuple[list[str], list[str]]:
        candidates = _WORD.findall(clean_text.lower())
        words = [word for word in candidates if self._keep(word)]
        bigrams = [f"{left} {right}" for left, right in zip(words, words[1:])]
        return words, bigrams

    def _keep(self, word: str) -> bool:
        if len(word) < self._min_length:
            return False
        if word in self._stopwords:
            return False
        return not word.isdigit()


__all__ = ["WordTokenizer"]
