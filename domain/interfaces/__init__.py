"""Abstract interfaces for the TermIndex system."""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Sequence

from domain.entities import IndexSettings, RawDocument, ScoredTerm, TokenizedDocument


class TextExtractor(ABC):
    """Strips structural noise from raw document text."""

    @abstractmethod
    def extract(self, raw_text: str) -> str:
        """Return the natural-language text of a document."""


class Tokenizer(ABC):
    """Splits clean text into index terms."""

    @abstractmethod
    def tokenize(self, clean_text: str) -> tuple[list[str], list[str]]:
        """Return ``(unigrams, bigrams)`` for the provided text."""


class TermScorer(ABC):
    """Aggregates term counts across a corpus and ranks the survivors."""

    @abstractmethod
    def score(
        self,
        documents: Sequence[TokenizedDocument],
        *,
        min_occurrences: int,
        top_n: int,
    ) -> list[ScoredTerm]:
        """Return at most ``top_n`` terms sorted by score descending."""


class IndexRenderer(ABC):
    """Formats ranked terms into a report."""

    @abstractmethod
    def render(self, terms: Sequence[ScoredTerm], title: str, generated_at: datetime) -> str:
        """Return the report text."""


class DocumentSource(ABC):
    """Enumerates and reads the documents in scope for a run."""

    @abstractmethod
    def collect(
        self,
        folder_path: str | None = None,
        excluded_folders: Sequence[str] = (),
    ) -> list[RawDocument]:
        """Return the documents under ``folder_path`` (or everything)."""


class ReportRepository(ABC):
    """Persists rendered reports."""

    @abstractmethod
    def save(self, output_id: str, text: str) -> Path:
        """Create or overwrite the report stored under ``output_id``."""


class SettingsRepository(ABC):
    """Loads and stores index settings."""

    @abstractmethod
    def load(self) -> IndexSettings:
        """Return stored settings, falling back to defaults."""

    @abstractmethod
    def save(self, settings: IndexSettings) -> None:
        """Persist settings."""


__all__ = [
    "TextExtractor",
    "Tokenizer",
    "TermScorer",
    "IndexRenderer",
    "DocumentSource",
    "ReportRepository",
    "SettingsRepository",
]
