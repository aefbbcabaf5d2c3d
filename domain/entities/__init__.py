"""Domain entities for the TermIndex system."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

WeightingName = Literal["tfidf", "bm25"]


@dataclass(slots=True, frozen=True)
class RawDocument:
    """A source document handed to the pipeline by a document source."""

    id: str
    display_name: str
    raw_text: str


@dataclass(slots=True, frozen=True)
class ExtractedDocument:
    """A document with markup noise stripped, ready for tokenization."""

    id: str
    display_name: str
    clean_text: str


@dataclass(slots=True, frozen=True)
class TokenizedDocument:
    """Filtered unigrams and the bigrams built from them."""

    id: str
    display_name: str
    unigrams: tuple[str, ...] = ()
    bigrams: tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class DocumentReference:
    """How often a term occurs in one document."""

    id: str
    display_name: str
    count: int


@dataclass(slots=True)
class TermOccurrence:
    """Per-document counts for a single term, in document insertion order."""

    documents: dict[str, DocumentReference] = field(default_factory=dict)
    total_count: int = 0

    @property
    def document_frequency(self) -> int:
        return len(self.documents)


@dataclass(slots=True, frozen=True)
class ScoredTerm:
    """A ranked term together with the documents that mention it."""

    term: str
    score: float
    total_occurrences: int
    document_refs: tuple[DocumentReference, ...] = ()


@dataclass(slots=True)
class IndexSettings:
    """User-tunable options for a single index run."""

    top_n: int = 250
    min_occurrences: int = 10
    excluded_folders: list[str] = field(default_factory=list)
    weighting: WeightingName = "tfidf"


@dataclass(slots=True, frozen=True)
class IndexReport:
    """Rendered index plus the metadata callers surface to the user."""

    text: str
    term_count: int
    document_count: int
    terms: tuple[ScoredTerm, ...] = ()


@dataclass(slots=True, frozen=True)
class GenerationResult:
    """Outcome of generating and persisting an index."""

    term_count: int
    document_count: int
    output_path: str


__all__ = [
    "WeightingName",
    "RawDocument",
    "ExtractedDocument",
    "TokenizedDocument",
    "DocumentReference",
    "TermOccurrence",
    "ScoredTerm",
    "IndexSettings",
    "IndexReport",
    "GenerationResult",
]
