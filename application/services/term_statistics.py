"""Corpus-wide term counting, threshold filtering and ranking.

Every mapping here is a plain ``dict`` filled in document order, so ties in
the final sort fall back to first-seen order and runs are reproducible.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Sequence

from domain.entities import DocumentReference, ScoredTerm, TermOccurrence, TokenizedDocument

MIN_DOCUMENT_FREQUENCY = 2
MIN_BIGRAM_OCCURRENCES = 2


@dataclass(slots=True)
class CorpusStatistics:
    """Term occurrences for one run, keyed by term in first-seen order."""

    document_ids: list[str] = field(default_factory=list)
    document_lengths: list[int] = field(default_factory=list)
    terms: dict[str, TermOccurrence] = field(default_factory=dict)

    @property
    def document_count(self) -> int:
        return len(self.document_ids)


TermWeight = Callable[[str, TermOccurrence], float]


def document_terms(document: TokenizedDocument) -> list[str]:
    """Unigrams and bigrams share one term namespace."""

    return [*document.unigrams, *document.bigrams]


def collect_statistics(documents: Sequence[TokenizedDocument]) -> CorpusStatistics:
    stats = CorpusStatistics()
    for document in documents:
        terms = document_terms(document)
        stats.document_ids.append(document.id)
        stats.document_lengths.append(len(terms))
        for term, count in Counter(terms).items():
            occurrence = stats.terms.setdefault(term, TermOccurrence())
            occurrence.total_count += count
            previous = occurrence.documents.get(document.id)
            occurrence.documents[document.id] = DocumentReference(
                id=document.id,
                display_name=document.display_name,
                count=count + (previous.count if previous else 0),
            )
    return stats


def qualifies(term: str, occurrence: TermOccurrence, *, min_occurrences: int) -> bool:
    """Apply the cross-document floor, the occurrence threshold and the bigram floor."""

    if occurrence.document_frequency < MIN_DOCUMENT_FREQUENCY:
        return False
    if occurrence.total_count < min_occurrences:
        return False
    if " " in term and occurrence.total_count < MIN_BIGRAM_OCCURRENCES:
        return False
    return True


def rank_terms(
    stats: CorpusStatistics,
    weigh: TermWeight,
    *,
    min_occurrences: int,
    top_n: int,
) -> list[ScoredTerm]:
    """Score the qualifying terms and keep the ``top_n`` best."""

    if min_occurrences <= 0:
        raise ValueError("min_occurrences must be > 0")
    if top_n <= 0:
        raise ValueError("top_n must be > 0")

    scored: list[ScoredTerm] = []
    for term, occurrence in stats.terms.items():
        if not qualifies(term, occurrence, min_occurrences=min_occurrences):
            continue
        references = sorted(occurrence.documents.values(), key=lambda ref: ref.count, reverse=True)
        scored.append(
            ScoredTerm(
                term=term,
                score=float(weigh(term, occurrence)),
                total_occurrences=occurrence.total_count,
                document_refs=tuple(references),
            )
        )

    scored.sort(key=lambda item: item.score, reverse=True)
    return scored[:top_n]


__all__ = [
    "MIN_DOCUMENT_FREQUENCY",
    "MIN_BIGRAM_OCCURRENCES",
    "CorpusStatistics",
    "TermWeight",
    "collect_statistics",
    "document_terms",
    "qualifies",
    "rank_terms",
]
