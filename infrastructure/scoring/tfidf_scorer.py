"""TF-IDF term scorer.

For a corpus of ``N`` documents and a term found in ``df`` of them::

    idf = 1 + ln(N / (1 + df))
    score = sum(count_in_document * idf for each document containing the term)

Term frequency is the raw in-document count. The ``1 + df`` smoothing keeps
the weight defined when a term is in every document, and the leading ``1``
keeps it positive for every ``df <= N``.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from application.services.term_statistics import collect_statistics, rank_terms
from domain.entities import ScoredTerm, TermOccurrence, TokenizedDocument
from domain.interfaces import TermScorer


def inverse_document_frequency(document_count: int, document_frequency: int) -> float:
    return float(1.0 + np.log(document_count / (1.0 + document_frequency)))


class TfidfScorer(TermScorer):
    """Ranks terms by TF-IDF summed over the documents that contain them."""

    def score(
        self,
        documents: Sequence[TokenizedDocument],
        *,
        min_occurrences: int,
        top_n: int,
    ) -> list[ScoredTerm]:
        if not documents:
            return []
        stats = collect_statistics(documents)

        def weigh(term: str, occurrence: TermOccurrence) -> float:
            counts = np.fromiter(
                (ref.count for ref in occurrence.documents.values()),
                dtype=np.float64,
                count=occurrence.document_frequency,
            )
            idf = inverse_document_frequency(stats.document_count, occurrence.document_frequency)
            return float(np.sum(counts * idf))

        return rank_terms(stats, weigh, min_occurrences=min_occurrences, top_n=top_n)


__all__ = ["TfidfScorer", "inverse_document_frequency"]
