"""BM25+ term scorer backed by ``rank_bm25``."""
from __future__ import annotations

from typing import Sequence

from rank_bm25 import BM25Plus

from application.services.term_statistics import collect_statistics, document_terms, rank_terms
from domain.entities import ScoredTerm, TermOccurrence, TokenizedDocument
from domain.interfaces import TermScorer


class Bm25Scorer(TermScorer):
    """Sums per-document BM25+ weights instead of raw TF-IDF.

    The BM25+ idf, ``ln((N + 1) / df)``, is positive for every ``df <= N``.
    """

    def __init__(self, k1: float = 1.5, b: float = 0.75, delta: float = 1.0) -> None:
        self._k1 = k1
        self._b = b
        self._delta = delta

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
        index = BM25Plus(
            [document_terms(document) for document in documents],
            k1=self._k1,
            b=self._b,
            delta=self._delta,
        )
        positions: dict[str, list[int]] = {}
        for position, document_id in enumerate(stats.document_ids):
            positions.setdefault(document_id, []).append(position)

        def weigh(term: str, occurrence: TermOccurrence) -> float:
            doc_ids = [
                position
                for document_id in occurrence.documents
                for position in positions[document_id]
            ]
            return float(sum(index.get_batch_scores([term], doc_ids)))

        return rank_terms(stats, weigh, min_occurrences=min_occurrences, top_n=top_n)


__all__ = ["Bm25Scorer"]
