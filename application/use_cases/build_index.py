"""Use case that turns a set of raw documents into a rendered term index."""
from __future__ import annotations

from datetime import datetime
from typing import Sequence

from domain.entities import (
    ExtractedDocument,
    IndexReport,
    IndexSettings,
    RawDocument,
    TokenizedDocument,
)
from domain.errors import EmptyInputError, NoQualifyingTermsError
from domain.interfaces import IndexRenderer, TermScorer, TextExtractor, Tokenizer

DEFAULT_TITLE = "Vault Index"


def extract_document(document: RawDocument, extractor: TextExtractor) -> ExtractedDocument:
    return ExtractedDocument(
        id=document.id,
        display_name=document.display_name,
        clean_text=extractor.extract(document.raw_text),
    )


def tokenize_document(document: ExtractedDocument, tokenizer: Tokenizer) -> TokenizedDocument:
    unigrams, bigrams = tokenizer.tokenize(document.clean_text)
    return TokenizedDocument(
        id=document.id,
        display_name=document.display_name,
        unigrams=tuple(unigrams),
        bigrams=tuple(bigrams),
    )


def build_index(
    documents: Sequence[RawDocument],
    settings: IndexSettings,
    *,
    extractor: TextExtractor,
    tokenizer: Tokenizer,
    scorer: TermScorer,
    renderer: IndexRenderer,
    title: str = DEFAULT_TITLE,
    generated_at: datetime | None = None,
) -> IndexReport:
    """Run extraction, tokenization, scoring and rendering over ``documents``.

    Raises ``EmptyInputError`` before any stage runs when ``documents`` is
    empty, and ``NoQualifyingTermsError`` when the thresholds leave nothing
    to index. No partial report is produced in either case.
    """

    if not documents:
        raise EmptyInputError()

    tokenized = [
        tokenize_document(extract_document(document, extractor), tokenizer)
        for document in documents
    ]
    terms = scorer.score(
        tokenized,
        min_occurrences=settings.min_occurrences,
        top_n=settings.top_n,
    )
    if not terms:
        raise NoQualifyingTermsError(settings.min_occurrences)

    text = renderer.render(terms, title, generated_at or datetime.now())
    return IndexReport(
        text=text,
        term_count=len(terms),
        document_count=len(documents),
        terms=tuple(terms),
    )


__all__ = ["DEFAULT_TITLE", "build_index", "extract_document", "tokenize_document"]
