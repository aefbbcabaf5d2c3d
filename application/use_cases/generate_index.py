"""Use case that indexes a vault (or one folder of it) and saves the report."""
from __future__ import annotations

import logging
from datetime import datetime

from application.use_cases.build_index import DEFAULT_TITLE, build_index
from domain.entities import GenerationResult, IndexSettings
from domain.errors import EmptyInputError
from domain.interfaces import (
    DocumentSource,
    IndexRenderer,
    ReportRepository,
    TermScorer,
    TextExtractor,
    Tokenizer,
)

logger = logging.getLogger(__name__)

VAULT_INDEX_NAME = "vault-index.md"
FOLDER_INDEX_NAME = "folder-index.md"


def index_title(folder_path: str | None) -> str:
    return f"Index: {folder_path}" if folder_path else DEFAULT_TITLE


def index_output_id(folder_path: str | None) -> str:
    return f"{folder_path}/{FOLDER_INDEX_NAME}" if folder_path else VAULT_INDEX_NAME


def generate_index(
    folder_path: str | None,
    settings: IndexSettings,
    *,
    document_source: DocumentSource,
    report_repository: ReportRepository,
    extractor: TextExtractor,
    tokenizer: Tokenizer,
    scorer: TermScorer,
    renderer: IndexRenderer,
    generated_at: datetime | None = None,
) -> GenerationResult:
    """Collect documents in scope, build the index and write it out."""

    folder = folder_path.strip("/") if folder_path else None
    documents = document_source.collect(folder, settings.excluded_folders)
    if not documents:
        raise EmptyInputError("No markdown files found in scope")
    logger.info("Indexing %d documents (scope: %s)", len(documents), folder or "vault")

    report = build_index(
        documents,
        settings,
        extractor=extractor,
        tokenizer=tokenizer,
        scorer=scorer,
        renderer=renderer,
        title=index_title(folder),
        generated_at=generated_at,
    )

    output_id = index_output_id(folder)
    report_repository.save(output_id, report.text)
    logger.info("Wrote %d terms to %s", report.term_count, output_id)

    return GenerationResult(
        term_count=report.term_count,
        document_count=report.document_count,
        output_path=output_id,
    )


__all__ = [
    "FOLDER_INDEX_NAME",
    "VAULT_INDEX_NAME",
    "generate_index",
    "index_output_id",
    "index_title",
]
