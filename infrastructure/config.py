"""Dependency wiring for the TermIndex application."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Literal

from domain.entities import WeightingName
from domain.interfaces import (
    DocumentSource,
    IndexRenderer,
    ReportRepository,
    SettingsRepository,
    TermScorer,
    TextExtractor,
    Tokenizer,
)
from infrastructure.rendering.markdown_index_renderer import MarkdownIndexRenderer
from infrastructure.repositories.file_report_repository import FileReportRepository
from infrastructure.repositories.json_settings_repository import JsonSettingsRepository
from infrastructure.scoring.bm25_scorer import Bm25Scorer
from infrastructure.scoring.tfidf_scorer import TfidfScorer
from infrastructure.sources.filesystem_document_source import FileSystemDocumentSource
from infrastructure.text_extraction.markdown_extractor import MarkdownExtractor
from infrastructure.text_extraction.plain_text_extractor import PlainTextExtractor
from infrastructure.tokenization.word_tokenizer import WordTokenizer


ExtractorName = Literal["markdown", "plain"]


def _default_vault_dir() -> str:
    return os.getenv("TERMINDEX_VAULT_DIR", ".")


def _default_settings_path() -> str:
    return os.getenv("TERMINDEX_SETTINGS_PATH", "termindex.json")


@dataclass(slots=True)
class Container:
    """Simple container bundling concrete infrastructure implementations."""

    extractor: TextExtractor
    tokenizer: Tokenizer
    scorer: TermScorer
    renderer: IndexRenderer
    document_source: DocumentSource
    report_repository: ReportRepository
    settings_repository: SettingsRepository


@dataclass(slots=True)
class ContainerConfig:
    """Configuration for selecting the extractor, weighting and locations."""

    extractor: ExtractorName = "markdown"
    weighting: WeightingName = "tfidf"
    vault_dir: str = field(default_factory=_default_vault_dir)
    settings_path: str = field(default_factory=_default_settings_path)


_EXTRACTOR_FACTORIES: dict[ExtractorName, Callable[[], TextExtractor]] = {
    "markdown": MarkdownExtractor,
    "plain": PlainTextExtractor,
}

_SCORER_FACTORIES: dict[WeightingName, Callable[[], TermScorer]] = {
    "tfidf": TfidfScorer,
    "bm25": Bm25Scorer,
}


def build_scorer(weighting: WeightingName) -> TermScorer:
    try:
        return _SCORER_FACTORIES[weighting]()
    except KeyError as exc:
        raise ValueError(f"Unknown weighting '{weighting}'") from exc


def build_default_container(config: ContainerConfig | None = None) -> Container:
    """Instantiate the default infrastructure stack."""

    cfg = config or ContainerConfig()
    try:
        extractor = _EXTRACTOR_FACTORIES[cfg.extractor]()
    except KeyError as exc:
        raise ValueError(f"Unknown extractor '{cfg.extractor}'") from exc
    vault_dir = Path(cfg.vault_dir).expanduser()

    return Container(
        extractor=extractor,
        tokenizer=WordTokenizer(),
        scorer=build_scorer(cfg.weighting),
        renderer=MarkdownIndexRenderer(),
        document_source=FileSystemDocumentSource(vault_dir),
        report_repository=FileReportRepository(vault_dir),
        settings_repository=JsonSettingsRepository(Path(cfg.settings_path).expanduser()),
    )


__all__ = ["Container", "ContainerConfig", "build_default_container", "build_scorer"]
