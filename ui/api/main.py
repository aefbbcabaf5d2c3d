"""FastAPI layer that exposes index generation and settings."""
from __future__ import annotations

from datetime import datetime
from typing import Literal

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, PositiveInt

from application.use_cases.build_index import DEFAULT_TITLE, build_index
from domain.entities import IndexSettings, RawDocument
from domain.errors import EmptyInputError, NoQualifyingTermsError, SettingsError
from infrastructure.config import build_default_container, build_scorer
from infrastructure.repositories.json_settings_repository import SettingsPayload, validate_settings

app = FastAPI(title="TermIndex API")
container = build_default_container()


class DocumentPayload(BaseModel):
    id: str
    display_name: str | None = None
    content: str


class IndexRequest(BaseModel):
    documents: list[DocumentPayload]
    title: str = DEFAULT_TITLE
    top_n: PositiveInt | None = None
    min_occurrences: PositiveInt | None = None
    weighting: Literal["tfidf", "bm25"] | None = None
    generated_at: datetime | None = None


class DocumentReferencePayload(BaseModel):
    id: str
    display_name: str
    count: int


class TermPayload(BaseModel):
    term: str
    score: float
    total_occurrences: int
    documents: list[DocumentReferencePayload] = Field(default_factory=list)


class IndexResponse(BaseModel):
    report: str
    term_count: int
    document_count: int
    terms: list[TermPayload]


def _request_settings(payload: IndexRequest) -> IndexSettings:
    settings = container.settings_repository.load()
    if payload.top_n is not None:
        settings.top_n = payload.top_n
    if payload.min_occurrences is not None:
        settings.min_occurrences = payload.min_occurrences
    if payload.weighting is not None:
        settings.weighting = payload.weighting
    return settings


@app.post("/index", response_model=IndexResponse)
def index_endpoint(payload: IndexRequest) -> IndexResponse:
    documents = [
        RawDocument(id=doc.id, display_name=doc.display_name or doc.id, raw_text=doc.content)
        for doc in payload.documents
    ]
    try:
        settings = _request_settings(payload)
        report = build_index(
            documents,
            settings,
            extractor=container.extractor,
            tokenizer=container.tokenizer,
            scorer=build_scorer(settings.weighting),
            renderer=container.renderer,
            title=payload.title,
            generated_at=payload.generated_at,
        )
    except EmptyInputError as exc:
        raise HTTPException(status_code=422, detail={"error": "empty_input", "message": str(exc)}) from exc
    except NoQualifyingTermsError as exc:
        raise HTTPException(
            status_code=422,
            detail={
                "error": "no_qualifying_terms",
                "message": str(exc),
                "min_occurrences": exc.min_occurrences,
            },
        ) from exc
    except SettingsError as exc:
        raise HTTPException(status_code=500, detail={"error": "settings", "message": str(exc)}) from exc

    terms = [
        TermPayload(
            term=term.term,
            score=term.score,
            total_occurrences=term.total_occurrences,
            documents=[
                DocumentReferencePayload(id=ref.id, display_name=ref.display_name, count=ref.count)
                for ref in term.document_refs
            ],
        )
        for term in report.terms
    ]
    return IndexResponse(
        report=report.text,
        term_count=report.term_count,
        document_count=report.document_count,
        terms=terms,
    )


@app.get("/settings", response_model=SettingsPayload)
def get_settings_endpoint() -> SettingsPayload:
    try:
        return SettingsPayload.from_settings(container.settings_repository.load())
    except SettingsError as exc:
        raise HTTPException(status_code=500, detail={"error": "settings", "message": str(exc)}) from exc


@app.put("/settings", response_model=SettingsPayload)
def put_settings_endpoint(payload: SettingsPayload) -> SettingsPayload:
    settings = validate_settings(payload.to_settings())
    container.settings_repository.save(settings)
    return SettingsPayload.from_settings(settings)
