"""JSON file persistence for index settings."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator

from domain.entities import IndexSettings
from domain.errors import SettingsError
from domain.interfaces import SettingsRepository

logger = logging.getLogger(__name__)

_DEFAULTS = IndexSettings()


class SettingsPayload(BaseModel):
    """On-disk settings; accepts both ``topN`` and ``top_n`` style keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    top_n: PositiveInt = Field(default=_DEFAULTS.top_n, alias="topN")
    min_occurrences: PositiveInt = Field(default=_DEFAULTS.min_occurrences, alias="minOccurrences")
    excluded_folders: list[str] = Field(default_factory=list, alias="excludedFolders")
    weighting: Literal["tfidf", "bm25"] = _DEFAULTS.weighting

    @field_validator("excluded_folders", mode="before")
    @classmethod
    def _split_folders(cls, value: object) -> object:
        if isinstance(value, str):
            value = value.split(",")
        if isinstance(value, list):
            return [item.strip() for item in value if isinstance(item, str) and item.strip()]
        return value

    @classmethod
    def from_settings(cls, settings: IndexSettings) -> "SettingsPayload":
        return cls(
            top_n=settings.top_n,
            min_occurrences=settings.min_occurrences,
            excluded_folders=list(settings.excluded_folders),
            weighting=settings.weighting,
        )

    def to_settings(self) -> IndexSettings:
        return IndexSettings(
            top_n=self.top_n,
            min_occurrences=self.min_occurrences,
            excluded_folders=list(self.excluded_folders),
            weighting=self.weighting,
        )


def validate_settings(settings: IndexSettings) -> IndexSettings:
    """Return a normalized copy, raising ``SettingsError`` on invalid values."""

    try:
        return SettingsPayload.from_settings(settings).to_settings()
    except ValidationError as exc:
        raise SettingsError(str(exc)) from exc


class JsonSettingsRepository(SettingsRepository):
    """Reads and writes settings as a JSON object; missing keys use defaults."""

    def __init__(self, path: str | Path = "termindex.json") -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> IndexSettings:
        if not self._path.exists():
            return IndexSettings()
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8") or "{}")
            return SettingsPayload.model_validate(raw).to_settings()
        except (json.JSONDecodeError, ValidationError) as exc:
            raise SettingsError(f"Invalid settings file {self._path}: {exc}") from exc

    def save(self, settings: IndexSettings) -> None:
        payload = SettingsPayload.from_settings(validate_settings(settings))
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(payload.model_dump(by_alias=True), indent=2) + "\n",
            encoding="utf-8",
        )
        logger.debug("Saved settings to %s", self._path)


__all__ = ["JsonSettingsRepository", "SettingsPayload", "validate_settings"]
