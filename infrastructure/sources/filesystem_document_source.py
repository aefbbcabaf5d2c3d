"""Document source that reads markdown notes from a vault directory."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from domain.entities import RawDocument
from domain.interfaces import DocumentSource

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".md"}
GENERATED_INDEX_NAMES = {"vault-index.md", "folder-index.md"}


def _normalize_folder(folder: str) -> str:
    folder = folder.strip().strip("/")
    return f"{folder}/" if folder else ""


def _in_scope(relative_path: str, folder_path: str | None) -> bool:
    if not folder_path:
        return True
    return relative_path == folder_path or relative_path.startswith(f"{folder_path}/")


class FileSystemDocumentSource(DocumentSource):
    """Lists ``*.md`` files under ``root`` sorted by their vault-relative path.

    Hidden directories (``.obsidian``, ``.git``, ...) and previously generated
    index files are never collected.
    """

    def __init__(self, root: str | Path, encoding: str = "utf-8") -> None:
        self._root = Path(root)
        self._encoding = encoding

    @property
    def root(self) -> Path:
        return self._root

    def collect(
        self,
        folder_path: str | None = None,
        excluded_folders: Sequence[str] = (),
    ) -> list[RawDocument]:
        if not self._root.is_dir():
            raise NotADirectoryError(f"Vault directory not found: {self._root}")

        folder = folder_path.strip("/") if folder_path else None
        exclusions = [prefix for prefix in map(_normalize_folder, excluded_folders) if prefix]

        documents: list[RawDocument] = []
        for path, relative_path in self._candidates():
            if not _in_scope(relative_path, folder):
                continue
            if path.name in GENERATED_INDEX_NAMES:
                continue
            if any(relative_path.startswith(prefix) for prefix in exclusions):
                continue
            try:
                content = path.read_text(encoding=self._encoding)
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Failed to read %s: %s", relative_path, exc)
                continue
            documents.append(
                RawDocument(id=relative_path, display_name=path.stem, raw_text=content)
            )

        logger.debug("Collected %d documents from %s", len(documents), self._root)
        return documents

    def _candidates(self) -> list[tuple[Path, str]]:
        candidates: list[tuple[Path, str]] = []
        for path in self._root.rglob("*"):
            if not path.is_file() or path.suffix.lower() not in SUPPORTED_EXTENSIONS:
                continue
            relative = path.relative_to(self._root)
            if any(part.startswith(".") for part in relative.parts[:-1]):
                continue
            candidates.append((path, relative.as_posix()))
        return sorted(candidates, key=lambda item: item[1])


__all__ = ["FileSystemDocumentSource", "GENERATED_INDEX_NAMES", "SUPPORTED_EXTENSIONS"]
