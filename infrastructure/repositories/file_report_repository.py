"""Stores rendered index reports as files inside the vault."""
from __future__ import annotations

import logging
from pathlib import Path

from domain.interfaces import ReportRepository

logger = logging.getLogger(__name__)


class FileReportRepository(ReportRepository):
    """Creates or overwrites ``<root>/<output_id>``."""

    def __init__(self, root: str | Path, encoding: str = "utf-8") -> None:
        self._root = Path(root)
        self._encoding = encoding

    def save(self, output_id: str, text: str) -> Path:
        target = (self._root / output_id).resolve()
        if not target.is_relative_to(self._root.resolve()):
            raise ValueError(f"Report path escapes the vault: {output_id}")
        existed = target.exists()
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(text, encoding=self._encoding)
        logger.debug("%s report %s", "Updated" if existed else "Created", target)
        return target


__all__ = ["FileReportRepository"]
