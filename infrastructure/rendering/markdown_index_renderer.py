"""Renders ranked terms as an alphabetical markdown index."""
from __future__ import annotations

from datetime import datetime
from typing import Sequence

from domain.entities import ScoredTerm
from domain.interfaces import IndexRenderer

OTHER_GROUP = "#"


def format_timestamp(moment: datetime) -> str:
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d} "
        f"{moment.hour:02d}:{moment.minute:02d}"
    )


def group_key(term: str) -> str:
    first = term[:1].lower()
    return first if "a" <= first <= "z" else OTHER_GROUP


class MarkdownIndexRenderer(IndexRenderer):
    """Score decides which terms are listed; display order is alphabetical."""

    def __init__(self, source_label: str = "vault") -> None:
        self._source_label = source_label

    def render(self, terms: Sequence[ScoredTerm], title: str, generated_at: datetime) -> str:
        lines = [
            f"# {title}",
            "",
            f"Generated: {format_timestamp(generated_at)}",
            "",
            f"**{len(terms)} terms** from {self._source_label}",
            "",
        ]

        groups: dict[str, list[ScoredTerm]] = {}
        for term in terms:
            groups.setdefault(group_key(term.term), []).append(term)

        for key in sorted(groups):
            lines.append(f"## {key.upper()}")
            lines.append("")
            for term in sorted(groups[key], key=lambda item: (item.term.lower(), item.term)):
                lines.append(f"- **{term.term}** ({term.total_occurrences} references)")
                for ref in term.document_refs:
                    lines.append(f"  - [[{ref.display_name}]] ({ref.count})")
            lines.append("")

        return "\n".join(lines)


__all__ = ["MarkdownIndexRenderer", "OTHER_GROUP", "format_timestamp", "group_key"]
