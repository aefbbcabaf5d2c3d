"""Errors raised to callers of the TermIndex use cases."""
from __future__ import annotations


class TermIndexError(Exception):
    """Base class for recoverable index generation failures."""


class EmptyInputError(TermIndexError):
    """No documents were supplied to the pipeline."""

    def __init__(self, message: str = "No documents to index") -> None:
        super().__init__(message)


class NoQualifyingTermsError(TermIndexError):
    """Every candidate term was removed by the thresholds."""

    def __init__(self, min_occurrences: int) -> None:
        self.min_occurrences = min_occurrences
        super().__init__(
            f"No terms met the threshold (min {min_occurrences} occurrences across 2+ files)"
        )


class SettingsError(TermIndexError):
    """Stored settings could not be read or validated."""


__all__ = [
    "TermIndexError",
    "EmptyInputError",
    "NoQualifyingTermsError",
    "SettingsError",
]
