"""Exception hierarchy for support-triage."""

from __future__ import annotations


class TriageError(Exception):
    """Base exception for all support-triage errors."""


class InvalidInputTypeError(TriageError, TypeError):
    """Raised when the pipeline is handed something other than text."""

    def __init__(self, received: object) -> None:
        self.received_type = type(received).__name__
        super().__init__(f"customer query must be a str, got {self.received_type}")


class TableIntegrityError(TriageError):
    """Raised when the static lookup tables disagree with the category set."""


__all__ = [
    "TriageError",
    "InvalidInputTypeError",
    "TableIntegrityError",
]
