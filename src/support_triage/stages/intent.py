"""Stage 1: classify the communicative form of a query."""

from __future__ import annotations

import logging
import re

log = logging.getLogger(__name__)

_LEAD_CLAUSE_END = re.compile(r"[.?!\n]")

# (label, markers) checked in order; markers are plain lowercase substrings.
INTENT_RULES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "Asks",
        ("how", "why", "when", "what", "can i", "could i", "do i", "is it", "are you", "please"),
    ),
    (
        "Reports",
        ("i am", "i've", "i have", "my", "we have", "we're", "we are"),
    ),
)
FALLBACK_LABEL = "Requests"


def lead_clause(query: str) -> str:
    """Trimmed text before the first sentence terminator."""
    return _LEAD_CLAUSE_END.split(query.strip(), maxsplit=1)[0].strip()


def classify_form(query: str) -> str:
    """Return ``Asks``, ``Reports`` or ``Requests`` for the query."""
    lowered = query.lower()
    for label, markers in INTENT_RULES:
        if any(marker in lowered for marker in markers):
            return label
    return FALLBACK_LABEL


def interpret_intent(query: str) -> str:
    """Summarize the query as ``"<label>: <lead clause>"``."""
    label = classify_form(query)
    intent = f"{label}: {lead_clause(query)}"
    log.debug("Interpreted intent %r", intent)
    return intent
