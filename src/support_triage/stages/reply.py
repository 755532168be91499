"""Stage 5: produce the user-facing reply."""

from __future__ import annotations

from support_triage.domains.banking.replies import (
    CANNED_REPLIES,
    DEFAULT_REPLY,
    MISSING_DETAILS_REPLY,
)
from support_triage.models import Category, ExtractedDetails


def generate_reply(query: str, chosen_category: Category, details: ExtractedDetails) -> str:
    """Ask for missing required details, otherwise return the category's canned reply."""
    if details.missing_required:
        return MISSING_DETAILS_REPLY.format(
            category=chosen_category.value.lower(),
            missing=", ".join(details.missing_required),
        )
    return CANNED_REPLIES.get(chosen_category, DEFAULT_REPLY)
