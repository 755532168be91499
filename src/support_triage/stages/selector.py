"""Stage 3: pick exactly one category from the ranked candidates."""

from __future__ import annotations

import logging
from typing import Sequence

from support_triage.domains.banking.patterns import SELECTION_OVERRIDES, SelectionOverride
from support_triage.models import CandidateScore, Category, ChosenCategory

log = logging.getLogger(__name__)

FALLBACK_REASON = "fallback"


def choose_category(
    candidates: Sequence[CandidateScore],
    query: str,
    overrides: tuple[SelectionOverride, ...] = SELECTION_OVERRIDES,
) -> ChosenCategory:
    """Return the top-scoring candidate unless an override applies.

    Overrides are only considered when there is more than one candidate and
    are tried in order; the first whose category is among the candidates and
    whose predicate matches the lowercased query wins.
    """
    if not candidates:
        return ChosenCategory(category=Category.GENERAL_INFORMATION, reason=FALLBACK_REASON)

    ranked = sorted(candidates, key=lambda c: c.score, reverse=True)
    top = ranked[0]

    if len(ranked) > 1:
        text = query.lower()
        present = {c.category for c in ranked}
        for override in overrides:
            if override.category in present and override.applies(text):
                log.debug("Selection override %s picked %s", override.name, override.category.value)
                return ChosenCategory(category=override.category, reason=override.reason)

    return ChosenCategory(category=top.category, reason=top.reason)
