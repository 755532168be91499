"""Stage 2: score every category against the query and rank the candidates."""

from __future__ import annotations

import logging
from typing import Mapping

from support_triage.domains.banking.keywords import CATEGORY_KEYWORDS
from support_triage.domains.banking.patterns import BONUS_RULES, BonusRule
from support_triage.models import CandidateScore, Category

log = logging.getLogger(__name__)

NO_MATCH_REASON = "no matching keywords"


def keyword_scores(
    text: str,
    keywords: Mapping[Category, tuple[str, ...]] = CATEGORY_KEYWORDS,
) -> dict[Category, int]:
    """One point per table phrase contained in the lowercased ``text``."""
    return {
        category: sum(1 for phrase in keywords.get(category, ()) if phrase in text)
        for category in Category
    }


def apply_bonus_rules(
    scores: dict[Category, int],
    text: str,
    rules: tuple[BonusRule, ...] = BONUS_RULES,
) -> dict[Category, int]:
    """Add every matching rule's boosts to ``scores`` in place and return it."""
    for rule in rules:
        if not rule.applies(text):
            continue
        for category, points in rule.boosts:
            scores[category] += points
        log.debug("Bonus rule %s applied", rule.name)
    return scores


def map_to_categories(query: str, max_candidates: int = 3) -> list[CandidateScore]:
    """Rank the categories that matched the query, best first.

    Categories scoring zero are dropped and at most ``max_candidates`` are
    returned.  When nothing matches, General Information is returned alone
    with a score of zero.
    """
    text = query.lower()
    scores = apply_bonus_rules(keyword_scores(text), text)

    # sorted() is stable, so equal scores keep Category declaration order
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    candidates = [
        CandidateScore(category=category, score=score, reason=f"matched keywords ({score})")
        for category, score in ranked
        if score > 0
    ][:max_candidates]

    if not candidates:
        log.debug("No keyword matches, defaulting to %s", Category.GENERAL_INFORMATION.value)
        return [
            CandidateScore(
                category=Category.GENERAL_INFORMATION,
                score=0,
                reason=NO_MATCH_REASON,
            )
        ]

    log.debug("Candidates: %s", [(c.category.value, c.score) for c in candidates])
    return candidates
