"""Regex patterns and the ordered rule tables built on them.

Every branch the pipeline takes on a regex lives here as a named rule:

- ``BONUS_RULES``: score boosts applied by the category mapper.
- ``SELECTION_OVERRIDES``: tie-breaks applied by the category selector.
- ``FIELD_EXTRACTORS``: detail fields pulled from the raw query.

Each table is evaluated front to back.  The patterns only use bounded
repetition or repetition anchored at a run boundary, so matching stays
linear in the length of the query.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Pattern

from support_triage.models import Category, Requirement

# ── Patterns ─────────────────────────────────────────────────────────

# JavaScript's \s.  re.ASCII narrows \s to ASCII whitespace, so spell it out.
_WS = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"

# "$45", "$ 120" or a decimal with two fractional digits ("45.00").
# The lookbehind starts the decimal branch at the head of a digit run.
CURRENCY_AMOUNT: Pattern[str] = re.compile(r"\$" + _WS + r"*\d|(?<!\d)\d+\.\d{2}", re.ASCII)

MONEY_WORDS: Pattern[str] = re.compile(r"\b(?:amount|charged|charge|refund)\b", re.ASCII)

AUTH_TERMS: Pattern[str] = re.compile(
    r"\b(?:password|login|sign in|locked|unlock|2fa|two[- ]factor)\b", re.ASCII
)

AMOUNT_VALUE: Pattern[str] = re.compile(
    r"\$" + _WS + r"*[\d,]+(?:\.\d{2})?|\b\d+\.\d{2}\b", re.ASCII
)

DATE_VALUE: Pattern[str] = re.compile(
    r"\b(?:\d{4}-\d{2}-\d{2}"
    r"|\d{1,2}/\d{1,2}/\d{2,4}"
    r"|[A-Za-z]{3,9} \d{1,2}(?:," + _WS + r"*\d{4})?)\b",
    re.ASCII,
)

LAST4_VALUE: Pattern[str] = re.compile(r"\b\d{4}\b", re.ASCII)

TRANSACTION_ID_VALUE: Pattern[str] = re.compile(
    r"\b(?:tx|txn|transaction)[-_]?[A-Za-z0-9]{4,}\b", re.ASCII | re.IGNORECASE
)


def has_currency_amount(text: str) -> bool:
    return CURRENCY_AMOUNT.search(text) is not None


def mentions_money(text: str) -> bool:
    return has_currency_amount(text) or MONEY_WORDS.search(text) is not None


def mentions_authentication(text: str) -> bool:
    return AUTH_TERMS.search(text) is not None


def mentions_card(text: str) -> bool:
    return "card" in text


# ── Mapper bonus rules ───────────────────────────────────────────────


@dataclass(frozen=True)
class BonusRule:
    """Extra points granted to categories when a lowercased query matches."""

    name: str
    applies: Callable[[str], bool]
    boosts: tuple[tuple[Category, int], ...]


BONUS_RULES: tuple[BonusRule, ...] = (
    BonusRule(
        name="amount_mention",
        applies=mentions_money,
        boosts=((Category.TRANSACTION_INQUIRY, 1), (Category.BILLING_ISSUE, 1)),
    ),
    BonusRule(
        name="authentication_mention",
        applies=mentions_authentication,
        boosts=((Category.ACCOUNT_ACCESS, 2),),
    ),
)


# ── Selector overrides ───────────────────────────────────────────────


@dataclass(frozen=True)
class SelectionOverride:
    """Picks ``category`` over the top-ranked candidate when it is present
    among the candidates and the lowercased query satisfies ``applies``."""

    name: str
    category: Category
    applies: Callable[[str], bool]
    reason: str


SELECTION_OVERRIDES: tuple[SelectionOverride, ...] = (
    SelectionOverride(
        name="card_mention",
        category=Category.CARD_SERVICES,
        applies=mentions_card,
        reason="query mentions card",
    ),
    SelectionOverride(
        name="amount_pattern",
        category=Category.TRANSACTION_INQUIRY,
        applies=has_currency_amount,
        reason="includes amount pattern",
    ),
)


# ── Detail field extractors ──────────────────────────────────────────


@dataclass(frozen=True)
class FieldExtractor:
    """Records the first match of ``pattern`` under ``field_name``."""

    field_name: str
    kind: Requirement
    pattern: Pattern[str]

    def first_match(self, text: str) -> str | None:
        match = self.pattern.search(text)
        return match.group(0) if match else None


FIELD_EXTRACTORS: tuple[FieldExtractor, ...] = (
    FieldExtractor("amount", Requirement.REQUIRED, AMOUNT_VALUE),
    FieldExtractor("transaction_date", Requirement.REQUIRED, DATE_VALUE),
    FieldExtractor("card_last4", Requirement.OPTIONAL, LAST4_VALUE),
    FieldExtractor("transaction_id", Requirement.OPTIONAL, TRANSACTION_ID_VALUE),
)
