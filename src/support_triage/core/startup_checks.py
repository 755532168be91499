"""Startup validation: fail fast if the static tables drift from the category set."""

from __future__ import annotations

import logging

from support_triage.core.exceptions import TableIntegrityError
from support_triage.domains.banking.detail_fields import DETAIL_FIELDS
from support_triage.domains.banking.keywords import CATEGORY_KEYWORDS
from support_triage.domains.banking.replies import CANNED_REPLIES
from support_triage.models import Category

log = logging.getLogger(__name__)


def validate_tables() -> None:
    """Check the lookup tables cover every category. Raises TableIntegrityError."""
    _check_covers_categories("keyword table", CATEGORY_KEYWORDS)
    _check_covers_categories("detail template", DETAIL_FIELDS)
    _check_covers_categories("canned replies", CANNED_REPLIES)
    _check_keywords_lowercase()
    _check_unique_fields()


def _check_covers_categories(table_name: str, table) -> None:
    expected = set(Category)
    actual = set(table)
    if actual != expected:
        missing = sorted(c.value for c in expected - actual)
        extra = sorted(str(c) for c in actual - expected)
        raise TableIntegrityError(
            f"{table_name} does not match the category set "
            f"(missing: {missing}, unexpected: {extra})"
        )


def _check_keywords_lowercase() -> None:
    for category, phrases in CATEGORY_KEYWORDS.items():
        for phrase in phrases:
            if phrase != phrase.lower():
                raise TableIntegrityError(
                    f"Keyword {phrase!r} for {category.value} must be lowercase"
                )


def _check_unique_fields() -> None:
    for category, specs in DETAIL_FIELDS.items():
        names = [spec.field_name for spec in specs]
        if len(names) != len(set(names)):
            raise TableIntegrityError(f"Detail template for {category.value} repeats a field")
    log.debug("Lookup tables validated for %d categories", len(Category))
