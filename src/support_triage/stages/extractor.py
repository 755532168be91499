"""Stage 4: pull structured details out of the query for the chosen category."""

from __future__ import annotations

import logging

from support_triage.domains.banking.detail_fields import DETAIL_FIELDS
from support_triage.domains.banking.patterns import FIELD_EXTRACTORS, FieldExtractor
from support_triage.models import Category, ExtractedDetails, Requirement

log = logging.getLogger(__name__)

MISSING = "MISSING"
NOT_PROVIDED = "not provided"


def detect_fields(
    query: str,
    extractors: tuple[FieldExtractor, ...] = FIELD_EXTRACTORS,
) -> tuple[list[tuple[str, str]], list[tuple[str, str]]]:
    """Run each extractor once over the raw query.

    Returns ``(required_candidates, optional_candidates)`` as ``(name, value)``
    pairs in extractor order.  Only the first match of each pattern is kept.
    """
    required: list[tuple[str, str]] = []
    optional: list[tuple[str, str]] = []
    for extractor in extractors:
        value = extractor.first_match(query)
        if value is None:
            continue
        bucket = required if extractor.kind == Requirement.REQUIRED else optional
        bucket.append((extractor.field_name, value))
    return required, optional


def _lines(pairs: list[tuple[str, str]]) -> list[str]:
    return [f"{name}: {value}" for name, value in pairs]


def extract_details(
    query: str,
    chosen_category: Category,
    extractors: tuple[FieldExtractor, ...] = FIELD_EXTRACTORS,
) -> ExtractedDetails:
    """Reconcile detected fields against the category's detail template."""
    required_found, optional_found = detect_fields(query, extractors)

    # Optional candidates are inserted last, so they win on a name clash.
    values: dict[str, str] = {}
    for name, value in [*required_found, *optional_found]:
        values[name] = value

    template = DETAIL_FIELDS.get(chosen_category, ())
    if not template:
        return ExtractedDetails(
            required=_lines(required_found),
            optional=_lines(optional_found),
            missing_required=[],
        )

    required_lines: list[str] = []
    optional_lines: list[str] = []
    missing: list[str] = []
    for spec in template:
        value = values.get(spec.field_name)
        if spec.is_required:
            if value:
                required_lines.append(f"{spec.field_name}: {value}")
            else:
                required_lines.append(f"{spec.field_name}: {MISSING}")
                missing.append(spec.field_name)
        elif value:
            optional_lines.append(f"{spec.field_name}: {value}")
        else:
            optional_lines.append(f"{spec.field_name}: {NOT_PROVIDED}")

    if missing:
        log.debug("%s is missing required details: %s", chosen_category.value, missing)

    return ExtractedDetails(
        required=required_lines,
        optional=optional_lines,
        missing_required=missing,
    )
