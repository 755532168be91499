"""Detail fields expected for each category, in the order they are reported."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from support_triage.models import Category, Requirement


@dataclass(frozen=True)
class DetailFieldSpec:
    """A named field and whether the category needs it."""

    field_name: str
    requirement: Requirement

    @property
    def is_required(self) -> bool:
        return self.requirement == Requirement.REQUIRED


def _req(name: str) -> DetailFieldSpec:
    return DetailFieldSpec(name, Requirement.REQUIRED)


def _opt(name: str) -> DetailFieldSpec:
    return DetailFieldSpec(name, Requirement.OPTIONAL)


DETAIL_FIELDS: Mapping[Category, tuple[DetailFieldSpec, ...]] = MappingProxyType({
    Category.TRANSACTION_INQUIRY: (
        _req("transaction_date"),
        _req("amount"),
        _opt("merchant"),
        _opt("card_last4"),
    ),
    Category.CARD_SERVICES: (
        _req("card_last4"),
        _opt("date_lost_or_stolen"),
    ),
    Category.ACCOUNT_ACCESS: (
        _opt("preferred_contact_method"),
        _opt("last_successful_login"),
    ),
    Category.BILLING_ISSUE: (
        _opt("invoice_number"),
        _req("amount"),
        _opt("billing_period"),
    ),
    Category.ACCOUNT_OPENING: (
        _req("account_type"),
        _req("full_name"),
        _req("id_document"),
    ),
    Category.ACCOUNT_STATEMENT: (
        _req("statement_period"),
        _opt("email"),
    ),
    Category.LOAN_INQUIRY: (
        _req("loan_type"),
        _opt("loan_account_number"),
    ),
    # Free-form questions: report whatever was detected, demand nothing.
    Category.GENERAL_INFORMATION: (),
})


def required_field_names(category: Category) -> list[str]:
    """Names of the Required fields in the category's template."""
    return [spec.field_name for spec in DETAIL_FIELDS.get(category, ()) if spec.is_required]
