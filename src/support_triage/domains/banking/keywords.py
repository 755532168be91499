"""Trigger phrases per banking support category.

Phrases are lowercase literal substrings.  Each phrase found in a query adds
one point to its category, so a query containing "credit card" scores twice
for Card Services ("card" and "credit card").
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from support_triage.models import Category

CATEGORY_KEYWORDS: Mapping[Category, tuple[str, ...]] = MappingProxyType({
    Category.ACCOUNT_OPENING: (
        "open account",
        "new account",
        "open a checking",
        "apply account",
        "signup",
    ),
    Category.BILLING_ISSUE: (
        "charge",
        "bill",
        "billing",
        "invoice",
        "overcharged",
        "refund",
    ),
    Category.ACCOUNT_ACCESS: (
        "login",
        "sign in",
        "password",
        "locked out",
        "can't access",
        "unlock",
    ),
    Category.TRANSACTION_INQUIRY: (
        "transaction",
        "transfer",
        "withdrawal",
        "payment",
        "pending",
        "unauthorized",
        "charge",
    ),
    Category.CARD_SERVICES: (
        "card",
        "credit card",
        "debit card",
        "lost card",
        "stolen card",
        "block my card",
        "replace card",
    ),
    Category.ACCOUNT_STATEMENT: (
        "statement",
        "e-statement",
        "pdf statement",
        "monthly statement",
        "download statement",
    ),
    Category.LOAN_INQUIRY: (
        "loan",
        "mortgage",
        "interest rate",
        "apply for loan",
        "loan payment",
    ),
    Category.GENERAL_INFORMATION: (
        "hours",
        "location",
        "branch",
        "interest",
        "contact",
        "information",
    ),
})
