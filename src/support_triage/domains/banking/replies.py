"""Canned replies, one per category."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from support_triage.models import Category

DEFAULT_REPLY = (
    "Thanks for contacting us. Can you please provide a bit more detail so we can help "
    "(e.g., account number last 4 digits or date of transaction)?"
)

MISSING_DETAILS_REPLY = (
    "I can help with {category}. Please provide the following required details: {missing}."
)

CANNED_REPLIES: Mapping[Category, str] = MappingProxyType({
    Category.TRANSACTION_INQUIRY: (
        "Thanks — I see this is a transaction inquiry. I will look into the transaction "
        "and get back; could you confirm the amount and date if not already provided?"
    ),
    Category.CARD_SERVICES: (
        "Sorry to hear about your card. I can help block and replace it. "
        "Please confirm the last 4 digits of the card."
    ),
    Category.ACCOUNT_ACCESS: (
        "I can help you regain access. Would you like me to send a password reset link "
        "or start an account verification flow?"
    ),
    Category.BILLING_ISSUE: (
        "Thanks — I can review the billing issue and raise a dispute if needed. "
        "Please confirm the transaction amount and invoice number (if available)."
    ),
    Category.ACCOUNT_OPENING: (
        "We can help open a new account. Please tell us the account type "
        "(checking/savings) and full name to begin the application."
    ),
    Category.ACCOUNT_STATEMENT: (
        "I can provide the statement. Which statement period would you like "
        "(e.g., March 2025)?"
    ),
    Category.LOAN_INQUIRY: (
        "I can help with loan information. Are you asking about repayments, "
        "interest rates, or applying for a new loan?"
    ),
    Category.GENERAL_INFORMATION: DEFAULT_REPLY,
})
