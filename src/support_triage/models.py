"""Data models for support-triage.

The category set and requirement levels are enums; everything a stage hands
to the next stage is a pydantic model so it serializes cleanly for the CLI.
"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field

# ── Closed category set ──────────────────────────────────────────────


class Category(str, Enum):
    """The 8 banking support topics a query can be assigned to.

    Declaration order is the ranking tie-break.
    """

    ACCOUNT_OPENING = "Account Opening"
    BILLING_ISSUE = "Billing Issue"
    ACCOUNT_ACCESS = "Account Access"
    TRANSACTION_INQUIRY = "Transaction Inquiry"
    CARD_SERVICES = "Card Services"
    ACCOUNT_STATEMENT = "Account Statement"
    LOAN_INQUIRY = "Loan Inquiry"
    GENERAL_INFORMATION = "General Information"


class Requirement(str, Enum):
    """Whether a detail field must be supplied before the query can be handled."""

    REQUIRED = "Required"
    OPTIONAL = "Optional"


# ── Stage outputs ────────────────────────────────────────────────────


class CandidateScore(BaseModel):
    """A category proposed by the mapper, with its keyword score."""

    category: Category
    score: int = Field(default=0, ge=0)
    reason: str

    def summary(self) -> str:
        return f"{self.category.value} — {self.reason}"


class ChosenCategory(BaseModel):
    """The single category picked by the selector."""

    category: Category
    reason: str

    def summary(self) -> str:
        return f"{self.category.value} — {self.reason}"


class ExtractedDetails(BaseModel):
    """Structured fields pulled from the query for the chosen category.

    ``required`` and ``optional`` hold ``"field: value"`` lines.  For a
    category with a template, absent fields read ``MISSING`` (required) or
    ``not provided`` (optional) and ``missing_required`` lists the absent
    required names in template order.
    """

    required: list[str] = Field(default_factory=list)
    optional: list[str] = Field(default_factory=list)
    missing_required: list[str] = Field(default_factory=list)


class PipelineResult(NamedTuple):
    """The five ordered outputs of one pipeline run."""

    intent: str
    candidates: list[str]
    chosen: str
    details: ExtractedDetails
    reply: str

    def to_dict(self) -> dict:
        return {
            "interpreted_intent": self.intent,
            "candidate_categories": list(self.candidates),
            "chosen_category": self.chosen,
            "extracted_details": self.details.model_dump(),
            "final_reply": self.reply,
        }
