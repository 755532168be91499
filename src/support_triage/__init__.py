"""support-triage: rule-based triage of banking customer-support queries.

Public API::

    from support_triage import (
        run_prompt_chain, PipelineRunner, PipelineResult,
        Category, CandidateScore, ChosenCategory, ExtractedDetails,
        AppSettings, InvalidInputTypeError,
    )
"""

from __future__ import annotations

from support_triage.core.config import AppSettings, ObservabilityConfig, PipelineConfig
from support_triage.core.exceptions import (
    InvalidInputTypeError,
    TableIntegrityError,
    TriageError,
)
from support_triage.models import (
    CandidateScore,
    Category,
    ChosenCategory,
    ExtractedDetails,
    PipelineResult,
    Requirement,
)
from support_triage.pipeline import PipelineRunner, run_prompt_chain

__all__ = [
    "run_prompt_chain",
    "PipelineRunner",
    "PipelineResult",
    "Category",
    "Requirement",
    "CandidateScore",
    "ChosenCategory",
    "ExtractedDetails",
    "AppSettings",
    "PipelineConfig",
    "ObservabilityConfig",
    "TriageError",
    "InvalidInputTypeError",
    "TableIntegrityError",
]
