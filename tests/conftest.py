"""Shared fixtures for support-triage tests."""

from __future__ import annotations

import pytest

from support_triage.core.config import PipelineConfig
from support_triage.pipeline import PipelineRunner

SCENARIO_CARD_STOLEN = "My card was stolen, please block it"
SCENARIO_DOUBLE_CHARGE = "I was charged $45.00 twice on 2024-03-01"
SCENARIO_EMPTY = ""


@pytest.fixture
def runner() -> PipelineRunner:
    """Runner with the default candidate cap."""
    return PipelineRunner(PipelineConfig(max_candidates=3))


@pytest.fixture
def sample_queries() -> list[str]:
    """A spread of queries touching every category."""
    return [
        SCENARIO_CARD_STOLEN,
        SCENARIO_DOUBLE_CHARGE,
        SCENARIO_EMPTY,
        "I want to open account for my son",
        "Why was I billed 19.99 on invoice 5521?",
        "I forgot my password and I'm locked out",
        "Card payment of $30 is pending",
        "Please send my monthly statement for March 3, 2025",
        "What is the interest rate on a mortgage loan?",
        "What are your branch hours?",
        "Where is TXN-98765AB?",
    ]
