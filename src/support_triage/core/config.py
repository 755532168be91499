"""Nested pydantic-settings configuration for the triage pipeline.

Each sub-config reads its own ``TRIAGE_<GROUP>_*`` env vars::

    export TRIAGE_PIPELINE_MAX_CANDIDATES=5
    export TRIAGE_OBSERVABILITY_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class PipelineConfig(BaseSettings):
    """Pipeline tuning.

    Env vars use ``TRIAGE_PIPELINE_`` prefix.
    """

    model_config = {"env_prefix": "TRIAGE_PIPELINE_"}

    max_candidates: int = Field(default=3, ge=1)


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``TRIAGE_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "TRIAGE_OBSERVABILITY_"}

    log_level: str = "WARNING"
    log_format: Literal["auto", "console", "json"] = "auto"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    pipeline: PipelineConfig = Field(default_factory=PipelineConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
