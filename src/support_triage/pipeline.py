"""Five-stage triage pipeline: intent → candidates → category → details → reply.

Usage::

    from support_triage import run_prompt_chain

    intent, candidates, chosen, details, reply = await run_prompt_chain(
        "My card was stolen, please block it"
    )
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import structlog

from support_triage.core.config import PipelineConfig
from support_triage.core.exceptions import InvalidInputTypeError
from support_triage.core.startup_checks import validate_tables
from support_triage.models import PipelineResult
from support_triage.stages import (
    choose_category,
    extract_details,
    generate_reply,
    interpret_intent,
    map_to_categories,
)

log = logging.getLogger(__name__)


class PipelineRunner:
    """Runs the five stages over one query at a time.

    The runner holds only configuration; every call builds a fresh result
    and nothing is carried between calls.  Without an explicit ``config``
    the built-in defaults are used; environment settings are only read by
    callers that build ``AppSettings`` themselves (the CLI).
    """

    def __init__(self, config: Optional[PipelineConfig] = None) -> None:
        # model_construct applies field defaults without consulting TRIAGE_* env vars
        self._config = config or PipelineConfig.model_construct()
        validate_tables()

    @property
    def max_candidates(self) -> int:
        return self._config.max_candidates

    def run_sync(self, query: Any) -> PipelineResult:
        """Triage ``query`` and return the five ordered outputs.

        Raises:
            InvalidInputTypeError: If ``query`` is not a ``str``.
        """
        if not isinstance(query, str):
            raise InvalidInputTypeError(query)

        with structlog.contextvars.bound_contextvars(query_chars=len(query)):
            intent = interpret_intent(query)

            candidates = map_to_categories(query, max_candidates=self.max_candidates)
            candidate_summaries = [c.summary() for c in candidates]

            chosen = choose_category(candidates, query)

            details = extract_details(query, chosen.category)

            reply = generate_reply(query, chosen.category, details)

            log.info(
                "Triaged query as %s (%s), %d required detail(s) missing",
                chosen.category.value,
                chosen.reason,
                len(details.missing_required),
            )
        return PipelineResult(
            intent=intent,
            candidates=candidate_summaries,
            chosen=chosen.summary(),
            details=details,
            reply=reply,
        )

    async def run(self, query: Any) -> PipelineResult:
        """Async entry point; performs no I/O and never suspends."""
        return self.run_sync(query)


async def run_prompt_chain(
    customer_query: Any,
    config: Optional[PipelineConfig] = None,
) -> PipelineResult:
    """Triage one customer query with a freshly built runner."""
    return await PipelineRunner(config).run(customer_query)
