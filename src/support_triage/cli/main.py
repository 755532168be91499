"""CLI for support-triage: run the prompt chain over one customer query."""

from __future__ import annotations

import asyncio
import json
from typing import List, Optional

import typer
from rich.console import Console

from support_triage.core.config import AppSettings, PipelineConfig
from support_triage.core.logging_config import setup_logging
from support_triage.models import PipelineResult
from support_triage.pipeline import PipelineRunner

USAGE = 'Usage: support-triage "<customer query>"'

app = typer.Typer(name="support-triage", help="Rule-based triage of customer-support queries")
console = Console(highlight=False, emoji=False, soft_wrap=True)


def _print_result(result: PipelineResult) -> None:
    console.print("=== Prompt chain outputs ===", markup=False)
    console.print("1) Interpreted intent:", result.intent, markup=False)
    console.print("2) Candidate categories:", json.dumps(result.candidates, ensure_ascii=False), markup=False)
    console.print("3) Chosen category:", result.chosen, markup=False)
    console.print(
        "4) Extracted details:",
        json.dumps(result.details.model_dump(), indent=2, ensure_ascii=False),
        markup=False,
    )
    console.print("5) Final reply:", result.reply, markup=False)


# Query words may start with "-" ("-5 fee"), so unknown options are kept as words.
@app.command(context_settings={"ignore_unknown_options": True})
def triage(
    words: Optional[List[str]] = typer.Argument(None, help="Customer query (words are joined with spaces)"),
    max_candidates: Optional[int] = typer.Option(
        None, "--max-candidates", min=1, help="Maximum number of candidate categories"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the whole result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Triage a customer query through the five-stage prompt chain."""
    query = " ".join(words or [])
    if not query:
        console.print(USAGE, markup=False)
        raise typer.Exit(code=1)

    settings = AppSettings()
    observability = settings.observability
    if verbose:
        observability = observability.model_copy(update={"log_level": "DEBUG"})
    setup_logging(observability)

    pipeline_config = settings.pipeline
    if max_candidates is not None:
        pipeline_config = PipelineConfig(max_candidates=max_candidates)

    runner = PipelineRunner(pipeline_config)
    result = asyncio.run(runner.run(query))

    if as_json:
        console.print_json(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        _print_result(result)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
