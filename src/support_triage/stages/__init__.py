"""The five pipeline stages, in execution order."""

from support_triage.stages.extractor import extract_details
from support_triage.stages.intent import interpret_intent
from support_triage.stages.mapper import map_to_categories
from support_triage.stages.reply import generate_reply
from support_triage.stages.selector import choose_category

__all__ = [
    "interpret_intent",
    "map_to_categories",
    "choose_category",
    "extract_details",
    "generate_reply",
]
