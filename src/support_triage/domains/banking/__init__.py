"""Banking support taxonomy: keyword table, detail templates, patterns, replies."""

from support_triage.domains.banking.detail_fields import DETAIL_FIELDS, DetailFieldSpec
from support_triage.domains.banking.keywords import CATEGORY_KEYWORDS
from support_triage.domains.banking.replies import CANNED_REPLIES, DEFAULT_REPLY

__all__ = [
    "CATEGORY_KEYWORDS",
    "DETAIL_FIELDS",
    "DetailFieldSpec",
    "CANNED_REPLIES",
    "DEFAULT_REPLY",
]
