"""Unit tests for reply generation."""

from __future__ import annotations

import pytest

from support_triage.domains.banking.replies import CANNED_REPLIES, DEFAULT_REPLY
from support_triage.models import Category, ExtractedDetails
from support_triage.stages.reply import generate_reply

_TOPICAL = [c for c in Category if c != Category.GENERAL_INFORMATION]


class TestGenerateReply:
    def test_missing_required_takes_precedence(self):
        details = ExtractedDetails(required=["card_last4: MISSING"], missing_required=["card_last4"])
        assert generate_reply("q", Category.CARD_SERVICES, details) == (
            "I can help with card services. Please provide the following required details: card_last4."
        )

    def test_missing_fields_joined_in_order(self):
        details = ExtractedDetails(missing_required=["account_type", "full_name", "id_document"])
        assert generate_reply("q", Category.ACCOUNT_OPENING, details) == (
            "I can help with account opening. Please provide the following required details: "
            "account_type, full_name, id_document."
        )

    @pytest.mark.parametrize("category", _TOPICAL)
    def test_canned_reply_per_category(self, category):
        assert generate_reply("q", category, ExtractedDetails()) == CANNED_REPLIES[category]

    def test_topical_replies_are_distinct(self):
        replies = [CANNED_REPLIES[c] for c in _TOPICAL]
        assert len(set(replies)) == len(_TOPICAL)
        assert DEFAULT_REPLY not in replies

    def test_general_information_gets_default(self):
        reply = generate_reply("q", Category.GENERAL_INFORMATION, ExtractedDetails())
        assert reply == DEFAULT_REPLY
        assert reply.startswith("Thanks for contacting us.")

    def test_every_category_has_a_reply(self):
        assert set(CANNED_REPLIES) == set(Category)
