"""Tests for request field validation."""

from __future__ import annotations

import pytest

from errors import ValidationError
from validation import (
    SHARE_FIELDS_MESSAGE,
    SUMMARIZE_FIELDS_MESSAGE,
    validate_share_request,
    validate_summarize_request,
)


class TestSummarizeValidation:

    def test_valid_body_builds_request(self):
        request = validate_summarize_request({"transcript": "T", "prompt": "P"})
        assert request.transcript == "T"
        assert request.prompt == "P"

    @pytest.mark.parametrize(
        "body",
        [
            {"prompt": "P"},
            {"transcript": "T"},
            {"transcript": "", "prompt": "P"},
            {"transcript": "T", "prompt": None},
            {"transcript": 42, "prompt": "P"},
            {},
            None,
            ["T", "P"],
        ],
    )
    def test_absent_fields_rejected(self, body):
        with pytest.raises(ValidationError) as excinfo:
            validate_summarize_request(body)
        assert str(excinfo.value) == SUMMARIZE_FIELDS_MESSAGE

    def test_whitespace_only_counts_as_present(self):
        request = validate_summarize_request({"transcript": " ", "prompt": "P"})
        assert request.transcript == " "


class TestShareValidation:

    def test_valid_body_builds_request(self):
        request = validate_share_request({"summary": "S", "emails": "a@x.com"})
        assert request.emails == "a@x.com"

    @pytest.mark.parametrize(
        "body",
        [
            {"summary": "S"},
            {"emails": "a@x.com"},
            {"summary": "", "emails": "a@x.com"},
            {"summary": "S", "emails": None},
        ],
    )
    def test_absent_fields_rejected(self, body):
        with pytest.raises(ValidationError, match="Summary and recipient emails are required."):
            validate_share_request(body)

    def test_message_constant(self):
        assert SHARE_FIELDS_MESSAGE == "Summary and recipient emails are required."
