"""Tests for history display formatting."""

import json

import pytest

from murmure.formatters.history import format_relative_time, format_response_body, mask_token

NOW = 1_700_000_000


class TestFormatRelativeTime:
    @pytest.mark.parametrize(
        "age, expected",
        [
            (0, "Just now"),
            (59, "Just now"),
            (60, "1m ago"),
            (59 * 60, "59m ago"),
            (60 * 60, "1h ago"),
            (23 * 3600 + 3599, "23h ago"),
            (24 * 3600, "1d ago"),
            (10 * 86400, "10d ago"),
        ],
    )
    def test_ages(self, age, expected):
        assert format_relative_time(NOW - age, now=NOW) == expected


class TestFormatResponseBody:
    def test_pretty_prints_json(self):
        body = '{"success":true,"message":"Webhook reçu"}'
        assert format_response_body(body) == json.dumps(
            {"success": True, "message": "Webhook reçu"}, indent=2, ensure_ascii=False
        )

    def test_short_text_unchanged(self):
        assert format_response_body("OK") == "OK"

    def test_long_text_truncated(self):
        assert format_response_body("a" * 1500) == "a" * 1000 + "..."


class TestMaskToken:
    def test_masks_all_but_last_four(self):
        assert mask_token("supersecret") == "*******cret"

    def test_short_tokens_fully_masked(self):
        assert mask_token("toto") == "****"

    def test_empty(self):
        assert mask_token(None) == ""
