"""
Tests for the Gemini response decoder
"""
import json

import pytest

from tailwind_relay.domain.conversion_models import ConversionResult
from tailwind_relay.domain.errors import EmptyResponseError, MalformedOutputError
from tailwind_relay.services.response_decoder import (
    extract_candidate_text,
    extract_error_message,
    parse_conversion,
)


def test_extract_candidate_text_reads_first_part_of_first_candidate():
    body = {
        "candidates": [
            {"content": {"parts": [{"text": "first"}, {"text": "second"}]}},
            {"content": {"parts": [{"text": "other candidate"}]}},
        ],
        "usageMetadata": {"totalTokenCount": 12},
    }
    assert extract_candidate_text(body) == "first"


@pytest.mark.parametrize(
    "body",
    [
        None,
        [],
        "text",
        {},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": {}}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
        {"candidates": "not-a-list"},
    ],
)
def test_extract_candidate_text_rejects_unusable_shapes(body):
    with pytest.raises(EmptyResponseError):
        extract_candidate_text(body)


def test_parse_conversion_keeps_fields_verbatim():
    text = json.dumps({"output": "  .btn: hover:bg-blue-500\n", "analysis": "Hover mapped."})
    assert parse_conversion(text) == ConversionResult(
        output="  .btn: hover:bg-blue-500\n",
        analysis="Hover mapped.",
    )


def test_parse_conversion_ignores_extra_fields():
    text = json.dumps({"output": "flex", "analysis": "Display flex.", "confidence": 0.9})
    assert parse_conversion(text) == ConversionResult(output="flex", analysis="Display flex.")


@pytest.mark.parametrize(
    "text",
    [
        "not-json{{{",
        "```json\n{\"output\": \"flex\"}\n```",
        json.dumps(["flex", "Display flex."]),
        json.dumps({"output": "flex"}),
        json.dumps({"analysis": "Display flex."}),
        json.dumps({"output": None, "analysis": "Display flex."}),
        json.dumps({"output": 42, "analysis": "Display flex."}),
    ],
)
def test_parse_conversion_rejects_malformed_output(text):
    with pytest.raises(MalformedOutputError):
        parse_conversion(text)


def test_extract_error_message():
    assert extract_error_message({"error": {"code": 400, "message": "API key not valid."}}) == "API key not valid."
    assert extract_error_message({"error": {"code": 400}}) is None
    assert extract_error_message({"unexpected": True}) is None
    assert extract_error_message(None) is None
