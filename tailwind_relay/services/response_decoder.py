"""
Explicit decoding of Gemini responses.

Every step of the candidates -> content -> parts -> text path is checked,
so an unexpected shape becomes a typed error instead of a silent None.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

from pydantic import ValidationError

from tailwind_relay.domain.conversion_models import ConversionResult
from tailwind_relay.domain.errors import EmptyResponseError, MalformedOutputError
from tailwind_relay.models.gemini_models import (
    GeminiErrorBody,
    GenerateContentResponse,
    TailwindConversion,
)

logger = logging.getLogger(__name__)


def extract_candidate_text(body: Any) -> str:
    """Return the first candidate's first text part or raise EmptyResponseError."""
    if not isinstance(body, dict):
        raise EmptyResponseError()

    try:
        response = GenerateContentResponse.model_validate(body)
    except ValidationError as e:
        logger.error("Unexpected generateContent response shape: %s", e)
        raise EmptyResponseError() from e

    if not response.candidates:
        raise EmptyResponseError()

    content = response.candidates[0].content
    if content is None or not content.parts:
        raise EmptyResponseError()

    text = content.parts[0].text
    if not text:
        raise EmptyResponseError()
    return text


def parse_conversion(text: str) -> ConversionResult:
    """Parse the model text as JSON and require both output fields."""
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse AI JSON output: %s", text)
        raise MalformedOutputError() from e

    try:
        conversion = TailwindConversion.model_validate(parsed)
    except ValidationError as e:
        logger.error("AI JSON output is missing required fields: %s", text)
        raise MalformedOutputError() from e

    return ConversionResult(output=conversion.output, analysis=conversion.analysis)


def extract_error_message(body: Any) -> Optional[str]:
    """Best-effort read of error.message from an upstream error body."""
    if not isinstance(body, dict):
        return None
    try:
        error_body = GeminiErrorBody.model_validate(body)
    except ValidationError:
        return None
    if error_body.error is None:
        return None
    return error_body.error.message
