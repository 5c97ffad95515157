from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from tailwind_relay.domain.conversion_models import (
    ConversionResult,
    RelayConfig,
    build_upstream_payload,
)
from tailwind_relay.domain.errors import (
    ConfigurationError,
    UpstreamAPIError,
    UpstreamTransportError,
    ValidationError,
)
from tailwind_relay.services.response_decoder import (
    extract_candidate_text,
    extract_error_message,
    parse_conversion,
)

logger = logging.getLogger(__name__)

INVALID_API_BASE_MESSAGE = "Server Gemini API base URL is invalid. Check your .env file."


class ConversionRelay:
    """
    Relays one CSS snippet to Gemini and returns the validated
    {output, analysis} pair.

    - Single attempt, no retry
    - No state shared between calls
    - Every failure surfaces as a ConversionError subclass
    """

    def __init__(
        self,
        config: RelayConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._config = config
        self._transport = transport

    def _endpoint_url(self) -> httpx.URL:
        try:
            url = httpx.URL(self._config.endpoint)
        except httpx.InvalidURL as e:
            logger.error("Gemini API base URL is invalid: %s", self._config.api_base)
            raise ConfigurationError(INVALID_API_BASE_MESSAGE) from e
        if url.scheme not in ("http", "https") or not url.host:
            logger.error("Gemini API base URL is invalid: %s", self._config.api_base)
            raise ConfigurationError(INVALID_API_BASE_MESSAGE)
        return url

    def _build_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            transport=self._transport,
            timeout=httpx.Timeout(self._config.timeout_seconds),
            headers={"Content-Type": "application/json"},
        )

    # ==============================================================
    # PUBLIC ENTRY POINT
    # ==============================================================

    async def convert(self, css_code: Optional[str]) -> ConversionResult:
        api_key = self._config.api_key
        if not api_key or not api_key.strip():
            logger.error("Gemini API key is not configured")
            raise ConfigurationError()

        url = self._endpoint_url()

        if not isinstance(css_code, str) or not css_code.strip():
            raise ValidationError()

        payload = build_upstream_payload(css_code, self._config.system_instruction)

        # ---------------- UPSTREAM CALL ----------------
        try:
            async with self._build_client() as client:
                response = await client.post(
                    url,
                    params={"key": api_key},
                    # ASCII-escaped so lone surrogates in the CSS survive encoding
                    content=json.dumps(payload),
                )
                body = self._read_json(response)
        except httpx.HTTPError as e:
            logger.exception("Server-side conversion error")
            raise UpstreamTransportError() from e

        if not response.is_success:
            logger.error("Google API Error (%s): %s", response.status_code, body)
            raise UpstreamAPIError(
                status_code=response.status_code,
                reason=response.reason_phrase,
                details=extract_error_message(body),
            )

        # ---------------- RESPONSE DECODING ----------------
        text = extract_candidate_text(body)
        result = parse_conversion(text)

        logger.info("Converted %d characters of CSS", len(css_code))
        return result

    @staticmethod
    def _read_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return None
