"""
Pytest configuration and fixtures
"""
import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from tailwind_relay.domain.conversion_models import RelayConfig
from tailwind_relay.services.conversion_relay import ConversionRelay

TEST_INSTRUCTION = "Convert the CSS to Tailwind and answer with JSON."


class StubUpstream:
    """Records every request and answers with a canned Gemini response."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._handler = handler
        self.requests: List[httpx.Request] = []

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def last_payload(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)

    def transport(self) -> httpx.MockTransport:
        def handle(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return self._handler(request)

        return httpx.MockTransport(handle)


def gemini_text_response(text: Optional[str], status_code: int = 200) -> httpx.Response:
    part: Dict[str, Any] = {} if text is None else {"text": text}
    body = {
        "candidates": [
            {
                "content": {"parts": [part], "role": "model"},
                "finishReason": "STOP",
            }
        ]
    }
    return httpx.Response(status_code, json=body)


@pytest.fixture
def relay_config() -> RelayConfig:
    return RelayConfig(
        api_key="test-key",
        model="gemini-test",
        api_base="https://upstream.test/v1beta",
        system_instruction=TEST_INSTRUCTION,
        timeout_seconds=5.0,
    )


@pytest.fixture
def make_upstream() -> Callable[..., StubUpstream]:
    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> StubUpstream:
        return StubUpstream(handler)

    return _make


@pytest.fixture
def make_relay(relay_config: RelayConfig) -> Callable[..., ConversionRelay]:
    def _make(upstream: StubUpstream, config: Optional[RelayConfig] = None) -> ConversionRelay:
        return ConversionRelay(config or relay_config, transport=upstream.transport())

    return _make


@pytest.fixture
def text_response() -> Callable[..., httpx.Response]:
    return gemini_text_response
