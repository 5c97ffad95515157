from dataclasses import dataclass
from typing import Any, Dict, Optional

# Structured-output schema sent with every request (Gemini OpenAPI subset).
RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "output": {"type": "STRING", "description": "The converted Tailwind classes."},
        "analysis": {"type": "STRING", "description": "One-sentence explanation of the conversion."},
    },
    "required": ["output", "analysis"],
}


@dataclass(frozen=True)
class RelayConfig:
    """
    Read-only configuration handed to the relay at construction time.
    Built once from settings at startup; tests build their own.
    """
    api_key: Optional[str]
    model: str
    api_base: str
    system_instruction: str
    timeout_seconds: float = 60.0

    @property
    def endpoint(self) -> str:
        # The key is passed separately as a query parameter.
        return f"{self.api_base}/models/{self.model}:generateContent"


@dataclass(frozen=True)
class ConversionResult:
    output: str
    analysis: str


def build_upstream_payload(css_code: str, system_instruction: str) -> Dict[str, Any]:
    """
    The CSS goes in as the only content part. The instruction travels in
    systemInstruction so the model can tell rules apart from data.
    """
    return {
        "contents": [{"parts": [{"text": css_code}]}],
        "systemInstruction": {"parts": [{"text": system_instruction}]},
        "generationConfig": {
            "responseMimeType": "application/json",
            "responseSchema": RESPONSE_SCHEMA,
        },
    }
