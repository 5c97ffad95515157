from __future__ import annotations

from typing import Any, Dict, Optional


class ConversionError(Exception):
    """
    Base class for every failure the relay reports to its caller.
    Each subclass maps to exactly one HTTP status and a short client message.
    """

    status_code: int = 500
    default_message: str = "Internal server error."

    def __init__(self, message: Optional[str] = None, details: Optional[str] = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ValidationError(ConversionError):
    status_code = 400
    default_message = "Missing CSS code in request body."


class ConfigurationError(ConversionError):
    status_code = 500
    default_message = "Server API Key not configured. Check your .env file."


class UpstreamTransportError(ConversionError):
    status_code = 500
    default_message = "Internal server error during API call. Check server connectivity."


class UpstreamAPIError(ConversionError):
    def __init__(self, status_code: int, reason: str = "", details: Optional[str] = None) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(
            f"Google API error: {reason or status_code}. Please check the server logs.",
            details if details is not None else "Unknown API error.",
        )


class EmptyResponseError(ConversionError):
    status_code = 500
    default_message = "AI response was empty."


class MalformedOutputError(ConversionError):
    status_code = 500
    default_message = "AI generated malformed JSON. Try simplifying the CSS."
