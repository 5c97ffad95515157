from typing import Optional
from pydantic import BaseModel


class ConversionResponse(BaseModel):
    output: str
    analysis: str


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    api_key_configured: bool
