# Subset of the Gemini generateContent response that the relay reads.
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, StrictStr


class _LenientModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


class Part(_LenientModel):
    text: Optional[str] = None


class Content(_LenientModel):
    parts: List[Part] = Field(default_factory=list)


class Candidate(_LenientModel):
    content: Optional[Content] = None


class GenerateContentResponse(_LenientModel):
    candidates: List[Candidate] = Field(default_factory=list)


class GeminiErrorDetail(_LenientModel):
    message: Optional[str] = None


class GeminiErrorBody(_LenientModel):
    error: Optional[GeminiErrorDetail] = None


class TailwindConversion(BaseModel):
    """What the model is asked to emit. Both fields are required strings."""
    output: StrictStr
    analysis: StrictStr
