from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends

from tailwind_relay.config.settings import settings
from tailwind_relay.models.api_requests import ConvertRequest
from tailwind_relay.models.api_responses import (
    ConversionResponse,
    ErrorResponse,
    HealthResponse,
)
from tailwind_relay.services.conversion_relay import ConversionRelay

router = APIRouter(tags=["convert"])
logger = logging.getLogger(__name__)

_relay_instance: Optional[ConversionRelay] = None


# -----------------------------------------------------------
# Dependency for relay
# -----------------------------------------------------------
def get_relay() -> ConversionRelay:
    global _relay_instance
    if _relay_instance is None:
        _relay_instance = ConversionRelay(settings.to_relay_config())
    return _relay_instance


# -----------------------------------------------------------
# POST /convert
# -----------------------------------------------------------
@router.post(
    "/convert",
    response_model=ConversionResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def convert_endpoint(
    request: Optional[ConvertRequest] = None,
    relay: ConversionRelay = Depends(get_relay),
):
    """
    Convert CSS to Tailwind classes.
    An empty or null body counts as a missing cssCode.
    ConversionError subclasses are turned into JSON errors by the app-level handler.
    """
    css_code = request.cssCode if request is not None else None
    result = await relay.convert(css_code)
    return ConversionResponse(output=result.output, analysis=result.analysis)


@router.get("/health", response_model=HealthResponse)
async def health_endpoint():
    return HealthResponse(status="ok", api_key_configured=settings.api_key_configured)
