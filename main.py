from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi import FastAPI, Request
import logging

import uvicorn

from tailwind_relay.api.routes import router as convert_router
from tailwind_relay.config.settings import settings
from tailwind_relay.domain.errors import ConversionError, UpstreamTransportError
from tailwind_relay.prompts.prompt_registry import PromptRegistry

# Configure root logging once
logging.basicConfig(
    level=logging.INFO,
    format="[%(asctime)s] %(levelname)s - %(name)s - %(message)s",
)

logger = logging.getLogger(__name__)
logger.info("CSS to Tailwind relay starting up")

# System instruction is read once, before the first request
PromptRegistry.load()

app = FastAPI(title="CSS to Tailwind Relay")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConversionError)
async def conversion_error_handler(request: Request, exc: ConversionError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request body.", "details": str(exc.errors())},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s", request.url.path)
    return JSONResponse(
        status_code=500,
        content={"error": UpstreamTransportError.default_message},
    )


# Register routers
app.include_router(convert_router)

# Static front end (index.html) lives next to the API, mounted last so routes win
if settings.STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")

if not settings.api_key_configured:
    logger.warning("GEMINI_API_KEY is not set; /convert will answer 500 until it is")

logger.info("Routers registered and FastAPI app ready")


if __name__ == "__main__":
    logger.info("Server is running at http://localhost:%d", settings.PORT)
    logger.info("Open http://localhost:%d/index.html in your browser.", settings.PORT)
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT)
