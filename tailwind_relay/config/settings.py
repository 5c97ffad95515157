from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from typing import List, Optional

from tailwind_relay.domain.conversion_models import RelayConfig
from tailwind_relay.prompts.prompt_registry import PromptRegistry

SYSTEM_PROMPT_ID = "css_to_tailwind"
SYSTEM_PROMPT_VERSION = "v1"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    # Google Gemini
    GEMINI_API_KEY: Optional[str] = None
    GEMINI_MODEL: str = "gemini-2.5-flash-preview-09-2025"
    GEMINI_API_BASE: str = "https://generativelanguage.googleapis.com/v1beta"
    GEMINI_TIMEOUT_SECONDS: float = 60.0

    # HTTP server
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]

    # Local paths
    STATIC_DIR: Path = Path(__file__).resolve().parents[2] / "public"

    @field_validator("GEMINI_API_BASE")
    @classmethod
    def _check_api_base(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("GEMINI_API_BASE must be an http(s) URL")
        return value

    @property
    def api_key_configured(self) -> bool:
        return bool(self.GEMINI_API_KEY and self.GEMINI_API_KEY.strip())

    def to_relay_config(self) -> RelayConfig:
        """Freeze the values the relay needs, including the system instruction."""
        if not PromptRegistry.is_loaded():
            PromptRegistry.load()
        prompt = PromptRegistry.get(SYSTEM_PROMPT_ID, SYSTEM_PROMPT_VERSION)

        return RelayConfig(
            api_key=self.GEMINI_API_KEY,
            model=self.GEMINI_MODEL,
            api_base=self.GEMINI_API_BASE.rstrip("/"),
            system_instruction=prompt["messages"]["system"],
            timeout_seconds=self.GEMINI_TIMEOUT_SECONDS,
        )


settings = Settings()
