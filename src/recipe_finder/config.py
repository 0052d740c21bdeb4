"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    mealdb_base_url: str = "https://www.themealdb.com/api/json/v1/1"
    mealdb_timeout_seconds: float = 15
    openai_api_key: str | None = None
    openai_base_url: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    assistant_enabled: bool = True
    shopping_list_path: str = "shopping_list.json"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def assistant_is_available(self) -> bool:
        """Return true when the assistant flag is on and a key is configured."""
        return self.assistant_enabled and bool(self.openai_api_key)
