"""
Application configuration settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore", populate_by_name=True
    )

    # Application
    app_name: str = Field("Prompt Relay", alias="APP_NAME")

    # Environment
    environment: str = Field("development", alias="ENVIRONMENT")
    debug: bool = Field(False, alias="DEBUG")

    # Server
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT")

    # Gemini/LLM
    google_api_key: str = Field("", alias="GOOGLE_API_KEY")
    gemini_model: str = Field("gemini-2.0-flash", alias="GEMINI_MODEL")
    llm_provider: Literal["gemini", "mock"] = Field("gemini", alias="LLM_PROVIDER")

    # Prompt template
    prompt_template: str = Field("{prompt}", alias="PROMPT")
    prompt_marker: str = Field("{prompt}", alias="PROMPT_MARKER")

    # CORS
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    # Logging
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: str = Field("json", alias="LOG_FORMAT")

    def get_cors_origins(self) -> list[str]:
        """Parse CORS origins from string."""
        if self.cors_origins == "*":
            return ["*"]
        return [
            origin.strip() for origin in self.cors_origins.split(",") if origin.strip()
        ]


@lru_cache
def get_settings() -> Settings:
    """Get settings instance (useful for dependency injection)."""
    return Settings()
