"""Application configuration using pydantic-settings."""
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LLM_PROVIDERS = ("openai", "gemini")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # CORS - comma-separated list of allowed origins (stored as string, parsed via property)
    cors_origins_str: str = Field(
        default="http://localhost:5173",
        validation_alias="CORS_ORIGINS",
    )

    # Language-model capability used by the /api/ai endpoints
    llm_provider: str = Field(default="gemini", validation_alias="LLM_PROVIDER")
    llm_timeout: float = Field(default=60.0, validation_alias="LLM_TIMEOUT")

    openai_api_key: str = Field(default="", validation_alias="OPENAI_API_KEY")
    openai_model: str = Field(default="gpt-4o", validation_alias="OPENAI_MODEL")
    openai_base_url: str | None = Field(default=None, validation_alias="OPENAI_BASE_URL")

    gemini_api_key: str = Field(default="", validation_alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-pro", validation_alias="GEMINI_MODEL")
    gemini_base_url: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        validation_alias="GEMINI_BASE_URL",
    )

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    # Load the default user, categories and tag vocabulary at startup
    seed_data: bool = Field(default=True, validation_alias="SEED_DATA")

    # Field length limits
    max_title_length: int = Field(default=500, validation_alias="MAX_TITLE_LENGTH")
    max_content_length: int = Field(default=100_000, validation_alias="MAX_CONTENT_LENGTH")
    max_tag_name_length: int = Field(default=100, validation_alias="MAX_TAG_NAME_LENGTH")

    @model_validator(mode="after")
    def validate_llm_provider(self) -> "Settings":
        """Normalize the provider name and reject unknown providers."""
        self.llm_provider = self.llm_provider.lower().strip()
        if self.llm_provider not in LLM_PROVIDERS:
            raise ValueError(
                f"Unknown LLM_PROVIDER '{self.llm_provider}'. "
                f"Expected one of: {', '.join(LLM_PROVIDERS)}.",
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        """Parse comma-separated CORS origins string into a list."""
        if not self.cors_origins_str:
            return []
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
