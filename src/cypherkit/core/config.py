"""Configuration management."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = Field(default="INFO", description="Level applied by setup_logging()")
    log_queries: bool = Field(default=False, description="Include rendered query text in debug logs")

    # Rendering
    sort_properties: bool = Field(
        default=False,
        description="Render pattern properties in key order instead of insertion order",
    )

    model_config = SettingsConfigDict(
        env_prefix="CYPHERKIT_",
        env_file=".env",
        extra="ignore",  # Ignore extra fields in .env file
    )


settings = Settings()
