"""Configuration management for RDF MUD."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.rdf import RDFFormat


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="RDF_MUD_",
    )

    # Vocabulary
    entity_base_uri: str = Field(default="http://example.org/game/")
    mud_namespace: str = Field(default="http://example.org/mud#")

    # Serialization
    default_format: RDFFormat = Field(default="turtle")

    # Logging
    log_level: str = Field(default="WARNING")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
