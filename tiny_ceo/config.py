"""Configuration management using pydantic-settings."""

from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3001, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")
    cors_origins: str = Field(
        default="http://localhost:5173,http://localhost:3000",
        description="Allowed CORS origins (comma separated)"
    )

    # Storage Configuration
    database_path: str = Field(default=":memory:", description="DuckDB database path, ':memory:' for volatile storage")

    # Conversation Configuration
    max_message_length: int = Field(default=5000, description="Maximum length of a chat message")
    reply_seed: Optional[int] = Field(default=None, description="Seed for the reply generator's random source")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[str] = Field(default="./logs/app.log", description="Log file path")

    def get_cors_origins(self) -> List[str]:
        """Get list of allowed CORS origins."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Global settings instance
settings = Settings()
