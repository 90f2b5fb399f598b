"""
Configuration module for the API demo service.
Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings
from pydantic import Field
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    port: int = Field(default=3000, alias="PORT")
    host: str = Field(default="0.0.0.0", alias="HOST")

    # Browser launch
    open_browser: bool = Field(default=True, alias="OPEN_BROWSER")
    browser_delay: float = Field(default=1.0, alias="BROWSER_DELAY")  # seconds

    # Logging
    log_level: str = Field(default="info", alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        case_sensitive = False

    @property
    def base_url(self) -> str:
        return f"http://localhost:{self.port}"

    @property
    def docs_url(self) -> str:
        return f"{self.base_url}/api-docs"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
