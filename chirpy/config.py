"""Configuration management for the application."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./chirpy.db")

    # "dev" unlocks the admin reset endpoint
    platform: str = Field(default="")

    # Credentials
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)
    password_min_length: int = Field(default=0, ge=0)  # 0 disables the check

    # Chirps
    chirp_max_length: int = Field(default=140, gt=0)
    profane_words: list[str] = Field(default=["kerfuffle", "sharbert", "fornax"])

    # Static files served under /app and /assets
    static_dir: Path = Field(default=PACKAGE_DIR / "static")

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has safe settings."""
        if self.environment == "production" and self.is_dev_platform:
            raise ValueError("PLATFORM=dev is not allowed in production")
        return self

    @property
    def is_dev_platform(self) -> bool:
        """Check if destructive admin operations are allowed."""
        return self.platform == "dev"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
