"""
Application configuration using Pydantic Settings.

Values come from environment variables or a local ``.env`` file.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: Literal["local", "production"] = "local"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # ===========================================
    # Database
    # ===========================================
    DATABASE_URL: str = "sqlite+aiosqlite:///./focus_hub.db"

    # ===========================================
    # Auth
    # ===========================================
    # - mock: bearer token is treated as the caller's email (development only)
    # - firebase: Firebase ID tokens verified against Google's JWKS
    AUTH_PROVIDER: Literal["mock", "firebase"] = "mock"
    FIREBASE_PROJECT_ID: str = ""
    FIREBASE_JWKS_URL: str = (
        "https://www.googleapis.com/service_accounts/v1/jwk/"
        "securetoken@system.gserviceaccount.com"
    )

    # ===========================================
    # LLM Configuration
    # ===========================================
    GOOGLE_API_KEY: str = ""
    GEMINI_MODEL: str = "gemini-2.5-flash"
    QUIZ_QUESTION_COUNT: int = Field(default=5, ge=1, le=50)

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:5173", "https://focus-hub-63922.web.app"]
    )

    # ===========================================
    # Schedule listings
    # ===========================================
    DEFAULT_TIMEZONE: str = "Asia/Dhaka"
    DEFAULT_PAGE: int = Field(default=1, ge=1)
    DEFAULT_PAGE_SIZE: int = Field(default=5, ge=1)

    # Deleting a class historically matched on id only. Set to true to
    # require the caller to own the class, as task deletion does.
    CLASS_DELETE_OWNER_SCOPED: bool = False

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.ENVIRONMENT == "local"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
