"""
Centralized configuration for the Profile Hub backend.

All settings are loaded from environment variables with sensible defaults.
Settings are read once at startup and handed to the service container;
nothing below the API layer calls get_settings() on its own.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Profile Hub API"
    app_version: str = "0.1.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "info"

    # Server
    host: str = "0.0.0.0"
    port: int = 3000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:5174"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Tokens
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7

    # Passwords
    bcrypt_rounds: int = 10

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""
    users_table: str = "users"

    # Cloudinary (profile pictures)
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    cloudinary_folder: str = "profile_pics"
    upload_timeout_seconds: float = 15.0
    max_picture_bytes: int = 5 * 1024 * 1024
    allowed_picture_types: list[str] = ["image/jpeg", "image/png", "image/webp"]

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Refuse to boot production with the placeholder signing secret."""
        if self.is_production and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
