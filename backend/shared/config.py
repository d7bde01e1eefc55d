"""
Centralized configuration for the PV Market backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings should be namespaced (e.g., SUPABASE_*, OAUTH_*).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "PV Market API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type", "Authorization", "x-api-key"]

    # Supabase
    supabase_url: str = ""
    supabase_service_role_key: str = ""

    # Local credentials (bearer tokens)
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expiry_days: int = 7
    bcrypt_rounds: int = 12

    # OAuth users service (cookie sessions)
    oauth_service_api_url: str = ""
    oauth_service_api_key: str = ""
    oauth_provider: str = "google"
    session_cookie_name: str = "mocha_session_token"
    session_cookie_max_age: int = 60 * 24 * 60 * 60  # 60 days, in seconds
    external_request_timeout: float = 10.0

    # Transactional email
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com/emails"
    inquiry_from_email: str = "PV Market <noreply@pvmarket.no>"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
