"""
Centralized configuration for the Blinkshop backend.

All settings are loaded from environment variables with sensible defaults.
Module-specific settings are namespaced (e.g., SUPABASE_*, CLOUDINARY_*).
Trust-boundary values (keys, secrets, redirect URLs) have no usable defaults
and must be provided per deployment.
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
    app_name: str = "Blinkshop API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8888"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Supabase
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_service_role_key: str = ""
    supabase_jwt_secret: str = ""
    supabase_db_url: str = ""

    # Public site (magic link redirects, checkout URLs)
    site_url: str = "http://localhost:3000"
    auth_confirm_path: str = "/auth-confirm"

    # Authentication freshness
    auth_freshness_days: int = 30
    shortcut_auth_secret: str = ""

    # Cloudinary
    cloudinary_cloud_name: str = ""
    cloudinary_api_key: str = ""
    cloudinary_api_secret: str = ""
    cloudinary_folder: str = "blinkshop-uploads"

    # Shortcut upload limits
    upload_max_images: int = 3
    upload_max_file_size: int = 5 * 1024 * 1024  # bytes per image
    upload_max_total_size: int = 15 * 1024 * 1024  # bytes per request

    @property
    def auth_confirm_url(self) -> str:
        """Absolute URL magic links redirect to after confirmation."""
        return f"{self.site_url.rstrip('/')}{self.auth_confirm_path}"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
