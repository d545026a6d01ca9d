"""
Application configuration.
All settings are loaded from environment variables (or .env).
Every field has a working default so the service boots for local previews.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    """

    # ===========================================
    # APPLICATION
    # ===========================================
    app_env: str = "local"
    # Comma-separated list; empty = default list in main.py.
    cors_origins: str = ""

    # ===========================================
    # DATABASE
    # ===========================================
    database_url: str = "sqlite:///./preview_gate.db"
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_pool_recycle: int = 1800  # recycle connections every 30 min (avoid stale)

    # ===========================================
    # PREVIEW ROUTES
    # ===========================================
    # Admin SPA base; editor links are {admin_url}#/editor/{type}/{id}
    admin_url: str = "/ghost/"
    # Sent email-only posts retire to {email_archive_prefix}{uuid}/
    email_archive_prefix: str = "/email/"
    # Split point inside post html; everything after it is behind the paywall.
    members_only_marker: str = "<!--members-only-->"

    # ===========================================
    # PAYWALL
    # ===========================================
    # Tier that free members hold; a tier gate naming it is open to free members.
    free_tier_slug: str = "free"

    # ===========================================
    # CACHE CONTROL
    # ===========================================
    cache_control_year: str = "public, max-age=31536000"
    cache_control_no_cache: str = (
        "no-cache, private, no-store, must-revalidate, max-stale=0, post-check=0, pre-check=0"
    )
    cache_control_private: str = "private, no-cache, no-store, must-revalidate"

    # ===========================================
    # SERVER
    # ===========================================
    uvicorn_host: str = "0.0.0.0"
    uvicorn_port: int = 8000
    uvicorn_workers: int = 2

    # ===========================================
    # LOGGING
    # ===========================================
    request_id_header: str = "X-Request-Id"
    log_level: str = "INFO"
    log_file: str | None = None
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5

    @field_validator("admin_url")
    @classmethod
    def ensure_admin_trailing_slash(cls, v: str) -> str:
        """Editor links are appended after the admin root."""
        v = v.strip() or "/ghost/"
        return v if v.endswith("/") else f"{v}/"

    @field_validator("email_archive_prefix")
    @classmethod
    def normalize_archive_prefix(cls, v: str) -> str:
        v = "/" + v.strip().strip("/")
        return f"{v}/" if v != "/" else v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper().strip()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"log_level must be a standard logging level, got {v!r}")
        return level

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
