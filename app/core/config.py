"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (e.g. DATABASE_URL, SECRET_KEY) are
validated at load time.
"""

from functools import lru_cache

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except those validated in
    validate_required (secret_key always; database_url for postgres).
    """

    # App
    app_name: str = "policyvault"
    app_version: str = "1.0.0"
    debug: bool = False

    # Record store: "postgres" (SQLAlchemy + Alembic) or "memory" (in-process, dev/tests)
    database_backend: str = "postgres"
    database_url: str = ""
    database_echo: bool = False
    # Memory backend only: optional JSON file with policies/claims/documents
    memory_seed_path: str | None = None
    # Optional pool/driver overrides (None = use defaults in database.py)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    db_command_timeout: int | None = None

    # Security
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # CORS
    allowed_origins: str = "http://localhost:3000"

    # Request / middleware
    request_timeout_seconds: int = 30
    request_id_header: str = "X-Request-ID"

    # Global search
    search_default_page_size: int = 20
    search_max_page_size: int = 100
    search_rate_limit: str = "60/minute"
    rate_limit_enabled: bool = True
    # False keeps the capped merge window (page_size per kind; later pages
    # are approximate). True fetches skip + page_size per kind so every
    # multi-kind page is exact.
    search_exact_multi_kind_pagination: bool = False

    # Faceted filters
    filter_default_page_size: int = 10
    filter_max_page_size: int = 100

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate required env and backend selection.

        - Postgres: DATABASE_URL required.
        - Memory: nothing else required (records live in process).
        """
        if self.database_backend == "postgres":
            if not self.database_url:
                raise ValueError(
                    "DATABASE_URL is required when database_backend is 'postgres'. "
                    "Set in environment or .env file."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'postgres' or 'memory', got: {self.database_backend!r}"
            )
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required. Generate with: openssl rand -hex 32."
            )
        if self.search_default_page_size > self.search_max_page_size:
            raise ValueError(
                "search_default_page_size must not exceed search_max_page_size"
            )
        if self.filter_default_page_size > self.filter_max_page_size:
            raise ValueError(
                "filter_default_page_size must not exceed filter_max_page_size"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
