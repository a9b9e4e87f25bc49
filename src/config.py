"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite+aiosqlite:///./rides.db"
    database_echo: bool = False
    pool_size: int = 20  # ignored for SQLite
    max_overflow: int = 10
    store_timeout_seconds: float = 5.0

    # Pagination
    default_page_limit: int = 5
    max_page_limit: int = 100

    # Rate limiting
    rate_limit: str = "100/minute"
    rate_limit_enabled: bool = True

    # Server
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8010

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
