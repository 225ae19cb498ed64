from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Opstrack API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Storage — "memory" keeps everything in process, "sql" uses database_url
    storage_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite:///data/opstrack.db"

    # Audit trail — actor recorded when a request names none
    default_actor_id: int = 1

    # Administrator account created at startup
    seed_admin_user: bool = True
    admin_username: str = "admin"
    admin_password: str = "admin123"
    admin_email: str = "admin@example.com"
    bcrypt_rounds: int = 12

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_audit: str = "INFO"            # audit trail and mutation services

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
