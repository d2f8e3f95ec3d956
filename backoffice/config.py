import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Logistics Back-Office API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./backoffice.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100

    # Dashboard client (talks to the API above)
    api_base_url: str = "http://localhost:8020/api/v1"
    read_retries: int = 2
    request_timeout: float = 15.0
    export_dir: str = "exports"

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore: outbound HTTP
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_services: str = "INFO"         # backoffice.application: mutation audit lines
    log_level_dashboard: str = "INFO"        # backoffice.dashboard view models, CSV export

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Clamp pagination settings so a bad .env cannot produce empty pages."""
        if self.max_page_size < 1:
            _config_logger.warning(
                "max_page_size=%s is invalid, falling back to 100", self.max_page_size
            )
            object.__setattr__(self, "max_page_size", 100)
        if not 1 <= self.default_page_size <= self.max_page_size:
            _config_logger.warning(
                "default_page_size=%s outside 1..%s, clamping",
                self.default_page_size,
                self.max_page_size,
            )
            clamped = min(max(self.default_page_size, 1), self.max_page_size)
            object.__setattr__(self, "default_page_size", clamped)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
