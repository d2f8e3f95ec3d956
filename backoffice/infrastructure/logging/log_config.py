"""Per-category log levels for the API process and the dashboard client.

Each Settings field below owns a group of loggers, so the mutation audit
trail (services) can stay at INFO while SQL or HTTP chatter is silenced.

Usage:
    from backoffice.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan or a dashboard script
"""

import logging
import sys

from backoffice.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> logger names it controls.
_CATEGORY_MAP: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    # create/update/delete/stock-booking audit lines
    "log_level_services": ("backoffice.application", "backoffice.presentation"),
    # retries, dropped rows, skipped export rows, late responses
    "log_level_dashboard": ("backoffice.dashboard", "backoffice.reporting"),
}


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels and return them keyed by logger name.

    Safe to call more than once; a stderr handler is only added while the
    root logger has none.
    """
    settings = settings or get_settings()
    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field_name, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s %s",
        settings.log_level,
        " ".join(f"{f.removeprefix('log_level_')}={getattr(settings, f)}" for f in _CATEGORY_MAP),
    )
    return applied


def _parse_level(raw: str) -> int:
    """Level name to logging constant; unknown names fall back to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
