from .base import Base
from .session import engine, async_session_factory, get_db_session
from . import models  # noqa: F401  (registers every table on Base.metadata)

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "get_db_session",
]
