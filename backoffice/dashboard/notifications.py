"""User-facing toast notifications.

The dashboard never lets a remote error escape to the caller; it turns it
into a notification here instead.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

logger = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass
class Notification:
    level: NotificationLevel
    message: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier:
    """Collects notifications in order; a UI renders ``history``."""

    def __init__(self) -> None:
        self.history: list[Notification] = []

    def _push(self, level: NotificationLevel, message: str) -> Notification:
        notification = Notification(level=level, message=message)
        self.history.append(notification)
        log = logger.warning if level is NotificationLevel.ERROR else logger.info
        log("[%s] %s", level.value, message)
        return notification

    def success(self, message: str) -> Notification:
        return self._push(NotificationLevel.SUCCESS, message)

    def error(self, message: str) -> Notification:
        return self._push(NotificationLevel.ERROR, message)

    def info(self, message: str) -> Notification:
        return self._push(NotificationLevel.INFO, message)

    @property
    def last(self) -> Notification | None:
        return self.history[-1] if self.history else None
