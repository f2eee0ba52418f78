"""Notification queue owned by a view, with time-boxed expiry.

The queue is plain state: callers create one and hand it to whatever renders
it. Expiry is evaluated against an injected clock whenever notifications are
read, so there are no background timers to tear down.
"""

from __future__ import annotations

import logging
import time
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

from cricauction.config import DEFAULT_SETTINGS


logger = logging.getLogger(__name__)


class NotificationType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"
    WARNING = "warning"


class EventKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"
    EXPIRED = "expired"
    CLEARED = "cleared"


@dataclass(frozen=True)
class Notification:
    id: str
    message: str
    type: NotificationType
    duration: float
    position: str
    created_at: float

    @property
    def expires_at(self) -> Optional[float]:
        if self.duration <= 0:
            return None
        return self.created_at + self.duration


@dataclass(frozen=True)
class NotificationEvent:
    kind: EventKind
    notification_id: Optional[str]
    at: float


class NotificationQueue:
    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.monotonic,
        default_duration: float = DEFAULT_SETTINGS.notification_timeout,
    ) -> None:
        self._clock = clock
        self._default_duration = default_duration
        self._items: List[Notification] = []
        self._events: List[NotificationEvent] = []

    @property
    def events(self) -> Tuple[NotificationEvent, ...]:
        """Append-only history of everything that happened to the queue."""

        return tuple(self._events)

    def __len__(self) -> int:
        return len(self.active())

    def _record(self, kind: EventKind, notification_id: Optional[str], at: float) -> None:
        self._events.append(NotificationEvent(kind=kind, notification_id=notification_id, at=at))

    def add(
        self,
        message: str = "Notification",
        notification_type: NotificationType = NotificationType.INFO,
        *,
        duration: Optional[float] = None,
        position: str = "top-right",
    ) -> str:
        now = self._clock()
        notification = Notification(
            id=uuid.uuid4().hex[:12],
            message=message or "Notification",
            type=NotificationType(notification_type),
            duration=self._default_duration if duration is None else duration,
            position=position,
            created_at=now,
        )
        self._items.append(notification)
        self._record(EventKind.ADDED, notification.id, now)
        return notification.id

    def success(self, message: str, **options) -> str:
        return self.add(message, NotificationType.SUCCESS, **options)

    def error(self, message: str, **options) -> str:
        return self.add(message, NotificationType.ERROR, **options)

    def info(self, message: str, **options) -> str:
        return self.add(message, NotificationType.INFO, **options)

    def warning(self, message: str, **options) -> str:
        return self.add(message, NotificationType.WARNING, **options)

    def remove(self, notification_id: str) -> bool:
        for index, notification in enumerate(self._items):
            if notification.id == notification_id:
                del self._items[index]
                self._record(EventKind.REMOVED, notification_id, self._clock())
                return True
        return False

    def clear(self) -> None:
        self._items.clear()
        self._record(EventKind.CLEARED, None, self._clock())

    def expire(self) -> List[Notification]:
        """Evict every expired notification, oldest first, and return them."""

        now = self._clock()
        expired: List[Notification] = []
        kept: List[Notification] = []
        for notification in self._items:
            deadline = notification.expires_at
            if deadline is not None and deadline <= now:
                expired.append(notification)
                self._record(EventKind.EXPIRED, notification.id, now)
            else:
                kept.append(notification)
        if expired:
            logger.debug("Expired %s notification(s)", len(expired))
        self._items = kept
        return expired

    def active(self) -> List[Notification]:
        self.expire()
        return list(self._items)
