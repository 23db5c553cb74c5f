"""Row representation for the ``notifications`` table."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel

from taskmanager.domain.entities import Notification
from taskmanager.utils import ensure_app_timezone

NOTIFICATIONS_TABLE = "notifications"

NOTIFICATION_COLUMNS: tuple[str, ...] = (
    "id",
    "recipient_user_id",
    "sender_user_id",
    "title",
    "body",
    "data",
    "is_read",
    "read_at",
    "created_at",
    "updated_at",
)


class NotificationRecord(BaseModel):
    """Database representation for notifications as returned by PostgREST."""

    id: str
    recipient_user_id: str
    sender_user_id: str | None = None
    title: str
    body: str | None = None
    data: Any = None
    is_read: bool = False
    read_at: datetime | None = None
    created_at: datetime
    updated_at: datetime

    def to_entity(self) -> Notification:
        return Notification(
            id=self.id,
            recipient_user_id=self.recipient_user_id,
            sender_user_id=self.sender_user_id,
            title=self.title,
            body=self.body,
            data=self.data if isinstance(self.data, dict) else None,
            is_read=self.is_read,
            read_at=ensure_app_timezone(self.read_at),
            created_at=ensure_app_timezone(self.created_at),
            updated_at=ensure_app_timezone(self.updated_at),
        )


def select_clause() -> str:
    """Return the ``select`` parameter listing every mapped column."""

    return ",".join(NOTIFICATION_COLUMNS)


__all__ = [
    "NOTIFICATIONS_TABLE",
    "NOTIFICATION_COLUMNS",
    "NotificationRecord",
    "select_clause",
]
