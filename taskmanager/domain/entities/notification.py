"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any


@dataclass
class Notification:
    """Information message delivered to a specific recipient."""

    id: str
    recipient_user_id: str
    title: str
    created_at: datetime
    updated_at: datetime
    sender_user_id: str | None = None
    body: str | None = None
    data: dict[str, Any] | None = None
    is_read: bool = False
    read_at: datetime | None = None

    def marked_read(self, now: datetime) -> "Notification":
        """Return a copy transitioned to read.

        ``read_at`` is only stamped on the first transition.
        """

        return replace(
            self,
            is_read=True,
            read_at=self.read_at or now,
            updated_at=now,
        )

    @property
    def task_id(self) -> str | None:
        """Identifier of the task referenced by ``data``, if any."""

        if not isinstance(self.data, dict):
            return None
        value = self.data.get("task_id")
        return str(value) if value else None


@dataclass
class NotificationFilter:
    """Listing options held by clients, independent of the viewer."""

    only_unread: bool = False
    limit: int | None = None

    def __post_init__(self) -> None:
        if self.limit is not None and self.limit < 0:
            raise ValueError(f"limit must be None or >= 0, got {self.limit}")


@dataclass
class NotificationQuery(NotificationFilter):
    """Listing options scoped to the viewer the notifications belong to."""

    viewer_user_id: str | None = None

    @classmethod
    def for_viewer(
        cls, viewer_user_id: str | None, options: NotificationFilter | None = None
    ) -> "NotificationQuery":
        options = options or NotificationFilter()
        return cls(
            only_unread=options.only_unread,
            limit=options.limit,
            viewer_user_id=viewer_user_id,
        )


def count_unread(notifications: list[Notification]) -> int:
    """Return how many ``notifications`` are still unread."""

    return sum(1 for notification in notifications if not notification.is_read)


__all__ = [
    "Notification",
    "NotificationFilter",
    "NotificationQuery",
    "count_unread",
]
