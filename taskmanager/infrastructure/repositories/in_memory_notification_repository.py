"""In-process notification storage used for demos, offline runs and tests."""

from __future__ import annotations

from collections.abc import Iterable

from taskmanager.domain.entities import Notification, NotificationQuery
from taskmanager.utils import now_in_app_timezone

DEMO_VIEWER_ID = "demo"


def _demo_seed() -> list[Notification]:
    now = now_in_app_timezone()
    return [
        Notification(
            id="n_demo_1",
            recipient_user_id=DEMO_VIEWER_ID,
            title="Welcome",
            body="Your notifications will show up here.",
            is_read=False,
            created_at=now,
            updated_at=now,
        )
    ]


class InMemoryNotificationRepository:
    """Keep notifications in a list owned by the repository instance."""

    def __init__(self, seed: Iterable[Notification] | None = None) -> None:
        self._items: list[Notification] = list(seed) if seed is not None else _demo_seed()

    async def list(self, query: NotificationQuery | None = None) -> list[Notification]:
        viewer_user_id = query.viewer_user_id if query else None
        if not viewer_user_id:
            return []

        items = [n for n in self._items if n.recipient_user_id == viewer_user_id]
        if query.only_unread:
            items = [n for n in items if not n.is_read]
        items.sort(key=lambda n: n.created_at, reverse=True)
        if query.limit:
            items = items[: query.limit]
        return items

    async def mark_read(self, notification_id: str) -> None:
        now = now_in_app_timezone()
        self._items = [
            n.marked_read(now) if n.id == notification_id else n for n in self._items
        ]

    async def mark_all_read(self, viewer_user_id: str) -> None:
        now = now_in_app_timezone()
        self._items = [
            n.marked_read(now)
            if n.recipient_user_id == viewer_user_id and not n.is_read
            else n
            for n in self._items
        ]

    def add(self, notification: Notification) -> None:
        """Store ``notification`` as if an external writer had inserted it."""

        self._items.append(notification)


__all__ = ["DEMO_VIEWER_ID", "InMemoryNotificationRepository"]
