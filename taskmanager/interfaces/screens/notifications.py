"""Presentation logic for the notifications screen and the header bell."""

from __future__ import annotations

from dataclasses import dataclass

from taskmanager.application.stores import NotificationsStore
from taskmanager.domain.entities import Notification
from taskmanager.utils import ensure_app_timezone

DATETIME_LABEL_FORMAT = "%d/%m/%Y %H:%M"


@dataclass(frozen=True)
class NotificationRow:
    """Display values for one entry of the list."""

    id: str
    title: str
    body: str | None
    is_unread: bool
    created_label: str


def format_created_label(notification: Notification) -> str:
    created_at = ensure_app_timezone(notification.created_at)
    return created_at.strftime(DATETIME_LABEL_FORMAT) if created_at else ""


class NotificationsScreen:
    """Drive the notifications list from a :class:`NotificationsStore`."""

    def __init__(self, store: NotificationsStore) -> None:
        self.store = store

    async def open(self) -> None:
        await self.store.load()

    async def refresh(self) -> None:
        """Pull-to-refresh handler."""

        await self.store.load()

    @property
    def rows(self) -> list[NotificationRow]:
        return [
            NotificationRow(
                id=n.id,
                title=n.title,
                body=n.body or None,
                is_unread=not n.is_read,
                created_label=format_created_label(n),
            )
            for n in self.store.items
        ]

    @property
    def subtitle(self) -> str:
        unread = self.store.unread_count
        return f"{unread} unread" if unread > 0 else "All read"

    @property
    def show_mark_all(self) -> bool:
        return self.store.unread_count > 0

    @property
    def show_empty_state(self) -> bool:
        return not self.store.is_loading and not self.store.items

    @property
    def error(self) -> str | None:
        return self.store.error

    async def press(self, notification_id: str) -> str | None:
        """Handle a tap on a row and return the task to navigate to, if any."""

        notification = next(
            (n for n in self.store.items if n.id == notification_id), None
        )
        if notification is None:
            return None
        if not notification.is_read:
            await self.store.mark_read(notification_id)
        return notification.task_id

    async def mark_all(self) -> None:
        await self.store.mark_all_read()


class NotificationBell:
    """Header button that flags unread notifications."""

    def __init__(self, store: NotificationsStore) -> None:
        self.store = store

    @property
    def has_badge(self) -> bool:
        return self.store.unread_count > 0


__all__ = [
    "DATETIME_LABEL_FORMAT",
    "NotificationBell",
    "NotificationRow",
    "NotificationsScreen",
    "format_created_label",
]
