"""Capability interfaces implemented by the infrastructure repositories."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from taskmanager.domain.entities import Notification, NotificationQuery, PushToken


@runtime_checkable
class NotificationRepository(Protocol):
    """Read-state access to the notifications addressed to one viewer."""

    async def list(self, query: NotificationQuery | None = None) -> list[Notification]:
        """Return the viewer's notifications, newest first.

        A query without ``viewer_user_id`` yields an empty list.
        """
        ...

    async def mark_read(self, notification_id: str) -> None:
        """Mark one notification as read; unknown identifiers are ignored."""
        ...

    async def mark_all_read(self, viewer_user_id: str) -> None:
        """Mark every unread notification of ``viewer_user_id`` as read."""
        ...


@runtime_checkable
class PushTokenRepository(Protocol):
    """Lookup of the devices registered for a user."""

    async def list_for_user(self, user_id: str) -> list[PushToken]:
        ...


__all__ = ["NotificationRepository", "PushTokenRepository"]
