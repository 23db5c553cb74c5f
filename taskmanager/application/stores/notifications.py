"""Client-side state holder for the viewer's notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import replace

from taskmanager.application.session import AuthSession, auth_session
from taskmanager.config import Settings, get_settings
from taskmanager.domain.entities import (
    Notification,
    NotificationFilter,
    NotificationQuery,
    count_unread,
)
from taskmanager.domain.repositories import NotificationRepository
from taskmanager.infrastructure.repositories import make_notifications_repository
from taskmanager.utils import now_in_app_timezone

logger = logging.getLogger(__name__)

ViewerResolver = Callable[[], str | None]


class NotificationsStore:
    """Mediate between screens and a :class:`NotificationRepository`.

    The store keeps the last listing in memory and patches it locally after
    read transitions instead of fetching it again. Calls are neither locked
    nor de-duplicated: when two ``load`` calls overlap, the one that finishes
    last replaces ``items``.
    """

    def __init__(
        self,
        repository: NotificationRepository,
        viewer_resolver: ViewerResolver | None = None,
    ) -> None:
        self.repository = repository
        self._viewer_resolver = viewer_resolver or auth_session.viewer_user_id
        self.items: list[Notification] = []
        self.is_loading = False
        self.error: str | None = None
        self.query = NotificationFilter()
        self.unread_count = 0

    def viewer_user_id(self) -> str | None:
        return self._viewer_resolver()

    async def load(self) -> None:
        """Fetch the viewer's notifications, recording failures in ``error``."""

        self.is_loading = True
        self.error = None
        try:
            query = NotificationQuery.for_viewer(self.viewer_user_id(), self.query)
            items = await self.repository.list(query)
        except Exception as exc:
            logger.warning("Failed to load notifications: %s", exc)
            self.error = str(exc) or "Unknown error"
            self.is_loading = False
            return

        self.items = list(items)
        self.unread_count = count_unread(self.items)
        self.is_loading = False

    def set_query(self, **changes: object) -> None:
        """Merge ``changes`` into the held filter; call :meth:`load` to apply."""

        self.query = replace(self.query, **changes)

    async def mark_read(self, notification_id: str) -> None:
        viewer_user_id = self.viewer_user_id()
        await self.repository.mark_read(notification_id)

        now = now_in_app_timezone()
        self.items = [
            replace(n, is_read=True, read_at=n.read_at or now)
            if n.id == notification_id and not n.is_read
            else n
            for n in self.items
        ]
        self.unread_count = count_unread(self.items)

        if not viewer_user_id:
            await self.load()

    async def mark_all_read(self) -> None:
        viewer_user_id = self.viewer_user_id()
        if not viewer_user_id:
            return

        await self.repository.mark_all_read(viewer_user_id)

        now = now_in_app_timezone()
        self.items = [
            n if n.is_read else replace(n, is_read=True, read_at=n.read_at or now)
            for n in self.items
        ]
        self.unread_count = 0


def create_notifications_store(
    settings: Settings | None = None, session: AuthSession | None = None
) -> NotificationsStore:
    """Build the store for ``session`` with the repository chosen by ``settings``."""

    settings = settings or get_settings()
    session = session or auth_session
    repository = make_notifications_repository(
        settings, access_token_provider=session.current_access_token
    )
    return NotificationsStore(repository, viewer_resolver=session.viewer_user_id)


__all__ = ["NotificationsStore", "ViewerResolver", "create_notifications_store"]
