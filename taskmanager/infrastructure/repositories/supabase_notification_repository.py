"""Persistence helpers for notifications stored in the Supabase table."""

from __future__ import annotations

from taskmanager.domain.entities import Notification, NotificationQuery
from taskmanager.infrastructure.models import (
    NOTIFICATIONS_TABLE,
    NotificationRecord,
    select_clause,
)
from taskmanager.infrastructure.supabase import SupabaseRestClient
from taskmanager.utils import now_in_app_timezone

_PATH = f"/rest/v1/{NOTIFICATIONS_TABLE}"


class SupabaseNotificationRepository:
    """Read and update notification rows through PostgREST."""

    def __init__(self, client: SupabaseRestClient) -> None:
        self.client = client

    async def list(self, query: NotificationQuery | None = None) -> list[Notification]:
        viewer_user_id = query.viewer_user_id if query else None
        if not viewer_user_id:
            return []

        params: dict[str, str | None] = {
            "select": select_clause(),
            "recipient_user_id": f"eq.{viewer_user_id}",
            "is_read": "eq.false" if query.only_unread else None,
            "order": "created_at.desc",
            "limit": str(query.limit) if query.limit else None,
        }
        rows = await self.client.request("GET", _PATH, query=params)
        return [NotificationRecord.model_validate(row).to_entity() for row in rows or []]

    async def mark_read(self, notification_id: str) -> None:
        # Rows that are already read are excluded so read_at keeps its first value.
        await self.client.request(
            "PATCH",
            _PATH,
            query={"id": f"eq.{notification_id}", "is_read": "eq.false"},
            body=self._read_patch(),
        )

    async def mark_all_read(self, viewer_user_id: str) -> None:
        await self.client.request(
            "PATCH",
            _PATH,
            query={"recipient_user_id": f"eq.{viewer_user_id}", "is_read": "eq.false"},
            body=self._read_patch(),
        )

    @staticmethod
    def _read_patch() -> dict[str, object]:
        now = now_in_app_timezone().isoformat()
        return {"is_read": True, "read_at": now, "updated_at": now}


__all__ = ["SupabaseNotificationRepository"]
