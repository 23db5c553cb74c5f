"""Lookup of registered push devices."""

from __future__ import annotations

from collections.abc import Iterable

from taskmanager.domain.entities import PushToken
from taskmanager.infrastructure.models import (
    PUSH_TOKEN_COLUMNS,
    PUSH_TOKENS_TABLE,
    PushTokenRecord,
)
from taskmanager.infrastructure.supabase import SupabaseRestClient


class PushTokenLookupNotConfigured(RuntimeError):
    """Raised when no backend is configured to resolve push tokens."""


class UnconfiguredPushTokenRepository:
    """Fail every lookup; used when service role credentials are missing."""

    async def list_for_user(self, user_id: str) -> list[PushToken]:
        raise PushTokenLookupNotConfigured("push token lookup is not configured")


class InMemoryPushTokenRepository:
    """Serve push tokens from a fixed collection."""

    def __init__(self, tokens: Iterable[PushToken] | None = None) -> None:
        self._tokens = list(tokens or [])

    async def list_for_user(self, user_id: str) -> list[PushToken]:
        return [t for t in self._tokens if t.user_id == user_id and t.token.strip()]


class SupabasePushTokenRepository:
    """Read the ``user_push_tokens`` table with the service role key."""

    def __init__(self, client: SupabaseRestClient) -> None:
        self.client = client

    async def list_for_user(self, user_id: str) -> list[PushToken]:
        rows = await self.client.request(
            "GET",
            f"/rest/v1/{PUSH_TOKENS_TABLE}",
            query={
                "select": ",".join(PUSH_TOKEN_COLUMNS),
                "user_id": f"eq.{user_id}",
            },
        )
        tokens: list[PushToken] = []
        for row in rows or []:
            token = PushTokenRecord.model_validate(row).to_entity()
            if token is not None:
                tokens.append(token)
        return tokens


__all__ = [
    "InMemoryPushTokenRepository",
    "PushTokenLookupNotConfigured",
    "SupabasePushTokenRepository",
    "UnconfiguredPushTokenRepository",
]
