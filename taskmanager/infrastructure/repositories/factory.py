"""Startup-time selection of repository implementations."""

from __future__ import annotations

import logging
from collections.abc import Callable

import httpx

from taskmanager.config import Settings
from taskmanager.domain.repositories import NotificationRepository, PushTokenRepository
from taskmanager.infrastructure.supabase import (
    SupabaseRestClient,
    get_service_supabase_config,
    get_supabase_config,
)

from .in_memory_notification_repository import InMemoryNotificationRepository
from .push_token_repository import SupabasePushTokenRepository, UnconfiguredPushTokenRepository
from .supabase_notification_repository import SupabaseNotificationRepository

logger = logging.getLogger(__name__)


def make_notifications_repository(
    settings: Settings,
    *,
    http_client: httpx.AsyncClient | None = None,
    access_token_provider: Callable[[], str | None] | None = None,
) -> NotificationRepository:
    """Return the Supabase repository when credentials exist, else the in-memory one."""

    config = get_supabase_config(settings)
    if config is None:
        logger.info("Supabase credentials missing; using in-memory notifications")
        return InMemoryNotificationRepository()

    client = SupabaseRestClient(
        config,
        client=http_client,
        timeout=settings.http_timeout_seconds,
        access_token_provider=access_token_provider,
    )
    return SupabaseNotificationRepository(client)


def make_push_token_repository(
    settings: Settings, *, http_client: httpx.AsyncClient | None = None
) -> PushTokenRepository:
    """Return the push token lookup used by the dispatch webhook."""

    config = get_service_supabase_config(settings)
    if config is None:
        logger.error("Supabase service role credentials missing; push token lookup disabled")
        return UnconfiguredPushTokenRepository()

    client = SupabaseRestClient(
        config, client=http_client, timeout=settings.http_timeout_seconds
    )
    return SupabasePushTokenRepository(client)


__all__ = ["make_notifications_repository", "make_push_token_repository"]
