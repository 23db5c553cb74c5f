"""FastAPI dependency utilities."""

import httpx
from fastapi import Depends, Request

from taskmanager.config import Settings, get_settings
from taskmanager.domain.repositories import PushTokenRepository
from taskmanager.infrastructure.push import ExpoPushClient
from taskmanager.infrastructure.repositories import make_push_token_repository


def get_http_client(request: Request) -> httpx.AsyncClient | None:
    """Return the HTTP client shared for the application lifetime, if any."""

    return getattr(request.app.state, "http_client", None)


def get_push_token_repository(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient | None = Depends(get_http_client),
) -> PushTokenRepository:
    """Return the repository used to resolve recipient devices."""

    return make_push_token_repository(settings, http_client=http_client)


def get_push_client(
    settings: Settings = Depends(get_settings),
    http_client: httpx.AsyncClient | None = Depends(get_http_client),
) -> ExpoPushClient:
    """Return a configured instance of :class:`ExpoPushClient`."""

    return ExpoPushClient(
        settings.expo_push_url,
        client=http_client,
        timeout=settings.http_timeout_seconds,
    )
