"""Thin asynchronous client for the Supabase PostgREST interface."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

import httpx

from taskmanager.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupabaseConfig:
    """Connection details for a Supabase project."""

    url: str
    api_key: str


class SupabaseRestError(RuntimeError):
    """Raised when a PostgREST request fails or cannot be sent."""

    def __init__(self, message: str, status_code: int, details: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


def get_supabase_config(settings: Settings) -> SupabaseConfig | None:
    """Return the client-side Supabase configuration or ``None`` if incomplete."""

    return _build_config(settings.supabase_url, settings.supabase_anon_key)


def get_service_supabase_config(settings: Settings) -> SupabaseConfig | None:
    """Return the service-role configuration used by server-side handlers."""

    return _build_config(settings.supabase_url, settings.supabase_service_role_key)


def _build_config(url: str | None, api_key: str | None) -> SupabaseConfig | None:
    url = (url or "").strip()
    api_key = (api_key or "").strip()
    if not url or not api_key:
        return None
    return SupabaseConfig(url=url.rstrip("/"), api_key=api_key)


class SupabaseRestClient:
    """Send table requests to ``/rest/v1`` using the project API key.

    ``access_token_provider`` may return the signed-in user's access token;
    when it does, that token is used as the bearer credential instead of the
    API key so row level security applies to the user.
    """

    def __init__(
        self,
        config: SupabaseConfig,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
        access_token_provider: Callable[[], str | None] | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._timeout = timeout
        self._access_token_provider = access_token_provider

    @property
    def config(self) -> SupabaseConfig:
        return self._config

    async def request(
        self,
        method: str,
        path: str,
        *,
        query: Mapping[str, str | None] | None = None,
        body: Any = None,
    ) -> Any:
        """Perform ``method`` against ``path`` and return the decoded JSON body.

        Responses without content (``204`` or an empty body) yield ``None``.
        """

        url = f"{self._config.url}{path}"
        params = {key: value for key, value in (query or {}).items() if value is not None}
        headers = self._build_headers()

        try:
            response = await self._send(
                method, url, params=params, headers=headers, body=body
            )
        except httpx.HTTPError as exc:
            logger.error("Supabase REST %s %s failed: %s", method, path, exc)
            raise SupabaseRestError(f"Supabase REST request failed: {exc}", 0) from exc

        if not response.is_success:
            details = response.text or None
            raise SupabaseRestError(
                f"Supabase REST error ({response.status_code})",
                response.status_code,
                details,
            )

        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    def _build_headers(self) -> dict[str, str]:
        bearer = self._config.api_key
        if self._access_token_provider is not None:
            bearer = self._access_token_provider() or bearer

        return {
            "apikey": self._config.api_key,
            "Authorization": f"Bearer {bearer}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def _send(
        self,
        method: str,
        url: str,
        *,
        params: dict[str, str],
        headers: dict[str, str],
        body: Any,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {"params": params, "headers": headers}
        if body is not None:
            kwargs["json"] = body

        if self._client is not None:
            return await self._client.request(method, url, **kwargs)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.request(method, url, **kwargs)


__all__ = [
    "SupabaseConfig",
    "SupabaseRestClient",
    "SupabaseRestError",
    "get_service_supabase_config",
    "get_supabase_config",
]
