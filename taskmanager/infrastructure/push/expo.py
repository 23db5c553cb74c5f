"""Client for the Expo push notification gateway."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from taskmanager.config import DEFAULT_EXPO_PUSH_URL
from taskmanager.domain.entities import PushMessage

logger = logging.getLogger(__name__)


class PushGatewayError(RuntimeError):
    """Raised when the gateway rejects a batch or cannot be reached.

    ``status_code`` is ``0`` for transport failures.
    """

    def __init__(self, status_code: int, text: str) -> None:
        super().__init__(f"Expo error: {status_code} {text}")
        self.status_code = status_code
        self.text = text


class ExpoPushClient:
    """Submit message batches to the Expo push endpoint."""

    def __init__(
        self,
        url: str = DEFAULT_EXPO_PUSH_URL,
        *,
        client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ) -> None:
        self.url = url
        self._client = client
        self._timeout = timeout

    async def send(self, messages: Sequence[PushMessage]) -> Any:
        """Post ``messages`` as one JSON array and return the provider reply."""

        payload = [message.to_payload() for message in messages]
        try:
            response = await self._post(payload)
        except httpx.HTTPError as exc:
            logger.error("Expo push request failed: %s", exc)
            raise PushGatewayError(0, str(exc)) from exc

        text = response.text
        if not response.is_success:
            raise PushGatewayError(response.status_code, text)
        return _safe_json(text)

    async def _post(self, payload: list[dict[str, Any]]) -> httpx.Response:
        headers = {"Content-Type": "application/json", "Accept": "application/json"}
        if self._client is not None:
            return await self._client.post(self.url, json=payload, headers=headers)
        async with httpx.AsyncClient(timeout=self._timeout) as client:
            return await client.post(self.url, json=payload, headers=headers)


def _safe_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


__all__ = ["ExpoPushClient", "PushGatewayError"]
