"""Fan a newly created notification out to the recipient's devices."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol

from taskmanager.domain.entities import PushMessage, PushToken
from taskmanager.domain.repositories import PushTokenRepository

logger = logging.getLogger(__name__)

NO_TOKENS_REASON = "no_tokens"


class PushSender(Protocol):
    async def send(self, messages: Sequence[PushMessage]) -> Any:
        ...


class PushTokenLookupError(RuntimeError):
    """Raised when the recipient's push tokens cannot be read."""


@dataclass
class PushDispatchRequest:
    """Notification fields delivered by the insert trigger."""

    notification_id: str
    recipient_user_id: str
    title: str
    body: str | None = None
    data: Any = None


@dataclass
class PushDispatchResult:
    """Outcome of one dispatch invocation."""

    sent: int
    reason: str | None = None
    gateway_response: Any = field(default=None)


def build_push_messages(
    request: PushDispatchRequest, tokens: Sequence[PushToken]
) -> list[PushMessage]:
    """Return one message per token sharing the same content."""

    extra = request.data if isinstance(request.data, dict) else {}
    data = {"notificationId": request.notification_id, **extra}
    return [
        PushMessage(
            to=token.token,
            title=request.title,
            body=request.body or "",
            data=data,
        )
        for token in tokens
    ]


async def dispatch_push_notification(
    request: PushDispatchRequest,
    *,
    token_repository: PushTokenRepository,
    push_client: PushSender,
) -> PushDispatchResult:
    """Send ``request`` to every device registered for its recipient.

    Each invocation sends independently; calling it twice for the same
    notification delivers it twice.
    """

    try:
        tokens = await token_repository.list_for_user(request.recipient_user_id)
    except Exception as exc:
        logger.error(
            "Push token lookup failed for user %s: %s", request.recipient_user_id, exc
        )
        raise PushTokenLookupError(str(exc)) from exc

    if not tokens:
        logger.info(
            "Notification %s has no registered devices for user %s",
            request.notification_id,
            request.recipient_user_id,
        )
        return PushDispatchResult(sent=0, reason=NO_TOKENS_REASON)

    messages = build_push_messages(request, tokens)
    gateway_response = await push_client.send(messages)
    logger.info(
        "Dispatched notification %s to %d device(s)",
        request.notification_id,
        len(messages),
    )
    return PushDispatchResult(sent=len(tokens), gateway_response=gateway_response)


__all__ = [
    "NO_TOKENS_REASON",
    "PushDispatchRequest",
    "PushDispatchResult",
    "PushSender",
    "PushTokenLookupError",
    "build_push_messages",
    "dispatch_push_notification",
]
