"""Pydantic models describing the push webhook payloads."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from taskmanager.application.use_cases.notifications import (
    PushDispatchRequest,
    PushDispatchResult,
)


class PushWebhookPayload(BaseModel):
    """Row data sent by the notification insert trigger."""

    notification_id: str = Field(..., min_length=1)
    recipient_user_id: str = Field(..., min_length=1)
    title: str
    body: str | None = None
    data: Any = None

    def to_request(self) -> PushDispatchRequest:
        return PushDispatchRequest(
            notification_id=self.notification_id,
            recipient_user_id=self.recipient_user_id,
            title=self.title,
            body=self.body,
            data=self.data,
        )


def serialize_dispatch_result(result: PushDispatchResult) -> dict[str, Any]:
    """Return the JSON body reported to the trigger."""

    body: dict[str, Any] = {"ok": True, "sent": result.sent}
    if result.reason is not None:
        body["reason"] = result.reason
    else:
        body["expo"] = result.gateway_response
    return body


__all__ = ["PushWebhookPayload", "serialize_dispatch_result"]
