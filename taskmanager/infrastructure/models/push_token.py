"""Row representation for the ``user_push_tokens`` table."""

from __future__ import annotations

from pydantic import BaseModel

from taskmanager.domain.entities import PushToken

PUSH_TOKENS_TABLE = "user_push_tokens"

PUSH_TOKEN_COLUMNS: tuple[str, ...] = (
    "user_id",
    "expo_push_token",
    "device_platform",
    "device_name",
)


class PushTokenRecord(BaseModel):
    """Database representation for a registered device."""

    user_id: str
    expo_push_token: str | None = None
    device_platform: str | None = None
    device_name: str | None = None

    def to_entity(self) -> PushToken | None:
        token = (self.expo_push_token or "").strip()
        if not token:
            return None
        return PushToken(
            user_id=self.user_id,
            token=token,
            device_platform=self.device_platform,
            device_name=self.device_name,
        )


__all__ = ["PUSH_TOKENS_TABLE", "PUSH_TOKEN_COLUMNS", "PushTokenRecord"]
