"""Domain entities describing push delivery targets and messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PushToken:
    """Device registration for a user with the push provider."""

    user_id: str
    token: str
    device_platform: str | None = None
    device_name: str | None = None


@dataclass
class PushMessage:
    """Single device-level message submitted to the push gateway."""

    to: str
    title: str
    body: str = ""
    data: dict[str, Any] = field(default_factory=dict)
    sound: str = "default"

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON object expected by the gateway."""

        return {
            "to": self.to,
            "sound": self.sound,
            "title": self.title,
            "body": self.body,
            "data": dict(self.data),
        }


__all__ = ["PushMessage", "PushToken"]
