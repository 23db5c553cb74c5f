"""Public helpers for delivering notifications."""

from .dispatch_push import (
    NO_TOKENS_REASON,
    PushDispatchRequest,
    PushDispatchResult,
    PushTokenLookupError,
    build_push_messages,
    dispatch_push_notification,
)

__all__ = [
    "NO_TOKENS_REASON",
    "PushDispatchRequest",
    "PushDispatchResult",
    "PushTokenLookupError",
    "build_push_messages",
    "dispatch_push_notification",
]
