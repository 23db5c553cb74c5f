"""Repository implementations for infrastructure layer."""

from .factory import make_notifications_repository, make_push_token_repository
from .in_memory_notification_repository import (
    DEMO_VIEWER_ID,
    InMemoryNotificationRepository,
)
from .push_token_repository import (
    InMemoryPushTokenRepository,
    PushTokenLookupNotConfigured,
    SupabasePushTokenRepository,
    UnconfiguredPushTokenRepository,
)
from .supabase_notification_repository import SupabaseNotificationRepository

__all__ = [
    "DEMO_VIEWER_ID",
    "InMemoryNotificationRepository",
    "InMemoryPushTokenRepository",
    "PushTokenLookupNotConfigured",
    "SupabaseNotificationRepository",
    "SupabasePushTokenRepository",
    "UnconfiguredPushTokenRepository",
    "make_notifications_repository",
    "make_push_token_repository",
]
