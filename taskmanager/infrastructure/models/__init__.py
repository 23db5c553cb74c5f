"""Table row models used by the Supabase repositories."""

from .notification import (
    NOTIFICATION_COLUMNS,
    NOTIFICATIONS_TABLE,
    NotificationRecord,
    select_clause,
)
from .push_token import PUSH_TOKEN_COLUMNS, PUSH_TOKENS_TABLE, PushTokenRecord

__all__ = [
    "NOTIFICATION_COLUMNS",
    "NOTIFICATIONS_TABLE",
    "NotificationRecord",
    "PUSH_TOKEN_COLUMNS",
    "PUSH_TOKENS_TABLE",
    "PushTokenRecord",
    "select_clause",
]
