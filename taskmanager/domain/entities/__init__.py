"""Domain entities exposed by the application."""

from .notification import (
    Notification,
    NotificationFilter,
    NotificationQuery,
    count_unread,
)
from .push import PushMessage, PushToken

__all__ = [
    "Notification",
    "NotificationFilter",
    "NotificationQuery",
    "PushMessage",
    "PushToken",
    "count_unread",
]
