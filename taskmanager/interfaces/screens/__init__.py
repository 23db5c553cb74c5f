"""Screen presenters consuming the client stores."""

from .notifications import NotificationBell, NotificationRow, NotificationsScreen

__all__ = ["NotificationBell", "NotificationRow", "NotificationsScreen"]
