"""Stateful coordinators shared by the client screens."""

from .notifications import NotificationsStore, ViewerResolver, create_notifications_store

__all__ = ["NotificationsStore", "ViewerResolver", "create_notifications_store"]
