"""Push delivery helpers for the infrastructure layer."""

from .expo import ExpoPushClient, PushGatewayError

__all__ = ["ExpoPushClient", "PushGatewayError"]
