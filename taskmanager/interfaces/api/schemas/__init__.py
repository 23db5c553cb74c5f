from .push_webhook import PushWebhookPayload, serialize_dispatch_result

__all__ = ["PushWebhookPayload", "serialize_dispatch_result"]
