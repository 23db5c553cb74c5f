"""Webhook fanning new notification rows out as push messages."""

from __future__ import annotations

import hmac
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from taskmanager.application.use_cases.notifications import (
    PushTokenLookupError,
    dispatch_push_notification,
)
from taskmanager.config import Settings, get_settings
from taskmanager.domain.repositories import PushTokenRepository
from taskmanager.infrastructure.push import ExpoPushClient, PushGatewayError
from taskmanager.interfaces.api.dependencies import (
    get_push_client,
    get_push_token_repository,
)
from taskmanager.interfaces.api.schemas import (
    PushWebhookPayload,
    serialize_dispatch_result,
)

logger = logging.getLogger(__name__)

SECRET_HEADER = "x-webhook-secret"

router = APIRouter(prefix="/functions/v1", tags=["push"])


def _is_authorized(request: Request, settings: Settings) -> bool:
    expected = settings.webhook_secret or ""
    if not expected:
        if settings.webhook_allow_unauthenticated:
            logger.warning(
                "WEBHOOK_SECRET is not set; accepting unauthenticated push dispatch"
            )
            return True
        logger.error(
            "WEBHOOK_SECRET is not set and WEBHOOK_ALLOW_UNAUTHENTICATED is off; "
            "rejecting push dispatch"
        )
        return False

    received = request.headers.get(SECRET_HEADER, "")
    return hmac.compare_digest(received.encode(), expected.encode())


@router.api_route(
    "/send-push-notification",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
)
async def send_push_notification(
    request: Request,
    settings: Settings = Depends(get_settings),
    token_repository: PushTokenRepository = Depends(get_push_token_repository),
    push_client: ExpoPushClient = Depends(get_push_client),
) -> Response:
    """Deliver one notification to every device of its recipient."""

    if request.method != "POST":
        return PlainTextResponse(
            "Method Not Allowed", status_code=status.HTTP_405_METHOD_NOT_ALLOWED
        )

    if not _is_authorized(request, settings):
        logger.warning("Rejected push dispatch with invalid webhook secret")
        return PlainTextResponse("Unauthorized", status_code=status.HTTP_401_UNAUTHORIZED)

    try:
        payload = PushWebhookPayload.model_validate(await request.json())
    except ValueError:
        return PlainTextResponse("Bad Request", status_code=status.HTTP_400_BAD_REQUEST)

    try:
        result = await dispatch_push_notification(
            payload.to_request(),
            token_repository=token_repository,
            push_client=push_client,
        )
    except PushTokenLookupError as exc:
        return PlainTextResponse(
            f"DB error: {exc}", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )
    except PushGatewayError as exc:
        logger.error(
            "Expo rejected notification %s: %s %s",
            payload.notification_id,
            exc.status_code,
            exc.text,
        )
        return PlainTextResponse(
            f"Expo error: {exc.status_code} {exc.text}",
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    return JSONResponse(serialize_dispatch_result(result))
