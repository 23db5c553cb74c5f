"""Tests for the Expo push gateway client."""

from __future__ import annotations

import json

import httpx
import pytest
import respx

from taskmanager.config import DEFAULT_EXPO_PUSH_URL
from taskmanager.domain.entities import PushMessage
from taskmanager.infrastructure.push import ExpoPushClient, PushGatewayError

pytestmark = pytest.mark.anyio

MESSAGES = [
    PushMessage(to="ExponentPushToken[A]", title="Hi", body="", data={"notificationId": "n1"}),
    PushMessage(to="ExponentPushToken[B]", title="Hi", body="", data={"notificationId": "n1"}),
]


@respx.mock
async def test_send_posts_one_batch_and_returns_parsed_body() -> None:
    ack = {"data": [{"status": "ok", "id": "1"}, {"status": "ok", "id": "2"}]}
    route = respx.post(DEFAULT_EXPO_PUSH_URL).mock(return_value=httpx.Response(200, json=ack))

    result = await ExpoPushClient().send(MESSAGES)

    assert result == ack
    assert route.call_count == 1
    sent = json.loads(route.calls.last.request.content)
    assert sent == [
        {
            "to": "ExponentPushToken[A]",
            "sound": "default",
            "title": "Hi",
            "body": "",
            "data": {"notificationId": "n1"},
        },
        {
            "to": "ExponentPushToken[B]",
            "sound": "default",
            "title": "Hi",
            "body": "",
            "data": {"notificationId": "n1"},
        },
    ]


@respx.mock
async def test_send_returns_raw_text_when_reply_is_not_json() -> None:
    respx.post(DEFAULT_EXPO_PUSH_URL).mock(return_value=httpx.Response(200, text="queued"))

    assert await ExpoPushClient().send(MESSAGES) == "queued"


@respx.mock
async def test_send_raises_with_status_and_text_on_rejection() -> None:
    respx.post(DEFAULT_EXPO_PUSH_URL).mock(
        return_value=httpx.Response(503, text="temporarily unavailable")
    )

    with pytest.raises(PushGatewayError) as excinfo:
        await ExpoPushClient().send(MESSAGES)

    assert excinfo.value.status_code == 503
    assert excinfo.value.text == "temporarily unavailable"
    assert str(excinfo.value) == "Expo error: 503 temporarily unavailable"


@respx.mock
async def test_transport_failure_raises_gateway_error() -> None:
    respx.post("https://push.example.test/send").mock(
        side_effect=httpx.ConnectTimeout("timed out")
    )

    with pytest.raises(PushGatewayError) as excinfo:
        await ExpoPushClient("https://push.example.test/send").send(MESSAGES)

    assert excinfo.value.status_code == 0


@respx.mock
async def test_send_reuses_injected_client() -> None:
    route = respx.post(DEFAULT_EXPO_PUSH_URL).mock(return_value=httpx.Response(200, json={}))

    async with httpx.AsyncClient() as client:
        await ExpoPushClient(client=client).send(MESSAGES[:1])

    assert route.call_count == 1
