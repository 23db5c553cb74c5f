"""Tests for the push fan-out use case."""

from __future__ import annotations

import pytest

from taskmanager.application.use_cases.notifications import (
    NO_TOKENS_REASON,
    PushDispatchRequest,
    PushTokenLookupError,
    build_push_messages,
    dispatch_push_notification,
)
from taskmanager.domain.entities import PushToken
from taskmanager.infrastructure.push import PushGatewayError
from taskmanager.infrastructure.repositories import InMemoryPushTokenRepository

pytestmark = pytest.mark.anyio


class RecordingPushClient:
    def __init__(self, response=None, error: Exception | None = None) -> None:
        self.batches = []
        self.response = response if response is not None else {"data": []}
        self.error = error

    async def send(self, messages):
        self.batches.append(list(messages))
        if self.error is not None:
            raise self.error
        return self.response


class BrokenTokenRepository:
    async def list_for_user(self, user_id: str):
        raise RuntimeError("relation user_push_tokens does not exist")


TOKENS = InMemoryPushTokenRepository(
    [
        PushToken(user_id="u1", token="ExponentPushToken[A]", device_platform="ios"),
        PushToken(user_id="u1", token="ExponentPushToken[B]", device_platform="android"),
        PushToken(user_id="u2", token="ExponentPushToken[C]"),
        PushToken(user_id="u1", token="   "),
    ]
)


def _request(**overrides) -> PushDispatchRequest:
    values = {
        "notification_id": "n9",
        "recipient_user_id": "u1",
        "title": "Hi",
        "body": None,
        "data": {"task_id": "t1"},
    }
    values.update(overrides)
    return PushDispatchRequest(**values)


async def test_two_tokens_send_one_batch_of_two_messages() -> None:
    push_client = RecordingPushClient(response={"data": [{"status": "ok"}] * 2})

    result = await dispatch_push_notification(
        _request(), token_repository=TOKENS, push_client=push_client
    )

    assert result.sent == 2
    assert result.reason is None
    assert result.gateway_response == {"data": [{"status": "ok"}] * 2}
    assert len(push_client.batches) == 1
    assert [m.to for m in push_client.batches[0]] == [
        "ExponentPushToken[A]",
        "ExponentPushToken[B]",
    ]


async def test_zero_tokens_is_a_successful_no_op() -> None:
    push_client = RecordingPushClient()

    result = await dispatch_push_notification(
        _request(recipient_user_id="nobody"),
        token_repository=TOKENS,
        push_client=push_client,
    )

    assert result.sent == 0
    assert result.reason == NO_TOKENS_REASON
    assert push_client.batches == []


async def test_token_lookup_failure_raises_lookup_error() -> None:
    with pytest.raises(PushTokenLookupError, match="user_push_tokens"):
        await dispatch_push_notification(
            _request(),
            token_repository=BrokenTokenRepository(),
            push_client=RecordingPushClient(),
        )


async def test_gateway_failure_propagates() -> None:
    push_client = RecordingPushClient(error=PushGatewayError(500, "boom"))

    with pytest.raises(PushGatewayError):
        await dispatch_push_notification(
            _request(), token_repository=TOKENS, push_client=push_client
        )


async def test_repeated_invocation_sends_again() -> None:
    push_client = RecordingPushClient()

    for _ in range(2):
        await dispatch_push_notification(
            _request(), token_repository=TOKENS, push_client=push_client
        )

    assert len(push_client.batches) == 2


def test_messages_share_content_and_carry_notification_id() -> None:
    tokens = [PushToken(user_id="u1", token="A"), PushToken(user_id="u1", token="B")]

    messages = build_push_messages(_request(body=None), tokens)

    for message in messages:
        assert message.title == "Hi"
        assert message.body == ""
        assert message.sound == "default"
        assert message.data == {"notificationId": "n9", "task_id": "t1"}


def test_non_mapping_data_is_not_merged() -> None:
    messages = build_push_messages(
        _request(data=["unexpected"], body="Details"),
        [PushToken(user_id="u1", token="A")],
    )

    assert messages[0].data == {"notificationId": "n9"}
    assert messages[0].body == "Details"
