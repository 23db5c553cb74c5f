"""Tests for the notifications screen presenter."""

from __future__ import annotations

import pytest

from taskmanager.application.session import AuthSession
from taskmanager.application.stores import NotificationsStore
from taskmanager.infrastructure.repositories import InMemoryNotificationRepository
from taskmanager.interfaces.screens import NotificationBell, NotificationsScreen
from tests.factories import make_notification

pytestmark = pytest.mark.anyio


def _screen(*notifications, viewer: str | None = "u1"):
    session = AuthSession()
    if viewer:
        session.sign_in(viewer, access_token="jwt")
    store = NotificationsStore(
        InMemoryNotificationRepository(notifications),
        viewer_resolver=session.viewer_user_id,
    )
    return NotificationsScreen(store), NotificationBell(store)


async def test_open_renders_rows_newest_first() -> None:
    screen, bell = _screen(
        make_notification("a", minutes=0, body="First"),
        make_notification("b", minutes=5, is_read=True),
    )

    await screen.open()

    rows = screen.rows
    assert [row.id for row in rows] == ["b", "a"]
    assert rows[0].is_unread is False
    assert rows[1].is_unread is True
    assert rows[1].body == "First"
    assert rows[1].created_label == "01/05/2024 12:00"
    assert screen.subtitle == "1 unread"
    assert screen.show_mark_all is True
    assert bell.has_badge is True


async def test_press_marks_read_and_returns_task_target() -> None:
    screen, bell = _screen(make_notification("a", data={"task_id": "t7"}))
    await screen.open()

    target = await screen.press("a")

    assert target == "t7"
    assert screen.rows[0].is_unread is False
    assert screen.subtitle == "All read"
    assert bell.has_badge is False


async def test_press_unknown_row_does_nothing() -> None:
    screen, _ = _screen(make_notification("a"))
    await screen.open()

    assert await screen.press("missing") is None
    assert screen.store.unread_count == 1


async def test_mark_all_hides_action() -> None:
    screen, bell = _screen(make_notification("a"), make_notification("b", minutes=1))
    await screen.open()

    await screen.mark_all()

    assert screen.show_mark_all is False
    assert bell.has_badge is False


async def test_empty_state_when_signed_out() -> None:
    screen, _ = _screen(make_notification("a"), viewer=None)

    await screen.refresh()

    assert screen.rows == []
    assert screen.show_empty_state is True
    assert screen.error is None


async def test_created_label_uses_app_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_TIMEZONE", "UTC+02:00")
    screen, _ = _screen(make_notification("a"))

    await screen.open()

    assert screen.rows[0].created_label == "01/05/2024 14:00"
