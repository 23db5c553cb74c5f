"""Shared fixtures for the test-suite."""

from __future__ import annotations

import pytest

from taskmanager.config import reset_settings_cache
from taskmanager.utils import get_app_timezone

_ENV_VARS = (
    "SUPABASE_URL",
    "EXPO_PUBLIC_SUPABASE_URL",
    "SUPABASE_ANON_KEY",
    "EXPO_PUBLIC_SUPABASE_ANON_KEY",
    "SUPABASE_SERVICE_ROLE_KEY",
    "WEBHOOK_SECRET",
    "WEBHOOK_ALLOW_UNAUTHENTICATED",
    "EXPO_PUSH_URL",
    "HTTP_TIMEOUT_SECONDS",
    "APP_TIMEZONE",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Run every test without inherited configuration or cached settings."""

    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings_cache()
    get_app_timezone.cache_clear()
    yield
    reset_settings_cache()
    get_app_timezone.cache_clear()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
