"""Authenticated session state for the running client."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AuthSession:
    """Holds the signed-in user managed by the backing auth service."""

    user_id: str | None = None
    access_token: str | None = None

    def sign_in(self, user_id: str, access_token: str | None = None) -> None:
        self.user_id = user_id
        self.access_token = access_token

    def sign_out(self) -> None:
        self.user_id = None
        self.access_token = None

    def viewer_user_id(self) -> str | None:
        """Return the current viewer, or ``None`` when signed out."""

        return self.user_id or None

    def current_access_token(self) -> str | None:
        return self.access_token or None


auth_session = AuthSession()


__all__ = ["AuthSession", "auth_session"]
