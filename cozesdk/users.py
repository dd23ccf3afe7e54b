"""Information about the current user."""

from __future__ import annotations

from dataclasses import dataclass, field

from cozesdk.request import Core, HTTPResponse


@dataclass
class User:
    """A user account."""

    user_id: str = ""
    user_name: str = ""
    nick_name: str = ""
    avatar_url: str = ""
    log_id: str = ""
    http_response: HTTPResponse | None = field(default=None, repr=False, compare=False)


class Users:
    """Access to user information."""

    def __init__(self, core: Core) -> None:
        self._core = core

    def me(self) -> User:
        """Return the user the credentials belong to."""
        data, http_response = self._core.request("GET", "/v1/users/me")
        payload = data.get("data") or {}
        return User(
            user_id=payload.get("user_id", ""),
            user_name=payload.get("user_name", ""),
            nick_name=payload.get("nick_name", ""),
            avatar_url=payload.get("avatar_url", ""),
            log_id=http_response.log_id(),
            http_response=http_response,
        )