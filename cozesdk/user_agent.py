"""User agent strings and the headers sent with every request."""

from __future__ import annotations

import json
import os
import platform

VERSION = "0.1.0"
LOG_ID_HEADER = "X-Tt-Logid"

_SDK_NAME = "cozesdk"
_LANG = "python"
_LANG_VERSION = platform.python_version()
_OS_NAME = platform.system().lower()
_OS_VERSION = os.environ.get("OSVERSION", "")

_USER_AGENT = f"{_SDK_NAME}/{VERSION} {_LANG}/{_LANG_VERSION} {_OS_NAME}/{_OS_VERSION}"
_CLIENT_USER_AGENT = json.dumps(
    {
        "version": VERSION,
        "lang": _SDK_NAME,
        "lang_version": _LANG_VERSION,
        "os_name": _OS_NAME,
        "os_version": _OS_VERSION,
    },
    separators=(",", ":"),
)


def user_agent() -> str:
    """Return the value sent in the ``User-Agent`` header."""
    return _USER_AGENT


def client_user_agent() -> str:
    """Return the JSON description sent in ``X-Coze-Client-User-Agent``."""
    return _CLIENT_USER_AGENT


def common_headers(token: str | None = None, log_id: str | None = None) -> dict[str, str]:
    """Build the headers every request carries, with optional log id and bearer token."""
    headers = {
        "User-Agent": _USER_AGENT,
        "X-Coze-Client-User-Agent": _CLIENT_USER_AGENT,
    }
    if log_id:
        headers[LOG_ID_HEADER] = log_id
    if token is not None:
        headers["Authorization"] = f"Bearer {token}"
    return headers