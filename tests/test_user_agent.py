import json
import platform

from cozesdk.user_agent import (
    LOG_ID_HEADER,
    VERSION,
    client_user_agent,
    common_headers,
    user_agent,
)


def test_user_agent_parts():
    parts = user_agent().split(" ")
    assert parts[0].endswith("/" + VERSION)
    assert parts[1] == "python/" + platform.python_version()
    assert len(parts) == 3


def test_client_user_agent_is_json_description():
    info = json.loads(client_user_agent())
    assert set(info) == {"version", "lang", "lang_version", "os_name", "os_version"}
    assert info["version"] == "0.1.0"
    assert info["lang_version"] == platform.python_version()


def test_common_headers_with_token_and_log_id():
    headers = common_headers("token", "trace-1")
    assert headers["Authorization"] == "Bearer token"
    assert headers[LOG_ID_HEADER] == "trace-1"
    assert headers["User-Agent"] == user_agent()
    assert headers["X-Coze-Client-User-Agent"] == client_user_agent()


def test_common_headers_without_token_or_log_id():
    headers = common_headers(None, None)
    assert "Authorization" not in headers
    assert LOG_ID_HEADER not in headers
    assert headers["User-Agent"] == user_agent()


def test_common_headers_empty_log_id_is_omitted():
    headers = common_headers("token", "")
    assert LOG_ID_HEADER not in headers
    assert headers["Authorization"] == "Bearer token"