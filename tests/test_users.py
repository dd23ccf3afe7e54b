import httpx
import pytest

from cozesdk.request import Core, CozeAuthError
from cozesdk.users import Users

BASE_URL = "https://api.coze.com"


class _TokenAuth:
    def __init__(self, value):
        self._value = value

    def token(self):
        return self._value


def test_me_success():
    seen = {}

    def handler(request):
        seen["path"] = request.url.path
        seen["auth"] = request.headers.get("Authorization")
        return httpx.Response(
            200,
            json={
                "code": 0,
                "msg": "",
                "data": {
                    "user_id": "test_user_id",
                    "user_name": "test_user",
                    "nick_name": "Test User",
                    "avatar_url": "https://example.com/avatar.jpg",
                },
            },
            headers={"X-Tt-Logid": "test_log_id"},
        )

    core = Core(
        BASE_URL,
        httpx.Client(transport=httpx.MockTransport(handler)),
        auth=_TokenAuth("token"),
    )
    user = Users(core).me()

    assert seen["path"] == "/v1/users/me"
    assert seen["auth"] == "Bearer token"
    assert user.user_id == "test_user_id"
    assert user.user_name == "test_user"
    assert user.nick_name == "Test User"
    assert user.avatar_url == "https://example.com/avatar.jpg"
    assert user.log_id == "test_log_id"


def test_me_unauthorized():
    def handler(request):
        return httpx.Response(
            401, json={"error_code": "invalid_token", "error_message": "Token is invalid"}
        )

    core = Core(BASE_URL, httpx.Client(transport=httpx.MockTransport(handler)))
    with pytest.raises(CozeAuthError) as info:
        Users(core).me()
    assert info.value.code == "invalid_token"
    assert info.value.error_message == "Token is invalid"