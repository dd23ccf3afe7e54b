import json

import httpx
import pytest

from cozesdk.request import Core, CozeError
from cozesdk.templates import TemplateEntityType, Templates

BASE_URL = "https://api.coze.com"


def _core(handler):
    return Core(BASE_URL, httpx.Client(transport=httpx.MockTransport(handler)))


def test_duplicate_success_with_name():
    seen = {}

    def handler(request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(
            200,
            json={"code": 0, "msg": "", "data": {"entity_id": "entity1", "entity_type": "agent"}},
            headers={"X-Tt-Logid": "test_log_id"},
        )

    resp = Templates(_core(handler)).duplicate("tpl1", "ws1", "copy")

    assert seen["method"] == "POST"
    assert seen["path"] == "/v1/templates/tpl1/duplicate"
    assert seen["body"] == {"workspace_id": "ws1", "name": "copy"}
    assert resp.entity_id == "entity1"
    assert resp.entity_type is TemplateEntityType.AGENT
    assert resp.log_id == "test_log_id"


def test_duplicate_omits_missing_name():
    seen = {}

    def handler(request):
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"code": 0, "data": {"entity_id": "e2"}})

    resp = Templates(_core(handler)).duplicate("tpl2", "ws2")
    assert seen["body"] == {"workspace_id": "ws2"}
    assert resp.entity_id == "e2"


def test_duplicate_business_error():
    def handler(request):
        return httpx.Response(
            200, json={"code": 1001, "msg": "business error"}, headers={"X-Tt-Logid": "lid"}
        )

    with pytest.raises(CozeError) as info:
        Templates(_core(handler)).duplicate("tpl1", "ws1")
    assert info.value.code == 1001
    assert info.value.message == "business error"
    assert info.value.log_id == "lid"