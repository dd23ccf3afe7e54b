"""HTTP core of the client: sending requests and turning failures into exceptions."""

from __future__ import annotations

import json
import logging
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Mapping

import httpx

from cozesdk.user_agent import LOG_ID_HEADER, common_headers

logger = logging.getLogger(__name__)

#: Log id attached to outgoing requests when a core has ``enable_log_id`` set.
request_log_id: ContextVar[str] = ContextVar("request_log_id", default="")


class CozeError(Exception):
    """A request that reached the API but was rejected."""

    def __init__(self, code: int, message: str, log_id: str = "") -> None:
        super().__init__(f"code={code}, message={message}, logid={log_id}")
        self.code = code
        self.message = message
        self.log_id = log_id


class CozeAuthError(Exception):
    """An authentication or authorisation failure reported with a non-200 status."""

    def __init__(self, code: str, error_message: str, http_code: int, log_id: str = "") -> None:
        super().__init__(
            f"code={code}, message={error_message}, http_code={http_code}, logid={log_id}"
        )
        self.code = code
        self.error_message = error_message
        self.http_code = http_code
        self.log_id = log_id


@dataclass
class HTTPResponse:
    """Status and headers of a response the API returned."""

    status_code: int
    headers: httpx.Headers

    def log_id(self) -> str:
        return self.headers.get(LOG_ID_HEADER, "")


def check_http_response(response: httpx.Response) -> None:
    """Raise when the response status is not 200."""
    if response.status_code == httpx.codes.OK:
        return
    log_id = response.headers.get(LOG_ID_HEADER, "")
    body = response.read()
    text = body.decode("utf-8", errors="replace")
    try:
        info = json.loads(body)
    except ValueError:
        info = None
    if not isinstance(info, dict):
        logger.error("unmarshal response body: %s", text)
        raise CozeError(response.status_code, text, log_id)
    raise CozeAuthError(
        str(info.get("error_code") or info.get("error") or ""),
        str(info.get("error_message") or ""),
        response.status_code,
        log_id,
    )


def ensure_success(data: Any, http_response: HTTPResponse) -> None:
    """Raise :class:`CozeError` when a decoded body carries a non-zero ``code``."""
    if not isinstance(data, dict):
        return
    code = data.get("code") or 0
    if code != 0:
        logger.warning(
            "request failed, body=%s, log_id=%s", json.dumps(data), http_response.log_id()
        )
        raise CozeError(code, str(data.get("msg") or ""), http_response.log_id())


def _to_json(body: Any) -> Any:
    to_dict = getattr(body, "to_dict", None)
    return to_dict() if callable(to_dict) else body


class Core:
    """Sends requests to the API and decodes its replies."""

    def __init__(
        self,
        base_url: str,
        client: httpx.Client | None = None,
        auth: Any = None,
        enable_log_id: bool = False,
    ) -> None:
        self.base_url = base_url
        self.client = client if client is not None else httpx.Client(timeout=5.0)
        self.auth = auth
        self.enable_log_id = enable_log_id

    def _common_headers(self) -> dict[str, str]:
        token = None
        if self.auth is not None:
            try:
                token = self.auth.token()
            except Exception as exc:
                logger.error("failed to get access_token: %s", exc)
                raise
        log_id = request_log_id.get() if self.enable_log_id else None
        return common_headers(token, log_id)

    def _unpack(self, response: httpx.Response) -> tuple[Any, HTTPResponse]:
        check_http_response(response)
        body = response.read()
        http_response = HTTPResponse(response.status_code, response.headers)
        try:
            data = json.loads(body)
        except ValueError:
            logger.error("unmarshal response body: %s", body.decode("utf-8", errors="replace"))
            raise
        ensure_success(data, http_response)
        return data, http_response

    def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> tuple[Any, HTTPResponse]:
        """Send a JSON request and return the decoded body with the response metadata."""
        response = self.raw_request(method, path, body, params, headers)
        try:
            return self._unpack(response)
        finally:
            response.close()

    def upload_file(
        self,
        path: str,
        file: Any,
        file_name: str,
        fields: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> tuple[Any, HTTPResponse]:
        """POST ``file`` as multipart form data together with extra ``fields``."""
        request = self.client.build_request(
            "POST",
            f"{self.base_url}{path}",
            files={"file": (file_name, file)},
            data=dict(fields) if fields else None,
        )
        request.headers.update(headers or {})
        request.headers.update(self._common_headers())
        response = self.client.send(request, stream=True)
        try:
            return self._unpack(response)
        finally:
            response.close()

    def raw_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request and return the unread response once its status is 200."""
        content = None if body is None else json.dumps(_to_json(body)).encode("utf-8")
        merged = {"Content-Type": "application/json", **(headers or {}), **self._common_headers()}
        request = self.client.build_request(
            method, f"{self.base_url}{path}", content=content, params=params, headers=merged
        )
        response = self.client.send(request, stream=True)
        try:
            check_http_response(response)
        except BaseException:
            response.close()
            raise
        return response

    def stream_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> httpx.Response:
        """Send a request expected to stream; a JSON reply is checked for an error code."""
        response = self.raw_request(method, path, body, params, headers)
        if "application/json" in response.headers.get("Content-Type", ""):
            try:
                self._unpack(response)
            finally:
                response.close()
        return response