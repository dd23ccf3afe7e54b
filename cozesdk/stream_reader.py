"""Reading server-sent events from a streaming response."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Iterator

import httpx

from cozesdk.request import HTTPResponse, check_http_response, ensure_success

logger = logging.getLogger(__name__)

Processor = Callable[[str, Iterator[str]], "tuple[Any, bool]"]


class StreamReader:
    """Turns the lines of a streaming response into events using a processor.

    The processor receives a non-empty line and the iterator of the remaining
    lines; it returns the event (or ``None`` to skip) and whether the stream is done.
    """

    def __init__(self, response: httpx.Response, processor: Processor) -> None:
        self.response = response
        self.http_response = HTTPResponse(response.status_code, response.headers)
        self.is_finished = False
        self._processor = processor
        self._lines: Iterator[str] | None = None

    def _open(self) -> Iterator[str]:
        check_http_response(self.response)
        if "application/json" in self.response.headers.get("Content-Type", ""):
            body = self.response.read()
            try:
                data = json.loads(body)
            except ValueError:
                logger.warning("Error reading response body: %r", body)
                raise
            ensure_success(data, self.http_response)
            return iter(())
        return iter(self.response.iter_lines())

    def recv(self) -> Any:
        """Return the next event, or ``None`` once the stream is exhausted."""
        if self._lines is None:
            self._lines = self._open()
        for line in self._lines:
            if not line:
                continue
            event, done = self._processor(line, self._lines)
            self.is_finished = done
            if event is None:
                continue
            return event
        self.is_finished = True
        return None

    def close(self) -> None:
        self.response.close()

    def __iter__(self) -> Iterator[Any]:
        while (event := self.recv()) is not None:
            yield event

    def __enter__(self) -> "StreamReader":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()