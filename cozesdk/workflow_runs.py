"""Running workflows, streaming their events and resuming interrupted runs."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

from cozesdk.request import Core
from cozesdk.stream_reader import StreamReader
from cozesdk.workflow_histories import RunWorkflowsResp, WorkflowRunsHistories


class WorkflowEventType(str, Enum):
    """Kind of event emitted while a workflow runs."""

    MESSAGE = "Message"
    ERROR = "Error"
    DONE = "Done"
    INTERRUPT = "Interrupt"


@dataclass
class WorkflowEventMessage:
    """Output streamed by a workflow node."""

    content: str = ""
    node_title: str = ""
    node_seq_id: str = ""
    node_is_finish: bool = False
    ext: dict[str, Any] | None = None


@dataclass
class WorkflowEventInterruptData:
    """Identifies an interruption; passed back when resuming."""

    event_id: str = ""
    type: int = 0


@dataclass
class WorkflowEventInterrupt:
    """The workflow stopped and waits to be resumed."""

    interrupt_data: WorkflowEventInterruptData | None = None
    node_title: str = ""


@dataclass
class WorkflowEventError:
    """An error reported by the running workflow."""

    error_code: int = 0
    error_message: str = ""


@dataclass
class WorkflowEventDebugURL:
    """Debug page of a finished workflow run."""

    url: str = ""


@dataclass
class WorkflowEvent:
    """One event of a streamed workflow run."""

    id: int = 0
    event: WorkflowEventType = WorkflowEventType.MESSAGE
    message: WorkflowEventMessage | None = None
    interrupt: WorkflowEventInterrupt | None = None
    error: WorkflowEventError | None = None
    debug_url: WorkflowEventDebugURL | None = None

    def is_done(self) -> bool:
        """Whether this event ends the stream."""
        return self.event is WorkflowEventType.DONE


@dataclass
class RunWorkflowsReq:
    """Parameters for running a published workflow."""

    workflow_id: str
    parameters: dict[str, Any] = field(default_factory=dict)
    bot_id: str = ""
    ext: dict[str, str] = field(default_factory=dict)
    is_async: bool = False
    app_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        """JSON form of the request; empty optional fields are left out."""
        body: dict[str, Any] = {"workflow_id": self.workflow_id}
        optional = {
            "parameters": self.parameters,
            "bot_id": self.bot_id,
            "ext": self.ext,
            "is_async": self.is_async,
            "app_id": self.app_id,
        }
        body.update({key: value for key, value in optional.items() if value})
        return body


@dataclass
class ResumeRunWorkflowsReq:
    """Parameters for resuming an interrupted workflow run."""

    workflow_id: str
    event_id: str
    resume_data: str
    interrupt_type: int

    def to_dict(self) -> dict[str, Any]:
        """JSON form of the request."""
        return {
            "workflow_id": self.workflow_id,
            "event_id": self.event_id,
            "resume_data": self.resume_data,
            "interrupt_type": self.interrupt_type,
        }


def _load_object(data: str) -> dict[str, Any]:
    value = json.loads(data)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"expected a JSON object, got: {data}")
    return value


def _message(payload: dict[str, Any]) -> WorkflowEventMessage:
    return WorkflowEventMessage(
        content=payload.get("content", ""),
        node_title=payload.get("node_title", ""),
        node_seq_id=payload.get("node_seq_id", ""),
        node_is_finish=bool(payload.get("node_is_finish", False)),
        ext=payload.get("ext"),
    )


def _interrupt(payload: dict[str, Any]) -> WorkflowEventInterrupt:
    raw = payload.get("interrupt_data")
    interrupt_data = None
    if isinstance(raw, dict):
        interrupt_data = WorkflowEventInterruptData(
            event_id=raw.get("event_id", ""), type=raw.get("type", 0)
        )
    return WorkflowEventInterrupt(
        interrupt_data=interrupt_data, node_title=payload.get("node_title", "")
    )


def _error(payload: dict[str, Any]) -> WorkflowEventError:
    return WorkflowEventError(
        error_code=payload.get("error_code", 0),
        error_message=payload.get("error_message", ""),
    )


def parse_workflow_event_error(data: str) -> WorkflowEventError:
    """Decode the JSON payload of an error event."""
    return _error(_load_object(data))


def parse_workflow_event_interrupt(data: str) -> WorkflowEventInterrupt:
    """Decode the JSON payload of an interrupt event."""
    return _interrupt(_load_object(data))


def _build_event(event_id: str, event_name: str, data: str) -> WorkflowEvent:
    try:
        number = int(event_id)
    except ValueError:
        number = 0
    payload = _load_object(data)
    if event_name == WorkflowEventType.INTERRUPT.value:
        return WorkflowEvent(
            id=number, event=WorkflowEventType.INTERRUPT, interrupt=_interrupt(payload)
        )
    if event_name == WorkflowEventType.ERROR.value:
        return WorkflowEvent(id=number, event=WorkflowEventType.ERROR, error=_error(payload))
    if event_name == WorkflowEventType.DONE.value:
        return WorkflowEvent(
            id=number,
            event=WorkflowEventType.DONE,
            debug_url=WorkflowEventDebugURL(url=payload.get("debug_url", "")),
        )
    return WorkflowEvent(id=number, event=WorkflowEventType.MESSAGE, message=_message(payload))


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise EOFError("stream ended in the middle of an event") from None


def parse_workflow_event(line: str, lines: Iterator[str]) -> tuple[WorkflowEvent | None, bool]:
    """Parse one event starting at an ``id:`` line, reading its ``event:`` and ``data:`` lines.

    Lines that do not start an event yield ``(None, False)``.
    """
    if not line.startswith("id:"):
        return None, False
    event_id = line[3:].strip()
    event_name = _next_line(lines)[6:].strip()
    data = _next_line(lines)[5:].strip()
    event = _build_event(event_id, event_name, data)
    return event, event.is_done()


class WorkflowRuns:
    """Running workflows."""

    def __init__(self, core: Core) -> None:
        self._core = core
        self.histories = WorkflowRunsHistories(core)

    def create(self, req: RunWorkflowsReq) -> RunWorkflowsResp:
        """Run a workflow and wait for its result."""
        data, http_response = self._core.request("POST", "/v1/workflow/run", req)
        resp = RunWorkflowsResp.from_dict(data)
        resp.http_response = http_response
        return resp

    def stream(self, req: RunWorkflowsReq) -> StreamReader:
        """Run a workflow and stream its events."""
        response = self._core.stream_request("POST", "/v1/workflow/stream_run", req)
        return StreamReader(response, parse_workflow_event)

    def resume(self, req: ResumeRunWorkflowsReq) -> StreamReader:
        """Resume an interrupted workflow run and stream its events."""
        response = self._core.stream_request("POST", "/v1/workflow/stream_resume", req)
        return StreamReader(response, parse_workflow_event)


class Workflows:
    """Entry point for workflow operations."""

    def __init__(self, core: Core) -> None:
        self.runs = WorkflowRuns(core)