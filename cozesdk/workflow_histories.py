"""Workflow run results and the history of asynchronous workflow runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Mapping

from cozesdk.request import Core, HTTPResponse


class WorkflowRunMode(IntEnum):
    """How a workflow was run."""

    SYNCHRONOUS = 0
    STREAMING = 1
    ASYNCHRONOUS = 2


class WorkflowExecuteStatus(str, Enum):
    """Execution status of a workflow run."""

    SUCCESS = "Success"
    RUNNING = "Running"
    FAIL = "Fail"


def _coerce(enum_type: type, value: Any) -> Any:
    try:
        return enum_type(value)
    except ValueError:
        return value


@dataclass
class WorkflowRunHistory:
    """One recorded run of a workflow."""

    execute_id: str = ""
    execute_status: WorkflowExecuteStatus | str = ""
    bot_id: str = ""
    connector_id: str = ""
    connector_uid: str = ""
    run_mode: WorkflowRunMode | int = WorkflowRunMode.SYNCHRONOUS
    log_id: str = ""
    create_time: int = 0
    update_time: int = 0
    output: str = ""
    error_code: str = ""
    error_message: str = ""
    debug_url: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WorkflowRunHistory":
        """Build a history entry from its JSON form."""
        return cls(
            execute_id=data.get("execute_id", ""),
            execute_status=_coerce(WorkflowExecuteStatus, data.get("execute_status", "")),
            bot_id=data.get("bot_id", ""),
            connector_id=data.get("connector_id", ""),
            connector_uid=data.get("connector_uid", ""),
            run_mode=_coerce(WorkflowRunMode, data.get("run_mode", 0)),
            log_id=data.get("logid", ""),
            create_time=data.get("create_time", 0),
            update_time=data.get("update_time", 0),
            output=data.get("output", ""),
            error_code=data.get("error_code", ""),
            error_message=data.get("error_message", ""),
            debug_url=data.get("debug_url", ""),
        )


@dataclass
class RunWorkflowsResp:
    """Result of running a workflow without streaming."""

    execute_id: str = ""
    data: str = ""
    debug_url: str = ""
    token: int = 0
    cost: str = ""
    log_id: str = ""
    http_response: HTTPResponse | None = field(default=None, repr=False, compare=False)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RunWorkflowsResp":
        """Build the result from the top level of the response body."""
        return cls(
            execute_id=data.get("execute_id", ""),
            data=data.get("data", "") or "",
            debug_url=data.get("debug_url", ""),
            token=data.get("token", 0),
            cost=data.get("cost", ""),
        )

    def attach(self, http_response: HTTPResponse) -> "RunWorkflowsResp":
        """Record the HTTP response this result came from."""
        self.http_response = http_response
        self.log_id = http_response.log_id()
        return self


@dataclass
class RetrieveWorkflowRunsHistoriesResp:
    """Histories returned for one asynchronous execution."""

    histories: list[WorkflowRunHistory] = field(default_factory=list)
    log_id: str = ""
    http_response: HTTPResponse | None = field(default=None, repr=False, compare=False)


class WorkflowRunsHistories:
    """Access to the run histories of workflows."""

    def __init__(self, core: Core) -> None:
        self._core = core

    def retrieve(self, workflow_id: str, execute_id: str) -> RetrieveWorkflowRunsHistoriesResp:
        """Fetch the history of an asynchronous workflow execution."""
        data, http_response = self._core.request(
            "GET", f"/v1/workflows/{workflow_id}/run_histories/{execute_id}"
        )
        entries = data.get("data") or []
        return RetrieveWorkflowRunsHistoriesResp(
            histories=[WorkflowRunHistory.from_dict(entry) for entry in entries],
            log_id=http_response.log_id(),
            http_response=http_response,
        )