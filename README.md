# cozesdk

A small, synchronous client for the Coze open API, built on `httpx`.

It covers:

- running a workflow and waiting for its result;
- running a workflow as a stream of events, and resuming an interrupted run;
- looking up the history of an asynchronous workflow run;
- duplicating templates;
- fetching the current user;
- uploading a file as multipart form data through the core client.

## Installation

```
pip install cozesdk
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "cozesdk[test]"
pytest
```

## The core client

Every API group is built on a `Core` from `cozesdk.request`. It holds the
base URL, the `httpx.Client` used to send requests (a client with a
5-second timeout is created when none is given), an authentication object,
and whether a log id is forwarded with each request.

The authentication object is anything with a `token()` method returning an
access token; it is sent as `Authorization: Bearer <token>`. Pass `None` for
calls that need no token.

```python
import httpx

from cozesdk.request import Core


class StaticToken:
    def token(self):
        return "token"


core = Core(
    base_url="https://api.example.com",
    client=httpx.Client(timeout=5.0),
    auth=StaticToken(),
    enable_log_id=False,
)
```

Each request carries a `User-Agent` header and an `X-Coze-Client-User-Agent`
header holding a JSON description of the client. These values come from
`cozesdk.user_agent.user_agent()` and `cozesdk.user_agent.client_user_agent()`;
`cozesdk.user_agent.common_headers(token, log_id)` builds the full set.

When `enable_log_id` is true, the value of the context variable
`cozesdk.request.request_log_id` (if not empty) is sent in the `X-Tt-Logid`
header:

```python
from cozesdk.request import request_log_id

request_log_id.set("my-trace-id")
```

`Core.request`, `Core.upload_file`, `Core.raw_request` and
`Core.stream_request` are available for calls the API groups below do not
wrap. `request` and `upload_file` return the decoded JSON body together with
an `HTTPResponse` holding the status and headers; `HTTPResponse.log_id()`
gives the log id the server returned.

## Running workflows

```python
from cozesdk.workflow_runs import RunWorkflowsReq, Workflows

workflows = Workflows(core)

result = workflows.runs.create(
    RunWorkflowsReq(workflow_id="workflow1", parameters={"param1": "value1"})
)
print(result.execute_id, result.data, result.debug_url, result.token, result.cost)
```

### Streaming

`stream` and `resume` return a `StreamReader` from `cozesdk.stream_reader`.
Call `recv()` for one event at a time (it returns `None` once the stream is
exhausted), or iterate over it. It is a context manager and closes the
underlying response on exit.

```python
from cozesdk.workflow_runs import RunWorkflowsReq, WorkflowEventType

with workflows.runs.stream(RunWorkflowsReq(workflow_id="workflow1")) as events:
    for event in events:
        if event.event is WorkflowEventType.MESSAGE:
            print(event.message.node_title, event.message.content)
        elif event.event is WorkflowEventType.INTERRUPT:
            print("interrupted:", event.interrupt.interrupt_data.event_id)
        elif event.event is WorkflowEventType.ERROR:
            print("error:", event.error.error_code, event.error.error_message)
        elif event.is_done():
            print("debug page:", event.debug_url.url)
```

If the server answers a streaming call with a JSON body carrying a non-zero
`code`, the call raises `CozeError` instead of returning a stream.

An interrupted run is resumed with `ResumeRunWorkflowsReq`:

```python
from cozesdk.workflow_runs import ResumeRunWorkflowsReq

with workflows.runs.resume(
    ResumeRunWorkflowsReq(
        workflow_id="workflow1",
        event_id="event1",
        resume_data="data1",
        interrupt_type=1,
    )
) as events:
    for event in events:
        ...
```

Event payloads can also be decoded on their own with
`parse_workflow_event_error(data)` and `parse_workflow_event_interrupt(data)`;
both raise `ValueError` on text that is not a JSON object.

### Run history

The history of an asynchronous run is reached through `workflows.runs.histories`
or a `WorkflowRunsHistories` of its own:

```python
from cozesdk.workflow_histories import WorkflowExecuteStatus

found = workflows.runs.histories.retrieve(workflow_id="workflow1", execute_id="exec1")
print(found.log_id)
for history in found.histories:
    if history.execute_status is WorkflowExecuteStatus.SUCCESS:
        print(history.output)
```

## Templates and users

```python
from cozesdk.templates import Templates
from cozesdk.users import Users

copy = Templates(core).duplicate("template1", workspace_id="workspace1", name="My copy")
print(copy.entity_id, copy.entity_type)

me = Users(core).me()
print(me.user_id, me.user_name, me.nick_name, me.avatar_url)
```

## Errors

- `cozesdk.request.CozeError` is raised when the API answers with a non-zero
  `code`; it carries `code`, `message` and `log_id`. It is also raised for a
  non-200 answer whose body is not a JSON object, with the HTTP status as
  `code` and the body text as `message`.
- `cozesdk.request.CozeAuthError` is raised for a non-200 answer whose body is
  a JSON object; it carries `code`, `error_message`, `http_code` and `log_id`.
- Network failures surface as the exceptions `httpx` raises.

Results keep the HTTP response they came from in `http_response`, so the log
id of a call is available for troubleshooting.

## What it does not do

- It ships no authentication flows: you supply the object that provides the
  access token.
- It has no workspace listing, no chat or conversation calls and no paging
  helpers.
- It is synchronous only; there is no asyncio client.
- It has no command-line tool.