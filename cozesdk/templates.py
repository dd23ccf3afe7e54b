"""Template operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from cozesdk.request import Core, HTTPResponse


class TemplateEntityType(str, Enum):
    """Kind of entity a template produces."""

    AGENT = "agent"


@dataclass
class TemplateDuplicateResp:
    """The entity created by duplicating a template."""

    entity_id: str = ""
    entity_type: TemplateEntityType | str = ""
    log_id: str = ""
    http_response: HTTPResponse | None = field(default=None, repr=False, compare=False)


class Templates:
    """Access to templates."""

    def __init__(self, core: Core) -> None:
        self._core = core

    def duplicate(
        self, template_id: str, workspace_id: str, name: str | None = None
    ) -> TemplateDuplicateResp:
        """Copy a template into a workspace, optionally under a new name."""
        body: dict[str, str] = {"workspace_id": workspace_id}
        if name is not None:
            body["name"] = name
        data, http_response = self._core.request(
            "POST", f"/v1/templates/{template_id}/duplicate", body
        )
        payload = data.get("data") or {}
        entity_type = payload.get("entity_type", "")
        try:
            entity_type = TemplateEntityType(entity_type)
        except ValueError:
            pass
        return TemplateDuplicateResp(
            entity_id=payload.get("entity_id", ""),
            entity_type=entity_type,
            log_id=http_response.log_id(),
            http_response=http_response,
        )