"""Base model shared by every resource manager entity."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from armrest_cli.models.envelope import ResponseHeaders

_RESOURCE_GROUP_RE = re.compile(r"/resourceGroups/([^/]+)", re.IGNORECASE)


class ArmResource(BaseModel):
    """A resource as returned by the resource manager.

    Keys the model does not declare are kept and readable as attributes.
    ``response_headers`` is filled in by the service that fetched the
    resource and is never serialized.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str | None = None
    name: str | None = None
    type: str | None = None
    location: str | None = None
    tags: dict[str, str] | None = None
    etag: str | None = None
    sku: dict[str, Any] | None = None
    properties: dict[str, Any] | None = None
    response_headers: ResponseHeaders | None = Field(
        default=None, exclude=True, repr=False,
    )

    @property
    def resource_group(self) -> str | None:
        if not self.id:
            return None
        match = _RESOURCE_GROUP_RE.search(self.id)
        return match.group(1) if match else None

    @property
    def provisioning_state(self) -> str | None:
        return (self.properties or {}).get("provisioningState")

    def __eq__(self, other: object) -> bool:
        # Response headers describe the fetch, not the resource
        if not isinstance(other, ArmResource):
            return NotImplemented
        return type(self) is type(other) and self.model_dump() == other.model_dump()

    __hash__ = None  # type: ignore[assignment]
