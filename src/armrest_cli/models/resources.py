"""Resource group and deployment models."""

from __future__ import annotations

from pydantic import Field

from armrest_cli.models.base import ArmResource


class ResourceGroup(ArmResource):
    """A resource group within a subscription."""

    managed_by: str | None = Field(default=None, alias="managedBy")


class TemplateDeployment(ArmResource):
    """A template deployment scoped to a resource group."""

    @property
    def mode(self) -> str | None:
        return (self.properties or {}).get("mode")
