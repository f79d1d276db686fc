"""Storage resource models."""

from __future__ import annotations

from typing import Any

from armrest_cli.models.base import ArmResource


class StorageAccount(ArmResource):
    """A storage account."""

    kind: str | None = None

    @property
    def primary_endpoints(self) -> dict[str, Any]:
        return (self.properties or {}).get("primaryEndpoints", {})
