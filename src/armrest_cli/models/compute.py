"""Compute resource models."""

from __future__ import annotations

from typing import Any

from armrest_cli.models.base import ArmResource


class VirtualMachine(ArmResource):
    """A virtual machine."""

    zones: list[str] | None = None
    identity: dict[str, Any] | None = None
    plan: dict[str, Any] | None = None

    @property
    def vm_size(self) -> str | None:
        profile = (self.properties or {}).get("hardwareProfile", {})
        return profile.get("vmSize")

    @property
    def os_type(self) -> str | None:
        storage = (self.properties or {}).get("storageProfile", {})
        return storage.get("osDisk", {}).get("osType")


class AvailabilitySet(ArmResource):
    """An availability set."""

    @property
    def fault_domain_count(self) -> int | None:
        return (self.properties or {}).get("platformFaultDomainCount")
