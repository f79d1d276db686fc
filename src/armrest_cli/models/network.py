"""Network resource models."""

from __future__ import annotations

from typing import Any

from armrest_cli.models.base import ArmResource


class VirtualNetwork(ArmResource):
    """A virtual network."""

    @property
    def address_prefixes(self) -> list[str]:
        space = (self.properties or {}).get("addressSpace", {})
        return space.get("addressPrefixes", [])

    @property
    def subnets(self) -> list[dict[str, Any]]:
        return (self.properties or {}).get("subnets", [])


class NetworkSecurityGroup(ArmResource):
    """A network security group."""

    @property
    def security_rules(self) -> list[dict[str, Any]]:
        return (self.properties or {}).get("securityRules", [])


class PublicIpAddress(ArmResource):
    """A public IP address."""

    zones: list[str] | None = None

    @property
    def ip_address(self) -> str | None:
        return (self.properties or {}).get("ipAddress")
