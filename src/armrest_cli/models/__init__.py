"""Pydantic data models for the Azure Resource Manager API."""

from armrest_cli.models.base import ArmResource
from armrest_cli.models.compute import AvailabilitySet, VirtualMachine
from armrest_cli.models.envelope import ArmrestCollection, ResponseHeaders
from armrest_cli.models.network import (
    NetworkSecurityGroup,
    PublicIpAddress,
    VirtualNetwork,
)
from armrest_cli.models.resources import ResourceGroup, TemplateDeployment
from armrest_cli.models.storage import StorageAccount

__all__ = [
    "ArmResource",
    "ArmrestCollection",
    "AvailabilitySet",
    "NetworkSecurityGroup",
    "PublicIpAddress",
    "ResourceGroup",
    "ResponseHeaders",
    "StorageAccount",
    "TemplateDeployment",
    "VirtualMachine",
    "VirtualNetwork",
]
