"""Resource manager services and the short names the CLI knows them by."""

from armrest_cli.services.base import ArmrestService
from armrest_cli.services.compute import AvailabilitySetService, VirtualMachineService
from armrest_cli.services.deployment import TemplateDeploymentService
from armrest_cli.services.network import (
    NetworkSecurityGroupService,
    PublicIpAddressService,
    VirtualNetworkService,
)
from armrest_cli.services.resource_group import ResourceGroupService
from armrest_cli.services.resource_group_based import ResourceGroupBasedService
from armrest_cli.services.storage import StorageAccountService

SERVICES: dict[str, type[ResourceGroupBasedService]] = {
    "vm": VirtualMachineService,
    "availability-set": AvailabilitySetService,
    "storage": StorageAccountService,
    "vnet": VirtualNetworkService,
    "nsg": NetworkSecurityGroupService,
    "public-ip": PublicIpAddressService,
    "deployment": TemplateDeploymentService,
}

__all__ = [
    "SERVICES",
    "ArmrestService",
    "AvailabilitySetService",
    "NetworkSecurityGroupService",
    "PublicIpAddressService",
    "ResourceGroupBasedService",
    "ResourceGroupService",
    "StorageAccountService",
    "TemplateDeploymentService",
    "VirtualMachineService",
    "VirtualNetworkService",
]
