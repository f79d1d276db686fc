"""Network services."""

from __future__ import annotations

from armrest_cli.models.network import (
    NetworkSecurityGroup,
    PublicIpAddress,
    VirtualNetwork,
)
from armrest_cli.services.resource_group_based import ResourceGroupBasedService


class VirtualNetworkService(ResourceGroupBasedService):
    provider = "Microsoft.Network"
    service_name = "virtualNetworks"
    api_version = "2023-04-01"
    model_class = VirtualNetwork
    resource_label = "virtual network"


class NetworkSecurityGroupService(ResourceGroupBasedService):
    provider = "Microsoft.Network"
    service_name = "networkSecurityGroups"
    api_version = "2023-04-01"
    model_class = NetworkSecurityGroup
    resource_label = "network security group"


class PublicIpAddressService(ResourceGroupBasedService):
    provider = "Microsoft.Network"
    service_name = "publicIPAddresses"
    api_version = "2023-04-01"
    model_class = PublicIpAddress
    resource_label = "public ip address"
