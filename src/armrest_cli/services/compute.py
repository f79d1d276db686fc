"""Compute services."""

from __future__ import annotations

from armrest_cli.models.compute import AvailabilitySet, VirtualMachine
from armrest_cli.services.resource_group_based import ResourceGroupBasedService


class VirtualMachineService(ResourceGroupBasedService):
    provider = "Microsoft.Compute"
    service_name = "virtualMachines"
    api_version = "2023-03-01"
    model_class = VirtualMachine
    resource_label = "virtual machine"


class AvailabilitySetService(ResourceGroupBasedService):
    provider = "Microsoft.Compute"
    service_name = "availabilitySets"
    api_version = "2023-03-01"
    model_class = AvailabilitySet
    resource_label = "availability set"
