"""Storage services."""

from __future__ import annotations

from armrest_cli.models.storage import StorageAccount
from armrest_cli.services.resource_group_based import ResourceGroupBasedService


class StorageAccountService(ResourceGroupBasedService):
    provider = "Microsoft.Storage"
    service_name = "storageAccounts"
    api_version = "2023-01-01"
    model_class = StorageAccount
    resource_label = "storage account"
