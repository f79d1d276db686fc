"""Template deployment service."""

from __future__ import annotations

from typing import Any

from armrest_cli.models.envelope import ArmrestCollection
from armrest_cli.models.resources import TemplateDeployment
from armrest_cli.services.base import UrlHook
from armrest_cli.services.resource_group_based import ResourceGroupBasedService


class TemplateDeploymentService(ResourceGroupBasedService):
    """Deployments can only be listed per resource group."""

    provider = "Microsoft.Resources"
    service_name = "deployments"
    api_version = "2022-09-01"
    model_class = TemplateDeployment
    resource_label = "deployment"

    def list_all(
        self,
        filter: dict[str, Any] | None = None,
        *,
        url_hook: UrlHook | None = None,
    ) -> ArmrestCollection:
        results = self.list_in_all_groups(url_hook=url_hook)
        return self.filter_collection(results, filter)
