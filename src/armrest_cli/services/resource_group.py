"""Resource group service — enumerates and manages the groups themselves."""

from __future__ import annotations

from typing import Any

from armrest_cli.client.errors import ConfigurationError, NotFoundError
from armrest_cli.models.envelope import ArmrestCollection, ResponseHeaders
from armrest_cli.models.resources import ResourceGroup
from armrest_cli.services.base import ArmrestService, UrlHook, apply_url_hook, join_url


class ResourceGroupService(ArmrestService):
    """Resource groups sit directly under the subscription, with no provider segment."""

    service_name = "resourceGroups"
    api_version = "2016-09-01"
    model_class = ResourceGroup
    resource_label = "resource group"

    def build_url(self, name: str | None = None) -> str:
        url = join_url(self.subscription_url, "resourcegroups")
        if name:
            url = join_url(url, name)
        return f"{url}?api-version={self.api_version}"

    def validate_resource_group(self, name: str | None) -> None:
        if not name:
            raise ConfigurationError("must specify resource group")

    def list(self, *, url_hook: UrlHook | None = None) -> ArmrestCollection:
        url = apply_url_hook(self.build_url(), url_hook)
        response = self.client.get(url)
        return ArmrestCollection.create_from_response(response, ResourceGroup)

    def get(
        self, name: str | None, *, url_hook: UrlHook | None = None,
    ) -> ResourceGroup:
        self.validate_resource_group(name)
        url = apply_url_hook(self.build_url(name), url_hook)
        response = self.client.get(url)
        group = ResourceGroup.model_validate_json(response.content)
        group.response_headers = ResponseHeaders.from_response(response)
        return group

    def exists(self, name: str | None) -> bool:
        try:
            self.get(name)
        except NotFoundError:
            return False
        return True

    def create(
        self,
        name: str | None,
        location: str,
        tags: dict[str, str] | None = None,
        *,
        url_hook: UrlHook | None = None,
    ) -> ResourceGroup:
        self.validate_resource_group(name)
        body: dict[str, Any] = {"location": location}
        if tags:
            body["tags"] = tags
        url = apply_url_hook(self.build_url(name), url_hook)
        response = self.client.put(url, json=body)
        group = ResourceGroup.model_validate_json(response.content)
        group.response_headers = ResponseHeaders.from_response(response)
        return group

    def delete(
        self, name: str | None, *, url_hook: UrlHook | None = None,
    ) -> ResponseHeaders:
        """Start deleting a group and everything in it; returns the tracking headers."""
        self.validate_resource_group(name)
        url = apply_url_hook(self.build_url(name), url_hook)
        response = self.client.delete(url)
        return ResponseHeaders.from_response(response)
