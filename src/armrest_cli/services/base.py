"""Base class shared by all resource manager services."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, ClassVar, Optional

from armrest_cli.client.transport import ArmClient
from armrest_cli.config.models import ArmrestConfiguration
from armrest_cli.models.base import ArmResource

if TYPE_CHECKING:
    from armrest_cli.models.envelope import ArmrestCollection

# Receives the built URL; returning None keeps it unchanged.
UrlHook = Callable[[str], Optional[str]]

SUBSCRIPTIONS_PATH = "subscriptions"


def join_url(base: str, *segments: str) -> str:
    """Join path segments with exactly one ``/`` between each pair.

    Empty segments still contribute their separator. Nothing is escaped.
    """
    url = base
    for segment in segments:
        url = f"{url.rstrip('/')}/{segment.lstrip('/')}"
    return url


def apply_url_hook(url: str, url_hook: UrlHook | None) -> str:
    if url_hook is None:
        return url
    return url_hook(url) or url


class ArmrestService:
    """Shared plumbing: the client, its configuration and the service identity.

    Subclasses set ``provider``, ``service_name``, ``api_version`` and
    ``model_class``. ``resource_label`` names a single resource in
    validation messages.
    """

    provider: ClassVar[str] = ""
    service_name: ClassVar[str] = ""
    api_version: ClassVar[str] = ""
    model_class: ClassVar[type[ArmResource]] = ArmResource
    resource_label: ClassVar[str] = "resource"

    def __init__(
        self,
        client: ArmClient,
        *,
        provider: str | None = None,
        api_version: str | None = None,
    ) -> None:
        self.client = client
        # Instance attributes shadow the class defaults
        self.provider = provider or type(self).provider
        self.api_version = api_version or type(self).api_version

    @property
    def configuration(self) -> ArmrestConfiguration:
        return self.client.configuration

    @property
    def subscription_url(self) -> str:
        return join_url(
            self.configuration.environment_url,
            SUBSCRIPTIONS_PATH,
            self.configuration.subscription_id,
        )

    def list_resource_groups(self) -> ArmrestCollection:
        """Return every resource group in the subscription."""
        from armrest_cli.services.resource_group import ResourceGroupService

        return ResourceGroupService(self.client).list()
