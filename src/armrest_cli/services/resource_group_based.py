"""Generic CRUD for resources that live inside a resource group."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

import httpx

from armrest_cli.client.errors import ConfigurationError, ResourceNotFoundError
from armrest_cli.models.base import ArmResource
from armrest_cli.models.envelope import ArmrestCollection, ResponseHeaders
from armrest_cli.services.base import (
    ArmrestService,
    UrlHook,
    apply_url_hook,
    join_url,
)

logger = logging.getLogger(__name__)


class _GroupCollector:
    """Accumulates per-group pages from concurrent workers.

    Only ``add`` takes the lock; read ``collection()`` after the workers
    have been joined.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pages: list[list[ArmResource]] = []
        self._headers: ResponseHeaders | None = None

    def add(self, models: Sequence[ArmResource], headers: ResponseHeaders) -> None:
        with self._lock:
            self._headers = headers
            if models:
                self._pages.append(list(models))

    def collection(self) -> ArmrestCollection:
        items = [model for page in self._pages for model in page]
        # The last headers recorded stand in for the whole aggregation
        return ArmrestCollection(items, response_headers=self._headers)


_MISSING = object()


def matches_filter(obj: Any, filter: dict[str, Any]) -> bool:
    """True when every ``field == value`` pair holds for *obj*.

    A field *obj* does not have never matches, not even a None value.
    """
    for key, value in filter.items():
        actual = getattr(obj, key, _MISSING)
        if actual is _MISSING or actual != value:
            return False
    return True


class ResourceGroupBasedService(ArmrestService):
    """Base class for services whose resources live in a resource group.

    Every operation accepts ``url_hook``, called once with the default URL
    before the request; a non-None return value replaces that URL.
    Omitting the resource group falls back to the configured default.
    """

    def create(
        self,
        name: str | None,
        resource_group: str | None = None,
        options: dict[str, Any] | None = None,
        *,
        url_hook: UrlHook | None = None,
    ) -> ArmResource | None:
        """Create or replace resource *name* in *resource_group*.

        Returns the decoded resource when the API answers with a body.
        This is an asynchronous operation: an empty body returns None, and
        the request's headers (``azure_asyncoperation`` or ``location``)
        are the only way to track it. Polling is up to the caller.
        """
        return self._put(name, resource_group, options, url_hook=url_hook)

    def update(
        self,
        name: str | None,
        resource_group: str | None = None,
        options: dict[str, Any] | None = None,
        *,
        url_hook: UrlHook | None = None,
    ) -> ArmResource | None:
        """Update resource *name*. Same contract as :meth:`create`."""
        return self._put(name, resource_group, options, url_hook=url_hook)

    def _put(
        self,
        name: str | None,
        resource_group: str | None,
        options: dict[str, Any] | None,
        *,
        url_hook: UrlHook | None,
    ) -> ArmResource | None:
        resource_group = self._resource_group_or_default(resource_group)
        self.validate_resource_group(resource_group)
        self.validate_resource(name)

        url = apply_url_hook(self.build_url(resource_group, name), url_hook)
        response = self.client.put(url, json=options or {})

        if not response.content.strip():
            return None
        return self._decode(response)

    def get(
        self,
        name: str | None,
        resource_group: str | None = None,
        *,
        url_hook: UrlHook | None = None,
    ) -> ArmResource:
        """Get resource *name* from *resource_group*."""
        resource_group = self._resource_group_or_default(resource_group)
        self.validate_resource_group(resource_group)
        self.validate_resource(name)

        url = apply_url_hook(self.build_url(resource_group, name), url_hook)
        return self._decode(self.client.get(url))

    def list(
        self,
        resource_group: str | None = None,
        *,
        url_hook: UrlHook | None = None,
    ) -> ArmrestCollection:
        """List the resources in *resource_group*.

        The collection carries the response headers for the call as a whole.
        """
        resource_group = self._resource_group_or_default(resource_group)
        self.validate_resource_group(resource_group)

        url = apply_url_hook(self.build_url(resource_group), url_hook)
        response = self.client.get(url)
        return ArmrestCollection.create_from_response(response, self.model_class)

    def list_all(
        self,
        filter: dict[str, Any] | None = None,
        *,
        url_hook: UrlHook | None = None,
    ) -> ArmrestCollection:
        """List every resource of this type in the subscription with one call.

        *filter* is applied locally after decoding; for example
        ``{"location": "eastus"}`` keeps only resources in East US.
        """
        url = apply_url_hook(self.build_url(), url_hook)
        response = self.client.get(url)
        results = ArmrestCollection.create_from_response(response, self.model_class)
        return self.filter_collection(results, filter)

    def delete(
        self,
        name: str | None,
        resource_group: str | None = None,
        *,
        url_hook: UrlHook | None = None,
    ) -> ResponseHeaders:
        """Delete resource *name* and return the response headers.

        A 204 answer means the resource does not exist and raises
        ResourceNotFoundError.
        """
        resource_group = self._resource_group_or_default(resource_group)
        self.validate_resource_group(resource_group)
        self.validate_resource(name)

        url = apply_url_hook(self.build_url(resource_group, name), url_hook)
        response = self.client.delete(url)

        if response.status_code == 204:
            msg = f"{type(self).__name__} resource {resource_group}/{name} not found"
            raise ResourceNotFoundError(response.status_code, msg, response)

        return ResponseHeaders.from_response(response)

    def list_in_all_groups(
        self, *, url_hook: UrlHook | None = None,
    ) -> ArmrestCollection:
        """Aggregate resources from every resource group in the subscription.

        For APIs with no subscription-wide listing. One request per group
        runs on a pool of ``configuration.max_threads`` workers. The result
        has no skip token because it collates several calls, and its
        headers are those of whichever call finished last. Any failed
        request aborts the whole listing.

        Unlike the single-request operations, ``url_hook`` is called once
        per group, with that group's URL, from the worker thread making
        the request.
        """
        groups = [group.name for group in self.list_resource_groups()]
        collector = _GroupCollector()

        def fetch(group: str) -> None:
            url = apply_url_hook(self.build_url(group), url_hook)
            response = self.client.get(url)
            models = self._decode_values(response)
            collector.add(models, ResponseHeaders.from_response(response))

        with ThreadPoolExecutor(max_workers=self.configuration.max_threads) as pool:
            futures = [pool.submit(fetch, group) for group in groups]
        for future in futures:
            future.result()

        results = collector.collection()
        logger.debug(
            "%s: %d resources across %d groups",
            type(self).__name__, len(results), len(groups),
        )
        return results

    @staticmethod
    def filter_collection(
        results: ArmrestCollection, filter: dict[str, Any] | None,
    ) -> ArmrestCollection:
        if not filter:
            return results
        return ArmrestCollection(
            (obj for obj in results if matches_filter(obj, filter)),
            response_headers=results.response_headers,
            next_link=results.next_link,
        )

    def validate_resource_group(self, name: str | None) -> None:
        if not name:
            raise ConfigurationError("must specify resource group")

    def validate_resource(self, name: str | None) -> None:
        if not name:
            raise ConfigurationError(f"must specify {self.resource_label}")

    def build_url(self, resource_group: str | None = None, *args: str) -> str:
        """Build a versioned URL under the subscription.

        ``build_url()`` addresses the subscription-wide collection,
        ``build_url(group)`` a group's collection and
        ``build_url(group, name)`` a single resource.
        """
        url = self.subscription_url
        if resource_group:
            url = join_url(url, "resourceGroups", resource_group)
        url = join_url(url, "providers", self.provider, self.service_name)
        if args:
            url = join_url(url, *args)
        return f"{url}?api-version={self.api_version}"

    def _resource_group_or_default(self, resource_group: str | None) -> str | None:
        return resource_group or self.configuration.resource_group

    def _decode(self, response: httpx.Response) -> ArmResource:
        obj = self.model_class.model_validate_json(response.content)
        obj.response_headers = ResponseHeaders.from_response(response)
        return obj

    def _decode_values(self, response: httpx.Response) -> Sequence[ArmResource]:
        if not response.content.strip():
            return []
        return [
            self.model_class.model_validate(entry)
            for entry in response.json().get("value", [])
        ]
