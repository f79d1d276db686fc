"""Resource manager HTTP client."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from armrest_cli.client.auth import resolve_auth
from armrest_cli.client.errors import (
    ApiError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    ConnectionFailedError,
    NotFoundError,
)
from armrest_cli.config.constants import DEFAULT_MAX_RETRIES
from armrest_cli.config.models import ArmrestConfiguration

logger = logging.getLogger(__name__)


def parse_error_body(response: httpx.Response) -> tuple[str | None, str]:
    """Return ``(code, message)`` from an ARM error envelope, or the raw text."""
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None, response.text
    if isinstance(data, dict):
        error = data.get("error", data)
        if isinstance(error, dict) and "message" in error:
            return error.get("code"), error["message"]
    return None, response.text


class ArmClient:
    """Synchronous HTTP client for the Azure Resource Manager REST API.

    Safe to share between worker threads; ``httpx.Client`` pools
    connections across them.
    """

    def __init__(
        self,
        configuration: ArmrestConfiguration,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.configuration = configuration
        self.base_url = configuration.environment_url
        auth = resolve_auth(configuration)
        if not configuration.verify_ssl:
            import sys

            print("Warning: TLS certificate verification is disabled", file=sys.stderr)
        if transport is None:
            transport = httpx.HTTPTransport(
                retries=DEFAULT_MAX_RETRIES, verify=configuration.verify_ssl,
            )
        self._client = httpx.Client(
            base_url=self.base_url,
            auth=auth,
            verify=configuration.verify_ssl,
            timeout=configuration.timeout,
            transport=transport,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
            },
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ArmClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def _handle_response(self, response: httpx.Response) -> httpx.Response:
        if response.is_success:
            return response
        status = response.status_code
        code, detail = parse_error_body(response)
        if status in (401, 403):
            raise AuthenticationError(
                f"Authentication failed ({status}): {detail}", response=response,
            )
        if status == 404:
            raise NotFoundError(status, detail, code=code, response=response)
        if status == 409:
            raise ConflictError(status, detail, code=code, response=response)
        if status in (400, 422):
            raise BadRequestError(status, detail, code=code, response=response)
        raise ApiError(status, detail, code=code, response=response)

    def request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, **kwargs)
        except httpx.ConnectError as exc:
            raise ConnectionFailedError(
                f"Cannot connect to {self.base_url}: {exc}"
            ) from exc
        except httpx.TimeoutException as exc:
            raise ConnectionFailedError(
                f"Request to {self.base_url} timed out: {exc}"
            ) from exc
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as exc:
            raise ConnectionFailedError(
                f"Invalid URL {url}: {exc}"
            ) from exc
        logger.debug("%s %s -> %s", method, url, response.status_code)
        return self._handle_response(response)

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", url, **kwargs)
