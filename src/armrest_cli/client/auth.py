"""Authentication strategies for the resource manager API."""

from __future__ import annotations

import time
from collections.abc import Generator

import httpx

from armrest_cli.client.errors import AuthenticationError, ConfigurationError
from armrest_cli.config.constants import TOKEN_EXPIRY_MARGIN
from armrest_cli.config.models import ArmrestConfiguration


class BearerTokenAuth(httpx.Auth):
    """Authenticate with a pre-acquired access token."""

    def __init__(self, token: str) -> None:
        self.token = token

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


class ClientCredentialsAuth(httpx.Auth):
    """OAuth2 client-credentials flow against the Azure AD token endpoint.

    The token is requested lazily on the first API call and reused until
    it is within ``TOKEN_EXPIRY_MARGIN`` seconds of expiring.
    """

    requires_response_body = True

    def __init__(
        self,
        tenant_id: str,
        client_id: str,
        client_key: str,
        *,
        authority_url: str,
        resource: str,
    ) -> None:
        self.tenant_id = tenant_id
        self.client_id = client_id
        self.client_key = client_key
        self.token_url = f"{authority_url.rstrip('/')}/{tenant_id}/oauth2/token"
        self.resource = resource.rstrip("/") + "/"
        self.token: str | None = None
        self.expires_at = 0.0

    @property
    def token_valid(self) -> bool:
        return self.token is not None and time.time() < self.expires_at - TOKEN_EXPIRY_MARGIN

    def build_token_request(self) -> httpx.Request:
        return httpx.Request(
            "POST",
            self.token_url,
            data={
                "grant_type": "client_credentials",
                "client_id": self.client_id,
                "client_secret": self.client_key,
                "resource": self.resource,
            },
        )

    def update_token(self, response: httpx.Response) -> None:
        if not response.is_success:
            try:
                detail = response.json().get("error_description", response.text)
            except ValueError:
                detail = response.text
            raise AuthenticationError(
                f"Token request for tenant {self.tenant_id} failed: {detail}",
                response=response,
            )
        data = response.json()
        self.token = data["access_token"]
        if "expires_in" in data:
            self.expires_at = time.time() + float(data["expires_in"])
        else:
            self.expires_at = float(data.get("expires_on", 0))

    def auth_flow(
        self, request: httpx.Request,
    ) -> Generator[httpx.Request, httpx.Response, None]:
        if not self.token_valid:
            token_response = yield self.build_token_request()
            self.update_token(token_response)
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


def resolve_auth(configuration: ArmrestConfiguration) -> httpx.Auth:
    """Resolve authentication from a subscription configuration."""
    if configuration.token:
        return BearerTokenAuth(configuration.token)
    if configuration.tenant_id and configuration.client_id and configuration.client_key:
        return ClientCredentialsAuth(
            configuration.tenant_id,
            configuration.client_id,
            configuration.client_key,
            authority_url=configuration.authority_url,
            resource=configuration.environment_url,
        )
    raise ConfigurationError(
        "No credentials configured. Provide an access token or a tenant ID,"
        " client ID and client secret."
    )
