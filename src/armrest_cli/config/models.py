"""Pydantic models for CLI configuration."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from armrest_cli.config.constants import (
    DEFAULT_AUTHORITY_URL,
    DEFAULT_ENVIRONMENT_URL,
    DEFAULT_MAX_THREADS,
    DEFAULT_TIMEOUT,
)


class ArmrestConfiguration(BaseModel):
    """A named subscription profile and the settings shared by every service."""

    name: str
    subscription_id: str = Field(description="Azure subscription ID")
    tenant_id: str | None = Field(default=None, description="Azure AD tenant ID")
    client_id: str | None = Field(
        default=None, description="Service principal application ID",
    )
    client_key: str | None = Field(
        default=None, description="Service principal secret",
    )
    token: str | None = Field(
        default=None, description="Pre-acquired bearer token",
    )
    resource_group: str | None = Field(
        default=None, description="Default resource group",
    )
    max_threads: int = Field(
        default=DEFAULT_MAX_THREADS, ge=1, le=64,
        description="Worker threads used when listing across resource groups",
    )
    environment_url: str = Field(
        default=DEFAULT_ENVIRONMENT_URL,
        description="Resource manager endpoint",
    )
    authority_url: str = Field(
        default=DEFAULT_AUTHORITY_URL,
        description="OAuth authority used for client credentials",
    )
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, le=600, description="Request timeout in seconds",
    )

    @field_validator("environment_url", "authority_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v.rstrip("/")

    @property
    def auth_configured(self) -> bool:
        has_client_credentials = (
            self.tenant_id is not None
            and self.client_id is not None
            and self.client_key is not None
        )
        return self.token is not None or has_client_credentials


class CLIConfig(BaseModel):
    """Root configuration model."""

    default_profile: str | None = None
    default_format: str = "table"
    profiles: dict[str, ArmrestConfiguration] = Field(default_factory=dict)
