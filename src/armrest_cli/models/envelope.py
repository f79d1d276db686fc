"""Response envelopes — transport metadata attached to decoded payloads."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar
from urllib.parse import parse_qs, urlsplit

import httpx
from pydantic import BaseModel, Field, field_validator

M = TypeVar("M", bound=BaseModel)


class ResponseHeaders(BaseModel):
    """Status code and headers of one HTTP exchange.

    Header names are stored lower-cased. Long-running operations report
    their tracking URL in ``azure_asyncoperation`` or ``location``.
    """

    status_code: int
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("headers")
    @classmethod
    def lower_keys(cls, v: dict[str, str]) -> dict[str, str]:
        return {key.lower(): value for key, value in v.items()}

    @classmethod
    def from_response(cls, response: httpx.Response) -> ResponseHeaders:
        return cls(status_code=response.status_code, headers=dict(response.headers))

    def get(self, name: str, default: str | None = None) -> str | None:
        return self.headers.get(name.lower(), default)

    @property
    def azure_asyncoperation(self) -> str | None:
        return self.get("azure-asyncoperation")

    @property
    def location(self) -> str | None:
        return self.get("location")

    @property
    def retry_after(self) -> int | None:
        value = self.get("retry-after")
        if value is None or not value.isdigit():
            return None
        return int(value)

    @property
    def request_id(self) -> str | None:
        return self.get("x-ms-request-id")

    @property
    def correlation_request_id(self) -> str | None:
        return self.get("x-ms-correlation-request-id")

    @property
    def remaining_reads(self) -> int | None:
        value = self.get("x-ms-ratelimit-remaining-subscription-reads")
        return int(value) if value and value.isdigit() else None

    @property
    def remaining_writes(self) -> int | None:
        value = self.get("x-ms-ratelimit-remaining-subscription-writes")
        return int(value) if value and value.isdigit() else None


def skip_token_from(next_link: str | None) -> str | None:
    """Extract the ``$skiptoken`` query value from a ``nextLink`` URL."""
    if not next_link:
        return None
    values = parse_qs(urlsplit(next_link).query).get("$skiptoken")
    return values[0] if values else None


class ArmrestCollection(list):
    """A list of decoded resources plus the headers of the call that produced it."""

    def __init__(
        self,
        items: Iterable[Any] = (),
        *,
        response_headers: ResponseHeaders | None = None,
        next_link: str | None = None,
    ) -> None:
        super().__init__(items)
        self.response_headers = response_headers
        self.next_link = next_link

    @property
    def skip_token(self) -> str | None:
        return skip_token_from(self.next_link)

    @classmethod
    def create_from_response(
        cls, response: httpx.Response, model_class: type[M],
    ) -> ArmrestCollection:
        """Decode a ``{"value": [...], "nextLink": ...}`` page."""
        headers = ResponseHeaders.from_response(response)
        if not response.content.strip():
            return cls(response_headers=headers)
        data = response.json()
        items = [model_class.model_validate(entry) for entry in data.get("value", [])]
        return cls(items, response_headers=headers, next_link=data.get("nextLink"))
