"""HTTP transport for the Skylight JSON:API backend."""

import base64
import logging
from dataclasses import dataclass
from typing import Protocol

import httpx

from skylight_hub.adapters.endpoints import RequestDescriptor
from skylight_hub.domain.session import SessionContext
from skylight_hub.errors import DecodeError, NetworkError, error_from_status

_logger = logging.getLogger(__name__)


class SkylightTransport(Protocol):
    """Interface for issuing requests against the Skylight API."""

    async def request(self, descriptor: RequestDescriptor) -> dict[str, object]:
        """Send a request and return the decoded JSON object body."""

    async def request_without_body(self, descriptor: RequestDescriptor) -> None:
        """Send a request whose response body is ignored."""


@dataclass
class HttpxSkylightTransport(SkylightTransport):
    """Skylight transport implemented with httpx."""

    base_url: str
    session: SessionContext
    http_client: httpx.AsyncClient
    timeout: float = 30.0

    @classmethod
    def create(
        cls, base_url: str, session: SessionContext, timeout: float = 30.0
    ) -> "HttpxSkylightTransport":
        """Create a transport with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            session=session,
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def request(self, descriptor: RequestDescriptor) -> dict[str, object]:
        """Send a request and decode its JSON object body."""
        response = await self._send(descriptor)
        try:
            payload = response.json()
        except ValueError as exc:
            raise DecodeError(f"Response is not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise DecodeError("Response body is not a JSON object")
        return payload

    async def request_without_body(self, descriptor: RequestDescriptor) -> None:
        """Send a request and only check its status."""
        await self._send(descriptor)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _send(self, descriptor: RequestDescriptor) -> httpx.Response:
        url = f"{self.base_url}{descriptor.path}"
        _logger.debug("%s %s", descriptor.method.value, url)
        try:
            response = await self.http_client.request(
                descriptor.method.value,
                url,
                params=descriptor.query or None,
                json=descriptor.body,
                headers=self._headers(descriptor),
                timeout=self.timeout,
            )
        except httpx.RequestError as exc:
            raise NetworkError(f"Network error: {exc}") from exc
        _logger.debug("%s %s -> %s", descriptor.method.value, url, response.status_code)
        if not response.is_success:
            raise error_from_status(response.status_code, response.content)
        return response

    def _headers(self, descriptor: RequestDescriptor) -> dict[str, str]:
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        credentials = self.session.credentials()
        if descriptor.requires_auth and credentials is not None:
            user_id, token = credentials
            encoded = base64.b64encode(f"{user_id}:{token}".encode()).decode()
            headers["Authorization"] = f"Basic {encoded}"
        return headers
