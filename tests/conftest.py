"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from skylight_hub.adapters.endpoints import RequestDescriptor
from skylight_hub.adapters.skylight_client import SkylightTransport
from skylight_hub.config import Settings
from skylight_hub.domain.frames import Frame
from skylight_hub.domain.session import SessionContext
from skylight_hub.errors import NotFoundError


@dataclass
class FakeTransport(SkylightTransport):
    """Transport returning canned payloads keyed by method and path."""

    responses: dict[tuple[str, str], object] = field(default_factory=dict)
    requests: list[RequestDescriptor] = field(default_factory=list)

    def respond(self, method: str, path: str, payload: object) -> None:
        self.responses[(method, path)] = payload

    def _lookup(self, descriptor: RequestDescriptor) -> object:
        self.requests.append(descriptor)
        key = (descriptor.method.value, descriptor.path)
        if key not in self.responses:
            raise NotFoundError()
        result = self.responses[key]
        if isinstance(result, Exception):
            raise result
        return result

    async def request(self, descriptor: RequestDescriptor) -> dict[str, object]:
        result = self._lookup(descriptor)
        assert isinstance(result, dict)
        return result

    async def request_without_body(self, descriptor: RequestDescriptor) -> None:
        self._lookup(descriptor)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        base_url="https://api.test",
        frame_id="frame-1",
        timezone="UTC",
    )


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def session() -> SessionContext:
    session = SessionContext(user_id="user-1", token="token-1")
    session.select_frame(Frame(id="frame-1", name="Home", timezone="UTC"))
    return session
