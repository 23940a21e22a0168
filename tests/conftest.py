"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - stub_gateway: In-memory gateway recording every call, for unit tests
    - backend: Fake server state behind the ASGI app
    - gateway: Real RemoteGateway talking to the fake API via ASGITransport
    - pdf_bytes: Minimal PDF-looking payload for upload tests
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from src.config import ClientConfig
from src.gateway.client import RemoteGateway
from tests.fake_api import FakeBackend, create_fake_app
from tests.stubs import StubGateway

TEST_BASE_URL = "http://test/api/v1"


@pytest.fixture
def stub_gateway() -> StubGateway:
    """Return a fresh recording gateway double."""
    return StubGateway()


@pytest.fixture
def backend() -> FakeBackend:
    """Return empty fake server state."""
    return FakeBackend()


@pytest.fixture
async def gateway(backend: FakeBackend) -> AsyncGenerator[RemoteGateway]:
    """Create a RemoteGateway bound to the fake API.

    Yields:
        Gateway whose requests are served in-process by the fake app.
    """
    transport = ASGITransport(app=create_fake_app(backend))
    async with AsyncClient(transport=transport, base_url=TEST_BASE_URL) as client:
        yield RemoteGateway(ClientConfig(api_base_url=TEST_BASE_URL), client=client)


@pytest.fixture
def pdf_bytes() -> bytes:
    """Return a 2MB payload with a PDF header."""
    return b"%PDF-1.4\n" + b"0" * (2 * 1024 * 1024)
