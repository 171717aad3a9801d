"""Shared fixtures for the summary service tests.

Provides:
- Stub gateway and dispatcher substituted through FastAPI dependency overrides
- Async HTTP client driving the app in-process
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from email.message import EmailMessage

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from email_service import EmailDispatcher
from errors import DeliveryError
from main import app, get_dispatcher, get_gateway
from Models.GenerationResponse import GenerationResult


class StubGateway:
    """Records generate() calls and returns a fixed result or raises."""

    def __init__(self, text: str = "A short summary.", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def generate(self, transcript: str, prompt: str) -> GenerationResult:
        self.calls.append((transcript, prompt))
        if self.error is not None:
            raise self.error
        return GenerationResult(text=self.text)


class FakeTransport:
    """In-memory mail transport; fails every send when `fail` is set."""

    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.sent: list[EmailMessage] = []

    async def asend(self, message: EmailMessage) -> None:
        if self.fail:
            raise DeliveryError("SMTP connection failed")
        self.sent.append(message)


@pytest.fixture
def gateway() -> StubGateway:
    return StubGateway()


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def dispatcher(transport) -> EmailDispatcher:
    return EmailDispatcher(transport, "assistant@example.com")


@pytest_asyncio.fixture
async def client(gateway, dispatcher) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client with the stub collaborators injected."""
    app.dependency_overrides[get_gateway] = lambda: gateway
    app.dependency_overrides[get_dispatcher] = lambda: dispatcher
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
