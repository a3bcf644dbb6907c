"""Pytest configuration and fixtures for emojid tests."""

import os

# Settings are read once at import time; disable rate limiting before the app loads
os.environ["RATE_LIMIT_ENABLED"] = "false"

from collections.abc import AsyncGenerator, Iterable
from itertools import cycle

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from emojid.main import app


class ScriptedSource:
    """Random source double that returns pre-scripted big-endian draws."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.calls = 0
        self.requested: list[int] = []

    def __call__(self, n: int) -> bytes:
        self.calls += 1
        self.requested.append(n)
        return next(self._values).to_bytes(n, "big")


@pytest.fixture
def scripted_source() -> type[ScriptedSource]:
    """Factory for deterministic random sources."""
    return ScriptedSource


@pytest.fixture
def alternating_source() -> ScriptedSource:
    """Source whose draws map to indices 0, 1, 0, 1, ... for a 2-symbol alphabet."""
    return ScriptedSource(cycle([0x0000, 0x0001]))


@pytest.fixture
def failing_source():
    """Source that behaves like an unavailable OS random device."""

    def _read(n: int) -> bytes:
        raise OSError("no entropy available")

    return _read


@pytest_asyncio.fixture(scope="function")
async def test_client() -> AsyncGenerator[AsyncClient, None]:
    """Create test HTTP client bound to the ASGI app."""
    transport = ASGITransport(app=app)  # type: ignore[arg-type]
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
