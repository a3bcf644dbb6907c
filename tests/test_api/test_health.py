"""Tests for service info and health endpoints."""

import pytest
from httpx import AsyncClient

from emojid import __version__


class TestHealthCheck:
    """Test basic health check endpoint."""

    @pytest.mark.asyncio
    async def test_health_check_success(self, test_client: AsyncClient) -> None:
        """Test basic health check returns healthy status."""
        response = await test_client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["app"] == "EmojiID API"
        assert data["version"] == __version__
        assert data["alphabet_size"] == 152

    @pytest.mark.asyncio
    async def test_root(self, test_client: AsyncClient) -> None:
        """Test root endpoint returns service info."""
        response = await test_client.get("/")

        assert response.status_code == 200
        assert response.json()["message"] == "EmojiID API"
