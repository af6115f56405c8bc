"""Tests for health endpoint and error shapes."""

import pytest
from httpx import ASGITransport, AsyncClient

from catalog_api.main import app


@pytest.fixture
async def bare_client():
    """Test client without any database behind it."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest.mark.asyncio
async def test_health_check(bare_client: AsyncClient):
    """Test health endpoint returns ok."""
    response = await bare_client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/nope", "/api/products", "/api/products/category/"])
async def test_unknown_route_returns_json_404(bare_client: AsyncClient, path: str):
    response = await bare_client.get(path)
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/products/top", "/api/products/home-rails", "/health"])
async def test_wrong_method_returns_json_404(bare_client: AsyncClient, path: str):
    response = await bare_client.post(path)
    assert response.status_code == 404
    assert response.json() == {"error": "Endpoint not found"}


@pytest.mark.asyncio
async def test_root_reports_running(bare_client: AsyncClient):
    response = await bare_client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Catalog Rails API server is running"}


@pytest.mark.asyncio
async def test_trailing_slash_redirects_to_canonical_path(bare_client: AsyncClient):
    response = await bare_client.get("/api/products/top/?limit=2")
    assert response.status_code == 307
    assert response.headers["location"] == "http://test/api/products/top?limit=2"


@pytest.mark.asyncio
async def test_cors_allows_any_origin_without_credentials(bare_client: AsyncClient):
    response = await bare_client.get("/health", headers={"Origin": "https://shop.example"})
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"
    assert "access-control-allow-credentials" not in response.headers
