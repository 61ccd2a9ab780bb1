"""Tests for API endpoints against a real node store."""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health_check(client: AsyncClient) -> None:
    """Test basic health check endpoint."""
    response = await client.get("/health/")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert "timestamp" in data
    assert data["version"] == "0.1.0"


@pytest.mark.asyncio
async def test_liveness(client: AsyncClient) -> None:
    """Test liveness probe endpoint."""
    response = await client.get("/health/live")
    assert response.status_code == 200
    assert response.json()["status"] == "alive"


@pytest.mark.asyncio
async def test_readiness(client: AsyncClient) -> None:
    """Test readiness probe endpoint."""
    response = await client.get("/health/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"] == {"api": "ok", "node_store": "ok", "resolver": "ok"}


@pytest.mark.asyncio
async def test_get_node_exact(client: AsyncClient) -> None:
    """Exact path returns the stored node."""
    response = await client.get("/nodes/src/api/index.ts")
    assert response.status_code == 200
    data = response.json()
    assert data["node"]["id"] == "src/api/index.ts"
    assert data["fuzzy_match"] is None


@pytest.mark.asyncio
async def test_get_node_fuzzy(client: AsyncClient) -> None:
    """Missing suffix resolves to the real module."""
    response = await client.get("/nodes/src/build/index.ts")
    assert response.status_code == 200
    data = response.json()
    assert data["node"]["id"] == "src/builder/index.ts"
    assert data["fuzzy_match"]["requested_path"] == "src/build/index.ts"
    assert data["fuzzy_match"]["confidence"] >= 0.7


@pytest.mark.asyncio
async def test_get_node_cross_module_is_404(client: AsyncClient) -> None:
    """A missing module is not swapped for a different one."""
    response = await client.get("/nodes/src/extractor/index.ts")
    assert response.status_code == 404
    assert response.json()["detail"]["error"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_resolve_batch(client: AsyncClient) -> None:
    """Both requests in the batch are fuzzy-resolved and paired."""
    response = await client.post(
        "/resolve", json={"paths": ["src/build/index.ts", "src/generate/index.ts"]}
    )
    assert response.status_code == 200
    results = response.json()["resolution"]["results"]
    assert [(r["outcome"], r["resolved_path"]) for r in results] == [
        ("fuzzy", "src/builder/index.ts"),
        ("fuzzy", "src/generator/index.ts"),
    ]
    assert all(r["confidence"] >= 0.7 for r in results)


@pytest.mark.asyncio
async def test_context_follows_imports(client: AsyncClient) -> None:
    """Context for the api file includes the db file it imports."""
    response = await client.get(
        "/context", params={"files": "src/api/index.ts", "depth": 1}
    )
    assert response.status_code == 200
    ids = {n["id"] for n in response.json()["nodes"]}
    assert ids == {"src/api/index.ts", "src/db/index.ts"}
