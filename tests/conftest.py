"""Pytest configuration and fixtures."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from src.db.turso import TursoClient
from src.main import app, init_services
from src.models.node import Edge, WikiNode

SEED_PATHS = [
    "src/api/index.ts",
    "src/builder/index.ts",
    "src/generator/index.ts",
    "src/cli/index.ts",
    "src/db/index.ts",
]


def _seed_node(path: str) -> WikiNode:
    edges = [Edge(type="imports", target="src/db/index.ts")] if "api" in path else []
    return WikiNode(
        id=path,
        type="file",
        path=path,
        name=path.rsplit("/", 1)[-1],
        edges=edges,
    )


@pytest.fixture
async def client(tmp_path: Path) -> AsyncIterator[AsyncClient]:
    """Create async test client for FastAPI app with a seeded node store."""
    db_path = tmp_path / "test_api.db"
    db = TursoClient(url=f"file:{db_path}")
    await db.connect()

    app.state.db = db
    init_services(app, db)
    await app.state.node_repo.initialize()
    for path in SEED_PATHS:
        await app.state.node_repo.save_node(_seed_node(path))

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await db.close()
    del app.state.db
    del app.state.node_repo
    del app.state.path_resolver
    del app.state.context_bundler
