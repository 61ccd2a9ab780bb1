"""Tests for NodeRepository."""

from pathlib import Path

import pytest

from src.db.turso import TursoClient
from src.models.node import Edge, WikiNode
from src.repositories.node_repo import NodeRepository


@pytest.fixture
async def db_client(tmp_path: Path):
    """Create a temp file database client for testing."""
    db_path = tmp_path / "test_nodes.db"
    client = TursoClient(url=f"file:{db_path}")
    await client.connect()
    yield client
    await client.close()


@pytest.fixture
async def repo(db_client: TursoClient):
    """Create NodeRepository with initialized table."""
    repo = NodeRepository(db_client)
    await repo.initialize()
    return repo


def make_node(path: str, **kwargs) -> WikiNode:
    return WikiNode(
        id=path, type="file", path=path, name=path.rsplit("/", 1)[-1], **kwargs
    )


@pytest.mark.asyncio
async def test_initialize_creates_table(db_client: TursoClient):
    """Initialize should create nodes table."""
    repo = NodeRepository(db_client)
    await repo.initialize()

    result = await db_client.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='nodes'"
    )
    assert len(result.rows) == 1


@pytest.mark.asyncio
async def test_initialize_is_idempotent(repo: NodeRepository):
    """Calling initialize twice should not fail."""
    await repo.initialize()


@pytest.mark.asyncio
async def test_save_and_get_node(repo: NodeRepository):
    """Should save a node and read it back intact."""
    node = make_node(
        "src/api/index.ts",
        edges=[Edge(type="imports", target="src/db/index.ts")],
        prose="HTTP API entry point.",
    )
    await repo.save_node(node)

    result = await repo.get_node("src/api/index.ts")

    assert result == node


@pytest.mark.asyncio
async def test_get_missing_node_returns_none(repo: NodeRepository):
    """Unknown ids return None, never a near match."""
    await repo.save_node(make_node("src/extractor/index.ts"))

    assert await repo.get_node("src/extract/index.ts") is None


@pytest.mark.asyncio
async def test_save_node_upserts(repo: NodeRepository):
    """Saving the same id twice replaces the stored node."""
    await repo.save_node(make_node("src/api/index.ts"))
    await repo.save_node(make_node("src/api/index.ts", prose="Updated"))

    result = await repo.get_node("src/api/index.ts")

    assert result is not None
    assert result.prose == "Updated"
    assert await repo.list_node_ids() == ["src/api/index.ts"]


@pytest.mark.asyncio
async def test_list_node_ids_sorted(repo: NodeRepository):
    """Corpus listing returns every id, sorted."""
    for path in ["src/db/index.ts", "src/api/index.ts", "src/builder/index.ts"]:
        await repo.save_node(make_node(path))

    assert await repo.list_node_ids() == [
        "src/api/index.ts",
        "src/builder/index.ts",
        "src/db/index.ts",
    ]


@pytest.mark.asyncio
async def test_get_nodes_skips_missing_and_keeps_order(repo: NodeRepository):
    """Bulk fetch returns found nodes in request order."""
    for path in ["src/api/index.ts", "src/db/index.ts"]:
        await repo.save_node(make_node(path))

    nodes = await repo.get_nodes(["src/db/index.ts", "missing.ts", "src/api/index.ts"])

    assert [n.id for n in nodes] == ["src/db/index.ts", "src/api/index.ts"]


@pytest.mark.asyncio
async def test_get_nodes_empty_request(repo: NodeRepository):
    """Empty id list returns empty list without querying."""
    assert await repo.get_nodes([]) == []


@pytest.mark.asyncio
async def test_delete_node(repo: NodeRepository):
    """Delete reports whether a node was removed."""
    await repo.save_node(make_node("src/api/index.ts"))

    assert await repo.delete_node("src/api/index.ts") is True
    assert await repo.delete_node("src/api/index.ts") is False
    assert await repo.get_node("src/api/index.ts") is None


@pytest.mark.asyncio
async def test_execute_before_connect_raises():
    """Using the client before connect() is an error."""
    client = TursoClient(url="file:unused.db")

    with pytest.raises(RuntimeError, match="Not connected"):
        await client.execute("SELECT 1")
