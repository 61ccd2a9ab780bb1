"""Repository for wiki nodes.

Stores each node as a JSON document keyed by its path id.
Uses SQLite (via TursoClient) for persistence.
"""

from src.db.turso import TursoClient
from src.models.node import WikiNode


class NodeRepository:
    """Repository for wiki nodes keyed by path.

    Provides the exact lookups and the corpus listing that path
    resolution runs against.
    """

    def __init__(self, db_client: TursoClient):
        """Initialize repository with database client.

        Args:
            db_client: TursoClient instance for database operations
        """
        self._db = db_client

    async def initialize(self) -> None:
        """Create nodes table if not exists."""
        await self._db.execute_batch(
            [
                """
            CREATE TABLE IF NOT EXISTS nodes (
                id TEXT PRIMARY KEY,
                node_type TEXT NOT NULL,
                data TEXT NOT NULL,
                updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
            )
            """,
                """
            CREATE INDEX IF NOT EXISTS idx_nodes_type
            ON nodes(node_type)
            """,
            ]
        )

    async def save_node(self, node: WikiNode) -> None:
        """Insert or replace a node.

        Args:
            node: Node to persist
        """
        await self._db.execute(
            """
            INSERT INTO nodes (id, node_type, data)
            VALUES (?, ?, ?)
            ON CONFLICT(id)
            DO UPDATE SET
                node_type = excluded.node_type,
                data = excluded.data,
                updated_at = CURRENT_TIMESTAMP
            """,
            [node.id, node.type, node.model_dump_json()],
        )

    async def get_node(self, node_id: str) -> WikiNode | None:
        """Get a node by exact id.

        Args:
            node_id: Node path

        Returns:
            The node, or None if no node has exactly this id
        """
        result = await self._db.execute(
            "SELECT data FROM nodes WHERE id = ?",
            [node_id],
        )
        if result.rows:
            return WikiNode.model_validate_json(result.rows[0][0])
        return None

    async def get_nodes(self, node_ids: list[str]) -> list[WikiNode]:
        """Get several nodes by id, skipping ids that don't exist.

        Args:
            node_ids: Node paths to fetch

        Returns:
            Found nodes, in id order of the request
        """
        if not node_ids:
            return []

        placeholders = ",".join(["?"] * len(node_ids))
        result = await self._db.execute(
            f"SELECT id, data FROM nodes WHERE id IN ({placeholders})",
            list(node_ids),
        )
        by_id = {row[0]: WikiNode.model_validate_json(row[1]) for row in result.rows}
        return [by_id[node_id] for node_id in node_ids if node_id in by_id]

    async def list_node_ids(self) -> list[str]:
        """List every node id in the store (the resolution corpus).

        Returns:
            All node ids, sorted
        """
        result = await self._db.execute("SELECT id FROM nodes ORDER BY id")
        return [row[0] for row in result.rows]

    async def delete_node(self, node_id: str) -> bool:
        """Delete a node.

        Args:
            node_id: Node path

        Returns:
            True if a node was deleted, False if not found
        """
        result = await self._db.execute(
            "DELETE FROM nodes WHERE id = ?",
            [node_id],
        )
        return result.rows_affected > 0
