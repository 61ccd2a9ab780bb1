"""Wiki node model.

A node is one file, function or module produced by the extraction
pipeline. Its id is the slash-delimited path used for lookups.
"""

from datetime import UTC, datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

EdgeType = Literal["contains", "imports", "calls", "co_changes", "parent", "test_file"]
NodeType = Literal["file", "function", "module"]

# Edges followed when bundling context around a node
CONTEXT_EDGE_TYPES: tuple[EdgeType, ...] = ("imports", "parent", "test_file")


class Edge(BaseModel):
    """Directed relationship from a node to another node id."""

    type: EdgeType = Field(description="Relationship kind")
    target: str = Field(description="Target node id")
    weight: float | None = Field(default=None, description="Optional edge weight")


class NodeMetadata(BaseModel):
    """Git and size metadata for a node."""

    lines: int = Field(default=0, ge=0, description="Line count")
    commits: int = Field(default=0, ge=0, description="Commit count")
    last_modified: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Last modification time",
    )
    authors: list[str] = Field(default_factory=list, description="Commit authors")


class WikiNode(BaseModel):
    """Node stored in the wiki corpus."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        from_attributes=True,
    )

    id: str = Field(description="Node path, e.g. src/auth/login.ts")
    type: NodeType = Field(description="Node kind")
    path: str = Field(description="Source file path")
    name: str = Field(description="Display name (basename or symbol)")
    metadata: NodeMetadata = Field(default_factory=NodeMetadata)
    edges: list[Edge] = Field(default_factory=list)
    prose: str | None = Field(default=None, description="Generated summary")

    def edge_targets(self, *edge_types: EdgeType) -> list[str]:
        """Targets of edges with the given types, in edge order."""
        return [e.target for e in self.edges if e.type in edge_types]
