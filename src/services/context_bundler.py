"""Context bundling for multiple requested node paths.

Resolves the requested paths (with fuzzy fallback), then pulls in the
nodes they import, their parent module and their test files.
"""

import structlog
from pydantic import BaseModel, Field

from src.models.node import CONTEXT_EDGE_TYPES, WikiNode
from src.repositories.node_repo import NodeRepository
from src.resolution.resolver import PathResolver
from src.resolution.schemas import FuzzyMatchInfo

logger = structlog.get_logger()


class BundledContext(BaseModel):
    """Nodes gathered for a set of requested paths."""

    nodes: list[WikiNode] = Field(default_factory=list, description="Included nodes")
    errors: list[str] = Field(
        default_factory=list, description="Not-found messages for unresolved paths"
    )
    depth: int = Field(ge=0, description="Traversal depth used")
    fuzzy_matches: list[FuzzyMatchInfo] = Field(
        default_factory=list, description="Paths that were fuzzy-matched"
    )


class ContextBundler:
    """Bundles resolved nodes and their immediate neighbours."""

    def __init__(self, resolver: PathResolver, node_repo: NodeRepository):
        """Initialize bundler.

        Args:
            resolver: Path resolver for the requested paths
            node_repo: Repository used to fetch related nodes
        """
        self._resolver = resolver
        self._nodes = node_repo

    async def bundle(self, paths: list[str], max_depth: int = 1) -> BundledContext:
        """Bundle context for the requested paths.

        Args:
            paths: Requested node paths
            max_depth: Edge traversal depth (0 = requested nodes only)

        Returns:
            BundledContext with nodes, errors and applied fuzzy matches
        """
        batch, resolved = await self._resolver.resolve_nodes(paths)
        node_map: dict[str, WikiNode] = {n.id: n for n in resolved}

        frontier = list(resolved)
        for _level in range(max_depth):
            targets = [
                target
                for node in frontier
                for target in node.edge_targets(*CONTEXT_EDGE_TYPES)
                if target not in node_map
            ]
            if not targets:
                break
            frontier = await self._nodes.get_nodes(list(dict.fromkeys(targets)))
            for node in frontier:
                node_map[node.id] = node

        logger.debug(
            "context_bundled",
            requested=len(paths),
            nodes=len(node_map),
            errors=len(batch.errors),
            fuzzy_matches=len(batch.fuzzy_matches),
        )

        return BundledContext(
            nodes=list(node_map.values()),
            errors=batch.errors,
            depth=max_depth,
            fuzzy_matches=batch.fuzzy_matches,
        )


_TYPE_ORDER = {"module": 0, "file": 1, "function": 2}


def format_context_markdown(context: BundledContext) -> str:
    """Render bundled context as Markdown.

    Args:
        context: Bundled context

    Returns:
        Markdown document with fuzzy-match notes, errors and nodes
    """
    lines = [
        "# Context",
        "",
        f"*{len(context.nodes)} nodes included (depth {context.depth})*",
        "",
    ]

    if context.fuzzy_matches:
        lines.append("> **Note:** Some requested paths were fuzzy-matched:")
        for match in context.fuzzy_matches:
            lines.append(f"> - {match.note}")
        lines.append("")

    if context.errors:
        lines.append("## Errors")
        lines.append("")
        lines.extend(f"- {error}" for error in context.errors)
        lines.append("")

    for node in sorted(context.nodes, key=lambda n: (_TYPE_ORDER[n.type], n.id)):
        lines.append(f"## {node.id}")
        lines.append("")
        lines.append(f"- Type: {node.type}")
        lines.append(f"- Lines: {node.metadata.lines}")
        if node.prose:
            lines.append("")
            lines.append(node.prose)
        lines.append("")

    return "\n".join(lines)
