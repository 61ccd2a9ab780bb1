"""Node lookup API endpoints.

Provides single-node lookup with fuzzy fallback, batch path resolution,
and bundled context for several paths.
"""

from typing import Literal

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, Field

from src.config import settings
from src.models.node import WikiNode
from src.resolution.resolver import NodeNotFoundError, PathResolver
from src.resolution.schemas import BatchResolution, FuzzyMatchInfo
from src.services.context_bundler import (
    BundledContext,
    ContextBundler,
    format_context_markdown,
)

logger = structlog.get_logger()

router = APIRouter(tags=["nodes"])


class NodeResponse(BaseModel):
    """Node returned by a lookup, with fuzzy match info if substituted."""

    node: WikiNode = Field(description="The resolved node")
    fuzzy_match: FuzzyMatchInfo | None = Field(
        default=None,
        description="Set when the requested path was fuzzy-matched",
    )


class ResolveRequest(BaseModel):
    """Request to resolve a batch of node paths."""

    paths: list[str] = Field(min_length=1, description="Node paths to resolve")


class ResolveResponse(BaseModel):
    """Batch resolution with user-facing notes."""

    resolution: BatchResolution = Field(description="Per-path classification")
    errors: list[str] = Field(
        default_factory=list, description="Not-found messages for unresolved paths"
    )
    notes: list[str] = Field(
        default_factory=list,
        description="One note per fuzzy substitution, e.g. 'X → Y (82% confidence)'",
    )


def get_path_resolver(request: Request) -> PathResolver:
    """Get PathResolver from app state."""
    if not hasattr(request.app.state, "path_resolver"):
        raise HTTPException(status_code=500, detail="PathResolver not initialized")
    return request.app.state.path_resolver


def get_context_bundler(request: Request) -> ContextBundler:
    """Get ContextBundler from app state."""
    if not hasattr(request.app.state, "context_bundler"):
        raise HTTPException(status_code=500, detail="ContextBundler not initialized")
    return request.app.state.context_bundler


def _not_found(error: NodeNotFoundError) -> HTTPException:
    detail: dict[str, object] = {
        "error": "NOT_FOUND",
        "message": str(error),
    }
    if error.suggestions:
        detail["suggestions"] = error.suggestions
    return HTTPException(status_code=404, detail=detail)


@router.get("/nodes/{path:path}", response_model=NodeResponse)
async def get_node(
    path: str,
    resolver: PathResolver = Depends(get_path_resolver),
) -> NodeResponse:
    """Fetch a single node by path.

    Falls back to fuzzy matching when no node has exactly this path.
    Confident matches are returned with fuzzy_match set; otherwise a 404
    is returned, carrying suggestions when there were close candidates.

    Args:
        path: Node path, e.g. src/auth/login.ts
        resolver: Path resolution service

    Returns:
        NodeResponse with the node and optional fuzzy match info
    """
    try:
        node, fuzzy_match = await resolver.get_node(path)
    except NodeNotFoundError as e:
        raise _not_found(e) from e

    return NodeResponse(node=node, fuzzy_match=fuzzy_match)


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_paths(
    request: ResolveRequest,
    resolver: PathResolver = Depends(get_path_resolver),
) -> ResolveResponse:
    """Resolve a batch of node paths.

    Each path is classified as exact, fuzzy (auto-resolved) or unresolved.

    Args:
        request: Paths to resolve
        resolver: Path resolution service

    Returns:
        ResolveResponse with classification, errors and fuzzy notes
    """
    resolution = await resolver.resolve_all(request.paths)
    return ResolveResponse(
        resolution=resolution,
        errors=resolution.errors,
        notes=[m.note for m in resolution.fuzzy_matches],
    )


@router.get("/context", response_model=None)
async def get_context(
    files: str = Query(description="Comma-separated node paths"),
    response_format: Literal["json", "markdown"] = Query(
        default="json", alias="format"
    ),
    depth: int | None = Query(default=None, ge=0, le=3),
    bundler: ContextBundler = Depends(get_context_bundler),
) -> BundledContext | PlainTextResponse:
    """Get bundled context for several files.

    Args:
        files: Comma-separated node paths
        response_format: Response format (json or markdown), sent as ?format=
        depth: Edge traversal depth (defaults to settings.context_max_depth)
        bundler: Context bundling service

    Returns:
        BundledContext as JSON, or rendered Markdown
    """
    paths = [p.strip() for p in files.split(",") if p.strip()]
    if not paths:
        raise HTTPException(status_code=400, detail="No files requested")

    max_depth = settings.context_max_depth if depth is None else depth
    context = await bundler.bundle(paths, max_depth=max_depth)

    if response_format == "markdown":
        return PlainTextResponse(
            format_context_markdown(context), media_type="text/markdown"
        )
    return context
