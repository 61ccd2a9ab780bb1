"""PathResolver resolves requested node paths against the corpus.

Resolution pipeline per requested path:
1. Exact lookup
2. Fuzzy match against the full corpus (listed once per batch)
3. Classification: exact, fuzzy (auto-resolved) or unresolved
"""

import asyncio
from collections.abc import Iterable

import structlog

from src.models.node import WikiNode
from src.repositories.node_repo import NodeRepository
from src.resolution.fuzzy_matcher import MAX_ALTERNATIVES, PathMatcher
from src.resolution.schemas import (
    BatchResolution,
    FuzzyMatchInfo,
    FuzzyMatchResult,
    PathResolution,
    ResolutionOutcome,
)

logger = structlog.get_logger()


class NodeNotFoundError(Exception):
    """Raised when a single-node lookup cannot be resolved."""

    def __init__(self, path: str, suggestions: list[str] | None = None):
        self.path = path
        self.suggestions = suggestions or []
        super().__init__(f"Node not found: {path}")


def classify_match(
    result: FuzzyMatchResult,
    matcher: PathMatcher,
) -> PathResolution:
    """Turn a fuzzy match result into a batch classification.

    Args:
        result: Output of PathMatcher.match() for an exact miss
        matcher: Matcher whose thresholds decide the bucket

    Returns:
        FUZZY resolution if the match was auto-resolved, otherwise
        UNRESOLVED with suggestions when confidence allows them
    """
    thresholds = matcher.thresholds
    if result.matched_path is not None and result.confidence >= thresholds.auto_match:
        return PathResolution(
            requested_path=result.requested_path,
            outcome=ResolutionOutcome.FUZZY,
            resolved_path=result.matched_path,
            confidence=result.confidence,
            alternatives=result.alternatives,
        )

    suggestions: list[str] = []
    if matcher.is_suggestable(result.confidence):
        suggestions = result.alternatives[:MAX_ALTERNATIVES]

    return PathResolution(
        requested_path=result.requested_path,
        outcome=ResolutionOutcome.UNRESOLVED,
        confidence=result.confidence,
        suggestions=suggestions,
    )


def _exact(path: str) -> PathResolution:
    return PathResolution(
        requested_path=path,
        outcome=ResolutionOutcome.EXACT,
        resolved_path=path,
        confidence=1.0,
    )


def _collect(results: list[PathResolution]) -> BatchResolution:
    fuzzy_matches = [
        info for r in results if (info := r.to_fuzzy_match_info()) is not None
    ]
    return BatchResolution(results=results, fuzzy_matches=fuzzy_matches)


def resolve_paths(
    paths: list[str],
    corpus: Iterable[str],
    matcher: PathMatcher | None = None,
) -> BatchResolution:
    """Resolve a batch of paths against an in-memory corpus.

    Each path is resolved independently; the corpus is not modified.

    Args:
        paths: Requested paths
        corpus: Known paths
        matcher: Matcher to use (default thresholds if omitted)

    Returns:
        BatchResolution with one result per requested path, in order
    """
    matcher = matcher or PathMatcher()
    known = list(dict.fromkeys(corpus))
    known_set = set(known)

    results: list[PathResolution] = []
    for path in paths:
        if path in known_set:
            results.append(_exact(path))
        else:
            results.append(classify_match(matcher.match(path, known), matcher))
    return _collect(results)


class PathResolver:
    """Resolves requested paths against the node store.

    Exact lookups run concurrently. The corpus listing is fetched lazily,
    at most once per call, and only if some path misses.
    """

    def __init__(
        self,
        node_repo: NodeRepository,
        matcher: PathMatcher | None = None,
    ):
        """Initialize resolver with required components.

        Args:
            node_repo: Repository holding the node corpus
            matcher: Fuzzy path matcher (default thresholds if omitted)
        """
        self._nodes = node_repo
        self._matcher = matcher or PathMatcher()

    @property
    def matcher(self) -> PathMatcher:
        return self._matcher

    async def resolve_nodes(
        self,
        paths: list[str],
    ) -> tuple[BatchResolution, list[WikiNode]]:
        """Resolve paths and load the nodes they resolve to.

        Args:
            paths: Requested node paths

        Returns:
            Tuple of (batch resolution, resolved nodes without duplicates)
        """
        exact_nodes = await asyncio.gather(*(self._nodes.get_node(p) for p in paths))

        nodes: dict[str, WikiNode] = {}
        results: list[PathResolution] = []
        corpus: list[str] | None = None

        for path, node in zip(paths, exact_nodes):
            if node is not None:
                nodes.setdefault(node.id, node)
                results.append(_exact(path))
                continue

            if corpus is None:
                corpus = await self._nodes.list_node_ids()

            fuzzy_result = self._matcher.match(path, corpus)
            results.append(classify_match(fuzzy_result, self._matcher))

        fuzzy_ids = [
            r.resolved_path
            for r in results
            if r.outcome == ResolutionOutcome.FUZZY
            and r.resolved_path is not None
            and r.resolved_path not in nodes
        ]
        for node in await self._nodes.get_nodes(list(dict.fromkeys(fuzzy_ids))):
            nodes[node.id] = node

        # A fuzzy target can vanish between listing and fetching
        for i, result in enumerate(results):
            if (
                result.outcome == ResolutionOutcome.FUZZY
                and result.resolved_path not in nodes
            ):
                results[i] = PathResolution(
                    requested_path=result.requested_path,
                    outcome=ResolutionOutcome.UNRESOLVED,
                    confidence=result.confidence,
                )

        batch = _collect(results)
        self._log_batch(batch)
        return batch, list(nodes.values())

    async def resolve_all(self, paths: list[str]) -> BatchResolution:
        """Resolve multiple paths.

        Args:
            paths: Requested node paths

        Returns:
            BatchResolution with results in the same order as paths
        """
        batch, _nodes = await self.resolve_nodes(paths)
        return batch

    async def get_node(self, path: str) -> tuple[WikiNode, FuzzyMatchInfo | None]:
        """Fetch one node, falling back to fuzzy matching.

        Args:
            path: Requested node path

        Returns:
            Tuple of (node, fuzzy match info or None for exact hits)

        Raises:
            NodeNotFoundError: If the path is unresolved. Carries
                suggestions when the best match was close enough.
        """
        batch, nodes = await self.resolve_nodes([path])
        result = batch.results[0]
        if not result.is_resolved or not nodes:
            raise NodeNotFoundError(path, result.suggestions)
        return nodes[0], result.to_fuzzy_match_info()

    def _log_batch(self, batch: BatchResolution) -> None:
        for match in batch.fuzzy_matches:
            logger.info(
                "path_fuzzy_matched",
                requested=match.requested_path,
                actual=match.actual_path,
                confidence=match.confidence,
            )
        for result in batch.results:
            if not result.is_resolved:
                logger.info(
                    "path_unresolved",
                    requested=result.requested_path,
                    confidence=result.confidence,
                    suggestions=result.suggestions,
                )
