"""Domain models for the node corpus."""

from src.models.node import CONTEXT_EDGE_TYPES, Edge, NodeMetadata, WikiNode

__all__ = [
    "CONTEXT_EDGE_TYPES",
    "Edge",
    "NodeMetadata",
    "WikiNode",
]
