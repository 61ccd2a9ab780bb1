"""Repository layer for data persistence.

Repositories encapsulate data access and give the resolution services
a small interface over the node store.
"""

from src.repositories.node_repo import NodeRepository

__all__ = [
    "NodeRepository",
]
