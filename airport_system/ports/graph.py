"""Graph port - Read-only view consumed by the algorithms.

The shortest-distance, spanning-tree, traversal and formatting code only
needs to look vertices up, never to mutate them. They depend on this
protocol rather than on the concrete store.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from ..domain.models import Vertex


class GraphView(Protocol):
    """Port for read access to a built graph.

    Implementation: graph/store.py (GraphStore)
    """

    def get(self, name: str) -> Optional[Vertex]:
        """Get a vertex by name.

        Args:
            name: The vertex name to look up.

        Returns:
            The vertex, or None if not found. Never creates a vertex.
        """
        ...

    def require(self, name: str) -> Vertex:
        """Get a vertex by name, raising UnknownVertexError if absent."""
        ...

    def vertex(self, handle: int) -> Vertex:
        """Get a vertex by its arena handle."""
        ...

    def size(self) -> int:
        """Return the number of distinct vertices."""
        ...

    def all(self) -> Sequence[Vertex]:
        """Return a snapshot of every vertex, in arena order."""
        ...

    def __iter__(self) -> Iterator[Vertex]:
        ...
