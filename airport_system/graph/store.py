"""In-memory graph store for the airport network.

The store owns every vertex in a dense arena and indexes them by name.
Connections are undirected: each accepted insertion appends one edge to
each endpoint.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from ..config import GraphConfig, get_config
from ..domain.errors import UnknownVertexError
from ..domain.models import Edge, Vertex
from .formatter import render


@dataclass
class GraphStore:
    """Graph store implementing the GraphView port.

    Attributes:
        config: Graph configuration (weight rules)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _vertices: List[Vertex] = field(default_factory=list, repr=False)
    _handles: Dict[str, int] = field(default_factory=dict, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def add_connection(self, source: str, destination: str, weight: int) -> bool:
        """Connect two cities in both directions.

        Args:
            source: Name of the first city.
            destination: Name of the second city.
            weight: Length of the connection.

        Returns:
            True if both edges were added. False, leaving the store
            unchanged, for a negative weight, a self-loop or an already
            existing connection.
        """
        if weight < 0 or (weight == 0 and not self.config.allow_zero_weight):
            self._reject(source, destination, weight, "invalid weight")
            return False
        if source == destination:
            self._reject(source, destination, weight, "self-loop")
            return False

        source_handle = self._handles.get(source)
        destination_handle = self._handles.get(destination)
        if (
            source_handle is not None
            and destination_handle is not None
            and self._vertices[source_handle].has_edge_to(destination_handle)
        ):
            self._reject(source, destination, weight, "duplicate")
            return False

        source_vertex = self._get_or_create(source)
        destination_vertex = self._get_or_create(destination)
        source_vertex.edges.append(
            Edge(source_vertex.handle, destination_vertex.handle, weight)
        )
        destination_vertex.edges.append(
            Edge(destination_vertex.handle, source_vertex.handle, weight)
        )
        return True

    def _get_or_create(self, name: str) -> Vertex:
        handle = self._handles.get(name)
        if handle is not None:
            return self._vertices[handle]

        vertex = Vertex(handle=len(self._vertices), name=name)
        self._vertices.append(vertex)
        self._handles[name] = vertex.handle
        return vertex

    def _reject(self, source: str, destination: str, weight: int, reason: str) -> None:
        self._logger.debug(
            "Connection rejected",
            extra={
                "source": source,
                "destination": destination,
                "weight": weight,
                "reason": reason,
            },
        )

    def get(self, name: str) -> Optional[Vertex]:
        """Get a vertex by name.

        Args:
            name: The vertex name to look up.

        Returns:
            The vertex, or None if not found.
        """
        handle = self._handles.get(name)
        if handle is None:
            return None
        return self._vertices[handle]

    def require(self, name: str) -> Vertex:
        """Get a vertex by name, raising if not found.

        Args:
            name: The vertex name to look up.

        Returns:
            The vertex.

        Raises:
            UnknownVertexError: If no vertex has that name.
        """
        vertex = self.get(name)
        if vertex is None:
            raise UnknownVertexError(
                f"Unknown vertex: {name}",
                vertex_name=name,
            )
        return vertex

    def vertex(self, handle: int) -> Vertex:
        return self._vertices[handle]

    def handle_of(self, name: str) -> Optional[int]:
        return self._handles.get(name)

    def name_of(self, handle: int) -> str:
        return self._vertices[handle].name

    def size(self) -> int:
        """Return the number of distinct vertices."""
        return len(self._vertices)

    def all(self) -> List[Vertex]:
        """Return a snapshot list of every vertex, in arena order."""
        return list(self._vertices)

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    def __contains__(self, name: object) -> bool:
        return name in self._handles

    def __str__(self) -> str:
        return render(self)
