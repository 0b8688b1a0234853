"""Domain models for the airport network.

Vertices live in a dense arena owned by the graph store and are referred
to by integer handle. Edges only carry handles, so there is no reference
cycle between a vertex and the edges pointing back at it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True, slots=True)
class Edge:
    """A directed, weighted link between two vertices.

    An undirected connection is stored as two mirrored edges, one owned by
    each endpoint.

    Attributes:
        source: Handle of the vertex owning this edge
        destination: Handle of the vertex this edge leads to
        weight: Non-negative length of the connection
    """

    source: int
    destination: int
    weight: int


@dataclass(slots=True)
class Vertex:
    """A named city and its outgoing edges.

    Attributes:
        handle: Index of the vertex in the store arena
        name: Unique city name
        edges: Outgoing edges, in insertion order
    """

    handle: int
    name: str
    edges: List[Edge] = field(default_factory=list, repr=False)

    def has_edge_to(self, handle: int) -> bool:
        """Check if an edge from this vertex to ``handle`` already exists."""
        return any(edge.destination == handle for edge in self.edges)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, order=True)
class Journey:
    """A candidate path state explored by the shortest-distance search.

    Journeys order by accumulated cost first. They are transient and only
    live for the duration of one search.

    Attributes:
        cost: Accumulated weight from the search source
        parent: Handle of the vertex the journey came from
        arrival: Handle of the vertex the journey ends on
    """

    cost: int
    parent: int
    arrival: int
