"""Top-level package for the airport system.

An undirected, weighted network of cities connected by flights, with
shortest-distance, minimum spanning tree and breadth-first queries.
"""

from .domain import (
    AirportSystemError,
    DisconnectedGraphError,
    Edge,
    UnknownVertexError,
    Vertex,
)
from .graph import UNREACHABLE, GraphStore
from .services import AirportSystem

__all__ = [
    "AirportSystem",
    "AirportSystemError",
    "DisconnectedGraphError",
    "Edge",
    "GraphStore",
    "UNREACHABLE",
    "UnknownVertexError",
    "Vertex",
]
