"""Shortest-distance computation between two cities.

This is Dijkstra's algorithm expressed over a frontier of candidate
journeys rather than per-vertex tentative distances. Each vertex is
expanded at most once, from the cheapest journey reaching it, which is
correct because the store rejects negative weights.
"""

from __future__ import annotations

import logging
from typing import Union

from ..domain.errors import UnknownVertexError
from ..domain.models import Journey, Vertex
from ..ports.graph import GraphView
from .frontier import JourneyFrontier

logger = logging.getLogger(__name__)

UNREACHABLE = float("inf")

VertexRef = Union[Vertex, str]


def resolve_vertex(graph: GraphView, ref: VertexRef) -> Vertex:
    """Return ``ref`` itself if it is a vertex of ``graph``, else look it up by name.

    Raises:
        UnknownVertexError: If ``ref`` is a name absent from the graph, or a
            vertex owned by another graph.
    """
    if isinstance(ref, Vertex):
        if 0 <= ref.handle < graph.size() and graph.vertex(ref.handle) is ref:
            return ref
        raise UnknownVertexError(
            f"Vertex does not belong to this graph: {ref.name}",
            vertex_name=ref.name,
        )
    return graph.require(ref)


def shortest_distance(
    graph: GraphView, source: VertexRef, target: VertexRef
) -> Union[int, float]:
    """Compute the minimum total weight of a path between two vertices.

    Parameters
    ----------
    graph:
        Graph to search, as built by ``GraphStore``.
    source:
        Departure vertex, or its name.
    target:
        Arrival vertex, or its name.

    Returns
    -------
    int or float
        The shortest distance, ``0`` when source and target are the same
        vertex, or ``UNREACHABLE`` if no path exists.

    Raises
    ------
    UnknownVertexError
        If a name does not match any vertex.
    """
    origin = resolve_vertex(graph, source)
    goal = resolve_vertex(graph, target)

    if origin.handle == goal.handle:
        return 0

    best: Union[int, float] = UNREACHABLE
    frontier = JourneyFrontier(origin=origin.handle)

    for edge in origin.edges:
        frontier.push(Journey(edge.weight, origin.handle, edge.destination))
        if edge.destination == goal.handle:
            best = min(best, edge.weight)

    expanded = 0
    while frontier:
        current = frontier.pop_next_unvisited()
        if current is None:
            break
        expanded += 1

        for edge in graph.vertex(current.arrival).edges:
            journey = Journey(current.cost + edge.weight, edge.source, edge.destination)
            frontier.push(journey)
            if edge.destination == goal.handle:
                best = min(best, journey.cost)

    logger.debug(
        "Shortest distance computed",
        extra={
            "source": origin.name,
            "target": goal.name,
            "distance": best,
            "expanded": expanded,
        },
    )
    return best
