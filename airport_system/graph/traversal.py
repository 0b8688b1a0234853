"""Breadth-first traversal of the airport network."""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Set

from ..ports.graph import GraphView


def breadth_first(graph: GraphView, start: str) -> List[str]:
    """List the names of every vertex reachable from ``start``, level by level.

    The start comes first. Siblings of the same level follow the edge
    insertion order of their parent; callers should only rely on the
    level-by-level order.

    Raises:
        UnknownVertexError: If ``start`` is not in the graph.
    """
    origin = graph.require(start)

    pending: Deque[int] = deque([origin.handle])
    visited: Set[int] = {origin.handle}
    order: List[str] = [origin.name]

    while pending:
        for edge in graph.vertex(pending.popleft()).edges:
            if edge.destination in visited:
                continue
            visited.add(edge.destination)
            pending.append(edge.destination)
            order.append(graph.vertex(edge.destination).name)

    return order
