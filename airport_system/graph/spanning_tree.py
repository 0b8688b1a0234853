"""Minimum spanning tree using Prim's algorithm."""

from __future__ import annotations

import heapq
import itertools
import logging
from typing import Iterable, List, Optional, Set, Tuple

from ..config import SpanningTreePolicy, get_config
from ..domain.errors import ConfigurationError, DisconnectedGraphError
from ..domain.models import Edge
from ..ports.graph import GraphView
from .shortest_distance import VertexRef, resolve_vertex

logger = logging.getLogger(__name__)

POLICIES = ("component", "strict")


def tree_weight(edges: Iterable[Edge]) -> int:
    """Return the total weight of a collection of edges."""
    return sum(edge.weight for edge in edges)


def minimum_spanning_tree(
    graph: GraphView,
    root: Optional[VertexRef] = None,
    *,
    policy: Optional[SpanningTreePolicy] = None,
) -> List[Edge]:
    """Grow a minimum-weight spanning tree from ``root``.

    Parameters
    ----------
    graph:
        Graph to span.
    root:
        Vertex or vertex name to grow the tree from. Defaults to the first
        vertex of the graph.
    policy:
        What to do when some vertices cannot be reached from the root:
        ``"component"`` returns the tree of the root's component,
        ``"strict"`` raises. Defaults to the configured policy.

    Returns
    -------
    list[Edge]
        The tree edges in the order they were chosen, each oriented away
        from the root. ``size() - 1`` edges for a connected graph, and an
        empty list for an empty graph.

    Raises
    ------
    UnknownVertexError
        If ``root`` is a name absent from the graph.
    DisconnectedGraphError
        Under the strict policy, if the graph is not connected.
    """
    policy = policy or get_config().graph.spanning_tree_policy
    if policy not in POLICIES:
        raise ConfigurationError(
            f"Unknown spanning tree policy: {policy!r}",
            setting_name="spanning_tree_policy",
            expected_type=" | ".join(POLICIES),
        )

    if root is None:
        vertices = graph.all()
        if not vertices:
            return []
        start = vertices[0]
    else:
        start = resolve_vertex(graph, root)

    total = graph.size()
    in_tree: Set[int] = {start.handle}
    tree: List[Edge] = []

    # Ties on weight fall back to scan order.
    sequence = itertools.count()
    candidates: List[Tuple[int, int, Edge]] = []

    def push_edges(handle: int) -> None:
        for edge in graph.vertex(handle).edges:
            if edge.destination not in in_tree:
                heapq.heappush(candidates, (edge.weight, next(sequence), edge))

    push_edges(start.handle)
    while len(in_tree) < total and candidates:
        _, _, edge = heapq.heappop(candidates)
        if edge.destination in in_tree:
            continue
        tree.append(edge)
        in_tree.add(edge.destination)
        push_edges(edge.destination)

    if len(in_tree) < total:
        if policy == "strict":
            raise DisconnectedGraphError(
                f"Graph is not connected: {len(in_tree)} of {total} vertices "
                f"reachable from {start.name}",
                root=start.name,
                reached=len(in_tree),
                total=total,
            )
        logger.warning(
            "Spanning tree covers only the root component",
            extra={"root": start.name, "reached": len(in_tree), "total": total},
        )

    logger.debug(
        "Spanning tree computed",
        extra={"root": start.name, "edges": len(tree), "weight": tree_weight(tree)},
    )
    return tree
