"""Textual rendering of a graph for diagnostics.

Example:
    V: A | E: [A, B][A, D]
    V: B | E: [B, A][B, C]
    V: C | E: [C, B]
    V: D | E: [D, A]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from ..domain.models import Edge
    from ..ports.graph import GraphView


def format_edge(graph: GraphView, edge: Edge) -> str:
    """Render a single edge as ``[<source>, <destination>]``."""
    source = graph.vertex(edge.source).name
    destination = graph.vertex(edge.destination).name
    return f"[{source}, {destination}]"


def render(graph: GraphView) -> str:
    """Render every vertex with its outgoing edges, one line per vertex."""
    lines: List[str] = []
    for vertex in graph.all():
        edges = "".join(format_edge(graph, edge) for edge in vertex.edges)
        lines.append(f"V: {vertex.name} | E: {edges}\n")
    return "".join(lines)
