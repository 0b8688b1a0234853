"""Graph store and the algorithms running on top of it.

Available components:
- GraphStore: builds and owns the vertices and edges
- shortest_distance: cheapest path cost between two vertices
- minimum_spanning_tree: Prim's minimum spanning tree
- breadth_first: level-order reachability
- render: diagnostic text rendering
"""

from .formatter import render
from .frontier import JourneyFrontier
from .shortest_distance import UNREACHABLE, shortest_distance
from .spanning_tree import minimum_spanning_tree, tree_weight
from .store import GraphStore
from .traversal import breadth_first

__all__ = [
    "GraphStore",
    "JourneyFrontier",
    "UNREACHABLE",
    "breadth_first",
    "minimum_spanning_tree",
    "render",
    "shortest_distance",
    "tree_weight",
]
