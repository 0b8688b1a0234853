"""Airport system service - Facade over the store and the algorithms.

Callers build the network through ``add_connection`` and then issue
read-only queries. The service adds logging and the configured
spanning-tree policy on top of the plain graph functions.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Union

from ..config import GraphConfig, SpanningTreePolicy, get_config
from ..domain.models import Edge, Vertex
from ..graph.formatter import format_edge, render
from ..graph.shortest_distance import UNREACHABLE, VertexRef, shortest_distance
from ..graph.spanning_tree import minimum_spanning_tree, tree_weight
from ..graph.store import GraphStore
from ..graph.traversal import breadth_first


@dataclass
class AirportSystem:
    """A network of cities connected by flights.

    Usage:
        system = AirportSystem()
        system.add_connection("Chicago", "Detroit", 281)
        system.add_connection("Detroit", "Toledo", 60)
        system.shortest_distance("Chicago", "Toledo")  # 341

    Attributes:
        config: Graph configuration shared with the underlying store
        store: The graph store holding the network
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    store: GraphStore = field(init=False)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.store = GraphStore(config=self.config)
        self._logger = logging.getLogger(__name__)

    def add_connection(self, source: str, destination: str, weight: int) -> bool:
        """Add a flight between two cities.

        Returns:
            False if the weight is negative, both names are the same city,
            or the flight already exists. True otherwise.
        """
        return self.store.add_connection(source, destination, weight)

    def get(self, name: str) -> Optional[Vertex]:
        return self.store.get(name)

    def size(self) -> int:
        return self.store.size()

    def all(self) -> List[Vertex]:
        return self.store.all()

    def shortest_distance(
        self, source: VertexRef, target: VertexRef
    ) -> Union[int, float]:
        """Shortest distance between two cities, given as vertices or names.

        Returns:
            The distance, or UNREACHABLE if the cities are not connected.

        Raises:
            UnknownVertexError: If a name is not in the network.
        """
        distance = shortest_distance(self.store, source, target)
        self._logger.info(
            "Shortest distance",
            extra={
                "source": str(source),
                "target": str(target),
                "distance": distance,
                "reachable": distance != UNREACHABLE,
            },
        )
        return distance

    def minimum_spanning_tree(
        self,
        root: Optional[VertexRef] = None,
        *,
        policy: Optional[SpanningTreePolicy] = None,
    ) -> List[Edge]:
        """Minimum spanning tree grown from ``root`` (default: any city).

        Raises:
            UnknownVertexError: If ``root`` is a name not in the network.
            DisconnectedGraphError: Under the strict policy, if some city
                cannot be reached from ``root``.
        """
        tree = minimum_spanning_tree(
            self.store,
            root,
            policy=policy or self.config.spanning_tree_policy,
        )
        self._logger.info(
            "Minimum spanning tree",
            extra={
                "root": None if root is None else str(root),
                "edges": len(tree),
                "weight": tree_weight(tree),
            },
        )
        return tree

    def breadth_first(self, start: str) -> List[str]:
        """Names of the cities reachable from ``start``, in breadth-first order.

        Raises:
            UnknownVertexError: If ``start`` is not in the network.
        """
        order = breadth_first(self.store, start)
        self._logger.info(
            "Breadth-first search",
            extra={"start": start, "visited": len(order)},
        )
        return order

    def describe_edge(self, edge: Edge) -> str:
        return format_edge(self.store, edge)

    def render(self) -> str:
        return render(self.store)

    def print_graph(self) -> None:
        """Print the network, one city per line."""
        print(self.render(), end="")

    def __str__(self) -> str:
        return self.render()
