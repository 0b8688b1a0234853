"""Demo run over the reference road network.

Builds the network, then prints its rendering and the answer to each of
the three queries. Run with ``python -m airport_system``.
"""

from typing import List, Sequence, Tuple

from .graph.shortest_distance import UNREACHABLE
from .graph.spanning_tree import tree_weight
from .observability import configure_logging
from .samples import ROAD_NETWORK, build_system
from .services.airport_system import AirportSystem

DEFAULT_QUERIES: Sequence[Tuple[str, str]] = (
    ("Detroit", "Toledo"),
    ("Columbus", "Buffalo"),
    ("Detroit", "Indianapolis"),
)


def describe_network(
    system: AirportSystem,
    queries: Sequence[Tuple[str, str]] = DEFAULT_QUERIES,
    root: str = "Buffalo",
) -> str:
    """Return a report of the network and of a few queries against it."""
    lines: List[str] = [system.render().rstrip("\n"), ""]

    for source, target in queries:
        distance = system.shortest_distance(source, target)
        shown = "unreachable" if distance == UNREACHABLE else str(distance)
        lines.append(f"Shortest distance {source} -> {target}: {shown}")

    tree = system.minimum_spanning_tree(root)
    edges = "".join(system.describe_edge(edge) for edge in tree)
    lines.append(f"Minimum spanning tree from {root}: {edges}")
    lines.append(f"Total weight: {tree_weight(tree)}")

    order = " -> ".join(system.breadth_first(root))
    lines.append(f"Breadth-first from {root}: {order}")
    return "\n".join(lines)


def run_demo() -> None:
    configure_logging()
    system = build_system(ROAD_NETWORK)
    print(describe_network(system))


if __name__ == "__main__":
    run_demo()
