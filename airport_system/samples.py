"""Reference networks used by the demo and the test suite."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from .config import GraphConfig
from .services.airport_system import AirportSystem

Connection = Tuple[str, str, int]

# Road distances between Midwest cities.
ROAD_NETWORK: Sequence[Connection] = (
    ("Chicago", "Detroit", 281),
    ("Chicago", "Toledo", 244),
    ("Chicago", "Indianapolis", 181),
    ("Detroit", "Toledo", 60),
    ("Indianapolis", "Cincinnati", 110),
    ("Cincinnati", "Toledo", 198),
    ("Cincinnati", "Columbus", 101),
    ("Columbus", "Cleveland", 143),
    ("Toledo", "Cleveland", 117),
    ("Columbus", "Pittsburgh", 185),
    ("Cleveland", "Buffalo", 191),
    ("Pittsburgh", "Buffalo", 216),
    ("Pittsburgh", "Cleveland", 135),
)

NUMERIC_NETWORK: Sequence[Connection] = (
    ("1", "5", 4),
    ("1", "2", 2),
    ("1", "4", 1),
    ("5", "4", 9),
    ("4", "3", 5),
    ("2", "6", 7),
    ("6", "3", 8),
    ("2", "4", 3),
    ("2", "3", 3),
)


def build_system(
    connections: Iterable[Connection],
    config: Optional[GraphConfig] = None,
) -> AirportSystem:
    """Create an AirportSystem and add every connection to it.

    Raises:
        ValueError: If a connection is rejected by the store.
    """
    system = AirportSystem() if config is None else AirportSystem(config=config)
    for source, destination, weight in connections:
        if not system.add_connection(source, destination, weight):
            raise ValueError(f"Rejected connection: {source}-{destination} ({weight})")
    return system
