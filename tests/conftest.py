import pytest

from airport_system.config import GraphConfig
from airport_system.graph.store import GraphStore
from airport_system.samples import ROAD_NETWORK


@pytest.fixture
def make_store():
    """Factory building a GraphStore with default settings from connections."""

    def _make(connections=ROAD_NETWORK):
        store = GraphStore(config=GraphConfig())
        for source, destination, weight in connections:
            assert store.add_connection(source, destination, weight)
        return store

    return _make
