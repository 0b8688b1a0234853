import pytest

from airport_system.config import GraphConfig
from airport_system.domain.errors import (
    ConfigurationError,
    DisconnectedGraphError,
    UnknownVertexError,
)
from airport_system.graph.spanning_tree import minimum_spanning_tree, tree_weight
from airport_system.graph.store import GraphStore
from airport_system.samples import NUMERIC_NETWORK, ROAD_NETWORK


ROAD_CITIES = sorted({name for edge in ROAD_NETWORK for name in edge[:2]})


@pytest.mark.parametrize("root", ROAD_CITIES)
def test_road_network_weight_is_root_independent(make_store, root):
    store = make_store(ROAD_NETWORK)

    tree = minimum_spanning_tree(store, root, policy="component")

    assert tree_weight(tree) == 1038
    assert len(tree) == store.size() - 1


@pytest.mark.parametrize("root", ["5", "1", "6"])
def test_numeric_network_weight(make_store, root):
    store = make_store(NUMERIC_NETWORK)

    tree = minimum_spanning_tree(store, root, policy="component")

    assert tree_weight(tree) == 17
    assert len(tree) == 5


def test_default_root_uses_first_vertex(make_store):
    store = make_store(ROAD_NETWORK)

    tree = minimum_spanning_tree(store, policy="component")

    assert tree_weight(tree) == 1038
    assert tree[0].source == store.get("Chicago").handle


def test_accepts_vertex_root(make_store):
    store = make_store(NUMERIC_NETWORK)

    tree = minimum_spanning_tree(store, store.get("3"), policy="component")

    assert tree_weight(tree) == 17


def test_tree_connects_every_vertex_without_cycles(make_store):
    store = make_store(ROAD_NETWORK)
    root = store.get("Buffalo")

    tree = minimum_spanning_tree(store, root, policy="component")

    attached = {root.handle}
    for edge in tree:
        # Every edge extends the tree from an attached vertex to a new one.
        assert edge.source in attached
        assert edge.destination not in attached
        attached.add(edge.destination)
    assert attached == {v.handle for v in store}


def test_single_edge_graph(make_store):
    store = make_store([("A", "B", 7)])

    tree = minimum_spanning_tree(store, "B", policy="component")

    assert [(e.source, e.destination, e.weight) for e in tree] == [
        (store.get("B").handle, store.get("A").handle, 7)
    ]


def test_empty_graph_yields_empty_tree():
    store = GraphStore(config=GraphConfig())

    assert minimum_spanning_tree(store, policy="component") == []


def test_disconnected_component_policy_spans_root_component(make_store, caplog):
    store = make_store([("A", "B", 1), ("B", "C", 2), ("A", "C", 5), ("X", "Y", 1)])

    with caplog.at_level("WARNING", logger="airport_system.graph.spanning_tree"):
        tree = minimum_spanning_tree(store, "A", policy="component")

    assert tree_weight(tree) == 3
    assert len(tree) == 2
    assert "root component" in caplog.text


def test_disconnected_strict_policy_raises(make_store):
    store = make_store([("A", "B", 1), ("X", "Y", 1)])

    with pytest.raises(DisconnectedGraphError) as excinfo:
        minimum_spanning_tree(store, "A", policy="strict")

    assert excinfo.value.root == "A"
    assert excinfo.value.reached == 2
    assert excinfo.value.total == 4


def test_strict_policy_on_connected_graph(make_store):
    store = make_store(NUMERIC_NETWORK)

    assert tree_weight(minimum_spanning_tree(store, "1", policy="strict")) == 17


def test_unknown_root_raises(make_store):
    store = make_store(NUMERIC_NETWORK)

    with pytest.raises(UnknownVertexError):
        minimum_spanning_tree(store, "42", policy="component")


def test_unknown_policy_raises(make_store):
    store = make_store(NUMERIC_NETWORK)

    with pytest.raises(ConfigurationError):
        minimum_spanning_tree(store, "1", policy="lenient")  # type: ignore[arg-type]


def test_root_from_another_store_raises(make_store):
    first = make_store([("A", "B", 1)])
    second = make_store([("X", "Y", 50)])

    with pytest.raises(UnknownVertexError) as excinfo:
        minimum_spanning_tree(second, first.get("A"), policy="component")

    assert excinfo.value.vertex_name == "A"
