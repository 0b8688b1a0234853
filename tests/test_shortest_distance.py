import itertools
import math

import pytest

from airport_system.domain.errors import UnknownVertexError
from airport_system.domain.models import Journey
from airport_system.graph.frontier import JourneyFrontier
from airport_system.graph.shortest_distance import UNREACHABLE, shortest_distance
from airport_system.samples import NUMERIC_NETWORK, ROAD_NETWORK


ROAD_CITIES = sorted({name for edge in ROAD_NETWORK for name in edge[:2]})


@pytest.mark.parametrize(
    "source,target,expected",
    [
        ("Detroit", "Toledo", 60),
        ("Toledo", "Detroit", 60),
        ("Indianapolis", "Chicago", 181),
        ("Chicago", "Chicago", 0),
        ("Columbus", "Buffalo", 334),
        ("Detroit", "Indianapolis", 368),
    ],
)
def test_road_network_distances(make_store, source, target, expected):
    store = make_store(ROAD_NETWORK)

    assert shortest_distance(store, source, target) == expected


def test_numeric_network_distance(make_store):
    store = make_store(NUMERIC_NETWORK)

    assert shortest_distance(store, "6", "5") == 13


def test_accepts_vertices_as_well_as_names(make_store):
    store = make_store(ROAD_NETWORK)

    assert shortest_distance(store, store.get("Columbus"), store.get("Buffalo")) == 334


@pytest.mark.parametrize("name", ROAD_CITIES)
def test_distance_to_self_is_zero(make_store, name):
    store = make_store(ROAD_NETWORK)

    assert shortest_distance(store, name, name) == 0


def test_distance_is_symmetric(make_store):
    store = make_store(ROAD_NETWORK)

    for a, b in itertools.combinations(ROAD_CITIES, 2):
        assert shortest_distance(store, a, b) == shortest_distance(store, b, a)


def test_chooses_indirect_path_when_cheaper(make_store):
    store = make_store([("A", "B", 3), ("A", "C", 10), ("B", "C", 4)])

    assert shortest_distance(store, "A", "C") == 7


def test_zero_weight_edges(make_store):
    store = make_store([("A", "B", 0), ("B", "C", 0), ("A", "C", 1)])

    assert shortest_distance(store, "A", "C") == 0


def test_disconnected_returns_unreachable(make_store):
    store = make_store([("A", "B", 1), ("C", "D", 1)])

    distance = shortest_distance(store, "A", "D")

    assert distance == UNREACHABLE
    assert math.isinf(distance)


def test_unknown_name_raises(make_store):
    store = make_store([("A", "B", 1)])

    with pytest.raises(UnknownVertexError):
        shortest_distance(store, "A", "Z")
    with pytest.raises(UnknownVertexError):
        shortest_distance(store, "Z", "A")


def test_frontier_skips_visited_arrivals():
    frontier = JourneyFrontier(origin=0)
    frontier.push(Journey(5, 0, 1))
    frontier.push(Journey(1, 0, 0))
    frontier.push(Journey(3, 0, 2))
    frontier.push(Journey(4, 0, 1))

    first = frontier.pop_next_unvisited()
    second = frontier.pop_next_unvisited()

    assert (first.cost, first.arrival) == (3, 2)
    assert (second.cost, second.arrival) == (4, 1)
    assert frontier.pop_next_unvisited() is None
    assert frontier.is_visited(1) and frontier.is_visited(2)


def test_frontier_marks_parent_on_push():
    frontier = JourneyFrontier(origin=0)

    frontier.push(Journey(2, 7, 8))

    assert frontier.is_visited(0)
    assert frontier.is_visited(7)
    assert not frontier.is_visited(8)


def test_vertex_from_another_store_raises(make_store):
    first = make_store([("A", "B", 1)])
    second = make_store([("X", "Y", 50)])

    with pytest.raises(UnknownVertexError) as excinfo:
        shortest_distance(second, first.get("A"), first.get("B"))

    assert excinfo.value.vertex_name == "A"


def test_vertex_with_handle_beyond_store_raises(make_store):
    larger = make_store([("A", "B", 1), ("C", "D", 1)])
    smaller = make_store([("A", "B", 1)])

    with pytest.raises(UnknownVertexError):
        shortest_distance(smaller, smaller.get("A"), larger.get("D"))


def test_frontier_is_falsy_once_drained():
    frontier = JourneyFrontier(origin=0)
    assert not frontier

    frontier.push(Journey(2, 0, 1))
    frontier.push(Journey(3, 0, 0))
    assert frontier

    frontier.pop_next_unvisited()
    # The stale journey back to the origin is still queued until popped.
    assert frontier
    assert frontier.pop_next_unvisited() is None
    assert not frontier
