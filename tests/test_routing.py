"""Tests for subway routing functionality."""

import itertools

import pytest
from subway_navigator.graph import TransitGraph
from subway_navigator.routing import UNREACHABLE, RoutePlanner, find_route, plan, planner
from subway_navigator.stations import build_sample_graph, list_stations

TRANSFER_COST = 2


@pytest.fixture
def sample_graph():
    return build_sample_graph()


def path_cost(graph, path, transfer_cost):
    """Sum of edge costs along a path plus one penalty per line change."""
    total = 0
    previous_line = ""
    for (a, _), (b, line) in zip(path, path[1:]):
        edge = graph.find_edge(a, b, line)
        assert edge is not None, f"no {line} edge {a} -> {b}"
        total += edge.cost
        if previous_line and previous_line != line:
            total += transfer_cost
        previous_line = line
    return total


def test_transfer_at_42nd_st(sample_graph):
    """Test Times Sq to Grand Central changes line once at 42nd St."""
    route = plan(sample_graph, "Times Sq", "Grand Central", TRANSFER_COST)
    assert route.reachable
    assert route.cost == 4 + 2 + 3
    assert route.path == [("Times Sq", ""), ("42nd St", "1"), ("Grand Central", "2")]
    assert route.transfer_count == 1


def test_linear_corridor():
    """Test a single corridor with an interchange link."""
    g = TransitGraph()
    g.add_bidirectional_edge("Times Sq", "42nd St", 4, "1")
    g.add_bidirectional_edge("42nd St", "Grand Central", 3, "2")
    g.add_bidirectional_edge("Grand Central", "Union Sq", 4, "Interchange")
    g.add_bidirectional_edge("Union Sq", "34th St", 4, "3")

    route = plan(g, "Times Sq", "Grand Central", 2)
    assert route.cost == 9
    assert route.stations == ["Times Sq", "42nd St", "Grand Central"]

    route = plan(g, "Times Sq", "34th St", 2)
    assert route.cost == 4 + 3 + 4 + 4 + 3 * 2
    assert route.transfer_count == 3


def test_penn_station_to_wall_st(sample_graph):
    """Test the multi-hop trip matches a hand-computed trace."""
    route = plan(sample_graph, "Penn Station", "Wall St", TRANSFER_COST)
    assert route.cost == 29
    assert route.path == [
        ("Penn Station", ""),
        ("34th St", "1"),
        ("42nd St", "1"),
        ("Grand Central", "2"),
        ("14th St", "2"),
        ("Wall St", "2"),
    ]
    assert route.transfer_count == 1


def test_free_transfers_take_interchange(sample_graph):
    """Test a zero penalty prefers the shorter path through the interchange."""
    route = plan(sample_graph, "Penn Station", "Wall St", 0)
    assert route.cost == 27
    assert route.stations == [
        "Penn Station", "34th St", "Union Sq", "Grand Central", "14th St", "Wall St"
    ]
    assert route.transfer_count == 3


def test_same_station_route(sample_graph):
    """Test a route to the same station is free and has one stop."""
    for cost in (0, 2, 50):
        route = plan(sample_graph, "Union Sq", "Union Sq", cost)
        assert route.cost == 0
        assert route.path == [("Union Sq", "")]
        assert route.segments == []
        assert route.transfer_count == 0


def test_same_unknown_station_route(sample_graph):
    """Test an unknown station still reaches itself."""
    route = plan(sample_graph, "Nowhere", "Nowhere", TRANSFER_COST)
    assert route.cost == 0
    assert route.path == [("Nowhere", "")]


def test_disconnected_station(sample_graph):
    """Test a separate component is reported unreachable."""
    sample_graph.add_bidirectional_edge("Roosevelt Island", "Tram Plaza", 3, "Tram")
    route = plan(sample_graph, "Times Sq", "Roosevelt Island", TRANSFER_COST)
    assert not route.reachable
    assert route.cost == UNREACHABLE
    assert route.path == []
    assert route.segments == []


def test_unknown_station_is_unreachable(sample_graph):
    """Test unknown source or destination names are treated as unreachable."""
    assert not plan(sample_graph, "Nowhere", "Times Sq", TRANSFER_COST).reachable
    assert not plan(sample_graph, "Times Sq", "Nowhere", TRANSFER_COST).reachable


def test_directed_edges():
    """Test a destination-only station is reachable but cannot be left."""
    g = TransitGraph()
    g.add_edge("A", "B", 1, "x")
    assert plan(g, "A", "B", 5).cost == 1
    assert not plan(g, "B", "A", 5).reachable


def test_parallel_lines_pick_cheaper():
    """Test parallel edges between two stations use the cheaper line."""
    g = TransitGraph()
    g.add_bidirectional_edge("A", "B", 5, "local")
    g.add_bidirectional_edge("A", "B", 2, "express")
    route = plan(g, "A", "B", 10)
    assert route.cost == 2
    assert route.path == [("A", ""), ("B", "express")]


def test_first_edge_has_no_transfer_penalty():
    """Test boarding the first line is never charged as a transfer."""
    g = TransitGraph()
    g.add_edge("A", "B", 1, "x")
    g.add_edge("B", "C", 1, "x")
    assert plan(g, "A", "C", 100).cost == 2


def test_stale_entries_are_skipped():
    """Test a later cheaper discovery replaces an earlier expensive one."""
    g = TransitGraph()
    g.add_edge("S", "T", 10, "a")
    g.add_edge("S", "M", 1, "a")
    g.add_edge("M", "T", 1, "a")
    route = plan(g, "S", "T", 0)
    assert route.cost == 2
    assert route.stations == ["S", "M", "T"]


def test_all_pairs_are_consistent(sample_graph):
    """Test every sample route starts, ends and costs what its path says."""
    stations = list_stations(sample_graph)
    for source, destination in itertools.product(stations, repeat=2):
        route = plan(sample_graph, source, destination, TRANSFER_COST)
        assert route.reachable
        assert route.stations[0] == source
        assert route.stations[-1] == destination
        assert route.path[0][1] == ""
        assert route.cost == path_cost(sample_graph, route.path, TRANSFER_COST)


def test_plan_is_idempotent(sample_graph):
    """Test repeated queries on an unchanged graph give identical answers."""
    first = plan(sample_graph, "Canal St", "Times Sq", TRANSFER_COST)
    second = plan(sample_graph, "Canal St", "Times Sq", TRANSFER_COST)
    assert first == second


def test_higher_transfer_cost_is_monotonic(sample_graph):
    """Test raising the penalty never lowers cost or adds line changes."""
    routes = [plan(sample_graph, "Penn Station", "Wall St", t) for t in (0, 1, 2, 5, 100)]
    costs = [r.cost for r in routes]
    transfers = [r.transfer_count for r in routes]
    assert costs == sorted(costs)
    assert transfers == sorted(transfers, reverse=True)
    assert costs == [27, 28, 29, 32, 127]


def test_route_segments(sample_graph):
    """Test routes are split into same-line segments at transfer stations."""
    route = plan(sample_graph, "Penn Station", "Wall St", TRANSFER_COST)
    assert len(route.segments) == 2

    first, second = route.segments
    assert first.line == "1"
    assert first.stops == ["Penn Station", "34th St", "42nd St"]
    assert first.cost == 11
    assert second.line == "2"
    assert second.from_station == "42nd St"
    assert second.to_station == "Wall St"
    assert second.cost == 16
    assert sum(s.cost for s in route.segments) + TRANSFER_COST * route.transfer_count == route.cost


def test_route_planner_default_transfer_cost(sample_graph):
    """Test the planner applies its default penalty unless overridden."""
    bound = RoutePlanner(sample_graph, transfer_cost=0)
    assert bound.plan("Penn Station", "Wall St").cost == 27
    assert bound.plan("Penn Station", "Wall St", transfer_cost=2).cost == 29


def test_find_route_by_name():
    """Test finding a route with free-text station names."""
    route = find_route("times square", "grand central", transfer_cost=2)
    assert route is not None
    assert route.cost == 9


def test_find_route_invalid_station():
    """Test route with invalid station returns None."""
    assert find_route("nonexistent station xyz", "times square") is None
    assert find_route("times square", "nonexistent station xyz") is None


def test_singleton_planner_uses_sample_map():
    """Test the shared planner is built over the sample map."""
    assert "Grand Central" in planner.graph
    assert len(list_stations(planner.graph)) == 10
