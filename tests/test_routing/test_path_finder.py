import pytest

from skynet.routing import Graph, PathResult, find_shortest_path
from skynet.routing.path_finder import (
    ORIGIN_NOT_FOUND,
    DESTINATION_NOT_FOUND,
    NO_ROUTE,
)


@pytest.fixture
def diamond():
    """
    A -10-> B -20-> D -5-> C, and a direct A -35-> C.
    """
    graph = Graph()
    graph.add_edge('A', 'B', 10.0, 1.0)
    graph.add_edge('A', 'C', 35.0, 9.0)
    graph.add_edge('B', 'D', 20.0, 2.0)
    graph.add_edge('D', 'C', 5.0, 3.0)
    return graph


def test_shortest_distance(diamond):
    result = find_shortest_path(diamond, 'A', 'C')
    assert result.found
    assert result.total_distance == 35.0
    assert result.path[0] == 'A'
    assert result.path[-1] == 'C'
    assert result.error_message == ''


def test_prefers_shorter_multi_hop_path(diamond):
    diamond.add_edge('A', 'C', 40.0, 0.5)
    result = find_shortest_path(diamond, 'A', 'C')

    assert result.path == ['A', 'B', 'D', 'C']
    assert result.total_distance == 35.0
    # Cost is accumulated along the chosen path, not minimised
    assert result.total_cost == pytest.approx(6.0)
    assert result.stops == 2
    assert result.is_valid()


def test_path_follows_existing_edges(diamond):
    result = find_shortest_path(diamond, 'A', 'D')
    assert result.path == ['A', 'B', 'D']
    for source, destination in zip(result.path, result.path[1:]):
        assert diamond.has_edge(source, destination)
    edge_sum = sum(diamond.get_edge(s, d).weight for s, d in zip(result.path, result.path[1:]))
    assert result.total_distance == edge_sum


def test_unknown_origin(diamond):
    result = find_shortest_path(diamond, 'X', 'C')
    assert not result.found
    assert result.error_message == ORIGIN_NOT_FOUND == "Origin airport not found"
    assert result.path == []


def test_unknown_destination(diamond):
    result = find_shortest_path(diamond, 'A', 'X')
    assert not result.found
    assert result.error_message == DESTINATION_NOT_FOUND


def test_no_route(diamond):
    diamond.add_node('Z')
    result = find_shortest_path(diamond, 'A', 'Z')
    assert not result.found
    assert result.error_message == NO_ROUTE

    # Edges are directed, C has no way back to A
    assert find_shortest_path(diamond, 'C', 'A').error_message == NO_ROUTE


def test_same_origin_and_destination(diamond):
    result = find_shortest_path(diamond, 'A', 'A')
    assert result.found
    assert result.path == ['A']
    assert result.total_distance == 0.0
    assert result.stops == 0
    assert not result.is_valid()


def test_path_result_helpers():
    result = PathResult(found=True, path=['JFK', 'LHR', 'DXB'], total_distance=10.0)
    assert result.stops == 1
    assert result.is_valid()
    assert str(result) == "JFK → LHR → DXB (10.00 km, cost 0.00)"

    failure = PathResult.failure(NO_ROUTE)
    assert not failure.is_valid()
    assert str(failure) == f"No path: {NO_ROUTE}"
