"""Graph model: nodes, undirected edges, the search surface and text import."""

from __future__ import annotations

import pytest

from structures import Edge, Graph, InvalidInput, Node
from structures.node import default_label


@pytest.fixture()
def diamond() -> Graph:
    graph = Graph()
    for node_id in range(4):
        graph.create_node(node_id)
    graph.create_edge(0, 1, 4)
    graph.create_edge(0, 2, 1)
    graph.create_edge(2, 1, 1)
    graph.create_edge(1, 3, 1)
    return graph


def test_default_labels() -> None:
    assert [default_label(i) for i in (0, 1, 25, 26, 27)] == ["A", "B", "Z", "AA", "AB"]
    assert Node(2).label == "C"


def test_edges_are_undirected(diamond: Graph) -> None:
    assert diamond.get_edge_between(1, 0) is diamond.get_edge_between(0, 1)
    assert diamond.get_edge_between(0, 3) is None


def test_successors_keep_insertion_order(diamond: Graph) -> None:
    assert diamond.successors(0) == [(1, 4), (2, 1)]
    assert diamond.successors(1) == [(0, 4), (2, 1), (3, 1)]


def test_blocked_nodes_are_not_successors(diamond: Graph) -> None:
    diamond.node(2).blocked = True
    assert diamond.successors(0) == [(1, 4)]
    assert diamond.is_blocked(2)


def test_duplicate_pair_is_rejected(diamond: Graph) -> None:
    with pytest.raises(InvalidInput, match="already share an edge"):
        diamond.create_edge(1, 0, 2)


def test_duplicate_node_is_rejected(diamond: Graph) -> None:
    with pytest.raises(InvalidInput, match="Duplicate"):
        diamond.create_node(3)


def test_edge_to_unknown_node(diamond: Graph) -> None:
    with pytest.raises(InvalidInput, match="unknown node 9"):
        diamond.create_edge(0, 9)


@pytest.mark.parametrize(
    "args, message",
    [
        ((1, 1, 1), "Self-loop"),
        ((0, 1, 0), "positive integer weight"),
        ((0, 1, -3), "positive integer weight"),
        ((0, 1, 1.5), "positive integer weight"),
        ((0, 1, True), "positive integer weight"),
        (("a", 1, 1), "integer node ids"),
    ],
)
def test_edge_validation(args, message) -> None:
    with pytest.raises(InvalidInput, match=message):
        Edge(*args)


def test_edge_coerce_forms() -> None:
    assert Edge.coerce((0, 1, 3)).as_tuple() == (0, 1, 3)
    assert Edge.coerce([2, 0, 5]).key == (0, 2)
    assert Edge.coerce({"source": 1, "target": 2}).weight == 1
    with pytest.raises(InvalidInput):
        Edge.coerce((0, 1))


def test_estimate_uses_coordinates() -> None:
    graph = Graph()
    graph.create_node(0, x=0, y=0)
    graph.create_node(1, x=3, y=4)
    assert graph.estimate(0, 1) == 7
    assert graph.estimate(0, None) == 0


def test_path_cost(diamond: Graph) -> None:
    assert diamond.path_cost([0, 2, 1, 3]) == 3


def test_copy_is_independent(diamond: Graph) -> None:
    diamond.node(2).blocked = True
    clone = diamond.copy()
    assert clone.to_dict() == diamond.to_dict()
    clone.node(1).is_visited = True
    assert not diamond.node(1).is_visited
    assert clone.node(2).blocked


def test_from_dict_accepts_bare_ids() -> None:
    graph = Graph.from_dict({"nodes": [0, 1, 2], "edges": [[0, 1, 2], {"source": 1, "target": 2, "weight": 5}]})
    assert graph.node_count() == 3
    assert graph.get_edge_between(2, 1).weight == 5


@pytest.mark.parametrize("coord", ["a", None, True, float("nan"), float("inf")])
def test_node_coordinates_must_be_finite_numbers(coord) -> None:
    with pytest.raises(InvalidInput, match="numeric x coordinate"):
        Node(0, x=coord)
    with pytest.raises(InvalidInput, match="numeric y coordinate"):
        Graph.from_dict({"nodes": [{"id": 0, "y": coord}]})


def test_bad_coordinates_are_rejected_before_astar_runs() -> None:
    graph = Graph()
    graph.create_node(1)
    with pytest.raises(InvalidInput, match="coordinate"):
        graph.create_node(0, x="a")
    assert graph.node_count() == 1


@pytest.mark.parametrize(
    "data",
    [{"nodes": 5}, {"nodes": "0 1"}, {"nodes": [0, 1], "edges": 3}, {"nodes": [0, 1], "edges": {"source": 0}}],
)
def test_from_dict_needs_lists(data) -> None:
    with pytest.raises(InvalidInput, match="must be lists"):
        Graph.from_dict(data)


def test_coerce_id(diamond: Graph) -> None:
    assert diamond.coerce_id(3) == 3
    with pytest.raises(InvalidInput, match="not in the graph"):
        diamond.coerce_id(7)
    with pytest.raises(InvalidInput, match="integer"):
        diamond.coerce_id("0")


class TestAdjacencyList:
    def test_colon_format_with_weights(self) -> None:
        graph = Graph.from_adjacency_list("0: 1(3) 2\n1: 2(7)\n")
        assert graph.node_ids() == [0, 1, 2]
        assert graph.get_edge_between(0, 1).weight == 3
        assert graph.get_edge_between(0, 2).weight == 1
        assert graph.get_edge_between(1, 2).weight == 7

    def test_arrow_format(self) -> None:
        graph = Graph.from_adjacency_list("0 -> 1(5), 2(3)")
        assert graph.edge_count() == 2

    def test_edge_listed_from_both_ends_is_added_once(self) -> None:
        graph = Graph.from_adjacency_list("0: 1(2)\n1: 0(9)")
        assert graph.edge_count() == 1
        assert graph.get_edge_between(0, 1).weight == 2

    def test_comments_and_blank_lines(self) -> None:
        graph = Graph.from_adjacency_list("# demo\n\n0: 1\n")
        assert graph.edge_count() == 1

    def test_bad_line(self) -> None:
        with pytest.raises(InvalidInput, match="Line 1"):
            Graph.from_adjacency_list("0 1 2")

    def test_bad_token(self) -> None:
        with pytest.raises(InvalidInput, match="not an integer"):
            Graph.from_adjacency_list("0: x")
