"""Recorder metrics, export and side-by-side comparison."""

from __future__ import annotations

import json

import pytest

from engine import Recorder, RunMetrics, compare
from structures import BinaryTree, Graph, Grid, InvalidInput, LinkedList


@pytest.fixture()
def diamond() -> Graph:
    return Graph.from_dict({
        "nodes": [0, 1, 2, 3],
        "edges": [[0, 1, 4], [0, 2, 1], [2, 1, 1], [1, 3, 1]],
    })


def _record(algo_key, structure, **kwargs) -> Recorder:
    rec = Recorder()
    rec.start(algo_key, structure, **kwargs)
    rec.run_to_completion()
    return rec


def test_grid_search_metrics() -> None:
    grid = Grid.from_text(["S..", ".#.", "..E"])
    rec = _record("bfs", grid, source=grid.start, target=grid.end)
    m = rec.get_metrics()
    assert m.family == "search"
    assert m.path_found
    assert m.path_length == 4
    assert m.path_cost == 4.0
    assert m.nodes_visited == len(rec.result.visited_order)
    assert m.total_steps == len(rec.steps) == sum(m.step_counts.values())
    assert m.memory_bytes > 0


def test_graph_path_cost_uses_weights(diamond: Graph) -> None:
    m = _record("dijkstra", diamond, source=0, target=3).metrics
    assert m.path_length == 3
    assert m.path_cost == 3.0


def test_sort_metrics() -> None:
    m = _record("bubble", [5, 3, 1]).metrics
    assert (m.comparisons, m.swaps, m.total_steps) == (3, 3, 7)
    assert m.step_counts == {"compare": 3, "swap": 3, "complete": 1}
    assert not m.path_found


def test_mst_metrics() -> None:
    m = _record("kruskal", [0, 1, 2, 3], edges=[(0, 1, 1), (1, 2, 2), (0, 2, 3), (2, 3, 4)]).metrics
    assert m.mst_weight == 7
    assert m.mst_edges == 3
    assert m.step_counts["mst_reject"] == 1


def test_traversal_metrics() -> None:
    m = _record("levelorder", BinaryTree.from_values([2, 1, 3])).metrics
    assert m.step_counts == {"tree_process": 3, "tree_move": 2}


def test_list_metrics_carry_the_outcome() -> None:
    rec = _record("cycle_detection", LinkedList.from_values([1, 2, 3, 4, 5], cycle_to=2))
    m = rec.metrics
    assert m.family == "linked_list"
    assert m.outcome is True
    assert m.step_counts == {"list_advance": 5, "list_result": 1}
    assert rec.export()["structure"] == {"values": [1, 2, 3, 4, 5], "cycle_to": 2}


def test_list_search_target_comes_from_start() -> None:
    m = _record("list_search", [4, 8, 15], target=15).metrics
    assert m.outcome is True
    assert m.step_counts["list_visit"] == 3


def test_stack_metrics() -> None:
    m = _record("balanced_parens", "(()").metrics
    assert m.outcome is False
    assert m.step_counts == {"stack_push": 2, "stack_pop": 1, "stack_result": 1}


def test_queue_quantum_is_passed_through() -> None:
    rec = _record("round_robin", [["A", 3], ["B", 1]], quantum=1)
    runs = [s.clock for s in rec.steps if s.kind.value == "queue_run"]
    assert runs == [1, 2, 3, 4]
    assert rec.metrics.outcome is None
    json.dumps(rec.export())


def test_export_is_json_safe(diamond: Graph) -> None:
    rec = _record("astar", diamond, source=0, target=3)
    data = rec.export()
    assert data["algo_key"] == "astar"
    assert data["path"] == [0, 2, 1, 3]
    assert data["structure"] == diamond.to_dict()
    assert len(data["steps"]) == data["metrics"]["total_steps"]
    json.dumps(data)


def test_export_of_grid_turns_cells_into_lists() -> None:
    grid = Grid(2, 2)
    data = _record("dfs", grid, source=(0, 0), target=(1, 1)).export()
    assert data["source"] == [0, 0]
    assert data["visited_order"][0] == [0, 0]
    json.dumps(data)


def test_unknown_algorithm() -> None:
    with pytest.raises(InvalidInput, match="Unknown algorithm"):
        Recorder().start("bogosort", [1])


def test_search_needs_a_source(diamond: Graph) -> None:
    with pytest.raises(InvalidInput, match="needs a source"):
        Recorder().start("bfs", diamond)


def test_run_before_start() -> None:
    with pytest.raises(RuntimeError, match="start"):
        Recorder().run_to_completion()


class TestCompare:
    def test_cheaper_path_wins(self, diamond: Graph) -> None:
        bfs = _record("bfs", diamond, source=0, target=3)
        dijkstra = _record("dijkstra", diamond, source=0, target=3)
        result = compare(bfs, dijkstra)
        assert result.winner_path == "Dijkstra's Algorithm"
        assert result.winner_nodes == "tie"
        assert result.left.path_cost == 5.0

    def test_a_found_path_beats_none(self) -> None:
        found = RunMetrics(algo_label="left", path_found=True, path_cost=9.0)
        missing = RunMetrics(algo_label="right", path_found=False)
        left, right = Recorder(), Recorder()
        left.metrics, right.metrics = found, missing
        assert compare(left, right).winner_path == "left"
        assert compare(right, left).winner_path == "left"

    def test_fewer_steps_wins(self) -> None:
        grid = Grid(5, 5, start=(2, 0), end=(2, 4))
        astar = _record("astar", grid, source=grid.start, target=grid.end)
        dijkstra = _record("dijkstra", grid, source=grid.start, target=grid.end)
        result = compare(astar, dijkstra)
        assert result.winner_steps == "A* Search"
        assert result.winner_nodes == "A* Search"
        assert result.winner_path == "tie"
        json.dumps(result.to_dict())
