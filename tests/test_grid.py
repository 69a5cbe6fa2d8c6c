"""Grid model: cell flags, neighbour order, walls and layouts."""

from __future__ import annotations

import math

import pytest

from structures import Grid, InvalidInput


def test_default_start_and_end_are_opposite_corners() -> None:
    grid = Grid(3, 4)
    assert grid.start == (0, 0)
    assert grid.end == (2, 3)
    assert grid.node((0, 0)).is_start
    assert grid.node((2, 3)).is_end


def test_moving_start_keeps_a_single_start_cell() -> None:
    grid = Grid(3, 3)
    grid.set_start((1, 1))
    starts = [cell.id for cell in grid if cell.is_start]
    assert starts == [(1, 1)]


def test_one_by_one_grid_is_both_start_and_end() -> None:
    grid = Grid(1, 1)
    cell = grid.node((0, 0))
    assert cell.is_start and cell.is_end


def test_successors_follow_up_down_left_right() -> None:
    grid = Grid(3, 3)
    assert grid.successors((1, 1)) == [((0, 1), 1), ((2, 1), 1), ((1, 0), 1), ((1, 2), 1)]


def test_walls_are_never_successors() -> None:
    grid = Grid(3, 3)
    grid.set_wall((0, 1))
    grid.set_wall((1, 2))
    assert grid.successors((1, 1)) == [((2, 1), 1), ((1, 0), 1)]


def test_corner_has_two_successors() -> None:
    grid = Grid(3, 3)
    assert [cid for cid, _ in grid.successors((0, 0))] == [(1, 0), (0, 1)]


def test_wall_on_start_is_refused() -> None:
    grid = Grid(2, 2)
    with pytest.raises(InvalidInput, match="start or end"):
        grid.set_wall((0, 0))


def test_toggle_wall_flips() -> None:
    grid = Grid(2, 3)
    grid.toggle_wall((0, 1))
    assert grid.walls() == [(0, 1)]
    grid.toggle_wall((0, 1))
    assert grid.walls() == []


@pytest.mark.parametrize("raw", [(3, 0), (0, -1), "ab", (1,), (1.0, 2), (True, 0)])
def test_coerce_id_rejects_bad_cells(raw) -> None:
    grid = Grid(3, 3)
    with pytest.raises(InvalidInput):
        grid.coerce_id(raw)


def test_coerce_id_accepts_lists() -> None:
    assert Grid(3, 3).coerce_id([2, 1]) == (2, 1)


def test_bad_dimensions() -> None:
    with pytest.raises(InvalidInput, match="at least one row"):
        Grid(0, 4)


def test_estimate_is_manhattan() -> None:
    grid = Grid(5, 5)
    assert grid.estimate((0, 0), (3, 4)) == 7
    assert grid.estimate((2, 2), None) == 0


def test_from_text_reads_marks_and_walls() -> None:
    grid = Grid.from_text(["S.#", "..E"])
    assert (grid.rows, grid.cols) == (2, 3)
    assert grid.start == (0, 0)
    assert grid.end == (1, 2)
    assert grid.walls() == [(0, 2)]
    assert grid.to_text() == ["S.#", "..E"]


def test_from_text_accepts_a_single_string() -> None:
    grid = Grid.from_text("S..\n.#.\n..E\n")
    assert grid.walls() == [(1, 1)]


@pytest.mark.parametrize(
    "layout, message",
    [
        ([], "empty"),
        (["S..", ".."], "same length"),
        (["S.x"], "Unknown"),
        (["SS."], "more than one"),
        ([1, 2], "string"),
    ],
)
def test_from_text_rejects_bad_layouts(layout, message) -> None:
    with pytest.raises(InvalidInput, match=message):
        Grid.from_text(layout)


def test_dict_round_trip_keeps_structure() -> None:
    grid = Grid(3, 4, start=(1, 0), end=(2, 3))
    grid.set_wall((0, 2))
    grid.set_wall((1, 2))
    clone = Grid.from_dict(grid.to_dict())
    assert clone.to_dict() == grid.to_dict()


def test_from_dict_missing_field() -> None:
    with pytest.raises(InvalidInput, match="rows"):
        Grid.from_dict({"cols": 3})


@pytest.mark.parametrize("walls", [5, "0,1", {"row": 0, "col": 1}])
def test_from_dict_walls_must_be_a_list(walls) -> None:
    with pytest.raises(InvalidInput, match="walls"):
        Grid.from_dict({"rows": 2, "cols": 2, "walls": walls})


def test_copy_has_clean_search_state() -> None:
    grid = Grid(2, 2)
    grid.set_wall((0, 1))
    cell = grid.node((1, 0))
    cell.distance = 3
    cell.is_visited = True
    cell.parent = (0, 0)

    clone = grid.copy()
    copied = clone.node((1, 0))
    assert math.isinf(copied.distance)
    assert not copied.is_visited
    assert copied.parent is None
    assert clone.walls() == [(0, 1)]
    assert clone.node((0, 1)) is not grid.node((0, 1))


def test_path_to_unvisited_cell_is_empty() -> None:
    assert Grid(2, 2).path_to((1, 1)) == []


def test_path_to_follows_parent_ids() -> None:
    grid = Grid(1, 3)
    for cid, parent in (((0, 0), None), ((0, 1), (0, 0)), ((0, 2), (0, 1))):
        grid.node(cid).is_visited = True
        grid.node(cid).parent = parent
    assert grid.path_to((0, 2)) == [(0, 0), (0, 1), (0, 2)]


def test_path_to_detects_a_cycling_parent_chain() -> None:
    grid = Grid(1, 2)
    grid.node((0, 0)).is_visited = True
    grid.node((0, 0)).parent = (0, 1)
    grid.node((0, 1)).parent = (0, 0)
    with pytest.raises(RuntimeError, match="cycles"):
        grid.path_to((0, 0))


def test_reset_search_state_keeps_walls() -> None:
    grid = Grid(2, 2)
    grid.set_wall((1, 0))
    grid.node((0, 1)).is_path = True
    grid.reset_search_state()
    assert not grid.node((0, 1)).is_path
    assert grid.walls() == [(1, 0)]
