import numpy as np
import pytest

from gol_visualizer.exceptions import CellOutOfBoundsError, InvalidProbabilityError
from gol_visualizer.models import Cell, GridState


def test_new_grid_is_empty(empty_grid):
    assert empty_grid.cells.shape == (10, 10)
    assert empty_grid.count_live_cells() == 0
    assert empty_grid.live_cells() == []


@pytest.mark.parametrize("width,height", [(0, 0), (1, 1), (3, 5), (7, 2)])
def test_cells_outside_rectangle_are_dead(width, height):
    grid = GridState.random(width, height, 1.0, seed=1)
    outside = [
        Cell(-1, 0),
        Cell(0, -1),
        Cell(height, 0),
        Cell(0, width),
        Cell(-100, -100),
        Cell(height + 50, width + 50),
    ]

    assert not any(grid.is_alive(cell) for cell in outside)


def test_make_alive_and_query(empty_grid):
    empty_grid.make_alive(Cell(3, 4))

    assert empty_grid.is_alive(Cell(3, 4))
    assert not empty_grid.is_alive(Cell(4, 3))
    assert empty_grid.live_cells() == [Cell(3, 4)]


def test_set_cell_false_kills(empty_grid):
    empty_grid.make_alive(Cell(0, 0))
    empty_grid.set_cell(Cell(0, 0), False)

    assert not empty_grid.is_alive(Cell(0, 0))


def test_toggle(empty_grid):
    empty_grid.toggle(Cell(2, 2))
    assert empty_grid.is_alive(Cell(2, 2))
    empty_grid.toggle(Cell(2, 2))
    assert not empty_grid.is_alive(Cell(2, 2))


@pytest.mark.parametrize("cell", [Cell(-1, 0), Cell(0, -1), Cell(10, 0), Cell(0, 10)])
def test_make_alive_out_of_bounds_raises(empty_grid, cell):
    with pytest.raises(CellOutOfBoundsError):
        empty_grid.make_alive(cell)
    assert empty_grid.count_live_cells() == 0


def test_out_of_bounds_error_is_an_index_error(empty_grid):
    with pytest.raises(IndexError):
        empty_grid.make_alive(Cell(-1, -1))


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        GridState(-1, 5)


def test_shape_mismatch_rejected():
    with pytest.raises(ValueError, match="Shape mismatch"):
        GridState(3, 3, np.zeros((2, 3), dtype=bool))


def test_count_neighbors_in_corner_sees_only_three_slots():
    grid = GridState.random(4, 4, 1.0, seed=0)

    assert grid.count_neighbors(Cell(0, 0)) == 3
    assert grid.count_neighbors(Cell(0, 1)) == 5
    assert grid.count_neighbors(Cell(1, 1)) == 8


def test_count_neighbors_off_grid_does_not_raise():
    grid = GridState.random(4, 4, 1.0, seed=0)

    assert grid.count_neighbors(Cell(-1, -1)) == 1
    assert grid.count_neighbors(Cell(-5, -5)) == 0


def test_random_probability_zero_is_empty():
    grid = GridState.random(30, 20, 0.0, seed=7)

    assert grid.count_live_cells() == 0


def test_random_probability_one_fills_rectangle():
    grid = GridState.random(30, 20, 1.0, seed=7)

    assert grid.count_live_cells() == 600


def test_random_is_reproducible_with_seed():
    assert GridState.random(25, 25, 0.3, seed=123) == GridState.random(25, 25, 0.3, seed=123)


@pytest.mark.parametrize("probability", [-0.1, 1.5])
def test_random_rejects_bad_probability(probability):
    with pytest.raises(InvalidProbabilityError):
        GridState.random(5, 5, probability, seed=1)


def test_copy_is_independent(empty_grid):
    empty_grid.make_alive(Cell(1, 1))
    clone = empty_grid.copy()
    clone.make_alive(Cell(2, 2))

    assert clone != empty_grid
    assert not empty_grid.is_alive(Cell(2, 2))


def test_clear(empty_grid):
    empty_grid.make_alive(Cell(1, 1))
    empty_grid.clear()

    assert len(empty_grid) == 0


def test_live_cells_is_restartable(empty_grid):
    empty_grid.make_alive(Cell(1, 1))
    empty_grid.make_alive(Cell(5, 6))

    assert set(empty_grid) == set(empty_grid) == {Cell(1, 1), Cell(5, 6)}


def test_step_swaps_in_a_new_array(empty_grid):
    for col in (3, 4, 5):
        empty_grid.make_alive(Cell(4, col))
    before = empty_grid.cells

    empty_grid.step()

    assert empty_grid.cells is not before
    assert before[4, 3] and before[4, 5]
    assert set(empty_grid) == {Cell(3, 4), Cell(4, 4), Cell(5, 4)}


def test_failed_step_leaves_generation_intact(empty_grid, monkeypatch):
    from gol_visualizer.simulation.gol_rules import GameOfLifeRules

    empty_grid.make_alive(Cell(1, 1))
    snapshot = empty_grid.copy()

    def boom(cells):
        raise MemoryError

    monkeypatch.setattr(GameOfLifeRules, "next_grid_cells", staticmethod(boom))

    with pytest.raises(MemoryError):
        empty_grid.step()
    assert empty_grid == snapshot
