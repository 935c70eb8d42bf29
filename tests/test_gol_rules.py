import os
import subprocess
import sys
from pathlib import Path

import numpy as np
import pytest

from gol_visualizer.models import Cell, GridState, SparseState
from gol_visualizer.simulation.gol_rules import GameOfLifeRules
from gol_visualizer.simulation.patterns import place_pattern

HORIZONTAL_BLINKER = {Cell(5, 4), Cell(5, 5), Cell(5, 6)}
VERTICAL_BLINKER = {Cell(4, 5), Cell(5, 5), Cell(6, 5)}
BLOCK = {Cell(4, 4), Cell(4, 5), Cell(5, 4), Cell(5, 5)}


def seeded(board, live):
    for cell in live:
        board.make_alive(cell)
    return board


@pytest.mark.parametrize(
    "alive,neighbors,expected",
    [
        (True, 0, False),
        (True, 1, False),
        (True, 2, True),
        (True, 3, True),
        (True, 4, False),
        (True, 8, False),
        (False, 2, False),
        (False, 3, True),
        (False, 4, False),
        (False, 0, False),
    ],
)
def test_next_state(alive, neighbors, expected):
    assert GameOfLifeRules.next_state(alive, neighbors) is expected


def test_count_neighbors_stays_in_range(board):
    seeded(board, Cell(10, 10).neighborhood())

    counts = [board.count_neighbors(Cell(r, c)) for r in range(7, 14) for c in range(7, 14)]

    assert min(counts) >= 0
    assert max(counts) == 8


def test_block_is_a_still_life(board):
    seeded(board, BLOCK)

    board.step()

    assert set(board) == BLOCK


def test_blinker_oscillates_with_period_two(board):
    seeded(board, HORIZONTAL_BLINKER)

    board.step()
    assert set(board) == VERTICAL_BLINKER

    board.step()
    assert set(board) == HORIZONTAL_BLINKER


def test_empty_board_stays_empty(board):
    for _ in range(10):
        board.step()

    assert len(board) == 0


def test_glider_translates_by_one_one_after_four_steps():
    board = SparseState()
    place_pattern(board, "glider", 0, 0)
    start = board.copy()

    for _ in range(4):
        board.step()

    assert board == start.translated(1, 1)


def test_glider_keeps_travelling_into_large_coordinates():
    board = SparseState()
    place_pattern(board, "glider", 0, 0)
    start = board.copy()

    for _ in range(400):
        board.step()

    assert board == start.translated(100, 100)


def test_bounded_grid_does_not_wrap():
    # A blinker on the top edge loses its upper cell instead of wrapping
    grid = seeded(GridState(5, 5), {Cell(0, 1), Cell(0, 2), Cell(0, 3)})

    grid.step()

    assert set(grid) == {Cell(0, 2), Cell(1, 2)}
    assert not grid.is_alive(Cell(4, 2))


def test_corner_block_survives_on_bounded_grid():
    grid = seeded(GridState(4, 4), {Cell(0, 0), Cell(0, 1), Cell(1, 0), Cell(1, 1)})

    grid.step()

    assert set(grid) == {Cell(0, 0), Cell(0, 1), Cell(1, 0), Cell(1, 1)}


def test_bounded_and_sparse_agree_away_from_edges():
    grid = GridState.random(40, 40, 0.0, seed=0)
    grid.cells[10:30, 10:30] = GridState.random(20, 20, 0.35, seed=5).cells
    sparse = SparseState(grid.live_cells())

    for _ in range(5):
        grid.step()
        sparse.step()

    # Activity stays far from the edges for a handful of generations
    assert set(grid) == set(sparse)


def test_step_is_deterministic():
    start = GridState.random(30, 30, 0.3, seed=11)
    first = GameOfLifeRules.compute_next_generation(start)
    second = GameOfLifeRules.compute_next_generation(start)

    assert first == second


def test_compute_next_generation_does_not_modify_input():
    board = SparseState(HORIZONTAL_BLINKER)

    next_board = GameOfLifeRules.compute_next_generation(board)

    assert set(board) == HORIZONTAL_BLINKER
    assert set(next_board) == VERTICAL_BLINKER


def test_stepping_twice_equals_two_generations():
    board = GridState.random(25, 25, 0.3, seed=21)
    expected = GameOfLifeRules.compute_next_generation(
        GameOfLifeRules.compute_next_generation(board)
    )

    board.step()
    board.step()

    assert board == expected


def test_next_grid_cells_matches_per_cell_rule():
    grid = GridState.random(15, 12, 0.4, seed=8)

    next_cells = GameOfLifeRules.next_grid_cells(grid.cells)

    for r in range(grid.height):
        for c in range(grid.width):
            cell = Cell(r, c)
            expected = GameOfLifeRules.next_state(
                grid.is_alive(cell), grid.count_neighbors(cell)
            )
            assert bool(next_cells[r, c]) is expected


def test_next_grid_cells_returns_new_array():
    cells = np.zeros((3, 3), dtype=bool)

    assert GameOfLifeRules.next_grid_cells(cells) is not cells


def test_next_grid_cells_handles_empty_grid():
    assert GameOfLifeRules.next_grid_cells(np.zeros((0, 0), dtype=bool)).shape == (0, 0)


def test_candidate_cells_cover_neighborhoods():
    candidates = GameOfLifeRules.candidate_cells([Cell(0, 0), Cell(10, 10)])

    assert len(candidates) == 18
    assert Cell(-1, -1) in candidates
    assert Cell(11, 11) in candidates
    assert Cell(5, 5) not in candidates


@pytest.mark.parametrize(
    "module",
    [
        "gol_visualizer.simulation.gol_rules",
        "gol_visualizer.models.grid_state",
        "gol_visualizer.models.sparse_state",
        "gol_visualizer.simulation.simulator",
        "gol_visualizer.main",
    ],
)
def test_modules_import_cleanly_in_any_order(module):
    import gol_visualizer

    source_root = Path(gol_visualizer.__file__).resolve().parents[1]
    env = dict(os.environ, PYTHONPATH=str(source_root))

    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        env=env,
        capture_output=True,
        text=True,
    )

    assert result.returncode == 0, result.stderr
