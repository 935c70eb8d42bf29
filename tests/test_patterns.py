import pytest

from gol_visualizer.exceptions import UnknownPatternError
from gol_visualizer.models import Cell, GridState, SparseState
from gol_visualizer.simulation.patterns import (
    PATTERNS,
    get_pattern,
    pattern_names,
    pattern_size,
    place_pattern,
)


def test_pattern_names_are_sorted():
    assert pattern_names() == sorted(PATTERNS)
    assert "glider" in pattern_names()


def test_unknown_pattern():
    with pytest.raises(UnknownPatternError, match="spaceship"):
        get_pattern("spaceship")


def test_unknown_pattern_is_a_key_error():
    with pytest.raises(KeyError):
        place_pattern(SparseState(), "nope", 0, 0)


def test_glider_gun_size_and_population():
    assert pattern_size("glider_gun") == (9, 36)
    assert len(get_pattern("glider_gun")) == 36


def test_place_pattern_on_sparse_board():
    board = SparseState()

    placed = place_pattern(board, "glider", -10, -10)

    assert placed == 5
    assert board.is_alive(Cell(-8, -10))


def test_place_pattern_clips_at_grid_edge():
    grid = GridState(2, 2)

    placed = place_pattern(grid, "block", 1, 1)

    assert placed == 1
    assert set(grid) == {Cell(1, 1)}


@pytest.mark.parametrize("name", ["block", "beacon"])
def test_period_two_or_still_patterns_return(name):
    board = SparseState()
    place_pattern(board, name, 0, 0)
    start = board.copy()

    board.step()
    board.step()

    assert board == start


@pytest.mark.parametrize("name", ["blinker", "toad", "beacon"])
def test_oscillators_change_after_one_step(name):
    board = SparseState()
    place_pattern(board, name, 0, 0)
    start = board.copy()

    board.step()

    assert board != start
    board.step()
    assert board == start


def test_glider_gun_emits_gliders():
    board = SparseState()
    place_pattern(board, "glider_gun", 0, 0)

    for _ in range(120):
        board.step()

    # Gliders leave the gun heading down and to the right
    _, _, max_row, _ = board.bounding_box()
    assert max_row >= 20
    assert len(board) > 36
