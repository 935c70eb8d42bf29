"""Models package for Game of Life boards."""

from typing import Union

from gol_visualizer.models.coordinate import Cell
from gol_visualizer.models.grid_state import GridState
from gol_visualizer.models.sparse_state import SparseState

Board = Union[GridState, SparseState]

BOARD_KINDS = ("bounded", "sparse")


def make_board(kind: str, width: int, height: int) -> Board:
    """
    Create an empty board of the requested kind.

    Args:
        kind: "bounded" for a fixed grid, "sparse" for an unbounded board.
        width: Grid width (ignored for sparse boards).
        height: Grid height (ignored for sparse boards).

    Returns:
        Empty GridState or SparseState.
    """
    if kind == "bounded":
        return GridState(width, height)
    if kind == "sparse":
        return SparseState()
    raise ValueError(f"Unknown board kind '{kind}' (expected one of {BOARD_KINDS})")


__all__ = ["Cell", "GridState", "SparseState", "Board", "BOARD_KINDS", "make_board"]
