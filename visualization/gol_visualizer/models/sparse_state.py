"""Unbounded sparse representation of a Game of Life board."""

from typing import Iterable, Iterator, Optional

import numpy as np

from gol_visualizer.models.coordinate import Cell
from gol_visualizer.models.rng import random_mask
from gol_visualizer.simulation.gol_rules import GameOfLifeRules


class SparseState:
    """
    An unbounded board that stores only its live cells.

    Absence from the set means dead, so any integer coordinate (negative or
    arbitrarily large) can be queried or activated.
    """

    def __init__(self, live: Optional[Iterable[Cell]] = None):
        """
        Initialize the board.

        Args:
            live: Optional cells to start alive.
        """
        self._live: set[Cell] = set(live or ())

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        probability: float,
        seed: Optional[int] = None,
    ) -> "SparseState":
        """
        Create a board seeded over the rectangle [0, height) x [0, width).

        Args:
            width: Number of columns in the seeded rectangle.
            height: Number of rows in the seeded rectangle.
            probability: Chance of each cell being alive (0.0 to 1.0).
            seed: Seed for reproducible boards; None derives one from the clock.

        Returns:
            New randomly populated SparseState.
        """
        board = cls()
        board.randomize(probability, seed, width=width, height=height)
        return board

    def is_alive(self, cell: Cell) -> bool:
        return cell in self._live

    def make_alive(self, cell: Cell) -> None:
        self._live.add(cell)

    def kill(self, cell: Cell) -> None:
        self._live.discard(cell)

    def toggle(self, cell: Cell) -> None:
        """Flip a cell between alive and dead."""
        if self.is_alive(cell):
            self.kill(cell)
        else:
            self.make_alive(cell)

    def count_neighbors(self, cell: Cell) -> int:
        """Count live neighbors (0-8) of a cell."""
        return GameOfLifeRules.count_neighbors(self.is_alive, cell)

    def step(self) -> None:
        """Advance one generation, replacing the live set in one assignment."""
        self._live = GameOfLifeRules.next_sparse_cells(self._live)

    def live_cells(self) -> list[Cell]:
        """List every live cell of the current generation."""
        return list(self._live)

    def count_live_cells(self) -> int:
        return len(self._live)

    def clear(self) -> None:
        self._live = set()

    def randomize(
        self,
        probability: float,
        seed: Optional[int] = None,
        width: int = 80,
        height: int = 80,
    ) -> None:
        """
        Replace the board with random cells inside a width x height rectangle.

        Args:
            probability: Chance of each cell being alive (0.0 to 1.0).
            seed: Seed for the generator, or None for a time-derived seed.
            width: Columns of the seeded rectangle.
            height: Rows of the seeded rectangle.
        """
        mask = random_mask(width, height, probability, seed)
        self._live = set(Cell(int(r), int(c)) for r, c in np.argwhere(mask))

    def bounding_box(self) -> Optional[tuple[int, int, int, int]]:
        """
        Get the smallest rectangle holding every live cell.

        Returns:
            (min_row, min_col, max_row, max_col), inclusive, or None when empty.
        """
        if not self._live:
            return None
        rows = [cell.row for cell in self._live]
        cols = [cell.col for cell in self._live]
        return min(rows), min(cols), max(rows), max(cols)

    def translated(self, d_row: int, d_col: int) -> "SparseState":
        """Return a copy shifted by (d_row, d_col)."""
        return SparseState(cell.offset(d_row, d_col) for cell in self._live)

    def copy(self) -> "SparseState":
        return SparseState(self._live)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.live_cells())

    def __len__(self) -> int:
        return len(self._live)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseState):
            return NotImplemented
        return self._live == other._live

    def __repr__(self) -> str:
        return f"SparseState(live={len(self._live)})"
