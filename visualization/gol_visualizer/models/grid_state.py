"""Bounded grid representation of a Game of Life board."""

from dataclasses import dataclass, field
from typing import Iterator, Optional

import numpy as np

from gol_visualizer.exceptions import CellOutOfBoundsError
from gol_visualizer.models.coordinate import Cell
from gol_visualizer.models.rng import random_mask
from gol_visualizer.simulation.gol_rules import GameOfLifeRules


@dataclass(eq=False)
class GridState:
    """
    A fixed width x height board stored as a boolean numpy array.

    Every coordinate outside [0, height) x [0, width) is dead: it is never
    stored and is reported dead by every query. There is no wraparound.
    """

    width: int
    height: int
    cells: np.ndarray = field(default=None, repr=False)

    def __post_init__(self):
        """Validate dimensions and allocate the cell array."""
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Grid dimensions must be non-negative, got {self.width}x{self.height}"
            )
        if self.cells is None:
            self.cells = np.zeros((self.height, self.width), dtype=bool)
        else:
            cells = np.asarray(self.cells, dtype=bool)
            if cells.shape != (self.height, self.width):
                raise ValueError(
                    f"Shape mismatch: expected {(self.height, self.width)}, "
                    f"got {cells.shape}"
                )
            self.cells = cells.copy()

    @classmethod
    def random(
        cls,
        width: int,
        height: int,
        probability: float,
        seed: Optional[int] = None,
    ) -> "GridState":
        """
        Create a grid with each cell independently alive with `probability`.

        Args:
            width: Number of columns.
            height: Number of rows.
            probability: Chance of each cell being alive (0.0 to 1.0).
            seed: Seed for reproducible boards; None derives one from the clock.

        Returns:
            New randomly populated GridState.
        """
        grid = cls(width, height)
        grid.randomize(probability, seed)
        return grid

    def in_bounds(self, cell: Cell) -> bool:
        """Check whether a cell lies inside the grid rectangle."""
        return 0 <= cell.row < self.height and 0 <= cell.col < self.width

    def is_alive(self, cell: Cell) -> bool:
        """Get cell liveness. Off-grid cells are always dead."""
        if not self.in_bounds(cell):
            return False
        return bool(self.cells[cell.row, cell.col])

    def set_cell(self, cell: Cell, alive: bool) -> None:
        """
        Set cell liveness.

        Raises:
            CellOutOfBoundsError: If the cell is outside the grid.
        """
        if not self.in_bounds(cell):
            raise CellOutOfBoundsError(cell.row, cell.col, self.width, self.height)
        self.cells[cell.row, cell.col] = alive

    def make_alive(self, cell: Cell) -> None:
        """Mark an in-bounds cell alive."""
        self.set_cell(cell, True)

    def toggle(self, cell: Cell) -> None:
        """Flip an in-bounds cell between alive and dead."""
        self.set_cell(cell, not self.is_alive(cell))

    def count_neighbors(self, cell: Cell) -> int:
        """Count live neighbors (0-8) of any cell, on or off the grid."""
        return GameOfLifeRules.count_neighbors(self.is_alive, cell)

    def step(self) -> None:
        """Advance one generation, replacing the cell array in one assignment."""
        self.cells = GameOfLifeRules.next_grid_cells(self.cells)

    def live_cells(self) -> list[Cell]:
        """List every live cell of the current generation."""
        return [Cell(int(r), int(c)) for r, c in np.argwhere(self.cells)]

    def count_live_cells(self) -> int:
        """Count total number of live cells."""
        return int(np.count_nonzero(self.cells))

    def clear(self) -> None:
        """Clear all cells (set to dead)."""
        self.cells = np.zeros((self.height, self.width), dtype=bool)

    def randomize(self, probability: float, seed: Optional[int] = None) -> None:
        """
        Replace the grid with random cells.

        Args:
            probability: Chance of each cell being alive (0.0 to 1.0).
            seed: Seed for the generator, or None for a time-derived seed.
        """
        self.cells = random_mask(self.width, self.height, probability, seed)

    def copy(self) -> "GridState":
        """Create a deep copy of this grid state."""
        return GridState(self.width, self.height, self.cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.live_cells())

    def __len__(self) -> int:
        return self.count_live_cells()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.cells, other.cells)
        )
