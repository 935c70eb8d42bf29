"""Game of Life rules implementation using NumPy for efficiency."""

from typing import Callable, Iterable

import numpy as np

from gol_visualizer.models.coordinate import Cell


class GameOfLifeRules:
    """
    Implements Conway's Game of Life rules.

    Rules:
    1. Any live cell with 2 or 3 live neighbors survives.
    2. Any dead cell with exactly 3 live neighbors becomes alive.
    3. All other cells die or stay dead.

    Every transition reads only the current generation and writes into a
    freshly allocated container, so no caller ever sees a half-built state.
    """

    @staticmethod
    def next_state(alive: bool, neighbors: int) -> bool:
        """Apply the survival/birth rule to a single cell."""
        if alive:
            return neighbors == 2 or neighbors == 3
        return neighbors == 3

    @staticmethod
    def count_neighbors(is_alive: Callable[[Cell], bool], cell: Cell) -> int:
        """
        Count the number of live neighbors for a cell.

        Args:
            is_alive: Liveness query of the generation being read.
            cell: The cell whose neighbors are counted.

        Returns:
            Number of live neighbors (0-8).
        """
        return sum(1 for neighbor in cell.neighbors() if is_alive(neighbor))

    @staticmethod
    def next_grid_cells(cells: np.ndarray) -> np.ndarray:
        """
        Compute the next generation of a bounded grid.

        Cells beyond the edges are dead; the grid does not wrap.

        Args:
            cells: Boolean array of shape (height, width).

        Returns:
            New boolean array with the next generation.
        """
        current = cells.astype(bool)

        # Pad the grid with zeros for boundary handling
        padded = np.pad(current.astype(np.int8), 1, mode="constant", constant_values=0)

        # Count neighbors using slicing (faster than convolution for small kernels)
        neighbors = (
            padded[:-2, :-2]
            + padded[:-2, 1:-1]
            + padded[:-2, 2:]  # Top row
            + padded[1:-1, :-2]
            + padded[1:-1, 2:]  # Middle row (no center)
            + padded[2:, :-2]
            + padded[2:, 1:-1]
            + padded[2:, 2:]  # Bottom row
        )

        survive = current & ((neighbors == 2) | (neighbors == 3))
        birth = ~current & (neighbors == 3)
        return survive | birth

    @staticmethod
    def candidate_cells(live: Iterable[Cell]) -> set[Cell]:
        """
        Cells that can be alive next generation.

        This is the union of the 3x3 neighborhoods of the live cells; any
        cell outside it has no live neighbor and stays dead.
        """
        candidates: set[Cell] = set()
        for cell in live:
            candidates.update(cell.neighborhood())
        return candidates

    @staticmethod
    def next_sparse_cells(live: set[Cell]) -> set[Cell]:
        """
        Compute the next generation of an unbounded sparse board.

        Args:
            live: Live cells of the current generation.

        Returns:
            New set with the live cells of the next generation.
        """
        is_alive = live.__contains__
        return {
            cell
            for cell in GameOfLifeRules.candidate_cells(live)
            if GameOfLifeRules.next_state(
                is_alive(cell), GameOfLifeRules.count_neighbors(is_alive, cell)
            )
        }

    @staticmethod
    def compute_next_generation(board):
        """
        Compute the next generation without modifying the given board.

        Args:
            board: Current GridState or SparseState.

        Returns:
            New board of the same kind holding the next generation.
        """
        next_board = board.copy()
        next_board.step()
        return next_board
