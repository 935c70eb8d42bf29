"""Cell coordinate value type."""

from dataclasses import dataclass
from typing import Iterator

# Offsets of the eight cells at Chebyshev distance 1
NEIGHBOR_OFFSETS: tuple[tuple[int, int], ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


@dataclass(frozen=True, order=True)
class Cell:
    """
    A (row, col) grid position.

    Coordinates are signed and unbounded; equality and hashing are
    structural so cells can be used as set members and dict keys.
    """

    row: int
    col: int

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.col

    def offset(self, d_row: int, d_col: int) -> "Cell":
        """Return the cell shifted by (d_row, d_col)."""
        return Cell(self.row + d_row, self.col + d_col)

    def neighbors(self) -> list["Cell"]:
        """The eight surrounding cells."""
        return [Cell(self.row + dr, self.col + dc) for dr, dc in NEIGHBOR_OFFSETS]

    def neighborhood(self) -> list["Cell"]:
        """The 3x3 block centered on this cell, including the cell itself."""
        return [
            Cell(self.row + dr, self.col + dc)
            for dr in (-1, 0, 1)
            for dc in (-1, 0, 1)
        ]
