"""Named seed patterns, stored as (row, col) offsets from their top-left corner."""

from gol_visualizer.exceptions import UnknownPatternError
from gol_visualizer.models import Board, Cell, GridState

PATTERNS: dict[str, tuple[tuple[int, int], ...]] = {
    # Still life
    "block": ((0, 0), (0, 1), (1, 0), (1, 1)),
    # Period-2 oscillators
    "blinker": ((0, 0), (0, 1), (0, 2)),
    "toad": ((0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)),
    "beacon": ((0, 0), (0, 1), (1, 0), (1, 1), (2, 2), (2, 3), (3, 2), (3, 3)),
    # Moves (+1, +1) every 4 generations
    "glider": ((0, 1), (1, 2), (2, 0), (2, 1), (2, 2)),
    # Methuselahs
    "rpentomino": ((0, 1), (0, 2), (1, 0), (1, 1), (2, 1)),
    "acorn": ((0, 1), (1, 3), (2, 0), (2, 1), (2, 4), (2, 5), (2, 6)),
    # Gosper Glider Gun - creates gliders continuously
    "glider_gun": (
        (0, 24),
        (1, 22), (1, 24),
        (2, 12), (2, 13), (2, 20), (2, 21), (2, 34), (2, 35),
        (3, 11), (3, 15), (3, 20), (3, 21), (3, 34), (3, 35),
        (4, 0), (4, 1), (4, 10), (4, 16), (4, 20), (4, 21),
        (5, 0), (5, 1), (5, 10), (5, 14), (5, 16), (5, 17), (5, 22), (5, 24),
        (6, 10), (6, 16), (6, 24),
        (7, 11), (7, 15),
        (8, 12), (8, 13),
    ),
}


def pattern_names() -> list[str]:
    """Names of all known patterns, sorted."""
    return sorted(PATTERNS)


def get_pattern(name: str) -> tuple[tuple[int, int], ...]:
    """
    Look up a pattern's offsets.

    Raises:
        UnknownPatternError: If no pattern has this name.
    """
    try:
        return PATTERNS[name]
    except KeyError:
        raise UnknownPatternError(name, pattern_names()) from None


def pattern_size(name: str) -> tuple[int, int]:
    """Height and width of a pattern's bounding box."""
    offsets = get_pattern(name)
    return (
        max(r for r, _ in offsets) + 1,
        max(c for _, c in offsets) + 1,
    )


def place_pattern(board: Board, name: str, row: int, col: int) -> int:
    """
    Activate a pattern with its top-left corner at (row, col).

    Cells that fall outside a bounded grid are skipped.

    Args:
        board: Board to draw on.
        name: Pattern name.
        row: Top row of the pattern.
        col: Left column of the pattern.

    Returns:
        Number of cells activated.
    """
    placed = 0
    for dr, dc in get_pattern(name):
        cell = Cell(row + dr, col + dc)
        if isinstance(board, GridState) and not board.in_bounds(cell):
            continue
        board.make_alive(cell)
        placed += 1
    return placed
