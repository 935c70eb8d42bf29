"""Terminal printer for Game of Life boards."""

import subprocess
import sys
from typing import Optional, TextIO

from gol_visualizer.config import ALIVE_GLYPH, DEAD_GLYPH, ConsoleConfig
from gol_visualizer.models import Board, Cell

CLEAR_SEQUENCE = "\033[2J\033[H"


def format_board(
    board: Board,
    rows: int,
    cols: int,
    origin: Cell = Cell(0, 0),
) -> list[str]:
    """
    Render a rectangle of the board as text lines.

    Args:
        board: Board to draw.
        rows: Number of rows to draw.
        cols: Number of columns to draw.
        origin: Top-left cell of the rectangle.

    Returns:
        One string per row, each cell drawn as " X " (alive) or "   " (dead).
    """
    live = set(board.live_cells())
    lines = []
    for r in range(origin.row, origin.row + rows):
        lines.append(
            "".join(
                ALIVE_GLYPH if Cell(r, c) in live else DEAD_GLYPH
                for c in range(origin.col, origin.col + cols)
            )
        )
    return lines


class ConsolePrinter:
    """Prints one board frame at a time to a text stream."""

    def __init__(self, config: ConsoleConfig, stream: Optional[TextIO] = None):
        """
        Initialize the printer.

        Args:
            config: Console configuration.
            stream: Output stream (defaults to sys.stdout).
        """
        self.config = config
        self.stream = stream if stream is not None else sys.stdout

    def clear(self) -> None:
        """Clear the terminal, if the output is one."""
        if not self.config.clear_screen or not self.stream.isatty():
            return
        command = ["cmd", "/c", "cls"] if sys.platform == "win32" else ["clear"]
        try:
            subprocess.run(command, stdout=self.stream, check=False)
        except OSError:
            # No clear command available: home the cursor and erase the screen
            self.stream.write(CLEAR_SEQUENCE)

    def render(self, board: Board) -> None:
        """Clear the screen and print the configured rectangle of the board."""
        self.clear()
        for line in format_board(board, self.config.grid_height, self.config.grid_width):
            self.stream.write(line + "\n")
        self.stream.flush()
