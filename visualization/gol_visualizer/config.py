"""Configuration and constants for the Game of Life visualizer."""

from dataclasses import dataclass
from typing import Optional, Tuple

from gol_visualizer.models import Cell

# ==============================================================================
# Color Scheme
# ==============================================================================

ALIVE_COLOR: Tuple[int, int, int] = (100, 200, 120)
DEAD_COLOR: Tuple[int, int, int] = (25, 30, 35)
GRID_LINE_COLOR: Tuple[int, int, int] = (40, 45, 50)

# UI Colors
BACKGROUND_COLOR: Tuple[int, int, int] = (20, 20, 20)
STATS_PANEL_BG: Tuple[int, int, int] = (30, 30, 40)
TEXT_COLOR: Tuple[int, int, int] = (220, 220, 220)
TEXT_HIGHLIGHT_COLOR: Tuple[int, int, int] = (255, 255, 255)

# ==============================================================================
# Layout Constants
# ==============================================================================

STATS_PANEL_WIDTH: int = 240
STATS_PANEL_MIN_HEIGHT: int = 480
DEFAULT_CELL_SIZE: int = 10
MIN_CELL_SIZE: int = 2
MAX_CELL_SIZE: int = 40

# ==============================================================================
# Speed Constants
# ==============================================================================

DEFAULT_FPS: int = 10  # Target frames per second
MIN_FPS: int = 1
MAX_FPS: int = 60
FPS_STEP: int = 2

# ==============================================================================
# Console Constants (the original terminal printer)
# ==============================================================================

ALIVE_GLYPH: str = " X "
DEAD_GLYPH: str = "   "
DEFAULT_INTERVAL: float = 1.0  # Seconds between console generations
DEFAULT_GRID_SIZE: int = 80
DEFAULT_DENSITY: float = 0.2


# ==============================================================================
# Configuration Dataclasses
# ==============================================================================


@dataclass
class ViewerConfig:
    """
    Configuration for the windowed editor.

    Zoom (cell_size), speed (fps) and pan (view_row, view_col) are owned
    here and changed only by the adapter's event loop. The grid area keeps
    the pixel size it had at startup, so zooming changes how many cells are
    visible rather than the window size.
    """

    # Board
    grid_width: int = DEFAULT_GRID_SIZE
    grid_height: int = DEFAULT_GRID_SIZE
    board_kind: str = "bounded"

    # Display settings
    cell_size: int = DEFAULT_CELL_SIZE
    fps: int = DEFAULT_FPS
    show_stats: bool = True

    # Top-left cell of the view
    view_row: int = 0
    view_col: int = 0

    # Grid area in pixels, derived from the board size when left at 0
    view_pixel_width: int = 0
    view_pixel_height: int = 0

    def __post_init__(self):
        if self.cell_size < 1:
            raise ValueError(f"cell_size must be at least 1, got {self.cell_size}")
        if self.fps < 1:
            raise ValueError(f"fps must be at least 1, got {self.fps}")
        if self.view_pixel_width <= 0:
            self.view_pixel_width = self.grid_width * self.cell_size
        if self.view_pixel_height <= 0:
            self.view_pixel_height = self.grid_height * self.cell_size

    @property
    def grid_pixel_width(self) -> int:
        """Width of the grid area in pixels."""
        return self.view_pixel_width

    @property
    def grid_pixel_height(self) -> int:
        """Height of the grid area in pixels."""
        return self.view_pixel_height

    @property
    def window_width(self) -> int:
        """Total window width including stats panel."""
        if self.show_stats:
            return self.grid_pixel_width + STATS_PANEL_WIDTH
        return self.grid_pixel_width

    @property
    def window_height(self) -> int:
        """Total window height."""
        if self.show_stats:
            return max(self.grid_pixel_height, STATS_PANEL_MIN_HEIGHT)
        return self.grid_pixel_height

    @property
    def visible_rows(self) -> int:
        """Number of rows that fit in the grid area at the current zoom."""
        return self.grid_pixel_height // self.cell_size

    @property
    def visible_cols(self) -> int:
        """Number of columns that fit in the grid area at the current zoom."""
        return self.grid_pixel_width // self.cell_size

    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        """
        Map a pixel position in the grid area to a board cell.

        Args:
            x: Pixel column.
            y: Pixel row.

        Returns:
            The cell under the pixel, or None if the pixel is outside the grid area.
        """
        if not (0 <= x < self.grid_pixel_width and 0 <= y < self.grid_pixel_height):
            return None
        return Cell(
            self.view_row + y // self.cell_size,
            self.view_col + x // self.cell_size,
        )

    def speed_up(self) -> int:
        self.fps = min(MAX_FPS, self.fps + FPS_STEP)
        return self.fps

    def speed_down(self) -> int:
        self.fps = max(MIN_FPS, self.fps - FPS_STEP)
        return self.fps

    def zoom(self, delta: int) -> int:
        """
        Change the cell size, clamped to [MIN_CELL_SIZE, MAX_CELL_SIZE].

        Returns:
            The new cell size.
        """
        self.cell_size = max(MIN_CELL_SIZE, min(MAX_CELL_SIZE, self.cell_size + delta))
        return self.cell_size

    def pan(self, d_row: int, d_col: int) -> None:
        self.view_row += d_row
        self.view_col += d_col


@dataclass
class ConsoleConfig:
    """Configuration for the terminal printer."""

    grid_width: int = DEFAULT_GRID_SIZE
    grid_height: int = DEFAULT_GRID_SIZE
    board_kind: str = "bounded"
    interval: float = DEFAULT_INTERVAL
    generations: Optional[int] = None  # None runs until interrupted
    clear_screen: bool = True

    def __post_init__(self):
        if self.interval < 0:
            raise ValueError(f"interval must not be negative, got {self.interval}")
