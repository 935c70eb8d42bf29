"""Stats panel renderer for the Game of Life editor."""

import pygame
from typing import Optional, Sequence

from gol_visualizer.config import (
    STATS_PANEL_BG,
    TEXT_COLOR,
    TEXT_HIGHLIGHT_COLOR,
    ViewerConfig,
)
from gol_visualizer.models import Board, GridState


def summarize_population(history: Sequence[int]) -> Optional[tuple[int, int, int]]:
    """
    Summarize recent live-cell counts.

    Returns:
        (min, max, last - first), or None when there is no history.
    """
    if not history:
        return None
    return min(history), max(history), history[-1] - history[0]


class StatsPanel:
    """
    Renders the statistics sidebar panel.

    Displays:
    - Current generation and live cells
    - Recent population (min, max, change)
    - Board kind, speed and zoom
    - Controls
    """

    def __init__(
        self,
        screen: pygame.Surface,
        x_offset: int,
        width: int,
        height: int,
    ):
        """
        Initialize the stats panel.

        Args:
            screen: Pygame surface to draw on.
            x_offset: X position where panel starts.
            width: Width of the panel.
            height: Height of the panel.
        """
        self.screen = screen
        self.x = x_offset
        self.width = width
        self.height = height

        # Initialize fonts
        pygame.font.init()
        self.title_font = pygame.font.SysFont("monospace", 16, bold=True)
        self.header_font = pygame.font.SysFont("monospace", 14, bold=True)
        self.font = pygame.font.SysFont("monospace", 12)

        # Layout constants
        self.padding = 10
        self.line_height = 18
        self.section_gap = 10

    def render(
        self,
        board: Board,
        generation: int,
        config: ViewerConfig,
        paused: bool = False,
        history: Sequence[int] = (),
    ) -> None:
        """
        Render the stats panel.

        Args:
            board: Current board.
            generation: Current generation number.
            config: Viewer configuration (speed, zoom, view position).
            paused: Whether simulation is paused.
            history: Recent live-cell counts, oldest first.
        """
        pygame.draw.rect(
            self.screen,
            STATS_PANEL_BG,
            (self.x, 0, self.width, self.height),
        )
        pygame.draw.line(
            self.screen,
            (60, 60, 70),
            (self.x, 0),
            (self.x, self.height),
            2,
        )

        y = self.padding

        y = self._draw_text(
            "═══ Game of Life ═══",
            y,
            self.title_font,
            TEXT_HIGHLIGHT_COLOR,
            center=True,
        )
        y += self.section_gap

        status = "PAUSED" if paused else "RUNNING"
        status_color = (255, 200, 0) if paused else (0, 255, 100)
        y = self._draw_text(f"Status: {status}", y, self.header_font, status_color)
        y += self.section_gap // 2

        y = self._draw_text(f"Generation: {generation}", y, self.header_font)
        y = self._draw_text(f"Live Cells: {board.count_live_cells()}", y)
        summary = summarize_population(history)
        if summary:
            low, high, change = summary
            y = self._draw_text(f"  Last {len(history)}: {low}-{high}", y)
            y = self._draw_text(f"  Change: {change:+d}", y)
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        if isinstance(board, GridState):
            y = self._draw_text(f"Board: {board.width}x{board.height} grid", y)
        else:
            y = self._draw_text("Board: unbounded", y)
        y = self._draw_text(f"View: ({config.view_row}, {config.view_col})", y)
        y = self._draw_text(f"Speed: {config.fps} FPS", y)
        y = self._draw_text(f"Zoom: {config.cell_size} px/cell", y)
        y += self.section_gap

        y = self._draw_separator(y)
        y += self.section_gap // 2

        y = self._draw_text(
            "─── Controls ───", y, self.header_font, TEXT_HIGHLIGHT_COLOR
        )
        y = self._draw_text("  Click: Toggle cell", y)
        y = self._draw_text("  SPACE: Pause/Resume", y)
        y = self._draw_text("  N/→: Step once", y)
        y = self._draw_text("  R: Randomize", y)
        y = self._draw_text("  C: Clear", y)
        y = self._draw_text("  ↑/↓: Speed +/-", y)
        y = self._draw_text("  [ / ]: Zoom -/+", y)
        y = self._draw_text("  WASD: Pan", y)
        y = self._draw_text("  Q/ESC: Quit", y)

    def _draw_text(
        self,
        text: str,
        y: int,
        font: Optional[pygame.font.Font] = None,
        color: tuple = TEXT_COLOR,
        center: bool = False,
    ) -> int:
        """
        Draw text at the specified position.

        Args:
            text: Text to draw.
            y: Y position.
            font: Font to use (defaults to regular font).
            color: Text color.
            center: Whether to center the text.

        Returns:
            Y position after this text (for chaining).
        """
        if font is None:
            font = self.font

        surface = font.render(text, True, color)

        if center:
            x = self.x + (self.width - surface.get_width()) // 2
        else:
            x = self.x + self.padding

        self.screen.blit(surface, (x, y))
        return y + self.line_height

    def _draw_separator(self, y: int) -> int:
        """Draw a horizontal separator line."""
        pygame.draw.line(
            self.screen,
            (60, 60, 70),
            (self.x + self.padding, y),
            (self.x + self.width - self.padding, y),
            1,
        )
        return y + 5
