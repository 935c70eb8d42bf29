"""Pygame-based grid renderer and editor for Game of Life boards."""

import pygame
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from gol_visualizer.config import (
    ViewerConfig,
    ALIVE_COLOR,
    DEAD_COLOR,
    BACKGROUND_COLOR,
)
from gol_visualizer.models import Board, Cell, GridState
from gol_visualizer.renderers.stats_panel import StatsPanel

# WASD pan directions as (d_row, d_col)
PAN_KEYS = {
    pygame.K_w: (-1, 0),
    pygame.K_s: (1, 0),
    pygame.K_a: (0, -1),
    pygame.K_d: (0, 1),
}
PAN_STEP = 5  # Cells moved per key press
ZOOM_STEP = 2  # Pixels added to the cell size per key press


@dataclass
class RenderResult:
    """Result of a render call with user input information."""

    should_quit: bool = False
    toggle_pause: bool = False
    step_once: bool = False
    randomize: bool = False
    clear: bool = False
    speed_up: bool = False
    speed_down: bool = False
    zoom: int = 0
    pan: Tuple[int, int] = (0, 0)
    toggled_cells: List[Cell] = field(default_factory=list)


class PygameGridRenderer:
    """
    Renders a Game of Life board and turns mouse/keyboard input into intents.

    The renderer never mutates the board. It reports clicks and key
    presses in a RenderResult and the caller applies them.
    """

    def __init__(self, config: ViewerConfig):
        """
        Initialize the pygame renderer.

        Args:
            config: Viewer configuration.
        """
        self.config = config

        # Initialize pygame
        pygame.init()
        pygame.display.set_caption("Game of Life")

        # Create display
        self.screen = pygame.display.set_mode(
            (config.window_width, config.window_height)
        )

        # Create stats panel
        if config.show_stats:
            self.stats_panel: Optional[StatsPanel] = StatsPanel(
                self.screen,
                x_offset=config.grid_pixel_width,
                width=config.window_width - config.grid_pixel_width,
                height=config.window_height,
            )
        else:
            self.stats_panel = None

        self.clock = pygame.time.Clock()

    def render(
        self,
        board: Board,
        generation: int = 0,
        paused: bool = False,
        history: Sequence[int] = (),
    ) -> RenderResult:
        """
        Render the complete visualization frame.

        Args:
            board: Current board.
            generation: Current generation number.
            paused: Whether simulation is paused.
            history: Recent live-cell counts, oldest first.

        Returns:
            RenderResult with user input flags.
        """
        result = self._handle_events()

        # Clear screen
        self.screen.fill(BACKGROUND_COLOR)

        # Draw grid cells
        self._draw_cells(board)

        # Draw stats panel
        if self.stats_panel:
            self.stats_panel.render(board, generation, self.config, paused, history)

        # Draw pause overlay if paused
        if paused:
            self._draw_pause_overlay()

        # Update display
        pygame.display.flip()

        # Cap framerate
        self.clock.tick(self.config.fps)

        return result

    def _handle_events(self) -> RenderResult:
        """Translate pending pygame events into a RenderResult."""
        result = RenderResult()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result.should_quit = True
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                cell = self.config.cell_at(*event.pos)
                if cell is not None:
                    result.toggled_cells.append(cell)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    result.should_quit = True
                elif event.key == pygame.K_SPACE:
                    result.toggle_pause = True
                elif event.key == pygame.K_n or event.key == pygame.K_RIGHT:
                    result.step_once = True
                elif event.key == pygame.K_r:
                    result.randomize = True
                elif event.key == pygame.K_c:
                    result.clear = True
                elif event.key == pygame.K_UP or event.key == pygame.K_EQUALS:
                    result.speed_up = True
                elif event.key == pygame.K_DOWN or event.key == pygame.K_MINUS:
                    result.speed_down = True
                elif event.key == pygame.K_RIGHTBRACKET:
                    result.zoom += ZOOM_STEP
                elif event.key == pygame.K_LEFTBRACKET:
                    result.zoom -= ZOOM_STEP
                elif event.key in PAN_KEYS:
                    d_row, d_col = PAN_KEYS[event.key]
                    result.pan = (
                        result.pan[0] + d_row * PAN_STEP,
                        result.pan[1] + d_col * PAN_STEP,
                    )
        return result

    def _draw_pause_overlay(self) -> None:
        """Draw a semi-transparent pause indicator."""
        overlay = pygame.Surface(
            (self.config.grid_pixel_width, self.config.grid_pixel_height),
            pygame.SRCALPHA,
        )
        overlay.fill((0, 0, 0, 100))  # Semi-transparent black
        self.screen.blit(overlay, (0, 0))

        font = pygame.font.SysFont("monospace", 48, bold=True)
        text = font.render("PAUSED", True, (255, 255, 255))
        text_rect = text.get_rect(
            center=(
                self.config.grid_pixel_width // 2,
                self.config.grid_pixel_height // 2,
            )
        )
        self.screen.blit(text, text_rect)

        hint_font = pygame.font.SysFont("monospace", 16)
        hint = hint_font.render(
            "Click to edit, SPACE to resume, N to step", True, (200, 200, 200)
        )
        hint_rect = hint.get_rect(
            center=(
                self.config.grid_pixel_width // 2,
                self.config.grid_pixel_height // 2 + 40,
            )
        )
        self.screen.blit(hint, hint_rect)

    def _draw_cells(self, board: Board) -> None:
        """Draw every visible cell of the board."""
        size = self.config.cell_size
        bounded = isinstance(board, GridState)
        live = set(board.live_cells())

        for view_r in range(self.config.visible_rows):
            row = self.config.view_row + view_r
            for view_c in range(self.config.visible_cols):
                col = self.config.view_col + view_c
                cell = Cell(row, col)

                # Cells outside a bounded grid are left as background
                if bounded and not board.in_bounds(cell):
                    continue

                color = ALIVE_COLOR if cell in live else DEAD_COLOR

                # Draw cell (with 1px gap for grid effect)
                pygame.draw.rect(
                    self.screen,
                    color,
                    (view_c * size, view_r * size, max(1, size - 1), max(1, size - 1)),
                )

    def cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
