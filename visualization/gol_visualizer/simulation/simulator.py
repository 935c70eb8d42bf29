"""Simulator that owns a Game of Life board and its generation counter."""

from collections import deque
from typing import Optional

from gol_visualizer.models import Board, Cell, GridState, make_board
from gol_visualizer.models.rng import resolve_seed
from gol_visualizer.simulation.patterns import pattern_size, place_pattern

# Generations of live-cell counts kept for the stats panel
POPULATION_HISTORY_LENGTH = 120


class Simulator:
    """
    Single owner of a board for a presentation adapter.

    All reads and writes from the adapter go through this object, so the
    board only ever changes between frames and never during a step.
    """

    def __init__(
        self,
        kind: str = "bounded",
        width: int = 80,
        height: int = 80,
    ):
        """
        Initialize the simulator with an empty board.

        Args:
            kind: "bounded" or "sparse".
            width: Grid width (seeding rectangle for sparse boards).
            height: Grid height (seeding rectangle for sparse boards).
        """
        self.kind = kind
        self.width = width
        self.height = height
        self.board: Board = make_board(kind, width, height)
        self.generation = 0
        self.seed: Optional[int] = None
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.generation = 0
        self.population_history: deque[int] = deque(
            [self.board.count_live_cells()], maxlen=POPULATION_HISTORY_LENGTH
        )

    def initialize_random(
        self, probability: float = 0.2, seed: Optional[int] = None
    ) -> None:
        """
        Initialize the board with random cells.

        Args:
            probability: Chance of each cell being alive (0.0 to 1.0).
            seed: Seed for reproducible boards; None derives one from the clock.
        """
        self.seed = resolve_seed(seed)
        if isinstance(self.board, GridState):
            self.board.randomize(probability, self.seed)
        else:
            self.board.randomize(
                probability, self.seed, width=self.width, height=self.height
            )
        self._reset_counters()

    def initialize_pattern(self, pattern: str = "glider_gun") -> None:
        """
        Initialize the board with a named pattern.

        The glider gun is placed near the top-left corner so its gliders
        have room to travel; every other pattern is centered.

        Args:
            pattern: Pattern name (see patterns.pattern_names()).
        """
        pattern_height, pattern_width = pattern_size(pattern)
        self.board.clear()
        if pattern == "glider_gun":
            row, col = 5, 2
        else:
            row = (self.height - pattern_height) // 2
            col = (self.width - pattern_width) // 2
        place_pattern(self.board, pattern, row, col)
        self._reset_counters()

    def clear(self) -> None:
        """Kill every cell and reset the generation counter."""
        self.board.clear()
        self._reset_counters()

    def toggle_cell(self, cell: Cell) -> bool:
        """
        Flip a cell chosen by the user.

        Off-grid cells on a bounded board are ignored.

        Returns:
            True if the cell was toggled.
        """
        if isinstance(self.board, GridState) and not self.board.in_bounds(cell):
            return False
        self.board.toggle(cell)
        self.population_history[-1] = self.board.count_live_cells()
        return True

    def step(self) -> None:
        """Compute one generation."""
        self.board.step()
        self.generation += 1
        self.population_history.append(self.board.count_live_cells())

    def run(self, generations: int) -> None:
        """Compute several generations in a row."""
        for _ in range(generations):
            self.step()

    def get_board(self) -> Board:
        """Get the current board."""
        return self.board

    def get_generation(self) -> int:
        """Get the current generation number."""
        return self.generation
