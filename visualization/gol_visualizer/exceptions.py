"""Exceptions raised by the Game of Life engine."""


class GameOfLifeError(Exception):
    """Base class for all engine errors."""


class CellOutOfBoundsError(GameOfLifeError, IndexError):
    """A bounded grid was asked to store a cell outside its rectangle."""

    def __init__(self, row: int, col: int, width: int, height: int):
        self.row = row
        self.col = col
        self.width = width
        self.height = height
        super().__init__(
            f"Cell ({row}, {col}) is outside the {width}x{height} grid"
        )


class InvalidProbabilityError(GameOfLifeError, ValueError):
    """Live-cell probability outside [0, 1]."""

    def __init__(self, probability: float):
        self.probability = probability
        super().__init__(
            f"Live-cell probability must be between 0.0 and 1.0, got {probability}"
        )


class UnknownPatternError(GameOfLifeError, KeyError):
    """Requested seed pattern does not exist."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        self.available = available
        super().__init__(
            f"Unknown pattern '{name}' (available: {', '.join(available)})"
        )

    def __str__(self) -> str:
        return self.args[0]
