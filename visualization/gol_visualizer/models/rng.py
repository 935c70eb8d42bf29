"""Seeded random sources for board construction."""

import time
from typing import Optional

import numpy as np

from gol_visualizer.exceptions import InvalidProbabilityError


def resolve_seed(seed: Optional[int]) -> int:
    """Return the seed to use, deriving one from the clock when None."""
    if seed is None:
        return time.time_ns()
    return seed


def make_rng(seed: Optional[int]) -> np.random.Generator:
    """Create a numpy Generator for the given (or a time-derived) seed."""
    return np.random.default_rng(resolve_seed(seed))


def check_probability(probability: float) -> float:
    """Validate a live-cell probability and return it as a float."""
    if not 0.0 <= probability <= 1.0:
        raise InvalidProbabilityError(probability)
    return float(probability)


def random_mask(
    width: int, height: int, probability: float, seed: Optional[int]
) -> np.ndarray:
    """
    Draw a height x width boolean mask, each entry True with the given probability.

    Args:
        width: Number of columns.
        height: Number of rows.
        probability: Chance of each cell being alive (0.0 to 1.0).
        seed: Seed for the generator, or None for a time-derived seed.

    Returns:
        Boolean array of shape (height, width).
    """
    probability = check_probability(probability)
    rng = make_rng(seed)
    # random() is in [0, 1) so probability 1.0 marks every cell
    return rng.random((height, width)) < probability
