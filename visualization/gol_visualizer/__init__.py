"""Conway's Game of Life engine with console and windowed front ends."""

from gol_visualizer.models import Cell, GridState, SparseState, make_board
from gol_visualizer.simulation.gol_rules import GameOfLifeRules
from gol_visualizer.simulation.simulator import Simulator

__version__ = "0.1.0"

__all__ = ["Cell", "GridState", "SparseState", "make_board", "GameOfLifeRules", "Simulator"]
