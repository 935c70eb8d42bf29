"""Simulation package for the Game of Life engine."""

from gol_visualizer.simulation.gol_rules import GameOfLifeRules

__all__ = ["GameOfLifeRules"]
