"""Renderers package for the Game of Life visualizer."""

from gol_visualizer.renderers.console import ConsolePrinter, format_board

__all__ = ["ConsolePrinter", "format_board"]
