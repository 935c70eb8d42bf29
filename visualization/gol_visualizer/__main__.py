"""Allow running the visualizer with ``python -m gol_visualizer``."""

from gol_visualizer.main import main

main()
