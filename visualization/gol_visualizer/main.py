"""Main entry point for the Game of Life visualizer."""

import argparse
import sys
import time
from typing import Optional

from gol_visualizer.config import (
    ConsoleConfig,
    ViewerConfig,
    DEFAULT_CELL_SIZE,
    DEFAULT_DENSITY,
    DEFAULT_FPS,
    DEFAULT_GRID_SIZE,
    DEFAULT_INTERVAL,
)
from gol_visualizer.exceptions import GameOfLifeError
from gol_visualizer.models import BOARD_KINDS
from gol_visualizer.renderers.console import ConsolePrinter
from gol_visualizer.simulation.patterns import pattern_names
from gol_visualizer.simulation.simulator import Simulator


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Conway's Game of Life",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  console - Print each generation to the terminal (default)
  window  - Interactive editor: click cells, step, randomize, clear

Examples:
  # The classic run: 80x80 grid, 20% alive, one generation per second
  python -m gol_visualizer

  # Reproducible console run for 50 generations
  python -m gol_visualizer --seed 42 --generations 50 --interval 0.1

  # Windowed editor on an unbounded board starting from a glider gun
  python -m gol_visualizer --mode window --board sparse --pattern glider_gun
        """,
    )

    parser.add_argument(
        "--mode",
        "-m",
        choices=["console", "window"],
        default="console",
        help="Presentation mode: console or window (default: console)",
    )
    parser.add_argument(
        "--board",
        choices=list(BOARD_KINDS),
        default="bounded",
        help="Board representation: fixed grid or unbounded sparse set",
    )
    parser.add_argument(
        "--grid",
        type=str,
        default=f"{DEFAULT_GRID_SIZE}x{DEFAULT_GRID_SIZE}",
        help="Grid dimensions as WIDTHxHEIGHT (e.g., 80x80)",
    )
    parser.add_argument(
        "--pattern",
        type=str,
        default="random",
        choices=["random"] + pattern_names(),
        help="Initial pattern for the board",
    )
    parser.add_argument(
        "--density",
        type=float,
        default=DEFAULT_DENSITY,
        help="Cell density for random pattern (0.0-1.0)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (default: derived from the clock)",
    )

    # Console mode options
    parser.add_argument(
        "--interval",
        type=float,
        default=DEFAULT_INTERVAL,
        help="Seconds between generations (console mode)",
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=None,
        help="Stop after this many generations (console mode, default: run forever)",
    )
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the terminal between generations (console mode)",
    )

    # Window mode options
    parser.add_argument(
        "--cell-size",
        type=int,
        default=DEFAULT_CELL_SIZE,
        help="Size of each cell in pixels (window mode)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=DEFAULT_FPS,
        help="Target frames per second (window mode)",
    )
    parser.add_argument(
        "--no-stats",
        action="store_true",
        help="Hide the stats panel (window mode)",
    )

    return parser.parse_args(argv)


def parse_grid(text: str) -> tuple[int, int]:
    """
    Parse a WIDTHxHEIGHT string.

    Raises:
        ValueError: If the text is not two non-negative integers joined by 'x'.
    """
    width, height = map(int, text.lower().split("x"))
    if width < 0 or height < 0:
        raise ValueError(f"negative grid dimension in '{text}'")
    return width, height


def grid_from_args(args: argparse.Namespace) -> tuple[int, int]:
    """Get grid dimensions from the arguments, exiting on a bad --grid value."""
    try:
        return parse_grid(args.grid)
    except ValueError:
        print(
            f"Error: Invalid grid format '{args.grid}'. Use WIDTHxHEIGHT (e.g., 80x80)"
        )
        sys.exit(1)


def check_display_args(args: argparse.Namespace) -> Optional[str]:
    """
    Check the speed and size options.

    Returns:
        An error message, or None if the options are usable.
    """
    if args.cell_size < 1:
        return f"--cell-size must be at least 1, got {args.cell_size}"
    if args.fps < 1:
        return f"--fps must be at least 1, got {args.fps}"
    if args.interval < 0:
        return f"--interval must not be negative, got {args.interval}"
    if args.generations is not None and args.generations < 0:
        return f"--generations must not be negative, got {args.generations}"
    return None


def create_simulator(
    args: argparse.Namespace, width: int, height: int
) -> Simulator:
    """Create a simulator and seed it from the parsed arguments."""
    simulator = Simulator(args.board, width, height)
    seed_simulator(simulator, args.pattern, args.density, args.seed)
    return simulator


def seed_simulator(
    simulator: Simulator, pattern: str, density: float, seed: Optional[int]
) -> None:
    """(Re)populate the simulator's board with a pattern or random cells."""
    if pattern == "random":
        simulator.initialize_random(density, seed)
    else:
        simulator.initialize_pattern(pattern)


def print_banner(title: str, settings: dict, controls: list[str]) -> None:
    """Print the startup banner."""
    print("=" * 60)
    print(f"Game of Life - {title}")
    print("=" * 60)
    for key, value in settings.items():
        print(f"{key}: {value}")
    if controls:
        print("=" * 60)
        print("Controls:")
        for line in controls:
            print(f"  {line}")
    print("=" * 60)


def run_console(config: ConsoleConfig, simulator: Simulator) -> None:
    """
    Print generations to the terminal until interrupted or the limit is reached.

    Args:
        config: Console configuration.
        simulator: Seeded simulator.
    """
    print_banner(
        "Console Mode",
        {
            "Grid": f"{config.grid_width}x{config.grid_height}",
            "Board": config.board_kind,
            "Seed": simulator.seed if simulator.seed is not None else "-",
            "Interval": f"{config.interval}s",
        },
        ["Ctrl+C    - Quit"],
    )

    printer = ConsolePrinter(config)

    try:
        while True:
            printer.render(simulator.get_board())
            if (
                config.generations is not None
                and simulator.get_generation() >= config.generations
            ):
                break
            time.sleep(config.interval)
            simulator.step()
    except KeyboardInterrupt:
        print("\nInterrupted by user")

    print(f"\nSimulation ended at generation {simulator.get_generation()}")
    print(f"Live cells: {simulator.get_board().count_live_cells()}")


def run_window(
    config: ViewerConfig,
    simulator: Simulator,
    pattern: str,
    density: float,
) -> None:
    """
    Run the interactive windowed editor.

    Args:
        config: Viewer configuration.
        simulator: Seeded simulator.
        pattern: Initial pattern name.
        density: Cell density for the randomize key.
    """
    # Imported here so console mode works without a display
    from gol_visualizer.renderers.pygame_grid import PygameGridRenderer

    print_banner(
        "Window Mode",
        {
            "Grid": f"{config.grid_width}x{config.grid_height}",
            "Board": config.board_kind,
            "Pattern": pattern,
            "FPS": config.fps,
        },
        [
            "Click     - Toggle cell",
            "SPACE     - Pause/Resume",
            "N / →     - Step once (when paused)",
            "R         - Randomize",
            "C         - Clear",
            "↑ / ↓     - Speed up/down",
            "[ / ]     - Zoom out/in",
            "WASD      - Pan",
            "Q / ESC   - Quit",
        ],
    )

    renderer = PygameGridRenderer(config)

    running = True
    paused = False

    try:
        while running:
            result = renderer.render(
                simulator.get_board(),
                simulator.get_generation(),
                paused,
                simulator.population_history,
            )

            for cell in result.toggled_cells:
                simulator.toggle_cell(cell)

            if result.should_quit:
                running = False
            elif result.toggle_pause:
                paused = not paused
                print(f"{'Paused' if paused else 'Resumed'}")
            elif result.step_once and paused:
                simulator.step()
            elif result.randomize:
                simulator.initialize_random(density)
                print(f"Randomized board (seed {simulator.seed})")
            elif result.clear:
                simulator.clear()
                paused = True
                print("Cleared board")
            elif result.speed_up:
                print(f"Speed: {config.speed_up()} FPS")
            elif result.speed_down:
                print(f"Speed: {config.speed_down()} FPS")

            if result.zoom:
                print(f"Zoom: {config.zoom(result.zoom)} px/cell")
            if result.pan != (0, 0):
                config.pan(*result.pan)

            if running and not paused:
                simulator.step()

    except KeyboardInterrupt:
        print("\nInterrupted by user")
    finally:
        renderer.cleanup()

    print(f"\nSimulation ended at generation {simulator.get_generation()}")
    print(f"Live cells: {simulator.get_board().count_live_cells()}")


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point."""
    args = parse_args(argv)
    width, height = grid_from_args(args)

    error = check_display_args(args)
    if error:
        print(f"Error: {error}")
        sys.exit(1)

    try:
        simulator = create_simulator(args, width, height)
    except GameOfLifeError as e:
        print(f"Error: {e}")
        sys.exit(1)

    if args.mode == "console":
        config = ConsoleConfig(
            grid_width=width,
            grid_height=height,
            board_kind=args.board,
            interval=args.interval,
            generations=args.generations,
            clear_screen=not args.no_clear,
        )
        run_console(config, simulator)
    elif args.mode == "window":
        config = ViewerConfig(
            grid_width=width,
            grid_height=height,
            board_kind=args.board,
            cell_size=args.cell_size,
            fps=args.fps,
            show_stats=not args.no_stats,
        )
        run_window(config, simulator, args.pattern, args.density)
    else:
        print(f"Unknown mode: {args.mode}")
        sys.exit(1)


if __name__ == "__main__":
    main()
